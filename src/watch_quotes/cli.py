"""
Command-line interface: parse exported chat files into quotation JSON.

Usage:
    watch-quotes parse "WhatsApp Chat with Dealers.txt"
    watch-quotes parse chats/*.txt --messages --json-logs
"""

import argparse
import json
import sys
from pathlib import Path

from .errors import ValidationError
from .logging import configure_logging, get_logger
from .pipeline.pipeline import TranscriptPipeline

logger = get_logger(__name__)


def _read_transcript(path: Path) -> str:
    try:
        return path.read_text(encoding='utf-8-sig')
    except UnicodeDecodeError as e:
        raise ValidationError(
            f"Transcript is not valid UTF-8: {path}",
            context={'path': str(path), 'error_type': type(e).__name__},
        ) from e


def run_parse(args: argparse.Namespace) -> int:
    """Parse each file and write one JSON document per line to stdout."""
    pipeline = TranscriptPipeline(country_code=args.country_code)
    exit_code = 0

    for path in args.files:
        try:
            text = _read_transcript(path)
        except (OSError, ValidationError) as e:
            logger.error('cli.read_failed', path=str(path), error=str(e))
            exit_code = 1
            continue

        result = pipeline.parse(text, source_name=path.name)
        json.dump(result.to_dict(include_messages=args.messages), sys.stdout, ensure_ascii=False)
        sys.stdout.write('\n')

    return exit_code


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='watch-quotes',
        description='Extract watch quotations from exported chat transcripts',
    )
    subparsers = parser.add_subparsers(dest='command', required=True)

    parse_cmd = subparsers.add_parser('parse', help='Parse transcript files into quotation JSON')
    parse_cmd.add_argument('files', nargs='+', type=Path, help='Exported chat .txt files')
    parse_cmd.add_argument(
        '--messages', '-m',
        action='store_true',
        help='Include segmented messages in the output',
    )
    parse_cmd.add_argument(
        '--country-code',
        default=None,
        help='Prefix for local 8-digit phone numbers (default: DEFAULT_COUNTRY_CODE or +852)',
    )
    parse_cmd.add_argument(
        '--json-logs',
        action='store_true',
        help='Emit JSON logs on stderr',
    )
    parse_cmd.add_argument(
        '--log-level',
        default=None,
        help='Override LOG_LEVEL',
    )
    parse_cmd.set_defaults(handler=run_parse)

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    args = build_parser().parse_args(argv)
    configure_logging(json_output=args.json_logs, log_level=args.log_level)
    return args.handler(args)


if __name__ == '__main__':
    sys.exit(main())
