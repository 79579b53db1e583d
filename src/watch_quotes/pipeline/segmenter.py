"""
Transcript segmentation into messages.

Splits an exported chat into timestamped, attributed messages. Exports wrap
long messages across lines without repeating the header, so any line that is
not a header is folded into the message currently being built.

Recognized header shapes, tried in this order:
    DD/MM/YYYY, HH:MM[:SS][ AM/PM] - Author: message text
    [DD/MM/YYYY, HH:MM:SS] Author: message text
    YYYY-MM-DD HH:MM[:SS] - Author: message text
"""

import re
from datetime import datetime
from typing import Callable, NamedTuple

from ..errors import ValidationError
from ..logging import get_logger
from ..models.message import Message
from .datetime_normalizer import normalize_datetime
from .rules import MatchRule, first_match

logger = get_logger(__name__)


class HeaderMatch(NamedTuple):
    """Groups captured from a header line."""

    date: str
    time: str
    author: str
    body: str


def _header(match: re.Match[str]) -> HeaderMatch:
    date, time, author, body = match.groups()
    return HeaderMatch(date=date, time=time, author=author, body=body)


HEADER_RULES: tuple[MatchRule[HeaderMatch], ...] = (
    MatchRule(
        'free_form',
        re.compile(
            r'^(\d{1,2}/\d{1,2}/\d{2,4}),?\s+(\d{1,2}:\d{2}(?::\d{2})?(?:\s*[AP]M)?)'
            r'\s*[-–]\s*([^:]+):\s*(.+)$',
            re.IGNORECASE,
        ),
        _header,
    ),
    MatchRule(
        'bracketed',
        re.compile(
            r'^\[(\d{1,2}/\d{1,2}/\d{2,4}),?\s+(\d{1,2}:\d{2}:\d{2})\]\s*([^:]+):\s*(.+)$',
            re.IGNORECASE,
        ),
        _header,
    ),
    MatchRule(
        'iso_date',
        re.compile(
            r'^(\d{4}-\d{2}-\d{2})\s+(\d{1,2}:\d{2}(?::\d{2})?)\s*[-–]\s*([^:]+):\s*(.+)$',
            re.IGNORECASE,
        ),
        _header,
    ),
)


def match_header(line: str) -> HeaderMatch | None:
    """Return the header groups of a line, or None for continuation lines."""
    return first_match(HEADER_RULES, line)


class _PendingMessage:
    """Message under construction; continuation lines extend its body."""

    def __init__(self, timestamp: datetime, author: str | None, body: str):
        self.timestamp = timestamp
        self.author = author
        self.lines = [body]

    def to_message(self) -> Message | None:
        body = '\n'.join(self.lines)
        if not body.strip():
            return None
        return Message(timestamp=self.timestamp, author=self.author, body=body)


def _flush(current: _PendingMessage | None, messages: list[Message]) -> None:
    if current is None:
        return
    message = current.to_message()
    if message is not None:
        messages.append(message)


def segment_messages(
    text: str,
    now: Callable[[], datetime] = datetime.now,
) -> list[Message]:
    """
    Split raw transcript text into messages in file order.

    Args:
        text: Decoded transcript text
        now: Clock used when a header's date cannot be parsed

    Returns:
        Ordered list of messages; empty for an empty transcript

    Raises:
        ValidationError: If text is not a str
    """
    if not isinstance(text, str):
        raise ValidationError(
            "Transcript must be text",
            context={'received_type': type(text).__name__},
        )

    messages: list[Message] = []
    current: _PendingMessage | None = None
    dropped = 0

    for raw_line in text.split('\n'):
        line = raw_line.rstrip('\r')
        if not line.strip():
            continue

        header = match_header(line)
        if header is not None:
            _flush(current, messages)
            current = _PendingMessage(
                timestamp=normalize_datetime(header.date, header.time, now=now),
                author=header.author.strip() or None,
                body=header.body.strip(),
            )
        elif current is not None:
            current.lines.append(line)
        else:
            dropped += 1

    _flush(current, messages)

    if dropped:
        logger.debug('segmenter.lines_dropped', count=dropped)

    return messages
