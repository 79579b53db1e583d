"""
Transcript pipeline: the single entry point for callers.

Provides end-to-end processing:
1. Segment raw transcript text into messages
2. Assemble quotations from the messages
3. Return both, with counts and stage timings

The pipeline is synchronous and keeps no state between calls. Storage,
cross-file deduplication and upload transport belong to the caller.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Callable

from ..logging import PipelineTimer, get_logger, logging_context
from ..models.message import Message
from ..models.quotation import Quotation
from ..models.upload import TranscriptUpload
from .assembler import assemble_quotations
from .segmenter import segment_messages

logger = get_logger(__name__)


@dataclass
class ParseResult:
    """Result of parsing one transcript."""

    messages: list[Message] = field(default_factory=list)
    quotations: list[Quotation] = field(default_factory=list)
    source_name: str | None = None

    # Timing
    processing_time_ms: int | None = None
    stage_timings: dict[str, float] = field(default_factory=dict)

    @property
    def total_messages(self) -> int:
        return len(self.messages)

    @property
    def total_quotations(self) -> int:
        return len(self.quotations)

    def to_dict(self, include_messages: bool = False) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        result: dict[str, Any] = {
            'source_name': self.source_name,
            'total_messages': self.total_messages,
            'total_quotations': self.total_quotations,
            'quotations': [q.to_dict() for q in self.quotations],
            'processing_time_ms': self.processing_time_ms,
            'stage_timings': self.stage_timings,
        }
        if include_messages:
            result['messages'] = [m.to_dict() for m in self.messages]
        return result


class TranscriptPipeline:
    """
    End-to-end pipeline for turning chat exports into quotations.

    Usage:
        pipeline = TranscriptPipeline()
        result = pipeline.parse(text)
        for quotation in result.quotations:
            ...
    """

    def __init__(
        self,
        country_code: str | None = None,
        now: Callable[[], datetime] = datetime.now,
    ):
        """
        Initialize the pipeline.

        Args:
            country_code: Prefix for local phone numbers (defaults to config.DEFAULT_COUNTRY_CODE)
            now: Clock used when a header date cannot be parsed
        """
        self.country_code = country_code
        self.now = now

    def parse(
        self,
        text: str,
        source_name: str | None = None,
        trace_id: str | None = None,
    ) -> ParseResult:
        """
        Parse transcript text into messages and quotations.

        Args:
            text: Decoded transcript text
            source_name: Filename or other label used in logs and the result
            trace_id: Caller's tracing identifier, attached to log entries

        Returns:
            ParseResult with messages and quotations in file order

        Raises:
            ValidationError: If text is not a str
        """
        timer = PipelineTimer()

        with logging_context(trace_id=trace_id, source_name=source_name):
            logger.info(
                'pipeline.parse_started',
                content_length=len(text) if isinstance(text, str) else None,
            )

            with timer.stage('segmentation'):
                messages = segment_messages(text, now=self.now)

            with timer.stage('assembly'):
                quotations = assemble_quotations(messages, self.country_code)

            result = ParseResult(
                messages=messages,
                quotations=quotations,
                source_name=source_name,
                processing_time_ms=int(timer.total_ms),
                stage_timings=timer.stages.copy(),
            )

            if not quotations:
                logger.info('pipeline.parse_complete_no_quotations', total_messages=len(messages), **timer.summary())
            else:
                logger.info(
                    'pipeline.parse_complete',
                    total_messages=len(messages),
                    total_quotations=len(quotations),
                    **timer.summary(),
                )

        return result

    def parse_upload(self, upload: TranscriptUpload, trace_id: str | None = None) -> ParseResult:
        """
        Decode an uploaded export and parse it.

        Raises:
            DecodeError: If the payload is not base64 encoded UTF-8
            ValidationError: If the payload is empty
        """
        text = upload.decode_text()
        return self.parse(text, source_name=upload.filename, trace_id=trace_id)


def parse_transcript(text: str) -> ParseResult:
    """Parse transcript text with default settings."""
    return TranscriptPipeline().parse(text)
