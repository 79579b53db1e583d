"""
Watch Quote Extractor

Parses exported chat transcripts and extracts structured watch quotations
(reference, price, seller, warranty card date) from free-form English and
Chinese messages.
"""

__version__ = '0.1.0'

# Re-export key classes for convenience
from .pipeline import (
    TranscriptPipeline,
    ParseResult,
    parse_transcript,
    segment_messages,
    assemble_quotations,
    extract_phone_number,
    extract_watch_models,
    extract_price,
    extract_warranty_date,
)
from .models import (
    Message,
    Quotation,
    PriceInfo,
    CurrencyCode,
    TranscriptUpload,
)
from .logging import (
    configure_logging,
    get_logger,
    logging_context,
    PipelineTimer,
)
from .errors import (
    WatchQuotesError,
    PipelineError,
    ValidationError,
    DecodeError,
)

__all__ = [
    # Version
    '__version__',
    # Main Pipeline
    'TranscriptPipeline',
    'ParseResult',
    'parse_transcript',
    # Components
    'segment_messages',
    'assemble_quotations',
    'extract_phone_number',
    'extract_watch_models',
    'extract_price',
    'extract_warranty_date',
    # Models
    'Message',
    'Quotation',
    'PriceInfo',
    'CurrencyCode',
    'TranscriptUpload',
    # Logging
    'configure_logging',
    'get_logger',
    'logging_context',
    'PipelineTimer',
    # Errors
    'WatchQuotesError',
    'PipelineError',
    'ValidationError',
    'DecodeError',
]
