"""
Pipeline components for transcript segmentation and quotation extraction.
"""

from .assembler import assemble_quotations, quotations_from_message, resolve_seller_phone
from .datetime_normalizer import normalize_datetime
from .phone import extract_phone_number
from .pipeline import ParseResult, TranscriptPipeline, parse_transcript
from .price import extract_price
from .rules import MatchRule, all_matches, first_match
from .segmenter import segment_messages
from .warranty import extract_warranty_date
from .watch_model import extract_watch_models

__all__ = [
    # Main Pipeline
    'TranscriptPipeline',
    'ParseResult',
    'parse_transcript',
    # Segmentation
    'normalize_datetime',
    'segment_messages',
    # Field extraction
    'extract_phone_number',
    'extract_watch_models',
    'extract_price',
    'extract_warranty_date',
    # Assembly
    'assemble_quotations',
    'quotations_from_message',
    'resolve_seller_phone',
    # Rules
    'MatchRule',
    'first_match',
    'all_matches',
]
