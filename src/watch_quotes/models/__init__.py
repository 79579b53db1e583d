"""
Data models for the watch quote extractor.

All models are value objects created fresh per parse call.
"""

from .message import Message
from .quotation import CurrencyCode, PriceInfo, Quotation
from .upload import TranscriptUpload

__all__ = [
    'Message',
    'CurrencyCode',
    'PriceInfo',
    'Quotation',
    'TranscriptUpload',
]
