"""
Quotation and price models.

Prices are carried as integer minor units (cents) to avoid floating-point
errors. All quotations from one message share the same price, currency,
warranty date, timestamp and seller identity.
"""

from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


class CurrencyCode(str, Enum):
    """Currencies recognised by the price extractor."""

    HKD = 'HKD'
    USD = 'USD'
    CNY = 'CNY'
    EUR = 'EUR'


class PriceInfo(BaseModel):
    """An extracted amount and its currency."""

    model_config = {'frozen': True}

    amount: int = Field(..., ge=0, description='Amount in minor units (cents)')
    currency: CurrencyCode = Field(..., description='Currency of the amount')


class Quotation(BaseModel):
    """
    A seller's price offer for one watch reference, extracted from one message.

    seller_phone holds the best phone number found for the seller; when none
    is found it holds the author's display name so every quotation still has
    a seller identity.
    """

    model_config = {'frozen': True}

    watch_model: str = Field(..., min_length=1, description='Reference string, e.g. 116500LN')
    price_minor_units: int = Field(..., ge=0, description='Price in minor units (cents)')
    currency_code: CurrencyCode = Field(..., description='Currency of the price')
    warranty_date: str | None = Field(
        default=None, description='Literal warranty card date substring, unnormalized'
    )
    seller_phone: str = Field(..., description='Phone number, or author name as fallback')
    seller_name: str | None = Field(default=None, description='Author display name')
    quote_timestamp: datetime = Field(..., description='Timestamp of the source message')
    source_text: str = Field(..., description='Originating message body')

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            'watch_model': self.watch_model,
            'price_minor_units': self.price_minor_units,
            'currency_code': self.currency_code.value,
            'warranty_date': self.warranty_date,
            'seller_phone': self.seller_phone,
            'seller_name': self.seller_name,
            'quote_timestamp': self.quote_timestamp.isoformat(),
            'source_text': self.source_text,
        }
