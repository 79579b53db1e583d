"""
Quotation assembly from segmented messages.

A message becomes quotations only when it has an author, at least one watch
reference and a price. A message naming several references with one price
is taken to quote every reference at that price, so all of its quotations
share price, currency, warranty date, timestamp and seller.
"""

from typing import Iterable

from ..models.message import Message
from ..models.quotation import Quotation
from .phone import extract_phone_number
from .price import extract_price
from .warranty import extract_warranty_date
from .watch_model import extract_watch_models


def resolve_seller_phone(author: str, body: str, country_code: str | None = None) -> str:
    """Phone from the author name, then from the body, then the author name itself."""
    return (
        extract_phone_number(author, country_code)
        or extract_phone_number(body, country_code)
        or author
    )


def quotations_from_message(message: Message, country_code: str | None = None) -> list[Quotation]:
    """
    Build the quotations contained in one message.

    Args:
        message: A segmented chat message
        country_code: Prefix for local phone numbers (defaults to config)

    Returns:
        One quotation per distinct reference; empty for system messages and
        messages lacking a reference or a price
    """
    if message.author is None:
        return []

    models = extract_watch_models(message.body)
    if not models:
        return []
    price = extract_price(message.body)
    if price is None:
        return []

    warranty_date = extract_warranty_date(message.body)
    seller_phone = resolve_seller_phone(message.author, message.body, country_code)

    return [
        Quotation(
            watch_model=model,
            price_minor_units=price.amount,
            currency_code=price.currency,
            warranty_date=warranty_date,
            seller_phone=seller_phone,
            seller_name=message.author,
            quote_timestamp=message.timestamp,
            source_text=message.body,
        )
        for model in models
    ]


def assemble_quotations(
    messages: Iterable[Message], country_code: str | None = None
) -> list[Quotation]:
    """Build quotations for every message, preserving message order."""
    quotations: list[Quotation] = []
    for message in messages:
        quotations.extend(quotations_from_message(message, country_code))
    return quotations
