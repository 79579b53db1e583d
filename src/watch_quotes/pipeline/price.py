"""
Price extraction with currency detection and multiplier normalization.

Rules are tried in priority order and the first match wins. HKD is the
market's default currency, so both HKD rules run first, and a bare '$' is
read as HKD rather than USD. Amounts may carry thousands separators, a
decimal part, and a multiplier directly after the digits: 'k' (x1,000) or
萬/万 (x10,000). Results are integer minor units (cents).
"""

import re
from decimal import ROUND_HALF_UP, Decimal, localcontext

from ..logging import get_logger
from ..models.quotation import CurrencyCode, PriceInfo
from .rules import MatchRule, first_match_with_rule

logger = get_logger(__name__)

# Commas only as thousands separators, so "$150000,126710BLRO" stops at the comma
_AMOUNT = r'((?:\d{1,3}(?:,\d{3})+(?!\d)|\d+)(?:\.\d{1,2})?)'
_MULTIPLIER = r'([kK萬万])?'
_K_ONLY = r'([kK])?'

MULTIPLIERS: dict[str, int] = {
    'k': 1_000,
    'K': 1_000,
    '萬': 10_000,
    '万': 10_000,
}


def _to_minor_units(literal: str, multiplier: str | None) -> int:
    digits = literal.replace(',', '')
    # Default 28-digit precision overflows on long digit runs
    with localcontext() as ctx:
        ctx.prec = len(digits) + 10
        amount = Decimal(digits)
        if multiplier:
            amount *= MULTIPLIERS[multiplier]
        return int((amount * 100).quantize(Decimal('1'), rounding=ROUND_HALF_UP))


def _builder(currency: CurrencyCode):
    def build(match: re.Match[str]) -> PriceInfo:
        return PriceInfo(amount=_to_minor_units(match.group(1), match.group(2)), currency=currency)

    return build


def _rule(name: str, marker: str, currency: CurrencyCode, multiplier: str = _MULTIPLIER) -> MatchRule[PriceInfo]:
    return MatchRule(
        name,
        re.compile(marker + _AMOUNT + multiplier, re.IGNORECASE),
        _builder(currency),
    )


PRICE_RULES: tuple[MatchRule[PriceInfo], ...] = (
    _rule('hkd_keyword', r'(?:(?<![A-Za-z])HKD?|HK\$|港幣|港币)\s?\$?', CurrencyCode.HKD),
    _rule('hkd_dollar', r'(?<!US)\$\s?', CurrencyCode.HKD),
    _rule('usd', r'(?:(?<![A-Za-z])USD|US\$|美金|美元)\s?\$?', CurrencyCode.USD, _K_ONLY),
    _rule('cny_keyword', r'(?:(?<![A-Za-z])(?:CNY|RMB)|人民币|人民幣)\s?¥?', CurrencyCode.CNY),
    _rule('cny_yen', r'¥\s?', CurrencyCode.CNY),
    _rule('eur', r'(?:(?<![A-Za-z])EUR|€|歐元|欧元)\s?', CurrencyCode.EUR, _K_ONLY),
)

# Bare "5萬" with no currency marker is assumed to be HKD
TEN_THOUSAND_RULE: MatchRule[PriceInfo] = MatchRule(
    'ten_thousand_idiom',
    re.compile(r'(\d+(?:\.\d+)?)([萬万])'),
    _builder(CurrencyCode.HKD),
)


def extract_price(text: str) -> PriceInfo | None:
    """
    Find the quoted price in a message body.

    Args:
        text: Message body

    Returns:
        PriceInfo with the amount in minor units, or None when no price is found
    """
    rule, price = first_match_with_rule((*PRICE_RULES, TEN_THOUSAND_RULE), text)
    if rule is not None:
        logger.debug('price.matched', rule=rule.name, amount=price.amount, currency=price.currency.value)
    return price
