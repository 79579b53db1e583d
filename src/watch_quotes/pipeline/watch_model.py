"""
Watch reference extraction.

Four independent pattern families cover the common reference conventions:

- six_digit: 6 digits + up to 6 uppercase letters (116500LN, 126710BLRO)
- slash_reference: 4-5 digits / 1-2 digits + letters, optional -NNN (5711/1A, 5990/1A-001)
- five_digit_letters: 5 digits + 2-4 uppercase letters (15500ST, 26331ST)
- brand_prefixed: the token after a brand name (Cartier WSSA0018, Rolex DAYTONA)

Every family runs over the whole body; a message may name several watches.
"""

import re

from .price import PRICE_RULES, TEN_THOUSAND_RULE
from .rules import MatchRule, all_matches, whole_match

BRAND_NAMES: tuple[str, ...] = (
    'Rolex',
    'Patek',
    'AP',
    'Audemars',
    'Omega',
    'Cartier',
    'IWC',
    'Panerai',
    '勞力士',
    '百達翡麗',
    '愛彼',
    '歐米茄',
    '卡地亞',
)

# Longer tokens are cut to their first 15 characters
_BRAND_PATTERN = re.compile(
    r'(?<![A-Za-z])(?:' + '|'.join(re.escape(b) for b in BRAND_NAMES) + r')'
    r'\s+([A-Z0-9/-]{4,15})',
    re.IGNORECASE,
)

MODEL_RULES: tuple[MatchRule[str], ...] = (
    MatchRule('six_digit', re.compile(r'\b\d{6}[A-Z]{0,6}\b', re.ASCII), whole_match),
    MatchRule(
        'slash_reference',
        re.compile(r'\b\d{4,5}/\d{1,2}[A-Z]{0,5}(?:-\d{3})?\b', re.ASCII),
        whole_match,
    ),
    MatchRule('five_digit_letters', re.compile(r'\b\d{5}[A-Z]{2,4}\b', re.ASCII), whole_match),
    MatchRule('brand_prefixed', _BRAND_PATTERN, lambda m: m.group(1)),
)


def _mask_amounts(text: str) -> str:
    """Blank out every span a price rule reads as an amount."""
    chars = list(text)
    for rule in (*PRICE_RULES, TEN_THOUSAND_RULE):
        for match in rule.pattern.finditer(text):
            chars[match.start():match.end()] = ' ' * (match.end() - match.start())
    return ''.join(chars)


def extract_watch_models(text: str) -> list[str]:
    """
    Find the distinct watch references in a message body.

    Args:
        text: Message body

    Returns:
        Distinct references in first-seen order; empty when none are found
    """
    found = all_matches(MODEL_RULES, _mask_amounts(text))
    return list(dict.fromkeys(found))
