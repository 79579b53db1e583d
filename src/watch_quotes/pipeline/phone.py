"""
Phone number extraction from author names and message bodies.
"""

import re

from ..config import config
from .rules import MatchRule, first_match_with_rule, whole_match

_CONTACT_PREFIX = re.compile(r'^(?:Contact|聯絡|联系)[:：\s]*', re.IGNORECASE)
_SEPARATORS = re.compile(r'[\s-]')

PHONE_RULES: tuple[MatchRule[str], ...] = (
    MatchRule(
        'international',
        re.compile(r'\+\d{1,4}[\s-]?\d{3,4}[\s-]?\d{3,4}[\s-]?\d{0,4}', re.ASCII),
        lambda m: _SEPARATORS.sub('', m.group(0)),
    ),
    # Local numbering plan: 8 digits, never starting with 0 or 1
    MatchRule('local_8_digit', re.compile(r'\b[2-9]\d{7}\b', re.ASCII), whole_match),
    MatchRule('digit_run', re.compile(r'\b\d{8,15}\b', re.ASCII), whole_match),
)


def extract_phone_number(text: str, country_code: str | None = None) -> str | None:
    """
    Find the most likely phone number in a text fragment.

    Tries, in order: an international number with a leading '+' (returned
    without separators), a bare 8-digit local number starting 2-9 (returned
    with the country code prefixed), then any run of 8-15 digits.

    Args:
        text: Author name or message body
        country_code: Prefix for local numbers (defaults to config.DEFAULT_COUNTRY_CODE)

    Returns:
        Phone string, or None when nothing looks like a phone number
    """
    text = _CONTACT_PREFIX.sub('', text)
    rule, phone = first_match_with_rule(PHONE_RULES, text)
    if rule is None:
        return None
    if rule.name == 'local_8_digit':
        return (country_code if country_code is not None else config.DEFAULT_COUNTRY_CODE) + phone
    return phone
