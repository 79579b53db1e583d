"""
Warranty card date extraction.

Only messages that mention a warranty card are considered. The date is
returned as the literal text found: a single keyword gives no way to tell
01/02/2023 day-first from month-first, so no normalization is attempted.
"""

import re

from .rules import MatchRule, first_match, whole_match

WARRANTY_KEYWORDS: tuple[str, ...] = (
    '保卡',
    '保修卡',
    'warranty',
    'guarantee',
    'card date',
    '卡日期',
)

DATE_RULES: tuple[MatchRule[str], ...] = (
    MatchRule('iso_like', re.compile(r'\b\d{4}[-/.]\d{1,2}[-/.]\d{1,2}\b', re.ASCII), whole_match),
    MatchRule('slash_dmy', re.compile(r'\b\d{1,2}/\d{1,2}/\d{4}\b', re.ASCII), whole_match),
    MatchRule('chinese', re.compile(r'\d{4}年\d{1,2}月(?:\d{1,2}日)?', re.ASCII), whole_match),
    MatchRule(
        'month_name',
        re.compile(r'(?:Jan|Feb|Mar|Apr|May|Jun|Jul|Aug|Sep|Oct|Nov|Dec)[a-z]*\s+\d{4}', re.IGNORECASE),
        whole_match,
    ),
)


def has_warranty_keyword(text: str) -> bool:
    """True if the text mentions a warranty card in English or Chinese."""
    lowered = text.lower()
    return any(keyword in lowered for keyword in WARRANTY_KEYWORDS)


def extract_warranty_date(text: str) -> str | None:
    """
    Find the warranty card date in a message body.

    Args:
        text: Message body

    Returns:
        The date exactly as written, or None when the message does not mention
        a warranty card or contains no recognizable date
    """
    if not has_warranty_keyword(text):
        return None
    return first_match(DATE_RULES, text)
