"""
Header date/time normalization.

Chat exports write dates as YYYY-MM-DD or as slash-separated A/B/YEAR, where
A/B is day/month in most locales and month/day in the US. Slash dates are
read day-first and retried month-first when day-first is not a valid date.
This is lossy for ambiguous values such as 03/04/2023, which always resolve
day-first.

Unparseable input never raises: the current instant is returned instead.
"""

import re
from datetime import datetime
from typing import Callable

from ..logging import get_logger

logger = get_logger(__name__)

_TIME_PATTERN = re.compile(
    r'^(\d{1,2}):(\d{2})(?::(\d{2}))?(?:\s*([AP])M)?$',
    re.IGNORECASE | re.ASCII,
)


def _parse_time(time_str: str) -> tuple[int, int, int] | None:
    match = _TIME_PATTERN.match(time_str.strip())
    if match is None:
        return None
    hour, minute = int(match.group(1)), int(match.group(2))
    second = int(match.group(3) or 0)
    meridiem = match.group(4)
    if meridiem:
        if not 1 <= hour <= 12:
            return None
        hour = hour % 12 + (12 if meridiem.upper() == 'P' else 0)
    return hour, minute, second


def _build(year: str, month: str, day: str, time_parts: tuple[int, int, int]) -> datetime | None:
    if not (year.isdigit() and month.isdigit() and day.isdigit()):
        return None
    year_num = int(year)
    if len(year) == 2:
        year_num += 2000
    try:
        return datetime(year_num, int(month), int(day), *time_parts)
    except ValueError:
        return None


def _parse(date_str: str, time_parts: tuple[int, int, int]) -> datetime | None:
    if '-' in date_str:
        parts = date_str.split('-')
        if len(parts) != 3:
            return None
        year, month, day = parts
        return _build(year, month, day, time_parts)

    parts = date_str.split('/')
    if len(parts) != 3:
        return None
    first, second, year = parts
    # Day-first is the common convention; month-first covers US exports
    return _build(year, second, first, time_parts) or _build(year, first, second, time_parts)


def normalize_datetime(
    date_str: str,
    time_str: str,
    now: Callable[[], datetime] = datetime.now,
) -> datetime:
    """
    Convert header date and time substrings into a datetime.

    Args:
        date_str: Date part of a header, e.g. '01/12/2023' or '2023-12-01'
        time_str: Time part of a header, e.g. '10:30', '10:30:15', '9:05 PM'
        now: Clock used for the fallback instant

    Returns:
        Naive local datetime; now() when the input cannot be parsed
    """
    date_str = date_str.replace('[', '').replace(']', '').strip()
    time_str = time_str.replace('[', '').replace(']', '').strip()

    time_parts = _parse_time(time_str)
    result = _parse(date_str, time_parts) if time_parts is not None else None
    if result is None:
        logger.debug('datetime.fallback_now', date=date_str, time=time_str)
        return now()
    return result
