"""
Relative-age helpers for free-text "posted" strings such as "5 minutes ago".
Shared by display formatting and by the posted-time sort orders.
"""

import logging
import math
from typing import Optional, Union

from joblens.core.errors import InvalidNumberError, TimeParseError
from joblens.core.models import PostedTime, TimeUnit

logger = logging.getLogger(__name__)

UNKNOWN_TIME = "Unknown time"

MINUTES_PER_UNIT = {
    TimeUnit.MINUTE: 1,
    TimeUnit.HOUR: 60,
    TimeUnit.DAY: 60 * 24,
    TimeUnit.WEEK: 60 * 24 * 7,
    TimeUnit.MONTH: 60 * 24 * 30,
}


def match_unit(token: str) -> Optional[TimeUnit]:
    """
    Match a unit token by substring, first hit wins ("months" -> month).
    Any token containing a unit name matches, e.g. "daydream" -> day.
    """
    token = token.lower()
    for unit in TimeUnit:
        if unit.value in token:
            return unit
    return None


def parse_posted_time(posted: str) -> PostedTime:
    """
    Split "<integer> <unit>..." at the first whitespace run.
    Raises InvalidNumberError if the leading token is not a non-negative integer.
    """
    parts = posted.strip().split(None, 1)
    number = parts[0] if parts else ""
    unit_token = parts[1] if len(parts) > 1 else ""

    # ASCII base-10 digits only
    if not (number.isascii() and number.isdigit()):
        raise InvalidNumberError(number)
    value = int(number, 10)

    return PostedTime(value=value, unit=match_unit(unit_token))


def to_display_string(value: int, unit: Optional[TimeUnit]) -> str:
    if unit is None:
        return UNKNOWN_TIME
    return f"{value} {unit.value}(s) ago"


def to_minutes(value: int, unit: Optional[TimeUnit]) -> Union[int, float]:
    """Total elapsed minutes, or math.inf for an unknown unit."""
    if unit is None:
        return math.inf
    return value * MINUTES_PER_UNIT[unit]


def format_posted_time(posted: str) -> str:
    try:
        parsed = parse_posted_time(posted)
    except TimeParseError as e:
        logger.debug(f"Cannot format posted time {posted!r}: {e}")
        return UNKNOWN_TIME
    return to_display_string(parsed.value, parsed.unit)


def posted_to_minutes(posted: str) -> Union[int, float]:
    try:
        parsed = parse_posted_time(posted)
    except TimeParseError as e:
        logger.debug(f"Cannot order posted time {posted!r}: {e}")
        return math.inf
    return to_minutes(parsed.value, parsed.unit)
