"""Test relative-age parsing, display strings and minute conversion"""

import math
import os
import sys

import pytest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from joblens.core.errors import InvalidNumberError, TimeParseError
from joblens.core.models import PostedTime, TimeUnit
from joblens.core.posted_time import (
    UNKNOWN_TIME,
    format_posted_time,
    match_unit,
    parse_posted_time,
    posted_to_minutes,
    to_display_string,
    to_minutes,
)


def test_parse_plural_unit_with_suffix():
    assert parse_posted_time("5 minutes ago") == PostedTime(5, TimeUnit.MINUTE)
    assert parse_posted_time("2 Days ago") == PostedTime(2, TimeUnit.DAY)
    assert parse_posted_time("1 month") == PostedTime(1, TimeUnit.MONTH)


def test_parse_splits_on_first_whitespace_run():
    assert parse_posted_time("  3\tweeks ago") == PostedTime(3, TimeUnit.WEEK)


def test_parse_unknown_unit_is_not_an_error():
    parsed = parse_posted_time("4 years ago")
    assert parsed.value == 4
    assert parsed.unit is None


def test_parse_missing_unit_token():
    assert parse_posted_time("7").unit is None


def test_substring_matching_is_kept():
    # Any token containing a unit name matches it
    assert match_unit("daydream") is TimeUnit.DAY
    assert match_unit("MONTHS") is TimeUnit.MONTH


@pytest.mark.parametrize(
    "posted",
    ["five minutes ago", "", "1.5 hours", "-2 days", "+5 days", "1_000 days", "\u0663 days"],
)
def test_parse_invalid_number(posted):
    with pytest.raises(InvalidNumberError):
        parse_posted_time(posted)
    assert issubclass(InvalidNumberError, TimeParseError)


def test_minutes_examples():
    assert to_minutes(3, TimeUnit.WEEK) == 30240
    assert to_minutes(1, TimeUnit.MONTH) == 43200
    assert to_minutes(2, TimeUnit.HOUR) == 120
    assert to_minutes(1, None) == math.inf


def test_minutes_follow_unit_magnitude():
    for value in (1, 2, 17):
        minutes = [to_minutes(value, unit) for unit in TimeUnit]
        assert minutes == sorted(minutes), f"Units out of order for {value}: {minutes}"
        assert len(set(minutes)) == len(minutes)


def test_display_string():
    assert to_display_string(5, TimeUnit.MINUTE) == "5 minute(s) ago"
    assert to_display_string(1, TimeUnit.MONTH) == "1 month(s) ago"
    assert to_display_string(9, None) == UNKNOWN_TIME == "Unknown time"


@pytest.mark.parametrize(
    "posted",
    ["5 minutes ago", "2 hours", "1 day", "3 weeks", "6 months", "4 years", "soon", "x days", ""],
)
def test_display_and_minutes_agree_on_unknown(posted):
    unknown_display = format_posted_time(posted) == UNKNOWN_TIME
    unknown_minutes = posted_to_minutes(posted) == math.inf
    assert unknown_display == unknown_minutes, f"Disagreement for {posted!r}"


def test_wrappers_never_raise():
    assert format_posted_time("abc") == UNKNOWN_TIME
    assert posted_to_minutes("abc") == math.inf
    assert format_posted_time("2 days ago") == "2 day(s) ago"
    assert posted_to_minutes("2 days ago") == 2880
