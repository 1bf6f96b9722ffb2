from datetime import timedelta

import pytest

from src.time_tracking.time_tracking.core.exceptions import MalformedInputError
from src.time_tracking.time_tracking.timesheet.duration import (
    format_daily_hours,
    format_total_hours,
    minutes_of,
)


def test_daily_hours_pad_both_parts():
    assert format_daily_hours(8 * 60) == "08:00"
    assert format_daily_hours(16 * 60 + 30) == "16:30"
    assert format_daily_hours(5) == "00:05"


def test_total_hours_do_not_pad_hours():
    assert format_total_hours(0) == "0:00"
    assert format_total_hours(8 * 60 + 30) == "8:30"
    assert format_total_hours(43 * 60) == "43:00"
    assert format_total_hours(120 * 60 + 5) == "120:05"


@pytest.mark.parametrize("fmt", [format_daily_hours, format_total_hours])
def test_negative_minutes_are_rejected(fmt):
    with pytest.raises(MalformedInputError):
        fmt(-1)


def test_minutes_of_truncates_seconds():
    assert minutes_of(timedelta(hours=1, minutes=2, seconds=59)) == 62


def test_negative_duration_is_rejected():
    with pytest.raises(MalformedInputError):
        minutes_of(timedelta(minutes=-1))
