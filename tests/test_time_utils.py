import pytest

from timeish.utils.time_utils import (
    format_hour_minute,
    hour_minute_to_minutes,
    minutes_to_hour_minute,
    print_format,
)


# ---------------------------------------------------------------------------
# hour_minute_to_minutes
# ---------------------------------------------------------------------------

def test_hour_minute_to_minutes_basic():
    assert hour_minute_to_minutes(8, 30) == 510


def test_hour_minute_to_minutes_midnight():
    assert hour_minute_to_minutes(0, 0) == 0


def test_hour_minute_to_minutes_past_one_day():
    # Hours are not wrapped at 24
    assert hour_minute_to_minutes(25, 30) == 1530


# ---------------------------------------------------------------------------
# minutes_to_hour_minute
# ---------------------------------------------------------------------------

def test_minutes_to_hour_minute_basic():
    assert minutes_to_hour_minute(510) == (8, 30)


def test_minutes_to_hour_minute_does_not_wrap():
    assert minutes_to_hour_minute(1440) == (24, 0)
    assert minutes_to_hour_minute(1441) == (24, 1)


def test_minutes_to_hour_minute_negative_floors():
    # -61 min = -2 h + 59 min; the minute stays in [0, 59]
    assert minutes_to_hour_minute(-61) == (-2, 59)
    assert minutes_to_hour_minute(-30) == (-1, 30)


# ---------------------------------------------------------------------------
# print_format / format_hour_minute
# ---------------------------------------------------------------------------

def test_print_format_default_separator():
    assert print_format(":") == "%02d:%02d"


def test_print_format_escapes_percent():
    assert print_format("%") % (1, 2) == "01%02"


def test_format_hour_minute_zero_padding():
    assert format_hour_minute(9, 5) == "09:05"
    assert format_hour_minute(0, 0) == "00:00"


def test_format_hour_minute_wide_hour_not_truncated():
    assert format_hour_minute(100, 0) == "100:00"
    assert format_hour_minute(10000, 7) == "10000:07"


@pytest.mark.parametrize("separator", [":", ".", "-", "h"])
def test_format_hour_minute_custom_separator(separator):
    assert format_hour_minute(7, 45, separator) == f"07{separator}45"


# ---------------------------------------------------------------------------
# Round-trip consistency
# ---------------------------------------------------------------------------

def test_round_trip():
    for minutes in [0, 1, 59, 60, 510, 1439, 1440, 600_000]:
        assert hour_minute_to_minutes(*minutes_to_hour_minute(minutes)) == minutes
