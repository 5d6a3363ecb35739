from datetime import datetime, timedelta, timezone

import pytest

from formatkit.handlers import calendar, numeric


@pytest.mark.parametrize("handler, value, precision, expected", [
    (numeric.format_str, 1.5, 6, "1.5"),
    (numeric.format_int, 2.4, 6, "2"),
    (numeric.format_int, -7, 6, "-7"),
    (numeric.format_bin, 3.4, 0, "11"),
    (numeric.format_oct, 64, 0, "100"),
    (numeric.format_hex, 254.6, 0, "ff"),
    (numeric.format_hex, -255, 0, "-ff"),
    (numeric.format_hex_upper, 43981, 0, "ABCD"),
    (numeric.format_char, 0x263A, 0, "☺"),
    (numeric.format_exp, 0.00015, 2, "1.50e-4"),
    (numeric.format_exp, 0, 1, "0.0e+0"),
    (numeric.format_exp_upper, 1e300, 3, "1.000E+300"),
    (numeric.format_fixed, 2, 3, "2.000"),
    (numeric.format_fixed_upper, 1.25, 1, "1.3"),
    (numeric.format_percent, 0.5, 1, "50.0%"),
])
def test_numeric_handlers(handler, value, precision, expected):
    assert handler(value, precision) == expected


@pytest.mark.parametrize("handler", [
    numeric.format_int,
    numeric.format_bin,
    numeric.format_oct,
    numeric.format_hex,
    numeric.format_exp,
    numeric.format_fixed,
])
def test_non_finite_values(handler):
    assert handler(float("inf"), 2) == "infinity"
    assert handler(float("-inf"), 2) == "-infinity"
    assert handler(float("nan"), 2) == "nan"


@pytest.mark.parametrize("handler, value, precision, expected", [
    (numeric.format_hex, 2.5, 0, "3"),
    (numeric.format_bin, 0.5, 0, "1"),
    (numeric.format_hex, -2.5, 0, "-2"),
    (numeric.format_oct, 7.5, 0, "10"),
    (numeric.format_int, 2.5, 6, "3"),
    (numeric.format_int, 0.5, 6, "1"),
    (numeric.format_int, -2.5, 6, "-3"),
    (numeric.format_fixed, 1.25, 1, "1.3"),
    (numeric.format_fixed, 0.125, 2, "0.13"),
    (numeric.format_fixed, 1.005, 2, "1.00"),
    (numeric.format_percent, 0.125, 0, "13%"),
])
def test_halfway_values_round_up(handler, value, precision, expected):
    assert handler(value, precision) == expected


@pytest.mark.parametrize("value, precision, expected", [
    (-0.0, 2, "0.00"),
    (0.0, 0, "0"),
    (-0.4, 0, "-0"),
])
def test_signed_zero(value, precision, expected):
    assert numeric.format_fixed(value, precision) == expected


def test_fixed_handles_large_values():
    assert numeric.format_fixed(1e300, 2) == f"{int(1e300)}.00"
    assert numeric.format_int(12345678901234567890123, 0) == "12345678901234567890123"


def test_non_finite_upper_and_percent():
    assert numeric.format_hex_upper(float("inf"), 0) == "INFINITY"
    assert numeric.format_exp_upper(float("-inf"), 0) == "-INFINITY"
    assert numeric.format_percent(float("nan"), 0) == "nan%"


@pytest.mark.parametrize("align, text, width, expected", [
    (numeric.align_left, "ab", 5, "ab   "),
    (numeric.align_right, "ab", 5, "   ab"),
    (numeric.align_center, "1", 4, " 1  "),
    (numeric.align_center, "1", 5, " 1   "),
    (numeric.align_center, "abc", 8, " abc    "),
])
def test_align(align, text, width, expected):
    assert align(text, width) == expected


@pytest.mark.parametrize("align", [numeric.align_left, numeric.align_right, numeric.align_center])
@pytest.mark.parametrize("width", [0, 3, 6])
def test_align_is_noop_when_wide_enough(align, width):
    assert align("abcdef", width) == "abcdef"


def test_default_tables_cover_all_keys():
    assert set(numeric.DEFAULT_HANDLERS) == set("sbcdoxXeEfF%")
    assert set(numeric.DEFAULT_ALIGN) == {"", "<", "^", ">"}
    assert set(calendar.DEFAULT_DATE_HANDLERS) == set("yYmdHIpMSsfTw")


@pytest.mark.parametrize("hour, h12, ampm", [
    (0, "12", "AM"),
    (1, "01", "AM"),
    (11, "11", "AM"),
    (12, "12", "PM"),
    (13, "01", "PM"),
    (23, "11", "PM"),
])
def test_twelve_hour_clock(hour, h12, ampm):
    date = datetime(2024, 1, 1, hour)
    assert calendar.hour_12(date) == h12
    assert calendar.meridiem(date) == ampm


def test_zero_padding():
    date = datetime(5, 2, 3, 4, 5, 6, 7000)
    assert calendar.full_year(date) == "0005"
    assert calendar.short_year(date) == "05"
    assert calendar.month(date) == "02"
    assert calendar.day(date) == "03"
    assert calendar.millisecond(date) == "007"
    assert calendar.clock_time(date) == "04:05:06"


def test_weekday_starts_monday():
    monday = datetime(2024, 4, 22)
    assert [calendar.weekday(monday + timedelta(days=i)) for i in range(7)] == list("0123456")


def test_epoch_seconds():
    assert calendar.epoch_seconds(datetime(1970, 1, 1, 0, 0, 10, tzinfo=timezone.utc)) == "10"
    assert calendar.epoch_seconds(datetime(1970, 1, 1, 0, 0, 10, 600000, tzinfo=timezone.utc)) == "11"
    shifted = datetime(1970, 1, 1, 9, tzinfo=timezone(timedelta(hours=9)))
    assert calendar.epoch_seconds(shifted) == "0"
