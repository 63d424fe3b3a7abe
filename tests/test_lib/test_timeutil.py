"""
Tests for duration formatting and parsing.
"""

from datetime import timedelta
import pytest
from utilkit.lib.timeutil import duration_format, duration_parse


@pytest.mark.parametrize(
    "duration,expected",
    [
        (timedelta(0), "0ns"),
        (timedelta(microseconds=500), "500000ns"),
        (timedelta(microseconds=1500), "1.50ms"),
        (timedelta(milliseconds=250), "250.00ms"),
        (timedelta(seconds=1.5), "1.50s"),
        (timedelta(seconds=90), "1.50m"),
        (timedelta(hours=1, minutes=30), "1.50h"),
        (timedelta(hours=26), "26.00h"),
    ],
)
def test_duration_format(duration: timedelta, expected: str) -> None:
    assert duration_format(duration) == expected


def test_duration_format_decimals() -> None:
    assert duration_format(timedelta(seconds=12.34), decimals=1) == "12.3s"
    assert duration_format(timedelta(minutes=3), decimals=0) == "3m"


@pytest.mark.parametrize(
    "text,expected",
    [
        ("", timedelta(0)),
        ("0", timedelta(0)),
        ("-0", timedelta(0)),
        ("300ms", timedelta(milliseconds=300)),
        ("1.5h", timedelta(minutes=90)),
        ("2h45m", timedelta(hours=2, minutes=45)),
        ("-1m30s", timedelta(seconds=-90)),
        ("+5s", timedelta(seconds=5)),
        ("100us", timedelta(microseconds=100)),
        ("100µs", timedelta(microseconds=100)),
        ("1000ns", timedelta(microseconds=1)),
        (".5s", timedelta(milliseconds=500)),
    ],
)
def test_duration_parse(text: str, expected: timedelta) -> None:
    assert duration_parse(text) == expected


@pytest.mark.parametrize("text", ["5", "h", "1x", "-", "1h-2m", ".s", "1hh", "1 h"])
def test_duration_parse_invalid(text: str) -> None:
    with pytest.raises(ValueError, match="invalid duration"):
        duration_parse(text)


@pytest.mark.parametrize("text", ["99999999999999h", "-99999999999999h", "9" * 400 + "s"])
def test_duration_parse_out_of_range(text: str) -> None:
    with pytest.raises(ValueError, match="invalid duration"):
        duration_parse(text)
