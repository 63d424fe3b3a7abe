"""Tests for date layout aliases."""

from datetime import datetime, timedelta, timezone
import pytest
from utilkit.lib.placeholder.layouts import date_format, zone_format


@pytest.mark.parametrize(
    "layout,expected",
    [
        ("rfc3339", "2024-03-05T14:07:09Z"),
        ("RFC3339", "2024-03-05T14:07:09Z"),
        ("iso8601", "2024-03-05T14:07:09Z"),
        ("rfc3339nano", "2024-03-05T14:07:09.12Z"),
        ("rfc822", "05 Mar 24 14:07 UTC"),
        ("rfc850", "Tuesday, 05-Mar-24 14:07:09 UTC"),
        ("rfc1123", "Tue, 05 Mar 2024 14:07:09 UTC"),
        ("rfc1123z", "Tue, 05 Mar 2024 14:07:09 +0000"),
        ("rubydate", "Tue Mar 05 14:07:09 +0000 2024"),
        ("ansic", "Tue Mar  5 14:07:09 2024"),
        ("unixdate", "Tue Mar  5 14:07:09 UTC 2024"),
        ("kitchen", "2:07PM"),
        ("unix", "2024-03-05 14:07:09"),
        ("datetime", "2024-03-05 14:07:09"),
        ("date", "2024-03-05"),
        ("time", "14:07:09"),
        ("%d.%m.%Y", "05.03.2024"),
        ("no directives", "no directives"),
        ("", "2024-03-05T14:07:09Z"),
    ],
)
def test_date_format(fixed_moment: datetime, layout: str, expected: str) -> None:
    assert date_format(fixed_moment, layout) == expected


def test_zone_format() -> None:
    assert zone_format(datetime(2024, 1, 1, tzinfo=timezone.utc)) == "Z"
    assert zone_format(datetime(2024, 1, 1)) == "Z"
    ist = timezone(timedelta(hours=5, minutes=30))
    assert zone_format(datetime(2024, 1, 1, tzinfo=ist)) == "+05:30"
    pst = timezone(timedelta(hours=-8))
    assert zone_format(datetime(2024, 1, 1, tzinfo=pst)) == "-08:00"


def test_rfc3339nano_without_fraction() -> None:
    moment = datetime(2024, 3, 5, 14, 7, 9, tzinfo=timezone.utc)
    assert date_format(moment, "rfc3339nano") == "2024-03-05T14:07:09Z"


def test_kitchen_midnight() -> None:
    moment = datetime(2024, 3, 5, 0, 5, tzinfo=timezone.utc)
    assert date_format(moment, "kitchen") == "12:05AM"


def test_nul_in_layout_is_rejected(fixed_moment: datetime) -> None:
    with pytest.raises(ValueError, match="NUL"):
        date_format(fixed_moment, "%Y\x00%m")
