"""
Date layouts for the `date()` and `now()` placeholder functions.

Aliases are matched case-insensitively. Anything that is not an alias is used
verbatim as a `strftime` layout.
"""

from datetime import datetime, timedelta
from typing import Callable, Final

Layout = Callable[[datetime], str]


def zone_format(moment: datetime) -> str:
    """Return `Z` for UTC, otherwise the offset as `±hh:mm`."""
    offset: timedelta | None = moment.utcoffset()
    if not offset:
        return "Z"
    minutes: int = int(offset.total_seconds()) // 60
    sign: str = "+" if minutes >= 0 else "-"
    hours, minutes = divmod(abs(minutes), 60)
    return f"{sign}{hours:02d}:{minutes:02d}"


def rfc3339_format(moment: datetime) -> str:
    return moment.strftime("%Y-%m-%dT%H:%M:%S") + zone_format(moment)


def rfc3339nano_format(moment: datetime) -> str:
    """RFC 3339 with the fractional second, trailing zeros trimmed."""
    stamp: str = moment.strftime("%Y-%m-%dT%H:%M:%S")
    if moment.microsecond:
        stamp += "." + f"{moment.microsecond:06d}".rstrip("0")
    return stamp + zone_format(moment)


def kitchen_format(moment: datetime) -> str:
    return f"{moment.hour % 12 or 12}:{moment:%M%p}"


def ansic_format(moment: datetime) -> str:
    return f"{moment:%a %b} {moment.day:>2} {moment:%H:%M:%S %Y}"


def unixdate_format(moment: datetime) -> str:
    return f"{moment:%a %b} {moment.day:>2} {moment:%H:%M:%S %Z %Y}"


DATE_LAYOUTS: Final[dict[str, Layout | str]] = {
    "rfc3339": rfc3339_format,
    "rfc822": "%d %b %y %H:%M %Z",
    "iso8601": rfc3339_format,
    "unix": "%Y-%m-%d %H:%M:%S",
    "date": "%Y-%m-%d",
    "time": "%H:%M:%S",
    "datetime": "%Y-%m-%d %H:%M:%S",
    "kitchen": kitchen_format,
    "ansic": ansic_format,
    "unixdate": unixdate_format,
    "rubydate": "%a %b %d %H:%M:%S %z %Y",
    "rfc850": "%A, %d-%b-%y %H:%M:%S %Z",
    "rfc1123": "%a, %d %b %Y %H:%M:%S %Z",
    "rfc1123z": "%a, %d %b %Y %H:%M:%S %z",
    "rfc3339nano": rfc3339nano_format,
}


def date_format(moment: datetime, layout: str = "") -> str:
    """Format `moment` using an alias or a literal strftime layout.

    Args:
        moment: The time to format
        layout: Alias name, strftime layout, or empty for RFC 3339

    Returns:
        The formatted time

    Raises:
        ValueError: If a literal layout is rejected by strftime,
            or contains a NUL character
    """
    if not layout:
        return rfc3339_format(moment)
    chosen: Layout | str = DATE_LAYOUTS.get(layout.lower(), layout)
    if callable(chosen):
        return chosen(moment)
    if "\0" in chosen:
        raise ValueError("date layout contains a NUL character")
    return moment.strftime(chosen)
