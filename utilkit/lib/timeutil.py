"""
Duration formatting and parsing.

Durations use the compact notation common to service configuration files:
"300ms", "1.5h", "2h45m", "-1m30s".
"""

import re
from datetime import timedelta
from typing import Final

MILLISECOND: Final[timedelta] = timedelta(milliseconds=1)
SECOND: Final[timedelta] = timedelta(seconds=1)
MINUTE: Final[timedelta] = timedelta(minutes=1)
HOUR: Final[timedelta] = timedelta(hours=1)

# Alternation order matters: "ms" before "m" and "s"
_component_re: Final[re.Pattern[str]] = re.compile(
    r"([0-9]*(?:\.[0-9]*)?)(ns|us|µs|μs|ms|s|m|h)"
)

_UNIT_MICROSECONDS: Final[dict[str, float]] = {
    "ns": 0.001,
    "us": 1,
    "µs": 1,
    "μs": 1,
    "ms": 1_000,
    "s": 1_000_000,
    "m": 60_000_000,
    "h": 3_600_000_000,
}


def duration_format(duration: timedelta, decimals: int = 2) -> str:
    """Format a duration as "X.Xms", "X.Xs", "X.Xm" or "X.Xh".

    Durations under a millisecond are shown as whole nanoseconds.

    Args:
        duration: Duration to format
        decimals: Number of decimal places

    Returns:
        The formatted duration
    """
    if duration < MILLISECOND:
        return f"{(duration // timedelta(microseconds=1)) * 1000}ns"
    if duration < SECOND:
        return f"{duration / timedelta(microseconds=1) / 1000:.{decimals}f}ms"
    if duration < MINUTE:
        return f"{duration / SECOND:.{decimals}f}s"
    if duration < HOUR:
        return f"{duration / MINUTE:.{decimals}f}m"
    return f"{duration / HOUR:.{decimals}f}h"


def duration_parse(text: str) -> timedelta:
    """Parse a duration string such as "1h30m" or "250ms".

    An empty string is a zero duration.

    Raises:
        ValueError: If the string is not a valid duration
    """
    if not text:
        return timedelta(0)

    body: str = text
    sign: int = 1
    if body[0] in "+-":
        sign = -1 if body[0] == "-" else 1
        body = body[1:]
    if body == "0":
        return timedelta(0)
    if not body:
        raise ValueError(f"invalid duration: {text!r}")

    total: float = 0.0
    pos: int = 0
    while pos < len(body):
        match: re.Match[str] | None = _component_re.match(body, pos)
        if not match or match.group(1) in ("", "."):
            raise ValueError(f"invalid duration: {text!r}")
        total += float(match.group(1)) * _UNIT_MICROSECONDS[match.group(2)]
        pos = match.end()

    try:
        return timedelta(microseconds=sign * total)
    except OverflowError:
        raise ValueError(f"invalid duration: {text!r}") from None
