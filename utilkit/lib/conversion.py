"""
Byte size conversion.

- bytes_humanize(1536)   -> "1.50 KiB"
- bytes_parse("125MiB")  -> 131072000
"""

from typing import Final

KIB: Final[int] = 1024

BINARY_UNITS: Final[dict[str, int]] = {
    "Ki": KIB,
    "KiB": KIB,
    "Mi": KIB**2,
    "MiB": KIB**2,
    "Gi": KIB**3,
    "GiB": KIB**3,
    "Ti": KIB**4,
    "TiB": KIB**4,
    "Pi": KIB**5,
    "PiB": KIB**5,
    "Ei": KIB**6,
    "EiB": KIB**6,
}

DECIMAL_UNITS: Final[dict[str, int]] = {
    "K": 1000,
    "KB": 1000,
    "M": 1000**2,
    "MB": 1000**2,
    "G": 1000**3,
    "GB": 1000**3,
    "T": 1000**4,
    "TB": 1000**4,
    "P": 1000**5,
    "PB": 1000**5,
    "E": 1000**6,
    "EB": 1000**6,
}

# Largest unit first
_HUMAN_UNITS: Final[list[tuple[str, int]]] = [
    ("EiB", KIB**6),
    ("PiB", KIB**5),
    ("TiB", KIB**4),
    ("GiB", KIB**3),
    ("MiB", KIB**2),
    ("KiB", KIB),
]


def bytes_humanize(size: int) -> str:
    """Convert a byte count to a human-readable string.

    Args:
        size: Number of bytes

    Returns:
        "<n> bytes" below 1 KiB, otherwise the value in the largest fitting
        binary unit with two decimals

    Raises:
        ValueError: If size is negative
    """
    if size < 0:
        raise ValueError(f"byte count cannot be negative: {size}")
    for unit, factor in _HUMAN_UNITS:
        if size >= factor:
            return f"{size / factor:.2f} {unit}"
    return f"{size} bytes"


def number_unitSplit(text: str) -> tuple[str, str]:
    """Split leading ASCII digits from the rest of the string."""
    for i, char in enumerate(text):
        if not "0" <= char <= "9":
            return text[:i], text[i:]
    return text, ""


def unit_multiplier(unit: str) -> int:
    """Return the byte multiplier for a unit suffix.

    Raises:
        ValueError: If the unit is not recognized
    """
    if unit in BINARY_UNITS:
        return BINARY_UNITS[unit]
    if unit in DECIMAL_UNITS:
        return DECIMAL_UNITS[unit]
    raise ValueError(f"invalid unit: {unit}")


def bytes_parse(text: str) -> int:
    """Convert a size with a unit suffix (e.g. "1M", "1Mi", "1MiB", "1MB") to bytes.

    Raises:
        ValueError: On empty input, a missing number or unit, or an unknown unit
    """
    if not text:
        raise ValueError("input cannot be empty")
    number, unit = number_unitSplit(text)
    if not number or not unit:
        raise ValueError("invalid format: missing number or unit")
    return int(number) * unit_multiplier(unit)
