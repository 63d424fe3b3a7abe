"""
Environment variable access with typed defaults.

A variable that is set always wins over the default, even when empty
(`env_get`). Values that fail to parse fall back to the default.
"""

import os
import re
import warnings
from typing import Final

_TRUE: Final[frozenset[str]] = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE: Final[frozenset[str]] = frozenset({"0", "f", "F", "FALSE", "false", "False"})
_int_re: Final[re.Pattern[str]] = re.compile(r"[+-]?[0-9]+")


def bool_parse(value: str) -> bool:
    """Parse the boolean spellings accepted in environment variables.

    Raises:
        ValueError: If the value is not a recognized boolean
    """
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ValueError(f"invalid boolean: {value!r}")


def int_parse(value: str) -> int:
    """Parse a signed decimal integer.

    Raises:
        ValueError: If the value is not an integer
    """
    if not _int_re.fullmatch(value):
        raise ValueError(f"invalid integer: {value!r}")
    return int(value)


def env_get(name: str, default: str = "") -> str:
    """Return the variable's value, or `default` if it is not set."""
    value: str | None = os.environ.get(name)
    return default if value is None else value


def env_getInt(name: str, default: int = 0) -> int:
    """Return the variable as an int, or `default` if unset or unparsable."""
    value: str | None = os.environ.get(name)
    if value is None:
        return default
    try:
        return int_parse(value)
    except ValueError:
        return default


def env_getBool(name: str, default: bool = False) -> bool:
    """Return the variable as a bool, or `default` if unset or unparsable."""
    value: str | None = os.environ.get(name)
    if value is None:
        return default
    try:
        return bool_parse(value)
    except ValueError:
        return default


def env_set(name: str, value: str) -> None:
    """Set the variable, unless `value` is empty."""
    if value:
        os.environ[name] = value


def stringEnv_getWithDefault(name: str, default: str) -> str:
    """Deprecated: use env_get. Treats an empty value as unset."""
    warnings.warn(
        "stringEnv_getWithDefault is deprecated, use env_get",
        DeprecationWarning,
        stacklevel=2,
    )
    return os.environ.get(name) or default


def intEnv_get(name: str, default: int) -> int:
    """Deprecated: use env_getInt. Treats an empty value as unset."""
    warnings.warn(
        "intEnv_get is deprecated, use env_getInt", DeprecationWarning, stacklevel=2
    )
    value: str = os.environ.get(name, "")
    try:
        return int_parse(value) if value else default
    except ValueError:
        return default


def boolEnv_get(name: str, default: bool) -> bool:
    """Deprecated: use env_getBool. Treats an empty value as unset."""
    warnings.warn(
        "boolEnv_get is deprecated, use env_getBool", DeprecationWarning, stacklevel=2
    )
    value: str = os.environ.get(name, "")
    try:
        return bool_parse(value) if value else default
    except ValueError:
        return default
