"""
Diagnostics for utilkit, on top of Loguru.

Everything that is not a result (placeholders left unresolved, files skipped
while rendering, command failures, a CA bundle without certificates) goes
through `LOG` to stderr, so that resolved text written to stdout stays clean
enough to pipe.

Features:
- `LOG`: debug-level by default, any Loguru level via `level=`.
- `sink_configure`: point the logger somewhere else (tests, files).
- `UTK_BEQUIET=true` silences `LOG` entirely.

Example:
    from utilkit.lib.log import LOG
    LOG("Environment variable not set: HOME")
    LOG("CA bundle has no certificates", level="WARNING")
"""

from loguru import logger
from typing import Any, Final
import sys

app_logger = logger.bind(app="UTILKIT")

LOGGER_FORMAT: Final[str] = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> │ "
    "<level>{level: <7}</level> │ "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> ║ "
    "<level>{message}</level>"
)


def sink_configure(sink: Any = sys.stderr, level: str = "DEBUG") -> int:
    """
    Replace every handler with a single sink.

    :param sink: Anything Loguru accepts as a sink (stream, path, callable).
    :param level: Minimum level written to the sink.
    :return: The Loguru handler id.
    """
    app_logger.remove()
    return app_logger.add(sink, format=LOGGER_FORMAT, level=level)


sink_configure()


def LOG(*args: Any, level: str = "DEBUG", **kwargs: Any) -> None:
    """
    Log a message unless `appsettings.beQuiet` is set.

    :param args: Message and Loguru format arguments.
    :param level: Loguru level name.
    :param kwargs: Loguru format keyword arguments.
    """
    try:
        from utilkit.config.settings import appsettings  # read at call time

        if not appsettings.beQuiet:
            app_logger.opt(depth=1).log(level, *args, **kwargs)
    except Exception as e:
        print(f"Logging error: {e}", file=sys.stderr)
