"""
Duration Commands

Commands:
- /duration format <duration> [--decimals N]: Reformat a duration compactly.
- /duration parse <duration>: Show a duration's total seconds.
"""

from datetime import timedelta
from rich.console import Console
import click
from utilkit.commands.base import RichGroup, RichCommand, rich_help, value_print, error_print
from utilkit.lib.timeutil import duration_format, duration_parse

console: Console = Console()


@click.group(
    cls=RichGroup,
    short_help="Format and parse durations",
    help="""
    Durations

    Parse strings such as 1h30m or 250ms and format them compactly.
    """,
)
def duration() -> None:
    """
    Root group for duration commands.
    """
    pass


duration: click.Group = duration


@duration.command(
    name="format",
    cls=RichCommand,
    help=rich_help(
        command="format",
        description="Format a duration as ns, ms, s, m or h.",
        usage="/duration format <duration> [--decimals N]",
        args={
            "<duration>": "Duration such as 1500ms or 2h45m.",
            "--decimals": "Decimal places (default 2).",
        },
    ),
)
@click.argument("text", metavar="DURATION", type=str)
@click.option("--decimals", type=int, default=2, help="Decimal places")
def format_(text: str, decimals: int) -> None:
    try:
        value_print(console, text, duration_format(duration_parse(text), decimals))
    except ValueError as e:
        error_print(console, "duration format", e)


@duration.command(
    cls=RichCommand,
    help=rich_help(
        command="parse",
        description="Parse a duration and show it in seconds.",
        usage="/duration parse <duration>",
        args={"<duration>": "Duration such as 1h30m."},
    ),
)
@click.argument("text", metavar="DURATION", type=str)
def parse(text: str) -> None:
    try:
        parsed: timedelta = duration_parse(text)
        value_print(console, text, f"{parsed.total_seconds():g}s")
    except ValueError as e:
        error_print(console, "duration parse", e)
