"""
Byte Size Commands

Commands:
- /bytes humanize <count>: Show a byte count in the largest fitting binary unit.
- /bytes parse <size>: Convert a size such as 125MiB or 1GB to bytes.
"""

from rich.console import Console
import click
from utilkit.commands.base import RichGroup, RichCommand, rich_help, value_print, error_print
from utilkit.lib.conversion import bytes_humanize, bytes_parse

console: Console = Console()


@click.group(
    name="bytes",
    cls=RichGroup,
    short_help="Convert byte sizes",
    help="""
    Byte Size Conversion

    Format byte counts and parse size strings.
    """,
)
def size() -> None:
    """
    Root group for byte size commands.
    """
    pass


size: click.Group = size


@size.command(
    cls=RichCommand,
    help=rich_help(
        command="humanize",
        description="Show a byte count in a human-readable unit.",
        usage="/bytes humanize <count>",
        args={"<count>": "Number of bytes."},
    ),
)
@click.argument("count", type=int)
def humanize(count: int) -> None:
    try:
        value_print(console, str(count), bytes_humanize(count))
    except ValueError as e:
        error_print(console, "bytes humanize", e)


@size.command(
    cls=RichCommand,
    help=rich_help(
        command="parse",
        description="Convert a size with a unit suffix to bytes.",
        usage="/bytes parse <size>",
        args={"<size>": "Size such as 1K, 1KB, 1Ki or 1KiB."},
    ),
)
@click.argument("text", metavar="SIZE", type=str)
def parse(text: str) -> None:
    try:
        value_print(console, text, f"{bytes_parse(text)} bytes")
    except ValueError as e:
        error_print(console, "bytes parse", e)
