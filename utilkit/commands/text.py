"""
Text Commands

Commands:
- /text slug <text>: URL-friendly slug.
- /text truncate <text> <limit>: Truncate with an ellipsis.
- /text encode <text>: Base64-encode.
- /text decode <text>: Base64-decode.
- /text ranges <range>...: Expand integer ranges such as 1-3 7 9-10.
"""

from rich.console import Console
import click
from utilkit.commands.base import RichGroup, RichCommand, rich_help, value_print, error_print
from utilkit.lib.text import base64_decode, base64_encode, ranges_parse, text_slug, text_truncate

console: Console = Console()


@click.group(
    cls=RichGroup,
    short_help="String and encoding helpers",
    help="""
    Text Helpers

    Slugs, truncation, base64 and integer ranges.
    """,
)
def text() -> None:
    """
    Root group for text commands.
    """
    pass


text: click.Group = text


@text.command(
    cls=RichCommand,
    help=rich_help(
        command="slug",
        description="Convert text to a URL-friendly slug.",
        usage="/text slug <text>",
        args={"<text>": "Text to convert; quote it if it has spaces."},
    ),
)
@click.argument("value", metavar="TEXT", type=str)
def slug(value: str) -> None:
    value_print(console, "slug", text_slug(value))


@text.command(
    cls=RichCommand,
    help=rich_help(
        command="truncate",
        description="Truncate text, appending '...' when it is cut.",
        usage="/text truncate <text> <limit>",
        args={"<text>": "Text to truncate.", "<limit>": "Maximum characters kept."},
    ),
)
@click.argument("value", metavar="TEXT", type=str)
@click.argument("limit", type=click.IntRange(min=0))
def truncate(value: str, limit: int) -> None:
    value_print(console, "truncated", text_truncate(value, limit))


@text.command(
    cls=RichCommand,
    help=rich_help(
        command="encode",
        description="Base64-encode text.",
        usage="/text encode <text>",
        args={"<text>": "Text to encode."},
    ),
)
@click.argument("value", metavar="TEXT", type=str)
def encode(value: str) -> None:
    value_print(console, "base64", base64_encode(value))


@text.command(
    cls=RichCommand,
    help=rich_help(
        command="decode",
        description="Decode base64 text.",
        usage="/text decode <text>",
        args={"<text>": "Standard, padded base64."},
    ),
)
@click.argument("value", metavar="TEXT", type=str)
def decode(value: str) -> None:
    try:
        value_print(console, "decoded", base64_decode(value))
    except ValueError as e:
        error_print(console, "text decode", e)


@text.command(
    cls=RichCommand,
    help=rich_help(
        command="ranges",
        description="Expand integer ranges into a list.",
        usage="/text ranges <range>...",
        args={"<range>": "A single integer or start-end, e.g. 1-3."},
    ),
)
@click.argument("ranges", nargs=-1, required=True)
def ranges(ranges: tuple[str, ...]) -> None:
    try:
        value_print(console, "ranges", " ".join(str(n) for n in ranges_parse(ranges)))
    except ValueError as e:
        error_print(console, "text ranges", e)
