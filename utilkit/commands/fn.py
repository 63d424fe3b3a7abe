"""
Placeholder Function Commands

Commands:
- /fn list: List the functions available to {{name(args)}} placeholders.
- /fn call <name> [args]: Invoke one function directly.
"""

from rich.console import Console
import click
from rich.markup import escape
from utilkit.commands.base import RichGroup, RichCommand, rich_help, value_print
from utilkit.lib.placeholder import resolver_default
from utilkit.models.dataModel import ParseResult

console: Console = Console()


@click.group(
    cls=RichGroup,
    short_help="Placeholder functions",
    help="""
    Placeholder Functions

    Functions usable as {{name(args)}} in any input.
    """,
)
def fn() -> None:
    """
    Root group for placeholder function commands.
    """
    pass


fn: click.Group = fn


@fn.command(
    name="list",
    cls=RichCommand,
    help=rich_help(
        command="list",
        description="List the available placeholder functions.",
        usage="/fn list",
        args={},
    ),
)
def list_() -> None:
    console.print("[bold yellow]Functions:[/bold yellow]")
    for name in resolver_default.registry.names:
        console.print(f"- [cyan]{name}[/cyan]")


@fn.command(
    cls=RichCommand,
    help=rich_help(
        command="call",
        description="Invoke a placeholder function and print its result.",
        usage="/fn call <name> [args]",
        args={
            "<name>": "Function name, any case.",
            "[args]": "Argument text, e.g. a length or a date layout.",
        },
    ),
)
@click.argument("name", type=str)
@click.argument("args", type=str, default="")
def call(name: str, args: str) -> None:
    result: ParseResult = resolver_default.registry.call(name, args.strip())
    if result.success:
        value_print(console, name, result.text)
    else:
        console.print(f"[bold red]Error:[/bold red] {escape(result.error or '')}")
