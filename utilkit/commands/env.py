"""
Environment Commands

Variables set here are visible to `${NAME}` placeholders for the rest of the
session.

Commands:
- /env get <name> [--default VALUE]: Show a variable.
- /env set <name> <value>: Set a variable (an empty value is ignored).
"""

from rich.console import Console
import click
from utilkit.commands.base import RichGroup, RichCommand, rich_help, value_print
from utilkit.lib.environment import env_get, env_set

console: Console = Console()


@click.group(
    cls=RichGroup,
    short_help="Read and set environment variables",
    help="""
    Environment Variables

    Read and set process environment variables.
    """,
)
def env() -> None:
    """
    Root group for environment commands.
    """
    pass


env: click.Group = env


@env.command(
    cls=RichCommand,
    help=rich_help(
        command="get",
        description="Show the value of an environment variable.",
        usage="/env get <name> [--default VALUE]",
        args={
            "<name>": "Variable name.",
            "--default": "Value shown when the variable is not set.",
        },
    ),
)
@click.argument("name", type=str)
@click.option("--default", "default", type=str, default="", help="Fallback value")
def get(name: str, default: str) -> None:
    value_print(console, name, env_get(name, default))


@env.command(
    name="set",
    cls=RichCommand,
    help=rich_help(
        command="set",
        description="Set an environment variable for this session.",
        usage="/env set <name> <value>",
        args={
            "<name>": "Variable name.",
            "<value>": "Value to assign; empty values are ignored.",
        },
    ),
)
@click.argument("name", type=str)
@click.argument("value", type=str)
def set_(name: str, value: str) -> None:
    env_set(name, value)
    if value:
        console.print(f"[bold green]Variable '{name}' set successfully.[/bold green]")
    else:
        console.print(f"[bold yellow]Empty value, '{name}' left unchanged.[/bold yellow]")
