"""
Slash command dispatch.

A resolved input line starting with '/' is split shell-style and handed to the
click palette in `utilkit.commands.app`:

    /bytes parse 125MiB     -> bytes parse 125MiB
    /help                   -> palette overview
    /help bytes             -> help for one group
    /exit, /quit            -> end the session

Click runs with `standalone_mode=False`, so usage errors come back as
exceptions and are reported on the console; the session carries on.
"""

import shlex
import click
from typing import Final
from rich.console import Console
from rich.markup import escape
from utilkit.commands.app import cli
from utilkit.commands.base import error_print
from utilkit.lib.log import LOG

console: Final[Console] = Console()

EXIT_COMMANDS: Final[frozenset[str]] = frozenset({"exit", "quit"})


def command_split(user_input: str) -> list[str] | None:
    """Split '/command args...' into words.

    Returns:
        The words, or None (after reporting why) for unbalanced quotes or an
        empty command
    """
    try:
        parts: list[str] = shlex.split(user_input[1:])
    except ValueError as e:
        LOG(f"Error parsing command: {e}")
        console.print(f"[bold red]Error parsing input: {escape(str(e))}[/bold red]")
        return None
    if not parts:
        console.print("[bold red]Error: No command provided.[/bold red]")
        return None
    return parts


def groups_list() -> str:
    return ", ".join(f"/{name}" for name in sorted(cli.commands))


def command_process(user_input: str) -> bool:
    """Run a '/'-prefixed command line.

    Args:
        user_input: Command line, starting with '/'

    Returns:
        bool: False for /exit or /quit, True otherwise (including on errors)
    """
    parts: list[str] | None = command_split(user_input)
    if parts is None:
        return True

    command: str = parts[0]
    if command in EXIT_COMMANDS:
        return False

    # "/help" -> --help, "/help bytes" -> bytes --help
    args: list[str] = parts[1:2] + ["--help"] if command == "help" else parts

    try:
        cli.main(args=args, prog_name="/", standalone_mode=False)
    except click.exceptions.UsageError as e:
        console.print(f"[bold red]Error:[/bold red] {escape(e.format_message())}")
        if command not in cli.commands and command != "help":
            console.print(f"[yellow]Available commands:[/yellow] {groups_list()}")
    except SystemExit:
        pass
    except Exception as e:
        error_print(console, "Command processing error", e)
    return True
