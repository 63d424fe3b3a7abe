"""
Base classes and helpers for Rich-enhanced Click commands and groups.

This module defines:
- `RichGroup`: A Click group whose help lists its subcommands in a Rich table.
- `RichCommand`: A Click command whose help is rendered in a Rich panel.
- `rich_help`: Builds the marked-up help text used by commands.
- `value_print` / `error_print`: Uniform result and error output for commands.
- `help_guarded`: Keeps a help rendering failure from ending the session.

Command output goes to the module-level `console` of each command module so
that tests can swap in a capturing console.
"""

import functools
import click
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from utilkit.lib.log import LOG

console: Console = Console()


def rich_help(command: str, description: str, usage: str, args: dict) -> str:
    """
    Generate Rich-enhanced help text for commands.

    :param command: The command name.
    :param description: Description of the command.
    :param usage: Usage syntax for the command.
    :param args: Dictionary of arguments and their descriptions.
    :return: Formatted Rich help string.
    """
    help_text = f"[bold cyan]{description}[/bold cyan]\n\n"
    help_text += f"[bold yellow]Usage:[/bold yellow]\n    [green]{usage}[/green]\n\n"
    if args:
        help_text += "[bold yellow]Arguments:[/bold yellow]\n"
        for arg, desc in args.items():
            help_text += f"    [green]{escape(arg)}[/green]: {desc}\n"
    return help_text


def value_print(out: Console, label: str, value: object) -> None:
    """Print `label: value`, with the value escaped from Rich markup."""
    out.print(f"[bold cyan]{escape(label)}:[/bold cyan] {escape(str(value))}")


def error_print(out: Console, context: str, e: Exception) -> None:
    """Log an exception raised by a command and report it to the user."""
    LOG(f"{context}: {e}")
    out.print(f"[bold red]Error:[/bold red] {escape(str(e))}")


def help_guarded(format_help):
    """Report a failure to render help instead of letting it end the session."""

    @functools.wraps(format_help)
    def wrapper(self, ctx: click.Context, formatter: click.HelpFormatter) -> None:
        try:
            format_help(self, ctx, formatter)
        except Exception as e:
            LOG(f"Help rendering error for '{ctx.info_name}': {e}", level="ERROR")
            console.print(f"[bold red]Help rendering error:[/bold red] {escape(str(e))}")

    return wrapper


def summary_get(command: click.Command) -> str:
    """One line describing `command` in a group listing.

    Commands built with `rich_help` carry markup in their help, so the
    summary is taken from the plain text rather than click's short help.
    """
    if command.short_help:
        return command.short_help
    plain: str = Text.from_markup(command.help or "").plain.strip()
    return plain.splitlines()[0] if plain else "No description available."


class RichGroup(click.Group):
    """
    A Click Group whose help lists its subcommands in a Rich table.
    """

    @help_guarded
    def format_help(self, ctx: click.Context, formatter: click.HelpFormatter) -> None:
        path: str = "/" + " ".join(ctx.command_path.lstrip("/").split())
        console.print(
            f"[bold yellow]Usage:[/bold yellow] [cyan]{escape(path)}[/cyan] "
            f"[magenta]COMMAND \\[ARGS]...[/magenta]\n"
        )
        if self.help:
            console.print(f"[bold cyan]{self.help.strip()}[/bold cyan]\n")
        if not self.commands:
            return

        listing: Table = Table(box=None, show_header=False, padding=(0, 2))
        listing.add_column(style="cyan", no_wrap=True)
        listing.add_column(style="white")
        for name, command in sorted(self.commands.items()):
            listing.add_row(name, Text(summary_get(command)))
        console.print("[bold green]Available Commands:[/bold green]")
        console.print(listing)
        console.print()


class RichCommand(click.Command):
    """
    A Click Command that renders its help text inside a Rich panel.
    """

    @help_guarded
    def format_help(self, ctx: click.Context, formatter: click.HelpFormatter) -> None:
        help_text: str = self.help or "No help text available."
        widest: int = max(len(line) for line in help_text.splitlines())
        console.print(
            Panel(
                help_text,
                title=escape(ctx.info_name or ""),
                expand=False,
                width=min(widest + 10, 80),
                border_style="cyan",
            )
        )
