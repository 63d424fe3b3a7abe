"""
Defines the main Click command group for the utilkit application.

This module provides:
- The root `cli` command group for the application.
- Registration of subcommands from other modules.

Usage:
Import `cli` to run the command palette.
"""

import click
from utilkit.commands.base import RichGroup
from utilkit.commands.duration import duration
from utilkit.commands.env import env
from utilkit.commands.fn import fn
from utilkit.commands.net import net
from utilkit.commands.size import size
from utilkit.commands.text import text


@click.group(
    cls=RichGroup,
    help="""
    utilkit Command Palette

    Conversions, validation and placeholder helpers.
    """,
)
def cli() -> None:
    """
    The root Click command group for utilkit.
    """
    pass


cli: click.Group = cli

cli.add_command(size)
cli.add_command(duration)
cli.add_command(net)
cli.add_command(env)
cli.add_command(text)
cli.add_command(fn)
