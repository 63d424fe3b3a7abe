"""
Interactive loop for utilkit.

Every line typed at the prompt is handled exactly like `--ask` text:
placeholders are resolved and the result printed, and a resolved line that
starts with '/' runs as a palette command. The session ends on /exit, Ctrl-D,
Ctrl-C at the prompt, or an unexpected error.
"""

from rich.console import Console
from rich.markup import escape
from typing import Final
from utilkit.commands.app import cli
from utilkit.lib.input import input_get, input_handle
from utilkit.lib.log import LOG
from utilkit.models.dataModel import InputResult

console: Final[Console] = Console()


def banner_render() -> str:
    """Welcome text listing the command groups currently registered."""
    groups: str = " ".join(f"[white]/{name}[/white]" for name in sorted(cli.commands))
    return (
        "[cyan]Welcome to the utilkit REPL![/cyan]\n"
        "[green]Text is resolved and echoed: try [white]${HOME}[/white] or "
        "[white]{{uuid()}}[/white].[/green]\n"
        f"[green]Commands: {groups} [white]/help[/white] [white]/exit[/white][/green]\n"
        "[green]A leading backslash prints the rest of the line untouched.[/green]"
    )


async def repl_step() -> bool:
    """Read and handle one line.

    Returns:
        bool: False once the session should end
    """
    input_result: InputResult = await input_get()
    if not input_result.continue_loop:
        if input_result.error:
            LOG(f"Leaving REPL: {input_result.error}")
        return False

    line: str = input_result.text.strip()
    if not line:
        return True
    return await input_handle(text=line, non_interactive=False)


async def repl_do() -> None:
    """Run the REPL until a step asks to stop."""
    console.print(banner_render())

    while True:
        try:
            if not await repl_step():
                break
        except KeyboardInterrupt:
            console.print("\n[bold yellow]Use '/exit' to quit properly[/bold yellow]")
        except Exception as e:
            LOG(f"REPL critical error: {e}")
            console.print(f"[bold red]Fatal error: {escape(str(e))}[/bold red]")
            break

    console.print("[bold cyan]REPL session terminated[/bold cyan]")
