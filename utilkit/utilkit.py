"""
utilkit Plugin Main Module.

This module is the entry point for utilkit, a ChRIS plugin and interactive
shell around a small set of conversion and validation helpers and a
placeholder resolver for `{{function()}}` and `${VAR}` templates.

Features:
- Resolves placeholders in text from stdin or --ask
- Renders template files from the input directory into the output directory
- Interactive REPL with a command palette (/bytes, /duration, /net, ...)
- Handles graceful termination on user interruption

Examples:
    Resolve a single string:
        $ utilkit --ask 'build {{uuid()}} by ${USER}' in/ out/

    Resolve stdin:
        $ echo 'token={{randomHex(16)}}' | utilkit in/ out/

    Render templates:
        $ utilkit --render --pattern '**/*.conf' in/ out/

    Interactive REPL:
        $ utilkit in/ out/

Note:
    Input priority order:
    1. stdin (if available)
    2. --ask argument (if provided)
    3. --render (if given)
    4. interactive REPL (default)
"""

from pathlib import Path
from argparse import Namespace, ArgumentParser, ArgumentDefaultsHelpFormatter
from chris_plugin import chris_plugin
from utilkit.config.settings import appsettings
from utilkit.lib.input import mode_detect, input_readStdin, input_handle
from utilkit.lib.render import files_render
from utilkit.lib.repl import repl_do
from utilkit.models.dataModel import InputMode, RenderResult
import asyncio
import signal
from rich.console import Console
from utilkit.lib.log import LOG
import sys
from typing import Final, Optional
from types import FrameType

__version__: Final[str] = "0.1.0"

DISPLAY_TITLE: Final[str] = """
 ╻ ╻╺┳╸╻╻  ╻┏ ╻╺┳╸
 ┃ ┃ ┃ ┃┃  ┣┻┓┃ ┃
 ┗━┛ ╹ ╹┗━╸╹ ╹╹ ╹
"""

console: Final[Console] = Console()

parser: Final[ArgumentParser] = ArgumentParser(
    description="Resolve {{function()}} and ${VAR} placeholders, render templates, "
    "and run conversion helpers.",
    formatter_class=ArgumentDefaultsHelpFormatter,
)
parser.add_argument("--ask", type=str, help="Text to resolve (alternative to stdin)")
parser.add_argument(
    "--render",
    action="store_true",
    help="Render files from the input directory into the output directory",
)
parser.add_argument(
    "--pattern",
    type=str,
    default=appsettings.renderPattern,
    help="Glob selecting the files to render",
)
parser.add_argument(
    "-V", "--version", action="version", version=f"%(prog)s {__version__}"
)


def render_report(result: RenderResult) -> None:
    """Print a summary of a render run."""
    console.print(
        f"[bold green]Rendered {len(result.rendered)} file(s)[/bold green]"
        + (f", [bold yellow]skipped {len(result.skipped)}[/bold yellow]" if result.skipped else "")
    )
    if appsettings.detailedOutput:
        for name in result.rendered:
            console.print(f"  [green]✓[/green] {name}")
        for name in result.skipped:
            console.print(f"  [yellow]-[/yellow] {name}")


async def async_main(options: Namespace, inputdir: Path, outputdir: Path) -> None:
    """Asynchronous main function handling all input modes.

    Args:
        options: Parsed command-line arguments
        inputdir: Directory containing template files
        outputdir: Directory receiving rendered files
    """
    try:
        mode: InputMode = await mode_detect(options.ask, options.render)

        if mode.has_stdin:
            input_text: str = await input_readStdin()
            await input_handle(input_text, non_interactive=True)

        elif mode.ask_string:
            await input_handle(mode.ask_string, non_interactive=True)

        elif mode.render:
            render_report(files_render(inputdir, outputdir, options.pattern))

        else:
            console.print(DISPLAY_TITLE)
            await repl_do()

    except Exception as e:
        LOG(f"Unhandled exception in async_main: {e}")
        console.print(f"[bold red]An unexpected error occurred: {e}[/bold red]")
        sys.exit(1)


def signal_handle(sig: int, frame: Optional[FrameType]) -> None:
    """Signal handler for graceful interruption."""
    console.print("\n[bold red]Interrupt received. Exiting.[/bold red]")
    sys.exit(0)


@chris_plugin(
    parser=parser,
    title="utilkit",
    category="Utility",
    min_memory_limit="100Mi",
    min_cpu_limit="1000m",
    min_gpu_limit=0,
)
def main(options: Namespace, inputdir: Path, outputdir: Path) -> None:
    """Main entry point for the ChRIS plugin.

    Args:
        options: Parsed command-line options
        inputdir: Directory containing input files
        outputdir: Directory for output files
    """
    signal.signal(signal.SIGINT, signal_handle)

    try:
        asyncio.run(async_main(options, inputdir, outputdir))
    except KeyboardInterrupt:
        console.print("\n[bold cyan]Program interrupted by user. Exiting.[/bold cyan]")
