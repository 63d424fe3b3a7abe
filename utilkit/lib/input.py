"""
Where text enters utilkit and what happens to it.

Text arrives from piped stdin, from `--ask`, or from the interactive prompt,
and every line takes the same path through `input_process`:

    \\anything          -> printed as-is, minus the backslash
    hi ${USER}         -> resolved, then printed
    /bytes parse 1K    -> resolved, then run as a palette command

Resolution happens before the '/' check, so a placeholder may expand into a
command. The prompt keeps its history in the user data directory, trimmed to
`historyLength` entries after each line.
"""

import sys
from pathlib import Path
from typing import Final, Optional
from prompt_toolkit import PromptSession
from prompt_toolkit.history import FileHistory
from rich.console import Console
from rich.markup import escape
from utilkit.config.settings import HISTORY_FILE, appsettings, dataDir_ensure
from utilkit.lib.command import command_process
from utilkit.lib.log import LOG
from utilkit.lib.placeholder import envVars_replace
from utilkit.models.dataModel import InputMode, InputResult, ProcessResult

console: Final[Console] = Console()

PROMPT: Final[str] = "utilkit> "
ESCAPE: Final[str] = "\\"

prompt_session: Optional[PromptSession] = None


def history_trim(history_file: Path, length: int) -> None:
    """Keep at most `length` entries in a prompt_toolkit history file."""
    try:
        lines: list[str] = history_file.read_text(encoding="utf-8").splitlines(
            keepends=True
        )
    except FileNotFoundError:
        return
    # FileHistory entries start with a blank line and a '# timestamp' line
    starts: list[int] = [i for i, line in enumerate(lines) if line.startswith("#")]
    excess: int = len(starts) - length
    if excess > 0:
        keep_from: int = max(starts[excess] - 1, 0)
        history_file.write_text("".join(lines[keep_from:]), encoding="utf-8")


def session_get() -> PromptSession:
    """The prompt session, created with its history file on first use."""
    global prompt_session
    if prompt_session is None:
        dataDir_ensure()
        prompt_session = PromptSession(
            history=FileHistory(str(HISTORY_FILE)),
            enable_history_search=True,
        )
    return prompt_session


async def input_get() -> InputResult:
    """Prompt for one line.

    Ctrl-C and Ctrl-D at the prompt, or a broken terminal, come back with
    `continue_loop=False` and the reason in `error`.
    """
    try:
        line: str = (await session_get().prompt_async(PROMPT)).strip()
    except (KeyboardInterrupt, EOFError):
        return InputResult(text="", continue_loop=False, error="Interrupt received")
    except Exception as e:
        return InputResult(text="", continue_loop=False, error=f"Input error: {e}")

    if line:
        history_trim(HISTORY_FILE, appsettings.historyLength)
    return InputResult(text=line, continue_loop=True)


async def mode_detect(ask_string: str | None = None, render: bool = False) -> InputMode:
    """Pick the run mode: piped stdin, then --ask, then --render, else the REPL."""
    try:
        piped: bool = not sys.stdin.isatty()
    except Exception as e:
        LOG(f"Could not inspect stdin, assuming a terminal: {e}", level="WARNING")
        piped = False

    if piped:
        return InputMode(has_stdin=True, use_repl=False)
    if ask_string:
        return InputMode(ask_string=ask_string, use_repl=False)
    if render:
        return InputMode(render=True, use_repl=False)
    return InputMode(use_repl=True)


async def input_readStdin() -> str:
    """All of stdin, stripped.

    Raises:
        IOError: stdin is empty or unreadable
    """
    try:
        content: str = sys.stdin.read().strip()
    except Exception as e:
        LOG(f"Error reading from stdin: {e}")
        raise IOError(f"Failed to read from stdin: {e}")
    if not content:
        raise IOError("Empty input from stdin")
    return content


def result_failed(error: Exception, is_command: bool) -> ProcessResult:
    return ProcessResult(
        text="",
        is_command=is_command,
        should_exit=True,
        error=str(error),
        success=False,
        exit_code=1,
    )


async def input_process(text: str) -> ProcessResult:
    """Escape, resolve, then dispatch or return one line of input.

    Args:
        text: The line as typed or read

    Returns:
        ProcessResult: resolved text for plain input; for commands, whether
        the session should end. Failures carry the error and exit code 1.
    """
    if text.startswith(ESCAPE):
        return ProcessResult(text=text[len(ESCAPE):], is_command=False, should_exit=False)

    try:
        resolved: str = envVars_replace(text)
    except Exception as e:
        LOG(f"Error processing input: {e}")
        return result_failed(e, is_command=False)

    if not resolved.startswith("/"):
        return ProcessResult(text=resolved, is_command=False, should_exit=False)

    try:
        keep_going: bool = command_process(resolved)
    except Exception as e:
        LOG(f"Command processing error: {e}")
        return result_failed(e, is_command=True)
    return ProcessResult(text=resolved, is_command=True, should_exit=not keep_going)


async def input_handle(text: str, non_interactive: bool = False) -> bool:
    """Process `text` and show the outcome.

    Resolved text is printed verbatim, without Rich markup or emoji codes.

    Returns:
        bool: whether an interactive session should keep going

    Raises:
        SystemExit: in non-interactive mode, always, with the result's exit code
    """
    result: ProcessResult = await input_process(text)

    if not result.success:
        console.print(f"[bold red]Error: {escape(result.error or '')}[/bold red]")
    elif not result.is_command and result.text:
        console.print(result.text, markup=False, highlight=False, emoji=False, soft_wrap=True)

    if non_interactive:
        sys.exit(result.exit_code)

    if result.success and result.is_command and result.should_exit:
        console.print("[bold cyan]Exiting.[/bold cyan]")
        return False
    return True
