"""
Result and mode types passed between utilkit's layers.

Pydantic models are used where a value crosses from the input layer to the
console or the plugin entrypoint; the two small network checks return plain
named tuples.
"""

from pydantic import BaseModel, Field
from typing import NamedTuple


class ParseResult(BaseModel):
    """Result of a single placeholder resolution attempt.

    A resolved attempt carries the substituted value. An unresolved attempt
    carries the original matched text so that folding `text` back into the
    output leaves the placeholder literal.

    Attributes:
        text: The replacement text (value, or the original match)
        error: Reason the placeholder was left unresolved
        success: Whether resolution succeeded
    """

    text: str
    error: str | None
    success: bool


class InputResult(BaseModel):
    """One read from the prompt. `continue_loop` is False on Ctrl-C/Ctrl-D."""

    text: str
    continue_loop: bool
    error: str | None = None


class ProcessResult(BaseModel):
    """What became of one line of input.

    `text` is the resolved line (or the command line that ran). `should_exit`
    is set by /exit and /quit, and by any failure; `exit_code` is what a
    non-interactive run exits with.
    """

    text: str
    is_command: bool
    should_exit: bool
    error: str | None = None
    success: bool = True
    exit_code: int = 0


class InputMode(BaseModel):
    """How this run gets its input. At most one source is set; otherwise `use_repl`."""

    has_stdin: bool = False
    ask_string: str | None = None
    render: bool = False
    use_repl: bool = True


class RenderResult(BaseModel):
    """Outcome of rendering a directory of template files.

    Attributes:
        rendered: Files written to the output directory
        skipped: Files left out (not UTF-8, unreadable, unwritable or outside inputdir)
    """

    rendered: list[str] = Field(default_factory=list)
    skipped: list[str] = Field(default_factory=list)


class IPClassification(NamedTuple):
    isIP: bool
    isCIDR: bool


class MethodValidation(NamedTuple):
    valid: bool
    invalid: list[str]
