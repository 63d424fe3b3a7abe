"""
Tests for slash command dispatch.
"""

import io
from typing import Generator
import pytest
from unittest.mock import patch
from rich.console import Console
from utilkit.lib.command import command_process


@pytest.fixture
def command_output() -> Generator[io.StringIO, None, None]:
    output = io.StringIO()
    with patch("utilkit.lib.command.console", Console(file=output, width=200)):
        yield output


@pytest.fixture
def size_output() -> Generator[io.StringIO, None, None]:
    output = io.StringIO()
    with patch("utilkit.commands.size.console", Console(file=output, width=200)):
        yield output


def test_exit() -> None:
    assert command_process("/exit") is False


def test_dispatch_to_group(size_output: io.StringIO) -> None:
    assert command_process("/bytes humanize 1048576") is True
    assert "1048576: 1.00 MiB" in size_output.getvalue()


def test_quoted_arguments() -> None:
    with patch("utilkit.commands.text.console", Console(file=io.StringIO(), width=200)) as out:
        assert command_process('/text slug "Hello There World"') is True
        assert "slug: hello-there-world" in out.file.getvalue()


def test_empty_command(command_output: io.StringIO) -> None:
    assert command_process("/") is True
    assert "No command provided" in command_output.getvalue()


def test_unbalanced_quotes(command_output: io.StringIO) -> None:
    assert command_process('/text slug "open') is True
    assert "Error parsing input" in command_output.getvalue()


def test_unknown_command(command_output: io.StringIO) -> None:
    assert command_process("/nosuch") is True
    assert "No such command" in command_output.getvalue()


def test_help_does_not_exit() -> None:
    with patch("utilkit.commands.base.console", Console(file=io.StringIO(), width=200)) as out:
        assert command_process("/help") is True
        output = out.file.getvalue()
    for group in ["bytes", "duration", "net", "env", "text", "fn"]:
        assert group in output


def test_quit_alias() -> None:
    assert command_process("/quit") is False


def test_unknown_command_lists_groups(command_output: io.StringIO) -> None:
    command_process("/nosuch")
    assert "Available commands: /bytes, /duration, /env, /fn, /net, /text" in command_output.getvalue()


def test_help_for_one_group() -> None:
    with patch("utilkit.commands.base.console", Console(file=io.StringIO(), width=200)) as out:
        assert command_process("/help bytes") is True
        output = out.file.getvalue()
    assert "humanize" in output
    assert "parse" in output
    assert "duration" not in output


def test_group_help_shows_plain_summaries() -> None:
    with patch("utilkit.commands.base.console", Console(file=io.StringIO(), width=200)) as out:
        command_process("/help bytes")
        output = out.file.getvalue()
    assert "Show a byte count in a human-readable unit." in output
    assert "[bold cyan]" not in output


def test_command_help_panel() -> None:
    with patch("utilkit.commands.base.console", Console(file=io.StringIO(), width=200)) as out:
        assert command_process("/bytes humanize --help") is True
        output = out.file.getvalue()
    assert "humanize" in output
    assert "/bytes humanize <count>" in output
