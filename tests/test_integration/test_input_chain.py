"""Integration tests for utilkit input processing."""

import io
import re
import pytest
from unittest.mock import patch
from rich.console import Console
from utilkit.lib.input import input_process
from utilkit.models.dataModel import ParseResult


@pytest.mark.asyncio
async def test_environment_resolution_chain():
    with patch(
        "utilkit.lib.placeholder.resolvers.EnvironmentResolver.resolve"
    ) as mock_resolve:
        mock_resolve.return_value = ParseResult(text="test_value", error=None, success=True)
        result = await input_process("Hello ${var}")
        assert result.success
        assert result.text == "Hello test_value"


@pytest.mark.asyncio
async def test_function_result_feeds_environment_pass(monkeypatch):
    monkeypatch.setenv("CHAIN_TARGET", "resolved twice")
    with patch(
        "utilkit.lib.placeholder.resolvers.FunctionResolver.resolve"
    ) as mock_function:
        mock_function.return_value = ParseResult(
            text="${CHAIN_TARGET}", error=None, success=True
        )
        result = await input_process("value: {{anything()}}")
    assert result.text == "value: resolved twice"


@pytest.mark.asyncio
async def test_placeholder_inside_command_chain(monkeypatch):
    monkeypatch.setenv("CHAIN_SIZE", "3MiB")
    output = io.StringIO()
    with patch("utilkit.commands.size.console", Console(file=output, width=200)):
        result = await input_process("/bytes parse ${CHAIN_SIZE}")
    assert result.success
    assert result.is_command
    assert "3MiB: 3145728 bytes" in output.getvalue()


@pytest.mark.asyncio
async def test_generated_value_inside_command_chain():
    output = io.StringIO()
    with patch("utilkit.commands.text.console", Console(file=output, width=200)):
        result = await input_process("/text encode {{randomHex(6)}}")
    assert result.is_command
    encoded = re.search(r"base64: (\S+)", output.getvalue())
    assert encoded
    assert len(encoded.group(1)) == 8


@pytest.mark.asyncio
async def test_escape_skips_resolution_and_commands(monkeypatch):
    monkeypatch.setenv("CHAIN_SIZE", "3MiB")
    result = await input_process("\\/bytes parse ${CHAIN_SIZE}")
    assert not result.is_command
    assert result.text == "/bytes parse ${CHAIN_SIZE}"
