"""
Placeholder resolvers.

Implements the resolution strategies for the two token shapes and the
top-level resolver that composes them:
- Function calls: dispatched to a FunctionRegistry
- Environment variables: looked up in the live process environment

Resolution order matters: function calls are substituted first, so the
environment pass only ever sees single-brace and dollar-brace forms.
"""

import os
import re
from typing import Callable, Final
from utilkit.lib.log import LOG
from utilkit.lib.placeholder.base import ENV_PATTERN, FUNCTION_PATTERN, TokenScanner
from utilkit.lib.placeholder.functions import FunctionRegistry
from utilkit.models.dataModel import ParseResult

EnvLookup = Callable[[str], str | None]


def env_lookup(name: str) -> str | None:
    """Read `name` from the process environment at call time."""
    return os.environ.get(name)


class FunctionResolver:
    """Resolver for `{{name(args)}}` tokens using a function registry."""

    def __init__(self, registry: FunctionRegistry) -> None:
        self.registry: FunctionRegistry = registry

    def resolve(self, match: re.Match[str]) -> ParseResult:
        """Invoke the named function with the trimmed argument text.

        Args:
            match: FUNCTION_PATTERN match (group 1 name, group 2 args)

        Returns:
            ParseResult with the generated text, or the original match
        """
        name: str = match.group(1)
        args: str = match.group(2).strip()
        result: ParseResult = self.registry.call(name, args)
        if result.success:
            return result
        LOG(f"Leaving {match.group(0)} unresolved: {result.error}")
        return ParseResult(text=match.group(0), error=result.error, success=False)


class EnvironmentResolver:
    """Resolver for `${NAME}` and `{NAME}` tokens using the environment."""

    def __init__(self, lookup: EnvLookup = env_lookup) -> None:
        self.lookup: EnvLookup = lookup

    def resolve(self, match: re.Match[str]) -> ParseResult:
        name: str | None = match.group(1)
        if name is None:
            return ParseResult(
                text=match.group(0),
                error=f"Ambiguous double-brace token: {match.group(0)}",
                success=False,
            )
        value: str | None = self.lookup(name)
        if value is None:
            LOG(f"Environment variable not set: {name}")
            return ParseResult(
                text=match.group(0), error=f"Variable not set: {name}", success=False
            )
        return ParseResult(text=value, error=None, success=True)


class PlaceholderResolver:
    """Two-pass placeholder resolver.

    Applies function-call substitution, then environment substitution. Never
    raises: every failed placeholder is simply left in the output.

    Attributes:
        registry: Function registry used for `{{name(args)}}` tokens
        function_scanner: Scanner for the function pass
        env_scanner: Scanner for the environment pass
    """

    def __init__(
        self, registry: FunctionRegistry | None = None, lookup: EnvLookup = env_lookup
    ) -> None:
        self.registry: FunctionRegistry = registry or FunctionRegistry()
        self.function_scanner: TokenScanner = TokenScanner(
            FUNCTION_PATTERN, FunctionResolver(self.registry)
        )
        self.env_scanner: TokenScanner = TokenScanner(
            ENV_PATTERN, EnvironmentResolver(lookup)
        )

    def replace(self, text: str) -> str:
        """Resolve all placeholders in `text`.

        Args:
            text: Input text

        Returns:
            Text with function calls and environment variables substituted
        """
        if not text:
            return text
        return self.env_scanner.parse(self.function_scanner.parse(text))


resolver_default: Final[PlaceholderResolver] = PlaceholderResolver()


def envVars_replace(text: str, resolver: PlaceholderResolver | None = None) -> str:
    """Replace environment variables and built-in functions in `text`.

    Supports:
    - ${VAR_NAME} or {VAR_NAME}     environment variables
    - {{randomString(length)}}      random alphanumeric string
    - {{randomHex(length)}}         random hex string
    - {{uuid()}}                    UUID v4
    - {{timestamp()}}               Unix timestamp in seconds
    - {{timestampMs()}}             Unix timestamp in milliseconds
    - {{date(format)}}              formatted date (default RFC 3339)
    - {{now()}}                     current time, RFC 3339
    """
    return (resolver or resolver_default).replace(text)
