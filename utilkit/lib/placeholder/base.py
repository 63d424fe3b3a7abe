r"""
Base scanner implementation for placeholder substitution.

Provides a generic scanning engine that rewrites every non-overlapping match of
a compiled pattern using a resolver strategy. Each match attempt yields a
`ParseResult`; its `text` is folded back into the output, so an unresolved
attempt leaves the original match in place.

The scanner handles:
- Left-to-right, non-overlapping pattern matching
- Resolver strategy pattern for different token shapes
- Fail-soft substitution (a failed match never aborts the scan)

Two token shapes are recognized:
- Function calls:  {{name(args)}}
- Environment:     ${NAME} or {NAME}

Example:
    scanner = TokenScanner(ENV_PATTERN, EnvironmentResolver())
    text = scanner.parse("home is ${HOME}")
"""

import re
from typing import Final, Protocol, runtime_checkable
from utilkit.models.dataModel import ParseResult

IDENTIFIER: Final[str] = r"[A-Za-z_][A-Za-z0-9_]*"

# {{function()}} or {{function(args)}}
FUNCTION_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"\{\{(" + IDENTIFIER + r")\(([^)]*)\)\}\}"
)

# ${NAME} or {NAME}; a bare {{NAME}} is matched first (group 1 empty) and kept literal
ENV_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"\{\{" + IDENTIFIER + r"\}\}|\$?\{(" + IDENTIFIER + r")\}"
)


@runtime_checkable
class TokenResolver(Protocol):
    """Protocol defining the resolver interface for placeholder substitution.

    Resolvers receive the regex match for one placeholder and return a
    ParseResult whose `text` replaces the match in the output.
    """

    def resolve(self, match: re.Match[str]) -> ParseResult:
        """Resolve one matched placeholder.

        Args:
            match: The match object for the placeholder

        Returns:
            ParseResult containing:
                - text: Substituted value, or the original match if unresolved
                - error: Reason for leaving the placeholder unresolved
                - success: Whether resolution succeeded
        """
        ...


class TokenScanner:
    """Single-pass placeholder scanner.

    Immutable after construction and holds no per-scan state, so one instance
    may be shared between threads.

    Attributes:
        pattern: Compiled pattern recognizing one token shape
        resolver: Strategy for resolving matched tokens
    """

    __slots__ = ("_pattern", "_resolver")

    def __init__(self, pattern: re.Pattern[str], resolver: TokenResolver) -> None:
        self._pattern: re.Pattern[str] = pattern
        self._resolver: TokenResolver = resolver

    @property
    def pattern(self) -> re.Pattern[str]:
        return self._pattern

    @property
    def resolver(self) -> TokenResolver:
        return self._resolver

    def parse(self, text: str) -> str:
        """Rewrite every match of the pattern in `text`.

        Args:
            text: Text to scan

        Returns:
            The text with each match replaced by its resolution
        """
        if not text or not self._pattern.search(text):
            return text
        return self._pattern.sub(self._substitute, text)

    def _substitute(self, match: re.Match[str]) -> str:
        return self._resolver.resolve(match).text
