"""
Placeholder package for utilkit template substitution.

Provides a two-pass resolver for `{{function(args)}}` and `${NAME}` / `{NAME}`
placeholders built from small, immutable scanners and resolvers.
"""

from .base import ENV_PATTERN, FUNCTION_PATTERN, TokenResolver, TokenScanner
from .functions import FunctionRegistry
from .resolvers import (
    EnvironmentResolver,
    FunctionResolver,
    PlaceholderResolver,
    envVars_replace,
    resolver_default,
)

__all__ = [
    "ENV_PATTERN",
    "FUNCTION_PATTERN",
    "TokenResolver",
    "TokenScanner",
    "FunctionRegistry",
    "EnvironmentResolver",
    "FunctionResolver",
    "PlaceholderResolver",
    "envVars_replace",
    "resolver_default",
]
