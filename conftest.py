"""Shared fixtures for the utilkit test suite."""

import random
from datetime import datetime, timezone
from pathlib import Path
from typing import Final
import pytest
from utilkit.lib.placeholder import FunctionRegistry, PlaceholderResolver

FIXED_MOMENT: Final[datetime] = datetime(2024, 3, 5, 14, 7, 9, 120000, tzinfo=timezone.utc)
FIXTURES: Final[Path] = Path(__file__).parent / "tests" / "fixtures"


@pytest.fixture
def fixed_moment() -> datetime:
    return FIXED_MOMENT


@pytest.fixture
def fixed_registry() -> FunctionRegistry:
    """Registry with a frozen clock and a seeded random source."""
    return FunctionRegistry(
        clock=lambda: FIXED_MOMENT, random_source=random.Random(1234).randbytes
    )


@pytest.fixture
def fixed_resolver(fixed_registry: FunctionRegistry) -> PlaceholderResolver:
    return PlaceholderResolver(registry=fixed_registry)


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES
