"""
Test Configuration
==================
Pytest fixtures for the Unleash client tests.
"""

from typing import Any, Optional

import pytest

from unleash_client import Configuration, Context, Strategy, StrategyRegistry


class GradualRolloutStrategy(Strategy):
    """Custom strategy used to exercise registration."""

    def is_enabled(self, params: Optional[dict[str, Any]] = None, context: Optional[Context] = None) -> bool:
        return True


class DuckTypedStrategy:
    """Custom strategy that does not subclass Strategy."""

    def is_enabled(self, params=None, context=None):
        return False


class NotAStrategy:
    """Class without an is_enabled method."""


@pytest.fixture
def registry() -> StrategyRegistry:
    """Fresh registry so tests do not touch the process-wide one."""
    return StrategyRegistry.with_builtins()


@pytest.fixture
def options(registry: StrategyRegistry) -> dict[str, Any]:
    """Minimal valid options for an enabled client."""
    return {
        "app_name": "svc-a",
        "url": "http://flags.example/api",
        "strategy_registry": registry,
    }


@pytest.fixture
def config(options: dict[str, Any]) -> Configuration:
    """Configuration built from the minimal options."""
    return Configuration(**options)


@pytest.fixture
def context() -> Context:
    """Sample evaluation context."""
    return Context(
        app_name="svc-a",
        environment="production",
        user_id="user-123",
        session_id="session-456",
        remote_address="10.0.0.1",
    )


@pytest.fixture
def gradual_rollout_strategy() -> type[Strategy]:
    return GradualRolloutStrategy


@pytest.fixture
def duck_typed_strategy() -> type:
    return DuckTypedStrategy


@pytest.fixture
def not_a_strategy() -> type:
    return NotAStrategy
