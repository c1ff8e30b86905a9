"""
Strategy Base
=============
The capability every strategy, built-in or custom, must expose.
"""

import inspect
from abc import ABC, abstractmethod
from typing import Any, Optional

import mmh3

from unleash_client.models import Context


class Strategy(ABC):
    """
    Base class for toggle activation strategies.

    A strategy decides whether a toggle is enabled for a given evaluation
    context. Custom strategies may subclass this or simply define a callable
    ``is_enabled``; both are accepted when registering.

    Usage:
        class BetaTesters(Strategy):
            name = "betaTesters"

            def is_enabled(self, params=None, context=None):
                return context is not None and context.user_id in BETA_USERS
    """

    name: str = ""

    @abstractmethod
    def is_enabled(
        self,
        params: Optional[dict[str, Any]] = None,
        context: Optional[Context] = None,
    ) -> bool:
        """
        Evaluate the strategy.

        Args:
            params: Strategy parameters from the toggle definition
            context: Evaluation context

        Returns:
            True when the strategy's condition holds
        """


def supports_is_enabled(candidate: Any) -> bool:
    """Check that a strategy class exposes a callable is_enabled and can be instantiated."""
    return (
        isinstance(candidate, type)
        and not inspect.isabstract(candidate)
        and callable(getattr(candidate, "is_enabled", None))
    )


def registry_key(strategy_class: type) -> str:
    """Derive the registry key from a class name: first character lowercased."""
    class_name = strategy_class.__name__
    return class_name[:1].lower() + class_name[1:]


def split_list(value: Any) -> list[str]:
    """Split a comma separated parameter into stripped, non-empty items."""
    if not value:
        return []
    return [item.strip() for item in str(value).split(",") if item.strip()]


def parse_percentage(value: Any) -> int:
    """Parse a rollout percentage; anything unparsable counts as 0."""
    try:
        return int(value)
    except (TypeError, ValueError):
        return 0


def normalized_value(identifier: str, group_id: str) -> int:
    """
    Map an identifier into the 1..100 bucket range.

    Uses the 32-bit murmur3 hash (seed 0) of ``"<group_id>:<identifier>"``,
    which keeps rollout buckets consistent with other Unleash SDKs.
    """
    return mmh3.hash(f"{group_id}:{identifier}", 0, signed=False) % 100 + 1
