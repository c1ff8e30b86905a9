"""
Strategy Registry
=================
Process-wide mapping from strategy name to strategy instance.
"""

import logging
import threading
from collections.abc import Mapping
from functools import lru_cache
from types import MappingProxyType
from typing import Optional

from unleash_client.strategies.base import Strategy
from unleash_client.strategies.default import DefaultStrategy, UnknownStrategy
from unleash_client.strategies.gradual_rollout import (
    GradualRolloutRandomStrategy,
    GradualRolloutSessionIdStrategy,
    GradualRolloutUserIdStrategy,
)
from unleash_client.strategies.targeting import (
    ApplicationHostnameStrategy,
    RemoteAddressStrategy,
    UserWithIdStrategy,
)

logger = logging.getLogger(__name__)

BUILTIN_STRATEGIES: tuple[type[Strategy], ...] = (
    DefaultStrategy,
    ApplicationHostnameStrategy,
    GradualRolloutRandomStrategy,
    GradualRolloutSessionIdStrategy,
    GradualRolloutUserIdStrategy,
    RemoteAddressStrategy,
    UserWithIdStrategy,
    UnknownStrategy,
)


class StrategyRegistry:
    """
    Registry of strategies available to the evaluation engine.

    Entries are only ever added or replaced, never removed. Every merge
    publishes a new read-only snapshot under a lock, so readers never see a
    partially merged table.
    """

    def __init__(self, strategies: Optional[Mapping[str, Strategy]] = None):
        self._lock = threading.Lock()
        self._snapshot: Mapping[str, Strategy] = MappingProxyType(dict(strategies or {}))

    @classmethod
    def with_builtins(cls) -> "StrategyRegistry":
        """Create a registry seeded with the built-in strategies."""
        return cls({strategy_class.name: strategy_class() for strategy_class in BUILTIN_STRATEGIES})

    def merge(self, strategies: Mapping[str, Strategy]) -> Mapping[str, Strategy]:
        """
        Merge strategies into the registry, replacing entries with the same name.

        Returns:
            The merged snapshot
        """
        with self._lock:
            merged = dict(self._snapshot)
            merged.update(strategies)
            snapshot = MappingProxyType(merged)
            self._snapshot = snapshot

        if strategies:
            logger.debug(f"Merged strategies into registry: {', '.join(strategies)}")
        return snapshot

    def snapshot(self) -> Mapping[str, Strategy]:
        """Return the current read-only view of the registry."""
        return self._snapshot

    def get(self, name: str) -> Optional[Strategy]:
        return self._snapshot.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._snapshot

    def __len__(self) -> int:
        return len(self._snapshot)


@lru_cache
def get_strategy_registry() -> StrategyRegistry:
    """Get the process-wide strategy registry."""
    return StrategyRegistry.with_builtins()
