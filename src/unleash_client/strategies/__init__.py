"""
Strategies
==========
Built-in toggle strategies and the registry that maps names to them.
"""

from unleash_client.strategies.base import Strategy, normalized_value
from unleash_client.strategies.default import DefaultStrategy, UnknownStrategy
from unleash_client.strategies.gradual_rollout import (
    GradualRolloutRandomStrategy,
    GradualRolloutSessionIdStrategy,
    GradualRolloutUserIdStrategy,
)
from unleash_client.strategies.registry import (
    BUILTIN_STRATEGIES,
    StrategyRegistry,
    get_strategy_registry,
)
from unleash_client.strategies.targeting import (
    ApplicationHostnameStrategy,
    RemoteAddressStrategy,
    UserWithIdStrategy,
)

__all__ = [
    "Strategy",
    "StrategyRegistry",
    "get_strategy_registry",
    "normalized_value",
    "BUILTIN_STRATEGIES",
    "DefaultStrategy",
    "UnknownStrategy",
    "ApplicationHostnameStrategy",
    "GradualRolloutRandomStrategy",
    "GradualRolloutSessionIdStrategy",
    "GradualRolloutUserIdStrategy",
    "RemoteAddressStrategy",
    "UserWithIdStrategy",
]
