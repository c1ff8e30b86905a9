"""
Unleash Client
==============
Configuration and strategy registry for the Unleash feature-flag client.
"""

from unleash_client.config import Configuration
from unleash_client.errors import (
    ConfigurationError,
    InvalidArgumentError,
    MissingRequiredFieldError,
    UnleashError,
)
from unleash_client.log import UnleashFormatter
from unleash_client.models import Context
from unleash_client.strategies import (
    Strategy,
    StrategyRegistry,
    get_strategy_registry,
)

__version__ = "0.1.0"

__all__ = [
    "Configuration",
    "Context",
    "Strategy",
    "StrategyRegistry",
    "get_strategy_registry",
    "UnleashFormatter",
    "UnleashError",
    "ConfigurationError",
    "InvalidArgumentError",
    "MissingRequiredFieldError",
]
