"""
Default Strategies
==================
Strategies that ignore the context entirely.
"""

from typing import Any, Optional

from unleash_client.models import Context
from unleash_client.strategies.base import Strategy


class DefaultStrategy(Strategy):
    """Always enabled."""

    name = "default"

    def is_enabled(
        self,
        params: Optional[dict[str, Any]] = None,
        context: Optional[Context] = None,
    ) -> bool:
        return True


class UnknownStrategy(Strategy):
    """Fallback for strategy names the client does not know; never enabled."""

    name = "unknown"

    def is_enabled(
        self,
        params: Optional[dict[str, Any]] = None,
        context: Optional[Context] = None,
    ) -> bool:
        return False
