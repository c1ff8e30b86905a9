"""
Gradual Rollout Strategies
==========================
Percentage based rollouts, either random or sticky per user or session.
"""

import random
from typing import Any, Optional

from unleash_client.models import Context
from unleash_client.strategies.base import Strategy, normalized_value, parse_percentage


class GradualRolloutRandomStrategy(Strategy):
    """Enabled for a random ``params["percentage"]`` share of evaluations."""

    name = "gradualRolloutRandom"

    def is_enabled(
        self,
        params: Optional[dict[str, Any]] = None,
        context: Optional[Context] = None,
    ) -> bool:
        percentage = parse_percentage((params or {}).get("percentage"))
        return random.randint(1, 100) <= percentage


class _StickyRolloutStrategy(Strategy):
    """Shared logic for rollouts bucketed on a context attribute."""

    context_attribute = ""

    def is_enabled(
        self,
        params: Optional[dict[str, Any]] = None,
        context: Optional[Context] = None,
    ) -> bool:
        params = params or {}
        identifier = getattr(context, self.context_attribute, None) if context else None
        if not identifier:
            return False

        percentage = parse_percentage(params.get("percentage"))
        group_id = params.get("groupId", "")
        return normalized_value(identifier, group_id) <= percentage


class GradualRolloutUserIdStrategy(_StickyRolloutStrategy):
    """Enabled for a stable ``percentage`` share of users, grouped by ``groupId``."""

    name = "gradualRolloutUserId"
    context_attribute = "user_id"


class GradualRolloutSessionIdStrategy(_StickyRolloutStrategy):
    """Enabled for a stable ``percentage`` share of sessions, grouped by ``groupId``."""

    name = "gradualRolloutSessionId"
    context_attribute = "session_id"
