"""
Volume Credit Engine.

Pure functions with deterministic behavior. No I/O.

Every performance earns ``max(audience - base_threshold, 0)`` credits.
Play types may add a bonus through their registry rule (comedy earns one
credit per ``comedy_bonus_divisor`` seats).

Unlike pricing, an unregistered play type is NOT an error here: it earns
the base credit and no bonus.
"""

from __future__ import annotations

from theater_engines.play_types import PlayTypeRegistry, default_registry
from theater_kernel.domain.terms import BillingTerms
from theater_kernel.domain.values import Performance, Play
from theater_kernel.logging_config import get_logger

logger = get_logger("engines.volume_credits")


def base_volume_credits(audience: int, terms: BillingTerms) -> int:
    return max(audience - terms.volume_credits.base_threshold, 0)


class VolumeCreditEngine:
    """Computes loyalty credits under one set of billing terms."""

    def __init__(
        self,
        terms: BillingTerms | None = None,
        registry: PlayTypeRegistry | None = None,
    ):
        self._terms = terms if terms is not None else BillingTerms.default()
        self._registry = registry if registry is not None else default_registry()

    def compute_volume_credits(self, performance: Performance, play: Play) -> int:
        """Credits earned by one performance. Never raises for unknown types."""
        result = base_volume_credits(performance.audience, self._terms)

        rule = self._registry.find(play.type)
        bonus = rule.credit_bonus(performance.audience, self._terms) if rule is not None else 0
        result += bonus

        logger.debug("volume_credits_computed", extra={
            "play_id": performance.play_id,
            "play_type": play.type,
            "audience": performance.audience,
            "bonus_credits": bonus,
            "volume_credits": result,
        })
        return result
