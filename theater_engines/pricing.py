"""
Pricing Policy Engine.

Pure functions with deterministic behavior. No I/O.

Computes the price of a single performance, in integer cents, by
dispatching on the play's type through a ``PlayTypeRegistry``.  Unknown
play types are an error: no default price is ever guessed.

Usage:
    from theater_engines.pricing import PricingEngine

    engine = PricingEngine(BillingTerms.default())
    cents = engine.compute_amount(performance, play)
"""

from __future__ import annotations

from theater_engines.play_types import PlayTypeRegistry, default_registry
from theater_kernel.domain.terms import BillingTerms
from theater_kernel.domain.values import Performance, Play
from theater_kernel.exceptions import UnknownPlayTypeError
from theater_kernel.logging_config import get_logger

logger = get_logger("engines.pricing")


class PricingEngine:
    """Prices performances under one set of billing terms."""

    def __init__(
        self,
        terms: BillingTerms | None = None,
        registry: PlayTypeRegistry | None = None,
    ):
        self._terms = terms if terms is not None else BillingTerms.default()
        self._registry = registry if registry is not None else default_registry()

    @property
    def terms(self) -> BillingTerms:
        return self._terms

    def compute_amount(self, performance: Performance, play: Play) -> int:
        """
        Price one performance in cents.

        Args:
            performance: The performance being billed
            play: The play resolved from the catalog for this performance

        Returns:
            Non-negative integer amount in cents

        Raises:
            UnknownPlayTypeError: If ``play.type`` has no registered rule
        """
        rule = self._registry.find(play.type)
        if rule is None:
            logger.error("pricing_unknown_play_type", extra={
                "play_type": play.type,
                "play_name": play.name,
                "play_id": performance.play_id,
            })
            raise UnknownPlayTypeError(play.type)

        amount = rule.price(performance.audience, self._terms)

        logger.debug("performance_priced", extra={
            "play_id": performance.play_id,
            "play_type": play.type,
            "audience": performance.audience,
            "amount_cents": amount,
        })
        return amount
