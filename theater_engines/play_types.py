"""
Play Type Registry -- per-type pricing and credit-bonus rules.

Pure functions with deterministic behavior. No I/O.

Each play type tag maps to a ``PlayTypeRule``: a pricing function and a
volume-credit bonus function, both of the form ``(audience, terms) -> int``.
Adding a play type means registering a rule, not editing the engines.

Built-in rules:
- tragedy: base amount plus a per-person overage above the threshold
- comedy: base amount, a threshold-gated overage (flat + per person) and a
  per-audience surcharge applied to every seat; earns a credit bonus of
  one credit per ``comedy_bonus_divisor`` seats

Usage:
    from theater_engines.play_types import PlayTypeRule, default_registry

    registry = default_registry()
    registry.register(PlayTypeRule(
        play_type="musical",
        price=lambda audience, terms: 50000 + 200 * audience,
    ))
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass

from theater_kernel.domain.terms import BillingTerms
from theater_kernel.domain.values import PlayType
from theater_kernel.exceptions import (
    PlayTypeAlreadyRegisteredError,
    UnknownPlayTypeError,
)
from theater_kernel.logging_config import get_logger

logger = get_logger("engines.play_types")

PriceRule = Callable[[int, BillingTerms], int]
CreditBonusRule = Callable[[int, BillingTerms], int]


# ============================================================================
# Built-in rules
# ============================================================================


def tragedy_amount(audience: int, terms: BillingTerms) -> int:
    """Tragedy price in cents. Overage applies strictly above the threshold."""
    t = terms.tragedy
    result = t.base_amount
    if audience > t.audience_threshold:
        result += t.overage_per_person * (audience - t.audience_threshold)
    return result


def comedy_amount(audience: int, terms: BillingTerms) -> int:
    """Comedy price in cents.

    The per-audience surcharge is added for every seat, below the
    threshold too, on top of the threshold-gated overage.
    """
    c = terms.comedy
    result = c.base_amount
    if audience > c.audience_threshold:
        result += c.overage_flat_amount + (
            c.overage_per_person * (audience - c.audience_threshold)
        )
    result += c.per_audience_amount * audience
    return result


def comedy_credit_bonus(audience: int, terms: BillingTerms) -> int:
    return audience // terms.volume_credits.comedy_bonus_divisor


def no_credit_bonus(audience: int, terms: BillingTerms) -> int:
    return 0


@dataclass(frozen=True)
class PlayTypeRule:
    """
    Pricing and credit-bonus functions for one play type tag.

    Attributes:
        play_type: Type tag as found on ``Play.type``
        price: Returns the performance price in cents
        credit_bonus: Returns volume credits earned on top of the base credit
    """

    play_type: str
    price: PriceRule
    credit_bonus: CreditBonusRule = no_credit_bonus


TRAGEDY_RULE = PlayTypeRule(PlayType.TRAGEDY.value, tragedy_amount)
COMEDY_RULE = PlayTypeRule(PlayType.COMEDY.value, comedy_amount, comedy_credit_bonus)


# ============================================================================
# Registry
# ============================================================================


class PlayTypeRegistry:
    """Registry of play type rules keyed by type tag.

    Instances are independent so differently configured registries can be
    used side by side.
    """

    def __init__(self, rules: Iterable[PlayTypeRule] = ()):
        self._rules: dict[str, PlayTypeRule] = {}
        for rule in rules:
            self.register(rule)

    def register(self, rule: PlayTypeRule, *, replace: bool = False) -> None:
        """Register a rule. Re-registering a tag requires ``replace=True``."""
        if rule.play_type in self._rules and not replace:
            raise PlayTypeAlreadyRegisteredError(rule.play_type)
        self._rules[rule.play_type] = rule
        logger.debug("play_type_registered", extra={
            "play_type": rule.play_type,
            "replaced": replace,
        })

    def unregister(self, play_type: str) -> None:
        self._rules.pop(play_type, None)

    def get(self, play_type: str) -> PlayTypeRule:
        """Get the rule for a type tag.

        Raises:
            UnknownPlayTypeError: If no rule is registered for the tag.
        """
        rule = self._rules.get(play_type)
        if rule is None:
            raise UnknownPlayTypeError(play_type)
        return rule

    def find(self, play_type: str) -> PlayTypeRule | None:
        return self._rules.get(play_type)

    def has_rule(self, play_type: str) -> bool:
        return play_type in self._rules

    def list_play_types(self) -> list[str]:
        return sorted(self._rules)

    def __contains__(self, play_type: object) -> bool:
        return play_type in self._rules

    def __len__(self) -> int:
        return len(self._rules)


def default_registry() -> PlayTypeRegistry:
    """A new registry holding the built-in tragedy and comedy rules."""
    return PlayTypeRegistry((TRAGEDY_RULE, COMEDY_RULE))
