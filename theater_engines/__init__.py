"""
Module: theater_engines
Responsibility:
    Package entrypoint that re-exports the public symbols of the pure
    calculation engines: pricing, volume credits, play type rules and the
    invoice aggregator.

Architecture position:
    Engines -- pure calculation layer, zero I/O.
    May only import theater_kernel (and sibling engine modules).
    MUST NOT import theater_config or theater_services.

Invariants enforced:
    - Integer-only arithmetic: every amount is an int number of cents.
    - Determinism: identical inputs always produce identical outputs.
    - Fail fast: the aggregator never returns a partial statement.

Usage:
    from theater_engines import build_statement, default_registry
"""

from theater_engines.play_types import (
    COMEDY_RULE,
    TRAGEDY_RULE,
    PlayTypeRegistry,
    PlayTypeRule,
    comedy_amount,
    comedy_credit_bonus,
    default_registry,
    no_credit_bonus,
    tragedy_amount,
)
from theater_engines.pricing import PricingEngine
from theater_engines.statement import (
    StatementLineItem,
    StatementResult,
    build_statement,
)
from theater_engines.tracer import traced_engine
from theater_engines.volume_credits import VolumeCreditEngine, base_volume_credits

__all__ = [
    "COMEDY_RULE",
    "TRAGEDY_RULE",
    "PlayTypeRegistry",
    "PlayTypeRule",
    "PricingEngine",
    "StatementLineItem",
    "StatementResult",
    "VolumeCreditEngine",
    "base_volume_credits",
    "build_statement",
    "comedy_amount",
    "comedy_credit_bonus",
    "default_registry",
    "no_credit_bonus",
    "traced_engine",
    "tragedy_amount",
]
