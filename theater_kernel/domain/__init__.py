"""
Pure domain layer.

This module contains immutable value objects and lookups with NO
dependencies on:
- Configuration files
- Time/clock
- I/O

All domain objects are immutable and deterministic.
"""

from theater_kernel.domain.catalog import resolve_play
from theater_kernel.domain.terms import (
    BillingTerms,
    ComedyTerms,
    TragedyTerms,
    VolumeCreditTerms,
)
from theater_kernel.domain.values import (
    Catalog,
    Invoice,
    Performance,
    Play,
    PlayType,
)

__all__ = [
    "BillingTerms",
    "Catalog",
    "ComedyTerms",
    "Invoice",
    "Performance",
    "Play",
    "PlayType",
    "TragedyTerms",
    "VolumeCreditTerms",
    "resolve_play",
]
