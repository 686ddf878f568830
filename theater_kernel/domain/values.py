"""
Values -- Immutable, self-validating theater billing value objects.

Responsibility:
    Provides the input value types for statement computation: Play,
    Performance and Invoice. A catalog is a plain read-only mapping from
    play id to Play.

Architecture position:
    Kernel > Domain -- pure functional core, zero I/O.
    Imported by the engines and services. No outward dependencies except
    theater_kernel.exceptions.

Invariants enforced:
    - Performance audience is a non-negative integer (InvalidAudienceError
      at construction time)
    - Invoice performances are held as a tuple, preserving input order

Failure modes:
    - InvalidAudienceError on a negative or non-integer audience
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from enum import Enum

from theater_kernel.exceptions import InvalidAudienceError


class PlayType(str, Enum):
    """Play types with built-in pricing rules."""

    TRAGEDY = "tragedy"
    COMEDY = "comedy"


@dataclass(frozen=True, slots=True)
class Play:
    """
    A play that can be performed in the theater.

    ``type`` is a free-form tag. Whether it can be priced is decided by the
    play type registry, not by this value.
    """

    name: str
    type: str


@dataclass(frozen=True, slots=True)
class Performance:
    """
    One staging of a play for a given audience size.

    Contract:
        ``play_id`` is a key into the catalog; it is not resolved here.

    Guarantees:
        - Immutable and hashable
        - ``audience`` is an int >= 0
    """

    play_id: str
    audience: int

    def __post_init__(self) -> None:
        # bool is an int subclass but never a seat count
        if (
            isinstance(self.audience, bool)
            or not isinstance(self.audience, int)
            or self.audience < 0
        ):
            raise InvalidAudienceError(self.play_id, self.audience)


@dataclass(frozen=True, slots=True)
class Invoice:
    """
    One billing unit: a customer and their performances, in order.

    Any iterable of performances is accepted and frozen into a tuple.
    """

    customer: str
    performances: tuple[Performance, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "performances", tuple(self.performances))

    @classmethod
    def of(cls, customer: str, performances: Iterable[Performance]) -> Invoice:
        return cls(customer=customer, performances=tuple(performances))


Catalog = Mapping[str, Play]
