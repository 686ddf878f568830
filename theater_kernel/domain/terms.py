"""
Terms -- Immutable billing terms (pricing and volume-credit constants).

Responsibility:
    Holds every constant the pricing and volume-credit engines consume.
    Engines receive a ``BillingTerms`` at construction; there is no
    module-level pricing state, so several term sets (standard,
    promotional, test) can be used side by side.

Architecture position:
    Kernel > Domain -- pure value objects, zero I/O.
    Built by theater_config from YAML, or via ``BillingTerms.default()``.

Invariants enforced:
    - All amounts and thresholds are non-negative integers
    - ``comedy_bonus_divisor`` is strictly positive
    - ``currency`` is a three-letter upper-case code
    - ``minor_units_per_major`` is a power of ten (1, 10, 100, ...)

Failure modes:
    - ConfigurationError naming the offending field
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field, fields

from theater_kernel.exceptions import ConfigurationError

_CURRENCY_CODE = re.compile(r"[A-Z]{3}")


def _require_non_negative(owner: object) -> None:
    for f in fields(owner):
        value = getattr(owner, f.name)
        if isinstance(value, bool) or not isinstance(value, int):
            raise ConfigurationError(
                f"{f.name} must be an integer, got {value!r}", field=f.name
            )
        if value < 0:
            raise ConfigurationError(
                f"{f.name} must be non-negative, got {value}", field=f.name
            )


@dataclass(frozen=True)
class TragedyTerms:
    """Tragedy pricing, all amounts in cents."""

    base_amount: int = 40000
    audience_threshold: int = 30
    overage_per_person: int = 1000

    def __post_init__(self) -> None:
        _require_non_negative(self)


@dataclass(frozen=True)
class ComedyTerms:
    """
    Comedy pricing, all amounts in cents.

    ``per_audience_amount`` is charged for every seat regardless of the
    threshold, on top of the threshold-gated overage.
    """

    base_amount: int = 30000
    audience_threshold: int = 20
    overage_flat_amount: int = 10000
    overage_per_person: int = 500
    per_audience_amount: int = 300

    def __post_init__(self) -> None:
        _require_non_negative(self)


@dataclass(frozen=True)
class VolumeCreditTerms:
    """Loyalty credit rules."""

    base_threshold: int = 30
    comedy_bonus_divisor: int = 5

    def __post_init__(self) -> None:
        _require_non_negative(self)
        if self.comedy_bonus_divisor == 0:
            raise ConfigurationError(
                "comedy_bonus_divisor must be positive",
                field="comedy_bonus_divisor",
            )


@dataclass(frozen=True)
class BillingTerms:
    """
    Complete constant set for one statement computation.

    Attributes:
        tragedy: Tragedy pricing terms
        comedy: Comedy pricing terms
        volume_credits: Volume credit terms
        currency: ISO 4217 code the cent amounts are denominated in
        minor_units_per_major: Cents per currency unit, used for display
    """

    tragedy: TragedyTerms = field(default_factory=TragedyTerms)
    comedy: ComedyTerms = field(default_factory=ComedyTerms)
    volume_credits: VolumeCreditTerms = field(default_factory=VolumeCreditTerms)
    currency: str = "USD"
    minor_units_per_major: int = 100

    def __post_init__(self) -> None:
        if not isinstance(self.currency, str) or not _CURRENCY_CODE.fullmatch(self.currency):
            raise ConfigurationError(
                f"currency must be a three-letter ISO 4217 code, got {self.currency!r}",
                field="currency",
            )
        units = self.minor_units_per_major
        if isinstance(units, bool) or not isinstance(units, int) or units <= 0:
            raise ConfigurationError(
                "minor_units_per_major must be positive",
                field="minor_units_per_major",
            )
        if str(units).rstrip("0") != "1":
            raise ConfigurationError(
                f"minor_units_per_major must be a power of ten, got {units}",
                field="minor_units_per_major",
            )

    @classmethod
    def default(cls) -> BillingTerms:
        """The standard theater price list."""
        return cls()
