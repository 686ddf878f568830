"""
Billing configuration schema.

``BillingConfiguration`` is the runtime artifact produced from a YAML
configuration set: identity metadata plus the frozen ``BillingTerms`` the
engines consume.
"""

from __future__ import annotations

from dataclasses import dataclass

from theater_kernel.domain.terms import BillingTerms


@dataclass(frozen=True)
class BillingConfiguration:
    """A loaded, validated billing configuration set."""

    config_id: str
    version: int
    terms: BillingTerms
    checksum: str
    description: str = ""

    @property
    def currency(self) -> str:
        return self.terms.currency
