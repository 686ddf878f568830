"""
theater_services.statement_printer -- Text statement rendering.

Responsibility:
    Compose the invoice aggregator with currency formatting and text
    layout to produce the customer-facing statement:

        Statement for BigCo
          Hamlet: $650.00 (55 seats)
          As You Like It: $580.00 (35 seats)
        Amount owed is $1,230.00
        You earned 12 credits

Architecture position:
    Services -- orchestration over engines + kernel.
    May import theater_engines and theater_kernel.

Failure modes:
    - UnknownPlayIDError / UnknownPlayTypeError propagate from the
      aggregator; no text is produced for an incomplete statement.
"""

from __future__ import annotations

from decimal import Decimal

from theater_engines.play_types import PlayTypeRegistry
from theater_engines.statement import StatementResult, build_statement
from theater_kernel.domain.terms import BillingTerms
from theater_kernel.domain.values import Catalog, Invoice
from theater_kernel.logging_config import LogContext, get_logger

logger = get_logger("services.statement_printer")

_CURRENCY_SYMBOLS = {
    "USD": "$",
}


def format_currency(
    amount_cents: int,
    currency: str = "USD",
    minor_units_per_major: int = 100,
) -> str:
    """
    Render an integer minor-unit amount as a currency string.

    ``format_currency(173000)`` -> ``"$1,730.00"``.  Currencies without a
    known symbol are prefixed with their code (``"EUR 12.50"``).  The number
    of decimals follows ``minor_units_per_major``, which must be a power of
    ten: 1 gives none (``"JPY 1,500"``), 1000 gives three.
    """
    places = len(str(minor_units_per_major)) - 1
    if minor_units_per_major != 10 ** places:
        raise ValueError(
            f"minor_units_per_major must be a power of ten, got {minor_units_per_major}"
        )
    amount = Decimal(amount_cents).scaleb(-places)
    sign = "-" if amount < 0 else ""
    text = f"{abs(amount):,.{places}f}"
    symbol = _CURRENCY_SYMBOLS.get(currency)
    if symbol is not None:
        return f"{sign}{symbol}{text}"
    return f"{sign}{currency} {text}"


def render_statement(result: StatementResult, terms: BillingTerms) -> str:
    """Lay out an aggregated statement as text, one line per row."""

    def money(cents: int) -> str:
        return format_currency(cents, terms.currency, terms.minor_units_per_major)

    lines = [f"Statement for {result.customer}"]
    for item in result.line_items:
        lines.append(
            f"  {item.play_name}: {money(item.amount_cents)} ({item.audience} seats)"
        )
    lines.append(f"Amount owed is {money(result.total_amount_cents)}")
    lines.append(f"You earned {result.total_volume_credits} credits")
    return "\n".join(lines) + "\n"


class StatementPrinter:
    """Builds and renders statements under one set of billing terms."""

    def __init__(
        self,
        terms: BillingTerms | None = None,
        registry: PlayTypeRegistry | None = None,
    ):
        self._terms = terms if terms is not None else BillingTerms.default()
        self._registry = registry

    def build(self, invoice: Invoice, catalog: Catalog) -> StatementResult:
        return build_statement(invoice, catalog, self._terms, self._registry)

    def statement(self, invoice: Invoice, catalog: Catalog) -> str:
        """Return the formatted multi-line statement for ``invoice``."""
        with LogContext.bind(customer=invoice.customer):
            result = self.build(invoice, catalog)
            text = render_statement(result, self._terms)
            logger.info("statement_rendered", extra={
                "line_count": text.count("\n"),
            })
        return text
