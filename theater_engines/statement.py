"""
Invoice Aggregator.

Pure functions with deterministic behavior. No I/O.

Builds a ``StatementResult`` for an invoice: one line item per
performance, in invoice order, plus total amount and total volume credits.

The computation is all-or-nothing.  The first unknown play id or
unpriceable play type (in invoice order) aborts the whole statement and
propagates; a partial statement is never returned.

Usage:
    from theater_engines.statement import build_statement

    result = build_statement(invoice, catalog, terms=BillingTerms.default())
    result.total_amount_cents
"""

from __future__ import annotations

import time
from dataclasses import dataclass

from theater_engines.play_types import PlayTypeRegistry, default_registry
from theater_engines.pricing import PricingEngine
from theater_engines.tracer import traced_engine
from theater_engines.volume_credits import VolumeCreditEngine
from theater_kernel.domain.catalog import resolve_play
from theater_kernel.domain.terms import BillingTerms
from theater_kernel.domain.values import Catalog, Invoice
from theater_kernel.exceptions import TheaterBillingError
from theater_kernel.logging_config import get_logger

logger = get_logger("engines.statement")


@dataclass(frozen=True)
class StatementLineItem:
    """One statement row for one performance."""

    play_name: str
    amount_cents: int
    audience: int
    volume_credits: int


@dataclass(frozen=True)
class StatementResult:
    """
    Aggregated statement for one invoice.

    Attributes:
        customer: Invoice customer
        line_items: Line items in invoice performance order
        total_amount_cents: Sum of line item amounts
        total_volume_credits: Sum of line item volume credits
    """

    customer: str
    line_items: tuple[StatementLineItem, ...]
    total_amount_cents: int
    total_volume_credits: int


@traced_engine("statement", "1.0", fingerprint_fields=("invoice", "terms"))
def build_statement(
    invoice: Invoice,
    catalog: Catalog,
    terms: BillingTerms | None = None,
    registry: PlayTypeRegistry | None = None,
) -> StatementResult:
    """
    Compute every line item and the totals for an invoice.

    Args:
        invoice: Invoice to bill
        catalog: Play id to Play mapping, read only
        terms: Billing terms (defaults to ``BillingTerms.default()``)
        registry: Play type rules (defaults to ``default_registry()``)

    Returns:
        StatementResult with line items in invoice order

    Raises:
        UnknownPlayIDError: A performance references a play not in the catalog
        UnknownPlayTypeError: A play's type has no pricing rule
    """
    t0 = time.monotonic()
    terms = terms if terms is not None else BillingTerms.default()
    registry = registry if registry is not None else default_registry()
    pricing = PricingEngine(terms, registry)
    credits = VolumeCreditEngine(terms, registry)

    logger.info("statement_build_started", extra={
        "customer": invoice.customer,
        "performance_count": len(invoice.performances),
    })

    line_items: list[StatementLineItem] = []
    total_amount = 0
    total_credits = 0

    for index, performance in enumerate(invoice.performances):
        try:
            play = resolve_play(performance, catalog)
            amount = pricing.compute_amount(performance, play)
            earned = credits.compute_volume_credits(performance, play)
        except TheaterBillingError as exc:
            logger.warning("statement_build_aborted", extra={
                "customer": invoice.customer,
                "performance_index": index,
                "play_id": performance.play_id,
                "error_code": exc.code,
            })
            raise

        line_items.append(StatementLineItem(
            play_name=play.name,
            amount_cents=amount,
            audience=performance.audience,
            volume_credits=earned,
        ))
        total_amount += amount
        total_credits += earned

    result = StatementResult(
        customer=invoice.customer,
        line_items=tuple(line_items),
        total_amount_cents=total_amount,
        total_volume_credits=total_credits,
    )

    duration_ms = round((time.monotonic() - t0) * 1000, 2)
    logger.info("statement_build_completed", extra={
        "customer": invoice.customer,
        "line_item_count": len(result.line_items),
        "total_amount_cents": result.total_amount_cents,
        "total_volume_credits": result.total_volume_credits,
        "duration_ms": duration_ms,
    })

    return result
