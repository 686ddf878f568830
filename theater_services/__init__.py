"""
theater_services -- orchestration over the billing engines.

Statement rendering and document loading for callers such as the
``scripts/print_statement.py`` command.
"""

from theater_services.document_loader import (
    load_catalog,
    load_invoices,
    parse_catalog,
    parse_invoice,
)
from theater_services.statement_printer import (
    StatementPrinter,
    format_currency,
    render_statement,
)

__all__ = [
    "StatementPrinter",
    "format_currency",
    "load_catalog",
    "load_invoices",
    "parse_catalog",
    "parse_invoice",
    "render_statement",
]
