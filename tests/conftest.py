"""
Pytest fixtures for the theater billing test suite.

Provides:
- Structured logging configuration and log capture
- The standard billing terms and play type registry
- The reference catalog and BigCo invoice
"""

import json
import logging
from io import StringIO

import pytest

from theater_engines.play_types import default_registry
from theater_kernel.domain.terms import BillingTerms
from theater_kernel.domain.values import Invoice, Performance, Play
from theater_kernel.logging_config import (
    LogContext,
    StructuredFormatter,
    configure_logging,
    reset_logging,
)


# =============================================================================
# Logging fixtures
# =============================================================================


@pytest.fixture(autouse=True, scope="session")
def _configure_test_logging():
    """Configure structured logging for the test suite."""
    reset_logging()
    configure_logging(level=logging.DEBUG, stream=StringIO())
    yield
    reset_logging()


@pytest.fixture(autouse=True)
def _clear_log_context():
    """Clear LogContext between tests to prevent cross-test contamination."""
    LogContext.clear()
    yield
    LogContext.clear()


@pytest.fixture
def captured_logs():
    """
    Capture theater_kernel logs as parsed JSON dicts.

    Usage::

        def test_something(captured_logs):
            build_statement(invoice, catalog)
            logs = captured_logs()
            assert any(r["event"] == "statement_build_completed" for r in logs)
    """
    stream = StringIO()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(StructuredFormatter())
    root = logging.getLogger("theater_kernel")
    root.addHandler(handler)

    def _get_records() -> list[dict]:
        lines = stream.getvalue().strip().split("\n")
        return [json.loads(line) for line in lines if line]

    yield _get_records

    root.removeHandler(handler)


# =============================================================================
# Domain fixtures
# =============================================================================


@pytest.fixture
def standard_terms():
    """The standard price list."""
    return BillingTerms.default()


@pytest.fixture
def registry():
    """A fresh registry with the built-in tragedy and comedy rules."""
    return default_registry()


@pytest.fixture
def catalog():
    """Reference play catalog."""
    return {
        "hamlet": Play("Hamlet", "tragedy"),
        "as-like": Play("As You Like It", "comedy"),
        "othello": Play("Othello", "tragedy"),
    }


@pytest.fixture
def big_co_invoice():
    """Reference invoice: 55 seats Hamlet, 35 As You Like It, 40 Othello."""
    return Invoice.of("BigCo", [
        Performance("hamlet", 55),
        Performance("as-like", 35),
        Performance("othello", 40),
    ])
