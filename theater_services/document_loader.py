"""
theater_services.document_loader -- Build domain values from JSON documents.

Document shapes:

    plays.json
        {"hamlet": {"name": "Hamlet", "type": "tragedy"}, ...}

    invoice.json
        {"customer": "BigCo",
         "performances": [{"playID": "hamlet", "audience": 55}, ...]}

Failure modes:
    - ``FileNotFoundError`` / ``json.JSONDecodeError`` propagate from reading.
    - ``ValueError`` for documents missing required keys.
    - ``InvalidAudienceError`` for negative audiences.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from theater_kernel.domain.values import Invoice, Performance, Play
from theater_kernel.logging_config import get_logger

logger = get_logger("services.document_loader")


def load_json_file(path: Path) -> Any:
    with open(path, encoding="utf-8") as f:
        return json.load(f)


def parse_catalog(data: dict[str, Any]) -> dict[str, Play]:
    """Parse a plays document into a play id -> Play mapping."""
    if not isinstance(data, dict):
        raise ValueError("Plays document must be an object keyed by play id")
    catalog: dict[str, Play] = {}
    for play_id, entry in data.items():
        try:
            catalog[play_id] = Play(name=entry["name"], type=entry["type"])
        except (KeyError, TypeError) as exc:
            raise ValueError(f"Play {play_id!r} needs 'name' and 'type'") from exc
    return catalog


def parse_performance(data: dict[str, Any]) -> Performance:
    try:
        return Performance(play_id=data["playID"], audience=data["audience"])
    except (KeyError, TypeError) as exc:
        raise ValueError(
            f"Performance needs 'playID' and 'audience', got {data!r}"
        ) from exc


def parse_invoice(data: dict[str, Any]) -> Invoice:
    """Parse an invoice document, keeping performance order."""
    try:
        customer = data["customer"]
        performances = data.get("performances", [])
    except (KeyError, TypeError, AttributeError) as exc:
        raise ValueError("Invoice document needs a 'customer'") from exc
    if not isinstance(performances, list):
        raise ValueError(
            f"Invoice for {customer!r}: 'performances' must be a list, "
            f"got {type(performances).__name__}"
        )
    return Invoice.of(customer, (parse_performance(p) for p in performances))


def load_catalog(path: Path) -> dict[str, Play]:
    catalog = parse_catalog(load_json_file(path))
    logger.info("catalog_loaded", extra={
        "source": str(path),
        "play_count": len(catalog),
    })
    return catalog


def load_invoices(path: Path) -> list[Invoice]:
    """Load one invoice object or a list of invoice objects."""
    data = load_json_file(path)
    documents = data if isinstance(data, list) else [data]
    invoices = [parse_invoice(d) for d in documents]
    logger.info("invoices_loaded", extra={
        "source": str(path),
        "invoice_count": len(invoices),
    })
    return invoices
