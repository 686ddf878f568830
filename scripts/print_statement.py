#!/usr/bin/env python3
"""
Print billing statements for the invoices in a JSON file.

Usage:
  python3 scripts/print_statement.py \\
    --invoice scripts/data/invoices.json \\
    --plays scripts/data/plays.json \\
    [--config default | --config PATH.yaml] [--config-dir PATH] \\
    [--log-level WARNING]

``--config`` takes either a configuration set name (looked up in
``--config-dir``, by default theater_config/sets/) or a path to a YAML file.

Exit status is 0 when every statement was printed and 1 when a billing
error (unknown play id, unpriced play type, bad audience, bad
configuration) stopped the run.  Structured logs go to stderr.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(ROOT))

from theater_config import (  # noqa: E402
    DEFAULT_CONFIG_NAME,
    BillingConfiguration,
    get_active_config,
    load_config_file,
)
from theater_kernel.exceptions import TheaterBillingError  # noqa: E402
from theater_kernel.logging_config import LogContext, configure_logging  # noqa: E402
from theater_services import StatementPrinter, load_catalog, load_invoices  # noqa: E402


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Print theater billing statements.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "--invoice",
        "--invoices",
        dest="invoices",
        type=Path,
        default=ROOT / "scripts" / "data" / "invoices.json",
        help="Path to an invoice JSON document (object or list of objects)",
    )
    parser.add_argument(
        "--plays",
        type=Path,
        default=ROOT / "scripts" / "data" / "plays.json",
        help="Path to the plays JSON document",
    )
    parser.add_argument(
        "--config",
        default=DEFAULT_CONFIG_NAME,
        help="Configuration set name or YAML file path (default: %(default)s)",
    )
    parser.add_argument(
        "--config-dir",
        type=Path,
        default=None,
        help="Directory holding configuration sets",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level for structured logs on stderr",
    )
    return parser


_YAML_SUFFIXES = (".yaml", ".yml")


def _load_config(value: str, config_dir: Path | None) -> BillingConfiguration:
    if value.endswith(_YAML_SUFFIXES) or Path(value).name != value:
        return load_config_file(Path(value))
    return get_active_config(value, config_dir)


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    configure_logging(level=getattr(logging, args.log_level))

    for label, path in (("Invoices", args.invoices), ("Plays", args.plays)):
        if not path.exists():
            print(f"ERROR: {label} file not found: {path}", file=sys.stderr)
            return 1

    try:
        config = _load_config(args.config, args.config_dir)
        catalog = load_catalog(args.plays)
        invoices = load_invoices(args.invoices)
        printer = StatementPrinter(config.terms)
        with LogContext.bind(config_id=config.config_id):
            statements = [printer.statement(invoice, catalog) for invoice in invoices]
    except (TheaterBillingError, FileNotFoundError, ValueError) as exc:
        code = getattr(exc, "code", type(exc).__name__)
        print(f"ERROR [{code}]: {exc}", file=sys.stderr)
        return 1

    sys.stdout.write("\n".join(statements))
    return 0


if __name__ == "__main__":
    sys.exit(main())
