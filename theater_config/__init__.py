"""
theater_config -- single public entrypoint for billing configuration.

Responsibility:
    Provides the way to obtain billing terms at runtime through
    ``get_active_config()`` (a named set) or ``load_config_file()`` (an
    explicit YAML path).  Engines never read configuration files; they
    receive a ``BillingTerms`` value from their caller.

Architecture position:
    Configuration -- YAML-driven, loaded once per statement batch.
    This package sits above ``theater_kernel`` and below
    ``theater_services``.  The kernel and engines MUST NEVER import from
    ``theater_config``.

Failure modes:
    - ``FileNotFoundError`` -- no configuration set with the requested name.
    - ``ConfigurationError`` -- missing or out-of-range pricing constants.

Audit relevance:
    Every successful ``get_active_config()`` call emits a
    ``THEATER_CONFIG_TRACE`` log entry with the config_id, version and
    checksum, tying each statement to the price list that produced it.
"""

from __future__ import annotations

from pathlib import Path

from theater_config.loader import (
    compute_checksum,
    load_configuration,
    parse_configuration,
    parse_terms,
)
from theater_config.schema import BillingConfiguration
from theater_kernel.logging_config import get_logger

_logger = get_logger("config")

# Default configuration sets directory
_DEFAULT_CONFIG_DIR = Path(__file__).parent / "sets"

DEFAULT_CONFIG_NAME = "default"


def _trace(config: BillingConfiguration, path: Path) -> None:
    _logger.info(
        "THEATER_CONFIG_TRACE",
        extra={
            "trace_type": "THEATER_CONFIG_TRACE",
            "config_id": config.config_id,
            "config_version": config.version,
            "checksum": config.checksum,
            "currency": config.currency,
            "source": str(path),
        },
    )


def get_active_config(
    name: str = DEFAULT_CONFIG_NAME,
    config_dir: Path | None = None,
) -> BillingConfiguration:
    """Load the named billing configuration set.

    Args:
        name: Configuration set name; ``<config_dir>/<name>.yaml`` is loaded.
        config_dir: Override path to configuration sets directory.
            Defaults to theater_config/sets/.

    Returns:
        BillingConfiguration with frozen BillingTerms.

    Raises:
        FileNotFoundError: If no configuration set with that name exists.
        ConfigurationError: If the configuration is invalid.
    """
    sets_dir = config_dir or _DEFAULT_CONFIG_DIR
    path = sets_dir / f"{name}.yaml"
    if not path.is_file():
        raise FileNotFoundError(f"No billing configuration set {name!r} in {sets_dir}")

    config = load_configuration(path)
    _trace(config, path)
    return config


def load_config_file(path: Path) -> BillingConfiguration:
    """Load a billing configuration from an explicit YAML path."""
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"Billing configuration file not found: {path}")

    config = load_configuration(path)
    _trace(config, path)
    return config


def list_config_sets(config_dir: Path | None = None) -> list[str]:
    """Names of the configuration sets available in ``config_dir``."""
    sets_dir = config_dir or _DEFAULT_CONFIG_DIR
    return sorted(p.stem for p in sets_dir.glob("*.yaml"))


__all__ = [
    "BillingConfiguration",
    "DEFAULT_CONFIG_NAME",
    "compute_checksum",
    "get_active_config",
    "list_config_sets",
    "load_config_file",
    "load_configuration",
    "parse_configuration",
    "parse_terms",
]
