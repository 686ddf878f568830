"""
Configuration Loader (``theater_config.loader``).

Responsibility
--------------
Loads billing configuration YAML files and parses them into the frozen
``BillingTerms`` / ``BillingConfiguration`` types.  Runtime callers go
through ``theater_config.get_active_config()``.

Invariants enforced
-------------------
* Missing required keys raise ``ConfigurationError`` naming the key; there
  are no silent defaults for required pricing constants.
* Range checks are delegated to the ``BillingTerms`` value objects.
* ``compute_checksum`` produces a deterministic SHA-256 hash for
  configuration identity and change detection.

Failure modes
-------------
* Missing YAML file  -> ``FileNotFoundError`` propagates.
* Malformed YAML  -> ``ConfigurationError`` chained to the ``yaml.YAMLError``.
* Missing or invalid fields  -> ``ConfigurationError``.
"""

from __future__ import annotations

import hashlib
import json
from pathlib import Path
from typing import Any

import yaml

from theater_config.schema import BillingConfiguration
from theater_kernel.domain.terms import (
    BillingTerms,
    ComedyTerms,
    TragedyTerms,
    VolumeCreditTerms,
)
from theater_kernel.exceptions import ConfigurationError


def load_yaml_file(path: Path) -> dict[str, Any]:
    """
    Load a single YAML file and return its contents as a dict.

    Raises:
        FileNotFoundError: if the file does not exist.
        ConfigurationError: if the file is not valid YAML or the document
            is not a mapping.
    """
    with open(path) as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ConfigurationError(
                f"Configuration document {path} is not valid YAML: {exc}"
            ) from exc
    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Configuration document {path} must be a mapping, "
            f"got {type(data).__name__}"
        )
    return data


def _section(data: dict[str, Any], key: str, path: str) -> dict[str, Any]:
    value = data.get(key)
    if not isinstance(value, dict):
        raise ConfigurationError(f"Missing section: {path}{key}", field=f"{path}{key}")
    return value


def _require(data: dict[str, Any], key: str, path: str) -> Any:
    if key not in data:
        raise ConfigurationError(f"Missing key: {path}{key}", field=f"{path}{key}")
    return data[key]


def parse_tragedy_terms(data: dict[str, Any]) -> TragedyTerms:
    p = "pricing.tragedy."
    return TragedyTerms(
        base_amount=_require(data, "base_amount", p),
        audience_threshold=_require(data, "audience_threshold", p),
        overage_per_person=_require(data, "overage_per_person", p),
    )


def parse_comedy_terms(data: dict[str, Any]) -> ComedyTerms:
    p = "pricing.comedy."
    return ComedyTerms(
        base_amount=_require(data, "base_amount", p),
        audience_threshold=_require(data, "audience_threshold", p),
        overage_flat_amount=_require(data, "overage_flat_amount", p),
        overage_per_person=_require(data, "overage_per_person", p),
        per_audience_amount=_require(data, "per_audience_amount", p),
    )


def parse_volume_credit_terms(data: dict[str, Any]) -> VolumeCreditTerms:
    p = "volume_credits."
    return VolumeCreditTerms(
        base_threshold=_require(data, "base_threshold", p),
        comedy_bonus_divisor=_require(data, "comedy_bonus_divisor", p),
    )


def parse_terms(data: dict[str, Any]) -> BillingTerms:
    """
    Parse ``BillingTerms`` from a configuration dict.

    Preconditions:
        - ``data`` has ``pricing.tragedy``, ``pricing.comedy`` and
          ``volume_credits`` sections.
    Raises:
        ConfigurationError: if a section or key is missing or out of range.
    """
    pricing = _section(data, "pricing", "")
    return BillingTerms(
        tragedy=parse_tragedy_terms(_section(pricing, "tragedy", "pricing.")),
        comedy=parse_comedy_terms(_section(pricing, "comedy", "pricing.")),
        volume_credits=parse_volume_credit_terms(
            _section(data, "volume_credits", "")
        ),
        currency=data.get("currency", "USD"),
        minor_units_per_major=data.get("minor_units_per_major", 100),
    )


def parse_configuration(data: dict[str, Any]) -> BillingConfiguration:
    """Parse a full ``BillingConfiguration`` (metadata + terms) from a dict."""
    return BillingConfiguration(
        config_id=str(_require(data, "config_id", "")),
        version=int(data.get("version", 1)),
        terms=parse_terms(data),
        checksum=compute_checksum(data),
        description=data.get("description", ""),
    )


def load_configuration(path: Path) -> BillingConfiguration:
    """Load and parse a configuration YAML file."""
    return parse_configuration(load_yaml_file(path))


def compute_checksum(data: dict[str, Any]) -> str:
    """
    Compute SHA-256 checksum of canonical JSON serialization.

    Identical ``data`` always produces identical checksums, independent of
    key order.
    """
    canonical = json.dumps(data, sort_keys=True, default=str)
    return hashlib.sha256(canonical.encode()).hexdigest()
