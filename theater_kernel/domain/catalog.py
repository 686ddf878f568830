"""Catalog lookup -- resolve a performance's play id to its Play."""

from __future__ import annotations

from theater_kernel.domain.values import Catalog, Performance, Play
from theater_kernel.exceptions import UnknownPlayIDError
from theater_kernel.logging_config import get_logger

logger = get_logger("domain.catalog")


def resolve_play(performance: Performance, catalog: Catalog) -> Play:
    """
    Return the catalog's Play for ``performance.play_id``.

    The catalog keeps ownership of the returned value.

    Raises:
        UnknownPlayIDError: If the play id is not a key of the catalog.
    """
    try:
        return catalog[performance.play_id]
    except KeyError:
        logger.error("catalog_unknown_play_id", extra={
            "play_id": performance.play_id,
            "catalog_size": len(catalog),
        })
        raise UnknownPlayIDError(performance.play_id) from None
