"""
Structured JSON logging for theater billing.

Every record is one JSON object per line::

    {"ts": "...", "level": "INFO", "logger": "theater_kernel.engines.statement",
     "event": "statement_build_completed", "customer": "BigCo",
     "config_id": "standard", "line_count": 3, ...}

Log messages are event names; payload data travels in ``extra=``.
Statement-scoped fields (the customer being billed and the configuration
set in force) come from ``LogContext`` so engines need not pass them
around.  A ``TheaterBillingError`` attached to a record is rendered as an
``error`` object carrying its code and structured attributes; any other
exception also gets a traceback.
"""

__all__ = [
    "StructuredFormatter",
    "LogContext",
    "get_logger",
    "configure_logging",
    "reset_logging",
]

import json
import logging
import sys
import threading
from contextlib import contextmanager
from contextvars import ContextVar
from datetime import UTC, datetime
from typing import Any, Iterator

from theater_kernel.exceptions import TheaterBillingError


class LogContext:
    """Statement-scoped log fields, safe across threads and tasks."""

    FIELDS = ("customer", "config_id")

    _fields: ContextVar[dict[str, str]] = ContextVar("theater_log_context")

    @classmethod
    def _check(cls, names) -> None:
        unknown = set(names) - set(cls.FIELDS)
        if unknown:
            raise TypeError(f"Unknown log context field(s): {sorted(unknown)}")

    @classmethod
    def set(cls, **fields: str | None) -> None:
        """Set context fields. ``None`` values are ignored."""
        cls._check(fields)
        current = dict(cls._fields.get({}))
        current.update({k: v for k, v in fields.items() if v is not None})
        cls._fields.set(current)

    @classmethod
    def get_all(cls) -> dict[str, str]:
        return dict(cls._fields.get({}))

    @classmethod
    def clear(cls) -> None:
        cls._fields.set({})

    @classmethod
    @contextmanager
    def bind(cls, **fields: str | None) -> Iterator[None]:
        """Set fields for the duration of a block, then restore."""
        cls._check(fields)
        current = dict(cls._fields.get({}))
        current.update({k: v for k, v in fields.items() if v is not None})
        token = cls._fields.set(current)
        try:
            yield
        finally:
            cls._fields.reset(token)


_RECORD_KEYS: frozenset[str] = frozenset(
    vars(logging.LogRecord("", 0, "", 0, "", (), None))
) | {"message", "taskName"}


def _error_payload(exc: BaseException) -> dict[str, Any]:
    error: dict[str, Any] = {"type": type(exc).__name__, "message": str(exc)}
    if isinstance(exc, TheaterBillingError):
        error["code"] = exc.code
        error.update(
            (k, v) for k, v in vars(exc).items() if not k.startswith("_")
        )
    return error


class StructuredFormatter(logging.Formatter):
    """Formats each log record as a single JSON line."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "event": record.getMessage(),
        }
        payload.update(LogContext.get_all())
        payload.update(
            (k, v) for k, v in vars(record).items()
            if k not in _RECORD_KEYS and k not in payload
        )

        if record.exc_info and record.exc_info[1] is not None:
            exc = record.exc_info[1]
            payload["error"] = _error_payload(exc)
            if not isinstance(exc, TheaterBillingError):
                payload["traceback"] = self.formatException(record.exc_info)

        # Decimal, Enum and dataclass values fall back to str()
        return json.dumps(payload, default=str)


_LOGGER_PREFIX = "theater_kernel"


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the theater_kernel namespace."""
    return logging.getLogger(f"{_LOGGER_PREFIX}.{name}")


_configured = False
_lock = threading.Lock()


def configure_logging(
    *,
    level: int = logging.INFO,
    stream: Any = None,
) -> None:
    """Send theater_kernel records to ``stream`` (stderr) as JSON. Idempotent."""
    global _configured
    with _lock:
        if _configured:
            return
        _configured = True

    logger = logging.getLogger(_LOGGER_PREFIX)
    logger.setLevel(level)
    logger.propagate = False
    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(StructuredFormatter())
    logger.addHandler(handler)


def reset_logging() -> None:
    """Undo ``configure_logging``. For tests."""
    global _configured
    with _lock:
        _configured = False
    logger = logging.getLogger(_LOGGER_PREFIX)
    logger.handlers.clear()
    logger.setLevel(logging.WARNING)
    logger.propagate = True
