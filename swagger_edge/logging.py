"""JSON-line logging for the swagger handler and its demo service.

Every record is a single JSON object ``{"event": ..., "level": ..., **fields}``.
The request correlation id, when bound, is attached automatically.
"""

from __future__ import annotations

import json
import logging
import os
import time
from contextvars import ContextVar
from typing import Any, Dict

LOGGER_NAME = "swagger_edge"
DEFAULT_LEVEL = "INFO"

correlation_id_var: ContextVar[str | None] = ContextVar("correlation_id", default=None)
_logger: logging.Logger | None = None


def _resolve_level(level: str | int | None) -> int:
    if isinstance(level, int):
        return level
    name = (level or os.getenv("SWAGGER_LOG_LEVEL") or DEFAULT_LEVEL).strip().upper()
    resolved = logging.getLevelName(name)
    return resolved if isinstance(resolved, int) else logging.INFO


def configure_logging(level: str | int | None = None, *, force: bool = False) -> logging.Logger:
    """Set up the ``swagger_edge`` logger.

    ``level`` wins over ``SWAGGER_LOG_LEVEL``; repeated calls are no-ops
    unless ``force`` is set, which only re-applies the level.
    """
    global _logger
    if _logger is not None and not force:
        return _logger

    resolved = _resolve_level(level)
    if _logger is None:
        logging.basicConfig(level=resolved, format="%(message)s")
        _logger = logging.getLogger(LOGGER_NAME)
    _logger.setLevel(resolved)
    return _logger


def set_correlation_id(value: str | None):
    """Bind a correlation ID for the current context and return the token."""
    return correlation_id_var.set(value)


def reset_correlation_id(token) -> None:
    correlation_id_var.reset(token)


def get_correlation_id() -> str | None:
    return correlation_id_var.get()


def _get_logger() -> logging.Logger:
    return _logger or configure_logging()


def _emit(level: int, event: str, fields: Dict[str, Any]) -> None:
    logger = _get_logger()
    if not logger.isEnabledFor(level):
        return
    record: Dict[str, Any] = {"event": event, "level": logging.getLevelName(level).lower(), **fields}
    correlation_id = get_correlation_id()
    if correlation_id:
        record.setdefault("correlation_id", correlation_id)
    logger.log(level, json.dumps(record, default=str))


def log_debug(event: str, **fields: Any) -> None:
    _emit(logging.DEBUG, event, fields)


def log_event(event: str, **fields: Any) -> None:
    _emit(logging.INFO, event, fields)


def log_error(event: str, **fields: Any) -> None:
    _emit(logging.ERROR, event, fields)


def log_duration(event: str, start_time: float, **fields: Any) -> None:
    duration = time.perf_counter() - start_time
    log_event(event, latency_ms=round(duration * 1000, 2), **fields)
