"""Structured logging for dunnet.

Every module asks for its logger with ``get_logger(__name__)`` and logs
snake_case events with key-value context. Certificate fingerprints are
replaced by a short digest before anything is rendered.
"""

import hashlib
import logging
import sys
from pathlib import Path
from typing import Any

import structlog

_REDACTED_KEYS = ("fingerprint",)


def _digest(value: str) -> str:
    return hashlib.sha256(value.encode()).hexdigest()[:12]


def hash_fingerprint_processor(
    logger: Any, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Swap player fingerprints for their digest."""
    for key in _REDACTED_KEYS:
        value = event_dict.pop(key, None)
        if value and value != "unknown":
            event_dict[f"{key}_hash"] = _digest(value)
    return event_dict


def configure_logging(
    log_level: str = "INFO",
    log_file: Path | None = None,
    json_logs: bool = False,
    hash_fingerprints: bool = True,
) -> None:
    """Configure structlog for console or JSON output."""
    output_stream = open(log_file, "a") if log_file else sys.stdout

    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(
            fmt="iso" if json_logs else "%Y-%m-%d %H:%M:%S"
        ),
    ]
    if hash_fingerprints:
        processors.append(hash_fingerprint_processor)

    if json_logs:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=output_stream.isatty()))

    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=output_stream),
        cache_logger_on_first_use=True,
    )


def bind_player(fingerprint: str) -> None:
    """Attach the player to every event logged in this context."""
    structlog.contextvars.bind_contextvars(fingerprint=fingerprint)


def clear_player() -> None:
    structlog.contextvars.unbind_contextvars("fingerprint")


def get_logger(name: str) -> structlog.BoundLogger:
    """Get a logger instance for a module."""
    return structlog.get_logger(name)
