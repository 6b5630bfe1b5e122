"""
Structured logging for evaluation events.

Every record is one JSON object on stderr (or a console line with
LOG_FORMAT=console) carrying event_type, level, logger, an ISO timestamp and
whatever fields the caller passes: candidate_id, score, tier, signal_id.
stdout stays free for command output such as the CLI's JSON evaluation.

Logging starts with JSON at INFO so that importing any module can log.
Entrypoints (main.py, the CLI, the ASGI app) then call configure_logging()
to apply LOG_LEVEL / LOG_FORMAT from Settings, which includes values read
from .env.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Any

import structlog

if TYPE_CHECKING:
    from signal_graph.config.settings import Settings

LOG_FORMATS = ("json", "console")


def _normalize_event(
    logger: Any,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Rename structlog 'event' to event_type; mirror it into message."""
    if "event" in event_dict and "event_type" not in event_dict:
        event_dict["event_type"] = event_dict.pop("event")
    if "message" not in event_dict and "event_type" in event_dict:
        event_dict["message"] = str(event_dict["event_type"])
    return event_dict


def _stderr_logger_factory(*args: Any) -> structlog.PrintLogger:
    # Resolve sys.stderr on every call so redirected streams are honoured.
    return structlog.PrintLogger(file=sys.stderr)


def _level_value(level: str | int) -> int:
    if isinstance(level, int):
        return level
    return getattr(logging, str(level).strip().upper(), logging.INFO)


def configure_structlog(log_format: str = "json", level: str | int = "INFO") -> None:
    """Install the processor chain; log_format is 'json' or 'console'."""
    # The console renderer lays out its own event column, so the rename is JSON only.
    if log_format == "console":
        tail: list[Any] = [structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())]
    else:
        tail = [_normalize_event, structlog.processors.JSONRenderer()]
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True, key="timestamp"),
            structlog.processors.format_exc_info,
            *tail,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(_level_value(level)),
        context_class=dict,
        logger_factory=_stderr_logger_factory,
        cache_logger_on_first_use=False,
    )


def configure_logging(settings: Settings | None = None) -> None:
    """Apply Settings.log_format / Settings.log_level to every logger."""
    if settings is None:
        from signal_graph.config import get_settings

        settings = get_settings()
    log_format = settings.log_format if settings.log_format in LOG_FORMATS else "json"
    configure_structlog(log_format, settings.log_level)


if not structlog.is_configured():
    configure_structlog()


def get_logger(name: str) -> Any:
    """
    Return a logger for the given module name.

    The logger is resolved lazily, so a later configure_logging() call also
    applies to module-level loggers created at import time.
    """
    return structlog.get_logger(name, logger=name)


def bind_candidate(candidate_id: str, name: str = "signal_graph") -> Any:
    """Logger for `name` with candidate_id bound to every call."""
    return get_logger(name).bind(candidate_id=candidate_id)
