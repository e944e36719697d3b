"""structlog setup: colored console lines plus a JSONL file under output/logs."""

import logging
from typing import Any

import structlog

from backoffice.config import DB_ECHO, LOG_FILE, LOG_LEVEL, VERBOSE_LOGGING

_configured = False


def _configure_logging() -> None:
    global _configured
    if _configured:
        return

    level = logging.DEBUG if VERBOSE_LOGGING else logging.getLevelName(LOG_LEVEL)
    if not isinstance(level, int):
        level = logging.INFO
    shared = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]

    handlers: list[logging.Handler] = [logging.StreamHandler(), logging.FileHandler(LOG_FILE, encoding="utf-8")]
    renderers = [structlog.dev.ConsoleRenderer(colors=True), structlog.processors.JSONRenderer()]
    for handler, renderer in zip(handlers, renderers):
        handler.setFormatter(structlog.stdlib.ProcessorFormatter(processor=renderer, foreign_pre_chain=shared))

    root = logging.getLogger()
    root.handlers[:] = handlers
    root.setLevel(level)
    logging.captureWarnings(True)

    # DB_ECHO keeps SQL statements visible; access lines duplicate our request logs
    logging.getLogger("sqlalchemy.engine").setLevel(logging.INFO if DB_ECHO else logging.WARNING)
    for name in ("uvicorn.access", "httpx"):
        logging.getLogger(name).setLevel(logging.WARNING)

    structlog.configure(
        processors=shared
        + [
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.make_filtering_bound_logger(level),
        cache_logger_on_first_use=True,
    )
    _configured = True


def get_logger(name: str = "backoffice", **bindings: Any) -> structlog.stdlib.BoundLogger:
    """Structured logger for `name`, optionally pre-bound with context."""
    _configure_logging()
    logger = structlog.get_logger(name)
    return logger.bind(**bindings) if bindings else logger


def bind_context(**context: Any) -> None:
    """Attach request-scoped values (request_id, path...) to every log line."""
    structlog.contextvars.bind_contextvars(**context)


def clear_context() -> None:
    structlog.contextvars.clear_contextvars()
