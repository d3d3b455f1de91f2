# vocab_http_api/logging/config.py

"""
Logging configuration for the vocabulary collector API.

Typical usage in the API entrypoint (``vocab_http_api/main.py``)::

    from vocab_http_api.logging.config import configure_logging

    configure_logging()

structlog emits JSON lines when ``LOG_FORMAT=json`` (the default) and
colored console output otherwise. Standard library logging (uvicorn,
SQLAlchemy) is routed to stdout at the same level.
"""

from __future__ import annotations

import logging
import sys
from typing import List, Optional

import structlog

from vocab_http_api.config import Settings, settings as default_settings


def _parse_level(value: Optional[str]) -> int:
    """
    Map a string log level (e.g. 'DEBUG', 'info') to a logging constant.

    Unknown or empty values fall back to ``logging.INFO``.
    """
    if not value:
        return logging.INFO
    level = getattr(logging, value.strip().upper(), None)
    return level if isinstance(level, int) else logging.INFO


def configure_logging(config: Optional[Settings] = None) -> None:
    """
    Configure structlog and the standard logging library.

    Safe to call more than once; the last call wins.
    """
    cfg = config or default_settings
    level = _parse_level(cfg.LOG_LEVEL)

    processors: List[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if cfg.LOG_FORMAT == "json":
        processors.append(structlog.processors.JSONRenderer(ensure_ascii=False))
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=False,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=level,
    )


__all__ = ["configure_logging"]
