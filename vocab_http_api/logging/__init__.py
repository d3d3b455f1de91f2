# vocab_http_api/logging/__init__.py

"""
Logging helpers for the vocabulary collector API.

API code obtains loggers through this module:

    from vocab_http_api.logging import get_logger

    logger = get_logger(__name__)
    logger.info("word_created", word_id=word.id)

and stays decoupled from the concrete structlog setup, which lives in
``vocab_http_api.logging.config``.
"""

from __future__ import annotations

from typing import Any, Optional

import structlog


DEFAULT_LOGGER_NAME = "vocab_http_api"


def get_logger(name: Optional[str] = None, **initial_values: Any) -> Any:
    """
    Return a structlog logger bound to ``name``.

    If ``name`` is omitted the service-level default (``vocab_http_api``) is
    used. Extra keyword arguments are bound as context on every event.
    """
    return structlog.get_logger(name or DEFAULT_LOGGER_NAME, **initial_values)


__all__ = ["get_logger", "DEFAULT_LOGGER_NAME"]
