"""
vocab_http_api.db
=================

Database package for the vocabulary collector API.

Centralizes the public DB primitives so the rest of the service can import
them from a single place, e.g.:

    from vocab_http_api.db import Base, Word, build_engine
"""

from .models import Base, Language, Word
from .seed import DEFAULT_LANGUAGES
from .session import build_engine, build_session_factory, create_schema, db_session

__all__ = [
    "Base",
    "Language",
    "Word",
    "DEFAULT_LANGUAGES",
    "build_engine",
    "build_session_factory",
    "create_schema",
    "db_session",
]
