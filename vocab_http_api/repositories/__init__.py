# vocab_http_api/repositories/__init__.py
"""
Repository layer public exports.

Concrete SQLAlchemy implementations of the storage ports:

    from vocab_http_api.repositories import SqlAlchemyWordStore
"""

from .languages import SqlAlchemyLanguageStore
from .words import SqlAlchemyWordStore

__all__ = [
    "SqlAlchemyLanguageStore",
    "SqlAlchemyWordStore",
]
