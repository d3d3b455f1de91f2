# vocab_http_api/ports/__init__.py
"""
Storage ports (Protocols).

Services depend on these interfaces rather than on SQLAlchemy directly, so
tests can substitute mocks or alternative stores.
"""

from .language_store import ILanguageStore
from .word_store import IWordStore

__all__ = [
    "ILanguageStore",
    "IWordStore",
]
