# vocab_http_api/ports/language_store.py
from __future__ import annotations

from typing import List, Protocol, Sequence, Tuple

from vocab_http_api.db.models import Language


class ILanguageStore(Protocol):
    """
    Port for the read-only Language catalog.
    """

    def list_all(self) -> List[Language]:
        """All languages, ordered by id."""
        ...

    def seed_defaults(self, catalog: Sequence[Tuple[str, str]]) -> int:
        """
        Insert (name, flag) pairs if the catalog is empty.

        Returns:
            The number of languages inserted (0 if the table was populated).
        """
        ...
