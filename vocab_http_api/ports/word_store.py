# vocab_http_api/ports/word_store.py
from __future__ import annotations

from typing import List, Optional, Protocol, Tuple

from vocab_http_api.db.models import Word
from vocab_http_api.domain.types import UNSET, OptionalIdUpdate, OptionalUpdate


class IWordStore(Protocol):
    """
    Port for persisted Word records.

    Every mutating call is atomic on its own. Implementations raise
    ``StoreUnavailableError`` for infrastructure failures.
    """

    def find_by_text_and_language(
        self, text: str, source_language_id: int
    ) -> Optional[Word]:
        """
        Look up a word by its surface form and source language.

        Returns:
            The Word if found, None otherwise.
        """
        ...

    def get(self, word_id: int) -> Optional[Word]:
        """Fetch a word by primary key, or None."""
        ...

    def create(
        self,
        text: str,
        source_language_id: int,
        target_language_id: Optional[int] = None,
    ) -> Word:
        """
        Persist a new, untranslated word.

        Raises:
            ConstraintViolationError: (text, source_language_id) already exists.
        """
        ...

    def get_or_create(
        self,
        text: str,
        source_language_id: int,
        target_language_id: Optional[int] = None,
    ) -> Tuple[Word, bool]:
        """
        Return the stored word for (text, source_language_id), creating it
        if needed. The boolean is True when this call created the record.
        """
        ...

    def update_translation(
        self,
        word_id: int,
        translation: OptionalUpdate = UNSET,
        target_language_id: OptionalIdUpdate = UNSET,
    ) -> Word:
        """
        Set, clear (None) or keep (UNSET) the translation fields of a word.

        Raises:
            WordNotFoundError: no word has this id.
        """
        ...

    def delete(self, word_id: int) -> None:
        """
        Remove a word.

        Raises:
            WordNotFoundError: no word has this id.
        """
        ...

    def list_all(self) -> List[Word]:
        """All stored words, ordered by id."""
        ...

    def count(self, source_language_id: Optional[int] = None) -> int:
        """Number of stored words, optionally for one source language."""
        ...
