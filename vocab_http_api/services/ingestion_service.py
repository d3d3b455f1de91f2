# vocab_http_api/services/ingestion_service.py

from __future__ import annotations

from vocab_http_api.domain.exceptions import MalformedInputError
from vocab_http_api.domain.types import SubmissionResult
from vocab_http_api.logging import get_logger
from vocab_http_api.ports.word_store import IWordStore
from vocab_http_api.services.tokenizer import unique_tokens

logger = get_logger(__name__)


def _require_language_id(value: object, field_name: str) -> int:
    # bool is an int subclass but never a valid id
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise MalformedInputError(f"{field_name} must be a positive integer.")
    return value


class IngestionService:
    """
    Turns submitted text into stored words.

    Responsibilities:
    - Split the text into distinct tokens.
    - Persist tokens not yet known for the source language.
    - Report every token's word, split by translation status.
    """

    def __init__(self, store: IWordStore) -> None:
        self._store = store

    def submit(
        self,
        text: str,
        source_language_id: int,
        learning_language_id: int,
    ) -> SubmissionResult:
        """
        Ingest ``text`` captured in ``source_language_id``.

        New words are created untranslated, targeting
        ``learning_language_id``. Resubmitting the same text is idempotent.
        """
        if not isinstance(text, str):
            raise MalformedInputError("text must be a string.")
        source_language_id = _require_language_id(
            source_language_id, "source_language_id"
        )
        learning_language_id = _require_language_id(
            learning_language_id, "learning_language_id"
        )

        result = SubmissionResult()
        created = 0

        for token in unique_tokens(text):
            word, was_created = self._store.get_or_create(
                token,
                source_language_id,
                target_language_id=learning_language_id,
            )
            created += int(was_created)

            if word.translation is not None:
                result.translated.append(word)
            else:
                result.untranslated.append(word)

        logger.info(
            "text_submitted",
            source_language_id=source_language_id,
            learning_language_id=learning_language_id,
            tokens=len(result.translated) + len(result.untranslated),
            created=created,
            translated=len(result.translated),
        )
        return result
