# vocab_http_api/services/reconciliation_service.py

from __future__ import annotations

from typing import Sequence

from vocab_http_api.domain.exceptions import WordNotFoundError
from vocab_http_api.domain.types import ReconcileResult, WordEdit, WordRef
from vocab_http_api.logging import get_logger
from vocab_http_api.ports.word_store import IWordStore

logger = get_logger(__name__)


class ReconciliationService:
    """
    Applies a batch of translation edits and deletions from one client
    round-trip.

    Deletions run before updates. Every item is applied on its own: a
    missing id is recorded in the result and the batch carries on.
    Infrastructure errors are not caught and abort the remaining items.
    """

    def __init__(self, store: IWordStore) -> None:
        self._store = store

    def reconcile(
        self,
        updates: Sequence[WordEdit],
        deletions: Sequence[WordRef],
    ) -> ReconcileResult:
        result = ReconcileResult()

        for ref in deletions:
            try:
                self._store.delete(ref.id)
            except WordNotFoundError:
                logger.debug("word_delete_skipped", word_id=ref.id)
                result.skipped_deletions.append(ref.id)
            else:
                result.deleted.append(ref.id)

        for edit in updates:
            try:
                self._store.update_translation(
                    edit.id,
                    translation=edit.translation,
                    target_language_id=edit.target_language_id,
                )
            except WordNotFoundError:
                logger.warning("word_update_skipped", word_id=edit.id)
                result.failed_updates.append(edit.id)
            else:
                result.updated.append(edit.id)

        logger.info(
            "words_reconciled",
            deleted=len(result.deleted),
            skipped_deletions=len(result.skipped_deletions),
            updated=len(result.updated),
            failed_updates=len(result.failed_updates),
        )
        return result
