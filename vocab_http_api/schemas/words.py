# vocab_http_api/schemas/words.py

"""
Pydantic models for the word ingestion and reconciliation endpoints.

Request models also accept the field names used by the first version of the
frontend (``base_language_id``, ``wordsList``/``deletedWords`` and the
``ID``/``TranslateWord``/``LearningLanguageID`` keys of word entries). Only
request payloads are backward compatible: responses always use the
``translated``/``untranslated`` lists and snake_case word fields.
"""

from __future__ import annotations

from typing import Any, List, Optional

from pydantic import AliasChoices, Field, field_validator

from vocab_http_api.domain.types import UNSET, WordEdit, WordRef
from .common import APIModel, LanguageID


# ---------------------------------------------------------------------------
# Word representation
# ---------------------------------------------------------------------------


class WordRead(APIModel):
    """
    A stored word as returned by the API.
    """

    id: int = Field(..., description="Database identifier")
    text: str = Field(..., description="Surface form as submitted")
    source_language_id: int = Field(..., description="Language the word was captured in")
    translation: Optional[str] = Field(
        default=None,
        description="Translation, or null while the word is untranslated.",
    )
    target_language_id: Optional[int] = Field(
        default=None,
        description="Language of the translation.",
    )


# ---------------------------------------------------------------------------
# Submit
# ---------------------------------------------------------------------------


class SubmitRequest(APIModel):
    """
    Free-form text to collect words from.
    """

    text: str = Field(..., description="Text to split on whitespace.")
    source_language_id: LanguageID = Field(
        ...,
        validation_alias=AliasChoices("source_language_id", "base_language_id"),
    )
    learning_language_id: LanguageID = Field(
        ...,
        description="Language new words will be translated into.",
    )


class SubmitResponse(APIModel):
    """
    Every distinct token of the submitted text, split by translation status.
    """

    translated: List[WordRead] = Field(default_factory=list)
    untranslated: List[WordRead] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Reconcile
# ---------------------------------------------------------------------------


class WordEditIn(APIModel):
    """
    Translation edit for one word.

    Omitting ``translation`` or ``target_language_id`` leaves the stored
    value unchanged; sending ``null`` clears it.
    """

    id: int = Field(..., validation_alias=AliasChoices("id", "ID"))
    translation: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("translation", "TranslateWord", "translate_word"),
    )
    target_language_id: Optional[int] = Field(
        default=None,
        validation_alias=AliasChoices(
            "target_language_id", "LearningLanguageID", "learning_language_id"
        ),
    )

    def to_domain(self) -> WordEdit:
        fields = self.model_fields_set
        return WordEdit(
            id=self.id,
            translation=self.translation if "translation" in fields else UNSET,
            target_language_id=(
                self.target_language_id if "target_language_id" in fields else UNSET
            ),
        )


class WordRefIn(APIModel):
    id: int = Field(..., validation_alias=AliasChoices("id", "ID"))

    def to_domain(self) -> WordRef:
        return WordRef(id=self.id)


class ReconcileRequest(APIModel):
    """
    Edits and deletions collected by the client in one session.
    """

    updates: List[WordEditIn] = Field(
        default_factory=list,
        validation_alias=AliasChoices("updates", "wordsList"),
    )
    deletions: List[WordRefIn] = Field(
        default_factory=list,
        validation_alias=AliasChoices("deletions", "deletedWords"),
    )

    @field_validator("updates", "deletions", mode="before")
    @classmethod
    def _null_as_empty(cls, value: Any) -> Any:
        return [] if value is None else value


class ReconcileResponse(APIModel):
    """
    Acknowledgment plus the per-item outcome of a reconciliation batch.
    """

    status: str = Field("success", description="Always 'success' once every item was attempted.")
    message: str
    deleted: List[int] = Field(default_factory=list)
    skipped_deletions: List[int] = Field(
        default_factory=list,
        description="Deletion ids that were not stored (already deleted or never existed).",
    )
    updated: List[int] = Field(default_factory=list)
    failed_updates: List[int] = Field(
        default_factory=list,
        description="Update ids that were not stored.",
    )


__all__ = [
    "WordRead",
    "SubmitRequest",
    "SubmitResponse",
    "WordEditIn",
    "WordRefIn",
    "ReconcileRequest",
    "ReconcileResponse",
]
