# vocab_http_api/domain/types.py

"""
Value types passed between the HTTP layer and the services.

Optional word attributes distinguish three states:

- ``UNSET``: leave the stored value unchanged,
- ``None``: clear the stored value,
- a concrete value: overwrite.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Final, List, Literal, Union

from vocab_http_api.db.models import Word


class _Unset(enum.Enum):
    UNSET = "UNSET"

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET: Final = _Unset.UNSET

UnsetType = Literal[_Unset.UNSET]

OptionalUpdate = Union[UnsetType, None, str]
OptionalIdUpdate = Union[UnsetType, None, int]


@dataclass(frozen=True)
class WordEdit:
    """A translation edit for one stored word."""

    id: int
    translation: OptionalUpdate = UNSET
    target_language_id: OptionalIdUpdate = UNSET


@dataclass(frozen=True)
class WordRef:
    """Reference to a stored word, used for deletions."""

    id: int


@dataclass
class SubmissionResult:
    """Known words for one submission, split by translation status."""

    translated: List[Word] = field(default_factory=list)
    untranslated: List[Word] = field(default_factory=list)

    @property
    def words(self) -> List[Word]:
        return [*self.translated, *self.untranslated]


@dataclass
class ReconcileResult:
    """Per-item outcome of a reconciliation batch."""

    deleted: List[int] = field(default_factory=list)
    skipped_deletions: List[int] = field(default_factory=list)
    updated: List[int] = field(default_factory=list)
    failed_updates: List[int] = field(default_factory=list)

    @property
    def message(self) -> str:
        return (
            f"{len(self.updated)} word(s) updated, {len(self.deleted)} deleted"
            + (
                f", {len(self.failed_updates)} update(s) skipped"
                if self.failed_updates
                else ""
            )
        )


__all__ = [
    "UNSET",
    "UnsetType",
    "OptionalUpdate",
    "OptionalIdUpdate",
    "WordEdit",
    "WordRef",
    "SubmissionResult",
    "ReconcileResult",
]
