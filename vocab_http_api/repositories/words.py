# vocab_http_api/repositories/words.py

from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Iterator, List, Optional, Tuple

from sqlalchemy import Select, func, select, update
from sqlalchemy import delete as sql_delete
from sqlalchemy.exc import DBAPIError, IntegrityError
from sqlalchemy.orm import Session

from ..db import models
from ..domain.exceptions import (
    ConstraintViolationError,
    StoreUnavailableError,
    WordNotFoundError,
)
from ..domain.types import UNSET, OptionalIdUpdate, OptionalUpdate
from ..logging import get_logger

logger = get_logger(__name__)


class SqlAlchemyWordStore:
    """
    Data-access layer around the Word model.

    Each write runs as its own transaction so that one failing item never
    rolls back work already done for other items of the same request.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @property
    def session(self) -> Session:
        return self._session

    def _base_select(self) -> Select[Any]:
        return select(models.Word)

    @contextmanager
    def _read(self) -> Iterator[None]:
        try:
            yield
        except DBAPIError as exc:
            self.session.rollback()
            logger.error("word_store_read_failed", error=str(exc.orig))
            raise StoreUnavailableError(str(exc.orig)) from exc

    @contextmanager
    def _write(self) -> Iterator[None]:
        """
        Commit on success; roll back and translate driver errors otherwise.

        IntegrityError is re-raised unchanged so callers can map it to the
        domain error that fits the operation.
        """
        try:
            yield
            self.session.commit()
        except IntegrityError:
            self.session.rollback()
            raise
        except DBAPIError as exc:
            self.session.rollback()
            logger.error("word_store_write_failed", error=str(exc.orig))
            raise StoreUnavailableError(str(exc.orig)) from exc
        except Exception:
            self.session.rollback()
            raise

    # ------------------------------------------------------------------
    # Read operations
    # ------------------------------------------------------------------

    def find_by_text_and_language(
        self, text: str, source_language_id: int
    ) -> Optional[models.Word]:
        """
        Fetch the word with this surface form and source language, or None.
        """
        stmt = self._base_select().where(
            models.Word.text == text,
            models.Word.source_language_id == source_language_id,
        )
        with self._read():
            return self.session.execute(stmt).scalar_one_or_none()

    def get(self, word_id: int) -> Optional[models.Word]:
        with self._read():
            return self.session.get(models.Word, word_id)

    def list_all(self) -> List[models.Word]:
        stmt = self._base_select().order_by(models.Word.id)
        with self._read():
            return list(self.session.execute(stmt).scalars().all())

    def count(self, source_language_id: Optional[int] = None) -> int:
        stmt = select(func.count()).select_from(models.Word)
        if source_language_id is not None:
            stmt = stmt.where(models.Word.source_language_id == source_language_id)
        with self._read():
            return int(self.session.execute(stmt).scalar_one())

    # ------------------------------------------------------------------
    # Write operations
    # ------------------------------------------------------------------

    def create(
        self,
        text: str,
        source_language_id: int,
        target_language_id: Optional[int] = None,
    ) -> models.Word:
        """
        Create and persist a new, untranslated Word.
        """
        word = models.Word(
            text=text,
            source_language_id=source_language_id,
            target_language_id=target_language_id,
            translation=None,
        )

        try:
            with self._write():
                self.session.add(word)
                self.session.flush()
        except IntegrityError as exc:
            raise ConstraintViolationError(text, source_language_id) from exc

        logger.debug(
            "word_created",
            word_id=word.id,
            text=text,
            source_language_id=source_language_id,
        )
        return word

    def get_or_create(
        self,
        text: str,
        source_language_id: int,
        target_language_id: Optional[int] = None,
    ) -> Tuple[models.Word, bool]:
        """
        Return the stored word, creating it first if it does not exist.

        A concurrent request may insert the same word between our lookup and
        our insert; the unique constraint rejects the second insert and we
        read back the record that won.
        """
        existing = self.find_by_text_and_language(text, source_language_id)
        if existing is not None:
            return existing, False

        try:
            return self.create(text, source_language_id, target_language_id), True
        except ConstraintViolationError:
            logger.info(
                "word_create_race_lost",
                text=text,
                source_language_id=source_language_id,
            )

        winner = self.find_by_text_and_language(text, source_language_id)
        if winner is None:
            # The conflicting row vanished again (deleted concurrently).
            return self.create(text, source_language_id, target_language_id), True
        return winner, False

    def update_translation(
        self,
        word_id: int,
        translation: OptionalUpdate = UNSET,
        target_language_id: OptionalIdUpdate = UNSET,
    ) -> models.Word:
        """
        Apply a partial translation update; UNSET fields are left untouched.

        Runs as one UPDATE ... WHERE id statement; a row deleted by another
        request since this session loaded it raises WordNotFoundError.
        """
        values = {}
        if translation is not UNSET:
            values["translation"] = translation
        if target_language_id is not UNSET:
            values["target_language_id"] = target_language_id

        if values:
            stmt = (
                update(models.Word)
                .where(models.Word.id == word_id)
                .values(**values)
            )
            with self._write():
                matched = self.session.execute(stmt).rowcount
            if not matched:
                raise WordNotFoundError(word_id)

        with self._read():
            word = self.session.get(models.Word, word_id, populate_existing=True)
        if word is None:
            raise WordNotFoundError(word_id)
        return word

    def delete(self, word_id: int) -> None:
        stmt = sql_delete(models.Word).where(models.Word.id == word_id)
        with self._write():
            matched = self.session.execute(stmt).rowcount
        if not matched:
            raise WordNotFoundError(word_id)
