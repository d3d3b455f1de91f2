# vocab_http_api/repositories/languages.py

from __future__ import annotations

from typing import List, Sequence, Tuple

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from ..db import models


class SqlAlchemyLanguageStore:
    """
    Thin data-access layer around the Language catalog.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    @property
    def session(self) -> Session:
        return self._session

    def list_all(self) -> List[models.Language]:
        stmt = select(models.Language).order_by(models.Language.id)
        return list(self.session.execute(stmt).scalars().all())

    def count(self) -> int:
        stmt = select(func.count()).select_from(models.Language)
        return int(self.session.execute(stmt).scalar_one())

    def seed_defaults(self, catalog: Sequence[Tuple[str, str]]) -> int:
        """
        Insert the given (name, flag) pairs when the table is empty.
        """
        if self.count() > 0:
            return 0

        self.session.add_all(
            models.Language(name=name, flag=flag) for name, flag in catalog
        )
        self.session.commit()
        return len(catalog)
