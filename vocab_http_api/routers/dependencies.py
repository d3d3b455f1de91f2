# vocab_http_api/routers/dependencies.py
from __future__ import annotations

from typing import Generator

from fastapi import Depends
from sqlalchemy.orm import Session

from vocab_http_api.container import container
from vocab_http_api.ports import ILanguageStore, IWordStore
from vocab_http_api.repositories import SqlAlchemyLanguageStore, SqlAlchemyWordStore
from vocab_http_api.services import IngestionService, ReconciliationService


def get_session() -> Generator[Session, None, None]:
    """
    Yield a request-scoped database session and ensure it is closed
    afterwards.
    """
    session = container.session_factory()()
    try:
        yield session
    finally:
        session.close()


def get_word_store(session: Session = Depends(get_session)) -> IWordStore:
    return SqlAlchemyWordStore(session)


def get_language_store(
    session: Session = Depends(get_session),
) -> ILanguageStore:
    return SqlAlchemyLanguageStore(session)


def get_ingestion_service(
    store: IWordStore = Depends(get_word_store),
) -> IngestionService:
    return IngestionService(store)


def get_reconciliation_service(
    store: IWordStore = Depends(get_word_store),
) -> ReconciliationService:
    return ReconciliationService(store)
