# tests/conftest.py
import pytest
from unittest.mock import MagicMock

from fastapi.testclient import TestClient

from vocab_http_api.config import AppEnv, Settings
from vocab_http_api.container import container
from vocab_http_api.db.session import build_engine, build_session_factory, create_schema
from vocab_http_api.ports.word_store import IWordStore
from vocab_http_api.repositories import SqlAlchemyLanguageStore, SqlAlchemyWordStore
from vocab_http_api.services import IngestionService, ReconciliationService


@pytest.fixture(scope="function")
def engine():
    """A fresh in-memory SQLite database per test."""
    engine = build_engine("sqlite://")
    create_schema(engine)
    yield engine
    engine.dispose()


@pytest.fixture(scope="function")
def session_factory(engine):
    return build_session_factory(engine)


@pytest.fixture(scope="function")
def session(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def word_store(session):
    return SqlAlchemyWordStore(session)


@pytest.fixture
def language_store(session):
    return SqlAlchemyLanguageStore(session)


@pytest.fixture
def ingestion_service(word_store):
    return IngestionService(word_store)


@pytest.fixture
def reconciliation_service(word_store):
    return ReconciliationService(word_store)


@pytest.fixture(scope="function")
def mock_word_store():
    """Returns a mock Word Store for isolation tests."""
    return MagicMock(spec=IWordStore)


@pytest.fixture
def test_settings():
    return Settings(
        APP_ENV=AppEnv.TESTING,
        DATABASE_URL="sqlite://",
        LOG_FORMAT="console",
        LOG_LEVEL="WARNING",
        CORS_ORIGINS="*",
    )


@pytest.fixture
def client(engine, session_factory, test_settings):
    """
    FastAPI TestClient bound to the per-test in-memory database.

    The container's engine and session factory are overridden so that
    startup (schema + language seeding) and every request use it.
    """
    from vocab_http_api.main import create_app

    container.engine.override(engine)
    container.session_factory.override(session_factory)
    try:
        app = create_app(test_settings)
        with TestClient(app) as c:
            yield c
    finally:
        container.session_factory.reset_override()
        container.engine.reset_override()
