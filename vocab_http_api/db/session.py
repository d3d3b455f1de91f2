# vocab_http_api/db/session.py

from __future__ import annotations

from contextlib import contextmanager
from typing import Callable, Generator

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from .models import Base

# ---------------------------------------------------------------------------
# Engine / Session factory
# ---------------------------------------------------------------------------


def _is_memory_sqlite(database_url: str) -> bool:
    return database_url in ("sqlite://", "sqlite:///:memory:") or (
        database_url.startswith("sqlite") and "mode=memory" in database_url
    )


def build_engine(database_url: str, echo: bool = False) -> Engine:
    """
    Create the SQLAlchemy engine for ``database_url``.

    SQLite needs ``check_same_thread=False`` when used from the web server's
    thread pool; an in-memory database additionally needs a single shared
    connection, or every connection would see its own empty database.
    """
    kwargs: dict[str, object] = {}
    if database_url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
        if _is_memory_sqlite(database_url):
            kwargs["poolclass"] = StaticPool

    return create_engine(database_url, echo=echo, **kwargs)


def build_session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(
        bind=engine,
        autoflush=False,
        autocommit=False,
        expire_on_commit=False,
        class_=Session,
    )


def create_schema(engine: Engine) -> None:
    """Create all tables that do not exist yet."""
    Base.metadata.create_all(bind=engine)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


@contextmanager
def db_session(
    session_factory: Callable[[], Session],
) -> Generator[Session, None, None]:
    """
    Context manager for non-request usage, e.g. startup seeding or scripts.

        with db_session(container.session_factory()) as session:
            ...
    """
    session = session_factory()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


__all__ = [
    "build_engine",
    "build_session_factory",
    "create_schema",
    "db_session",
]
