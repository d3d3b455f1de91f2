# vocab_http_api/container.py
from dependency_injector import containers, providers

from vocab_http_api.config import settings
from vocab_http_api.db.seed import DEFAULT_LANGUAGES
from vocab_http_api.db.session import build_engine, build_session_factory


class Container(containers.DeclarativeContainer):
    """
    Dependency Injection Container.

    Holds the process-wide database resources. Request-scoped objects
    (sessions, stores, services) are built per request in
    ``vocab_http_api.routers.dependencies`` from ``session_factory``.
    """

    config = providers.Configuration(pydantic_settings=[settings])

    # One engine (and connection pool) per process
    engine = providers.Singleton(
        build_engine,
        database_url=config.DATABASE_URL,
        echo=config.DEBUG,
    )

    session_factory = providers.Singleton(
        build_session_factory,
        engine=engine,
    )

    language_catalog = providers.Object(DEFAULT_LANGUAGES)


# Instantiate the container for global access (e.g. by FastAPI)
container = Container()
