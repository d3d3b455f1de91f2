"""
Entry point for the vocabulary collector HTTP API.

This module creates the FastAPI application, wires up middleware and error
handlers, and mounts the routers.

Intended usage:
    uvicorn vocab_http_api.main:app --host 0.0.0.0 --port 3000
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from vocab_http_api import __version__
from vocab_http_api.config import Settings, settings as default_settings
from vocab_http_api.container import container
from vocab_http_api.db.session import create_schema, db_session
from vocab_http_api.domain.exceptions import (
    ConstraintViolationError,
    MalformedInputError,
    StoreUnavailableError,
    VocabularyError,
    WordNotFoundError,
)
from vocab_http_api.logging import get_logger
from vocab_http_api.logging.config import configure_logging
from vocab_http_api.repositories import SqlAlchemyLanguageStore
from vocab_http_api.routers import languages, words

logger = get_logger(__name__)


_STATUS_BY_ERROR = {
    MalformedInputError: status.HTTP_400_BAD_REQUEST,
    WordNotFoundError: status.HTTP_404_NOT_FOUND,
    ConstraintViolationError: status.HTTP_409_CONFLICT,
    StoreUnavailableError: status.HTTP_503_SERVICE_UNAVAILABLE,
}


def _error_response(code: int, error: str, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=code,
        content={
            "status": "error",
            "code": code,
            "error": error,
            "message": message,
        },
    )


def _format_validation_errors(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()) if p != "body")
        parts.append(f"{loc}: {err.get('msg')}" if loc else str(err.get("msg")))
    return "; ".join(parts) or "Could not parse request body."


# ---------------------------------------------------------------------------
# Application factory
# ---------------------------------------------------------------------------


def create_app(config: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure the FastAPI application instance.
    """
    cfg = config or default_settings
    configure_logging(cfg)

    if config is not None:
        # Rebuild the database singletons from the given settings.
        container.config.from_pydantic(cfg)
        container.session_factory.reset()
        container.engine.reset()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """
        Create tables and seed the language catalog before serving.
        """
        create_schema(container.engine())

        if cfg.SEED_LANGUAGES:
            with db_session(container.session_factory()) as session:
                inserted = SqlAlchemyLanguageStore(session).seed_defaults(
                    container.language_catalog()
                )
            if inserted:
                logger.info("languages_seeded", count=inserted)

        logger.info(
            "app_starting",
            app=cfg.APP_NAME,
            env=cfg.APP_ENV.value,
            version=__version__,
        )
        yield
        logger.info("app_stopping", app=cfg.APP_NAME)

    app = FastAPI(
        title="Vocabulary Collector API",
        version=__version__,
        debug=cfg.DEBUG,
        openapi_url="/openapi.json" if cfg.docs_enabled else None,
        docs_url="/docs" if cfg.docs_enabled else None,
        redoc_url="/redoc" if cfg.docs_enabled else None,
        lifespan=lifespan,
    )

    # CORS configuration
    cors_origins = cfg.cors_origin_list
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins,
        allow_credentials=False,
        allow_methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["Content-Type", "Authorization"],
    )

    # --- Exception handlers ---

    @app.exception_handler(VocabularyError)
    async def vocabulary_error_handler(request: Request, exc: VocabularyError):
        code = _STATUS_BY_ERROR.get(type(exc), status.HTTP_500_INTERNAL_SERVER_ERROR)
        if code >= 500:
            logger.error("request_failed", path=request.url.path, error=exc.message)
        return _error_response(code, exc.code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        message = _format_validation_errors(exc)
        logger.info("request_malformed", path=request.url.path, detail=message)
        return _error_response(
            status.HTTP_400_BAD_REQUEST,
            MalformedInputError.code,
            message,
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return _error_response(exc.status_code, "http_error", str(exc.detail))

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.error("unhandled_exception", path=request.url.path, exc_info=exc)
        return _error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "internal_error",
            str(exc) if cfg.DEBUG else "Internal Server Error",
        )

    # Simple health check
    @app.get("/health", tags=["system"])
    async def health() -> dict:
        return {"status": "ok", "version": __version__}

    app.include_router(words.router)
    app.include_router(languages.router)

    return app


# Default application instance
app = create_app()


def run() -> None:
    """Console entry point: serve ``app`` with uvicorn."""
    import uvicorn

    uvicorn.run(
        "vocab_http_api.main:app",
        host=default_settings.HOST,
        port=default_settings.PORT,
        reload=default_settings.RELOAD,
    )


if __name__ == "__main__":
    run()
