"""Main application module.

This module builds the FastAPI application: settings, logging, database,
routes, middleware and exception handlers are wired together by
``create_app``.
"""

import time
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger

from taskhub.api import build_api_router
from taskhub.core.config import Settings
from taskhub.core.logging import setup_logging
from taskhub.core.url_logger import setup_url_logging
from taskhub.db.base import Database
from taskhub.middleware.logging import add_logging_middleware


def create_app(settings: Optional[Settings] = None, database: Optional[Database] = None) -> FastAPI:
    """Create a configured application instance.

    Args:
        settings: Settings to run with; read from the environment when omitted
        database: Database to use; built from ``settings`` when omitted

    Returns:
        FastAPI: The application, with ``settings`` and ``database`` on
        ``app.state``
    """
    settings = settings or Settings()
    setup_logging(settings)
    setup_url_logging(settings)

    database = database or Database(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"Starting {settings.APP_NAME} v{settings.APP_VERSION}")
        logger.info(f"Environment: {settings.ENVIRONMENT.value}")
        logger.info(f"Debug mode: {settings.DEBUG}")
        if settings.DB_CREATE_TABLES:
            await database.create_tables()
        yield
        logger.info(f"Shutting down {settings.APP_NAME}")
        await database.dispose()

    app = FastAPI(
        title=settings.APP_NAME,
        description=settings.APP_DESCRIPTION,
        version=settings.APP_VERSION,
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url="/redoc" if settings.DEBUG else None,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.database = database

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    if settings.REQUEST_LOGGING_ENABLED:
        add_logging_middleware(app)

    app.include_router(build_api_router(settings))

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"detail": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        """Handle validation errors with detailed information."""
        logger.warning(f"Request validation error: {exc}")
        return JSONResponse(
            status_code=422,
            content={"detail": "Validation error", "errors": jsonable_errors(exc)}
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Global exception handler to catch and log all unhandled exceptions."""
        error_id = f"error-{time.time()}"

        logger.opt(exception=exc).error(
            "Unhandled exception in {method} {path}",
            method=request.method,
            path=request.url.path,
            error_id=error_id,
            client_host=request.client.host if request.client else None,
        )

        return JSONResponse(
            status_code=500,
            content={
                "detail": "Internal server error occurred",
                "error_id": error_id,
                "message": str(exc) if settings.DEBUG else "Internal server error"
            }
        )

    return app


def jsonable_errors(exc: RequestValidationError):
    """Validation errors with non-JSON values (e.g. exceptions in ``ctx``) stringified."""
    errors = []
    for error in exc.errors():
        error = dict(error)
        if "ctx" in error:
            error["ctx"] = {key: str(value) for key, value in error["ctx"].items()}
        errors.append(error)
    return errors


def run() -> None:
    """Serve the application with uvicorn."""
    import uvicorn

    settings = Settings()
    uvicorn.run("taskhub.main:create_app", factory=True, host="0.0.0.0", port=settings.PORT)


if __name__ == "__main__":
    run()
