"""
FastAPI Application Entry Point.

This is the main entry point for the notafacil backend application.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from notafacil.backend.api import health
from notafacil.backend.api.v1 import router as api_v1_router
from notafacil.backend.core.config import AppConfig, get_app_config
from notafacil.backend.core.database import dispose_engine
from notafacil.backend.core.exception_handlers import register_exception_handlers
from notafacil.backend.core.logging import get_logger, setup_logging
from notafacil.backend.core.middleware import RequestContextMiddleware

logger = get_logger(__name__)

_app: FastAPI | None = None


def run_startup_checks(app_config: AppConfig) -> None:
    """
    Refuse to start with settings that must never reach production.

    Raises:
        RuntimeError: If a production environment runs with debug or detailed errors on
    """
    app_settings = app_config.application
    if app_settings.environment != "production":
        return

    problems = []
    if app_settings.debug:
        problems.append("application.debug is enabled")
    if app_config.features.api_detailed_errors:
        problems.append("features.api_detailed_errors is enabled")

    if problems:
        raise RuntimeError(
            "Unsafe production configuration: " + "; ".join(problems)
        )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    app_config = get_app_config()
    setup_logging()

    if app_config.features.security_startup_checks_enabled:
        run_startup_checks(app_config)

    logger.info(
        "Application starting",
        extra={
            "app_name": app_config.application.name,
            "env": app_config.application.environment,
        },
    )
    yield
    await dispose_engine()
    logger.info("Application shutting down")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app_config = get_app_config()
    app_settings = app_config.application
    docs_enabled = app_settings.docs_enabled or app_settings.debug

    app = FastAPI(
        title=app_settings.name,
        description=app_settings.description,
        version=app_settings.version,
        docs_url="/docs" if docs_enabled else None,
        redoc_url="/redoc" if docs_enabled else None,
        lifespan=lifespan,
    )

    app.add_middleware(RequestContextMiddleware)

    cors_origins = app_settings.cors.origins
    if cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    register_exception_handlers(app)

    app.include_router(health.router, tags=["health"])
    app.include_router(api_v1_router, prefix=app_settings.api_prefix)

    return app


def get_app() -> FastAPI:
    """
    Get the application instance (lazy initialization).

    Use this instead of importing `app` directly to avoid
    import-time configuration errors.
    """
    global _app
    if _app is None:
        _app = create_app()
    return _app


# For uvicorn: `uvicorn notafacil.backend.main:app`
def __getattr__(name: str) -> FastAPI:
    """Support lazy access to `app` for uvicorn compatibility."""
    if name == "app":
        return get_app()
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
