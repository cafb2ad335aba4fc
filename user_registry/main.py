"""FastAPI application factory."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from user_registry.config import configure_logging, get_settings
from user_registry.database import create_tables, dispose_engine, initialize_database
from user_registry.infrastructure.identity.routers import users

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Open the database on startup and release it on shutdown."""
    settings = get_settings()
    configure_logging(settings)
    logger.info("application_starting", environment=settings.ENVIRONMENT)

    initialize_database(settings)
    await create_tables()

    yield

    await dispose_engine()
    logger.info("application_stopped")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(users.router, prefix=settings.API_V1_PREFIX)

    return app


app = create_app()
