"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from hausdog.config import get_settings
from hausdog.application.services import CategoryService
from hausdog.infrastructure.database import Base, get_engine, get_session_factory
from hausdog.infrastructure.database.repositories import SQLAlchemyCategoryRepository
from hausdog.infrastructure.logging.log_config import setup_logging
from hausdog.presentation.api.router import router as api_router
from hausdog.presentation.auth_router import router as auth_router

logger = logging.getLogger(__name__)


async def _seed_default_categories() -> None:
    """Ensure the built-in categories exist. Idempotent, safe on every startup."""
    async with get_session_factory()() as session:
        added = await CategoryService(SQLAlchemyCategoryRepository(session)).seed_defaults()
        await session.commit()
    if not added:
        logger.debug("Default categories already present")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan — configure logging, create tables, seed reference data."""
    settings = get_settings()
    setup_logging()

    engine = get_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    await _seed_default_categories()
    logger.info(
        "Hausdog API started",
        extra={"environment": settings.node_env, "base_url": settings.get_base_url()},
    )

    yield

    await engine.dispose()


def create_app() -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router)
    app.include_router(auth_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "hausdog.main:app",
        host="0.0.0.0",
        port=get_settings().port,
        reload=get_settings().is_development,
    )
