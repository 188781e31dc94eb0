"""FastAPI application factory."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI

from gamehub.config import get_settings
from gamehub.games.router import router as games_router
from gamehub.health.router import router as health_router
from gamehub.leaderboard.router import router as leaderboard_router
from gamehub.middleware import setup_middleware
from gamehub.progress.router import router as progress_router
from gamehub.store.client import close_store, init_store

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncGenerator[None, None]:
    """Startup and shutdown lifecycle."""
    settings = get_settings()
    await init_store(settings)
    logger.info("store_ready", backend=settings.store_backend, namespace=settings.store_namespace)

    yield

    await close_store()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title="Game Hub API",
        description="Difficulty curves, sequence puzzles and leaderboards for the Game Hub mini-games",
        version=settings.app_version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        lifespan=lifespan,
    )

    setup_middleware(app, settings)
    app.include_router(health_router, tags=["Health"])
    app.include_router(games_router)
    app.include_router(progress_router)
    app.include_router(leaderboard_router)

    return app


app = create_app()
