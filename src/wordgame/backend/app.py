"""
FastAPI application for the wordgame backend.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.orm import Session

from wordgame import __version__
from wordgame.config import Settings, load_settings
from wordgame.db import Database, GameRepository
from wordgame.errors import GameError
from .routes import get_db_session, router as game_router
from .schemas import HealthResponse

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator:
    """
    Lifespan context manager for FastAPI app.

    Creates the schema on startup and releases connections on shutdown.
    """
    database: Database = app.state.database
    logger.info("Initializing database...")
    database.init()

    yield

    logger.info("Shutting down...")
    database.dispose()


async def handle_game_error(request: Request, exc: GameError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Build the application.

    Args:
        settings: Runtime settings. Read from the environment if None.

    Returns:
        Configured FastAPI app with its Database on app.state.database
    """
    settings = settings or load_settings()

    app = FastAPI(
        title="Word Game API",
        description="REST API for word-guessing games - teams, word pools and status",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.database = Database(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.allowed_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(GameError, handle_game_error)
    app.include_router(game_router)

    @app.get("/")
    async def root():
        """Root endpoint."""
        return {
            "message": "Word Game API",
            "version": __version__,
            "docs": "/docs",
        }

    @app.get("/health", response_model=HealthResponse)
    async def health_check(session: Session = Depends(get_db_session)):
        """
        Health check endpoint.

        Verifies database connectivity and returns the number of stored games.
        """
        try:
            session.execute(text("SELECT 1"))
            games = GameRepository(session).count()
        except Exception as e:
            logger.exception("Health check failed")
            # Still 200 so monitoring can tell the endpoint itself works
            return HealthResponse(status="unhealthy", database="error", error=str(e))

        return HealthResponse(status="healthy", database="connected", games=games)

    return app
