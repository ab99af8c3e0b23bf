"""
Entry point for running the FastAPI backend server.

Usage:
    uv run python -m wordgame.backend.main

Or with uvicorn directly:
    uv run uvicorn wordgame.backend.main:app --reload
"""

import logging

import uvicorn

from wordgame.config import configure_logging, load_settings
from .app import create_app


def build_app():
    """App for this process, with logging set up from the environment."""
    settings = load_settings()
    configure_logging(settings.log_level)
    return create_app(settings)


# Also imported directly by uvicorn, including reload workers
app = build_app()


def main():
    """Run the FastAPI server."""
    settings = load_settings()
    logging.getLogger(__name__).info(
        "Word game server starting on %s:%d", settings.host, settings.port
    )
    uvicorn.run(
        "wordgame.backend.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
        log_level=settings.log_level,
    )


if __name__ == "__main__":
    main()
