"""
Process configuration for the wordgame backend.

Settings are read from the environment once and passed explicitly to the
database layer and the application factory.
"""

import logging
import os
from dataclasses import dataclass, field
from functools import lru_cache

DEFAULT_DATABASE_URL = "sqlite:///wordgame.db"
DEFAULT_ALLOWED_ORIGINS = (
    "http://localhost:3000",
    "http://localhost:3001",
    "http://127.0.0.1:3000",
    "http://127.0.0.1:3001",
)

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


@dataclass(frozen=True)
class Settings:
    """Immutable runtime settings."""

    database_url: str = DEFAULT_DATABASE_URL
    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "info"
    allowed_origins: tuple[str, ...] = field(default=DEFAULT_ALLOWED_ORIGINS)
    reload: bool = False


def _env_flag(env, name: str, default: str = "0") -> bool:
    return env.get(name, default).lower() in ("1", "true", "yes")


def settings_from_env(environ: dict[str, str] | None = None) -> Settings:
    """
    Build settings from environment variables.

    Args:
        environ: Mapping to read from. Defaults to os.environ.

    Returns:
        Settings instance
    """
    env = os.environ if environ is None else environ

    # DB_CONNECTION is accepted for deployments configured for the old service
    database_url = env.get("DATABASE_URL") or env.get(
        "DB_CONNECTION", DEFAULT_DATABASE_URL
    )

    origins = env.get("ALLOWED_ORIGINS")
    allowed_origins = (
        tuple(o.strip() for o in origins.split(",") if o.strip())
        if origins
        else DEFAULT_ALLOWED_ORIGINS
    )

    return Settings(
        database_url=database_url,
        host=env.get("HOST", "0.0.0.0"),
        port=int(env.get("PORT", "3000")),
        log_level=env.get("LOG_LEVEL", "info").lower(),
        allowed_origins=allowed_origins,
        reload=_env_flag(env, "RELOAD"),
    )


@lru_cache
def load_settings() -> Settings:
    """Settings for this process, read from the environment on first call."""
    return settings_from_env()


def configure_logging(level: str = "info") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT,
    )
