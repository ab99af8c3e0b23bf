"""
FastAPI backend for the wordgame service.

Provides REST API endpoints for creating games, editing their word pools
and moving them through their lifecycle.
"""

from .app import create_app

__all__ = ["create_app"]
