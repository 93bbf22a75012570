"""
API package for the Energy Cost API.
Contains FastAPI route handlers and API-related utilities.
"""

from .routes import router

__all__ = [
    "router",
]
