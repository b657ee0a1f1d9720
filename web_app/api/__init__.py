"""JSON API: shorten and redirect."""

from .routes import create_api_router

__all__ = ["create_api_router"]
