"""HTML interface: landing page and form submissions."""

from .routes import create_web_router

__all__ = ["create_web_router"]
