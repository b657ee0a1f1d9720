"""FastAPI application factory."""

import mimetypes
import os

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from .api import create_api_router
from .web import create_web_router
from .middleware.logging import LoggingMiddleware

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))

# Some platforms ship an incomplete mime table; browsers refuse CSS/JS served as text/plain
EXTRA_MIME_TYPES = {
    ".css": "text/css",
    ".js": "text/javascript",
    ".mjs": "text/javascript",
    ".svg": "image/svg+xml",
    ".ico": "image/x-icon",
    ".webmanifest": "application/manifest+json",
}


def register_mime_types() -> None:
    """Make sure static assets get an explicit, correct Content-Type."""
    for extension, mime_type in EXTRA_MIME_TYPES.items():
        mimetypes.add_type(mime_type, extension)


def resolve_public_dir(public_dir: str) -> str:
    """Resolve the static directory; relative paths are taken from the project root."""
    if os.path.isabs(public_dir):
        return public_dir
    return os.path.join(PROJECT_ROOT, public_dir)


def create_app(config, service_instance=None) -> FastAPI:
    """Create and configure FastAPI application.

    Args:
        config: Configuration instance (path segments, secret, public dir)
        service_instance: Service instance (may be set later, e.g. in lifespan)

    Returns:
        Configured FastAPI app
    """
    app = FastAPI(
        title="URL Shortener",
        description="Shorten URLs behind a shared secret and redirect by short code",
        version="1.0.0",
        docs_url="/api/docs",
        redoc_url="/api/redoc",
    )

    # Store instances in app state for access in routes
    app.state.service = service_instance
    app.state.config = config

    app.add_middleware(LoggingMiddleware)

    app.include_router(create_web_router(config), tags=["Web"])
    app.include_router(create_api_router(config), tags=["API"])

    # Mounted last so the routes above take precedence over same-named files
    register_mime_types()
    public_path = resolve_public_dir(config.public_dir)
    if os.path.isdir(public_path):
        app.mount("/", StaticFiles(directory=public_path), name="public")

    return app
