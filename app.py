#!/usr/bin/env python3
"""
Main entry point for URL shortener service.

Concurrency: the server runs one event loop and holds one store
client (MongoDB) or pool (PostgreSQL) for its lifetime. Requests share no
other state.

Usage:
    python app.py

Environment variables (also read from .env):
    PORT - Port to listen on (default 3000)
    MONGODB_URI - Store connection URI (mongodb://... or postgresql://...)
    REDIRECT_URL_PARAMS - Path segment for redirects (default "redirect")
    SHORTEN_URL - Path segment for shortening (default "shorten")
    API_PASSWORD - Shared secret for creating short URLs
    LOG_LEVEL - Logging level
"""

import signal
import sys
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from config import Config, load_config
from shortener.database import UnavailableStore, create_store
from shortener.service import URLShortenerService
from shortener.shortcode import ShortCodeGenerator
from shortener.common.logging_config import setup_logging
from web_app import create_app


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Connect the store on startup and close it on shutdown."""
    config = app.state.config
    logger = app.state.logger

    logger.info("Starting URL shortener service...")

    try:
        db = create_store(
            db_url=config.mongodb_uri,
            database_name=config.mongodb_database,
            logger=logger,
        )
    except ValueError as e:
        logger.error(f"Cannot configure store: {e}")
        db = UnavailableStore(db_config=config.mongodb_uri, reason=str(e))

    # A failed connection is logged; requests fail later at first store access
    if not await db.connect():
        logger.error("Store unavailable at startup; continuing without it")

    app.state.service = URLShortenerService(
        db=db,
        config=config,
        short_code_generator=ShortCodeGenerator(default_length=config.short_code_length),
        logger=logger,
    )

    logger.info("Service started successfully")

    yield

    logger.info("Shutting down URL shortener service...")
    await app.state.service.close()
    logger.info("Service stopped")


def build_app(config: Config) -> FastAPI:
    """Create the app with logging and lifespan wired in."""
    logger = setup_logging(
        level=config.log_level,
        log_file=config.log_file,
        json_format=config.log_json,
    )

    app = create_app(config=config)
    app.state.logger = logger
    app.router.lifespan_context = lifespan

    return app


def main():
    """Main entry point."""
    config = load_config()
    app = build_app(config)
    logger = app.state.logger

    logger.info("URL Shortener Service")
    logger.info(f"Configuration: {config.safe_dump()}")

    uvicorn_config = uvicorn.Config(
        app,
        host=config.host,
        port=config.port,
        log_level=config.log_level.lower(),
        access_log=False,  # LoggingMiddleware writes the access log
    )

    server = uvicorn.Server(uvicorn_config)

    def handle_signal(signum, frame):
        logger.info(f"Received signal {signum}, initiating graceful shutdown...")
        server.should_exit = True

    signal.signal(signal.SIGINT, handle_signal)
    signal.signal(signal.SIGTERM, handle_signal)

    try:
        logger.info(f"Server is running on http://{config.host}:{config.port}")
        logger.info(f"Shorten API endpoint: POST /{config.shorten_url}")
        logger.info(f"Redirect API endpoint: GET /{config.redirect_url_params}/:shortCode")
        server.run()
    except Exception as e:
        logger.error(f"Server error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
