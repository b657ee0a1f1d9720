#!/usr/bin/env python3
"""
Initialize the mapping store: unique index on shortCode (MongoDB) or the
url_mappings table (PostgreSQL), then run a health check.

Usage:
    python init_database.py --db-url mongodb://localhost:27017/url_shortener
"""

import argparse
import asyncio
import sys
import os

# Add parent directories to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../..')))

from config import load_config
from shortener.database import create_store
from shortener.common.logging_config import setup_logging


async def main():
    config = load_config()

    parser = argparse.ArgumentParser(description="Initialize URL shortener store")
    parser.add_argument(
        "--db-url",
        default=config.mongodb_uri,
        help="Store connection URI (default: from MONGODB_URI)"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")

    args = parser.parse_args()

    logger = setup_logging(level="DEBUG" if args.verbose else "INFO")

    try:
        db = create_store(
            db_url=args.db_url,
            database_name=config.mongodb_database,
            logger=logger,
        )
    except ValueError as e:
        logger.error(str(e))
        return 1

    try:
        logger.info("Declaring unique constraint on short codes...")
        if not await db.connect():
            logger.error("Could not initialize the store")
            return 1

        if await db.health_check():
            logger.info("Database health check passed")
        else:
            logger.error("Database health check failed")
            return 1

        logger.info("Done")
        return 0

    finally:
        await db.close()


if __name__ == "__main__":
    exit_code = asyncio.run(main())
    sys.exit(exit_code)
