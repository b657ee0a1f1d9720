#!/usr/bin/env python3
"""
Command-line interface for URL shortener service.

Talks to the store directly, using the same configuration as the server
(environment variables or .env).

Usage:
    python url_shortener_cli.py shorten <url> [--password PASSWORD] [--base-url URL]
    python url_shortener_cli.py get <short_code>
    python url_shortener_cli.py health
"""

import argparse
import asyncio
import json
import sys
import os

# Add parent directories to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../..')))

from config import Config, load_config
from shortener.database import create_store
from shortener.errors import ShortenerError
from shortener.service import URLShortenerService
from shortener.common.logging_config import setup_logging


class URLShortenerCLI:
    """Command-line interface for URL shortener."""

    def __init__(self, config: Config, db_url: str, verbose: bool = False):
        self.config = config
        self.db_url = db_url
        self.logger = setup_logging(level="DEBUG" if verbose else "WARNING")
        self.service = None

    async def initialize(self) -> bool:
        """Connect the store and build the service."""
        db = create_store(
            db_url=self.db_url,
            database_name=self.config.mongodb_database,
            logger=self.logger,
        )
        self.service = URLShortenerService(db=db, config=self.config, logger=self.logger)
        return await db.connect()

    async def cleanup(self):
        if self.service:
            await self.service.close()

    async def shorten(self, url: str, password: str, base_url: str) -> int:
        """Shorten a URL."""
        try:
            result = await self.service.create_short_url(
                password=password,
                original_url=url,
                base_url=base_url,
            )
        except ShortenerError as e:
            _print_json({"success": False, "error": str(e)}, error=True)
            return 1

        _print_json({
            "success": True,
            "shortCode": result["short_code"],
            "shortenedUrl": result["short_url"],
            "originalUrl": result["original_url"],
            "createdAt": result["created_at"].isoformat(),
        })
        return 0

    async def get(self, short_code: str) -> int:
        """Get original URL for a short code."""
        try:
            original_url = await self.service.get_original_url(short_code)
        except ShortenerError as e:
            _print_json({"success": False, "error": str(e)}, error=True)
            return 1

        if original_url is None:
            _print_json({
                "success": False,
                "error": f"Short code '{short_code}' not found",
            }, error=True)
            return 1

        _print_json({"success": True, "shortCode": short_code, "originalUrl": original_url})
        return 0

    async def health(self) -> int:
        """Check store health."""
        healthy = await self.service.health_check()
        _print_json({"success": healthy, "database": "healthy" if healthy else "unhealthy"})
        return 0 if healthy else 1


def _print_json(payload: dict, error: bool = False) -> None:
    print(json.dumps(payload, indent=2), file=sys.stderr if error else sys.stdout)


async def main():
    """Main entry point."""
    config = load_config()

    parser = argparse.ArgumentParser(
        description="URL Shortener CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Shorten a URL
  %(prog)s shorten https://example.com/long/url --password secret

  # Get original URL
  %(prog)s get k3x9q0ab

  # Check store health
  %(prog)s health
        """
    )

    parser.add_argument(
        "--db-url",
        default=config.mongodb_uri,
        help="Store connection URI (default: from MONGODB_URI)"
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Verbose output"
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    shorten_parser = subparsers.add_parser("shorten", help="Shorten a URL")
    shorten_parser.add_argument("url", help="URL to shorten")
    shorten_parser.add_argument(
        "--password",
        default=config.api_password,
        help="Shared secret (default: from API_PASSWORD)"
    )
    shorten_parser.add_argument(
        "--base-url",
        default=f"http://localhost:{config.port}",
        help="scheme://host used to build the short URL"
    )

    get_parser = subparsers.add_parser("get", help="Get original URL")
    get_parser.add_argument("short_code", help="Short code to lookup")

    subparsers.add_parser("health", help="Check store health")

    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        return 1

    cli = URLShortenerCLI(config=config, db_url=args.db_url, verbose=args.verbose)

    try:
        await cli.initialize()

        if args.command == "shorten":
            return await cli.shorten(args.url, args.password, args.base_url)
        elif args.command == "get":
            return await cli.get(args.short_code)
        elif args.command == "health":
            return await cli.health()
        else:
            parser.print_help()
            return 1

    finally:
        await cli.cleanup()


if __name__ == "__main__":
    exit_code = asyncio.run(main())
    sys.exit(exit_code)
