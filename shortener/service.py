"""Business logic service for URL shortener."""

import logging
from typing import TYPE_CHECKING, Any, Dict, Optional

from .shortcode import ShortCodeGenerator
from .database.base import URLShortenerDBBase
from .database.models import URLMapping
from .errors import MissingURLError, ShortCodeNotFoundError, UnauthorizedError
from .common.validators import is_valid_password, is_valid_url, normalize_url
from .common.url_builder import append_query_string, build_short_url

if TYPE_CHECKING:
    from config import Config


class URLShortenerService:
    """Service layer for shortening and redirecting."""

    def __init__(
        self,
        db: URLShortenerDBBase,
        config: "Config",
        short_code_generator: Optional[ShortCodeGenerator] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """Initialize URL shortener service.

        Args:
            db: Mapping store instance
            config: Application configuration (shared secret, redirect path)
            short_code_generator: Optional short code generator
            logger: Optional logger
        """
        self.db = db
        self.config = config
        self.generator = short_code_generator or ShortCodeGenerator(
            default_length=config.short_code_length
        )
        self.logger = logger or logging.getLogger(__name__)

    async def create_short_url(
        self,
        password: Any,
        original_url: Any,
        base_url: str,
    ) -> Dict[str, Any]:
        """Create a new short URL.

        A collision on the generated code is not retried; the store's
        DuplicateShortCodeError propagates to the caller.

        Args:
            password: Password supplied by the caller
            original_url: The URL to shorten (any non-empty value, stored as a string)
            base_url: scheme://host of the incoming request

        Returns:
            Dictionary with short_code, short_url, original_url, created_at

        Raises:
            UnauthorizedError: If the password is wrong or missing
            MissingURLError: If the URL is missing or empty
            StoreError: If the mapping cannot be stored
        """
        if not is_valid_password(password, self.config.api_password):
            raise UnauthorizedError("Unauthorized: Invalid password")

        is_valid, error = is_valid_url(original_url)
        if not is_valid:
            raise MissingURLError(error)

        mapping = URLMapping(
            short_code=self.generator.generate(),
            original_url=normalize_url(original_url),
        )
        await self.db.insert(mapping)

        short_url = build_short_url(
            short_code=mapping.short_code,
            base_url=base_url,
            path_prefix=self.config.redirect_url_params,
        )

        self.logger.info(f"Created short URL: {mapping.short_code} -> {mapping.original_url}")

        return {
            "short_code": mapping.short_code,
            "short_url": short_url,
            "original_url": mapping.original_url,
            "created_at": mapping.created_at,
        }

    async def get_original_url(self, short_code: str) -> Optional[str]:
        """Get the original URL for a short code.

        Args:
            short_code: The short code to lookup

        Returns:
            Original URL or None if not found
        """
        mapping = await self.db.find_by_code(short_code)

        if mapping is None:
            self.logger.warning(f"Short code not found: {short_code}")
            return None

        self.logger.debug(f"Retrieved URL: {short_code} -> {mapping.original_url}")
        return mapping.original_url

    async def resolve_redirect(
        self,
        short_code: str,
        query_string: Optional[str] = None,
    ) -> str:
        """Resolve a short code to the URL to redirect to.

        Args:
            short_code: The short code from the request path
            query_string: Raw query string of the incoming request

        Returns:
            Stored URL with the query string appended

        Raises:
            ShortCodeNotFoundError: If the code is unknown
            StoreError: If the lookup fails
        """
        original_url = await self.get_original_url(short_code)

        if original_url is None:
            raise ShortCodeNotFoundError(f"Short code '{short_code}' not found")

        return append_query_string(original_url, query_string)

    async def health_check(self) -> bool:
        """Check that the store is reachable."""
        return await self.db.health_check()

    async def close(self) -> None:
        """Close service connections."""
        await self.db.close()
