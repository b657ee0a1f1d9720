"""Select a mapping store backend from a connection URI."""

import logging
from typing import Optional
from urllib.parse import urlparse

from ..errors import StoreError
from .base import URLShortenerDBBase
from .models import URLMapping
from .mongodb import URLShortenerMongoDB
from .postgres import URLShortenerPostgres

MONGODB_SCHEMES = {"mongodb", "mongodb+srv"}
POSTGRES_SCHEMES = {"postgres", "postgresql"}


def create_store(
    db_url: str,
    database_name: str = "url_shortener",
    logger: Optional[logging.Logger] = None,
) -> URLShortenerDBBase:
    """Create the store matching the URI scheme.

    Args:
        db_url: Connection URI (mongodb://, mongodb+srv://, postgres://, postgresql://)
        database_name: MongoDB database to use when the URI names none
        logger: Optional logger instance

    Returns:
        Unconnected store instance

    Raises:
        ValueError: If the scheme is not supported
    """
    scheme = urlparse(db_url).scheme.lower()

    if scheme in MONGODB_SCHEMES:
        return URLShortenerMongoDB(
            db_config=db_url,
            database_name=database_name,
            logger=logger,
        )
    if scheme in POSTGRES_SCHEMES:
        return URLShortenerPostgres(db_config=db_url, logger=logger)

    raise ValueError(
        f"Unsupported database URI scheme '{scheme}' "
        f"(expected one of: {', '.join(sorted(MONGODB_SCHEMES | POSTGRES_SCHEMES))})"
    )


class UnavailableStore(URLShortenerDBBase):
    """Stand-in for a store that could not be configured.

    Every read and write raises StoreError, so requests fail with a 500
    instead of the process refusing to start.
    """

    def __init__(self, db_config: str, reason: str):
        super().__init__(db_config)
        self.reason = reason

    async def connect(self) -> bool:
        return False

    async def insert(self, mapping: URLMapping) -> None:
        raise StoreError(self.reason)

    async def find_by_code(self, short_code: str) -> Optional[URLMapping]:
        raise StoreError(self.reason)

    async def close(self) -> None:
        pass

    async def health_check(self) -> bool:
        return False
