"""MongoDB implementation for URL shortener."""

import logging
from typing import Optional

from pymongo import ASCENDING, AsyncMongoClient
from pymongo.errors import DuplicateKeyError, PyMongoError

from .base import URLShortenerDBBase
from .models import URLMapping
from ..errors import DuplicateShortCodeError, StoreError


class URLShortenerMongoDB(URLShortenerDBBase):
    """MongoDB implementation for mapping store operations.

    Mappings live in a single collection with a unique index on ``shortCode``.
    """

    COLLECTION_NAME = "urls"

    def __init__(
        self,
        db_config: str,
        database_name: str = "url_shortener",
        server_selection_timeout_ms: int = 30000,
        logger: Optional[logging.Logger] = None,
    ):
        """Initialize MongoDB store.

        Args:
            db_config: MongoDB connection URI (mongodb://host:port/db)
            database_name: Database to use when the URI names none
            server_selection_timeout_ms: How long to wait for a reachable server
            logger: Optional logger instance
        """
        super().__init__(db_config)

        self.logger = logger or logging.getLogger(__name__)
        self.database_name = database_name
        self.server_selection_timeout_ms = server_selection_timeout_ms
        self._client: Optional[AsyncMongoClient] = None

    def _get_collection(self):
        """Get the mappings collection, creating the client on first use."""
        if self._client is None:
            self._client = AsyncMongoClient(
                self.db_config,
                serverSelectionTimeoutMS=self.server_selection_timeout_ms,
                tz_aware=True,
            )
        database = self._client.get_default_database(default=self.database_name)
        return database[self.COLLECTION_NAME]

    async def connect(self) -> bool:
        """Ping the server and ensure the unique index on shortCode."""
        try:
            collection = self._get_collection()
            await self._client.admin.command("ping")
            await collection.create_index(
                [("shortCode", ASCENDING)],
                unique=True,
                name="shortCode_unique",
            )
            self.logger.info(f"Connected to MongoDB database '{collection.database.name}'")
            return True
        except PyMongoError as e:
            self.logger.error(f"MongoDB connection error: {e}")
            return False

    async def insert(self, mapping: URLMapping) -> None:
        try:
            await self._get_collection().insert_one(mapping.to_document())
        except DuplicateKeyError as e:
            self.logger.warning(f"Short code already exists: {mapping.short_code}")
            raise DuplicateShortCodeError(
                f"Short code '{mapping.short_code}' already exists"
            ) from e
        except PyMongoError as e:
            self.logger.error(f"Error inserting mapping {mapping.short_code}: {e}")
            raise StoreError(f"Failed to insert mapping: {e}") from e

        self.logger.debug(f"Inserted mapping: {mapping.short_code} -> {mapping.original_url}")

    async def find_by_code(self, short_code: str) -> Optional[URLMapping]:
        try:
            document = await self._get_collection().find_one(
                {"shortCode": short_code},
                {"_id": 0},
            )
        except PyMongoError as e:
            self.logger.error(f"Error looking up short code {short_code}: {e}")
            raise StoreError(f"Failed to look up short code: {e}") from e

        if document is None:
            return None
        return URLMapping.from_document(document)

    async def health_check(self) -> bool:
        try:
            self._get_collection()
            await self._client.admin.command("ping")
            return True
        except PyMongoError as e:
            self.logger.error(f"Health check failed: {e}")
            return False

    async def close(self) -> None:
        if self._client is not None:
            await self._client.close()
            self._client = None
            self.logger.debug("Closed MongoDB client")
