"""Abstract base class for URL shortener mapping stores."""

from abc import ABC, abstractmethod
from typing import Optional

from .models import URLMapping


class URLShortenerDBBase(ABC):
    """Abstract base class for mapping store operations.

    A store is created once per process; ``connect`` is called at startup and
    ``close`` at shutdown. Implementations enforce short code uniqueness and
    translate driver errors into ``shortener.errors`` exceptions.
    """

    def __init__(self, db_config: str):
        """Initialize store.

        Args:
            db_config: Database connection string
        """
        self.db_config = db_config

    @abstractmethod
    async def connect(self) -> bool:
        """Connect and declare the unique constraint on short codes.

        Failures are logged, not raised, so the service can start without a
        reachable database.

        Returns:
            True if the store is ready, False otherwise
        """
        pass

    @abstractmethod
    async def insert(self, mapping: URLMapping) -> None:
        """Persist a new mapping.

        Args:
            mapping: The mapping to insert

        Raises:
            DuplicateShortCodeError: If the short code already exists
            StoreError: If the store cannot be reached or the write fails
        """
        pass

    @abstractmethod
    async def find_by_code(self, short_code: str) -> Optional[URLMapping]:
        """Look up a mapping by exact short code.

        Args:
            short_code: The short code to lookup

        Returns:
            The mapping if found, None otherwise

        Raises:
            StoreError: If the store cannot be reached or the read fails
        """
        pass

    @abstractmethod
    async def close(self) -> None:
        """Close database connections."""
        pass

    @abstractmethod
    async def health_check(self) -> bool:
        """Check if database is healthy.

        Returns:
            True if healthy, False otherwise
        """
        pass
