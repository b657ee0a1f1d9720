"""Database layer for URL shortener."""

from .base import URLShortenerDBBase
from .factory import UnavailableStore, create_store
from .models import URLMapping
from .mongodb import URLShortenerMongoDB
from .postgres import URLShortenerPostgres

__all__ = [
    "URLShortenerDBBase",
    "URLShortenerMongoDB",
    "URLShortenerPostgres",
    "URLMapping",
    "UnavailableStore",
    "create_store",
]
