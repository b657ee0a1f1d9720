"""Exceptions raised by the URL shortener service and store layers.

Route handlers map these onto HTTP responses:

    UnauthorizedError       -> 401
    MissingURLError         -> 400
    ShortCodeNotFoundError  -> 404
    StoreError (and subclasses, including DuplicateShortCodeError) -> 500
"""


class ShortenerError(Exception):
    """Base class for URL shortener errors."""


class UnauthorizedError(ShortenerError):
    """Raised when the supplied password does not match the shared secret."""


class MissingURLError(ShortenerError):
    """Raised when a shorten request carries no URL (or an empty one)."""


class ShortCodeNotFoundError(ShortenerError):
    """Raised when a short code has no stored mapping."""


class StoreError(ShortenerError):
    """Raised when the mapping store fails (connection issues, timeouts, etc.)."""


class DuplicateShortCodeError(StoreError):
    """Raised when inserting a mapping whose short code already exists."""
