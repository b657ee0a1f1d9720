"""URL building utilities for URL shortener."""

from typing import Optional


def build_short_url(
    short_code: str,
    base_url: str,
    path_prefix: str = "",
) -> str:
    """Build complete short URL.

    Args:
        short_code: The short code
        base_url: Base URL (e.g., https://example.com)
        path_prefix: Optional path prefix (e.g., redirect)

    Returns:
        Complete short URL
    """
    base = base_url.rstrip("/")
    prefix = path_prefix.strip("/")

    if prefix:
        return f"{base}/{prefix}/{short_code}"
    return f"{base}/{short_code}"


def append_query_string(original_url: str, query_string: Optional[str]) -> str:
    """Append a raw query string to the stored URL.

    This is plain concatenation: parameters are not parsed, merged or
    de-duplicated, so ``?a=1`` + ``a=2`` gives ``?a=1&a=2``.

    Args:
        original_url: The stored URL
        query_string: Raw query string from the incoming request (without '?')

    Returns:
        URL to redirect to
    """
    if not query_string:
        return original_url

    separator = "&" if "?" in original_url else "?"
    return f"{original_url}{separator}{query_string}"
