"""Validation utilities for URL shortener."""

import hmac
from typing import Any, Tuple


def is_valid_url(url: Any) -> Tuple[bool, str]:
    """Validate a URL to shorten.

    Only a missing or empty value (None or "") is rejected. There is no
    scheme or format check, so relative paths and malformed strings pass, as
    do other scalars such as 123 or false. Arrays and objects are rejected.

    Args:
        url: The URL to validate

    Returns:
        Tuple of (is_valid, error_message)
    """
    if url is None or url == "":
        return False, "URL is required"

    if isinstance(url, (list, dict)):
        return False, "URL must be a string"

    return True, ""


def normalize_url(url: Any) -> str:
    """Render a validated URL value as the string to store.

    Args:
        url: Value that passed is_valid_url

    Returns:
        The URL as a string (True -> "true", 2.0 -> "2", 123 -> "123")
    """
    if isinstance(url, str):
        return url
    if isinstance(url, bool):
        return "true" if url else "false"
    if isinstance(url, float) and url.is_integer():
        return str(int(url))
    return str(url)


def is_valid_password(supplied: Any, expected: str) -> bool:
    """Check a supplied password against the shared secret.

    Args:
        supplied: Password from the request (may be missing or not a string)
        expected: Configured shared secret

    Returns:
        True only on an exact match
    """
    if not isinstance(supplied, str):
        return False

    return hmac.compare_digest(supplied.encode("utf-8"), expected.encode("utf-8"))
