"""Header parsing utilities for URL shortener."""

from typing import Dict, Optional


def extract_forwarded_headers(headers: Dict[str, str]) -> Dict[str, Optional[str]]:
    """Extract X-Forwarded-* headers from request.

    Args:
        headers: Request headers dictionary

    Returns:
        Dictionary with forwarded_proto, forwarded_host
    """
    # Convert headers to lowercase for case-insensitive lookup
    headers_lower = {k.lower(): v for k, v in headers.items()}

    def first(value: Optional[str]) -> Optional[str]:
        # Proxy chains send comma-separated lists; the client-facing value is first
        if not value:
            return None
        return value.split(",")[0].strip() or None

    return {
        "forwarded_proto": first(headers_lower.get("x-forwarded-proto")),
        "forwarded_host": first(headers_lower.get("x-forwarded-host")),
    }


def build_base_url(
    headers: Dict[str, str],
    request_scheme: str,
    request_host: Optional[str],
    trust_proxy: bool = False,
) -> str:
    """Build the scheme://host part of a short URL.

    Priority:
    1. X-Forwarded-Proto / X-Forwarded-Host (only when trust_proxy is set)
    2. Request scheme + Host header

    Args:
        headers: Request headers
        request_scheme: Request scheme (http/https)
        request_host: Request Host header
        trust_proxy: Whether to honour X-Forwarded-* headers

    Returns:
        Base URL (e.g., https://example.com)
    """
    scheme = request_scheme
    host = request_host or "localhost"

    if trust_proxy:
        forwarded = extract_forwarded_headers(headers)
        scheme = forwarded["forwarded_proto"] or scheme
        host = forwarded["forwarded_host"] or host

    return f"{scheme}://{host}"
