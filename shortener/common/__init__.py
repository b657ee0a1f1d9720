"""Common utilities for URL shortener."""

from .validators import is_valid_url, is_valid_password, normalize_url
from .headers import extract_forwarded_headers, build_base_url
from .url_builder import build_short_url, append_query_string
from .logging_config import setup_logging, get_logger

__all__ = [
    "is_valid_url",
    "is_valid_password",
    "normalize_url",
    "extract_forwarded_headers",
    "build_base_url",
    "build_short_url",
    "append_query_string",
    "setup_logging",
    "get_logger",
]
