"""Tests for common utilities."""

import json
import logging

from shortener.common.validators import is_valid_url, is_valid_password, normalize_url
from shortener.common.headers import extract_forwarded_headers, build_base_url
from shortener.common.url_builder import build_short_url, append_query_string
from shortener.common.logging_config import JsonFormatter, get_logger, setup_logging


class TestValidators:
    """Test validation utilities."""

    def test_any_non_empty_string_is_a_url(self):
        for url in ["https://example.com", "/relative/path", "not a url", "ftp://x"]:
            valid, _ = is_valid_url(url)
            assert valid, url

    def test_missing_urls(self):
        valid, error = is_valid_url("")
        assert not valid
        assert "required" in error.lower()

        valid, _ = is_valid_url(None)
        assert not valid

    def test_other_scalars_are_urls(self):
        for url in [42, 0, False, True, 1.5]:
            valid, _ = is_valid_url(url)
            assert valid, url

    def test_arrays_and_objects_rejected(self):
        for url in [["https://example.com"], {"url": "https://example.com"}]:
            valid, _ = is_valid_url(url)
            assert not valid, url

    def test_normalize_url(self):
        assert normalize_url("https://example.com") == "https://example.com"
        assert normalize_url(123) == "123"
        assert normalize_url(0) == "0"
        assert normalize_url(True) == "true"
        assert normalize_url(False) == "false"
        assert normalize_url(2.0) == "2"
        assert normalize_url(1.5) == "1.5"

    def test_password_exact_match(self):
        assert is_valid_password("secret", "secret")
        assert not is_valid_password("Secret", "secret")
        assert not is_valid_password("secret ", "secret")
        assert not is_valid_password("", "secret")

    def test_password_missing_or_wrong_type(self):
        assert not is_valid_password(None, "secret")
        assert not is_valid_password(123, "123")
        assert not is_valid_password(["secret"], "secret")

    def test_password_non_ascii(self):
        assert is_valid_password("pässwörd", "pässwörd")
        assert not is_valid_password("passwort", "pässwörd")


class TestHeaders:
    """Test header utilities."""

    def test_extract_forwarded_headers(self):
        headers = {
            "X-Forwarded-Proto": "https",
            "X-Forwarded-Host": "example.com, proxy.internal",
        }

        result = extract_forwarded_headers(headers)
        assert result["forwarded_proto"] == "https"
        assert result["forwarded_host"] == "example.com"

    def test_build_base_url_from_request(self):
        base_url = build_base_url(
            headers={"X-Forwarded-Proto": "https", "X-Forwarded-Host": "short.link"},
            request_scheme="http",
            request_host="localhost:3000",
        )

        assert base_url == "http://localhost:3000"

    def test_build_base_url_trusting_proxy(self):
        base_url = build_base_url(
            headers={"X-Forwarded-Proto": "https", "X-Forwarded-Host": "short.link"},
            request_scheme="http",
            request_host="localhost:3000",
            trust_proxy=True,
        )

        assert base_url == "https://short.link"

    def test_build_base_url_trusting_proxy_without_headers(self):
        base_url = build_base_url(
            headers={},
            request_scheme="http",
            request_host="localhost:3000",
            trust_proxy=True,
        )

        assert base_url == "http://localhost:3000"


class TestURLBuilder:
    """Test URL building utilities."""

    def test_build_short_url_with_prefix(self):
        url = build_short_url(
            short_code="abc12345",
            base_url="https://example.com/",
            path_prefix="/redirect/",
        )

        assert url == "https://example.com/redirect/abc12345"

    def test_build_short_url_no_prefix(self):
        url = build_short_url(
            short_code="abc12345",
            base_url="https://example.com",
            path_prefix="",
        )

        assert url == "https://example.com/abc12345"

    def test_append_query_string_without_existing_query(self):
        assert append_query_string("http://e.com/p", "x=1") == "http://e.com/p?x=1"

    def test_append_query_string_with_existing_query(self):
        assert append_query_string("http://e.com/p?y=2", "x=1") == "http://e.com/p?y=2&x=1"

    def test_append_query_string_keeps_duplicate_keys(self):
        assert append_query_string("http://e.com/p?x=1", "x=2") == "http://e.com/p?x=1&x=2"

    def test_append_empty_query_string(self):
        assert append_query_string("http://e.com/p", "") == "http://e.com/p"
        assert append_query_string("http://e.com/p", None) == "http://e.com/p"


class TestLogging:
    """Test logging setup."""

    def test_setup_logging_does_not_stack_handlers(self):
        setup_logging(level="INFO")
        logger = setup_logging(level="DEBUG")

        assert logger.name == "url_shortener"
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1

    def test_child_logger(self):
        assert get_logger("web").name == "url_shortener.web"
        assert get_logger().name == "url_shortener"

    def test_json_formatter(self):
        record = logging.LogRecord(
            name="url_shortener",
            level=logging.INFO,
            pathname=__file__,
            lineno=1,
            msg='Created "%s"',
            args=("abc12345",),
            exc_info=None,
        )

        payload = json.loads(JsonFormatter().format(record))
        assert payload["level"] == "INFO"
        assert payload["message"] == 'Created "abc12345"'
