"""Pytest configuration and fixtures."""

from typing import Dict, Optional

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from config import Config
from shortener.database.base import URLShortenerDBBase
from shortener.database.models import URLMapping
from shortener.errors import DuplicateShortCodeError, StoreError
from shortener.service import URLShortenerService
from shortener.shortcode import ShortCodeGenerator
from shortener.common.logging_config import setup_logging
from web_app import create_app

TEST_PASSWORD = "s3cret-test-password"


class InMemoryStore(URLShortenerDBBase):
    """Dict-backed store with the same uniqueness and error contract as the real backends."""

    def __init__(self):
        super().__init__("memory://")
        self.mappings: Dict[str, URLMapping] = {}
        self.fail_with: Optional[Exception] = None
        self.connected = False
        self.closed = False

    async def connect(self) -> bool:
        self.connected = True
        return True

    async def insert(self, mapping: URLMapping) -> None:
        if self.fail_with:
            raise self.fail_with
        if mapping.short_code in self.mappings:
            raise DuplicateShortCodeError(f"Short code '{mapping.short_code}' already exists")
        self.mappings[mapping.short_code] = mapping

    async def find_by_code(self, short_code: str) -> Optional[URLMapping]:
        if self.fail_with:
            raise self.fail_with
        return self.mappings.get(short_code)

    async def health_check(self) -> bool:
        return self.fail_with is None

    async def close(self) -> None:
        self.closed = True


class FixedCodeGenerator(ShortCodeGenerator):
    """Generator that always returns the same code, to force collisions."""

    def __init__(self, code: str):
        super().__init__(default_length=len(code))
        self.code = code

    def generate(self, length=None) -> str:
        return self.code


@pytest.fixture
def logger():
    """Create test logger."""
    return setup_logging(level="DEBUG")


@pytest.fixture
def config():
    """Configuration isolated from the environment and any .env file."""
    return Config(
        _env_file=None,
        api_password=TEST_PASSWORD,
        mongodb_uri="mongodb://localhost:27017/url_shortener_test",
    )


@pytest.fixture
def store():
    return InMemoryStore()


@pytest.fixture
def short_code_generator():
    return ShortCodeGenerator()


@pytest.fixture
def fixed_code_generator():
    return FixedCodeGenerator("abcd1234")


@pytest.fixture
def service(store, config, short_code_generator, logger) -> URLShortenerService:
    """Create service instance over the in-memory store."""
    return URLShortenerService(
        db=store,
        config=config,
        short_code_generator=short_code_generator,
        logger=logger,
    )


@pytest.fixture
def app(config, service):
    """Create test FastAPI app."""
    return create_app(config=config, service_instance=service)


@pytest_asyncio.fixture
async def client(app):
    """Create test client."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://testserver",
    ) as ac:
        yield ac


@pytest.fixture
def sample_urls():
    """Sample URLs for testing."""
    return [
        "https://example.com/test",
        "https://github.com/user/repo",
        "https://stackoverflow.com/questions/123456?tab=votes",
    ]
