"""Integration tests against a live store.

Set URL_SHORTENER_TEST_DB_URI (mongodb://... or postgresql://...) to run them.
"""

import os

import pytest
from httpx import ASGITransport, AsyncClient

from config import Config
from shortener.database import create_store
from shortener.service import URLShortenerService
from shortener.common.logging_config import setup_logging
from web_app import create_app

TEST_DB_URI = os.getenv("URL_SHORTENER_TEST_DB_URI")

pytestmark = pytest.mark.skipif(
    not TEST_DB_URI,
    reason="URL_SHORTENER_TEST_DB_URI not set",
)


@pytest.mark.asyncio
class TestIntegration:
    """End-to-end integration tests."""

    async def test_full_url_lifecycle(self):
        """Shorten via the API, then follow the short URL."""
        logger = setup_logging(level="DEBUG")
        config = Config(_env_file=None, mongodb_uri=TEST_DB_URI, api_password="integration")

        db = create_store(config.mongodb_uri, config.mongodb_database, logger=logger)
        assert await db.connect()

        service = URLShortenerService(db=db, config=config, logger=logger)
        app = create_app(config=config, service_instance=service)

        try:
            async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as client:
                # 1. Create short URL via API
                create_response = await client.post(
                    "/shorten",
                    json={"password": "integration", "longURL": "https://example.com/test?y=2"},
                )
                assert create_response.status_code == 200
                short_code = create_response.json()["shortCode"]

                # 2. Follow it with a query string
                redirect_response = await client.get(f"/redirect/{short_code}?x=1")
                assert redirect_response.status_code == 302
                assert redirect_response.headers["location"] == "https://example.com/test?y=2&x=1"

                # 3. Unknown code
                missing_response = await client.get("/redirect/0000zzzz")
                assert missing_response.status_code == 404
        finally:
            await service.close()
