"""Web interface routes implementation."""

import html
import logging
import os

from fastapi import APIRouter, Request, status
from fastapi.responses import HTMLResponse, PlainTextResponse, Response

from shortener.errors import MissingURLError, UnauthorizedError
from ..request_helpers import request_base_url

logger = logging.getLogger("url_shortener.web")

template_dir = os.path.join(os.path.dirname(__file__), "..", "..", "ux", "web")


def render_homepage(shorten_path: str) -> str:
    """Render the landing page with the form pointed at the shorten route."""
    html_file = os.path.join(template_dir, "index.html")

    if os.path.exists(html_file):
        with open(html_file, "r", encoding="utf-8") as f:
            content = f.read()
        return content.replace("{{shorten_path}}", shorten_path)

    return (
        "<h1>URL Shortener</h1>"
        f"<form method='post' action='{shorten_path}'>"
        "<input type='password' name='password' placeholder='Password'>"
        "<input type='text' name='longUrl' placeholder='Long URL'>"
        "<button type='submit'>Shorten</button></form>"
    )


async def shorten_url_form(request: Request) -> Response:
    """Handle form submission to create a short URL; answers with an HTML fragment."""
    service = request.app.state.service
    config = request.app.state.config

    try:
        form = await request.form()
        result = await service.create_short_url(
            password=form.get("password"),
            original_url=form.get("longUrl"),
            base_url=request_base_url(request, config.trust_proxy_headers),
        )
    except UnauthorizedError:
        return PlainTextResponse("Unauthorized: Invalid password", status_code=status.HTTP_401_UNAUTHORIZED)
    except MissingURLError:
        return PlainTextResponse("Original URL is required", status_code=status.HTTP_400_BAD_REQUEST)
    except Exception as e:
        logger.exception(f"Error creating short URL: {e}")
        return PlainTextResponse("Error creating short URL", status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)

    short_url = html.escape(result["short_url"], quote=True)
    return HTMLResponse(
        content=f'Your URL has been shortened: <a href="{short_url}">{short_url}</a>'
    )


def create_web_router(config) -> APIRouter:
    """Build the landing page router."""
    router = APIRouter()
    homepage_html = render_homepage(f"/{config.shorten_url}")

    @router.get("/", response_class=HTMLResponse, include_in_schema=False)
    async def homepage():
        """Serve the landing page."""
        return HTMLResponse(content=homepage_html)

    return router
