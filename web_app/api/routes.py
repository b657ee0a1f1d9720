"""API routes implementation."""

import json
import logging

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse, RedirectResponse, Response
from pydantic import ValidationError

from .schemas import ShortenRequest, ShortenResponse, ErrorResponse
from shortener.errors import (
    MissingURLError,
    ShortCodeNotFoundError,
    UnauthorizedError,
)
from ..request_helpers import is_form_request, is_json_request, request_base_url
from ..web.routes import shorten_url_form

logger = logging.getLogger("url_shortener.api")


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=message).model_dump(),
    )


async def _read_json_body(request: Request) -> dict:
    """Parse the JSON body; a missing body or non-JSON content type reads as {}."""
    if not is_json_request(request):
        return {}

    raw = await request.body()
    if not raw.strip():
        return {}

    payload = json.loads(raw)
    if not isinstance(payload, dict):
        raise ValueError("JSON body must be an object")
    return payload


async def shorten_url(request: Request) -> Response:
    """Create a shortened URL.

    Form submissions to the same path are handed to the HTML form handler;
    everything else is treated as the JSON API.
    """
    if is_form_request(request):
        return await shorten_url_form(request)

    service = request.app.state.service
    config = request.app.state.config

    try:
        body = ShortenRequest.model_validate(await _read_json_body(request))
    except (ValueError, ValidationError) as e:
        logger.warning(f"Rejected malformed shorten request: {e}")
        return _error(status.HTTP_400_BAD_REQUEST, "Invalid JSON body")

    try:
        result = await service.create_short_url(
            password=body.password,
            original_url=body.longURL,
            base_url=request_base_url(request, config.trust_proxy_headers),
        )
    except UnauthorizedError:
        return _error(status.HTTP_401_UNAUTHORIZED, "Unauthorized: Invalid password")
    except MissingURLError:
        return _error(status.HTTP_400_BAD_REQUEST, "longURL parameter is required")
    except Exception as e:
        logger.exception(f"Error creating short URL: {e}")
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")

    return JSONResponse(
        content=ShortenResponse(
            shortCode=result["short_code"],
            shortenedUrl=result["short_url"],
        ).model_dump(),
    )


async def redirect_to_url(request: Request, short_code: str) -> Response:
    """Redirect to the original URL, carrying over the query string."""
    service = request.app.state.service

    try:
        target = await service.resolve_redirect(short_code, request.url.query)
    except ShortCodeNotFoundError:
        return _error(status.HTTP_404_NOT_FOUND, "Shortened URL not found")
    except Exception as e:
        logger.exception(f"Error redirecting {short_code}: {e}")
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")

    return RedirectResponse(url=target, status_code=status.HTTP_302_FOUND)


def create_api_router(config) -> APIRouter:
    """Build the shorten/redirect router for the configured path segments."""
    router = APIRouter()

    router.add_api_route(
        f"/{config.shorten_url}",
        shorten_url,
        methods=["POST"],
        response_model=None,
        responses={
            200: {"model": ShortenResponse, "description": "Short URL created"},
            400: {"model": ErrorResponse, "description": "longURL missing or empty"},
            401: {"model": ErrorResponse, "description": "Invalid password"},
            500: {"model": ErrorResponse, "description": "Internal server error"},
        },
        summary="Create short URL",
        description="Shorten a URL. JSON bodies get JSON responses; form bodies get HTML.",
    )
    router.add_api_route(
        f"/{config.redirect_url_params}/{{short_code}}",
        redirect_to_url,
        methods=["GET"],
        response_model=None,
        responses={
            302: {"description": "Redirect to the original URL"},
            404: {"model": ErrorResponse, "description": "Short code not found"},
            500: {"model": ErrorResponse, "description": "Internal server error"},
        },
        summary="Follow short URL",
    )

    return router
