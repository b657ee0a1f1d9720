"""Request inspection helpers shared by the API and web routes. No app imports to avoid circular deps."""

from fastapi import Request

from shortener.common.headers import build_base_url

JSON_CONTENT_TYPES = ("application/json",)
FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


def request_base_url(request: Request, trust_proxy: bool = False) -> str:
    """scheme://host the client used, for building short URLs."""
    return build_base_url(
        headers=dict(request.headers),
        request_scheme=request.url.scheme,
        request_host=request.headers.get("host"),
        trust_proxy=trust_proxy,
    )


def _media_type(request: Request) -> str:
    return request.headers.get("content-type", "").split(";")[0].strip().lower()


def is_form_request(request: Request) -> bool:
    """True when the body is form-encoded (HTML form submission)."""
    return _media_type(request) in FORM_CONTENT_TYPES


def is_json_request(request: Request) -> bool:
    """True when the body is JSON (application/json or a +json type)."""
    media_type = _media_type(request)
    return media_type in JSON_CONTENT_TYPES or media_type.endswith("+json")
