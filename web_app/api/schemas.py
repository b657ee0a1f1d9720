"""Pydantic schemas for API requests and responses."""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class ShortenRequest(BaseModel):
    """Request to shorten a URL.

    Fields are left untyped so that a wrong-typed password is rejected as
    unauthorized rather than as a malformed body.
    """

    password: Optional[Any] = Field(None, description="Shared secret")
    longURL: Optional[Any] = Field(None, description="The URL to shorten (any non-empty string)")

    model_config = ConfigDict(
        extra="ignore",
        json_schema_extra={
            "examples": [
                {
                    "password": "default_password",
                    "longURL": "https://example.com/very/long/path/to/resource",
                }
            ]
        },
    )


class ShortenResponse(BaseModel):
    """Response after shortening a URL."""

    success: bool = Field(True, description="Always true on success")
    shortCode: str = Field(..., description="The generated short code")
    shortenedUrl: str = Field(..., description="The complete short URL")

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "success": True,
                    "shortCode": "k3x9q0ab",
                    "shortenedUrl": "http://localhost:3000/redirect/k3x9q0ab",
                }
            ]
        },
    )


class ErrorResponse(BaseModel):
    """Error response."""

    error: str = Field(..., description="Error message")
