"""Configuration management for URL shortener."""

from typing import Optional
from pydantic_settings import BaseSettings
from pydantic import Field, field_validator


class Config(BaseSettings):
    """Application configuration.

    Built once at startup and passed to the service and the routers; nothing
    reads the environment while serving requests.
    """

    # Database settings
    mongodb_uri: str = Field(
        default="mongodb://localhost:27017/url_shortener",
        description="Store connection URI (mongodb://, mongodb+srv://, postgres:// or postgresql://)"
    )

    mongodb_database: str = Field(
        default="url_shortener",
        description="MongoDB database name used when the URI does not name one"
    )

    # Server settings
    host: str = Field(
        default="0.0.0.0",
        description="Host to bind to"
    )

    port: int = Field(
        default=3000,
        description="Port to listen on"
    )

    public_dir: str = Field(
        default="public",
        description="Directory holding static assets (css, js)"
    )

    trust_proxy_headers: bool = Field(
        default=False,
        description="Build short URLs from X-Forwarded-Proto/X-Forwarded-Host when set"
    )

    # URL shortener settings
    redirect_url_params: str = Field(
        default="redirect",
        description="Path segment for redirects (GET /<segment>/<code>)"
    )

    shorten_url: str = Field(
        default="shorten",
        description="Path segment for shortening (POST /<segment>)"
    )

    api_password: str = Field(
        default="default_password",
        description="Shared secret required to create short URLs"
    )

    short_code_length: int = Field(
        default=8,
        ge=1,
        description="Length of generated short codes"
    )

    # Logging settings
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )

    log_file: Optional[str] = Field(
        default=None,
        description="Log file path (logs to stdout if not specified)"
    )

    log_json: bool = Field(
        default=False,
        description="Use JSON format for logs"
    )

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",  # Ignore extra environment variables
        "env_ignore_empty": True,  # VAR= falls back to the default
    }

    @field_validator("redirect_url_params", "shorten_url")
    @classmethod
    def normalize_path_segment(cls, v: str) -> str:
        """Strip surrounding slashes; the segment must not be empty."""
        segment = v.strip().strip("/")
        if not segment:
            raise ValueError("path segment must not be empty")
        return segment

    def safe_dump(self) -> dict:
        """Dump settings for logging with the secret masked."""
        data = self.model_dump()
        data["api_password"] = "***"
        return data


def load_config() -> Config:
    """Load configuration from environment."""
    return Config()
