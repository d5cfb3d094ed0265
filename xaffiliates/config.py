"""Configuration management using Pydantic Settings."""

from enum import Enum

from pydantic import Field
from pydantic_settings import BaseSettings


class LogFormat(str, Enum):
    """Log output format."""
    JSON = "json"
    CONSOLE = "console"


class AffiliatesConfig(BaseSettings):
    """Configuration for the xaffiliates web app and API client."""

    # X API settings
    api_base_url: str = "https://api.x.com"
    request_timeout_seconds: float = 5.0
    affiliates_page_size: int = Field(default=1000, ge=1, le=1000)
    max_affiliate_pages: int | None = Field(default=None, ge=1)

    # Credential lookup
    cookie_name: str = "x_access_token"
    token_query_param: str = "apiKey"
    login_path: str = "/login"

    # Server
    host: str = "0.0.0.0"
    port: int = 8000

    # Logging
    log_level: str = "INFO"
    log_format: LogFormat = LogFormat.CONSOLE

    model_config = {
        "env_prefix": "XAFFILIATES_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }
