# linkedin_api_mcp/config/schema.py
"""
Configuration schema for the LinkedIn API MCP server.

Settings are read from environment variables (and an optional ``.env`` file)
into one immutable object that is built once at startup and passed explicitly
to the HTTP client and the server. Equivalent variables are listed in
precedence order: the first one that is set and non-empty wins.
"""

from typing import Literal, Optional

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from linkedin_api_mcp.constants import DEFAULT_BASE_URL, DEFAULT_REQUEST_TIMEOUT

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]
LogFormat = Literal["compact", "json"]


class AppConfig(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_ignore_empty=True,
        extra="ignore",
        frozen=True,
        populate_by_name=True,
    )

    # Remote API
    api_key: str = Field(
        default="",
        validation_alias=AliasChoices("HARVESTAPI_API_KEY", "LINKEDIN_API_KEY"),
        repr=False,
    )
    base_url: str = Field(
        default=DEFAULT_BASE_URL,
        validation_alias=AliasChoices("HARVESTAPI_BASE_URL"),
    )
    request_timeout: float = Field(
        default=DEFAULT_REQUEST_TIMEOUT,
        gt=0,
        validation_alias=AliasChoices("HARVESTAPI_TIMEOUT"),
        description="Timeout in seconds applied to every remote call",
    )
    proxy_url: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("PROXY_URL", "HTTP_PROXY", "HTTPS_PROXY"),
    )

    # Logging
    log_level: LogLevel = Field(default="WARNING", validation_alias=AliasChoices("LOG_LEVEL"))
    log_format: LogFormat = Field(default="compact", validation_alias=AliasChoices("LOG_FORMAT"))

    # Command line only
    print_config: bool = Field(default=False, exclude=True)

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value

    @field_validator("log_format", mode="before")
    @classmethod
    def _normalize_log_format(cls, value: object) -> object:
        return value.lower() if isinstance(value, str) else value

    @property
    def has_api_key(self) -> bool:
        return bool(self.api_key)
