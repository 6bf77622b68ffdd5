"""Typed runtime settings with dotenv support and startup validation."""

from typing import Literal

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class SettingsLoadError(RuntimeError):
    """Raised when runtime settings cannot be loaded or validated."""


class SplinterSettings(BaseSettings):
    """Application settings for the backend client and its service surfaces.

    Environment variable names map directly to field names in uppercase.
    Example: `splinter_node_url` reads from `SPLINTER_NODE_URL`.

    Attributes:
        environment_name: Runtime environment label.
        application_host: Host interface for web server binding.
        application_port: Web server port.
        splinter_node_url: Base URL of the Splinter node REST API.
        splinter_authorization: Value sent verbatim as the `Authorization` header.
        splinter_request_timeout_seconds: Optional client-side request timeout.
        log_level: Root logger level used by the CLI entrypoint.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    environment_name: str = Field(default="development")
    application_host: str = Field(default="0.0.0.0")
    application_port: int = Field(default=8080, ge=1, le=65535)
    splinter_node_url: str = Field(min_length=1)
    splinter_authorization: str = Field(min_length=1)
    splinter_request_timeout_seconds: float | None = Field(default=None, gt=0)
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(default="INFO")

    @field_validator("splinter_node_url")
    @classmethod
    def _validate_node_url(cls, value: str) -> str:
        stripped_value = value.strip().rstrip("/")
        if not stripped_value:
            raise ValueError("value must not be blank")
        return stripped_value

    @field_validator("splinter_authorization")
    @classmethod
    def _validate_authorization(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("value must not be blank")
        return value

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().upper()
        return value


def config_load_settings() -> SplinterSettings:
    """Load and validate runtime settings from environment and dotenv.

    Returns:
        SplinterSettings: Validated runtime settings object.

    Raises:
        SettingsLoadError: Raised when required settings are missing or invalid.
    """

    try:
        return SplinterSettings()
    except ValidationError as error:
        raise SettingsLoadError(
            f"Startup configuration validation failed. Update .env or environment variables. Details: {error}"
        ) from error
