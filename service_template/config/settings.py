"""Typed runtime settings resolved once from process environment variables."""

import os

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

CONFIG_DEFAULT_PORT = 8080
CONFIG_DEFAULT_DISPLAY_MESSAGE = "Welcome to Service Template!"
CONFIG_DEFAULT_ENVIRONMENT = "production"
CONFIG_DEFAULT_VERSION = "1.0.0"


class SettingsLoadError(RuntimeError):
    """Raised when runtime settings cannot be loaded or validated."""


class AppSettings(BaseSettings):
    """Application settings for the page and health surfaces.

    Each field reads exactly one uppercase environment variable, matched
    case-sensitively. Example: `display_message` reads from `DISPLAY_MESSAGE`
    and ignores `display_message`. Variables that are set but empty are treated
    exactly like unset ones.

    Attributes:
        port: TCP port the server listens on.
        display_message: Message shown on the rendered page.
        environment: Environment label shown on the page and in health output.
        version: Version label shown on the page and in health output.
    """

    model_config = SettingsConfigDict(
        extra="ignore",
        case_sensitive=True,
        env_ignore_empty=True,
        frozen=True,
    )

    port: int = Field(default=CONFIG_DEFAULT_PORT, alias="PORT", ge=1, le=65535)
    display_message: str = Field(default=CONFIG_DEFAULT_DISPLAY_MESSAGE, alias="DISPLAY_MESSAGE")
    environment: str = Field(default=CONFIG_DEFAULT_ENVIRONMENT, alias="ENVIRONMENT")
    version: str = Field(default=CONFIG_DEFAULT_VERSION, alias="VERSION")


def config_resolve_env(key: str, default: str) -> str:
    """Resolve one environment variable with a fallback default.

    Args:
        key: Environment variable name.
        default: Value returned when the variable is unset or empty.

    Returns:
        str: Environment value when present and non-empty, otherwise `default`.
    """

    value = os.environ.get(key, "")
    if value:
        return value
    return default


def config_load_settings() -> AppSettings:
    """Load and validate runtime settings from the process environment.

    Returns:
        AppSettings: Validated, immutable runtime settings object.

    Raises:
        SettingsLoadError: Raised when a configured value is invalid.
    """

    try:
        return AppSettings()
    except ValidationError as error:
        raise SettingsLoadError(
            f"Startup configuration validation failed. Update environment variables. Details: {error}"
        ) from error
