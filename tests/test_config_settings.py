"""Tests for environment-derived runtime settings."""

import pytest
from pydantic import ValidationError

from service_template.config import AppSettings, SettingsLoadError, config_load_settings, config_resolve_env

_CONFIG_KEYS = ("PORT", "DISPLAY_MESSAGE", "ENVIRONMENT", "VERSION")


def _clear_config_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove every configuration variable from the test process environment."""

    for key in _CONFIG_KEYS:
        monkeypatch.delenv(key, raising=False)


def test_config_resolve_env_returns_value_when_set(monkeypatch: pytest.MonkeyPatch) -> None:
    """Return the environment value when the variable is present and non-empty."""

    monkeypatch.setenv("SERVICE_TEMPLATE_TEST_VAR", "custom")

    assert config_resolve_env("SERVICE_TEMPLATE_TEST_VAR", "default") == "custom"


def test_config_resolve_env_returns_default_when_unset(monkeypatch: pytest.MonkeyPatch) -> None:
    """Return the default when the variable is absent."""

    monkeypatch.delenv("SERVICE_TEMPLATE_TEST_VAR", raising=False)

    assert config_resolve_env("SERVICE_TEMPLATE_TEST_VAR", "default") == "default"


def test_config_resolve_env_treats_empty_value_as_unset(monkeypatch: pytest.MonkeyPatch) -> None:
    """Return the default when the variable is set to the empty string."""

    monkeypatch.setenv("SERVICE_TEMPLATE_TEST_VAR", "")

    assert config_resolve_env("SERVICE_TEMPLATE_TEST_VAR", "default") == "default"


@pytest.mark.parametrize(
    ("key", "default"),
    [
        ("PORT", "8080"),
        ("DISPLAY_MESSAGE", "Welcome to Service Template!"),
        ("ENVIRONMENT", "production"),
        ("VERSION", "1.0.0"),
    ],
)
def test_config_resolve_env_defaults_for_service_keys(
    monkeypatch: pytest.MonkeyPatch,
    key: str,
    default: str,
) -> None:
    """Fall back to the documented default for every service key."""

    monkeypatch.delenv(key, raising=False)

    assert config_resolve_env(key, default) == default


def test_config_load_settings_uses_defaults_when_environment_is_empty(monkeypatch: pytest.MonkeyPatch) -> None:
    """Load documented defaults when no configuration variable is set.

    Args:
        monkeypatch: Pytest monkeypatch fixture.

    Returns:
        None: Assertions validate default resolution.

    Raises:
        AssertionError: Raised when a default does not match.
    """

    _clear_config_environment(monkeypatch)

    settings = config_load_settings()

    assert settings.port == 8080
    assert settings.display_message == "Welcome to Service Template!"
    assert settings.environment == "production"
    assert settings.version == "1.0.0"


def test_config_load_settings_ignores_empty_variables(monkeypatch: pytest.MonkeyPatch) -> None:
    """Treat explicitly empty variables exactly like unset ones."""

    for key in _CONFIG_KEYS:
        monkeypatch.setenv(key, "")

    settings = config_load_settings()

    assert settings.port == 8080
    assert settings.display_message == "Welcome to Service Template!"
    assert settings.environment == "production"
    assert settings.version == "1.0.0"


def test_config_load_settings_reads_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    """Read every configured value from its uppercase environment variable."""

    monkeypatch.setenv("PORT", "9090")
    monkeypatch.setenv("DISPLAY_MESSAGE", "Hello from tests")
    monkeypatch.setenv("ENVIRONMENT", "staging")
    monkeypatch.setenv("VERSION", "2.3.1")

    settings = config_load_settings()

    assert settings.port == 9090
    assert settings.display_message == "Hello from tests"
    assert settings.environment == "staging"
    assert settings.version == "2.3.1"


@pytest.mark.parametrize("port_value", ["not-a-port", "0", "70000"])
def test_config_load_settings_rejects_invalid_port(monkeypatch: pytest.MonkeyPatch, port_value: str) -> None:
    """Raise a typed startup error when PORT is not a usable TCP port.

    Args:
        monkeypatch: Pytest monkeypatch fixture.
        port_value: Invalid PORT value under test.

    Returns:
        None: Assertions validate the raised error.

    Raises:
        AssertionError: Raised when no SettingsLoadError is produced.
    """

    _clear_config_environment(monkeypatch)
    monkeypatch.setenv("PORT", port_value)

    with pytest.raises(SettingsLoadError, match="Startup configuration validation failed"):
        config_load_settings()


def test_config_settings_are_immutable() -> None:
    """Reject assignment after settings are resolved."""

    settings = AppSettings(ENVIRONMENT="test")

    with pytest.raises(ValidationError):
        settings.environment = "changed"


def test_config_load_settings_matches_variable_names_exactly(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ignore lowercase variables and keep the defaults, like `config_resolve_env`.

    Args:
        monkeypatch: Pytest monkeypatch fixture.

    Returns:
        None: Assertions validate case-sensitive resolution.

    Raises:
        AssertionError: Raised when a lowercase variable overrides a default.
    """

    _clear_config_environment(monkeypatch)
    monkeypatch.setenv("version", "9.9.9")
    monkeypatch.setenv("environment", "lowercase")

    settings = config_load_settings()

    assert settings.version == "1.0.0"
    assert settings.environment == "production"
    assert config_resolve_env("VERSION", "1.0.0") == settings.version


def test_config_settings_accept_variable_names_as_keyword_arguments() -> None:
    """Build settings in code using the same uppercase names as the environment."""

    settings = AppSettings(PORT=9000, DISPLAY_MESSAGE="Hi", ENVIRONMENT="test", VERSION="0.0.1")

    assert settings.port == 9000
    assert settings.display_message == "Hi"
    assert settings.environment == "test"
    assert settings.version == "0.0.1"
