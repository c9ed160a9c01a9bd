"""Application bootstrap wiring for startup validation and dependency assembly."""

import logging
import socket
from pathlib import Path

from fastapi import FastAPI

from service_template.api import create_api_application
from service_template.config import AppSettings, config_load_settings
from service_template.rendering import TemplateStore

logger = logging.getLogger(__name__)

BOOTSTRAP_UNKNOWN_HOSTNAME = "unknown"


def bootstrap_resolve_hostname() -> str:
    """Resolve the host identity of the running machine or container.

    Returns:
        str: Host name, or `unknown` when the lookup fails or yields nothing.
    """

    try:
        hostname = socket.gethostname()
    except OSError as error:
        logger.warning("Hostname lookup failed, using %r: %s", BOOTSTRAP_UNKNOWN_HOSTNAME, error)
        return BOOTSTRAP_UNKNOWN_HOSTNAME
    return hostname or BOOTSTRAP_UNKNOWN_HOSTNAME


def bootstrap_create_application(
    settings: AppSettings | None = None,
    template_directory: Path | None = None,
) -> FastAPI:
    """Assemble the runtime application after validating startup inputs.

    Args:
        settings: Optional pre-loaded settings; loaded from the environment when omitted.
        template_directory: Optional template bundle override; the packaged bundle is used when omitted.

    Returns:
        FastAPI: Fully initialized FastAPI application instance.

    Raises:
        SettingsLoadError: Raised when startup configuration validation fails.
        TemplateLoadError: Raised when the template bundle cannot be loaded.
    """

    resolved_settings = settings if settings is not None else config_load_settings()
    hostname = bootstrap_resolve_hostname()
    template_store = TemplateStore.template_load(directory=template_directory)
    return create_api_application(
        settings=resolved_settings,
        hostname=hostname,
        template_store=template_store,
    )
