"""Main module entrypoint for local runtime execution.

This module validates startup configuration and launches the FastAPI service.
"""

import logging

import uvicorn

from service_template.bootstrap import bootstrap_create_application
from service_template.config import SettingsLoadError, config_load_settings
from service_template.rendering import TemplateLoadError

logger = logging.getLogger(__name__)

MAIN_BIND_HOST = "0.0.0.0"
MAIN_LOG_FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"


def main() -> None:
    """Bootstrap the application and serve it until the process is stopped.

    Returns:
        None: This function does not return a runtime value.

    Raises:
        SystemExit: Raised with status 1 on any fatal startup or serve error.
    """

    logging.basicConfig(level=logging.INFO, format=MAIN_LOG_FORMAT)

    try:
        settings = config_load_settings()
        application = bootstrap_create_application(settings=settings)
    except (SettingsLoadError, TemplateLoadError) as error:
        logger.error("Startup failed: %s", error)
        raise SystemExit(1) from error

    logger.info("Starting server on port %s", settings.port)
    logger.info("Environment: %s", settings.environment)
    logger.info("Version: %s", settings.version)
    logger.info("Message: %s", settings.display_message)

    try:
        uvicorn.run(application, host=MAIN_BIND_HOST, port=settings.port)
    except SystemExit as error:
        # uvicorn logs bind and serve failures itself before exiting.
        if not error.code:
            raise
        logger.error("Server failed to start on port %s", settings.port)
        raise SystemExit(1) from error


if __name__ == "__main__":
    main()
