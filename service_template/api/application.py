"""FastAPI application factory for the service template runtime.

All dependencies are injected here; no router or handler reaches for
process-wide state.
"""

from fastapi import FastAPI

from service_template.config import AppSettings
from service_template.rendering import TemplateStore

from .routers import api_create_health_router, api_create_page_router


def create_api_application(settings: AppSettings, hostname: str, template_store: TemplateStore) -> FastAPI:
    """Create the FastAPI application instance for the service.

    Args:
        settings: Resolved runtime settings.
        hostname: Host identity resolved at startup.
        template_store: Loaded template store used by the index page.

    Returns:
        FastAPI: Application serving `/`, `/health` and `/ready` only.

    Raises:
        ValueError: Raised when a router dependency is invalid.
    """

    application = FastAPI(
        title="Service Template",
        version=settings.version,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    application.include_router(
        api_create_page_router(settings=settings, hostname=hostname, template_store=template_store)
    )
    application.include_router(api_create_health_router(settings=settings))
    return application
