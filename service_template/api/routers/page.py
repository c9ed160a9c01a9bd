"""Index page router composition."""

import logging

from fastapi import APIRouter, status
from fastapi.responses import HTMLResponse, PlainTextResponse, Response

from service_template.config import AppSettings
from service_template.domain import domain_assemble_page_context
from service_template.rendering import TemplateStore, TemplateStoreError

from .methods import API_ANY_METHODS

logger = logging.getLogger(__name__)

API_PAGE_TEMPLATE_NAME = "index.html"


def api_create_page_router(settings: AppSettings, hostname: str, template_store: TemplateStore) -> APIRouter:
    """Create router serving the rendered index page at `/`.

    Args:
        settings: Resolved runtime settings rendered on the page.
        hostname: Host identity resolved at startup.
        template_store: Loaded template store holding `index.html`.

    Returns:
        APIRouter: Router exposing the index page endpoint.

    Raises:
        ValueError: Raised when a dependency is None.
    """

    if settings is None:
        raise ValueError("settings must not be None")
    if template_store is None:
        raise ValueError("template_store must not be None")

    router = APIRouter(tags=["page"])

    @router.api_route("/", methods=API_ANY_METHODS)
    def api_page_index() -> Response:
        """Render the index page for the current moment.

        Returns:
            Response: HTML page, or plain-text HTTP 500 carrying the render error.
        """

        page_context = domain_assemble_page_context(settings=settings, hostname=hostname)
        try:
            page_body = template_store.template_render(API_PAGE_TEMPLATE_NAME, page_context)
        except TemplateStoreError as error:
            logger.error("Index page render failed: %s", error)
            return PlainTextResponse(content=str(error), status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
        return HTMLResponse(content=page_body, status_code=status.HTTP_200_OK)

    return router
