"""Liveness and readiness router composition."""

from fastapi import APIRouter, status
from fastapi.responses import Response

from service_template.config import AppSettings

from .methods import API_ANY_METHODS

API_READY_BODY = '{"status":"ready"}'


def api_health_body(environment: str, version: str) -> str:
    """Build the literal liveness payload.

    Values are substituted verbatim without JSON escaping.

    Args:
        environment: Runtime environment label.
        version: Service version label.

    Returns:
        str: Liveness JSON document.
    """

    return f'{{"status":"healthy","environment":"{environment}","version":"{version}"}}'


def api_create_health_router(settings: AppSettings) -> APIRouter:
    """Create router exposing `/health` and `/ready` endpoints.

    Args:
        settings: Resolved runtime settings supplying environment and version labels.

    Returns:
        APIRouter: Router exposing liveness and readiness endpoints.

    Raises:
        ValueError: Raised when settings is None.
    """

    if settings is None:
        raise ValueError("settings must not be None")

    router = APIRouter(tags=["health"])
    health_body = api_health_body(environment=settings.environment, version=settings.version)

    @router.api_route("/health", methods=API_ANY_METHODS)
    def api_health_status() -> Response:
        """Report liveness with environment and version labels."""

        return Response(content=health_body, media_type="application/json", status_code=status.HTTP_200_OK)

    @router.api_route("/ready", methods=API_ANY_METHODS)
    def api_ready_status() -> Response:
        """Report readiness."""

        return Response(content=API_READY_BODY, media_type="application/json", status_code=status.HTTP_200_OK)

    return router
