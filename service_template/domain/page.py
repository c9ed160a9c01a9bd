"""Page rendering context assembly for the index page."""

from datetime import datetime

from service_template.config import AppSettings

from .models import PageRenderingContext

DOMAIN_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S %Z"


def domain_assemble_page_context(
    settings: AppSettings,
    hostname: str,
    now: datetime | None = None,
) -> PageRenderingContext:
    """Gather configuration, host identity and current time into one context.

    Args:
        settings: Resolved runtime settings.
        hostname: Host identity resolved at startup.
        now: Optional timezone-aware moment to stamp; defaults to local wall-clock time.

    Returns:
        PageRenderingContext: Fresh context owned by the calling request.
    """

    moment = now if now is not None else datetime.now().astimezone()
    return PageRenderingContext(
        message=settings.display_message,
        environment=settings.environment,
        version=settings.version,
        hostname=hostname,
        timestamp=moment.strftime(DOMAIN_TIMESTAMP_FORMAT),
    )
