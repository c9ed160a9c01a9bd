"""Domain models used across application layer boundaries."""

from .models import PageRenderingContext
from .page import DOMAIN_TIMESTAMP_FORMAT, domain_assemble_page_context

__all__ = ["DOMAIN_TIMESTAMP_FORMAT", "PageRenderingContext", "domain_assemble_page_context"]
