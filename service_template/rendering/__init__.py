"""Template rendering package for bundled HTML pages."""

from .templates import (
    TemplateLoadError,
    TemplateNotFoundError,
    TemplateRenderError,
    TemplateStore,
    TemplateStoreError,
)

__all__ = [
    "TemplateLoadError",
    "TemplateNotFoundError",
    "TemplateRenderError",
    "TemplateStore",
    "TemplateStoreError",
]
