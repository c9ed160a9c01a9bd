"""In-memory template store compiled once from the bundled template directory.

Templates are read from disk a single time and compiled into a Jinja2
environment backed by a `DictLoader`, so later edits to the files on disk are
never picked up by a running process.
"""

import logging
from dataclasses import asdict
from pathlib import Path

from jinja2 import DictLoader, Environment, StrictUndefined, Template, TemplateError, select_autoescape

from service_template.domain import PageRenderingContext

logger = logging.getLogger(__name__)

RENDERING_TEMPLATE_DIRECTORY = Path(__file__).resolve().parents[1] / "templates"
RENDERING_TEMPLATE_PATTERN = "*.html"


class TemplateStoreError(RuntimeError):
    """Base class for template store failures."""


class TemplateLoadError(TemplateStoreError):
    """Raised when the template bundle cannot be read or compiled."""


class TemplateNotFoundError(TemplateStoreError):
    """Raised when a render is requested for an unregistered template name."""


class TemplateRenderError(TemplateStoreError):
    """Raised when a registered template fails while executing."""


class TemplateStore:
    """Named, queryable set of compiled HTML templates."""

    def __init__(self, templates: dict[str, Template]):
        """Initialize template store.

        Args:
            templates: Compiled templates keyed by file name.

        Raises:
            ValueError: Raised when no templates are provided.
        """

        if not templates:
            raise ValueError("templates must not be empty")
        self._templates = dict(templates)

    @classmethod
    def template_load(cls, directory: Path | None = None) -> "TemplateStore":
        """Read and compile every HTML template in the bundle directory.

        Args:
            directory: Bundle directory; defaults to the packaged `templates` directory.

        Returns:
            TemplateStore: Store holding every compiled template.

        Raises:
            TemplateLoadError: Raised when the bundle is missing, empty, unreadable or malformed.
        """

        bundle_directory = Path(directory) if directory is not None else RENDERING_TEMPLATE_DIRECTORY
        if not bundle_directory.is_dir():
            raise TemplateLoadError(f"template bundle directory not found: {bundle_directory}")

        template_paths = sorted(bundle_directory.glob(RENDERING_TEMPLATE_PATTERN))
        if not template_paths:
            raise TemplateLoadError(
                f"template bundle {bundle_directory} contains no files matching {RENDERING_TEMPLATE_PATTERN}"
            )

        sources: dict[str, str] = {}
        for template_path in template_paths:
            try:
                sources[template_path.name] = template_path.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as error:
                raise TemplateLoadError(f"failed to read template {template_path}: {error}") from error

        environment = Environment(
            loader=DictLoader(sources),
            autoescape=select_autoescape(enabled_extensions=("html",), default_for_string=True),
            undefined=StrictUndefined,
            auto_reload=False,
        )
        try:
            templates = {name: environment.get_template(name) for name in sources}
        except TemplateError as error:
            raise TemplateLoadError(f"failed to parse templates in {bundle_directory}: {error}") from error

        logger.info("Loaded %d template(s) from %s", len(templates), bundle_directory)
        return cls(templates=templates)

    def template_names(self) -> tuple[str, ...]:
        """Return registered template names in sorted order."""

        return tuple(sorted(self._templates))

    def template_render(self, name: str, context: PageRenderingContext) -> str:
        """Render one registered template with a page rendering context.

        Args:
            name: Registered template file name, for example `index.html`.
            context: Values exposed to the template by field name.

        Returns:
            str: Rendered HTML document.

        Raises:
            TemplateNotFoundError: Raised when `name` is not registered.
            TemplateRenderError: Raised when template execution fails.
        """

        template = self._templates.get(name)
        if template is None:
            raise TemplateNotFoundError(f"template {name!r} is not registered")
        try:
            return template.render(asdict(context))
        except Exception as error:
            raise TemplateRenderError(f"template {name!r} failed to render: {error}") from error
