"""Template rendering on top of a pre-compiled Jinja2 template set.

Every template below the template root is compiled once when the renderer is
built. A template that fails to compile aborts construction, so a server with
a broken template set never starts. After construction the renderer is
read-only and can be shared between request threads.
"""

import logging
import os
from collections.abc import Iterable, Mapping
from typing import Any

from jinja2 import (
    Environment,
    FileSystemLoader,
    StrictUndefined,
    Template,
    TemplateError,
    select_autoescape,
)

logger = logging.getLogger(__name__)


class RenderError(Exception):
    """Raised when a template cannot be rendered for a request."""

    def __init__(self, template_name: str, message: str) -> None:
        super().__init__(f"Failed to render {template_name}: {message}")
        self.template_name = template_name


class TemplateSetError(Exception):
    """Raised when the template set cannot be discovered or compiled."""


def to_template_value(value: Any) -> Any:
    """Convert entities (or sequences of entities) to template values."""
    if hasattr(value, "to_template_value"):
        return value.to_template_value()
    if isinstance(value, (list, tuple)):
        return [to_template_value(item) for item in value]
    return value


class RenderContext:
    """Per-request key/value data handed to a template."""

    def __init__(self) -> None:
        self._data: dict[str, Any] = {}

    def insert(self, key: str, value: Any) -> None:
        """Add a value under ``key``, converting entities to template values."""
        self._data[key] = to_template_value(value)

    def __contains__(self, key: str) -> bool:
        return key in self._data

    def to_dict(self) -> dict[str, Any]:
        return dict(self._data)


class TemplateRenderer:
    """Render named templates from a set compiled at construction time."""

    def __init__(self, environment: Environment, names: Iterable[str] | None = None) -> None:
        """
        Compile the template set.

        Args:
            environment: Jinja2 environment holding the template loader.
            names: Templates to compile; defaults to everything the loader lists.

        Raises:
            TemplateSetError: If discovery or compilation of any template fails.
        """
        self._environment = environment
        try:
            template_names = sorted(names if names is not None else environment.list_templates())
        except (OSError, TypeError, TemplateError) as e:
            raise TemplateSetError(f"Template discovery failed: {e}") from e

        templates: dict[str, Template] = {}
        for name in template_names:
            try:
                templates[name] = environment.get_template(name)
            except TemplateError as e:
                logger.error("Template %s failed to compile: %s", name, e)
                raise TemplateSetError(f"Template {name} failed to compile: {e}") from e
        self._templates = templates
        logger.info("Compiled %d templates", len(templates))

    @classmethod
    def from_directory(cls, template_root: str) -> "TemplateRenderer":
        """Build a renderer from every template found recursively under ``template_root``."""
        if not os.path.isdir(template_root):
            raise TemplateSetError(f"Template root is not a directory: {template_root}")

        environment = Environment(
            loader=FileSystemLoader(template_root),
            autoescape=select_autoescape(["html", "htm", "xml"]),
            undefined=StrictUndefined,
            auto_reload=False,
        )
        return cls(environment)

    @property
    def template_names(self) -> list[str]:
        return list(self._templates)

    def render(self, template_name: str, context: RenderContext | Mapping[str, Any]) -> str:
        """
        Render ``template_name`` with the given context.

        Raises:
            RenderError: If the template is unknown or rendering fails,
                e.g. because a placeholder has no value in the context.
        """
        template = self._templates.get(template_name)
        if template is None:
            raise RenderError(template_name, "template not found")

        values = context.to_dict() if isinstance(context, RenderContext) else dict(context)
        try:
            return template.render(values)
        except TemplateError as e:
            raise RenderError(template_name, str(e)) from e
