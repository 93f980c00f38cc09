"""Jinja2 template expansion for manifests, field expressions and bodies.

Provides the :class:`TemplateExpander` class which renders a single template,
either an inline string or a file read through a
:class:`~qtgen.sources.TemplateSource`, against a field context and a fixed set
of injected functions.  Every render compiles the template afresh; nothing is
cached between calls.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from types import MappingProxyType
from typing import Any

from jinja2 import Environment, Undefined

from .context import render_value
from .sources import DirectorySource, TemplateSource, TemplateSourceError

logger = logging.getLogger(__name__)


class TemplateError(Exception):
    """Raised when a template fails to parse or render."""

    def __init__(self, name: str, message: str) -> None:
        self.name = name
        super().__init__(f"Failed to render template {name}: {message}")


# ---------------------------------------------------------------------------
# TemplateExpander
# ---------------------------------------------------------------------------


class TemplateExpander:
    """Renders templates with an injected, fixed function library.

    Undefined variables render as empty text.  Booleans, lists and mappings
    are written using :func:`~qtgen.context.render_value`, so ``{{ flag }}``
    yields ``true`` and ``{{ items }}`` yields ``[a b]``.
    """

    def __init__(
        self,
        functions: Mapping[str, Callable[..., Any] | object] | None = None,
        source: TemplateSource | None = None,
    ) -> None:
        self.functions = functions if functions is not None else MappingProxyType({})
        self.source = source
        self.env = Environment(
            autoescape=False,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
            undefined=Undefined,
            finalize=render_value,
        )
        self.env.globals.update(self.functions)

    # -- Rendering ----------------------------------------------------------

    def render_string(
        self, name: str, template_string: str, context: Mapping[str, Any]
    ) -> str:
        """Render an inline template string.

        Args:
            name: Name used in error messages (usually the originating file).
            template_string: Template text.
            context: Variables visible to the template.

        Returns:
            The rendered text.

        Raises:
            TemplateError: On malformed syntax or when an injected function
                raises while rendering.
        """
        try:
            template = self.env.from_string(template_string)
            return template.render(dict(context))
        except Exception as exc:
            raise TemplateError(name, str(exc)) from exc

    def render_file(
        self, name: str, path: str, context: Mapping[str, Any]
    ) -> str:
        """Read *path* from the expander's source and render it."""
        source = self.source or DirectorySource(".")
        try:
            body = source.read_text(path)
        except TemplateSourceError as exc:
            raise TemplateError(name, str(exc)) from exc
        logger.debug("rendering file %s as %s", path, name)
        return self.render_string(name, body, context)
