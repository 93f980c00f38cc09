"""Exception hierarchy for the qtgen generation pipeline.

Every failure raised by :class:`~qtgen.generator.Generator` derives from
:class:`GeneratorError`, so callers can catch the whole family with a single
``except`` clause while still being able to tell *which* step failed.
"""

from __future__ import annotations


class GeneratorError(Exception):
    """Base class for every error raised while generating files."""


class InvalidTargetError(GeneratorError):
    """Raised when a category/type pair does not name a known target."""

    def __init__(self, category: str, type_name: str) -> None:
        self.category = category
        self.type_name = type_name
        super().__init__(
            f"invalid new type, given = '{category}', '{type_name}'"
        )


class ManifestLoadError(GeneratorError):
    """Raised when a manifest cannot be read or parsed."""

    def __init__(self, path: str, message: str) -> None:
        self.path = path
        super().__init__(f"Cannot load manifest '{path}': {message}")


class FieldExpansionError(GeneratorError):
    """Raised when a field expression fails to render."""


class GuardEvaluationError(GeneratorError):
    """Raised when a file entry's ``when`` expression fails to render."""


class RenderError(GeneratorError):
    """Raised when a template body or output path fails to render."""


class OutputWriteError(GeneratorError):
    """Raised when a rendered file cannot be written to disk."""

    def __init__(self, path: str, message: str) -> None:
        self.path = path
        super().__init__(f"Cannot write '{path}': {message}")
