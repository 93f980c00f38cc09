"""Manifest (``config.yml``) model and loader.

A manifest describes which templates to render for one target type::

    version: "1"
    global:
      header: |
        {{ cpp.create_license(qArgLicenseFile, className, fileName) }}
      fields:
        className: "{{ cpp.extract_class_name(qArgName) }}"
    files:
      - in: class.h.j2
        out: "{{ fileName }}"
        when: "{{ qArgQObject }}"
        fields:
          fileName: "{{ className | lower }}.h"

``fields`` may be a single mapping or a list of mappings; either way it is
flattened into an ordered list of :class:`FieldDefinition` entries.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import ManifestLoadError
from .sources import TemplateSource, TemplateSourceError

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Validation helpers
# ---------------------------------------------------------------------------


def _as_text(value: Any) -> str:
    """Coerce a YAML scalar to text the way the template engine would."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _normalise_fields(raw: Any) -> list[Any]:
    """Flatten ``fields`` (mapping, or list of mappings) into definitions."""
    if raw is None:
        return []
    if isinstance(raw, Mapping):
        return [{"name": str(k), "value": v} for k, v in raw.items()]
    if isinstance(raw, (list, tuple)):
        flattened: list[Any] = []
        for group in raw:
            if isinstance(group, FieldDefinition):
                flattened.append(group)
            elif isinstance(group, Mapping):
                flattened.extend(_normalise_fields(group))
            else:
                raise ValueError("fields must be a mapping or a list of mappings")
        return flattened
    raise ValueError("fields must be a mapping or a list of mappings")


# ---------------------------------------------------------------------------
# Models
# ---------------------------------------------------------------------------


class FieldDefinition(BaseModel):
    """A named field: a template expression (``str``) or a literal."""

    model_config = ConfigDict(frozen=True)

    name: str
    value: Any = None

    @property
    def is_expression(self) -> bool:
        return isinstance(self.value, str)


class GlobalSection(BaseModel):
    """Fields shared by every file, plus a header prepended to each body."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    fields: tuple[FieldDefinition, ...] = ()
    header: str = ""

    @field_validator("fields", mode="before")
    @classmethod
    def _flatten_fields(cls, value: Any) -> list[Any]:
        return _normalise_fields(value)

    @field_validator("header", mode="before")
    @classmethod
    def _header_text(cls, value: Any) -> str:
        return _as_text(value)


class FileEntry(BaseModel):
    """One template to render."""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    input: str = Field(default="", alias="in")
    output: str = Field(default="", alias="out")
    fields: tuple[FieldDefinition, ...] = ()
    when: str | None = None

    @field_validator("fields", mode="before")
    @classmethod
    def _flatten_fields(cls, value: Any) -> list[Any]:
        return _normalise_fields(value)

    @field_validator("input", "output", mode="before")
    @classmethod
    def _path_text(cls, value: Any) -> str:
        return _as_text(value)

    @field_validator("when", mode="before")
    @classmethod
    def _when_text(cls, value: Any) -> str | None:
        if value is None:
            return None
        return _as_text(value)


class Manifest(BaseModel):
    """The parsed contents of a manifest file.  Immutable once loaded."""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    version: str = ""
    global_section: GlobalSection = Field(default_factory=GlobalSection, alias="global")
    files: tuple[FileEntry, ...] = ()

    @field_validator("version", mode="before")
    @classmethod
    def _version_text(cls, value: Any) -> str:
        return _as_text(value)

    @field_validator("global_section", mode="before")
    @classmethod
    def _global_default(cls, value: Any) -> Any:
        return {} if value is None else value

    @field_validator("files", mode="before")
    @classmethod
    def _files_default(cls, value: Any) -> Any:
        return [] if value is None else value


# ---------------------------------------------------------------------------
# Loading
# ---------------------------------------------------------------------------


def parse_manifest(text: str, path: str = "<string>") -> Manifest:
    """Parse manifest YAML text.

    Raises:
        ManifestLoadError: If the YAML is malformed or does not have the
            expected shape.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ManifestLoadError(path, f"malformed YAML: {exc}") from exc

    if data is None:
        data = {}
    if not isinstance(data, Mapping):
        raise ManifestLoadError(path, "top level must be a mapping")

    try:
        return Manifest.model_validate(data)
    except ValidationError as exc:
        raise ManifestLoadError(path, str(exc)) from exc


def load_manifest(source: TemplateSource, path: str) -> Manifest:
    """Read and parse the manifest at *path* from *source*.

    Raises:
        ManifestLoadError: If the file cannot be read or parsed.
    """
    logger.debug("reading manifest, file = '%s'", path)
    try:
        text = source.read_text(path)
    except TemplateSourceError as exc:
        raise ManifestLoadError(path, str(exc)) from exc
    return parse_manifest(text, path)
