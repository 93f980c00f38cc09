"""Generation orchestrator.

Takes a :class:`GenerationRequest`, resolves the manifest for the requested
target, builds the global field context and renders every file entry whose
``when`` guard holds, writing each result to disk or echoing it to the
console.

Quick usage::

    from qtgen import GenerationRequest, Generator

    request = GenerationRequest(
        type="cpp", name="App::MainWindow", qobject=True, output_dir="out"
    )
    result = Generator(request).run()
    print(result.file_names)   # ['mainwindow.h', 'mainwindow.cpp']
"""

from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path, PurePosixPath
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from rich.console import Console

from .config import DEFAULT_PYTHON_MODULE
from .context import FieldContext, FieldValue
from .errors import (
    FieldExpansionError,
    GeneratorError,
    GuardEvaluationError,
    InvalidTargetError,
    OutputWriteError,
    RenderError,
)
from .expansion import expand_fields
from .functions import build_function_library
from .manifest import FileEntry, Manifest, load_manifest
from .sources import DirectorySource, TemplateSource, TemplateSourceError, bundled_source
from .targets import TargetCategory, TargetType, find_target_type, resolve_manifest_path
from .templates import TemplateError, TemplateExpander
from .utils import echo_with_name, write_text_file

logger = logging.getLogger(__name__)

# Leading characters removed from every rendered file.
_LEADING_WHITESPACE = " \t\r\n"


def _relative_output(output_name: str) -> PurePosixPath:
    """Drop the root of an absolute output path so it stays under the output dir."""
    path = PurePosixPath(output_name)
    if path.is_absolute():
        return path.relative_to(path.anchor)
    return path


# ---------------------------------------------------------------------------
# Request / result models
# ---------------------------------------------------------------------------


class GenerationRequest(BaseModel):
    """Everything the caller supplies for one generation run."""

    model_config = ConfigDict(frozen=True)

    category: TargetCategory | str = Field(default=TargetCategory.CLASS)
    type: str = Field(..., description="Target type name, e.g. 'cpp' or 'python'")
    name: str = Field(..., description="Entity name, may be scope-qualified")
    output_dir: Path | None = Field(
        default=None, description="Output directory; None echoes to the console"
    )
    license_file: Path | None = None
    template_dir: Path | None = None

    base_class: str = ""
    macros: list[str] = Field(default_factory=list)
    includes: list[str] = Field(default_factory=list)
    qobject: bool = False
    use_pragma: bool = False
    module: str = DEFAULT_PYTHON_MODULE
    imports: list[str] = Field(default_factory=list)

    @field_validator("output_dir", "license_file", "template_dir", mode="before")
    @classmethod
    def _empty_path_is_none(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    def as_fields(self) -> dict[str, FieldValue]:
        """Return the request parameters under their reserved field names."""
        return {
            "qArgName": self.name,
            "qArgType": self.type,
            "qArgOutputDir": str(self.output_dir) if self.output_dir else "",
            "qArgLicenseFile": str(self.license_file) if self.license_file else "",
            "qArgTemplateDir": str(self.template_dir) if self.template_dir else "",
            "qArgBase": self.base_class,
            "qArgAdd": list(self.macros),
            "qArgInclude": list(self.includes),
            "qArgQObject": self.qobject,
            "qArgPragma": self.use_pragma,
            "qArgModule": self.module,
            "qArgImport": list(self.imports),
        }


class GenerationResult(BaseModel):
    """Files produced by a successful run, in manifest order."""

    target_type: TargetType
    file_names: list[str] = Field(default_factory=list)
    output_dir: Path | None = None

    @property
    def written_paths(self) -> list[Path]:
        """Paths of the files written to disk (empty when echoed)."""
        if self.output_dir is None:
            return []
        return [self.output_dir / name for name in self.file_names]


class GeneratorState(str, Enum):
    """Run-level progress; per-file outcomes show up in ``Generator.file_names``."""

    CREATED = "created"
    VALIDATED = "validated"
    CONTEXT_PREPARED = "context_prepared"
    DONE = "done"
    FAILED = "failed"


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------


class Generator:
    """Runs one generation request from manifest to output files.

    Attributes:
        request: The request being served.
        state: Current :class:`GeneratorState`.
        file_names: Output paths produced so far.  After a failure this still
            lists the files written before the failing entry; they are not
            rolled back.
    """

    def __init__(
        self,
        request: GenerationRequest,
        *,
        console: Console | None = None,
    ) -> None:
        self.request = request
        self.console = console
        self.state = GeneratorState.CREATED
        self.file_names: list[str] = []

        self.target_type: TargetType | None = None
        self.manifest: Manifest | None = None
        self.manifest_path = ""
        self.base_dir = ""
        self.source: TemplateSource | None = None

        self.functions: dict[str, Any] = {}
        self.global_context = FieldContext()
        self.header = ""

    # -- Public API --------------------------------------------------------

    def run(self) -> GenerationResult:
        """Generate every file in the manifest.

        Returns:
            The ordered list of produced output paths (skipped entries are
            absent).

        Raises:
            GeneratorError: On the first failing step; later entries are not
                processed.
        """
        try:
            self._validate()
            self._prepare_context()

            files = self.manifest.files
            for index, entry in enumerate(files, start=1):
                logger.debug(
                    "processing a file (%d/%d), in = %s", index, len(files), entry.input
                )
                if not self._evaluate_when(entry):
                    logger.debug(
                        "skipping %s because 'when' condition was not satisfied",
                        entry.input,
                    )
                    continue
                self.file_names.append(self._render_entry(entry))
        except GeneratorError:
            self.state = GeneratorState.FAILED
            raise

        self.state = GeneratorState.DONE
        return GenerationResult(
            target_type=self.target_type,
            file_names=list(self.file_names),
            output_dir=self.request.output_dir,
        )

    # -- Validation --------------------------------------------------------

    def _validate(self) -> None:
        """Resolve the target type, pick a template source and load the manifest."""
        request = self.request
        category = getattr(request.category, "value", request.category)
        logger.debug(
            "validating input data, cat. = %s, type = %s, name = %s",
            category, request.type, request.name,
        )

        target = find_target_type(request.category, request.type)
        if target is None:
            raise InvalidTargetError(str(category), request.type)
        self.target_type = target

        manifest_path = resolve_manifest_path(target)
        if not manifest_path:
            raise InvalidTargetError(str(category), request.type)
        self.manifest_path = manifest_path
        self.base_dir = str(PurePosixPath(manifest_path).parent)

        if request.template_dir:
            self.source = DirectorySource(request.template_dir)
        else:
            self.source = bundled_source()

        self.manifest = load_manifest(self.source, manifest_path)
        self.state = GeneratorState.VALIDATED

    # -- Context building --------------------------------------------------

    def _prepare_context(self) -> None:
        """Register functions, seed request fields and expand global fields."""
        logger.debug("preparing global context")
        self.functions = dict(build_function_library())

        seeded = FieldContext(self.request.as_fields())
        expander = TemplateExpander(self.functions, self.source)
        try:
            self.global_context = expand_fields(
                self.manifest.global_section.fields, seeded, expander
            )
        except TemplateError as exc:
            raise FieldExpansionError(f"global fields: {exc}") from exc

        self.header = self.manifest.global_section.header
        self.state = GeneratorState.CONTEXT_PREPARED
        logger.debug("processing fields, done, value = %r", self.global_context)

    # -- Per-file steps ----------------------------------------------------

    def _evaluate_when(self, entry: FileEntry) -> bool:
        """Return ``True`` unless the entry's guard renders to something other than ``true``."""
        if not entry.when:
            return True

        expander = TemplateExpander(self.functions, self.source)
        try:
            out = expander.render_string(entry.input, entry.when, self.global_context)
        except TemplateError as exc:
            raise GuardEvaluationError(f"'when' of {entry.input}: {exc}") from exc
        return out == "true"

    def _render_entry(self, entry: FileEntry) -> str:
        """Render one file entry and persist or echo it.  Returns the output path."""
        expander = TemplateExpander(self.functions, self.source)

        try:
            local_context = expand_fields(entry.fields, self.global_context, expander)
        except TemplateError as exc:
            raise FieldExpansionError(f"fields of {entry.input}: {exc}") from exc

        try:
            output_name = expander.render_string(entry.input, entry.output, local_context)
        except TemplateError as exc:
            raise RenderError(f"output path of {entry.input}: {exc}") from exc

        input_path = str(PurePosixPath(self.base_dir) / entry.input)
        try:
            body = self.source.read_text(input_path)
        except TemplateSourceError as exc:
            raise RenderError(f"cannot read template {input_path}: {exc}") from exc

        try:
            output = expander.render_string(
                output_name, self.header + body, local_context
            )
        except TemplateError as exc:
            raise RenderError(str(exc)) from exc

        output = output.lstrip(_LEADING_WHITESPACE)

        if self.request.output_dir:
            dest_path = Path(self.request.output_dir) / _relative_output(output_name)
            try:
                write_text_file(dest_path, output)
            except OSError as exc:
                raise OutputWriteError(str(dest_path), str(exc)) from exc
            logger.debug("wrote %s", dest_path)
        else:
            echo_with_name(output, output_name, self.console)

        return output_name
