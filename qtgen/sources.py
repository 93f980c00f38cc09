"""Read-only template sources.

Templates and manifests are always read through a :class:`TemplateSource` so
the generator does not care whether they come from the bundled assets or from
a user-supplied template directory.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

_ASSETS_DIR = Path(__file__).parent / "assets"


class TemplateSourceError(Exception):
    """Raised when a template source cannot return a file's contents."""

    def __init__(self, path: str, message: str) -> None:
        self.path = path
        super().__init__(message)


class TemplateSource(Protocol):
    """Anything that can hand back the bytes stored at a relative path."""

    def read_bytes(self, path: str) -> bytes: ...

    def read_text(self, path: str) -> str: ...


class DirectorySource:
    """Serves files from beneath a root directory on the local filesystem."""

    def __init__(self, root: str | Path) -> None:
        self.root = Path(root)

    def __repr__(self) -> str:
        return f"DirectorySource({str(self.root)!r})"

    def read_bytes(self, path: str) -> bytes:
        """Return the raw contents of *path* relative to the root.

        Raises:
            TemplateSourceError: If the path is missing, is not a regular
                file, or cannot be read.
        """
        target = self.root / path
        try:
            if not target.exists():
                raise TemplateSourceError(
                    path, f"cannot read file info, given {path}"
                )
            if not target.is_file():
                raise TemplateSourceError(
                    path, f"cannot read non-regular file, given = {path}"
                )
            return target.read_bytes()
        except OSError as exc:
            raise TemplateSourceError(path, f"cannot read {path}: {exc}") from exc

    def read_text(self, path: str) -> str:
        """Return the contents of *path* decoded as UTF-8."""
        raw = self.read_bytes(path)
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise TemplateSourceError(path, f"{path} is not valid UTF-8") from exc


def bundled_source() -> DirectorySource:
    """Return a source over the templates shipped inside the package."""
    return DirectorySource(_ASSETS_DIR)
