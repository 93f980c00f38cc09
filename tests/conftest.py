"""Shared pytest fixtures for the qtgen test suite.

Provides reusable fixtures for:
- Custom template roots laid out like the bundled assets
- A Rich console that records echoed output
- License template files
"""

from __future__ import annotations

import io
import textwrap
from collections.abc import Callable
from pathlib import Path

import pytest
from rich.console import Console


# ---------------------------------------------------------------------------
# Template roots
# ---------------------------------------------------------------------------


@pytest.fixture
def make_template_dir(tmp_path: Path) -> Callable[..., Path]:
    """Factory writing a manifest and template bodies under a template root.

    Usage::

        root = make_template_dir(manifest_yaml, {"a.txt": "body"}, family="cpp")

    Returns the root to pass as ``template_dir``.  The manifest text is
    dedented; bodies are written exactly as given.
    """

    def _make(
        manifest: str,
        files: dict[str, str] | None = None,
        family: str = "cpp",
    ) -> Path:
        root = tmp_path / "template-root"
        family_dir = root / "templates" / "classes" / family
        family_dir.mkdir(parents=True, exist_ok=True)
        (family_dir / "config.yml").write_text(
            textwrap.dedent(manifest), encoding="utf-8"
        )
        for name, body in (files or {}).items():
            path = family_dir / name
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(body, encoding="utf-8")
        return root

    return _make


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    """Empty directory that generated files are written to."""
    out = tmp_path / "out"
    out.mkdir()
    return out


# ---------------------------------------------------------------------------
# Console
# ---------------------------------------------------------------------------


@pytest.fixture
def record_console() -> Console:
    """A Rich console writing to an in-memory buffer.

    Read what was printed with ``record_console.file.getvalue()``.
    """
    return Console(file=io.StringIO(), width=200, color_system=None)


# ---------------------------------------------------------------------------
# License
# ---------------------------------------------------------------------------


@pytest.fixture
def license_file(tmp_path: Path) -> Path:
    """A license template using the class, file and date fields."""
    path = tmp_path / "license" / "header.tmpl"
    path.parent.mkdir()
    path.write_text(
        "// Copyright {{ Year }} {{ ClassName }} ({{ FileName }})\n",
        encoding="utf-8",
    )
    return path
