"""qtgen settings.

Defaults for the command line, taken from environment variables so a user
can pin a template directory or license file once instead of passing it on
every invocation.  Explicit CLI flags always win over these values.
"""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import BaseModel, Field

DEFAULT_PYTHON_MODULE = "PySide6"

_TRUTHY = {"1", "true", "yes", "on"}


class Settings(BaseModel):
    """User-level defaults for generation requests."""

    template_dir: Path | None = Field(
        default=None, description="Custom template root replacing the bundled templates"
    )
    license_file: Path | None = Field(
        default=None, description="License template rendered into every header"
    )
    output_dir: Path | None = Field(
        default=None, description="Where generated files go (None echoes to the console)"
    )
    python_module: str = Field(default=DEFAULT_PYTHON_MODULE)
    verbose: bool = Field(default=False)

    @classmethod
    def from_env(cls) -> "Settings":
        """Build ``Settings`` from environment variables.

        Recognised variables (all optional):
            QTGEN_TEMPLATE_DIR, QTGEN_LICENSE_FILE, QTGEN_OUTPUT_DIR,
            QTGEN_PYTHON_MODULE, QTGEN_VERBOSE.
        """
        kwargs: dict[str, object] = {}
        if os.environ.get("QTGEN_TEMPLATE_DIR"):
            kwargs["template_dir"] = Path(os.environ["QTGEN_TEMPLATE_DIR"])
        if os.environ.get("QTGEN_LICENSE_FILE"):
            kwargs["license_file"] = Path(os.environ["QTGEN_LICENSE_FILE"])
        if os.environ.get("QTGEN_OUTPUT_DIR"):
            kwargs["output_dir"] = Path(os.environ["QTGEN_OUTPUT_DIR"])
        if os.environ.get("QTGEN_PYTHON_MODULE"):
            kwargs["python_module"] = os.environ["QTGEN_PYTHON_MODULE"]

        verbose = os.environ.get("QTGEN_VERBOSE", "").strip().lower()
        kwargs["verbose"] = verbose in _TRUTHY

        return cls(**kwargs)
