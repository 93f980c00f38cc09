"""License header generation.

License templates are ordinary Jinja2 files chosen by the user.  They are
rendered in a second, independent expansion pass that sees only the date and
user fields below, the caller-supplied fields, and ``qEnv``.
"""

from __future__ import annotations

import getpass
import logging
from collections.abc import Mapping
from datetime import datetime
from pathlib import Path
from typing import Any

from ..context import FieldContext
from ..sources import DirectorySource
from ..templates import TemplateExpander
from .general import q_env

logger = logging.getLogger(__name__)


def _current_user() -> str:
    try:
        return getpass.getuser()
    except (KeyError, OSError):
        return ""


def generate_license(
    license_path: str | Path | None,
    fields: Mapping[str, Any] | None = None,
    *,
    now: datetime | None = None,
) -> str:
    """Render the license template at *license_path*.

    Args:
        license_path: Path to the license template.  When empty, no license is
            generated and ``""`` is returned.
        fields: Extra fields (e.g. ``ClassName``, ``FileName``) layered on
            top of the built-in ``Year``, ``Month``, ``Day``, ``Date`` and
            ``User`` values.
        now: Timestamp to use instead of the current time.

    Returns:
        The rendered license text.

    Raises:
        TemplateError: If the template cannot be read or rendered.
    """
    if not license_path:
        return ""

    now = now or datetime.now()
    context = FieldContext(
        {
            "Year": now.strftime("%Y"),
            "Month": now.strftime("%m"),
            "Day": now.strftime("%d"),
            "Date": now.strftime("%Y-%m-%d"),
            "User": _current_user(),
        }
    ).merged(fields or {})

    path = Path(license_path)
    logger.debug("generating license from %s", path)
    expander = TemplateExpander(
        functions={"qEnv": q_env},
        source=DirectorySource(path.parent),
    )
    return expander.render_file(path.name, path.name, context)
