"""C++ class helpers, exposed to templates as the ``cpp`` namespace.

Usage inside a template::

    #ifndef {{ cpp.create_header_guard(fileName) }}
    {{ cpp.create_namespace_openings(qArgName) }}
"""

from __future__ import annotations

import re
from pathlib import Path

from .license import generate_license
from .qt import find_module_name, qt_class_names

_SCOPE_SEPARATOR = "::"


class CppFunctions:
    """Namespace object holding the C++ naming and include helpers."""

    def extract_class_name(self, fqcn: str) -> str:
        """``App::Ui::MainWindow`` -> ``MainWindow``."""
        return fqcn.split(_SCOPE_SEPARATOR)[-1]

    def create_namespace_openings(self, fqcn: str) -> str:
        """Return one ``namespace X {`` line per enclosing scope."""
        scopes = fqcn.split(_SCOPE_SEPARATOR)[:-1]
        return "\n".join(f"namespace {scope} {{" for scope in scopes)

    def create_namespace_closings(self, fqcn: str) -> str:
        """Return one ``} // namespace X`` line per enclosing scope."""
        scopes = fqcn.split(_SCOPE_SEPARATOR)[:-1]
        return "\n".join(f"}} // namespace {scope}" for scope in scopes)

    def create_header_guard(self, file_name: str) -> str:
        """``my-class.h`` -> ``MY_CLASS_H``."""
        return re.sub(r"[^A-Z0-9]", "_", file_name.upper())

    def create_includes(
        self, includes: list[str], macros: list[str] | None = None
    ) -> list[str]:
        """Build the sorted, module-qualified list of Qt includes.

        Names that do not look like Qt classes are dropped.  Known classes are
        prefixed with their module (``QtCore/QObject``); unknown Qt-looking
        names are kept as they are.  *macros* is accepted for template
        compatibility and does not affect the result.
        """
        result: list[str] = []
        for name in qt_class_names(includes):
            module = find_module_name(name)
            result.append(f"{module}/{name}" if module else name)
        return result

    def create_license(
        self, license_path: str | Path | None, class_name: str, file_name: str
    ) -> str:
        """Render the user's license template for this class and file."""
        return generate_license(
            license_path, {"ClassName": class_name, "FileName": file_name}
        )
