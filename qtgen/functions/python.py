"""Qt for Python helpers, exposed to templates as the ``py`` namespace."""

from __future__ import annotations

from pathlib import Path

from .license import generate_license
from .qt import find_module_name, qt_class_names


class PythonFunctions:
    """Namespace object holding the Python class helpers."""

    def extract_class_name(self, qualified: str) -> str:
        """``app.ui.MainWindow`` -> ``MainWindow``."""
        return qualified.split(".")[-1]

    def create_imports(self, module: str, names: list[str]) -> list[str]:
        """Build ``from ... import ...`` lines for the given Qt classes.

        Classes are grouped by Qt module, e.g. with ``module="PySide6"``::

            ["from PySide6.QtCore import QObject, QSharedData",
             "from PySide6.QtWidgets import QWidget"]

        Qt-looking names with no known module are imported from *module*
        itself.
        """
        grouped: dict[str, list[str]] = {}
        for name in qt_class_names(names):
            qt_module = find_module_name(name)
            package = f"{module}.{qt_module}" if qt_module else module
            grouped.setdefault(package, []).append(name)

        return [
            f"from {package} import {', '.join(grouped[package])}"
            for package in sorted(grouped)
        ]

    def create_license(
        self, license_path: str | Path | None, class_name: str, file_name: str
    ) -> str:
        """Render the user's license template for this class and file."""
        return generate_license(
            license_path, {"ClassName": class_name, "FileName": file_name}
        )
