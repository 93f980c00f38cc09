"""Qt class name heuristics shared by the C++ and Python helpers."""

from __future__ import annotations

from .general import q_unpack

# Qt class -> Qt module that provides it.
QT_MODULES: dict[str, str] = {
    "QObject": "QtCore",
    "QSharedData": "QtCore",
    "QWidget": "QtWidgets",
    "QMainWindow": "QtWidgets",
    "QQuickItem": "QtQuick",
    "QQmlEngine": "QtQml",
}


def might_be_qt_class(name: str) -> bool:
    """Return ``True`` for names shaped like Qt classes (``Q`` + uppercase)."""
    return len(name) >= 2 and name[0] == "Q" and name[1].isupper()


def find_module_name(name: str) -> str:
    """Return the Qt module for *name*, or ``""`` when it is not known."""
    return QT_MODULES.get(name, "")


def qt_class_names(names: list[str] | tuple[str, ...] | str) -> list[str]:
    """Sort *names*, keep the Qt-looking ones and drop duplicates.

    A string is treated as a rendered list (``"[QObject QWidget]"``).
    """
    if isinstance(names, str):
        names = q_unpack(names)
    kept: list[str] = []
    for name in sorted(str(n) for n in names):
        if might_be_qt_class(name) and name not in kept:
            kept.append(name)
    return kept
