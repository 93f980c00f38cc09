"""Target categories and types, and where their manifests live."""

from __future__ import annotations

from enum import Enum


class TargetCategory(str, Enum):
    """What kind of artefact the user asked for."""

    PROJECT = "project"
    CLASS = "class"
    FILE = "file"


class TargetType(str, Enum):
    """Concrete artefact a manifest generates."""

    CPP_CLASS = "cpp-class"
    PYTHON_CLASS = "python-class"


# category -> target type -> accepted (lower-case) type names
_TYPE_NAMES: dict[TargetCategory, dict[TargetType, tuple[str, ...]]] = {
    TargetCategory.CLASS: {
        TargetType.CPP_CLASS: ("cpp",),
        TargetType.PYTHON_CLASS: ("python",),
    },
}

_MANIFEST_PATHS: dict[TargetType, str] = {
    TargetType.CPP_CLASS: "templates/classes/cpp/config.yml",
    TargetType.PYTHON_CLASS: "templates/classes/python/config.yml",
}


def parse_category(value: str | TargetCategory) -> TargetCategory | None:
    """Return the category named by *value*, or ``None``."""
    if isinstance(value, TargetCategory):
        return value
    try:
        return TargetCategory(str(value).lower())
    except ValueError:
        return None


def find_target_type(
    category: str | TargetCategory, type_name: str
) -> TargetType | None:
    """Map a category and a case-insensitive type name to a target type."""
    parsed = parse_category(category)
    if parsed is None:
        return None
    key = type_name.lower()
    for target, names in _TYPE_NAMES.get(parsed, {}).items():
        if key in names:
            return target
    return None


def resolve_manifest_path(target: TargetType) -> str | None:
    """Return the manifest path for *target*, relative to the template root."""
    return _MANIFEST_PATHS.get(target)


def supported_type_names(category: str | TargetCategory) -> list[str]:
    """List the type names accepted for *category* (used in CLI help)."""
    parsed = parse_category(category)
    if parsed is None:
        return []
    return sorted(
        name for names in _TYPE_NAMES.get(parsed, {}).values() for name in names
    )
