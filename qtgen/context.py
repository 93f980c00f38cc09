"""Field values and the immutable context they live in.

A :class:`FieldContext` is the value container passed to every template
expansion.  It never changes after construction: merging produces a new
snapshot, so a per-file layer can shadow global fields without the global
snapshot ever seeing the change.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any, Union

from jinja2 import Undefined

# Scalars, booleans, lists of strings and nested mappings coming from YAML or
# from the generation request.
FieldValue = Union[str, bool, int, float, list, dict, None]


# ---------------------------------------------------------------------------
# Text conversion
# ---------------------------------------------------------------------------


def render_value(value: Any) -> Any:
    """Convert a field value to the text written into template output.

    * ``True``/``False`` -> ``"true"``/``"false"``
    * ``None`` -> ``""``
    * lists -> ``"[a b c]"`` (the inverse of ``qUnpack``)
    * mappings -> ``"map[key:value ...]"``

    Anything else, including Jinja2 ``Undefined``, is returned unchanged so
    Jinja2 can apply its own string conversion.
    """
    if isinstance(value, Undefined):
        return value
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return "[" + " ".join(str(render_value(item)) for item in value) + "]"
    if isinstance(value, Mapping):
        pairs = (f"{key}:{render_value(item)}" for key, item in value.items())
        return "map[" + " ".join(pairs) + "]"
    return value


# ---------------------------------------------------------------------------
# FieldContext
# ---------------------------------------------------------------------------


class FieldContext(Mapping[str, Any]):
    """Insertion-ordered, read-only mapping of field names to values."""

    __slots__ = ("_data",)

    def __init__(self, data: Mapping[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = dict(data or {})

    def __getitem__(self, key: str) -> Any:
        return self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"FieldContext({self._data!r})"

    def merged(self, other: Mapping[str, Any]) -> FieldContext:
        """Return a new snapshot with *other* layered on top (later wins)."""
        return FieldContext({**self._data, **other})

    def with_field(self, name: str, value: Any) -> FieldContext:
        """Return a new snapshot with a single field added or replaced."""
        return FieldContext({**self._data, name: value})

    def as_dict(self) -> dict[str, Any]:
        """Return a shallow, mutable copy suitable for ``Template.render``."""
        return dict(self._data)
