"""Function library injected into every template expansion.

The library is assembled once per generator run by
:func:`build_function_library` and is read-only afterwards.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from .cpp import CppFunctions
from .general import (
    general_functions,
    q_contains,
    q_ensure_extension,
    q_env,
    q_join,
    q_unpack,
)
from .license import generate_license
from .python import PythonFunctions


def build_function_library() -> Mapping[str, Any]:
    """Return the generic helpers plus the ``cpp`` and ``py`` namespaces."""
    library: dict[str, Any] = general_functions()
    library["cpp"] = CppFunctions()
    library["py"] = PythonFunctions()
    return MappingProxyType(library)


__all__ = [
    "CppFunctions",
    "PythonFunctions",
    "build_function_library",
    "generate_license",
    "q_contains",
    "q_ensure_extension",
    "q_env",
    "q_join",
    "q_unpack",
]
