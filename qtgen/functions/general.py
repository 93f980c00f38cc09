"""Generic template helpers available to every manifest and template."""

from __future__ import annotations

import os
from collections.abc import Callable
from pathlib import PurePosixPath
from typing import Any


def q_env(name: str) -> str:
    """Return the value of environment variable *name*, or ``""``."""
    return os.environ.get(name, "")


def q_join(items: Any, sep: str) -> str:
    """Join a list with *sep*.

    A string argument is treated as a rendered list (``"[A B]"``) and unpacked
    first, so fields that went through a text expansion can still be joined.
    """
    if isinstance(items, str):
        items = q_unpack(items)
    return sep.join(str(item) for item in items)


def q_contains(haystack: Any, needle: str) -> str:
    """Return ``"true"`` if *needle* is in *haystack*, otherwise ``""``.

    Only strings (substring test) and lists (membership test) are searched;
    every other type is treated as not containing anything.  The result is
    text, so templates compare it with ``== "true"`` or use it directly in a
    ``when`` guard.
    """
    contained = False
    if isinstance(haystack, str):
        contained = needle in haystack
    elif isinstance(haystack, (list, tuple)):
        contained = needle in haystack
    return "true" if contained else ""


def q_unpack(text: str) -> list[str]:
    """Turn ``"[A B]"`` into ``["A", "B"]``.

    ``"[]"`` and ``""`` yield an empty list and a value without brackets
    yields a single-element list.
    """
    text = str(text).strip()
    if not text:
        return []
    if text.startswith("[") and text.endswith("]"):
        return text[1:-1].split()
    return [text]


def q_ensure_extension(filename: str, ext: str) -> str:
    """Append *ext* to *filename* unless it already has an extension."""
    if PurePosixPath(filename).suffix:
        return filename
    return filename + ext


def general_functions() -> dict[str, Callable[..., Any]]:
    """Return the generic helpers keyed by their template names."""
    return {
        "qEnv": q_env,
        "qJoin": q_join,
        "qContains": q_contains,
        "qUnpack": q_unpack,
        "qEnsureExtension": q_ensure_extension,
    }
