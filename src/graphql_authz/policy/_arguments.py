"""Dotted-path lookup into resolver arguments."""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from typing import Any, Final

__all__ = ["MISSING", "resolve_argument_path"]


class _Missing:
    __slots__ = ()

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Final = _Missing()

_INDEX_RE = re.compile(r"\[(\d+)\]")


def resolve_argument_path(arguments: Any, path: str) -> Any:
    """Return the value at a dotted *path* inside *arguments*, or ``MISSING``.

    Segments address mapping keys, attributes of input objects, or list
    indexes (``items.0.id`` and ``items[0].id`` are equivalent). Any
    segment that cannot be followed yields ``MISSING`` rather than an
    error.

    Example::

        args = {"input": {"id": "42", "tags": ["a", "b"]}}
        resolve_argument_path(args, "input.id")       # "42"
        resolve_argument_path(args, "input.tags[1]")  # "b"
        resolve_argument_path(args, "input.owner")    # MISSING
    """
    if not isinstance(path, str) or not path:
        return MISSING
    current = arguments
    for segment in _INDEX_RE.sub(r".\1", path).split("."):
        if not segment:
            return MISSING
        if isinstance(current, Mapping):
            if segment not in current:
                return MISSING
            current = current[segment]
        elif isinstance(current, Sequence) and not isinstance(current, (str, bytes)):
            if not segment.isdigit():
                return MISSING
            index = int(segment)
            if index >= len(current):
                return MISSING
            current = current[index]
        elif current is None or isinstance(current, (str, bytes, int, float, bool)):
            return MISSING
        else:
            current = getattr(current, segment, MISSING)
            if current is MISSING:
                return MISSING
    return current
