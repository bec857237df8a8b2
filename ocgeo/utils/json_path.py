"""Dotted-path access into parsed JSON trees.

A path is a sequence of segments separated by ".". A segment made only of the
digits 0-9 indexes into an array; any other segment, the empty string included,
is an exact, case-sensitive object key. For example::

    annotations.currency.alternate_symbols.0

Every function here is read-only and reports a miss instead of raising: probing
for fields the typed model does not expose is expected to fail often.
"""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from typing import *

SEPARATOR = "."

INDEX_RE = re.compile(r"[0-9]+")

Segment = str | int


def split_path(path: str) -> list[Segment]:
    """Splits a path into its key (str) and index (int) segments."""
    return [
        int(segment) if INDEX_RE.fullmatch(segment) else segment
        for segment in path.split(SEPARATOR)
    ]


def _is_array(node: Any) -> bool:
    return isinstance(node, Sequence) and not isinstance(node, str | bytes)


def _child(node: Any, segment: Segment) -> tuple[Any, bool]:
    if isinstance(segment, int):
        if _is_array(node) and segment < len(node):
            return node[segment], True
        return None, False

    if isinstance(node, Mapping) and segment != "" and segment in node:
        return node[segment], True

    return None, False


def lookup(tree: Any, path: str) -> tuple[Any, bool]:
    """Walks `tree` along `path`.

    Returns:
        A `(value, ok)` tuple; `ok` is False if any segment could not be resolved.
        When `ok` is True the value may still be None, for an explicit JSON null leaf.
    """
    node = tree

    for segment in split_path(path):
        if node is None:
            return None, False

        node, found = _child(node, segment)
        if not found:
            return None, False

    return node, True


def get(tree: Any, path: str, default: Any = None) -> Any:
    value, ok = lookup(tree, path)
    return value if ok else default


def get_str(tree: Any, path: str) -> str | None:
    value = get(tree, path)
    return value if isinstance(value, str) else None


def get_int(tree: Any, path: str) -> int | None:
    """The integer at `path`; integral floats (e.g. `3.0`) are accepted, booleans are not."""
    value = get(tree, path)

    if isinstance(value, bool):
        return None
    elif isinstance(value, int):
        return value
    elif isinstance(value, float) and value.is_integer():
        return int(value)

    return None


def get_float(tree: Any, path: str) -> float | None:
    value = get(tree, path)

    if isinstance(value, bool) or not isinstance(value, int | float):
        return None

    return float(value)


def get_bool(tree: Any, path: str) -> bool | None:
    """The boolean at `path`. The service sometimes encodes flags as 0/1, so those are accepted too."""
    value = get(tree, path)

    if isinstance(value, bool):
        return value
    elif isinstance(value, int) and value in (0, 1):
        return bool(value)

    return None
