# ==============================================
# Path Addressing
# ==============================================
#
# PURPOSE:
#   Build and resolve the textual addresses the diff engine attaches
#   to every change, so presentation code can get back to the value.
#
# GRAMMAR:
# --------
#   root           → ""            (empty string)
#   record field   → "parent.field" ("field" when parent is the root)
#   sequence item  → "parent[index]"
#
#   Examples:
#     join_key("", "user")          → "user"
#     join_key("user", "tags")      → "user.tags"
#     join_index("user.tags", 2)    → "user.tags[2]"
#     parse_path("a.b[0].c")        → ["a", "b", 0, "c"]
#
#   Paths are addresses, not references: a field name containing "."
#   or "[" produces a path that does not resolve back to it.
#
# ==============================================

from collections.abc import Mapping
from typing import Any, List, Optional, Union


class _Absent:
    """Marker for "no value here", distinct from the Document null (None)."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "ABSENT"

    def __bool__(self) -> bool:
        return False


ABSENT = _Absent()

Segment = Union[str, int]


def join_key(prefix: str, key: Any) -> str:
    """
    Combine a parent path with a record field name.

    Examples:
        join_key("", "username") → "username"
        join_key("metadata", "version") → "metadata.version"
    """
    if not prefix:
        return str(key)
    return f"{prefix}.{key}"


def join_index(prefix: str, index: int) -> str:
    return f"{prefix}[{index}]"


def parse_path(path: str) -> Optional[List[Segment]]:
    """
    Split a path into field names (str) and sequence indices (int).

    Dots only separate segments outside brackets; each dot-separated
    part is an optional field name followed by any number of
    bracketed indices.

    Returns:
        The segment list, or None if the path is malformed
        (unbalanced brackets, non-integer index).
    """
    if not path:
        return []

    parts = []
    current = []
    depth = 0
    for char in path:
        if char == "[":
            depth += 1
        elif char == "]":
            depth -= 1
            if depth < 0:
                return None
        if char == "." and depth == 0:
            parts.append("".join(current))
            current = []
        else:
            current.append(char)
    if depth != 0:
        return None
    parts.append("".join(current))

    segments: List[Segment] = []
    for part in parts:
        name, bracket, rest = part.partition("[")
        if name:
            segments.append(name)
        elif not bracket:
            # empty part, e.g. "a..b" or a trailing dot
            return None
        while bracket:
            index_text, closing, rest = rest.partition("]")
            if not closing or not (index_text.isascii() and index_text.isdigit()):
                return None
            segments.append(int(index_text))
            if not rest:
                break
            if not rest.startswith("["):
                return None
            rest = rest[1:]
    return segments


def get_value_at_path(document: Any, path: str, default: Any = None) -> Any:
    """
    Resolve a path produced by the diff engine back to a value.

    Args:
        document: The document to look into
        path: Address in the ".field" / "[index]" grammar
        default: Returned when any segment is missing, an index is out
                 of range, or the path is malformed. Pass ABSENT to tell
                 a missing value apart from a stored null.

    Returns:
        The value at the address, or default
    """
    segments = parse_path(path)
    if segments is None:
        return default

    current = document
    for segment in segments:
        if isinstance(segment, int):
            if not isinstance(current, (list, tuple)) or segment >= len(current):
                return default
            current = current[segment]
        else:
            if not isinstance(current, Mapping) or segment not in current:
                return default
            current = current[segment]
    return current


def format_path(path: str) -> str:
    """Display form of a path: "a.b[0]" → "a → b[0]", root → "Document"."""
    if not path:
        return "Document"
    return path.replace(".", " → ")


def path_depth(path: str) -> int:
    """Number of field separators in a path ("a.b[0].c" → 2, "[1]" → 0)."""
    return path.count(".")
