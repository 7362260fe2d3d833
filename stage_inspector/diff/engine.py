# ==============================================
# Diff Engine
# ==============================================
#
# PURPOSE:
#   Compare two documents (typically the outputs of two adjacent
#   pipeline stages) and classify every position as added, removed,
#   modified or unchanged.
#
# ALGORITHM (by structural case on the pair of values):
# -----------------------------------------------------
#   1. both null/absent                → UNCHANGED
#   2. exactly one null/absent         → ADDED / REMOVED, no children
#   3. both primitives                 → deep_equal ? UNCHANGED : MODIFIED
#   4. container vs primitive, or
#      sequence vs record              → MODIFIED as a whole, no children
#   5. both sequences                  → index by index up to the longer
#                                        length, children at "path[i]"
#   6. both records                    → union of field names (old order,
#                                        then new-only), children at "path.f"
#   A container node is MODIFIED iff any child is not UNCHANGED.
#
#   Sequences are compared by position, not by content: inserting one
#   element in the middle shows up as a run of MODIFIED items plus one
#   ADDED item at the end.
#
# FUNCTIONS:
# ----------
#   - compare(old, new, path="", max_depth=256) -> DiffResult
#   - deep_equal(a, b, max_depth=256) -> bool
#   - iter_changes(change) -> pre-order iterator over a diff tree
#   - has_nested_changes / filter_changes_by_type / get_changes_at_level
#
# ==============================================

import logging
from collections import Counter
from collections.abc import Mapping
from typing import Any, Iterable, Iterator, List, Union

from ..documents import (
    ABSENT,
    DEFAULT_MAX_DEPTH,
    TypeDetector,
    join_index,
    join_key,
    path_depth,
)
from ..errors import DocumentTooDeepError
from .changes import ChangeType, DiffChange, DiffResult, DiffSummary

logger = logging.getLogger(__name__)


def deep_equal(a: Any, b: Any, max_depth: int = DEFAULT_MAX_DEPTH) -> bool:
    """
    Structural equality between two documents.

    Sequences are equal when they have the same length and equal items
    in the same order; records when they have the same field names and
    equal values per field (field order does not matter). bool is a
    different kind from number, so True != 1 here.

    Raises:
        DocumentTooDeepError: if either side nests deeper than max_depth
    """
    return _deep_equal(a, b, 0, max_depth)


def _deep_equal(a: Any, b: Any, depth: int, max_depth: int) -> bool:
    if a is b:
        return True

    kind = TypeDetector.detect(a)
    if kind != TypeDetector.detect(b):
        return False

    if kind not in TypeDetector.CONTAINER_KINDS:
        return a == b

    if depth >= max_depth:
        raise DocumentTooDeepError(max_depth)

    if kind == TypeDetector.SEQUENCE:
        if len(a) != len(b):
            return False
        return all(
            _deep_equal(item_a, item_b, depth + 1, max_depth)
            for item_a, item_b in zip(a, b)
        )

    if len(a) != len(b):
        return False
    return all(
        key in b and _deep_equal(a[key], b[key], depth + 1, max_depth)
        for key in a
    )


def compare(
    old: Any,
    new: Any,
    path: str = "",
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> DiffResult:
    """
    Build the diff tree between two documents and flatten it.

    Args:
        old: The previous document (e.g. an earlier stage's result set)
        new: The document to compare against it
        path: Path prefix for the root node (empty string = root)
        max_depth: Maximum container nesting walked before giving up

    Returns:
        DiffResult whose changes list the whole tree in pre-order

    Raises:
        DocumentTooDeepError: if either document nests deeper than max_depth
    """
    root = _compare_values(old, new, path, 0, max_depth)
    changes = tuple(iter_changes(root))

    counts = Counter(change.type for change in changes)
    summary = DiffSummary(
        added=counts[ChangeType.ADDED],
        removed=counts[ChangeType.REMOVED],
        modified=counts[ChangeType.MODIFIED],
        unchanged=counts[ChangeType.UNCHANGED],
        total=len(changes),
    )
    logger.debug(
        "Compared documents: %d added, %d removed, %d modified, %d unchanged",
        summary.added, summary.removed, summary.modified, summary.unchanged,
    )
    return DiffResult(changes=changes, summary=summary)


def _is_missing(value: Any) -> bool:
    return value is None or value is ABSENT


def _compare_values(old: Any, new: Any, path: str, depth: int, max_depth: int) -> DiffChange:
    # CASE 1 / 2: null or absent on either side
    if _is_missing(old) and _is_missing(new):
        return DiffChange(ChangeType.UNCHANGED, path, old_value=None, new_value=None)
    if _is_missing(old):
        return DiffChange(ChangeType.ADDED, path, new_value=new)
    if _is_missing(new):
        return DiffChange(ChangeType.REMOVED, path, old_value=old)

    old_kind = TypeDetector.detect(old)
    new_kind = TypeDetector.detect(new)
    containers = TypeDetector.CONTAINER_KINDS

    # CASE 3: two primitives
    if old_kind not in containers and new_kind not in containers:
        change_type = (
            ChangeType.UNCHANGED if _deep_equal(old, new, depth, max_depth)
            else ChangeType.MODIFIED
        )
        return DiffChange(change_type, path, old_value=old, new_value=new)

    # CASE 4: shape change is reported as a whole
    if old_kind != new_kind:
        return DiffChange(ChangeType.MODIFIED, path, old_value=old, new_value=new)

    if depth >= max_depth:
        logger.warning("Rejecting document nested deeper than %d at '%s'", max_depth, path)
        raise DocumentTooDeepError(max_depth, path)

    # CASE 5 / 6: walk the containers
    if old_kind == TypeDetector.SEQUENCE:
        children = _compare_sequences(old, new, path, depth, max_depth)
    else:
        children = _compare_records(old, new, path, depth, max_depth)

    has_changes = any(child.type is not ChangeType.UNCHANGED for child in children)
    return DiffChange(
        ChangeType.MODIFIED if has_changes else ChangeType.UNCHANGED,
        path,
        old_value=old,
        new_value=new,
        children=tuple(children),
    )


def _compare_sequences(old, new, path: str, depth: int, max_depth: int) -> List[DiffChange]:
    children = []
    for index in range(max(len(old), len(new))):
        old_item = old[index] if index < len(old) else ABSENT
        new_item = new[index] if index < len(new) else ABSENT
        children.append(
            _compare_values(old_item, new_item, join_index(path, index), depth + 1, max_depth)
        )
    return children


def _compare_records(old: Mapping, new: Mapping, path: str, depth: int, max_depth: int) -> List[DiffChange]:
    keys = list(old)
    keys.extend(key for key in new if key not in old)
    children = []
    for key in keys:
        children.append(_compare_values(
            old.get(key, ABSENT),
            new.get(key, ABSENT),
            join_key(path, key),
            depth + 1,
            max_depth,
        ))
    return children


def iter_changes(change: DiffChange) -> Iterator[DiffChange]:
    """Yield a change and all of its descendants, node before children."""
    yield change
    for child in change.children or ():
        yield from iter_changes(child)


def has_nested_changes(change: DiffChange) -> bool:
    """True if any direct child of the change is not UNCHANGED."""
    return any(child.type is not ChangeType.UNCHANGED for child in change.children or ())


def filter_changes_by_type(
    changes: Iterable[DiffChange],
    change_type: Union[ChangeType, str],
) -> List[DiffChange]:
    change_type = ChangeType(change_type)
    return [change for change in changes if change.type is change_type]


def get_changes_at_level(changes: Iterable[DiffChange], level: int) -> List[DiffChange]:
    """Changes whose path has exactly `level` field separators."""
    return [change for change in changes if path_depth(change.path) == level]
