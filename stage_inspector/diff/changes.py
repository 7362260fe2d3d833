# ==============================================
# Changes (Data Classes)
# ==============================================
#
# PURPOSE:
#   Data classes that represent the OUTPUT of a diff. They are
#   created fresh per compare() call and frozen once returned.
#
# ENUMS:
# ------
# - ChangeType(Enum): ADDED, REMOVED, MODIFIED, UNCHANGED
#
# CLASSES:
# --------
# - DiffChange (frozen dataclass)
#     One node of the diff tree.
#     - type: ChangeType
#     - path: str                         → address into the compared pair
#     - old_value / new_value             → ABSENT when that side has no value
#     - children: tuple[DiffChange] | None → only when both sides are
#                                           sequences or both are records
#
# - DiffSummary (frozen dataclass)
#     Counts of each change type over the flattened tree.
#
# - DiffResult (frozen dataclass)
#     changes: pre-order flattened tree (root first) + summary.
#
# ==============================================

from enum import Enum
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from ..documents import ABSENT


class ChangeType(Enum):
    """
    Classification of one compared position.

    - ADDED: only the new document has a value here
    - REMOVED: only the old document has a value here
    - MODIFIED: both have a value and they differ (or a descendant differs)
    - UNCHANGED: both sides structurally equal
    """
    ADDED = "added"
    REMOVED = "removed"
    MODIFIED = "modified"
    UNCHANGED = "unchanged"

    @property
    def icon(self) -> str:
        return _ICONS[self]


_ICONS = {
    ChangeType.ADDED: "+",
    ChangeType.REMOVED: "−",
    ChangeType.MODIFIED: "~",
    ChangeType.UNCHANGED: "=",
}


@dataclass(frozen=True)
class DiffChange:
    """
    One node of a diff tree.

    Container nodes (both sides sequences, or both records) carry
    children and are only ever MODIFIED or UNCHANGED themselves.
    """

    type: ChangeType
    path: str
    old_value: Any = ABSENT
    new_value: Any = ABSENT
    children: Optional[Tuple["DiffChange", ...]] = None

    @property
    def is_container(self) -> bool:
        return self.children is not None

    def to_dict(self, include_children: bool = True) -> Dict[str, Any]:
        """
        Serialize the change, leaving out whichever side is absent.

        Args:
            include_children: Nest the children as well. The flattened
                              change list already holds every node, so
                              DiffResult.to_dict() turns this off.

        Returns:
            A dictionary representation
        """
        data: Dict[str, Any] = {"type": self.type.value, "path": self.path}
        if self.old_value is not ABSENT:
            data["old_value"] = self.old_value
        if self.new_value is not ABSENT:
            data["new_value"] = self.new_value
        if include_children and self.children is not None:
            data["children"] = [child.to_dict() for child in self.children]
        return data


@dataclass(frozen=True)
class DiffSummary:
    added: int = 0
    removed: int = 0
    modified: int = 0
    unchanged: int = 0
    total: int = 0

    def to_dict(self) -> Dict[str, int]:
        return {
            "added": self.added,
            "removed": self.removed,
            "modified": self.modified,
            "unchanged": self.unchanged,
            "total": self.total,
        }


@dataclass(frozen=True)
class DiffResult:
    """
    Outcome of compare(): every node of the diff tree in pre-order
    (the root first) plus per-type counts over that same list.
    """

    changes: Tuple[DiffChange, ...] = field(default_factory=tuple)
    summary: DiffSummary = field(default_factory=DiffSummary)

    @property
    def root(self) -> DiffChange:
        return self.changes[0]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "changes": [
                change.to_dict(include_children=False) for change in self.changes
            ],
            "summary": self.summary.to_dict(),
        }
