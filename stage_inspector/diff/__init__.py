# ==============================================
# ENGINE 1: DIFF
# ==============================================
#
# Compares two documents (usually consecutive stage outputs) and
# produces a classified change tree plus a flat summary.
#
# Modules:
# --------
# - changes.py → ChangeType, DiffChange, DiffSummary, DiffResult
# - engine.py  → compare(), deep_equal() and inspection helpers
#
# ==============================================

from .changes import ChangeType, DiffChange, DiffSummary, DiffResult
from .engine import (
    compare,
    deep_equal,
    iter_changes,
    has_nested_changes,
    filter_changes_by_type,
    get_changes_at_level,
)

__all__ = [
    "ChangeType",
    "DiffChange",
    "DiffSummary",
    "DiffResult",
    "compare",
    "deep_equal",
    "iter_changes",
    "has_nested_changes",
    "filter_changes_by_type",
    "get_changes_at_level",
]
