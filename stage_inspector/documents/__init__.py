# ==============================================
# SHARED: DOCUMENT HELPERS
# ==============================================
#
# A document is recursively: null, bool, number, string,
# a sequence of documents or a record of field → document.
# Both engines look at documents through these helpers.
#
# Modules:
# --------
# - type_detector.py → Which Document kind a Python value is
# - paths.py         → Build / parse / resolve ".field[index]" paths
#
# ==============================================

from .type_detector import TypeDetector, DEFAULT_MAX_DEPTH
from .paths import (
    ABSENT,
    join_key,
    join_index,
    parse_path,
    get_value_at_path,
    format_path,
    path_depth,
)

__all__ = [
    "TypeDetector",
    "DEFAULT_MAX_DEPTH",
    "ABSENT",
    "join_key",
    "join_index",
    "parse_path",
    "get_value_at_path",
    "format_path",
    "path_depth",
]
