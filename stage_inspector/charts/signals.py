# ==============================================
# FieldSignals
# ==============================================
#
# PURPOSE:
#   The shape evidence the chart classifier decides on. Only the
#   FIRST document of a result set is inspected: field names and
#   the kinds of their values, nothing about their meaning.
#
# SIGNALS:
# --------
#   has_aggregation       → a field name starts with "_" or contains
#                           sum / avg / count / min / max
#   has_time_field        → a field name contains date / time / timestamp,
#                           or is createdAt / updatedAt
#   has_categorical_field → a field holds a string, and there is no time field
#   has_numeric_field     → a field holds a number (bool is not a number)
#
# FIELD SELECTORS (used by the transforms):
# -----------------------------------------
#   find_categorical_field(record, exclude_time_names=True)
#   find_time_field(record)
#   find_numeric_fields(record)
#   is_result_set(data)
#
# ==============================================

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, List, Optional, Tuple

from ..documents import TypeDetector

AGGREGATION_MARKERS = ("sum", "avg", "count", "min", "max")
TIME_MARKERS = ("date", "time", "timestamp")
TIME_FIELD_NAMES = {"createdAt", "updatedAt"}

# Bar charts skip string fields whose name looks temporal
NON_CATEGORICAL_MARKERS = ("date", "time")


def is_result_set(data: Any) -> bool:
    """A sequence of documents; strings and bytes are not result sets."""
    return isinstance(data, Sequence) and not isinstance(data, (str, bytes, bytearray))


def is_aggregation_field(name: str) -> bool:
    return name.startswith("_") or any(marker in name for marker in AGGREGATION_MARKERS)


def is_time_field(name: str) -> bool:
    return name in TIME_FIELD_NAMES or any(marker in name for marker in TIME_MARKERS)


@dataclass(frozen=True)
class FieldSignals:
    """
    Boolean shape signals of one document.

    A document that is not a record has no fields, so every signal
    is False and the classifier falls through to "table".
    """

    field_names: Tuple[str, ...] = ()
    has_aggregation: bool = False
    has_time_field: bool = False
    has_categorical_field: bool = False
    has_numeric_field: bool = False

    @property
    def field_count(self) -> int:
        return len(self.field_names)

    @classmethod
    def from_document(cls, document: Any) -> "FieldSignals":
        if not isinstance(document, Mapping):
            return cls()

        names = tuple(str(key) for key in document)
        kinds = [TypeDetector.detect(value) for value in document.values()]
        has_time_field = any(is_time_field(name) for name in names)

        return cls(
            field_names=names,
            has_aggregation=any(is_aggregation_field(name) for name in names),
            has_time_field=has_time_field,
            has_categorical_field=(
                not has_time_field and TypeDetector.STRING in kinds
            ),
            has_numeric_field=TypeDetector.NUMBER in kinds,
        )


def find_categorical_field(record: Mapping, exclude_time_names: bool = True) -> Optional[str]:
    """
    First field holding a string value.

    Args:
        record: The document whose shape is inspected
        exclude_time_names: Skip fields named like "...date..." or "...time..."
                            (bar charts); pie charts take any string field.
    """
    for key, value in record.items():
        if TypeDetector.detect(value) != TypeDetector.STRING:
            continue
        name = str(key)
        if exclude_time_names and any(marker in name for marker in NON_CATEGORICAL_MARKERS):
            continue
        return key
    return None


def find_time_field(record: Mapping) -> Optional[str]:
    for key in record:
        if is_time_field(str(key)):
            return key
    return None


def find_numeric_fields(record: Mapping) -> List[str]:
    return [key for key, value in record.items() if TypeDetector.is_number(value)]
