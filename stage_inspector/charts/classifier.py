# ==============================================
# Chart Classifier
# ==============================================
#
# PURPOSE:
#   Pick the visualization that fits a result set, using only the
#   shape of its first document (see signals.py).
#
# RULES (first match wins):
# -------------------------
#   RULE 1: time_series         time field + numeric field       → LINE
#   RULE 2: grouped_aggregation aggregation + categorical field  → BAR
#   RULE 3: small_aggregation   aggregation + at most 3 fields   → PIE
#   RULE 4: category_values     categorical + numeric field      → BAR
#   otherwise                                                    → TABLE
#
#   Empty result sets and result sets whose first item is not a
#   record are always TABLE.
#
# ==============================================

import logging
from dataclasses import dataclass
from typing import Any, Callable, Sequence

from .models import ChartType
from .signals import FieldSignals, is_result_set

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ClassificationRule:
    name: str
    matches: Callable[[FieldSignals], bool]
    chart_type: ChartType


CLASSIFICATION_RULES = (
    ClassificationRule(
        "time_series",
        lambda s: s.has_time_field and s.has_numeric_field,
        ChartType.LINE,
    ),
    ClassificationRule(
        "grouped_aggregation",
        lambda s: s.has_aggregation and s.has_categorical_field,
        ChartType.BAR,
    ),
    ClassificationRule(
        "small_aggregation",
        lambda s: s.has_aggregation and s.field_count <= 3,
        ChartType.PIE,
    ),
    ClassificationRule(
        "category_values",
        lambda s: s.has_categorical_field and s.has_numeric_field,
        ChartType.BAR,
    ),
)


def classify_signals(signals: FieldSignals) -> ChartType:
    """Apply CLASSIFICATION_RULES in order; TABLE when none matches."""
    for rule in CLASSIFICATION_RULES:
        if rule.matches(signals):
            logger.debug("Chart rule '%s' matched → %s", rule.name, rule.chart_type.value)
            return rule.chart_type
    return ChartType.TABLE


def detect_chart_type(data: Sequence[Any]) -> ChartType:
    """
    Infer the chart type for a result set.

    Args:
        data: The result set (sequence of documents; one-shot iterators
              such as cursors must be materialized with list() first)

    Returns:
        The ChartType chosen from the first document's shape
    """
    if not is_result_set(data) or not data:
        return ChartType.TABLE
    return classify_signals(FieldSignals.from_document(data[0]))
