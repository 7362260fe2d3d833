# ==============================================
# ENGINE 2: CHART CLASSIFICATION & TRANSFORM
# ==============================================
#
# Looks at a result set and decides how to visualize it, then
# reshapes it into that chart's data model.
#
# Two-step process:
#   Step 1 (Classification): first document's shape → ChartType
#   Step 2 (Transform):      result set → ChartSeries / TableModel
#
# Modules:
# --------
# - models.py     → ChartType, ChartDataset, ChartSeries, TableModel, ChartConfig
# - signals.py    → FieldSignals + field selectors over one document
# - classifier.py → Ordered classification rules, detect_chart_type()
# - palette.py    → Fixed colour cycle and caller overrides
# - transform.py  → transform_to_chart_data(), get_chart_config()
#
# ==============================================

from .models import ChartType, ChartDataset, ChartSeries, TableModel, ChartConfig
from .signals import FieldSignals
from .classifier import CLASSIFICATION_RULES, ClassificationRule, classify_signals, detect_chart_type
from .palette import DEFAULT_PALETTE, get_default_color, generate_colors
from .transform import transform_to_chart_data, get_chart_config

__all__ = [
    "ChartType",
    "ChartDataset",
    "ChartSeries",
    "TableModel",
    "ChartConfig",
    "FieldSignals",
    "CLASSIFICATION_RULES",
    "ClassificationRule",
    "classify_signals",
    "detect_chart_type",
    "DEFAULT_PALETTE",
    "get_default_color",
    "generate_colors",
    "transform_to_chart_data",
    "get_chart_config",
]
