# ==============================================
# Stage Inspector
# ==============================================
#
# Package Structure (2 Engines + shared helpers):
#
# stage_inspector/
# ├── documents/        # Shared: document kinds and path addressing
# ├── diff/             # Engine 1: structural diff between stage outputs
# ├── charts/           # Engine 2: chart type detection and reshaping
# ├── errors.py         # The one error the engines raise
# ├── config.py         # Configuration management
# ├── logging_config.py # Logging setup (CLI only)
# └── cli.py            # Command line entry point
#
# ==============================================

from .errors import DocumentTooDeepError
from .documents import ABSENT, TypeDetector, get_value_at_path, format_path
from .diff import (
    ChangeType,
    DiffChange,
    DiffResult,
    DiffSummary,
    compare,
    deep_equal,
)
from .charts import (
    ChartConfig,
    ChartSeries,
    ChartType,
    TableModel,
    detect_chart_type,
    get_chart_config,
    transform_to_chart_data,
)

__version__ = "0.1.0"

__all__ = [
    "DocumentTooDeepError",
    "ABSENT",
    "TypeDetector",
    "get_value_at_path",
    "format_path",
    "ChangeType",
    "DiffChange",
    "DiffResult",
    "DiffSummary",
    "compare",
    "deep_equal",
    "ChartConfig",
    "ChartSeries",
    "ChartType",
    "TableModel",
    "detect_chart_type",
    "get_chart_config",
    "transform_to_chart_data",
]
