# ==============================================
# Chart Models (Data Classes)
# ==============================================
#
# PURPOSE:
#   Data classes that represent the OUTPUT of the chart engine:
#   which chart to draw, the render-ready series or table, and the
#   presentation defaults for each chart type.
#
# ENUMS:
# ------
# - ChartType(Enum): BAR, PIE, LINE, TABLE
#
# CLASSES:
# --------
# - ChartDataset (frozen dataclass) → one labelled series of numbers
# - ChartSeries  (frozen dataclass) → labels + datasets (bar/pie/line)
# - TableModel   (frozen dataclass) → columns + rows of display strings
# - ChartConfig  (frozen dataclass) → title, axis labels, legend/grid, palette.
#                                     Also accepted as a partial override
#                                     by transform_to_chart_data().
#
#   to_dict() on each uses the key names chart renderers expect
#   (backgroundColor, showLegend, ...), leaving out unset options.
#
# ==============================================

from enum import Enum
from dataclasses import dataclass
from typing import Any, Dict, Optional, Sequence, Tuple, Union


class ChartType(Enum):
    BAR = "bar"
    PIE = "pie"
    LINE = "line"
    TABLE = "table"


@dataclass(frozen=True)
class ChartDataset:
    """
    One series of values.

    Bar and line datasets carry a single colour; pie datasets carry
    one colour per slice.
    """

    label: str
    data: Tuple[float, ...]
    background_color: Union[str, Tuple[str, ...]]
    border_color: Union[str, Tuple[str, ...]]
    border_width: int = 1

    def to_dict(self) -> Dict[str, Any]:
        def _color(value):
            return value if isinstance(value, str) else list(value)

        return {
            "label": self.label,
            "data": list(self.data),
            "backgroundColor": _color(self.background_color),
            "borderColor": _color(self.border_color),
            "borderWidth": self.border_width,
        }


@dataclass(frozen=True)
class ChartSeries:
    labels: Tuple[str, ...] = ()
    datasets: Tuple[ChartDataset, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "labels": list(self.labels),
            "datasets": [dataset.to_dict() for dataset in self.datasets],
        }


@dataclass(frozen=True)
class TableModel:
    columns: Tuple[str, ...] = ()
    rows: Tuple[Tuple[str, ...], ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "columns": list(self.columns),
            "rows": [list(row) for row in self.rows],
        }


@dataclass(frozen=True)
class ChartConfig:
    """
    Presentation options for a chart.

    get_chart_config() fills every option for a chart type; callers of
    transform_to_chart_data() may pass a partial one where only
    `colors` and `y_axis_label` are read.
    """

    type: Optional[ChartType] = None
    title: Optional[str] = None
    x_axis_label: Optional[str] = None
    y_axis_label: Optional[str] = None
    colors: Optional[Sequence[str]] = None
    show_legend: Optional[bool] = None
    show_grid: Optional[bool] = None

    def to_dict(self) -> Dict[str, Any]:
        data = {
            "type": self.type.value if self.type is not None else None,
            "title": self.title,
            "xAxisLabel": self.x_axis_label,
            "yAxisLabel": self.y_axis_label,
            "colors": list(self.colors) if self.colors is not None else None,
            "showLegend": self.show_legend,
            "showGrid": self.show_grid,
        }
        return {key: value for key, value in data.items() if value is not None}
