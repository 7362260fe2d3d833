# ==============================================
# Chart Transforms
# ==============================================
#
# PURPOSE:
#   Reshape a result set into the data model of a chart type, and
#   provide the presentation defaults for that type.
#
# FUNCTIONS:
# ----------
#   - transform_to_chart_data(data, chart_type, config=None) -> ChartSeries | TableModel
#       bar   → labels from the first categorical field, one dataset per
#               numeric field (colour per dataset)
#       line  → labels from the time field, documents ordered by it,
#               one dataset per numeric field
#       pie   → labels from the first string field, one dataset from the
#               first numeric field (colour per slice)
#       table → columns from the first document, every cell a string
#
#       When bar/line/pie cannot find their label/value fields the
#       labels become positional ("Item 1", "Point 1", ...) and the
#       values are the first number of each document (0 if none).
#       Missing or non-numeric values count as 0.
#
#   - get_chart_config(data, chart_type, title=None) -> ChartConfig
#
# ==============================================

import logging
from collections.abc import Mapping
from datetime import date, datetime, timezone
from functools import cmp_to_key
from typing import Any, List, Optional, Sequence, Union

from bson import json_util

from ..documents import DEFAULT_MAX_DEPTH, TypeDetector
from .models import ChartConfig, ChartDataset, ChartSeries, ChartType, TableModel
from .palette import DEFAULT_PALETTE, generate_colors, pick_color
from .signals import find_categorical_field, find_numeric_fields, find_time_field, is_result_set

logger = logging.getLogger(__name__)

UNKNOWN_LABEL = "Unknown"
DEFAULT_VALUE_LABEL = "Value"


def transform_to_chart_data(
    data: Sequence[Any],
    chart_type: Union[ChartType, str],
    config: Optional[ChartConfig] = None,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> Union[ChartSeries, TableModel]:
    """
    Reshape a result set for the given chart type.

    Args:
        data: The result set (sequence of documents; one-shot iterators
              such as cursors must be materialized with list() first)
        chart_type: ChartType or its name; unknown names give a table
        config: Optional overrides; `colors` and `y_axis_label` are used
        max_depth: Nesting limit for values serialized into table cells

    Returns:
        ChartSeries for bar/pie/line, TableModel for table

    Raises:
        DocumentTooDeepError: if a table cell nests deeper than max_depth
    """
    chart_type = _coerce_chart_type(chart_type)
    documents = list(data) if is_result_set(data) else []
    config = config or ChartConfig()

    if chart_type is ChartType.BAR:
        return _to_bar_chart(documents, config)
    if chart_type is ChartType.PIE:
        return _to_pie_chart(documents, config)
    if chart_type is ChartType.LINE:
        return _to_line_chart(documents, config)
    return _to_table(documents, max_depth)


def get_chart_config(
    data: Sequence[Any],
    chart_type: Union[ChartType, str],
    title: Optional[str] = None,
) -> ChartConfig:
    """
    Presentation defaults for a chart type.

    Every type shows a legend and a grid and uses the fixed palette;
    bar and line add axis labels, pie drops the grid, table drops both.
    The data is accepted for call-site symmetry with the transforms
    but the defaults do not depend on it.
    """
    chart_type = _coerce_chart_type(chart_type)
    options = {
        "type": chart_type,
        "title": title or f"{chart_type.value.capitalize()} Chart",
        "show_legend": True,
        "show_grid": True,
        "colors": DEFAULT_PALETTE,
    }

    if chart_type is ChartType.BAR:
        options.update(x_axis_label="Category", y_axis_label="Value")
    elif chart_type is ChartType.LINE:
        options.update(x_axis_label="Time", y_axis_label="Value")
    elif chart_type is ChartType.PIE:
        options.update(show_grid=False)
    else:
        options.update(show_legend=False, show_grid=False)

    return ChartConfig(**options)


# ======================================
# Per-type transforms
# ======================================

def _to_bar_chart(documents: List[Any], config: ChartConfig) -> ChartSeries:
    if not documents:
        return ChartSeries()

    records = [_as_record(document) for document in documents]
    label_field = find_categorical_field(records[0])
    numeric_fields = find_numeric_fields(records[0])

    if label_field is None or not numeric_fields:
        logger.debug("Bar chart: no category/value fields, using positional labels")
        return _positional_series(records, "Item", config, border_width=1)

    return ChartSeries(
        labels=tuple(_label_text(record.get(label_field)) for record in records),
        datasets=tuple(
            _single_color_dataset(records, field, index, config, border_width=1)
            for index, field in enumerate(numeric_fields)
        ),
    )


def _to_line_chart(documents: List[Any], config: ChartConfig) -> ChartSeries:
    if not documents:
        return ChartSeries()

    records = [_as_record(document) for document in documents]
    time_field = find_time_field(records[0])
    numeric_fields = find_numeric_fields(records[0])

    if time_field is None or not numeric_fields:
        logger.debug("Line chart: no time/value fields, using positional labels")
        return _positional_series(records, "Point", config, border_width=2)

    ordered = sorted(
        records,
        key=cmp_to_key(lambda a, b: _compare_time(a.get(time_field), b.get(time_field))),
    )

    return ChartSeries(
        labels=tuple(_time_label(record.get(time_field)) for record in ordered),
        datasets=tuple(
            _single_color_dataset(ordered, field, index, config, border_width=2)
            for index, field in enumerate(numeric_fields)
        ),
    )


def _to_pie_chart(documents: List[Any], config: ChartConfig) -> ChartSeries:
    if not documents:
        return ChartSeries()

    records = [_as_record(document) for document in documents]
    label_field = find_categorical_field(records[0], exclude_time_names=False)
    numeric_fields = find_numeric_fields(records[0])
    colors = generate_colors(len(records), config.colors)

    if label_field is None or not numeric_fields:
        logger.debug("Pie chart: no category/value fields, using positional labels")
        labels = tuple(f"Item {index + 1}" for index in range(len(records)))
        label = DEFAULT_VALUE_LABEL
        values = tuple(_first_number(record) for record in records)
    else:
        value_field = numeric_fields[0]
        labels = tuple(_label_text(record.get(label_field)) for record in records)
        label = str(value_field)
        values = tuple(_number_or_zero(record.get(value_field)) for record in records)

    return ChartSeries(
        labels=labels,
        datasets=(
            ChartDataset(
                label=label,
                data=values,
                background_color=colors,
                border_color=colors,
                border_width=1,
            ),
        ),
    )


def _to_table(documents: List[Any], max_depth: int) -> TableModel:
    if not documents:
        return TableModel()

    first = documents[0]
    columns = tuple(first) if isinstance(first, Mapping) else ()

    rows = []
    for document in documents:
        record = _as_record(document)
        rows.append(tuple(
            _display_text(record.get(column), max_depth) for column in columns
        ))

    return TableModel(columns=tuple(str(column) for column in columns), rows=tuple(rows))


# ======================================
# Helpers
# ======================================

def _coerce_chart_type(chart_type: Union[ChartType, str]) -> ChartType:
    try:
        return ChartType(chart_type)
    except ValueError:
        logger.debug("Unknown chart type %r, falling back to table", chart_type)
        return ChartType.TABLE


def _as_record(document: Any) -> Mapping:
    return document if isinstance(document, Mapping) else {}


def _positional_series(
    records: List[Mapping],
    prefix: str,
    config: ChartConfig,
    border_width: int,
) -> ChartSeries:
    color = pick_color(0, config.colors)
    return ChartSeries(
        labels=tuple(f"{prefix} {index + 1}" for index in range(len(records))),
        datasets=(
            ChartDataset(
                label=config.y_axis_label or DEFAULT_VALUE_LABEL,
                data=tuple(_first_number(record) for record in records),
                background_color=color,
                border_color=color,
                border_width=border_width,
            ),
        ),
    )


def _single_color_dataset(
    records: List[Mapping],
    field: str,
    index: int,
    config: ChartConfig,
    border_width: int,
) -> ChartDataset:
    color = pick_color(index, config.colors)
    return ChartDataset(
        label=str(field),
        data=tuple(_number_or_zero(record.get(field)) for record in records),
        background_color=color,
        border_color=color,
        border_width=border_width,
    )


def _number_or_zero(value: Any):
    return value if TypeDetector.is_number(value) else 0


def _first_number(record: Mapping):
    for value in record.values():
        if TypeDetector.is_number(value):
            return value
    return 0


def _label_text(value: Any) -> str:
    if value is None or value == "":
        return UNKNOWN_LABEL
    return _display_text(value)


def _time_label(value: Any) -> str:
    if isinstance(value, datetime):
        return value.date().isoformat()
    return _display_text(value)


def _timestamp(value: date) -> float:
    if not isinstance(value, datetime):
        value = datetime(value.year, value.month, value.day)
    if value.tzinfo is None:
        # BSON dates are UTC; naive values are read the same way
        value = value.replace(tzinfo=timezone.utc)
    return value.timestamp()


def _compare_time(a: Any, b: Any) -> int:
    """
    Ordering for line chart points.

    Two dates compare by instant, two strings lexicographically; any
    other pairing is a tie, so those points keep their input order.
    """
    kind_a = TypeDetector.detect(a)
    kind_b = TypeDetector.detect(b)
    if kind_a != kind_b:
        return 0
    if kind_a == TypeDetector.DATE:
        a, b = _timestamp(a), _timestamp(b)
    elif kind_a != TypeDetector.STRING:
        return 0
    return (a > b) - (a < b)


def _display_text(value: Any, max_depth: int = DEFAULT_MAX_DEPTH) -> str:
    """
    Text shown for a value in a table cell or label.

    null → "", bool → "true"/"false", dates → ISO 8601, sequences and
    records → compact Extended JSON, anything else → str().
    """
    kind = TypeDetector.detect(value)
    if kind == TypeDetector.NULL:
        return ""
    if kind == TypeDetector.BOOL:
        return "true" if value else "false"
    if kind == TypeDetector.STRING:
        return value
    if kind == TypeDetector.DATE:
        return value.isoformat()
    if kind in TypeDetector.CONTAINER_KINDS:
        TypeDetector.check_depth(value, max_depth)
        return json_util.dumps(value, separators=(",", ":"))
    return str(value)
