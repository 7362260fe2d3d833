# ==============================================
# Tests for Chart Transforms and Defaults
# ==============================================

from collections import deque
from datetime import datetime, timezone

import pytest
from bson import ObjectId

from stage_inspector.charts import (
    DEFAULT_PALETTE,
    ChartConfig,
    ChartSeries,
    ChartType,
    TableModel,
    generate_colors,
    get_chart_config,
    get_default_color,
    transform_to_chart_data,
)
from stage_inspector.errors import DocumentTooDeepError


# ==============================================
# Bar
# ==============================================

class TestBarChart:

    def test_category_and_value(self):
        data = [{"category": "A", "value": 10}, {"category": "B", "value": 20}]
        result = transform_to_chart_data(data, ChartType.BAR)
        assert isinstance(result, ChartSeries)
        assert list(result.labels) == ["A", "B"]
        assert len(result.datasets) == 1
        assert list(result.datasets[0].data) == [10, 20]
        assert result.datasets[0].label == "value"
        assert result.datasets[0].border_width == 1

    def test_one_dataset_per_numeric_field(self, grouped_results):
        result = transform_to_chart_data(grouped_results, "bar")
        assert list(result.labels) == ["electronics", "books", "toys"]
        assert [d.label for d in result.datasets] == ["count", "avg_price"]
        assert [d.background_color for d in result.datasets] == list(DEFAULT_PALETTE[:2])
        assert list(result.datasets[1].data) == [199.5, 12.0, 25.25]

    def test_missing_and_non_numeric_values_count_as_zero(self):
        data = [
            {"category": "A", "value": 10},
            {"category": "B", "value": "n/a"},
            {"category": None},
        ]
        result = transform_to_chart_data(data, ChartType.BAR)
        assert list(result.labels) == ["A", "B", "Unknown"]
        assert list(result.datasets[0].data) == [10, 0, 0]

    def test_time_named_strings_are_not_labels(self):
        data = [{"date": "2023-01-01", "region": "EU", "sales": 5}]
        assert list(transform_to_chart_data(data, ChartType.BAR).labels) == ["EU"]

    def test_positional_fallback(self):
        data = [{"value1": 10, "value2": 20}, {"value1": 15, "value2": 25}]
        result = transform_to_chart_data(data, ChartType.BAR)
        assert list(result.labels) == ["Item 1", "Item 2"]
        assert len(result.datasets) == 1
        assert list(result.datasets[0].data) == [10, 15]
        assert result.datasets[0].label == "Value"

    def test_fallback_uses_axis_label(self):
        data = [{"n": 1}]
        result = transform_to_chart_data(data, ChartType.BAR, ChartConfig(y_axis_label="Total"))
        assert result.datasets[0].label == "Total"

    def test_fallback_on_non_record_items(self):
        result = transform_to_chart_data(["a", 1, None], ChartType.BAR)
        assert list(result.labels) == ["Item 1", "Item 2", "Item 3"]
        assert list(result.datasets[0].data) == [0, 0, 0]

    def test_custom_colors_then_palette(self, grouped_results):
        config = ChartConfig(colors=["#000000"])
        result = transform_to_chart_data(grouped_results, ChartType.BAR, config)
        assert result.datasets[0].background_color == "#000000"
        assert result.datasets[1].background_color == DEFAULT_PALETTE[1]

    def test_deque_result_set(self):
        data = deque([{"category": "A", "value": 10}])
        result = transform_to_chart_data(data, ChartType.BAR)
        assert list(result.labels) == ["A"]
        assert list(result.datasets[0].data) == [10]

    def test_empty(self):
        result = transform_to_chart_data([], ChartType.BAR)
        assert result == ChartSeries()
        assert result.to_dict() == {"labels": [], "datasets": []}


# ==============================================
# Pie
# ==============================================

class TestPieChart:

    def test_category_and_value(self):
        data = [{"category": "A", "value": 30}, {"category": "B", "value": 70}]
        result = transform_to_chart_data(data, ChartType.PIE)
        assert list(result.labels) == ["A", "B"]
        assert list(result.datasets[0].data) == [30, 70]
        assert result.datasets[0].background_color == DEFAULT_PALETTE[:2]

    def test_only_first_numeric_field(self, grouped_results):
        result = transform_to_chart_data(grouped_results, ChartType.PIE)
        assert len(result.datasets) == 1
        assert result.datasets[0].label == "count"
        assert len(result.datasets[0].background_color) == 3

    def test_positional_fallback(self):
        data = [{"_id": None, "count": 42}, {"_id": None, "count": 8}]
        result = transform_to_chart_data(data, ChartType.PIE)
        assert list(result.labels) == ["Item 1", "Item 2"]
        assert list(result.datasets[0].data) == [42, 8]
        assert result.datasets[0].label == "Value"
        assert result.datasets[0].border_color == DEFAULT_PALETTE[:2]

    def test_short_custom_palette_is_filled_in(self, grouped_results):
        result = transform_to_chart_data(grouped_results, "pie", ChartConfig(colors=["#000000"]))
        assert result.datasets[0].background_color == ("#000000", DEFAULT_PALETTE[1], DEFAULT_PALETTE[2])


# ==============================================
# Line
# ==============================================

class TestLineChart:

    def test_sorted_by_time(self, time_series_results):
        result = transform_to_chart_data(time_series_results, ChartType.LINE)
        assert list(result.labels) == ["2023-01-01", "2023-01-02", "2023-01-03"]
        assert list(result.datasets[0].data) == [100, 150, 120]
        assert result.datasets[0].border_width == 2

    def test_input_is_not_reordered(self, time_series_results):
        first = time_series_results[0]
        transform_to_chart_data(time_series_results, ChartType.LINE)
        assert time_series_results[0] is first

    def test_datetime_values(self):
        data = [
            {"createdAt": datetime(2023, 1, 2), "count": 2},
            {"createdAt": datetime(2023, 1, 1, tzinfo=timezone.utc), "count": 1},
        ]
        result = transform_to_chart_data(data, ChartType.LINE)
        assert list(result.labels) == ["2023-01-01", "2023-01-02"]
        assert list(result.datasets[0].data) == [1, 2]

    def test_unorderable_times_keep_input_order(self):
        data = [{"time": 3, "v": 1}, {"time": 1, "v": 2}]
        result = transform_to_chart_data(data, ChartType.LINE)
        assert list(result.labels) == ["3", "1"]
        # "time" holds numbers too, so it is charted as well
        assert [d.label for d in result.datasets] == ["time", "v"]
        assert list(result.datasets[1].data) == [1, 2]

    def test_positional_fallback(self):
        result = transform_to_chart_data([{"a": 1}, {"a": 2}], ChartType.LINE)
        assert list(result.labels) == ["Point 1", "Point 2"]
        assert list(result.datasets[0].data) == [1, 2]
        assert result.datasets[0].border_width == 2


# ==============================================
# Table
# ==============================================

class TestTable:

    def test_columns_and_stringified_rows(self):
        data = [{"name": "John", "age": 30, "city": "NY"}]
        result = transform_to_chart_data(data, ChartType.TABLE)
        assert isinstance(result, TableModel)
        assert list(result.columns) == ["name", "age", "city"]
        assert list(result.rows[0]) == ["John", "30", "NY"]

    def test_cell_text(self):
        data = [{
            "a": None,
            "b": True,
            "c": {"x": [1, 2]},
            "d": 2.5,
            "e": datetime(2023, 1, 1, 12, 0),
            "f": ObjectId("65a1f0c2e4b0a1b2c3d4e5f6"),
        }]
        row = transform_to_chart_data(data, ChartType.TABLE).rows[0]
        assert list(row) == [
            "", "true", '{"x":[1,2]}', "2.5", "2023-01-01T12:00:00", "65a1f0c2e4b0a1b2c3d4e5f6",
        ]

    def test_extra_fields_are_dropped_and_missing_are_blank(self):
        data = [{"a": 1, "b": 2}, {"a": 3, "c": 4}]
        result = transform_to_chart_data(data, ChartType.TABLE)
        assert list(result.columns) == ["a", "b"]
        assert list(result.rows[1]) == ["3", ""]

    def test_non_record_first_item(self):
        result = transform_to_chart_data([1, {"a": 1}], ChartType.TABLE)
        assert result.columns == ()
        assert result.rows == ((), ())

    def test_unknown_chart_type_is_table(self):
        result = transform_to_chart_data([{"a": 1}], "radar")
        assert isinstance(result, TableModel)

    def test_deep_cells_are_rejected(self):
        data = [{"a": {"b": {"c": {"d": 1}}}}]
        with pytest.raises(DocumentTooDeepError):
            transform_to_chart_data(data, ChartType.TABLE, max_depth=2)

    def test_to_dict(self):
        result = transform_to_chart_data([{"a": 1}], ChartType.TABLE)
        assert result.to_dict() == {"columns": ["a"], "rows": [["1"]]}


# ==============================================
# Palette and chart defaults
# ==============================================

class TestPalette:

    def test_default_colors_cycle(self):
        assert get_default_color(0) == DEFAULT_PALETTE[0]
        assert get_default_color(len(DEFAULT_PALETTE)) == DEFAULT_PALETTE[0]

    def test_generate_colors(self):
        assert generate_colors(2) == DEFAULT_PALETTE[:2]
        assert generate_colors(2, ["#111111", "#222222", "#333333"]) == ("#111111", "#222222")


class TestChartConfig:

    def test_bar(self):
        config = get_chart_config([], ChartType.BAR, "Test Chart")
        assert config.type is ChartType.BAR
        assert config.title == "Test Chart"
        assert (config.x_axis_label, config.y_axis_label) == ("Category", "Value")
        assert config.show_legend and config.show_grid

    def test_line(self):
        config = get_chart_config([], "line", "Test Line")
        assert (config.x_axis_label, config.y_axis_label) == ("Time", "Value")
        assert config.show_legend and config.show_grid

    def test_pie(self):
        config = get_chart_config([], ChartType.PIE)
        assert config.show_legend
        assert not config.show_grid
        assert config.x_axis_label is None

    def test_table(self):
        config = get_chart_config([], ChartType.TABLE, "Test Table")
        assert not config.show_legend
        assert not config.show_grid

    def test_default_title(self):
        assert get_chart_config([], ChartType.BAR).title == "Bar Chart"
        assert get_chart_config([], ChartType.PIE).title == "Pie Chart"

    def test_default_colors(self):
        assert list(get_chart_config([], ChartType.BAR).colors) == list(DEFAULT_PALETTE)

    def test_to_dict_uses_renderer_keys(self):
        data = get_chart_config([], ChartType.PIE, "Share").to_dict()
        assert data["type"] == "pie"
        assert data["showGrid"] is False
        assert "xAxisLabel" not in data

    def test_series_to_dict(self):
        series = transform_to_chart_data([{"k": "A", "v": 1}], ChartType.PIE)
        assert series.to_dict() == {
            "labels": ["A"],
            "datasets": [{
                "label": "v",
                "data": [1],
                "backgroundColor": [DEFAULT_PALETTE[0]],
                "borderColor": [DEFAULT_PALETTE[0]],
                "borderWidth": 1,
            }],
        }
