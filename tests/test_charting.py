"""Tests for line-chart pixel scaling and bubble sizing/colour."""

import pytest

from marketing_dashboard.application.charting import (
    FALLBACK_RADIUS,
    NO_DATA_MESSAGE,
    ChartFrame,
    bubble_color,
    bubble_radius,
    scale_bubbles,
    scale_line_chart,
)

WEEKS = [
    {"x": "2024-01-01", "y": 100.0},
    {"x": "2024-01-08", "y": 200.0},
    {"x": "2024-01-15", "y": 400.0},
]


class TestChartFrame:
    def test_default_content_rectangle(self):
        frame = ChartFrame()
        assert frame.content_width == 510
        assert frame.content_height == 240


class TestScaleLineChart:
    def test_empty_series_is_no_data(self):
        geometry = scale_line_chart([])
        assert geometry.has_data is False
        assert geometry.message == NO_DATA_MESSAGE
        assert geometry.line_path == ""
        assert geometry.area_path == ""
        assert geometry.gridlines == ()

    def test_paths(self):
        geometry = scale_line_chart(WEEKS)
        assert geometry.has_data is True
        assert geometry.max_y == 400.0
        assert geometry.line_path == "M 0 180 L 255 120 L 510 0"
        assert geometry.area_path == "M 0 180 L 255 120 L 510 0 L 510 240 L 0 240 Z"

    def test_five_gridlines_top_down(self):
        geometry = scale_line_chart(WEEKS, format_y_label=lambda value: f"${value:.0f}")
        assert [line.value for line in geometry.gridlines] == [400.0, 300.0, 200.0, 100.0, 0.0]
        assert [line.y for line in geometry.gridlines] == [0.0, 60.0, 120.0, 180.0, 240.0]
        assert [line.label for line in geometry.gridlines] == ["$400", "$300", "$200", "$100", "$0"]

    def test_three_x_labels(self):
        geometry = scale_line_chart(WEEKS)
        assert [(label.index, label.x, label.label) for label in geometry.x_labels] == [
            (0, 0.0, "Jan 1"),
            (1, 255.0, "Jan 8"),
            (2, 510.0, "Jan 15"),
        ]

    def test_middle_label_uses_floor_division(self):
        points = [{"x": f"2024-01-0{day}", "y": 1.0} for day in range(1, 5)]
        geometry = scale_line_chart(points)
        assert [label.index for label in geometry.x_labels] == [0, 2, 3]

    def test_single_point_at_origin(self):
        geometry = scale_line_chart([{"x": "2024-01-01", "y": 50.0}])
        assert geometry.line_path == "M 0 0"
        assert geometry.area_path == "M 0 0 L 0 240 L 0 240 Z"
        assert [label.index for label in geometry.x_labels] == [0]
        assert geometry.markers[0].cx == 0.0

    def test_two_points_two_labels(self):
        geometry = scale_line_chart(WEEKS[:2])
        assert [label.index for label in geometry.x_labels] == [0, 1]

    def test_all_zero_values_sit_on_baseline(self):
        geometry = scale_line_chart([{"x": "a", "y": 0.0}, {"x": "b", "y": 0.0}])
        assert geometry.max_y == 0.0
        assert geometry.line_path == "M 0 240 L 510 240"
        assert len(geometry.gridlines) == 5
        assert all(line.y == 240.0 for line in geometry.gridlines)

    def test_marker_tooltip(self):
        geometry = scale_line_chart(WEEKS[:1], format_y_label=lambda value: f"{value:.0f}")
        assert geometry.markers[0].tooltip == "Date: 2024-01-01\nValue: 100"

    def test_custom_frame(self):
        frame = ChartFrame(width=200, height=100, padding_top=0, padding_right=0, padding_bottom=0, padding_left=0)
        geometry = scale_line_chart([{"x": "a", "y": 1.0}, {"x": "b", "y": 2.0}], frame)
        assert geometry.line_path == "M 0 50 L 200 0"


class TestBubbles:
    COORDS = {"Dubai": (25.2, 55.3), "Doha": (25.3, 51.5), "Muscat": (23.6, 58.4)}

    def test_degenerate_set_uses_fallback_radius(self):
        rows = [{"region": name, "revenue": 100.0, "spend": 10.0} for name in self.COORDS]
        bubbles = scale_bubbles(rows, self.COORDS, "revenue")
        assert [bubble.radius for bubble in bubbles] == [FALLBACK_RADIUS] * 3
        assert all(bubble.color == "#ffff00" for bubble in bubbles)

    def test_linear_radius_and_color(self):
        rows = [
            {"region": "Dubai", "revenue": 0.0, "spend": 0.0},
            {"region": "Doha", "revenue": 50.0, "spend": 0.0},
            {"region": "Muscat", "revenue": 100.0, "spend": 0.0},
        ]
        bubbles = scale_bubbles(rows, self.COORDS, "revenue")
        assert [bubble.radius for bubble in bubbles] == pytest.approx([5.0, 17.5, 30.0])
        assert [bubble.color for bubble in bubbles] == ["#00ff00", "#ffff00", "#ff0000"]

    def test_unknown_region_excluded(self):
        rows = [
            {"region": "Dubai", "revenue": 10.0, "spend": 1.0},
            {"region": "Atlantis", "revenue": 1000.0, "spend": 1.0},
            {"region": "Doha", "revenue": 20.0, "spend": 1.0},
        ]
        bubbles = scale_bubbles(rows, self.COORDS, "revenue")
        assert [bubble.region for bubble in bubbles] == ["Dubai", "Doha"]
        assert bubbles[1].radius == 30.0

    def test_spend_value_type(self):
        rows = [
            {"region": "Dubai", "revenue": 10.0, "spend": 5.0},
            {"region": "Doha", "revenue": 20.0, "spend": 1.0},
        ]
        bubbles = scale_bubbles(rows, self.COORDS, "spend")
        assert [bubble.value for bubble in bubbles] == [5.0, 1.0]
        assert bubbles[0].lat == 25.2
        assert bubbles[0].lon == 55.3

    def test_empty_set(self):
        assert scale_bubbles([], self.COORDS, "revenue") == []

    def test_invalid_value_type(self):
        with pytest.raises(ValueError):
            scale_bubbles([], self.COORDS, "clicks")

    def test_color_quarter_points(self):
        assert bubble_color(25.0, 0.0, 100.0) == "#80ff00"
        assert bubble_color(75.0, 0.0, 100.0) == "#ff8000"

    def test_radius_helper_degenerate(self):
        assert bubble_radius(3.0, 3.0, 3.0) == FALLBACK_RADIUS
