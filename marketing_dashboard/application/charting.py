"""Pixel-space scaling for the line chart and the regional bubble map."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Callable, Dict, List, Mapping, Sequence, Tuple

from marketing_dashboard.application.reporting.metrics import fmt_count, fmt_short_date, to_float

NO_DATA_MESSAGE = "No data available."
GRIDLINE_COUNT = 5
MIN_RADIUS = 5.0
MAX_RADIUS = 30.0
FALLBACK_RADIUS = 10.0
COLOR_STOPS: Tuple[str, str, str] = ("#00ff00", "#ffff00", "#ff0000")
VALUE_TYPES: Tuple[str, ...] = ("revenue", "spend")

LabelFormatter = Callable[[float], str]
XLabelFormatter = Callable[[str], str]


@dataclass(frozen=True)
class ChartFrame:
    width: int = 600
    height: int = 300
    padding_top: int = 20
    padding_right: int = 30
    padding_bottom: int = 40
    padding_left: int = 60

    @property
    def content_width(self) -> float:
        return float(self.width - self.padding_left - self.padding_right)

    @property
    def content_height(self) -> float:
        return float(self.height - self.padding_top - self.padding_bottom)


@dataclass(frozen=True)
class GridLine:
    value: float
    y: float
    label: str


@dataclass(frozen=True)
class AxisLabel:
    index: int
    x: float
    label: str


@dataclass(frozen=True)
class PointMarker:
    x: str
    value: float
    cx: float
    cy: float
    tooltip: str


@dataclass(frozen=True)
class LineChartGeometry:
    has_data: bool
    frame: ChartFrame = field(default_factory=ChartFrame)
    message: str = ""
    max_y: float = 0.0
    line_path: str = ""
    area_path: str = ""
    gridlines: Tuple[GridLine, ...] = ()
    x_labels: Tuple[AxisLabel, ...] = ()
    markers: Tuple[PointMarker, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class Bubble:
    region: str
    lat: float
    lon: float
    revenue: float
    spend: float
    value: float
    radius: float
    color: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def _fmt_coord(value: float) -> str:
    text = f"{value:.2f}".rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


def scale_line_chart(
    points: Sequence[Mapping[str, Any]],
    frame: ChartFrame = ChartFrame(),
    format_y_label: LabelFormatter = fmt_count,
    format_x_label: XLabelFormatter = fmt_short_date,
) -> LineChartGeometry:
    """Map ordered ``{x, y}`` points onto the chart's content rectangle.

    Values grow upwards while pixel rows grow downwards, so ``y`` is inverted.
    An empty series yields a no-data geometry without paths.
    """
    if not points:
        return LineChartGeometry(has_data=False, frame=frame, message=NO_DATA_MESSAGE)

    width = frame.content_width
    height = frame.content_height
    count = len(points)
    values = [to_float(point.get("y")) for point in points]
    max_y = max(max(values), 0.0)
    divisor = max_y or 1.0

    def scale_x(index: int) -> float:
        if count == 1:
            return 0.0
        return index / (count - 1) * width

    def scale_y(value: float) -> float:
        return height - (value / divisor) * height

    line_path = " ".join(
        f"{'M' if index == 0 else 'L'} {_fmt_coord(scale_x(index))} {_fmt_coord(scale_y(value))}"
        for index, value in enumerate(values)
    )
    area_path = (
        f"{line_path} L {_fmt_coord(scale_x(count - 1))} {_fmt_coord(height)} "
        f"L {_fmt_coord(scale_x(0))} {_fmt_coord(height)} Z"
    )

    gridlines = tuple(
        GridLine(value=value, y=scale_y(value), label=format_y_label(value))
        for value in reversed([max_y / (GRIDLINE_COUNT - 1) * step for step in range(GRIDLINE_COUNT)])
    )

    label_indices: List[int] = []
    for index in (0, count // 2, count - 1):
        if index not in label_indices:
            label_indices.append(index)
    x_labels = tuple(
        AxisLabel(index=index, x=scale_x(index), label=format_x_label(str(points[index].get("x", ""))))
        for index in label_indices
    )

    markers = tuple(
        PointMarker(
            x=str(point.get("x", "")),
            value=value,
            cx=scale_x(index),
            cy=scale_y(value),
            tooltip=f"Date: {point.get('x', '')}\nValue: {format_y_label(value)}",
        )
        for index, (point, value) in enumerate(zip(points, values))
    )

    return LineChartGeometry(
        has_data=True,
        frame=frame,
        max_y=max_y,
        line_path=line_path,
        area_path=area_path,
        gridlines=gridlines,
        x_labels=x_labels,
        markers=markers,
    )


def _hex_to_rgb(color: str) -> Tuple[int, int, int]:
    text = color.lstrip("#")
    return int(text[0:2], 16), int(text[2:4], 16), int(text[4:6], 16)


def _mix(start: str, end: str, t: float) -> str:
    a = _hex_to_rgb(start)
    b = _hex_to_rgb(end)
    channels = [round(x + (y - x) * t) for x, y in zip(a, b)]
    return "#" + "".join(f"{channel:02x}" for channel in channels)


def bubble_color(value: float, min_value: float, max_value: float) -> str:
    """Green at the minimum, yellow at the midpoint, red at the maximum."""
    low, mid, high = COLOR_STOPS
    if max_value == min_value:
        return mid
    t = min(max((value - min_value) / (max_value - min_value), 0.0), 1.0)
    if t <= 0.5:
        return _mix(low, mid, t * 2)
    return _mix(mid, high, (t - 0.5) * 2)


def bubble_radius(value: float, min_value: float, max_value: float) -> float:
    if max_value == min_value:
        return FALLBACK_RADIUS
    return MIN_RADIUS + (value - min_value) / (max_value - min_value) * (MAX_RADIUS - MIN_RADIUS)


def scale_bubbles(
    rows: Sequence[Mapping[str, Any]],
    coordinates: Mapping[str, Tuple[float, float]],
    value_type: str,
) -> List[Bubble]:
    """Size and colour regional totals; regions without coordinates are left off the map."""
    if value_type not in VALUE_TYPES:
        raise ValueError(f"value_type must be one of {VALUE_TYPES}, got {value_type!r}")

    mapped = [row for row in rows if str(row.get("region")) in coordinates]
    if not mapped:
        return []

    values = [to_float(row.get(value_type)) for row in mapped]
    min_value, max_value = min(values), max(values)

    bubbles: List[Bubble] = []
    for row, value in zip(mapped, values):
        region = str(row.get("region"))
        lat, lon = coordinates[region]
        bubbles.append(
            Bubble(
                region=region,
                lat=lat,
                lon=lon,
                revenue=to_float(row.get("revenue")),
                spend=to_float(row.get("spend")),
                value=value,
                radius=bubble_radius(value, min_value, max_value),
                color=bubble_color(value, min_value, max_value),
            )
        )
    return bubbles
