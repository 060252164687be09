"""HTML report generator for the dashboard snapshot."""

from __future__ import annotations

from datetime import datetime
from html import escape
from pathlib import Path
from typing import Any, Dict, List, Sequence

from marketing_dashboard.application.charting import Bubble, LineChartGeometry
from marketing_dashboard.application.dashboard_service import DashboardResult, DashboardSnapshot
from marketing_dashboard.application.reporting.metrics import fmt_count, fmt_currency, fmt_pct, fmt_thousands
from marketing_dashboard.application.reporting.rendering import (
    Card,
    demographic_cards,
    device_cards,
    region_cards,
    weekly_cards,
)

MAP_WIDTH = 800
MAP_HEIGHT = 400
MAP_MARGIN = 40
TABLE_COLUMNS = (
    ("age_group", "Age Group"),
    ("impressions", "Impressions"),
    ("clicks", "Clicks"),
    ("conversions", "Conversions"),
    ("ctr", "CTR"),
    ("conversion_rate", "CVR"),
)


def _render_cards(cards: Sequence[Card]) -> str:
    items = "".join(
        f"<div class=\"card\"><div class=\"card-title\">{escape(title)}</div>"
        f"<div class=\"card-value\">{escape(value)}</div></div>"
        for title, value in cards
    )
    return f"<div class=\"cards\">{items}</div>"


def _render_bar_chart(title: str, series: Sequence[Dict[str, Any]]) -> str:
    peak = max([float(item["value"]) for item in series] + [0.0]) or 1.0
    bars = "".join(
        "<div class=\"bar-row\">"
        f"<span class=\"bar-label\">{escape(str(item['label']))}</span>"
        f"<span class=\"bar\" style=\"width: {float(item['value']) / peak * 100:.1f}%\"></span>"
        f"<span class=\"bar-value\">{escape(fmt_thousands(float(item['value']), decimals=1))}</span>"
        "</div>"
        for item in series
    )
    if not bars:
        bars = "<p class=\"muted\">No data available.</p>"
    return f"<div class=\"panel\"><h3>{escape(title)}</h3>{bars}</div>"


def _render_table(title: str, rows: Sequence[Dict[str, Any]]) -> str:
    head = "".join(f"<th>{escape(header)}</th>" for _, header in TABLE_COLUMNS)
    body_rows: List[str] = []
    for row in rows:
        cells = [
            escape(str(row["age_group"])),
            fmt_count(row["impressions"]),
            fmt_count(row["clicks"]),
            fmt_count(row["conversions"]),
            fmt_pct(row["ctr"]),
            fmt_pct(row["conversion_rate"]),
        ]
        body_rows.append("<tr>" + "".join(f"<td>{cell}</td>" for cell in cells) + "</tr>")
    return (
        f"<div class=\"panel\"><h3>{escape(title)}</h3>"
        f"<table><thead><tr>{head}</tr></thead><tbody>{''.join(body_rows)}</tbody></table></div>"
    )


def _render_line_chart(title: str, geometry: LineChartGeometry, stroke: str, fill: str) -> str:
    frame = geometry.frame
    if not geometry.has_data:
        return (
            f"<div class=\"panel\"><h3>{escape(title)}</h3>"
            f"<p class=\"muted\">{escape(geometry.message)}</p></div>"
        )

    width = frame.content_width
    height = frame.content_height
    grid = "".join(
        f"<line x1=\"0\" y1=\"{line.y:.2f}\" x2=\"{width:.2f}\" y2=\"{line.y:.2f}\" "
        "stroke=\"#e5e7eb\" stroke-dasharray=\"2,2\" />"
        f"<text x=\"-10\" y=\"{line.y + 4:.2f}\" text-anchor=\"end\" font-size=\"12\" fill=\"#6b7280\">"
        f"{escape(line.label)}</text>"
        for line in geometry.gridlines
    )
    x_labels = "".join(
        f"<text x=\"{label.x:.2f}\" y=\"{height + 20:.2f}\" text-anchor=\"middle\" font-size=\"12\" "
        f"fill=\"#6b7280\">{escape(label.label)}</text>"
        for label in geometry.x_labels
    )
    markers = "".join(
        f"<g><title>{escape(marker.tooltip)}</title>"
        f"<circle cx=\"{marker.cx:.2f}\" cy=\"{marker.cy:.2f}\" r=\"3\" fill=\"{stroke}\" /></g>"
        for marker in geometry.markers
    )
    return (
        f"<div class=\"panel\"><h3>{escape(title)}</h3>"
        f"<svg viewBox=\"0 0 {frame.width} {frame.height}\" width=\"100%\" height=\"{frame.height}\">"
        f"<g transform=\"translate({frame.padding_left}, {frame.padding_top})\">"
        f"{grid}{x_labels}"
        f"<path d=\"{geometry.area_path}\" fill=\"{fill}\" />"
        f"<path d=\"{geometry.line_path}\" fill=\"none\" stroke=\"{stroke}\" stroke-width=\"2\" />"
        f"{markers}</g></svg></div>"
    )


def _render_bubble_map(title: str, bubbles: Sequence[Bubble], metric: str) -> str:
    if not bubbles:
        return f"<div class=\"panel\"><h3>{escape(title)}</h3><p class=\"muted\">No data available.</p></div>"

    lats = [bubble.lat for bubble in bubbles]
    lons = [bubble.lon for bubble in bubbles]
    lat_span = (max(lats) - min(lats)) or 1.0
    lon_span = (max(lons) - min(lons)) or 1.0
    inner_w = MAP_WIDTH - 2 * MAP_MARGIN
    inner_h = MAP_HEIGHT - 2 * MAP_MARGIN

    circles: List[str] = []
    for bubble in bubbles:
        cx = MAP_MARGIN + (bubble.lon - min(lons)) / lon_span * inner_w
        cy = MAP_MARGIN + (max(lats) - bubble.lat) / lat_span * inner_h
        circles.append(
            f"<g><title>{escape(bubble.region)}\n{metric}: {escape(fmt_currency(bubble.value))}</title>"
            f"<circle cx=\"{cx:.2f}\" cy=\"{cy:.2f}\" r=\"{bubble.radius:.2f}\" fill=\"{bubble.color}\" "
            "stroke=\"#fff\" stroke-width=\"1\" opacity=\"0.8\" />"
            f"<text x=\"{cx:.2f}\" y=\"{cy + bubble.radius + 12:.2f}\" text-anchor=\"middle\" font-size=\"11\">"
            f"{escape(bubble.region)}</text></g>"
        )
    return (
        f"<div class=\"panel\"><h3>{escape(title)}</h3>"
        f"<svg viewBox=\"0 0 {MAP_WIDTH} {MAP_HEIGHT}\" width=\"100%\" height=\"{MAP_HEIGHT}\">"
        f"{''.join(circles)}</svg>"
        f"<p class=\"muted\">Bubble size proportional to {metric.lower()}. Color: Green (low) to Red (high).</p>"
        "</div>"
    )


def _render_snapshot(snapshot: DashboardSnapshot) -> str:
    demographic = snapshot.demographic
    sections: List[str] = ["<section class=\"view\"><h2>Demographic Performance</h2>"]
    sections.append(_render_cards(demographic_cards(demographic)))
    sections.append("<div class=\"grid\">")
    sections.append(_render_bar_chart("Total Spend by Age Group", demographic.spend_by_age))
    sections.append(_render_bar_chart("Total Revenue by Age Group", demographic.revenue_by_age))
    for gender, rows in demographic.tables.items():
        sections.append(_render_table(f"Campaign Performance by {gender} Age Groups", rows))
    sections.append("</div></section>")

    device = snapshot.device
    sections.append("<section class=\"view\"><h2>Device Performance</h2>")
    sections.append(_render_cards(device_cards(device)))
    sections.append("<div class=\"grid\">")
    sections.append(
        _render_bar_chart("Revenue by Device", [{"label": row["name"], "value": row["revenue"]} for row in device.chart_rows])
    )
    sections.append(
        _render_bar_chart("Spend by Device", [{"label": row["name"], "value": row["spend"]} for row in device.chart_rows])
    )
    sections.append("</div></section>")

    region = snapshot.region
    sections.append("<section class=\"view\"><h2>Regional Performance</h2>")
    sections.append(_render_cards(region_cards(region)))
    sections.append("<div class=\"grid\">")
    sections.append(_render_bubble_map("Revenue by Region", region.revenue_bubbles, "Revenue"))
    sections.append(_render_bubble_map("Spend by Region", region.spend_bubbles, "Spend"))
    sections.append("</div></section>")

    weekly = snapshot.weekly
    sections.append("<section class=\"view\"><h2>Weekly Performance</h2>")
    sections.append(_render_cards(weekly_cards(weekly)))
    sections.append("<div class=\"grid\">")
    sections.append(_render_line_chart("Revenue by Week", weekly.revenue_chart, "#10b981", "rgba(16, 185, 129, 0.1)"))
    sections.append(_render_line_chart("Spend by Week", weekly.spend_chart, "#ef4444", "rgba(239, 68, 68, 0.1)"))
    sections.append("</div></section>")
    return "".join(sections)


def write_html_report(output_path: Path, result: DashboardResult) -> None:
    generated_at = datetime.now().strftime("%Y-%m-%d %H:%M")
    if result.snapshot is not None:
        body = _render_snapshot(result.snapshot)
    else:
        body = "".join(
            f"<section class=\"view\"><p class=\"error\">{escape(message)}</p></section>"
            for message in result.view_messages.values()
        )

    html = f"""<!doctype html>
<html lang="en">
<head>
  <meta charset="utf-8" />
  <meta name="viewport" content="width=device-width, initial-scale=1" />
  <title>Marketing Performance Dashboard</title>
  <style>
    :root {{
      --bg: #f3f6fb;
      --panel: #ffffff;
      --line: #d5dce8;
      --text: #0f172a;
      --sub: #475569;
      --brand: #1d4ed8;
    }}
    * {{ box-sizing: border-box; }}
    body {{
      margin: 0;
      background: var(--bg);
      color: var(--text);
      font-family: "Segoe UI", sans-serif;
    }}
    .wrap {{ max-width: 1400px; margin: 0 auto; padding: 20px; }}
    h1 {{ margin: 0 0 8px; color: var(--brand); font-size: 28px; }}
    .meta, .muted {{ color: var(--sub); font-size: 13px; }}
    .view {{ margin-bottom: 24px; }}
    .cards {{ display: grid; grid-template-columns: repeat(3, 1fr); gap: 10px; margin-bottom: 10px; }}
    .card, .panel {{
      background: var(--panel);
      border: 1px solid var(--line);
      border-radius: 12px;
      padding: 12px 16px;
    }}
    .card-title {{ color: var(--sub); font-size: 13px; }}
    .card-value {{ font-size: 22px; font-weight: 700; }}
    .grid {{ display: grid; grid-template-columns: repeat(2, minmax(320px, 1fr)); gap: 10px; }}
    .bar-row {{ display: flex; align-items: center; gap: 8px; margin: 4px 0; }}
    .bar-label {{ width: 80px; font-size: 12px; }}
    .bar {{ display: inline-block; height: 14px; background: #3b82f6; border-radius: 3px; }}
    .bar-value {{ font-size: 12px; color: var(--sub); }}
    table {{ width: 100%; border-collapse: collapse; font-size: 12px; }}
    th, td {{ border: 1px solid var(--line); padding: 6px 8px; text-align: right; }}
    th:first-child, td:first-child {{ text-align: left; }}
    th {{ background: #eef4ff; }}
    .error {{ color: #b91c1c; }}
  </style>
</head>
<body>
  <div class="wrap">
    <section class="panel">
      <h1>Marketing Performance Dashboard</h1>
      <div class="meta">Status: {escape(result.status)} | Generated: {escape(generated_at)}</div>
    </section>
    {body}
  </div>
</body>
</html>
"""
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(html, encoding="utf-8")
