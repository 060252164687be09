"""Infrastructure adapter for summary export targets."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict

import polars as pl

from marketing_dashboard.application.dashboard_service import DashboardResult, DashboardSnapshot
from marketing_dashboard.ingestion import write_output_excel
from marketing_dashboard.reporting import write_html_report


def save_summary_json(path: Path, summary: dict[str, Any]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(summary, indent=2, ensure_ascii=False), encoding="utf-8")


def save_summary_html(path: Path, result: DashboardResult) -> None:
    write_html_report(path, result)


def snapshot_sheets(snapshot: DashboardSnapshot) -> Dict[str, pl.DataFrame]:
    sheets: Dict[str, pl.DataFrame] = {}
    for gender, rows in snapshot.demographic.tables.items():
        sheets[f"demographic_{gender.lower()}"] = pl.DataFrame(rows)
    sheets["device"] = pl.DataFrame(snapshot.device.chart_rows)
    sheets["region"] = pl.DataFrame(snapshot.region.totals)
    sheets["weekly"] = pl.DataFrame(
        {
            "week_start": [point["x"] for point in snapshot.weekly.revenue_by_week],
            "revenue": [point["y"] for point in snapshot.weekly.revenue_by_week],
            "spend": [point["y"] for point in snapshot.weekly.spend_by_week],
        },
        schema={"week_start": pl.Utf8, "revenue": pl.Float64, "spend": pl.Float64},
    )
    return sheets


def save_output_workbook(path: Path, snapshot: DashboardSnapshot) -> tuple[bool, str]:
    try:
        write_output_excel(path, snapshot_sheets(snapshot))
    except PermissionError as exc:
        return False, str(exc)
    return True, ""
