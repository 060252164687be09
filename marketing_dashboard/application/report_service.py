"""Dashboard reporting pipeline: fetch, build views, export."""

from __future__ import annotations

import logging
from time import perf_counter

from marketing_dashboard.application.dashboard_service import DashboardResult, load_dashboard
from marketing_dashboard.config import DashboardSettings, load_settings
from marketing_dashboard.infrastructure.data_source import fetch_marketing_data
from marketing_dashboard.infrastructure.report_exporter import (
    save_output_workbook,
    save_summary_html,
    save_summary_json,
)

logger = logging.getLogger(__name__)


def run_reporting_pipeline(settings: DashboardSettings | None = None) -> DashboardResult:
    pipeline_start = perf_counter()
    stage_start = pipeline_start
    stage_timings: list[tuple[str, float]] = []

    def _mark(stage_name: str) -> None:
        nonlocal stage_start
        now = perf_counter()
        stage_timings.append((stage_name, now - stage_start))
        stage_start = now

    if settings is None:
        settings = load_settings()
    output_json_path = settings.output_dir / "dashboard.json"
    output_html_path = settings.output_dir / "dashboard.html"
    output_excel_path = settings.output_dir / "dashboard.xlsx"

    result = load_dashboard(settings, fetch=fetch_marketing_data)
    _mark("load_dashboard")

    save_summary_json(output_json_path, result.to_dict())
    save_summary_html(output_html_path, result)
    _mark("save_json_html")

    excel_saved, excel_error_message = False, "dashboard unavailable"
    if result.snapshot is not None:
        excel_saved, excel_error_message = save_output_workbook(output_excel_path, result.snapshot)
    _mark("save_excel")
    total_elapsed = perf_counter() - pipeline_start

    if result.snapshot is not None:
        snapshot = result.snapshot
        print(
            "Dashboard prepared: "
            f"campaigns={snapshot.campaign_count}, "
            f"regions={snapshot.region.total_regions}, "
            f"weeks={snapshot.weekly.total_weeks}"
        )
    else:
        print(f"Dashboard unavailable: {result.error}")
    stage_text = ", ".join([f"{name}={seconds:.3f}s" for name, seconds in stage_timings])
    print(f"Stage Timing: {stage_text}")
    print(f"Total Elapsed: {total_elapsed:.3f}s")
    print(f"Saved JSON: {output_json_path}")
    print(f"Saved HTML: {output_html_path}")
    if excel_saved:
        print(f"Saved Excel: {output_excel_path}")
    else:
        logger.warning("Excel save skipped: %s", excel_error_message)
        print(f"Excel save skipped: {excel_error_message}")
    return result
