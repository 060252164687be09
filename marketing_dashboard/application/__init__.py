"""Application layer package."""

from .dashboard_service import DashboardResult, DashboardSnapshot, build_dashboard, load_dashboard
from .report_service import run_reporting_pipeline

__all__ = ["DashboardResult", "DashboardSnapshot", "build_dashboard", "load_dashboard", "run_reporting_pipeline"]
