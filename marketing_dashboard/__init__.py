"""Marketing dashboard package."""

from .application import DashboardResult, DashboardSnapshot, build_dashboard, load_dashboard, run_reporting_pipeline
from .config import DashboardSettings, load_settings
from .ingestion import DataUnavailableError, dataset_from_json, dataset_from_payload

__all__ = [
    "DashboardResult",
    "DashboardSnapshot",
    "DashboardSettings",
    "DataUnavailableError",
    "build_dashboard",
    "dataset_from_json",
    "dataset_from_payload",
    "load_dashboard",
    "load_settings",
    "run_reporting_pipeline",
]
