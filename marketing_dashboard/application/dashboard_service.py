"""Application service that turns one dataset snapshot into every dashboard view."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional

from marketing_dashboard.application.charting import ChartFrame
from marketing_dashboard.application.views import (
    DemographicView,
    DeviceView,
    RegionView,
    WeeklyView,
    build_demographic_view,
    build_device_view,
    build_region_view,
    build_weekly_view,
)
from marketing_dashboard.config import DashboardSettings
from marketing_dashboard.domain.models import MarketingDataset
from marketing_dashboard.ingestion import DataUnavailableError

logger = logging.getLogger(__name__)

STATUS_READY = "ready"
STATUS_FAILED = "failed"
VIEW_NAMES = ("demographic", "device", "region", "weekly")


@dataclass(frozen=True)
class DashboardSnapshot:
    campaign_count: int
    demographic: DemographicView
    device: DeviceView
    region: RegionView
    weekly: WeeklyView

    def to_dict(self) -> Dict[str, Any]:
        return {
            "campaign_count": self.campaign_count,
            "demographic": self.demographic.to_dict(),
            "device": self.device.to_dict(),
            "region": self.region.to_dict(),
            "weekly": self.weekly.to_dict(),
        }


@dataclass(frozen=True)
class DashboardResult:
    status: str
    snapshot: Optional[DashboardSnapshot] = None
    error: str = ""
    view_messages: Dict[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.status == STATUS_READY

    def to_dict(self) -> Dict[str, Any]:
        return {
            "status": self.status,
            "error": self.error,
            "view_messages": dict(self.view_messages),
            "snapshot": self.snapshot.to_dict() if self.snapshot is not None else None,
        }


def build_dashboard(
    dataset: MarketingDataset,
    settings: DashboardSettings,
    chart_frame: ChartFrame = ChartFrame(),
) -> DashboardSnapshot:
    campaigns = dataset.campaigns
    return DashboardSnapshot(
        campaign_count=len(campaigns),
        demographic=build_demographic_view(campaigns, settings.genders),
        device=build_device_view(campaigns, settings.devices),
        region=build_region_view(campaigns, settings.region_coordinates),
        weekly=build_weekly_view(campaigns, chart_frame),
    )


def failed_result(error: str) -> DashboardResult:
    messages = {name: f"Failed to load {name} data. Please try again later." for name in VIEW_NAMES}
    return DashboardResult(status=STATUS_FAILED, error=error, view_messages=messages)


def load_dashboard(
    settings: DashboardSettings,
    fetch: Callable[[DashboardSettings], MarketingDataset],
) -> DashboardResult:
    """Fetch once and build all views; a fetch failure yields a failed result with no views."""
    try:
        dataset = fetch(settings)
    except DataUnavailableError as exc:
        logger.error("Failed to fetch marketing data from %s: %s", settings.data_source, exc)
        return failed_result(str(exc))

    logger.info("Loaded %d campaigns from %s", len(dataset.campaigns), settings.data_source)
    return DashboardResult(status=STATUS_READY, snapshot=build_dashboard(dataset, settings))
