"""Domain layer package."""

from .models import (
    Campaign,
    DemographicBreakdown,
    DevicePerformance,
    MarketingDataset,
    PerformanceCounts,
    RegionalPerformance,
    WeeklyPerformance,
)

__all__ = [
    "Campaign",
    "DemographicBreakdown",
    "DevicePerformance",
    "MarketingDataset",
    "PerformanceCounts",
    "RegionalPerformance",
    "WeeklyPerformance",
]
