"""Domain models for the marketing dataset snapshot."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Callable, Mapping, TypeVar

T = TypeVar("T")


def _to_float(value: Any) -> float:
    if value is None:
        return 0.0
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(number):
        return 0.0
    return number


def _to_int(value: Any) -> int:
    """Counts are whole numbers; fractional values are truncated toward zero."""
    return int(_to_float(value))


def _to_label(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


def _as_mapping(value: Any) -> Mapping[str, Any]:
    return value if isinstance(value, Mapping) else {}


def _nested(row: Mapping[str, Any], key: str, build: Callable[[Mapping[str, Any]], T]) -> tuple[T, ...]:
    items = row.get(key)
    if not isinstance(items, list):
        return ()
    return tuple(build(item) for item in items if isinstance(item, Mapping))


@dataclass(frozen=True)
class PerformanceCounts:
    impressions: int = 0
    clicks: int = 0
    conversions: int = 0

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "PerformanceCounts":
        return cls(
            impressions=_to_int(row.get("impressions")),
            clicks=_to_int(row.get("clicks")),
            conversions=_to_int(row.get("conversions")),
        )


@dataclass(frozen=True)
class DemographicBreakdown:
    gender: str
    age_group: str
    performance: PerformanceCounts

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "DemographicBreakdown":
        return cls(
            gender=_to_label(row.get("gender")),
            age_group=_to_label(row.get("age_group")),
            performance=PerformanceCounts.from_row(_as_mapping(row.get("performance"))),
        )


@dataclass(frozen=True)
class DevicePerformance:
    device: str
    revenue: float = 0.0
    spend: float = 0.0

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "DevicePerformance":
        return cls(
            device=_to_label(row.get("device")),
            revenue=_to_float(row.get("revenue")),
            spend=_to_float(row.get("spend")),
        )


@dataclass(frozen=True)
class RegionalPerformance:
    region: str
    revenue: float = 0.0
    spend: float = 0.0

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "RegionalPerformance":
        return cls(
            region=_to_label(row.get("region")),
            revenue=_to_float(row.get("revenue")),
            spend=_to_float(row.get("spend")),
        )


@dataclass(frozen=True)
class WeeklyPerformance:
    week_start: str
    revenue: float = 0.0
    spend: float = 0.0

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "WeeklyPerformance":
        return cls(
            week_start=_to_label(row.get("week_start")),
            revenue=_to_float(row.get("revenue")),
            spend=_to_float(row.get("spend")),
        )


@dataclass(frozen=True)
class Campaign:
    """One campaign with its aggregate counters and nested per-dimension breakdowns."""

    id: str
    name: str = ""
    clicks: int = 0
    spend: float = 0.0
    conversions: int = 0
    revenue: float = 0.0
    demographic_breakdown: tuple[DemographicBreakdown, ...] = ()
    device_performance: tuple[DevicePerformance, ...] = ()
    regional_performance: tuple[RegionalPerformance, ...] = ()
    weekly_performance: tuple[WeeklyPerformance, ...] = ()

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Campaign":
        return cls(
            id=_to_label(row.get("id")),
            name=_to_label(row.get("name")),
            clicks=_to_int(row.get("clicks")),
            spend=_to_float(row.get("spend")),
            conversions=_to_int(row.get("conversions")),
            revenue=_to_float(row.get("revenue")),
            demographic_breakdown=_nested(row, "demographic_breakdown", DemographicBreakdown.from_row),
            device_performance=_nested(row, "device_performance", DevicePerformance.from_row),
            regional_performance=_nested(row, "regional_performance", RegionalPerformance.from_row),
            weekly_performance=_nested(row, "weekly_performance", WeeklyPerformance.from_row),
        )


@dataclass(frozen=True)
class MarketingDataset:
    campaigns: tuple[Campaign, ...] = ()
