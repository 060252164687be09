"""View models for the demographic, device, region and weekly dashboard views."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Mapping, Sequence, Tuple

from marketing_dashboard.application.aggregation import (
    PERFORMANCE_COUNTS,
    age_group_totals,
    device_totals,
    gender_totals,
    region_totals,
    sort_by_label,
    top_region_by_revenue,
    totals_by_key,
    weekly_totals,
)
from marketing_dashboard.application.charting import (
    Bubble,
    ChartFrame,
    LineChartGeometry,
    scale_bubbles,
    scale_line_chart,
)
from marketing_dashboard.application.frames import demographic_frame, device_frame, regional_frame, weekly_frame
from marketing_dashboard.application.reporting.metrics import (
    conversion_rate,
    ctr,
    fmt_currency,
    fmt_thousands,
    safe_rate,
    to_float,
)
from marketing_dashboard.domain.models import Campaign


@dataclass(frozen=True)
class GenderSummary:
    gender: str
    clicks: int
    spend: float
    revenue: float


@dataclass(frozen=True)
class DemographicView:
    """Gender cards, age-group bar series and per-gender age-group tables.

    Spend and revenue here are estimates distributed from campaign totals by
    clicks and conversions, not measured per-slice amounts.
    """

    gender_summaries: Tuple[GenderSummary, ...]
    spend_by_age: List[Dict[str, Any]]
    revenue_by_age: List[Dict[str, Any]]
    tables: Dict[str, List[Dict[str, Any]]]

    def summary_for(self, gender: str) -> GenderSummary:
        for summary in self.gender_summaries:
            if summary.gender == gender:
                return summary
        raise KeyError(gender)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class DeviceView:
    chart_rows: List[Dict[str, Any]]
    total_revenue: float

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class RegionView:
    top_region: str
    top_region_revenue: float
    total_regions: int
    totals: List[Dict[str, Any]]
    revenue_bubbles: List[Bubble] = field(default_factory=list)
    spend_bubbles: List[Bubble] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class WeeklyView:
    revenue_by_week: List[Dict[str, Any]]
    spend_by_week: List[Dict[str, Any]]
    revenue_chart: LineChartGeometry
    spend_chart: LineChartGeometry
    total_weeks: int
    average_weekly_revenue: float
    average_weekly_spend: float

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def _performance_row(age_group: str, impressions: int, clicks: int, conversions: int) -> Dict[str, Any]:
    return {
        "age_group": age_group,
        "impressions": impressions,
        "clicks": clicks,
        "conversions": conversions,
        "ctr": ctr(clicks, impressions),
        "conversion_rate": conversion_rate(conversions, clicks),
    }


def build_demographic_view(campaigns: Sequence[Campaign], genders: Sequence[str]) -> DemographicView:
    demographics = demographic_frame(campaigns)

    by_gender = totals_by_key(gender_totals(demographics, genders), "gender")
    summaries = tuple(
        GenderSummary(
            gender=gender,
            clicks=int(by_gender[gender]["clicks"]),
            spend=to_float(by_gender[gender]["estimated_spend"]),
            revenue=to_float(by_gender[gender]["estimated_revenue"]),
        )
        for gender in genders
    )

    age_rows = age_group_totals(demographics, genders).to_dicts()
    tables: Dict[str, List[Dict[str, Any]]] = {}
    for gender in genders:
        rows = [
            _performance_row(
                str(row["age_group"]),
                *(int(row[f"{gender}__{metric}"]) for metric in PERFORMANCE_COUNTS),
            )
            for row in age_rows
        ]
        tables[gender] = sort_by_label(rows, "age_group")

    spend_by_age = sort_by_label(
        [{"label": str(row["age_group"]), "value": to_float(row["spend"])} for row in age_rows], "label"
    )
    revenue_by_age = sort_by_label(
        [{"label": str(row["age_group"]), "value": to_float(row["revenue"])} for row in age_rows], "label"
    )
    return DemographicView(
        gender_summaries=summaries,
        spend_by_age=spend_by_age,
        revenue_by_age=revenue_by_age,
        tables=tables,
    )


def build_device_view(campaigns: Sequence[Campaign], devices: Sequence[str]) -> DeviceView:
    totals = device_totals(device_frame(campaigns), devices)
    chart_rows = [
        {"name": str(row["device"]), "revenue": to_float(row["revenue"]), "spend": to_float(row["spend"])}
        for row in totals.to_dicts()
    ]
    return DeviceView(chart_rows=chart_rows, total_revenue=sum(row["revenue"] for row in chart_rows))


def build_region_view(
    campaigns: Sequence[Campaign],
    coordinates: Mapping[str, Tuple[float, float]],
) -> RegionView:
    regions = regional_frame(campaigns)
    totals = [
        {"region": str(row["region"]), "revenue": to_float(row["revenue"]), "spend": to_float(row["spend"])}
        for row in region_totals(regions, list(coordinates)).to_dicts()
    ]
    top_region, top_revenue = top_region_by_revenue(regions)
    return RegionView(
        top_region=top_region,
        top_region_revenue=top_revenue,
        total_regions=len(totals),
        totals=totals,
        revenue_bubbles=scale_bubbles(totals, coordinates, "revenue"),
        spend_bubbles=scale_bubbles(totals, coordinates, "spend"),
    )


def build_weekly_view(campaigns: Sequence[Campaign], frame: ChartFrame = ChartFrame()) -> WeeklyView:
    weeks = weekly_totals(weekly_frame(campaigns)).to_dicts()
    revenue_by_week = [{"x": str(row["week_start"]), "y": to_float(row["revenue"])} for row in weeks]
    spend_by_week = [{"x": str(row["week_start"]), "y": to_float(row["spend"])} for row in weeks]

    total_weeks = len(weeks)
    total_revenue = sum(point["y"] for point in revenue_by_week)
    total_spend = sum(point["y"] for point in spend_by_week)

    return WeeklyView(
        revenue_by_week=revenue_by_week,
        spend_by_week=spend_by_week,
        revenue_chart=scale_line_chart(revenue_by_week, frame, format_y_label=fmt_thousands),
        spend_chart=scale_line_chart(spend_by_week, frame, format_y_label=fmt_currency),
        total_weeks=total_weeks,
        average_weekly_revenue=safe_rate(total_revenue, total_weeks),
        average_weekly_spend=safe_rate(total_spend, total_weeks),
    )
