"""Flatten nested campaign breakdowns into polars frames, one row per slice in scan order."""

from __future__ import annotations

from typing import Any, Dict, List, Sequence

import polars as pl

from marketing_dashboard.application.reporting.metrics import safe_rate_expr
from marketing_dashboard.domain.models import Campaign

DEMOGRAPHIC_SCHEMA: Dict[str, Any] = {
    "campaign_id": pl.Utf8,
    "gender": pl.Utf8,
    "age_group": pl.Utf8,
    "impressions": pl.Int64,
    "clicks": pl.Int64,
    "conversions": pl.Int64,
    "campaign_clicks": pl.Int64,
    "campaign_spend": pl.Float64,
    "campaign_conversions": pl.Int64,
    "campaign_revenue": pl.Float64,
}
DEVICE_SCHEMA: Dict[str, Any] = {"device": pl.Utf8, "revenue": pl.Float64, "spend": pl.Float64}
REGION_SCHEMA: Dict[str, Any] = {"region": pl.Utf8, "revenue": pl.Float64, "spend": pl.Float64}
WEEKLY_SCHEMA: Dict[str, Any] = {"week_start": pl.Utf8, "revenue": pl.Float64, "spend": pl.Float64}


def demographic_frame(campaigns: Sequence[Campaign]) -> pl.DataFrame:
    """One row per demographic slice, with estimated spend and revenue.

    Slices report engagement counts only, so money is attributed with the
    campaign's spend-per-click and revenue-per-conversion. These columns are
    modelled estimates, not measured values. Counts are already whole numbers
    here, so the multipliers use truncated campaign clicks and conversions.
    """
    rows: List[Dict[str, Any]] = []
    for campaign in campaigns:
        for breakdown in campaign.demographic_breakdown:
            rows.append(
                {
                    "campaign_id": campaign.id,
                    "gender": breakdown.gender,
                    "age_group": breakdown.age_group,
                    "impressions": breakdown.performance.impressions,
                    "clicks": breakdown.performance.clicks,
                    "conversions": breakdown.performance.conversions,
                    "campaign_clicks": campaign.clicks,
                    "campaign_spend": campaign.spend,
                    "campaign_conversions": campaign.conversions,
                    "campaign_revenue": campaign.revenue,
                }
            )

    frame = pl.DataFrame(rows, schema=DEMOGRAPHIC_SCHEMA)
    return frame.with_columns(
        safe_rate_expr(pl.col("campaign_spend"), pl.col("campaign_clicks").cast(pl.Float64)).alias("spend_per_click"),
        safe_rate_expr(pl.col("campaign_revenue"), pl.col("campaign_conversions").cast(pl.Float64)).alias(
            "revenue_per_conversion"
        ),
    ).with_columns(
        (pl.col("clicks") * pl.col("spend_per_click")).alias("estimated_spend"),
        (pl.col("conversions") * pl.col("revenue_per_conversion")).alias("estimated_revenue"),
    )


def device_frame(campaigns: Sequence[Campaign]) -> pl.DataFrame:
    rows = [
        {"device": item.device, "revenue": item.revenue, "spend": item.spend}
        for campaign in campaigns
        for item in campaign.device_performance
    ]
    return pl.DataFrame(rows, schema=DEVICE_SCHEMA)


def regional_frame(campaigns: Sequence[Campaign]) -> pl.DataFrame:
    rows = [
        {"region": item.region, "revenue": item.revenue, "spend": item.spend}
        for campaign in campaigns
        for item in campaign.regional_performance
    ]
    return pl.DataFrame(rows, schema=REGION_SCHEMA)


def weekly_frame(campaigns: Sequence[Campaign]) -> pl.DataFrame:
    rows = [
        {"week_start": item.week_start, "revenue": item.revenue, "spend": item.spend}
        for campaign in campaigns
        for item in campaign.weekly_performance
    ]
    return pl.DataFrame(rows, schema=WEEKLY_SCHEMA)
