"""Grouping, summation and ordering over flattened breakdown frames."""

from __future__ import annotations

from typing import Any, Dict, List, Sequence, Tuple

import polars as pl

from marketing_dashboard.application.reporting.metrics import to_float

NO_TOP_REGION = "N/A"
PERFORMANCE_COUNTS: Tuple[str, ...] = ("impressions", "clicks", "conversions")
WEEK_DATE_COLUMN = "__week_date"


def group_totals(
    frame: pl.DataFrame,
    key: str,
    value_columns: Sequence[str],
    seed_keys: Sequence[str] = (),
    admit_unknown: bool = True,
) -> pl.DataFrame:
    """Sum ``value_columns`` per ``key``.

    Seed keys are listed first, in the given order, and stay at zero when the
    data never mentions them. Other keys follow in first-seen order; with
    ``admit_unknown=False`` they are dropped instead.
    """
    data = frame.select([key, *value_columns])
    if not admit_unknown:
        data = data.filter(pl.col(key).is_in(list(seed_keys)))
    if seed_keys:
        seed = pl.DataFrame({key: list(seed_keys)}, schema={key: data.schema[key]}).with_columns(
            [pl.lit(0, dtype=data.schema[column]).alias(column) for column in value_columns]
        )
        data = pl.concat([seed, data], how="vertical")
    return data.group_by(key, maintain_order=True).agg([pl.col(column).sum() for column in value_columns])


def totals_by_key(frame: pl.DataFrame, key: str) -> Dict[str, Dict[str, Any]]:
    return {str(row[key]): row for row in frame.to_dicts()}


def gender_totals(demographics: pl.DataFrame, genders: Sequence[str]) -> pl.DataFrame:
    return group_totals(
        demographics,
        "gender",
        ["clicks", "estimated_spend", "estimated_revenue"],
        seed_keys=genders,
        admit_unknown=False,
    )


def age_group_totals(demographics: pl.DataFrame, genders: Sequence[str]) -> pl.DataFrame:
    """Per age group: counts for each configured gender plus estimated spend/revenue over all slices.

    Columns are named ``<gender>__<count>``. Slices with an unknown gender add
    nothing to the gender columns but do count towards spend and revenue.
    """
    aggs: List[pl.Expr] = []
    for gender in genders:
        is_gender = pl.col("gender") == gender
        for metric in PERFORMANCE_COUNTS:
            aggs.append(pl.col(metric).filter(is_gender).sum().alias(f"{gender}__{metric}"))
    aggs.append(pl.col("estimated_spend").sum().alias("spend"))
    aggs.append(pl.col("estimated_revenue").sum().alias("revenue"))
    return demographics.group_by("age_group", maintain_order=True).agg(aggs)


def device_totals(devices: pl.DataFrame, known_devices: Sequence[str]) -> pl.DataFrame:
    return group_totals(devices, "device", ["revenue", "spend"], seed_keys=known_devices, admit_unknown=False)


def region_totals(regions: pl.DataFrame, known_regions: Sequence[str]) -> pl.DataFrame:
    """Regional revenue/spend; every known region is present, unknown regions are kept too."""
    return group_totals(regions, "region", ["revenue", "spend"], seed_keys=known_regions, admit_unknown=True)


def top_region_by_revenue(regions: pl.DataFrame) -> Tuple[str, float]:
    """Scan records in order and keep the region whose running revenue first exceeded the leader."""
    running: Dict[str, float] = {}
    top_region, top_revenue = NO_TOP_REGION, 0.0
    for row in regions.iter_rows(named=True):
        region = str(row["region"])
        running[region] = running.get(region, 0.0) + to_float(row["revenue"])
        if running[region] > top_revenue:
            top_region, top_revenue = region, running[region]
    return top_region, top_revenue


def weekly_totals(weeks: pl.DataFrame) -> pl.DataFrame:
    return sort_chronologically(group_totals(weeks, "week_start", ["revenue", "spend"]), "week_start")


def sort_chronologically(frame: pl.DataFrame, key: str) -> pl.DataFrame:
    """Order rows by the calendar date in ``key``; unparseable dates go last in first-seen order."""
    return (
        frame.with_columns(
            pl.col(key).str.slice(0, 10).str.to_date("%Y-%m-%d", strict=False).alias(WEEK_DATE_COLUMN)
        )
        .sort(WEEK_DATE_COLUMN, nulls_last=True, maintain_order=True)
        .drop(WEEK_DATE_COLUMN)
    )


def sort_by_label(rows: Sequence[Dict[str, Any]], key: str) -> List[Dict[str, Any]]:
    return sorted(rows, key=lambda row: str(row[key]))
