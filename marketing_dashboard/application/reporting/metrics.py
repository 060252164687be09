"""Shared numeric/formatting utilities for the dashboard views."""

from __future__ import annotations

from datetime import date
from typing import Any

import polars as pl


def to_float(value: Any, default: float = 0.0) -> float:
    if value is None:
        return default
    return float(value)


def safe_rate(num: float, den: float) -> float:
    if den <= 0:
        return 0.0
    return num / den


def safe_rate_expr(num: pl.Expr, den: pl.Expr) -> pl.Expr:
    return pl.when(den > 0).then(num / den).otherwise(pl.lit(0.0))


def ctr(clicks: float, impressions: float) -> float:
    """Click-through rate in percent; 0 when there were no impressions."""
    if impressions == 0:
        return 0.0
    return clicks / impressions * 100


def conversion_rate(conversions: float, clicks: float) -> float:
    """Conversion rate in percent; 0 when there were no clicks."""
    if clicks == 0:
        return 0.0
    return conversions / clicks * 100


def parse_week_start(value: str) -> date | None:
    try:
        return date.fromisoformat(str(value)[:10])
    except ValueError:
        return None


def fmt_thousands(value: float, decimals: int = 0) -> str:
    return f"${value / 1000:.{decimals}f}k"


def fmt_currency(value: float, decimals: int = 0) -> str:
    return f"${value:,.{decimals}f}"


def fmt_count(value: float) -> str:
    return f"{value:,.0f}"


def fmt_pct(value: float) -> str:
    return f"{value:.2f}%"


def fmt_short_date(value: str) -> str:
    parsed = parse_week_start(value)
    if parsed is None:
        return str(value)
    return f"{parsed:%b} {parsed.day}"
