"""Card text rendering for the dashboard views."""

from __future__ import annotations

from typing import List, Tuple

from marketing_dashboard.application.reporting.metrics import fmt_count, fmt_currency
from marketing_dashboard.application.views import DemographicView, DeviceView, RegionView, WeeklyView

Card = Tuple[str, str]


def _plural(gender: str) -> str:
    return f"{gender}s"


def demographic_cards(view: DemographicView) -> List[Card]:
    cards: List[Card] = []
    for summary in view.gender_summaries:
        audience = _plural(summary.gender)
        cards.append((f"Total Clicks by {audience}", fmt_count(summary.clicks)))
        cards.append((f"Total Spend on {audience}", fmt_currency(summary.spend, decimals=2)))
        cards.append((f"Total Revenue from {audience}", fmt_currency(summary.revenue, decimals=2)))
    return cards


def device_cards(view: DeviceView) -> List[Card]:
    cards: List[Card] = [("Total Revenue", fmt_currency(view.total_revenue, decimals=2))]
    for row in view.chart_rows:
        cards.append((f"{row['name']} Revenue", fmt_currency(row["revenue"], decimals=2)))
    return cards


def region_cards(view: RegionView) -> List[Card]:
    return [
        ("Top Region by Revenue", view.top_region),
        ("Total Regions", str(view.total_regions)),
    ]


def weekly_cards(view: WeeklyView) -> List[Card]:
    return [
        ("Total Weeks Tracked", str(view.total_weeks)),
        ("Average Weekly Spend", fmt_currency(view.average_weekly_spend)),
        ("Average Weekly Revenue", fmt_currency(view.average_weekly_revenue)),
    ]
