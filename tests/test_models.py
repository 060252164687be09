"""Tests for domain model construction from raw payload rows."""

from dataclasses import FrozenInstanceError

import pytest

from marketing_dashboard.domain.models import (
    Campaign,
    DemographicBreakdown,
    MarketingDataset,
    PerformanceCounts,
    WeeklyPerformance,
)


class TestCampaignFromRow:
    def test_scalars_and_nested(self, payload):
        campaign = Campaign.from_row(payload["campaigns"][0])
        assert campaign.id == "c1"
        assert campaign.clicks == 100
        assert campaign.spend == 500.0
        assert len(campaign.demographic_breakdown) == 2
        assert campaign.demographic_breakdown[0] == DemographicBreakdown(
            gender="Male",
            age_group="25-34",
            performance=PerformanceCounts(impressions=1000, clicks=60, conversions=6),
        )
        assert campaign.weekly_performance[1] == WeeklyPerformance(week_start="2024-01-01", revenue=800.0, spend=250.0)

    def test_missing_nested_arrays_are_empty(self):
        campaign = Campaign.from_row({"id": "bare"})
        assert campaign.demographic_breakdown == ()
        assert campaign.device_performance == ()
        assert campaign.regional_performance == ()
        assert campaign.weekly_performance == ()

    def test_non_list_nested_value_is_empty(self):
        campaign = Campaign.from_row({"id": "x", "device_performance": {"device": "Mobile"}})
        assert campaign.device_performance == ()

    def test_missing_and_bad_numbers_are_zero(self):
        campaign = Campaign.from_row({"id": "x", "clicks": None, "spend": "n/a", "revenue": "12.5"})
        assert campaign.clicks == 0
        assert campaign.spend == 0.0
        assert campaign.conversions == 0
        assert campaign.revenue == 12.5

    def test_missing_performance_record(self):
        breakdown = DemographicBreakdown.from_row({"gender": "Female", "age_group": "35-44"})
        assert breakdown.performance == PerformanceCounts()

    def test_non_mapping_nested_items_skipped(self):
        campaign = Campaign.from_row({"id": "x", "regional_performance": ["Dubai", {"region": "Doha", "revenue": 5}]})
        assert len(campaign.regional_performance) == 1
        assert campaign.regional_performance[0].region == "Doha"


class TestMarketingDataset:
    def test_default_is_empty(self):
        assert MarketingDataset().campaigns == ()

    def test_models_are_immutable(self, dataset):
        with pytest.raises(FrozenInstanceError):
            dataset.campaigns[0].clicks = 1


class TestNumericCoercion:
    @pytest.mark.parametrize("raw", [float("nan"), float("inf"), float("-inf"), "NaN", "Infinity", 1e999])
    def test_non_finite_numbers_are_zero(self, raw):
        campaign = Campaign.from_row({"id": "x", "clicks": raw, "spend": raw, "conversions": raw, "revenue": raw})
        assert campaign.clicks == 0
        assert campaign.spend == 0.0
        assert campaign.conversions == 0
        assert campaign.revenue == 0.0

    def test_non_finite_slice_counts_are_zero(self):
        counts = PerformanceCounts.from_row({"impressions": float("inf"), "clicks": float("nan"), "conversions": 3})
        assert counts == PerformanceCounts(impressions=0, clicks=0, conversions=3)

    def test_fractional_counts_truncate_toward_zero(self):
        campaign = Campaign.from_row({"id": "x", "clicks": 0.5, "conversions": 7.9, "spend": 10.5})
        assert campaign.clicks == 0
        assert campaign.conversions == 7
        assert campaign.spend == 10.5
