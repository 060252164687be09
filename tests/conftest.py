"""Shared fixtures: a small two-campaign payload and default settings."""

import pytest

from marketing_dashboard.config import DashboardSettings
from marketing_dashboard.ingestion import dataset_from_payload


def _campaign(campaign_id, clicks, spend, conversions, revenue, **nested):
    row = {
        "id": campaign_id,
        "name": f"Campaign {campaign_id}",
        "clicks": clicks,
        "spend": spend,
        "conversions": conversions,
        "revenue": revenue,
    }
    row.update(nested)
    return row


@pytest.fixture
def payload():
    return {
        "campaigns": [
            _campaign(
                "c1", 100, 500.0, 10, 2000.0,
                demographic_breakdown=[
                    {"gender": "Male", "age_group": "25-34",
                     "performance": {"impressions": 1000, "clicks": 60, "conversions": 6}},
                    {"gender": "Female", "age_group": "18-24",
                     "performance": {"impressions": 500, "clicks": 40, "conversions": 4}},
                ],
                device_performance=[
                    {"device": "Mobile", "revenue": 1200.0, "spend": 300.0},
                    {"device": "Desktop", "revenue": 800.0, "spend": 200.0},
                ],
                regional_performance=[
                    {"region": "Dubai", "revenue": 1500.0, "spend": 350.0},
                    {"region": "Riyadh", "revenue": 500.0, "spend": 150.0},
                ],
                weekly_performance=[
                    {"week_start": "2024-01-08", "revenue": 1200.0, "spend": 250.0},
                    {"week_start": "2024-01-01", "revenue": 800.0, "spend": 250.0},
                ],
            ),
            _campaign(
                "c2", 50, 100.0, 5, 500.0,
                demographic_breakdown=[
                    {"gender": "Male", "age_group": "18-24",
                     "performance": {"impressions": 300, "clicks": 50, "conversions": 5}},
                ],
                device_performance=[
                    {"device": "Tablet", "revenue": 100.0, "spend": 20.0},
                    {"device": "Mobile", "revenue": 400.0, "spend": 80.0},
                ],
                regional_performance=[
                    {"region": "Riyadh", "revenue": 400.0, "spend": 80.0},
                    {"region": "Atlantis", "revenue": 100.0, "spend": 20.0},
                ],
                weekly_performance=[
                    {"week_start": "2024-01-08", "revenue": 500.0, "spend": 100.0},
                ],
            ),
        ]
    }


@pytest.fixture
def dataset(payload):
    return dataset_from_payload(payload)


@pytest.fixture
def settings(tmp_path):
    return DashboardSettings(data_source=str(tmp_path / "data.json"), output_dir=tmp_path / "output")
