"""Tests for rate helpers and label formatters."""

from datetime import date

import polars as pl
import pytest

from marketing_dashboard.application.reporting.metrics import (
    conversion_rate,
    ctr,
    fmt_currency,
    fmt_pct,
    fmt_short_date,
    fmt_thousands,
    parse_week_start,
    safe_rate,
    safe_rate_expr,
)


class TestRates:
    def test_ctr(self):
        assert ctr(50, 1000) == pytest.approx(5.0)

    def test_ctr_zero_impressions(self):
        assert ctr(10, 0) == 0.0

    def test_conversion_rate(self):
        assert conversion_rate(3, 60) == pytest.approx(5.0)

    def test_conversion_rate_zero_clicks(self):
        assert conversion_rate(3, 0) == 0.0

    @pytest.mark.parametrize("den", [0, -5])
    def test_safe_rate_non_positive_denominator(self, den):
        assert safe_rate(100.0, den) == 0.0

    def test_safe_rate_expr(self):
        frame = pl.DataFrame({"num": [10.0, 10.0], "den": [4.0, 0.0]})
        result = frame.select(safe_rate_expr(pl.col("num"), pl.col("den")).alias("rate")).to_series().to_list()
        assert result == [2.5, 0.0]


class TestFormatters:
    def test_fmt_thousands(self):
        assert fmt_thousands(12500) == "$12k"
        assert fmt_thousands(12500, decimals=1) == "$12.5k"

    def test_fmt_currency(self):
        assert fmt_currency(1234567.8) == "$1,234,568"
        assert fmt_currency(1234.5, decimals=2) == "$1,234.50"

    def test_fmt_pct(self):
        assert fmt_pct(16.6666) == "16.67%"

    def test_fmt_short_date(self):
        assert fmt_short_date("2024-01-05") == "Jan 5"
        assert fmt_short_date("2024-03-15T00:00:00Z") == "Mar 15"

    def test_fmt_short_date_unparseable_passthrough(self):
        assert fmt_short_date("week one") == "week one"

    def test_parse_week_start(self):
        assert parse_week_start("2024-01-15") == date(2024, 1, 15)
        assert parse_week_start("") is None
