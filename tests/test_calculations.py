#!/usr/bin/env python3
"""Tests for calculation helper functions."""
import pytest
from datetime import date, datetime

from analytics.calculations import (
    calc_due_miles,
    mean,
    month_key,
    resolve_today,
    safe_divide,
    to_date,
    whole_months_between,
    whole_years_between,
)


class TestToDate:
    """Tests for to_date normalization."""

    def test_iso_string(self):
        assert to_date("2025-01-15") == date(2025, 1, 15)

    def test_iso_datetime_string(self):
        assert to_date("2025-01-15T10:30:00Z") == date(2025, 1, 15)

    def test_date_and_datetime(self):
        assert to_date(date(2025, 1, 15)) == date(2025, 1, 15)
        assert to_date(datetime(2025, 1, 15, 23, 59)) == date(2025, 1, 15)

    def test_resolve_today_default(self):
        assert resolve_today() == date.today()
        assert resolve_today("2025-03-01") == date(2025, 3, 1)


class TestCalcDueMiles:
    """Tests for calc_due_miles helper function."""

    def test_with_history(self):
        """last_miles + interval when history exists."""
        assert calc_due_miles(45000, 5000) == 50000

    def test_without_history(self):
        """0 + interval when never serviced."""
        assert calc_due_miles(None, 7500) == 7500

    def test_without_history_from_start_miles(self):
        assert calc_due_miles(None, 5000, start_miles=1200) == 6200


class TestWholeYearsBetween:
    """Tests for whole_years_between."""

    def test_truncates_partial_year(self):
        assert whole_years_between("2020-06-01", "2025-05-31") == 4
        assert whole_years_between("2020-06-01", "2025-06-01") == 5

    def test_never_negative(self):
        assert whole_years_between("2026-01-01", "2025-01-01") == 0


class TestWholeMonthsBetween:
    """Tests for whole_months_between."""

    def test_counts_months_across_years(self):
        assert whole_months_between("2024-01-15", "2025-03-15") == 14
        assert whole_months_between("2024-01-15", "2025-03-14") == 13

    def test_same_day(self):
        assert whole_months_between("2025-01-15", "2025-01-15") == 0


class TestSmallHelpers:
    """Tests for month_key, safe_divide and mean."""

    def test_month_key(self):
        assert month_key("2025-03-09") == "2025-03"

    def test_safe_divide_by_zero(self):
        assert safe_divide(100, 0) == 0.0
        assert safe_divide(100, 4) == 25.0

    def test_mean(self):
        assert mean([]) == 0.0
        assert mean([10, 20, 30]) == pytest.approx(20)
