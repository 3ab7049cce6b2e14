#!/usr/bin/env python3
"""Tests for fuel efficiency analysis."""
import pytest
from datetime import date, timedelta

from analytics import FuelTrend, analyze_fuel
from analytics.fuel import classify_trend, projected_monthly_cost
from records import FuelEntry

TODAY = date(2025, 6, 15)


def fill(id, mileage, volume, day="2025-01-01", cost=35.0):
    return FuelEntry(id, day, mileage, volume, cost)


def fills_for_mpg(mpg_values, start_mileage=1000, gallons=10.0):
    """Fill-ups spaced a week apart that produce the given MPG readings."""
    start = date(2025, 1, 1)
    entries = [fill("f0", start_mileage, gallons, start.isoformat())]
    mileage = start_mileage
    for i, mpg in enumerate(mpg_values, start=1):
        mileage += int(mpg * gallons)
        day = (start + timedelta(days=7 * i)).isoformat()
        entries.append(fill(f"f{i}", mileage, gallons, day))
    return entries


class TestAnalyzeFuelBasics:
    """Per-interval MPG and averages."""

    def test_single_interval(self):
        """300 miles on 10 gallons is 30 MPG everywhere; too few points for a trend."""
        entries = [
            fill("f1", 1000, 10.0, "2025-01-01"),
            fill("f2", 1300, 10.0, "2025-01-08"),
        ]
        result = analyze_fuel(entries, TODAY)
        assert result.mpg_history == [pytest.approx(30.0)]
        assert result.average_mpg == pytest.approx(30.0)
        assert result.current_mpg == pytest.approx(30.0)
        assert result.trend == FuelTrend.STABLE

    def test_fewer_than_two_entries(self):
        for entries in ([], [fill("f1", 1000, 10.0)]):
            result = analyze_fuel(entries, TODAY)
            assert result.current_mpg == 0.0
            assert result.average_mpg == 0.0
            assert result.cost_per_mile == 0.0
            assert result.projected_monthly_cost == 0.0
            assert result.trend == FuelTrend.STABLE

    def test_sorts_by_date(self):
        entries = [
            fill("f2", 1300, 10.0, "2025-01-08"),
            fill("f1", 1000, 10.0, "2025-01-01"),
        ]
        assert analyze_fuel(entries, TODAY).average_mpg == pytest.approx(30.0)

    def test_current_is_mean_of_last_three(self):
        result = analyze_fuel(fills_for_mpg([20, 30, 28, 32, 36]), TODAY)
        assert result.current_mpg == pytest.approx((28 + 32 + 36) / 3)
        assert result.average_mpg == pytest.approx((20 + 30 + 28 + 32 + 36) / 5)


class TestAnalyzeFuelSkippedIntervals:
    """Intervals without forward progress or volume are dropped entirely."""

    def test_no_progress_is_excluded(self):
        entries = [
            fill("f1", 1000, 10.0, "2025-01-01"),
            fill("f2", 1300, 10.0, "2025-01-08"),
            fill("f3", 1300, 5.0, "2025-01-09"),
            fill("f4", 1600, 10.0, "2025-01-15"),
        ]
        result = analyze_fuel(entries, TODAY)
        assert result.mpg_history == [pytest.approx(30.0), pytest.approx(30.0)]
        assert result.average_mpg == pytest.approx(30.0)

    def test_backwards_odometer_is_excluded(self):
        entries = [
            fill("f1", 1000, 10.0, "2025-01-01"),
            fill("f2", 900, 10.0, "2025-01-08"),
            fill("f3", 1200, 10.0, "2025-01-15"),
        ]
        result = analyze_fuel(entries, TODAY)
        assert result.mpg_history == [pytest.approx(30.0)]
        assert all(mpg > 0 for mpg in result.mpg_history)

    def test_zero_volume_is_excluded(self):
        entries = [
            fill("f1", 1000, 10.0, "2025-01-01"),
            fill("f2", 1300, 0.0, "2025-01-08"),
            fill("f3", 1600, 10.0, "2025-01-15"),
        ]
        assert analyze_fuel(entries, TODAY).mpg_history == [pytest.approx(30.0)]


class TestTrend:
    """Trend compares halves of the MPG sequence with a 5% tolerance."""

    def test_improving(self):
        result = analyze_fuel(fills_for_mpg([20, 20, 20, 25, 25, 25]), TODAY)
        assert result.trend == FuelTrend.IMPROVING
        assert result.trend_change == pytest.approx(0.25)

    def test_declining(self):
        result = analyze_fuel(fills_for_mpg([30, 30, 30, 24, 24, 24]), TODAY)
        assert result.trend == FuelTrend.DECLINING
        assert result.trend_change == pytest.approx(-0.2)

    def test_stable_within_tolerance(self):
        result = analyze_fuel(fills_for_mpg([30, 30, 30, 31, 31, 31]), TODAY)
        assert result.trend == FuelTrend.STABLE

    def test_needs_six_points(self):
        result = analyze_fuel(fills_for_mpg([10, 10, 40, 40, 40]), TODAY)
        assert result.trend == FuelTrend.STABLE
        assert result.trend_change == 0.0

    def test_odd_count_splits_by_integer_division(self):
        """7 readings: first 3 vs last 4."""
        trend, change = classify_trend([20, 20, 20, 20, 20, 20, 48])
        # first mean 20, second mean 27
        assert trend == FuelTrend.IMPROVING
        assert change == pytest.approx(0.35)


class TestFuelCosts:
    """Cost per mile and trailing 30-day spend."""

    def test_cost_per_mile_uses_counted_intervals(self):
        entries = [
            fill("f1", 1000, 10.0, "2025-01-01", cost=40.0),
            fill("f2", 1300, 10.0, "2025-01-08", cost=30.0),
            fill("f3", 1600, 10.0, "2025-01-15", cost=30.0),
        ]
        # First fill-up's cost covers miles before the log started
        assert analyze_fuel(entries, TODAY).cost_per_mile == pytest.approx(0.1)

    def test_projected_monthly_cost(self):
        entries = [
            fill("f1", 1000, 10.0, "2025-05-01", cost=40.0),
            fill("f2", 1300, 10.0, "2025-05-20", cost=30.0),
            fill("f3", 1600, 10.0, "2025-06-10", cost=35.0),
        ]
        assert projected_monthly_cost(entries, TODAY) == pytest.approx(65.0)
        assert analyze_fuel(entries, TODAY).projected_monthly_cost == pytest.approx(65.0)
