#!/usr/bin/env python3
"""Tests for depreciation and current value."""
import pytest
from datetime import date

from analytics import current_value, depreciation, depreciation_rate
from records import Vehicle

TODAY = date(2025, 6, 15)


def make_vehicle(mileage=30000, purchase_date="2020-06-15", purchase_price=20000.0):
    return Vehicle(
        "v1",
        "Toyota",
        "Camry",
        2020,
        mileage=mileage,
        purchase_date=purchase_date,
        purchase_price=purchase_price,
    )


class TestDepreciation:
    """Tests for depreciation."""

    def test_compound_time_plus_mileage(self):
        """5 whole years at 15%/yr plus $0.10/mile on the odometer."""
        expected = 20000 * (1 - 0.85 ** 5) + 30000 * 0.10
        assert depreciation(make_vehicle(), TODAY) == pytest.approx(expected)
        assert depreciation(make_vehicle(), TODAY) == pytest.approx(14125.89375)

    def test_partial_years_truncated(self):
        """One day short of 5 years counts as 4."""
        expected = 20000 * (1 - 0.85 ** 4) + 3000
        assert depreciation(make_vehicle(), date(2025, 6, 14)) == pytest.approx(expected)

    def test_first_year_is_mileage_only(self):
        vehicle = make_vehicle(mileage=8000, purchase_date="2025-01-01")
        assert depreciation(vehicle, TODAY) == pytest.approx(800.0)

    @pytest.mark.parametrize("mileage", [0, 1000, 250000])
    def test_zero_without_purchase_date(self, mileage):
        vehicle = make_vehicle(mileage=mileage, purchase_date=None)
        assert depreciation(vehicle, TODAY) == 0.0

    @pytest.mark.parametrize("purchase_date", ["1990-01-01", "2025-06-15"])
    def test_zero_without_purchase_price(self, purchase_date):
        vehicle = make_vehicle(purchase_date=purchase_date, purchase_price=None)
        assert depreciation(vehicle, TODAY) == 0.0

    def test_accepts_date_objects(self):
        vehicle = make_vehicle(purchase_date=date(2020, 6, 15))
        assert depreciation(vehicle, "2025-06-15") == pytest.approx(14125.89375)


class TestCurrentValue:
    """Tests for current_value."""

    def test_price_less_depreciation(self):
        assert current_value(make_vehicle(), TODAY) == pytest.approx(20000 - 14125.89375)

    def test_never_negative(self):
        vehicle = make_vehicle(mileage=500000, purchase_price=1000.0)
        assert current_value(vehicle, TODAY) == 0.0

    def test_zero_without_price(self):
        assert current_value(make_vehicle(purchase_price=None), TODAY) == 0.0

    def test_price_only_without_date(self):
        """Without a purchase date nothing depreciates."""
        vehicle = make_vehicle(purchase_date=None)
        assert current_value(vehicle, TODAY) == 20000.0


class TestDepreciationRate:
    """Tests for depreciation_rate."""

    def test_percentage_of_price(self):
        assert depreciation_rate(make_vehicle(), TODAY) == pytest.approx(70.6294, rel=1e-4)

    def test_zero_price(self):
        assert depreciation_rate(make_vehicle(purchase_price=0.0), TODAY) == 0.0
        assert depreciation_rate(make_vehicle(purchase_price=None), TODAY) == 0.0
