"""Depreciation and current market value estimates."""

from typing import Optional

from records.vehicle import Vehicle

from .calculations import DateLike, resolve_today, safe_divide, whole_years_between

ANNUAL_DEPRECIATION = 0.15
DEPRECIATION_PER_MILE = 0.10


def depreciation(vehicle: Vehicle, today: Optional[DateLike] = None) -> float:
    """
    Estimated loss of value since purchase.

    Compounds 15% per whole year owned, plus $0.10 per odometer mile.
    The mileage term uses total odometer miles (purchase mileage is not
    recorded). 0 without a purchase date and price.
    """
    if vehicle.purchase_date is None or vehicle.purchase_price is None:
        return 0.0

    years_owned = whole_years_between(vehicle.purchase_date, resolve_today(today))
    time_depreciation = vehicle.purchase_price * (
        1 - (1 - ANNUAL_DEPRECIATION) ** years_owned
    )
    mileage_depreciation = vehicle.mileage * DEPRECIATION_PER_MILE
    return time_depreciation + mileage_depreciation


def current_value(vehicle: Vehicle, today: Optional[DateLike] = None) -> float:
    """Purchase price less depreciation, floored at 0."""
    if vehicle.purchase_price is None:
        return 0.0
    return max(0.0, vehicle.purchase_price - depreciation(vehicle, today))


def depreciation_rate(vehicle: Vehicle, today: Optional[DateLike] = None) -> float:
    """Depreciation as a percentage of purchase price."""
    if not vehicle.purchase_price:
        return 0.0
    return safe_divide(depreciation(vehicle, today), vehicle.purchase_price) * 100
