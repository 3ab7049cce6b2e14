"""FuelEntry class for fill-ups."""
from datetime import date
from typing import Optional, Union

from .enums import FuelType


class FuelEntry:
    """A fill-up: odometer reading, volume in gallons and what it cost."""

    def __init__(
            self,
            id: str,
            date: Union[str, date],
            mileage: int,
            volume: float,
            total_cost: float,
            price_per_unit: Optional[float] = None,
            fuel_type: FuelType = FuelType.REGULAR,
            vehicle_id: Optional[str] = None,
            location: Optional[str] = None,
            notes: Optional[str] = None,
    ):
        self.id = id
        self.vehicle_id = vehicle_id
        self.date = date
        self.mileage = mileage
        self.volume = volume
        self.total_cost = total_cost
        if price_per_unit is None and volume:
            price_per_unit = round(total_cost / volume, 3)
        self.price_per_unit = price_per_unit
        self.fuel_type = fuel_type
        self.location = location
        self.notes = notes
