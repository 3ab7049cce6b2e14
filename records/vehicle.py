"""Vehicle class for vehicle identification and ownership details."""

from datetime import date
from typing import Optional, Union

from .enums import VehicleStatus


class Vehicle:
    """A vehicle snapshot as delivered by the API."""

    def __init__(
        self,
        id: str,
        make: str,
        model: str,
        year: int,
        mileage: int = 0,
        status: VehicleStatus = VehicleStatus.ACTIVE,
        vin: Optional[str] = None,
        license_plate: Optional[str] = None,
        purchase_date: Optional[Union[str, date]] = None,
        purchase_price: Optional[float] = None,
        image_url: Optional[str] = None,
        notes: Optional[str] = None,
    ):
        self.id = id
        self.make = make
        self.model = model
        self.year = year
        self.mileage = mileage
        self.status = status
        self.vin = vin
        self.license_plate = license_plate
        self.purchase_date = purchase_date
        self.purchase_price = purchase_price
        self.image_url = image_url
        self.notes = notes

    @property
    def name(self) -> str:
        """Human-readable vehicle name."""
        return f"{self.year} {self.make} {self.model}"
