"""VehicleRecord - a vehicle together with all of its logged records."""

from datetime import date
from typing import List, Optional

from .expense import Expense
from .fuel_entry import FuelEntry
from .maintenance import Maintenance
from .vehicle import Vehicle


class VehicleRecord:
    """Vehicle snapshot with its expenses, maintenance and fuel entries."""

    def __init__(
        self,
        vehicle: Vehicle,
        expenses: Optional[List[Expense]] = None,
        maintenance: Optional[List[Maintenance]] = None,
        fuel_entries: Optional[List[FuelEntry]] = None,
        state_as_of_date: Optional[str] = None,
    ):
        self.vehicle = vehicle
        self.expenses = expenses or []
        self.maintenance = maintenance or []
        self.fuel_entries = fuel_entries or []
        self._state_as_of_date = state_as_of_date

    @property
    def as_of_date(self) -> str:
        """Date of evaluation, defaults to today."""
        if self._state_as_of_date:
            return str(self._state_as_of_date)
        return date.today().isoformat()

    @property
    def last_service(self) -> Optional[Maintenance]:
        """Get the most recent completed maintenance overall."""
        completed = [m for m in self.maintenance if m.is_completed]
        if not completed:
            return None
        return max(completed, key=lambda m: (str(m.date), m.mileage))

    def get_maintenance_sorted(
        self, sort_by: str = "date", reverse: bool = True
    ) -> List[Maintenance]:
        """
        Get maintenance records sorted by specified field.

        Args:
            sort_by: "date", "miles", or "type"
            reverse: If True, newest/highest first (default)
        """
        if sort_by == "date":
            return sorted(self.maintenance, key=lambda m: str(m.date), reverse=reverse)
        elif sort_by == "miles":
            return sorted(self.maintenance, key=lambda m: m.mileage, reverse=reverse)
        elif sort_by == "type":
            return sorted(
                self.maintenance,
                key=lambda m: (m.type.value, str(m.date)),
                reverse=reverse,
            )
        return self.maintenance
