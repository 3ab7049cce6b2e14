"""Maintenance class for logged and scheduled service records."""
from datetime import date
from typing import Optional, Union

from .enums import MaintenanceStatus, MaintenanceType, Priority


class Maintenance:
    """A record of maintenance performed or planned."""

    def __init__(
            self,
            id: str,
            type: MaintenanceType,
            status: MaintenanceStatus,
            date: Union[str, date],
            mileage: int = 0,
            due_mileage: int = 0,
            cost: Optional[float] = None,
            priority: Priority = Priority.MEDIUM,
            vehicle_id: Optional[str] = None,
            service_provider: Optional[str] = None,
            description: Optional[str] = None,
            notes: Optional[str] = None,
    ):
        self.id = id
        self.vehicle_id = vehicle_id
        self.type = type
        self.status = status
        self.date = date
        self.mileage = mileage
        self.due_mileage = due_mileage
        self.cost = cost
        self.priority = priority
        self.service_provider = service_provider
        self.description = description
        self.notes = notes

    @property
    def is_completed(self) -> bool:
        return self.status == MaintenanceStatus.COMPLETED
