"""
Vehicle expense tracking records.

This package provides the plain data records the analytics consume:
- Enums: Vehicle/maintenance status, expense type and category, priority
- Vehicle: Vehicle identification and ownership details
- Expense, Maintenance, FuelEntry: Logged records
- VehicleRecord: A vehicle together with all of its records
"""

from .enums import (
    VehicleStatus,
    ExpenseType,
    ExpenseCategory,
    MaintenanceType,
    MaintenanceStatus,
    Priority,
    FuelType,
)
from .vehicle import Vehicle
from .expense import Expense
from .maintenance import Maintenance
from .fuel_entry import FuelEntry
from .vehicle_record import VehicleRecord
from .loader import load_vehicle_record

__all__ = [
    "VehicleStatus",
    "ExpenseType",
    "ExpenseCategory",
    "MaintenanceType",
    "MaintenanceStatus",
    "Priority",
    "FuelType",
    "Vehicle",
    "Expense",
    "Maintenance",
    "FuelEntry",
    "VehicleRecord",
    "load_vehicle_record",
]
