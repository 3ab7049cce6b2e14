"""YAML loading for vehicle data files."""

import json
from pathlib import Path
from typing import Any, Dict, List, Union

import yaml

from .enums import (
    ExpenseCategory,
    ExpenseType,
    FuelType,
    MaintenanceStatus,
    MaintenanceType,
    Priority,
    VehicleStatus,
)
from .expense import Expense
from .fuel_entry import FuelEntry
from .maintenance import Maintenance
from .vehicle import Vehicle
from .vehicle_record import VehicleRecord

Parsed = Union[Vehicle, Expense, Maintenance, FuelEntry, VehicleRecord, dict]


def _parse_object(dct: Dict[str, Any]) -> Parsed:
    """Parse dictionary into appropriate object type."""
    # Vehicle object (inside 'vehicle' key)
    if "make" in dct and "model" in dct:
        return Vehicle(
            dct["id"],
            dct["make"],
            dct["model"],
            dct["year"],
            dct.get("mileage", 0),
            VehicleStatus(dct.get("status", "ACTIVE")),
            dct.get("vin"),
            dct.get("licensePlate"),
            dct.get("purchaseDate"),
            dct.get("purchasePrice"),
            dct.get("imageUrl"),
            dct.get("notes"),
        )
    # Fuel entry
    elif "volume" in dct:
        return FuelEntry(
            dct["id"],
            dct["date"],
            dct["mileage"],
            dct["volume"],
            dct["totalCost"],
            dct.get("pricePerUnit"),
            FuelType(dct.get("fuelType", "REGULAR")),
            dct.get("vehicleId"),
            dct.get("location"),
            dct.get("notes"),
        )
    # Expense
    elif "amount" in dct:
        return Expense(
            dct["id"],
            dct["date"],
            dct["amount"],
            ExpenseType(dct.get("type", "OTHER")),
            ExpenseCategory(dct.get("category", "OTHER")),
            dct.get("mileage", 0),
            dct.get("vehicleId"),
            dct.get("description"),
            dct.get("notes"),
        )
    # Maintenance record
    elif "type" in dct and "status" in dct:
        return Maintenance(
            dct["id"],
            MaintenanceType(dct["type"]),
            MaintenanceStatus(dct["status"]),
            dct["date"],
            dct.get("mileage", 0),
            dct.get("dueMileage", 0),
            dct.get("cost"),
            Priority(dct.get("priority", "MEDIUM")),
            dct.get("vehicleId"),
            dct.get("serviceProvider"),
            dct.get("description"),
            dct.get("notes"),
        )
    # Top-level record
    elif "vehicle" in dct:
        state = dct.get("state") or {}
        vehicle = dct["vehicle"]
        children: List[Any] = (
            (dct.get("expenses") or [])
            + (dct.get("maintenance") or [])
            + (dct.get("fuelEntries") or [])
        )
        for child in children:
            if child.vehicle_id is None:
                child.vehicle_id = vehicle.id
        return VehicleRecord(
            vehicle,
            dct.get("expenses"),
            dct.get("maintenance"),
            dct.get("fuelEntries"),
            state.get("asOfDate"),
        )
    else:
        # Return dict as-is for unknown structures (like 'state')
        return dct


def load_vehicle_record(filename: Union[str, Path]) -> VehicleRecord:
    """Load a vehicle and its records from a YAML file."""
    with open(filename, "rb") as fp:
        # default=str keeps unquoted YAML dates as ISO strings
        json_data = json.dumps(yaml.load(fp, Loader=yaml.SafeLoader), default=str)
        return json.loads(json_data, object_hook=_parse_object)
