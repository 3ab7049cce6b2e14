"""Enumerations for vehicle, expense, maintenance and fuel records."""

from enum import Enum


class _Labeled(Enum):
    """Enum whose values are upper-case API strings."""

    @property
    def display_name(self) -> str:
        return self.value.replace("_", " ").title()


class VehicleStatus(_Labeled):
    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"
    MAINTENANCE = "MAINTENANCE"
    SOLD = "SOLD"
    SCRAPPED = "SCRAPPED"

    @property
    def display_name(self) -> str:
        if self is VehicleStatus.MAINTENANCE:
            return "In Maintenance"
        return super().display_name


class ExpenseType(_Labeled):
    FUEL = "FUEL"
    MAINTENANCE = "MAINTENANCE"
    REPAIR = "REPAIR"
    INSURANCE = "INSURANCE"
    REGISTRATION = "REGISTRATION"
    SERVICE = "SERVICE"
    OTHER = "OTHER"


class ExpenseCategory(_Labeled):
    ROUTINE = "ROUTINE"
    EMERGENCY = "EMERGENCY"
    UPGRADE = "UPGRADE"
    LEGAL = "LEGAL"
    OTHER = "OTHER"


class MaintenanceType(_Labeled):
    OIL_CHANGE = "OIL_CHANGE"
    TIRE_ROTATION = "TIRE_ROTATION"
    BRAKE_SERVICE = "BRAKE_SERVICE"
    INSPECTION = "INSPECTION"
    FLUID_SERVICE = "FLUID_SERVICE"
    FILTER_CHANGE = "FILTER_CHANGE"
    BATTERY_SERVICE = "BATTERY_SERVICE"
    TRANSMISSION_SERVICE = "TRANSMISSION_SERVICE"
    ENGINE_SERVICE = "ENGINE_SERVICE"
    ELECTRICAL_SERVICE = "ELECTRICAL_SERVICE"
    AC_SERVICE = "AC_SERVICE"
    EXHAUST_SERVICE = "EXHAUST_SERVICE"
    SUSPENSION_SERVICE = "SUSPENSION_SERVICE"
    WHEEL_ALIGNMENT = "WHEEL_ALIGNMENT"
    SCHEDULED_MAINTENANCE = "SCHEDULED_MAINTENANCE"
    REPAIR = "REPAIR"
    RECALL = "RECALL"
    OTHER = "OTHER"

    @property
    def display_name(self) -> str:
        if self is MaintenanceType.AC_SERVICE:
            return "A/C Service"
        return super().display_name


class MaintenanceStatus(_Labeled):
    """Lifecycle of a logged maintenance record."""

    UPCOMING = "UPCOMING"
    DUE = "DUE"
    OVERDUE = "OVERDUE"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"
    SKIPPED = "SKIPPED"
    CANCELLED = "CANCELLED"


class Priority(_Labeled):
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"

    @property
    def rank(self) -> int:
        """Lower rank = more urgent."""
        return {Priority.HIGH: 1, Priority.MEDIUM: 2, Priority.LOW: 3}[self]


class FuelType(_Labeled):
    REGULAR = "REGULAR"
    PREMIUM = "PREMIUM"
    DIESEL = "DIESEL"
    ELECTRIC = "ELECTRIC"
    OTHER = "OTHER"
