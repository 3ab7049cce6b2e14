"""Maintenance rules: per-type mileage intervals, thresholds and costs."""
from typing import Dict, Optional

from records.enums import MaintenanceType, Priority


class MaintenanceRule:
    """When a maintenance type should be recommended, and how urgently."""

    def __init__(
            self,
            maintenance_type: MaintenanceType,
            interval_miles: int,
            warning_miles: int,
            estimated_cost: float,
            description: str,
            high_priority_miles: Optional[int] = None,
    ):
        self.maintenance_type = maintenance_type
        self.interval_miles = interval_miles
        self.warning_miles = warning_miles
        self.high_priority_miles = high_priority_miles
        self.estimated_cost = estimated_cost
        self.description = description

    def is_due(self, miles_since: float) -> bool:
        """Recommend once strictly past the warning threshold."""
        return miles_since > self.warning_miles

    def priority_for(self, miles_since: float) -> Priority:
        if self.high_priority_miles is not None and miles_since > self.high_priority_miles:
            return Priority.HIGH
        return Priority.MEDIUM


# Ordered: recommendations come out in this order.
RULES: Dict[MaintenanceType, MaintenanceRule] = {
    rule.maintenance_type: rule
    for rule in (
        MaintenanceRule(
            MaintenanceType.OIL_CHANGE,
            interval_miles=5000,
            warning_miles=4500,
            high_priority_miles=5500,
            estimated_cost=75.0,
            description="Oil change is due every 5,000 miles",
        ),
        MaintenanceRule(
            MaintenanceType.TIRE_ROTATION,
            interval_miles=7500,
            warning_miles=7000,
            estimated_cost=50.0,
            description="Tire rotation is recommended every 7,500 miles",
        ),
        MaintenanceRule(
            MaintenanceType.BRAKE_SERVICE,
            interval_miles=25000,
            warning_miles=24000,
            high_priority_miles=30000,
            estimated_cost=300.0,
            description="Brake service is recommended every 25,000 miles",
        ),
    )
}

DEFAULT_INTERVAL_MILES = 10000

# Standard mileage intervals, including types without a recommendation rule.
INTERVAL_MILES: Dict[MaintenanceType, int] = {
    MaintenanceType.OIL_CHANGE: 5000,
    MaintenanceType.TIRE_ROTATION: 7500,
    MaintenanceType.BRAKE_SERVICE: 25000,
    MaintenanceType.INSPECTION: 12000,  # ~1 year of driving
    MaintenanceType.FLUID_SERVICE: 30000,
    MaintenanceType.FILTER_CHANGE: 15000,
    MaintenanceType.BATTERY_SERVICE: 36000,  # 3 years at 12k/yr
    MaintenanceType.TRANSMISSION_SERVICE: 60000,
    MaintenanceType.ENGINE_SERVICE: 100000,
    MaintenanceType.WHEEL_ALIGNMENT: 20000,
}


def maintenance_interval(maintenance_type: MaintenanceType) -> int:
    """Standard mileage interval for a maintenance type."""
    return INTERVAL_MILES.get(maintenance_type, DEFAULT_INTERVAL_MILES)


class ScheduleCheck:
    """Point at which a maintenance type should be booked: miles or elapsed months."""

    def __init__(
            self,
            maintenance_type: MaintenanceType,
            warning_miles: Optional[int] = None,
            warning_months: Optional[int] = None,
    ):
        self.maintenance_type = maintenance_type
        self.warning_miles = warning_miles
        self.warning_months = warning_months

    @property
    def is_time_based(self) -> bool:
        return self.warning_months is not None

    def is_due(self, miles_since: float, months_since: Optional[int]) -> bool:
        """
        Check a service against its threshold (inclusive).

        months_since is None when the type was never serviced, which is
        always due for time-based checks.
        """
        if self.is_time_based:
            return months_since is None or months_since >= self.warning_months
        return miles_since >= self.warning_miles


# Ordered: booking suggestions come out in this order.
SCHEDULE_CHECKS: Dict[MaintenanceType, ScheduleCheck] = {
    check.maintenance_type: check
    for check in (
        ScheduleCheck(MaintenanceType.OIL_CHANGE, warning_miles=4500),
        ScheduleCheck(MaintenanceType.TIRE_ROTATION, warning_miles=7000),
        ScheduleCheck(MaintenanceType.BRAKE_SERVICE, warning_miles=24000),
        ScheduleCheck(MaintenanceType.INSPECTION, warning_months=11),  # annual
        ScheduleCheck(MaintenanceType.FLUID_SERVICE, warning_miles=29000),
        ScheduleCheck(MaintenanceType.FILTER_CHANGE, warning_miles=14000),
        ScheduleCheck(MaintenanceType.BATTERY_SERVICE, warning_months=36),
    )
}
