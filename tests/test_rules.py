#!/usr/bin/env python3
"""Tests for the maintenance rule table."""
from analytics.rules import (
    RULES,
    SCHEDULE_CHECKS,
    MaintenanceRule,
    ScheduleCheck,
    maintenance_interval,
)
from records import MaintenanceType, Priority


class TestRuleTable:
    """Tests for the built-in RULES table."""

    def test_rule_backed_types_in_order(self):
        assert list(RULES) == [
            MaintenanceType.OIL_CHANGE,
            MaintenanceType.TIRE_ROTATION,
            MaintenanceType.BRAKE_SERVICE,
        ]

    def test_oil_change_rule(self):
        rule = RULES[MaintenanceType.OIL_CHANGE]
        assert rule.interval_miles == 5000
        assert rule.warning_miles == 4500
        assert rule.high_priority_miles == 5500
        assert rule.estimated_cost == 75.0

    def test_tire_rotation_has_no_high_priority(self):
        assert RULES[MaintenanceType.TIRE_ROTATION].high_priority_miles is None


class TestMaintenanceRule:
    """Tests for MaintenanceRule behavior."""

    def test_is_due_strictly_past_warning(self):
        rule = RULES[MaintenanceType.OIL_CHANGE]
        assert rule.is_due(4500) is False
        assert rule.is_due(4501) is True

    def test_priority_escalates_past_high_threshold(self):
        rule = RULES[MaintenanceType.BRAKE_SERVICE]
        assert rule.priority_for(30000) == Priority.MEDIUM
        assert rule.priority_for(30001) == Priority.HIGH

    def test_priority_without_high_threshold(self):
        rule = MaintenanceRule(
            MaintenanceType.WHEEL_ALIGNMENT, 20000, 19000, 100.0, "Align wheels"
        )
        assert rule.priority_for(1_000_000) == Priority.MEDIUM


class TestMaintenanceInterval:
    """Tests for maintenance_interval lookup."""

    def test_known_intervals(self):
        assert maintenance_interval(MaintenanceType.OIL_CHANGE) == 5000
        assert maintenance_interval(MaintenanceType.BATTERY_SERVICE) == 36000
        assert maintenance_interval(MaintenanceType.ENGINE_SERVICE) == 100000

    def test_default_interval(self):
        assert maintenance_interval(MaintenanceType.RECALL) == 10000
        assert maintenance_interval(MaintenanceType.OTHER) == 10000


class TestScheduleChecks:
    """Tests for the SCHEDULE_CHECKS table and ScheduleCheck thresholds."""

    def test_checked_types_in_order(self):
        assert list(SCHEDULE_CHECKS) == [
            MaintenanceType.OIL_CHANGE,
            MaintenanceType.TIRE_ROTATION,
            MaintenanceType.BRAKE_SERVICE,
            MaintenanceType.INSPECTION,
            MaintenanceType.FLUID_SERVICE,
            MaintenanceType.FILTER_CHANGE,
            MaintenanceType.BATTERY_SERVICE,
        ]

    def test_mileage_thresholds(self):
        assert SCHEDULE_CHECKS[MaintenanceType.FLUID_SERVICE].warning_miles == 29000
        assert SCHEDULE_CHECKS[MaintenanceType.FILTER_CHANGE].warning_miles == 14000

    def test_time_thresholds(self):
        assert SCHEDULE_CHECKS[MaintenanceType.INSPECTION].warning_months == 11
        assert SCHEDULE_CHECKS[MaintenanceType.BATTERY_SERVICE].warning_months == 36

    def test_mileage_check_is_inclusive(self):
        check = ScheduleCheck(MaintenanceType.FILTER_CHANGE, warning_miles=14000)
        assert check.is_time_based is False
        assert check.is_due(13999, None) is False
        assert check.is_due(14000, None) is True

    def test_time_check_is_inclusive(self):
        check = ScheduleCheck(MaintenanceType.INSPECTION, warning_months=11)
        assert check.is_time_based is True
        assert check.is_due(0, 10) is False
        assert check.is_due(0, 11) is True

    def test_time_check_never_serviced_is_due(self):
        check = ScheduleCheck(MaintenanceType.BATTERY_SERVICE, warning_months=36)
        assert check.is_due(0, None) is True

    def test_time_check_ignores_mileage(self):
        check = ScheduleCheck(MaintenanceType.INSPECTION, warning_months=11)
        assert check.is_due(1_000_000, 0) is False
