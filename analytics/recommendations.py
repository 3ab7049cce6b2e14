"""Maintenance recommendations and next-service predictions."""

import logging
from datetime import date, timedelta
from typing import Iterable, List, Optional

from records.enums import MaintenanceStatus, MaintenanceType
from records.maintenance import Maintenance
from records.vehicle import Vehicle

from .calculations import (
    DateLike,
    calc_due_miles,
    resolve_today,
    safe_divide,
    to_date,
    whole_months_between,
)
from .results import MaintenanceRecommendation
from .rules import RULES, SCHEDULE_CHECKS, maintenance_interval

logger = logging.getLogger(__name__)

AVERAGE_MILES_PER_DAY = 33  # ~12k miles/year
PENDING_STATUSES = (MaintenanceStatus.UPCOMING, MaintenanceStatus.DUE)


def completed_of_type(
    history: Iterable[Maintenance], maintenance_type: MaintenanceType
) -> List[Maintenance]:
    """Completed records of one maintenance type."""
    return [
        m for m in history if m.type == maintenance_type and m.is_completed
    ]


def last_completed_by_mileage(
    history: Iterable[Maintenance], maintenance_type: MaintenanceType
) -> Optional[Maintenance]:
    """The completed record of a type with the highest recorded mileage."""
    entries = completed_of_type(history, maintenance_type)
    if not entries:
        return None
    return max(entries, key=lambda m: m.mileage)


def last_completed_by_date(
    history: Iterable[Maintenance], maintenance_type: MaintenanceType
) -> Optional[Maintenance]:
    """The most recent completed record of a type (mileage breaks date ties)."""
    entries = completed_of_type(history, maintenance_type)
    if not entries:
        return None
    return max(entries, key=lambda m: (to_date(m.date), m.mileage))


def recommend(
    vehicle: Vehicle, history: Iterable[Maintenance]
) -> List[MaintenanceRecommendation]:
    """
    Recommend rule-backed services the vehicle is approaching or past.

    Logic:
    - Baseline is the highest-mileage completed service of each type
    - No history means never serviced: baseline 0
    - Recommend once miles since baseline exceed the warning threshold
    - Due mileage is baseline + the type's interval
    """
    history = list(history)
    recommendations = []
    for rule in RULES.values():
        last = last_completed_by_mileage(history, rule.maintenance_type)
        last_miles = last.mileage if last else None
        miles_since = vehicle.mileage - (last_miles or 0)

        if not rule.is_due(miles_since):
            continue

        priority = rule.priority_for(miles_since)
        logger.debug(
            "Recommending %s for vehicle %s: %s miles since last service (%s)",
            rule.maintenance_type.value,
            vehicle.id,
            miles_since,
            priority.value,
        )
        recommendations.append(
            MaintenanceRecommendation(
                type=rule.maintenance_type,
                priority=priority,
                estimated_cost=rule.estimated_cost,
                due_mileage=int(calc_due_miles(last_miles, rule.interval_miles)),
                description=rule.description,
            )
        )
    return recommendations


def predict_next_maintenance(
    vehicle: Vehicle,
    maintenance_type: MaintenanceType,
    history: Iterable[Maintenance],
    today: Optional[DateLike] = None,
) -> date:
    """
    Estimate the date a maintenance type next comes due.

    Miles left until due are converted to days at AVERAGE_MILES_PER_DAY.
    Already past due predicts today.
    """
    current_date = resolve_today(today)
    interval = maintenance_interval(maintenance_type)

    last = last_completed_by_date(history, maintenance_type)
    if last:
        miles_until_due = interval - (vehicle.mileage - last.mileage)
        if miles_until_due <= 0:
            return current_date
    else:
        miles_until_due = interval - (vehicle.mileage % interval)

    days_until_due = miles_until_due // AVERAGE_MILES_PER_DAY
    return current_date + timedelta(days=days_until_due)


def should_schedule(
    vehicle: Vehicle,
    maintenance_type: MaintenanceType,
    history: Iterable[Maintenance],
    today: Optional[DateLike] = None,
) -> bool:
    """
    Whether a maintenance type should be booked now.

    Mileage checks count from the last completed service of the type
    (0 if never serviced). Time checks count whole months since it, and a
    type that was never serviced is always due. Types without a check are
    never due.
    """
    check = SCHEDULE_CHECKS.get(maintenance_type)
    if check is None:
        return False

    last = last_completed_by_date(history, maintenance_type)
    miles_since = vehicle.mileage - (last.mileage if last else 0)
    months_since = (
        whole_months_between(last.date, resolve_today(today)) if last else None
    )
    return check.is_due(miles_since, months_since)


def types_to_schedule(
    vehicle: Vehicle,
    history: Iterable[Maintenance],
    today: Optional[DateLike] = None,
) -> List[MaintenanceType]:
    """Every checked maintenance type that should be booked now."""
    history = list(history)
    due = [
        t for t in SCHEDULE_CHECKS if should_schedule(vehicle, t, history, today)
    ]
    logger.debug(
        "Types to schedule for vehicle %s: %s", vehicle.id, [t.value for t in due]
    )
    return due


def next_maintenance(history: Iterable[Maintenance]) -> Optional[Maintenance]:
    """The earliest-dated UPCOMING or DUE record, if any."""
    pending = [m for m in history if m.status in PENDING_STATUSES]
    if not pending:
        return None
    return min(pending, key=lambda m: to_date(m.date))


def maintenance_cost(history: Iterable[Maintenance]) -> float:
    """Total of recorded costs; records without a cost count as nothing."""
    return sum(m.cost for m in history if m.cost is not None)


def maintenance_efficiency(history: Iterable[Maintenance]) -> float:
    """Share of maintenance records that were completed (0 when none)."""
    history = list(history)
    completed = sum(1 for m in history if m.is_completed)
    return safe_divide(completed, len(history))
