"""Maintenance schedule: upcoming vs overdue records plus recommendations."""

from typing import Iterable, Optional

from records.enums import MaintenanceStatus
from records.maintenance import Maintenance
from records.vehicle import Vehicle

from .calculations import DateLike, resolve_today, to_date
from .recommendations import recommend
from .results import MaintenanceSchedule

OVERDUE_STATUSES = (MaintenanceStatus.DUE, MaintenanceStatus.OVERDUE)


def build_schedule(
    vehicle: Vehicle,
    history: Iterable[Maintenance],
    today: Optional[DateLike] = None,
) -> MaintenanceSchedule:
    """
    Partition logged maintenance and attach recommendations.

    An UPCOMING record dated today or earlier counts as overdue: the date
    wins over a stale stored status.
    """
    current_date = resolve_today(today)
    history = list(history)

    upcoming = []
    overdue = []
    for record in history:
        if record.status in OVERDUE_STATUSES:
            overdue.append(record)
        elif record.status == MaintenanceStatus.UPCOMING:
            if to_date(record.date) > current_date:
                upcoming.append(record)
            else:
                overdue.append(record)

    return MaintenanceSchedule(
        upcoming=upcoming,
        overdue=overdue,
        recommendations=recommend(vehicle, history),
    )
