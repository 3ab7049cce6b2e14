"""VehicleReport - every calculator run over one VehicleRecord."""

from dataclasses import dataclass
from datetime import date
from typing import List, Optional

from records.vehicle_record import VehicleRecord

from .calculations import DateLike, to_date
from .expenses import analyze_expenses
from .fuel import analyze_fuel
from .kpis import compute_kpis, generate_insights
from .results import (
    ExpenseAnalysis,
    FuelEfficiencyAnalysis,
    Insight,
    MaintenanceSchedule,
    VehicleKPIs,
)
from .schedule import build_schedule


@dataclass
class VehicleReport:
    """Calculated results for one vehicle as of one date."""

    record: VehicleRecord
    as_of: date
    schedule: MaintenanceSchedule
    expenses: ExpenseAnalysis
    fuel: FuelEfficiencyAnalysis
    kpis: VehicleKPIs
    insights: List[Insight]


def build_report(
    record: VehicleRecord, today: Optional[DateLike] = None
) -> VehicleReport:
    """Run every calculator; `today` overrides the record's as-of date."""
    as_of = to_date(today) if today is not None else to_date(record.as_of_date)
    vehicle = record.vehicle

    kpis = compute_kpis(
        vehicle, record.expenses, record.maintenance, record.fuel_entries, as_of
    )
    return VehicleReport(
        record=record,
        as_of=as_of,
        schedule=build_schedule(vehicle, record.maintenance, as_of),
        expenses=analyze_expenses(record.expenses, vehicle, as_of),
        fuel=analyze_fuel(record.fuel_entries, as_of),
        kpis=kpis,
        insights=generate_insights(kpis, vehicle),
    )
