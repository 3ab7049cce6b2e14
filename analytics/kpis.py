"""Per-vehicle KPIs and threshold-based insights."""

import logging
from typing import Iterable, List, Optional

from records.enums import Priority
from records.expense import Expense
from records.fuel_entry import FuelEntry
from records.maintenance import Maintenance
from records.vehicle import Vehicle

from .calculations import DateLike, resolve_today, safe_divide, to_date, whole_months_between
from .depreciation import current_value, depreciation, depreciation_rate
from .expenses import projected_annual_cost
from .fuel import analyze_fuel
from .recommendations import maintenance_cost, maintenance_efficiency
from .results import Insight, InsightType, VehicleKPIs
from .schedule import build_schedule

logger = logging.getLogger(__name__)

HIGH_COST_PER_MILE = 0.75
LOW_MAINTENANCE_EFFICIENCY = 0.7
DECLINING_FUEL_TREND = -0.1


def total_cost_of_ownership(
    vehicle: Vehicle,
    expenses: Iterable[Expense],
    maintenance: Iterable[Maintenance],
    fuel_entries: Iterable[FuelEntry],
) -> float:
    """Purchase price plus every expense, service cost and fill-up."""
    return (
        (vehicle.purchase_price or 0)
        + sum(e.amount for e in expenses)
        + maintenance_cost(maintenance)
        + sum(f.total_cost for f in fuel_entries)
    )


def monthly_average_cost(
    expenses: Iterable[Expense], maintenance: Iterable[Maintenance]
) -> float:
    """Expense and service spend per month between the first and last record."""
    expenses = list(expenses)
    maintenance = list(maintenance)
    dates = [to_date(e.date) for e in expenses] + [to_date(m.date) for m in maintenance]
    if not dates:
        return 0.0

    total = sum(e.amount for e in expenses) + maintenance_cost(maintenance)
    months = whole_months_between(min(dates), max(dates))
    return total / max(1, months)


def compute_kpis(
    vehicle: Vehicle,
    expenses: Iterable[Expense],
    maintenance: Iterable[Maintenance],
    fuel_entries: Iterable[FuelEntry],
    today: Optional[DateLike] = None,
) -> VehicleKPIs:
    """Combine schedule, depreciation, expense and fuel figures for one vehicle."""
    current_date = resolve_today(today)
    expenses = list(expenses)
    maintenance = list(maintenance)
    fuel_entries = list(fuel_entries)

    tco = total_cost_of_ownership(vehicle, expenses, maintenance, fuel_entries)
    fuel = analyze_fuel(fuel_entries, current_date)
    schedule = build_schedule(vehicle, maintenance, current_date)

    return VehicleKPIs(
        total_cost_of_ownership=tco,
        cost_per_mile=safe_divide(tco, vehicle.mileage),
        current_value=current_value(vehicle, current_date),
        depreciation=depreciation(vehicle, current_date),
        depreciation_rate=depreciation_rate(vehicle, current_date),
        maintenance_cost=maintenance_cost(maintenance),
        maintenance_efficiency=maintenance_efficiency(maintenance),
        average_mpg=fuel.average_mpg,
        fuel_efficiency_trend=fuel.trend_change,
        projected_annual_cost=projected_annual_cost(expenses, current_date),
        monthly_average_cost=monthly_average_cost(expenses, maintenance),
        overdue_count=len(schedule.overdue),
        recommendation_count=len(schedule.recommendations),
    )


def generate_insights(kpis: VehicleKPIs, vehicle: Vehicle) -> List[Insight]:
    """Evaluate each threshold rule independently; several may fire."""
    insights = []

    if kpis.cost_per_mile > HIGH_COST_PER_MILE:
        insights.append(
            Insight(
                type=InsightType.WARNING,
                priority=Priority.MEDIUM,
                title="High cost per mile",
                message=(
                    f"{vehicle.name} costs ${kpis.cost_per_mile:.2f} per mile to own, "
                    f"above the ${HIGH_COST_PER_MILE:.2f} benchmark."
                ),
                value=kpis.cost_per_mile,
            )
        )

    if kpis.maintenance_efficiency < LOW_MAINTENANCE_EFFICIENCY:
        insights.append(
            Insight(
                type=InsightType.SUGGESTION,
                priority=Priority.HIGH,
                title="Maintenance falling behind",
                message=(
                    f"Only {kpis.maintenance_efficiency:.0%} of scheduled maintenance "
                    f"for {vehicle.name} has been completed."
                ),
                value=kpis.maintenance_efficiency,
            )
        )

    if kpis.fuel_efficiency_trend < DECLINING_FUEL_TREND:
        insights.append(
            Insight(
                type=InsightType.ALERT,
                priority=Priority.HIGH,
                title="Fuel efficiency declining",
                message=(
                    f"Fuel economy for {vehicle.name} dropped "
                    f"{abs(kpis.fuel_efficiency_trend):.0%}; check tire pressure, "
                    "air filter and driving habits."
                ),
                value=kpis.fuel_efficiency_trend,
            )
        )

    for insight in insights:
        logger.debug("Insight for vehicle %s: %s", vehicle.id, insight.title)
    return insights
