"""
Vehicle cost and maintenance analytics.

Pure functions over a vehicle's records:
- recommend / build_schedule: Maintenance recommendations and schedule
- should_schedule / next_maintenance: What to book now, what is booked next
- depreciation / current_value: Valuation
- analyze_expenses: Category totals, monthly trends, projections
- analyze_fuel: MPG, trend, fuel cost
- compute_kpis / generate_insights: Per-vehicle summary and insights
- build_report: All of the above for one VehicleRecord

Every function taking `today` defaults to the current date.
"""

from .results import (
    FuelTrend,
    InsightType,
    MaintenanceRecommendation,
    MaintenanceSchedule,
    MonthlyExpense,
    ExpenseAnalysis,
    FuelEfficiencyAnalysis,
    VehicleKPIs,
    Insight,
)
from .rules import (
    RULES,
    SCHEDULE_CHECKS,
    MaintenanceRule,
    ScheduleCheck,
    maintenance_interval,
)
from .recommendations import (
    recommend,
    predict_next_maintenance,
    should_schedule,
    types_to_schedule,
    next_maintenance,
    maintenance_cost,
    maintenance_efficiency,
)
from .schedule import build_schedule
from .depreciation import depreciation, current_value, depreciation_rate
from .expenses import (
    analyze_expenses,
    total_by_type,
    categorize_expense,
    predict_next_expense,
)
from .fuel import analyze_fuel
from .kpis import (
    compute_kpis,
    generate_insights,
    total_cost_of_ownership,
    monthly_average_cost,
)
from .report import VehicleReport, build_report

__all__ = [
    "FuelTrend",
    "InsightType",
    "MaintenanceRecommendation",
    "MaintenanceSchedule",
    "MonthlyExpense",
    "ExpenseAnalysis",
    "FuelEfficiencyAnalysis",
    "VehicleKPIs",
    "Insight",
    "RULES",
    "SCHEDULE_CHECKS",
    "MaintenanceRule",
    "ScheduleCheck",
    "maintenance_interval",
    "recommend",
    "predict_next_maintenance",
    "should_schedule",
    "types_to_schedule",
    "next_maintenance",
    "maintenance_cost",
    "maintenance_efficiency",
    "build_schedule",
    "depreciation",
    "current_value",
    "depreciation_rate",
    "analyze_expenses",
    "total_by_type",
    "categorize_expense",
    "predict_next_expense",
    "analyze_fuel",
    "compute_kpis",
    "generate_insights",
    "total_cost_of_ownership",
    "monthly_average_cost",
    "VehicleReport",
    "build_report",
]
