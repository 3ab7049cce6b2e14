"""Dataclasses for derived (never persisted) analytics results."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, TYPE_CHECKING

from records.enums import ExpenseCategory, MaintenanceType, Priority

if TYPE_CHECKING:
    from records.maintenance import Maintenance


class FuelTrend(Enum):
    IMPROVING = "improving"
    DECLINING = "declining"
    STABLE = "stable"


class InsightType(Enum):
    WARNING = "warning"
    SUGGESTION = "suggestion"
    ALERT = "alert"


@dataclass
class MaintenanceRecommendation:
    """A not-yet-logged service the vehicle should get."""

    type: MaintenanceType
    priority: Priority
    estimated_cost: float
    due_mileage: int
    description: str


@dataclass
class MaintenanceSchedule:
    """Logged records split into upcoming/overdue, plus fresh recommendations."""

    upcoming: List["Maintenance"] = field(default_factory=list)
    overdue: List["Maintenance"] = field(default_factory=list)
    recommendations: List[MaintenanceRecommendation] = field(default_factory=list)


@dataclass
class MonthlyExpense:
    month: str
    total: float
    count: int


@dataclass
class ExpenseAnalysis:
    total_by_category: Dict[ExpenseCategory, float]
    monthly_trends: List[MonthlyExpense]
    cost_per_mile: float
    projected_annual_cost: float

    @property
    def total(self) -> float:
        return sum(self.total_by_category.values())


@dataclass
class FuelEfficiencyAnalysis:
    """Fuel economy summary. trend_change is a fraction (-0.1 = 10% worse)."""

    current_mpg: float = 0.0
    average_mpg: float = 0.0
    trend: FuelTrend = FuelTrend.STABLE
    trend_change: float = 0.0
    cost_per_mile: float = 0.0
    projected_monthly_cost: float = 0.0
    mpg_history: List[float] = field(default_factory=list)


@dataclass
class VehicleKPIs:
    """Per-vehicle summary combining every calculator."""

    total_cost_of_ownership: float
    cost_per_mile: float
    current_value: float
    depreciation: float
    depreciation_rate: float
    maintenance_cost: float
    maintenance_efficiency: float
    average_mpg: float
    fuel_efficiency_trend: float
    projected_annual_cost: float
    monthly_average_cost: float
    overdue_count: int = 0
    recommendation_count: int = 0


@dataclass
class Insight:
    type: InsightType
    priority: Priority
    title: str
    message: str
    value: Optional[float] = None
