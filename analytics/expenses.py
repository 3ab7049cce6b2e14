"""Expense analytics: category totals, monthly trends and projections."""

import logging
from collections import defaultdict
from datetime import date, timedelta
from typing import Dict, Iterable, List, Optional, Tuple

from records.enums import ExpenseCategory, ExpenseType
from records.expense import Expense
from records.vehicle import Vehicle

from .calculations import DateLike, month_key, resolve_today, safe_divide, to_date
from .results import ExpenseAnalysis, MonthlyExpense

logger = logging.getLogger(__name__)

PROJECTION_WINDOW_DAYS = 365

# Checked in order; first keyword hit wins.
FUEL_KEYWORDS = ("gas", "fuel", "shell", "exxon", "bp", "chevron", "mobil", "texaco")
MAINTENANCE_KEYWORDS = ("oil", "tire", "brake", "filter", "tune", "service")
INSURANCE_KEYWORDS = ("insurance", "policy", "premium", "geico", "state farm", "allstate")
REGISTRATION_KEYWORDS = ("registration", "dmv", "license", "tag", "renewal")
REPAIR_KEYWORDS = ("repair", "fix", "replace", "broken")
SERVICE_KEYWORDS = ("wash", "detail", "clean")


def total_by_category(expenses: Iterable[Expense]) -> Dict[ExpenseCategory, float]:
    """Sum of amounts per expense category."""
    totals: Dict[ExpenseCategory, float] = defaultdict(float)
    for expense in expenses:
        totals[expense.category] += expense.amount
    return dict(totals)


def total_by_type(expenses: Iterable[Expense]) -> Dict[ExpenseType, float]:
    """Sum of amounts per expense type."""
    totals: Dict[ExpenseType, float] = defaultdict(float)
    for expense in expenses:
        totals[expense.type] += expense.amount
    return dict(totals)


def monthly_trends(expenses: Iterable[Expense]) -> List[MonthlyExpense]:
    """Totals and counts per calendar month of the expense date, oldest first."""
    buckets: Dict[str, List[float]] = defaultdict(list)
    for expense in expenses:
        buckets[month_key(expense.date)].append(expense.amount)
    return [
        MonthlyExpense(month=month, total=sum(amounts), count=len(amounts))
        for month, amounts in sorted(buckets.items())
    ]


def cost_per_mile(expenses: Iterable[Expense], total_mileage: int) -> float:
    return safe_divide(sum(e.amount for e in expenses), total_mileage)


def projected_annual_cost(
    expenses: Iterable[Expense], today: Optional[DateLike] = None
) -> float:
    """
    Annualize spending over the trailing 365 days.

    The daily rate uses the days actually covered, from the earliest expense
    in the window to today, so a short history is not diluted.
    """
    current_date = resolve_today(today)
    window_start = current_date - timedelta(days=PROJECTION_WINDOW_DAYS)

    recent = [
        e for e in expenses if window_start <= to_date(e.date) <= current_date
    ]
    if not recent:
        return 0.0

    earliest = min(to_date(e.date) for e in recent)
    days_covered = max(1, (current_date - earliest).days)
    daily_average = sum(e.amount for e in recent) / days_covered
    return daily_average * PROJECTION_WINDOW_DAYS


def analyze_expenses(
    expenses: Iterable[Expense],
    vehicle: Vehicle,
    today: Optional[DateLike] = None,
) -> ExpenseAnalysis:
    """Category totals, monthly trends, cost per mile and annual projection."""
    expenses = list(expenses)
    return ExpenseAnalysis(
        total_by_category=total_by_category(expenses),
        monthly_trends=monthly_trends(expenses),
        cost_per_mile=cost_per_mile(expenses, vehicle.mileage),
        projected_annual_cost=projected_annual_cost(expenses, today),
    )


def _mentions(text: str, keywords: Tuple[str, ...]) -> bool:
    return any(k in text for k in keywords)


def categorize_expense(
    description: str, amount: float
) -> Tuple[ExpenseType, ExpenseCategory]:
    """Guess type and category from a free-text description."""
    text = description.lower()

    if _mentions(text, FUEL_KEYWORDS):
        return ExpenseType.FUEL, ExpenseCategory.ROUTINE
    if _mentions(text, MAINTENANCE_KEYWORDS):
        category = ExpenseCategory.EMERGENCY if amount > 500 else ExpenseCategory.ROUTINE
        return ExpenseType.MAINTENANCE, category
    if _mentions(text, INSURANCE_KEYWORDS):
        return ExpenseType.INSURANCE, ExpenseCategory.LEGAL
    if _mentions(text, REGISTRATION_KEYWORDS):
        return ExpenseType.REGISTRATION, ExpenseCategory.LEGAL
    if _mentions(text, REPAIR_KEYWORDS):
        category = ExpenseCategory.EMERGENCY if amount > 1000 else ExpenseCategory.ROUTINE
        return ExpenseType.REPAIR, category
    if _mentions(text, SERVICE_KEYWORDS):
        return ExpenseType.SERVICE, ExpenseCategory.ROUTINE

    logger.debug("No category match for expense description %r", description)
    return ExpenseType.OTHER, ExpenseCategory.OTHER


def predict_next_expense(expenses: Iterable[Expense]) -> Optional[date]:
    """Next fuel purchase, assuming the gap between the last two repeats."""
    fuel_dates = sorted(
        (to_date(e.date) for e in expenses if e.type == ExpenseType.FUEL),
        reverse=True,
    )
    if len(fuel_dates) < 2:
        return None
    latest, previous = fuel_dates[0], fuel_dates[1]
    return latest + (latest - previous)
