"""Fuel efficiency: per-fill-up MPG, averages and trend."""

import logging
from datetime import timedelta
from typing import Iterable, List, Optional, Tuple

from records.fuel_entry import FuelEntry

from .calculations import DateLike, mean, resolve_today, safe_divide, to_date
from .results import FuelEfficiencyAnalysis, FuelTrend

logger = logging.getLogger(__name__)

RECENT_FILLUPS = 3
MIN_TREND_POINTS = 6
TREND_TOLERANCE = 0.05
MONTH_DAYS = 30


def sort_entries(entries: Iterable[FuelEntry]) -> List[FuelEntry]:
    """Oldest first; odometer breaks same-day ties."""
    return sorted(entries, key=lambda e: (to_date(e.date), e.mileage))


def fuel_intervals(entries: List[FuelEntry]) -> List[Tuple[float, float, float]]:
    """
    (miles, gallons, cost) for each usable pair of consecutive fill-ups.

    Expects entries sorted oldest first. Each fill-up's volume and cost are
    charged to the miles driven since the previous one. Pairs with no
    forward odometer progress or no volume are dropped.
    """
    intervals = []
    for previous, current in zip(entries, entries[1:]):
        miles = current.mileage - previous.mileage
        if miles <= 0 or current.volume <= 0:
            logger.debug(
                "Skipping fuel entry %s: %s miles on %s gallons",
                current.id,
                miles,
                current.volume,
            )
            continue
        intervals.append((miles, current.volume, current.total_cost))
    return intervals


def classify_trend(mpg_values: List[float]) -> Tuple[FuelTrend, float]:
    """
    Compare the mean of the second half of readings against the first.

    Returns the trend and the relative change. Fewer than
    MIN_TREND_POINTS readings is always STABLE with no change.
    """
    if len(mpg_values) < MIN_TREND_POINTS:
        return FuelTrend.STABLE, 0.0

    half = len(mpg_values) // 2
    first_mean = mean(mpg_values[:half])
    second_mean = mean(mpg_values[half:])
    change = second_mean - first_mean

    if change > TREND_TOLERANCE * first_mean:
        trend = FuelTrend.IMPROVING
    elif change < -TREND_TOLERANCE * first_mean:
        trend = FuelTrend.DECLINING
    else:
        trend = FuelTrend.STABLE
    return trend, safe_divide(change, first_mean)


def projected_monthly_cost(
    entries: Iterable[FuelEntry], today: Optional[DateLike] = None
) -> float:
    """Fuel spend over the trailing 30 days."""
    current_date = resolve_today(today)
    window_start = current_date - timedelta(days=MONTH_DAYS)
    return sum(
        e.total_cost
        for e in entries
        if window_start <= to_date(e.date) <= current_date
    )


def analyze_fuel(
    entries: Iterable[FuelEntry], today: Optional[DateLike] = None
) -> FuelEfficiencyAnalysis:
    """Current and average MPG, trend, cost per mile and monthly cost."""
    entries = sort_entries(entries)
    if len(entries) < 2:
        return FuelEfficiencyAnalysis()

    intervals = fuel_intervals(entries)
    mpg_values = [miles / gallons for miles, gallons, _ in intervals]
    trend, change = classify_trend(mpg_values)

    miles_driven = sum(miles for miles, _, _ in intervals)
    interval_cost = sum(cost for _, _, cost in intervals)

    return FuelEfficiencyAnalysis(
        current_mpg=mean(mpg_values[-RECENT_FILLUPS:]),
        average_mpg=mean(mpg_values),
        trend=trend,
        trend_change=change,
        cost_per_mile=safe_divide(interval_cost, miles_driven),
        projected_monthly_cost=projected_monthly_cost(entries, today),
        mpg_history=mpg_values,
    )
