#!/usr/bin/env python3
"""
Unified CLI for vehicle cost and maintenance reports.

Commands:
  summary     - Show KPIs and insights for a vehicle
  schedule    - Show overdue/upcoming maintenance and recommendations
  history     - View maintenance history
  expenses    - Show expense totals, monthly trends and projections
  fuel        - Show fuel efficiency
  value       - Show depreciation and current value
  intervals   - List standard maintenance intervals
  categorize  - Guess the type and category of an expense description
"""

import argparse
import logging
import sys
from datetime import date
from pathlib import Path
from tabulate import tabulate
from typing import List, Optional

from analytics import (
    MaintenanceRecommendation,
    RULES,
    SCHEDULE_CHECKS,
    build_report,
    categorize_expense,
    current_value,
    depreciation,
    depreciation_rate,
    maintenance_interval,
    next_maintenance,
    predict_next_maintenance,
    should_schedule,
    total_by_type,
    predict_next_expense,
)
from analytics.calculations import to_date
from records import Maintenance, MaintenanceType, load_vehicle_record

logger = logging.getLogger(__name__)

# =============================================================================
# Formatting helpers
# =============================================================================


def format_miles(miles: Optional[float]) -> str:
    """Format mileage for display."""
    return f"{miles:,.0f}" if miles is not None else "-"


def format_cost(cost: Optional[float]) -> str:
    """Format cost for display."""
    return f"${cost:,.2f}" if cost is not None else "-"


def format_mpg(mpg: Optional[float]) -> str:
    """Format fuel economy for display; 0 means not enough data."""
    return f"{mpg:.1f}" if mpg else "-"


def format_percent(fraction: Optional[float]) -> str:
    """Format a fraction (0.25) as a percentage ('25.0%')."""
    return f"{fraction * 100:.1f}%" if fraction is not None else "-"


def truncate(text: Optional[str], max_len: int = 30) -> str:
    """Truncate text with ellipsis if too long."""
    if text is None:
        return "-"
    if len(text) <= max_len:
        return text
    return text[: max_len - 3] + "..."


def parse_date_arg(value: str) -> date:
    """argparse type for YYYY-MM-DD dates."""
    try:
        return to_date(value)
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"invalid date '{value}' (expected YYYY-MM-DD)"
        )


def print_header(record, as_of: date) -> None:
    vehicle = record.vehicle
    print(f"Vehicle: {vehicle.name}")
    print(f"Current mileage: {vehicle.mileage:,.0f} (as of {as_of.isoformat()})")
    print()


# =============================================================================
# Table builders
# =============================================================================


def make_recommendation_table(
    recommendations: List[MaintenanceRecommendation],
) -> List[List[str]]:
    """Convert recommendations to table rows."""
    return [
        [
            rec.type.display_name,
            rec.priority.display_name,
            format_miles(rec.due_mileage),
            format_cost(rec.estimated_cost),
            rec.description,
        ]
        for rec in recommendations
    ]


def make_maintenance_table(entries: List[Maintenance]) -> List[List[str]]:
    """Convert maintenance records to table rows."""
    return [
        [
            str(entry.date),
            format_miles(entry.mileage),
            entry.type.display_name,
            entry.status.display_name,
            entry.service_provider or "-",
            format_cost(entry.cost),
            truncate(entry.description or entry.notes),
        ]
        for entry in entries
    ]


MAINTENANCE_HEADERS = ["Date", "Mileage", "Type", "Status", "Provider", "Cost", "Notes"]


# =============================================================================
# Summary command
# =============================================================================


def cmd_summary(args):
    """Show KPIs and insights for a vehicle."""
    record = load_vehicle_record(args.vehicle_file)
    report = build_report(record, args.as_of)
    kpis = report.kpis
    print_header(record, report.as_of)

    rows = [
        ["Total cost of ownership", format_cost(kpis.total_cost_of_ownership)],
        ["Cost per mile", format_cost(kpis.cost_per_mile)],
        ["Current value", format_cost(kpis.current_value)],
        ["Depreciation", format_cost(kpis.depreciation)],
        ["Maintenance cost", format_cost(kpis.maintenance_cost)],
        ["Maintenance completed", format_percent(kpis.maintenance_efficiency)],
        ["Average MPG", format_mpg(kpis.average_mpg)],
        ["Fuel efficiency trend", format_percent(kpis.fuel_efficiency_trend)],
        ["Projected annual cost", format_cost(kpis.projected_annual_cost)],
        ["Monthly average cost", format_cost(kpis.monthly_average_cost)],
        ["Overdue maintenance", str(kpis.overdue_count)],
        ["Recommendations", str(kpis.recommendation_count)],
    ]
    print(tabulate(rows, tablefmt="simple"))
    print()

    if report.insights:
        print("INSIGHTS:")
        for insight in report.insights:
            label = f"{insight.type.value.upper()}/{insight.priority.value}"
            print(f"  [{label}] {insight.title}: {insight.message}")
    else:
        print("No insights.")

    return 0


# =============================================================================
# Schedule command
# =============================================================================


def cmd_schedule(args):
    """Show overdue/upcoming maintenance and recommendations."""
    record = load_vehicle_record(args.vehicle_file)
    report = build_report(record, args.as_of)
    schedule = report.schedule
    print_header(record, report.as_of)

    if schedule.overdue:
        print("OVERDUE:")
        print(
            tabulate(
                make_maintenance_table(schedule.overdue),
                headers=MAINTENANCE_HEADERS,
                tablefmt="simple",
            )
        )
        print()

    if schedule.upcoming:
        print("UPCOMING:")
        print(
            tabulate(
                make_maintenance_table(schedule.upcoming),
                headers=MAINTENANCE_HEADERS,
                tablefmt="simple",
            )
        )
        print()

    if schedule.recommendations:
        print("RECOMMENDED:")
        headers = ["Service", "Priority", "Due (mi)", "Est. Cost", "Why"]
        print(
            tabulate(
                make_recommendation_table(
                    sorted(schedule.recommendations, key=lambda r: r.priority.rank)
                ),
                headers=headers,
                tablefmt="simple",
            )
        )
        print()

    if not (schedule.overdue or schedule.upcoming or schedule.recommendations):
        print("Nothing scheduled or recommended.")

    return 0


# =============================================================================
# History command
# =============================================================================


def cmd_history(args):
    """View maintenance history."""
    record = load_vehicle_record(args.vehicle_file)

    entries = record.get_maintenance_sorted(sort_by=args.sort, reverse=not args.asc)

    if args.type:
        needle = args.type.lower()
        entries = [
            e
            for e in entries
            if needle in e.type.value.lower() or needle in e.type.display_name.lower()
        ]

    if args.since:
        entries = [e for e in entries if to_date(e.date) >= args.since]

    total_cost = sum(e.cost for e in entries if e.cost is not None)
    last_svc = record.last_service

    print(f"Vehicle: {record.vehicle.name}")
    print(f"Current mileage: {record.vehicle.mileage:,.0f}")
    if last_svc:
        print(f"Last service: {last_svc.date} @ {last_svc.mileage:,.0f} mi")
    print(f"Total records: {len(record.maintenance)}")
    if args.type or args.since:
        print(f"Showing: {len(entries)} (filtered)")
    if total_cost > 0:
        print(f"Total cost: ${total_cost:,.2f}")
    print()

    if not entries:
        print("No maintenance records found.")
        return 0

    print(
        tabulate(
            make_maintenance_table(entries),
            headers=MAINTENANCE_HEADERS,
            tablefmt="simple",
        )
    )
    return 0


# =============================================================================
# Expenses command
# =============================================================================


def cmd_expenses(args):
    """Show expense totals, monthly trends and projections."""
    record = load_vehicle_record(args.vehicle_file)
    report = build_report(record, args.as_of)
    analysis = report.expenses
    print_header(record, report.as_of)

    if not record.expenses:
        print("No expenses found.")
        return 0

    print(f"Total spent: {format_cost(analysis.total)}")
    print(f"Cost per mile: {format_cost(analysis.cost_per_mile)}")
    print(f"Projected annual cost: {format_cost(analysis.projected_annual_cost)}")
    next_fuel = predict_next_expense(record.expenses)
    if next_fuel:
        print(f"Next fuel purchase expected: {next_fuel.isoformat()}")
    print()

    category_rows = sorted(
        ([c.display_name, format_cost(t)] for c, t in analysis.total_by_category.items()),
        key=lambda row: row[0],
    )
    print("BY CATEGORY:")
    print(tabulate(category_rows, headers=["Category", "Total"], tablefmt="simple"))
    print()

    type_rows = sorted(
        (
            [t.display_name, format_cost(total)]
            for t, total in total_by_type(record.expenses).items()
        ),
        key=lambda row: row[0],
    )
    print("BY TYPE:")
    print(tabulate(type_rows, headers=["Type", "Total"], tablefmt="simple"))
    print()

    month_rows = [
        [m.month, format_cost(m.total), m.count] for m in analysis.monthly_trends
    ]
    print("BY MONTH:")
    print(
        tabulate(month_rows, headers=["Month", "Total", "Count"], tablefmt="simple")
    )
    return 0


# =============================================================================
# Fuel command
# =============================================================================


def cmd_fuel(args):
    """Show fuel efficiency."""
    record = load_vehicle_record(args.vehicle_file)
    report = build_report(record, args.as_of)
    fuel = report.fuel
    print_header(record, report.as_of)

    if len(record.fuel_entries) < 2:
        print("Not enough fuel entries (need at least 2).")
        return 0

    rows = [
        ["Current MPG (last 3)", format_mpg(fuel.current_mpg)],
        ["Average MPG", format_mpg(fuel.average_mpg)],
        ["Trend", f"{fuel.trend.value} ({format_percent(fuel.trend_change)})"],
        ["Fuel cost per mile", format_cost(fuel.cost_per_mile)],
        ["Fuel cost, last 30 days", format_cost(fuel.projected_monthly_cost)],
        ["Fill-ups counted", str(len(fuel.mpg_history))],
    ]
    print(tabulate(rows, tablefmt="simple"))
    return 0


# =============================================================================
# Value command
# =============================================================================


def cmd_value(args):
    """Show depreciation and current value."""
    record = load_vehicle_record(args.vehicle_file)
    vehicle = record.vehicle
    as_of = args.as_of or record.as_of_date
    print(f"Vehicle: {vehicle.name}")

    if vehicle.purchase_price is None or vehicle.purchase_date is None:
        print("Purchase price and date are required to estimate value.")
        return 0

    rows = [
        ["Purchased", f"{vehicle.purchase_date} for {format_cost(vehicle.purchase_price)}"],
        ["Depreciation", format_cost(depreciation(vehicle, as_of))],
        ["Depreciation rate", f"{depreciation_rate(vehicle, as_of):.1f}%"],
        ["Current value", format_cost(current_value(vehicle, as_of))],
    ]
    print(tabulate(rows, tablefmt="simple"))
    return 0


# =============================================================================
# Intervals command
# =============================================================================


def cmd_intervals(args):
    """List standard maintenance intervals and predicted due dates."""
    record = load_vehicle_record(args.vehicle_file)
    as_of = args.as_of or record.as_of_date
    print(f"Vehicle: {record.vehicle.name}")
    print()

    def book_now(maintenance_type):
        if maintenance_type not in SCHEDULE_CHECKS:
            return "-"
        due = should_schedule(
            record.vehicle, maintenance_type, record.maintenance, as_of
        )
        return "yes" if due else "no"

    rows = []
    for maintenance_type in MaintenanceType:
        rule = RULES.get(maintenance_type)
        predicted = predict_next_maintenance(
            record.vehicle, maintenance_type, record.maintenance, as_of
        )
        rows.append(
            [
                maintenance_type.display_name,
                format_miles(maintenance_interval(maintenance_type)),
                format_miles(rule.warning_miles) if rule else "-",
                format_cost(rule.estimated_cost) if rule else "-",
                predicted.isoformat(),
                book_now(maintenance_type),
            ]
        )

    headers = [
        "Service", "Interval (mi)", "Warn At (mi)", "Est. Cost", "Next Due", "Book Now"
    ]
    print(tabulate(rows, headers=headers, tablefmt="simple"))
    print()

    booked = next_maintenance(record.maintenance)
    if booked:
        print(f"Next booked: {booked.type.display_name} on {booked.date}")
    else:
        print("Next booked: none")
    return 0


# =============================================================================
# Categorize command
# =============================================================================


def cmd_categorize(args):
    """Guess the type and category of an expense description."""
    expense_type, category = categorize_expense(args.description, args.amount)
    print(f"Type:     {expense_type.display_name}")
    print(f"Category: {category.display_name}")
    return 0


# =============================================================================
# Main
# =============================================================================


def main():
    parser = argparse.ArgumentParser(
        description="Vehicle cost and maintenance reports",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s vehicles/camry.yaml summary
  %(prog)s vehicles/camry.yaml schedule --as-of 2025-06-01
  %(prog)s vehicles/camry.yaml history --type oil
  %(prog)s vehicles/camry.yaml expenses
  %(prog)s vehicles/camry.yaml fuel
  %(prog)s vehicles/camry.yaml value
  %(prog)s vehicles/camry.yaml intervals
  %(prog)s vehicles/camry.yaml categorize "Shell gas station" 42.10
""",
    )
    parser.add_argument(
        "vehicle_file",
        type=Path,
        help="Path to vehicle YAML file",
    )
    parser.add_argument(
        "--as-of",
        type=parse_date_arg,
        help="Evaluation date in YYYY-MM-DD format (default: file state or today)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log calculation details",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("summary", help="Show KPIs and insights")
    subparsers.add_parser(
        "schedule", help="Show overdue/upcoming maintenance and recommendations"
    )

    history_parser = subparsers.add_parser("history", help="View maintenance history")
    history_parser.add_argument(
        "--type",
        type=str,
        help="Filter to maintenance types containing text (e.g., 'oil', 'brake')",
    )
    history_parser.add_argument(
        "--since",
        type=parse_date_arg,
        help="Show only records since date (YYYY-MM-DD)",
    )
    history_parser.add_argument(
        "--sort",
        choices=["date", "miles", "type"],
        default="date",
        help="Sort order (default: date)",
    )
    history_parser.add_argument(
        "--asc",
        action="store_true",
        help="Sort ascending instead of descending",
    )

    subparsers.add_parser("expenses", help="Show expense analysis")
    subparsers.add_parser("fuel", help="Show fuel efficiency")
    subparsers.add_parser("value", help="Show depreciation and current value")
    subparsers.add_parser("intervals", help="List standard maintenance intervals")

    categorize_parser = subparsers.add_parser(
        "categorize", help="Guess an expense's type and category"
    )
    categorize_parser.add_argument("description", type=str, help="Expense description")
    categorize_parser.add_argument(
        "amount", type=float, nargs="?", default=0.0, help="Expense amount"
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "categorize":
        return cmd_categorize(args)

    # Validate vehicle file exists
    if not args.vehicle_file.exists():
        print(f"Error: File not found: {args.vehicle_file}")
        return 1

    logger.debug("Loading %s", args.vehicle_file)

    # Dispatch to command handler
    if args.command == "summary":
        return cmd_summary(args)
    elif args.command == "schedule":
        return cmd_schedule(args)
    elif args.command == "history":
        return cmd_history(args)
    elif args.command == "expenses":
        return cmd_expenses(args)
    elif args.command == "fuel":
        return cmd_fuel(args)
    elif args.command == "value":
        return cmd_value(args)
    elif args.command == "intervals":
        return cmd_intervals(args)

    return 0


if __name__ == "__main__":
    sys.exit(main() or 0)
