"""Flask web application serving vehicle cost and maintenance reports as JSON."""

import os
from dataclasses import fields, is_dataclass
from datetime import date
from enum import Enum
from pathlib import Path

from flask import Flask, abort, jsonify, request

# Add parent directory to path for package imports
import sys
sys.path.insert(0, str(Path(__file__).parent.parent))

from analytics import (
    build_report,
    next_maintenance,
    predict_next_expense,
    predict_next_maintenance,
    total_by_type,
    types_to_schedule,
)
from analytics.calculations import to_date
from analytics.report import VehicleReport
from records import MaintenanceType, load_vehicle_record

app = Flask(__name__)
app.secret_key = os.environ.get("SECRET_KEY", "dev-secret-key-change-in-prod")

# Path to vehicles directory (relative to project root unless overridden)
app.config["VEHICLES_DIR"] = Path(
    os.environ.get("REVREG_VEHICLES_DIR", Path(__file__).parent.parent / "vehicles")
)


def get_vehicle_files():
    """Get all vehicle YAML files."""
    return sorted(Path(app.config["VEHICLES_DIR"]).glob("*.yaml"))


def get_vehicle_id(path: Path) -> str:
    """Extract vehicle ID from path (filename without extension)."""
    return path.stem


def get_vehicle_path(vehicle_id: str) -> Path:
    """Get full path for a vehicle ID."""
    return Path(app.config["VEHICLES_DIR"]) / f"{vehicle_id}.yaml"


def to_jsonable(value):
    """Convert records, result dataclasses, enums and dates to JSON types."""
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, date):
        return value.isoformat()
    if is_dataclass(value):
        return {f.name: to_jsonable(getattr(value, f.name)) for f in fields(value)}
    if isinstance(value, dict):
        return {to_jsonable(k): to_jsonable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_jsonable(v) for v in value]
    if hasattr(value, "__dict__"):
        return {
            k: to_jsonable(v) for k, v in vars(value).items() if not k.startswith("_")
        }
    return value


def get_as_of():
    """Optional `?as_of=YYYY-MM-DD` evaluation date, 400 if malformed."""
    value = request.args.get("as_of")
    if not value:
        return None
    try:
        return to_date(value)
    except ValueError:
        abort(400, description=f"Invalid as_of date '{value}' (expected YYYY-MM-DD)")


def load_report(vehicle_id: str) -> VehicleReport:
    """Load a vehicle file and run every calculator, 404 if missing."""
    path = get_vehicle_path(vehicle_id)
    if not path.exists():
        abort(404, description=f"Vehicle '{vehicle_id}' not found")
    record = load_vehicle_record(path)
    return build_report(record, get_as_of())


@app.errorhandler(400)
def bad_request(error):
    return jsonify({"error": error.description}), 400


@app.errorhandler(404)
def not_found(error):
    return jsonify({"error": error.description}), 404


@app.route("/")
def index():
    """All vehicles with headline numbers."""
    as_of = get_as_of()
    vehicles = []
    for path in get_vehicle_files():
        record = load_vehicle_record(path)
        report = build_report(record, as_of)
        vehicles.append({
            "id": get_vehicle_id(path),
            "name": record.vehicle.name,
            "mileage": record.vehicle.mileage,
            "status": record.vehicle.status.value,
            "costPerMile": report.kpis.cost_per_mile,
            "overdue": report.kpis.overdue_count,
            "recommendations": report.kpis.recommendation_count,
            "insights": len(report.insights),
        })

    return jsonify({"vehicles": vehicles})


@app.route("/vehicle/<vehicle_id>")
def vehicle_detail(vehicle_id: str):
    """Vehicle snapshot with KPIs."""
    report = load_report(vehicle_id)
    return jsonify({
        "id": vehicle_id,
        "asOf": report.as_of.isoformat(),
        "vehicle": to_jsonable(report.record.vehicle),
        "kpis": to_jsonable(report.kpis),
    })


@app.route("/vehicle/<vehicle_id>/schedule")
def vehicle_schedule(vehicle_id: str):
    """Overdue/upcoming maintenance, recommendations, booking and predicted due dates."""
    report = load_report(vehicle_id)
    record = report.record
    predictions = {
        t.value: predict_next_maintenance(
            record.vehicle, t, record.maintenance, report.as_of
        ).isoformat()
        for t in MaintenanceType
    }
    schedule = to_jsonable(report.schedule)
    schedule["predictedDueDates"] = predictions
    to_book = types_to_schedule(record.vehicle, record.maintenance, report.as_of)
    schedule["shouldSchedule"] = [t.value for t in to_book]
    schedule["nextMaintenance"] = to_jsonable(next_maintenance(record.maintenance))
    return jsonify(schedule)


@app.route("/vehicle/<vehicle_id>/expenses")
def vehicle_expenses(vehicle_id: str):
    """Expense analysis."""
    report = load_report(vehicle_id)
    expenses = to_jsonable(report.expenses)
    expenses["totalByType"] = to_jsonable(total_by_type(report.record.expenses))
    expenses["nextFuelPurchase"] = to_jsonable(
        predict_next_expense(report.record.expenses)
    )
    return jsonify(expenses)


@app.route("/vehicle/<vehicle_id>/fuel")
def vehicle_fuel(vehicle_id: str):
    """Fuel efficiency analysis."""
    return jsonify(to_jsonable(load_report(vehicle_id).fuel))


@app.route("/vehicle/<vehicle_id>/insights")
def vehicle_insights(vehicle_id: str):
    """Threshold-based insights."""
    return jsonify({"insights": to_jsonable(load_report(vehicle_id).insights)})


if __name__ == "__main__":
    # Using 5001 to avoid conflict with macOS AirPlay Receiver on 5000
    app.run(debug=True, host="0.0.0.0", port=5001)
