#!/usr/bin/env python3
"""
Check vehicle data files before reports are run on them.

Each file goes through three passes, stopping at the first that fails:
1. Structure: schema.yaml (required fields, enum values, number ranges)
2. Loading: records.load_vehicle_record builds the typed records
3. Consistency: real calendar dates, child records pointing at this
   vehicle, and no duplicate ids within a collection
"""
import argparse
import sys
from datetime import date
from pathlib import Path
from typing import Iterable, List

import yaml
from jsonschema import Draft7Validator

from analytics.calculations import to_date
from records import VehicleRecord, load_vehicle_record

VEHICLES_DIR = Path(__file__).parent / "vehicles"
SCHEMA_PATH = Path(__file__).parent / "schema.yaml"


def load_schema() -> dict:
    """Load the vehicle file JSON schema."""
    with open(SCHEMA_PATH) as f:
        return yaml.safe_load(f)


def _dates_to_strings(value):
    """Unquoted YAML dates load as date objects; the schema expects ISO strings."""
    if isinstance(value, dict):
        return {k: _dates_to_strings(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_dates_to_strings(v) for v in value]
    if isinstance(value, date):
        return value.isoformat()
    return value


def _location(path) -> str:
    return ".".join(str(p) for p in path) or "(root)"


def schema_errors(data, schema: dict) -> List[str]:
    """Every schema violation in a parsed file, ordered by location."""
    validator = Draft7Validator(schema)
    violations = sorted(
        validator.iter_errors(_dates_to_strings(data)),
        key=lambda e: [str(p) for p in e.path],
    )
    return [f"{_location(e.path)}: {e.message}" for e in violations]


def _collections(record: VehicleRecord):
    return (
        ("expenses", record.expenses),
        ("maintenance", record.maintenance),
        ("fuelEntries", record.fuel_entries),
    )


def date_errors(record: VehicleRecord) -> List[str]:
    """Dates that match YYYY-MM-DD but are not on the calendar (e.g. 2025-02-30)."""
    checks = [
        ("vehicle.purchaseDate", record.vehicle.purchase_date),
        ("state.asOfDate", record.as_of_date),
    ]
    for name, items in _collections(record):
        checks.extend((f"{name} {item.id}: date", item.date) for item in items)

    errors = []
    for where, value in checks:
        if value is None:
            continue
        try:
            to_date(str(value))
        except ValueError:
            errors.append(f"{where}: '{value}' is not a valid date")
    return errors


def ownership_errors(record: VehicleRecord) -> List[str]:
    """Child records whose vehicleId names a different vehicle."""
    vehicle_id = record.vehicle.id
    return [
        f"{name} {item.id}: vehicleId '{item.vehicle_id}' does not match "
        f"vehicle '{vehicle_id}'"
        for name, items in _collections(record)
        for item in items
        if item.vehicle_id != vehicle_id
    ]


def duplicate_id_errors(record: VehicleRecord) -> List[str]:
    """Ids used more than once within one collection."""
    errors = []
    for name, items in _collections(record):
        seen = set()
        for item in items:
            if item.id in seen:
                errors.append(f"{name}: duplicate id '{item.id}'")
            seen.add(item.id)
    return errors


def validate_vehicle_file(filepath: Path, schema: dict) -> List[str]:
    """Validate a single vehicle YAML file. Returns list of errors."""
    try:
        with open(filepath) as f:
            data = yaml.safe_load(f)
    except (yaml.YAMLError, ValueError) as e:
        # Unquoted impossible dates (2025-02-30) fail while constructing
        return [f"YAML parse error: {e}"]
    except OSError as e:
        return [f"Error: {e}"]

    errors = [f"Schema validation error at {e}" for e in schema_errors(data, schema)]
    if errors:
        return errors

    try:
        record = load_vehicle_record(filepath)
    except KeyError as e:
        return [f"Load error: missing field {e}"]
    except (ValueError, TypeError, AttributeError) as e:
        return [f"Load error: {e}"]
    if not isinstance(record, VehicleRecord):
        return ["Load error: no vehicle found"]

    return date_errors(record) + ownership_errors(record) + duplicate_id_errors(record)


def collect_files(paths: Iterable[Path]) -> List[Path]:
    """Expand directories to their YAML files; files pass through."""
    files = []
    for path in paths:
        if path.is_dir():
            files.extend(sorted([*path.glob("*.yaml"), *path.glob("*.yml")]))
        else:
            files.append(path)
    return files


def main(argv=None):
    """Validate vehicle files; defaults to the vehicles/ directory."""
    parser = argparse.ArgumentParser(description="Validate vehicle YAML files")
    parser.add_argument(
        "paths",
        nargs="*",
        type=Path,
        default=[VEHICLES_DIR],
        help="Vehicle files or directories (default: vehicles/)",
    )
    args = parser.parse_args(argv)

    missing = [p for p in args.paths if not p.exists()]
    if missing:
        for path in missing:
            print(f"Error: not found: {path}")
        return 1

    files = collect_files(args.paths)
    if not files:
        print("Warning: No YAML files found")
        return 0

    schema = load_schema()
    all_valid = True
    for filepath in files:
        errors = validate_vehicle_file(filepath, schema)
        if errors:
            print(f"FAIL: {filepath}")
            for error in errors:
                print(f"  {error}")
            all_valid = False
        else:
            print(f"OK: {filepath}")

    return 0 if all_valid else 1


if __name__ == "__main__":
    sys.exit(main())
