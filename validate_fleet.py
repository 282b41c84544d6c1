#!/usr/bin/env python3
"""Validate fleet YAML files against the schema."""
import sys
from pathlib import Path

import yaml
from jsonschema import validate, ValidationError


def load_schema() -> dict:
    """Load the JSON schema from schema.yaml."""
    schema_path = Path(__file__).parent / "schema.yaml"
    with open(schema_path) as f:
        return yaml.safe_load(f)


def check_trip_garages(data: dict) -> list[str]:
    """
    Check that every trip refers to a garage listed in the file.

    Garage ids follow the order of the garages list, starting at 1, so a
    trip endpoint must fall within 1..len(garages).
    """
    garage_count = len(data.get("garages") or [])
    errors = []
    for index, trip in enumerate(data.get("trips") or []):
        for key in ("origin", "destination"):
            garage_id = trip[key]
            if not 1 <= garage_id <= garage_count:
                errors.append(
                    f"Trip {index}: unknown {key} garage {garage_id} "
                    f"(fleet has {garage_count} garages)"
                )
    return errors


def validate_fleet_file(filepath: Path, schema: dict) -> list[str]:
    """Validate a single fleet YAML file. Returns list of errors."""
    errors = []
    try:
        with open(filepath) as f:
            data = yaml.safe_load(f)
        validate(instance=data, schema=schema)
        errors.extend(check_trip_garages(data))
    except yaml.YAMLError as e:
        errors.append(f"YAML parse error: {e}")
    except ValidationError as e:
        errors.append(f"Schema validation error: {e.message}")
        if e.path:
            errors.append(f"  at path: {'.'.join(str(p) for p in e.path)}")
    except OSError as e:
        errors.append(f"Error: {e}")
    return errors


def main(argv=None):
    """Validate the given fleet files, or every YAML file in fleets/."""
    schema = load_schema()
    paths = [Path(p) for p in (sys.argv[1:] if argv is None else argv)]

    if not paths:
        fleets_dir = Path(__file__).parent / "fleets"
        if not fleets_dir.exists():
            print(f"Error: fleets directory not found: {fleets_dir}")
            return 1
        paths = list(fleets_dir.glob("*.yaml")) + list(fleets_dir.glob("*.yml"))
        if not paths:
            print(f"Warning: No YAML files found in {fleets_dir}")
            return 0

    all_valid = True
    for filepath in sorted(paths):
        errors = validate_fleet_file(filepath, schema)
        if errors:
            print(f"FAIL: {filepath.name}")
            for error in errors:
                print(f"  {error}")
            all_valid = False
        else:
            print(f"OK: {filepath.name}")

    return 0 if all_valid else 1


if __name__ == "__main__":
    sys.exit(main())
