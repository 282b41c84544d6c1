#!/usr/bin/env python3
"""Tests for validate_fleet schema validation."""

from validate_fleet import check_trip_garages, load_schema, validate_fleet_file, main


class TestLoadSchema:
    """Tests for load_schema function."""

    def test_returns_dict(self):
        schema = load_schema()
        assert isinstance(schema, dict)

    def test_has_expected_structure(self):
        schema = load_schema()
        assert "garages" in schema["properties"]
        assert "vehicles" in schema["properties"]
        assert "trips" in schema["properties"]


class TestValidateFleetFile:
    """Tests for validate_fleet_file function."""

    def test_valid_minimal_returns_no_errors(self, tmp_path):
        path = tmp_path / "valid.yaml"
        path.write_text("""
garages:
  - name: Central
vehicles:
  - capacity: 4
""")
        errors = validate_fleet_file(path, load_schema())
        assert errors == []

    def test_trip_missing_passengers_returns_errors(self, tmp_path):
        path = tmp_path / "invalid.yaml"
        path.write_text("""
garages:
  - name: Central
vehicles: []
trips:
  - origin: 1
    destination: 2
""")
        errors = validate_fleet_file(path, load_schema())
        assert any("Schema validation" in e for e in errors)
        assert any("trips.0" in e for e in errors)

    def test_wrong_type_returns_errors(self, tmp_path):
        path = tmp_path / "invalid.yaml"
        path.write_text("""
garages:
  - name: Central
vehicles:
  - capacity: lots
""")
        errors = validate_fleet_file(path, load_schema())
        assert len(errors) >= 1

    def test_invalid_yaml_returns_parse_error(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("garages: [unclosed\n")
        errors = validate_fleet_file(path, load_schema())
        assert any("YAML" in e for e in errors)

    def test_nonexistent_file_returns_errors(self, tmp_path):
        errors = validate_fleet_file(tmp_path / "does_not_exist.yaml", load_schema())
        assert len(errors) == 1
        assert errors[0].startswith("Error:")


class TestCheckTripGarages:
    """Tests for check_trip_garages function."""

    def test_trips_within_garage_range(self):
        data = {
            "garages": [{"name": "A"}, {"name": "B"}],
            "trips": [{"origin": 1, "destination": 2, "passengers": 3}],
        }
        assert check_trip_garages(data) == []

    def test_no_trips(self):
        assert check_trip_garages({"garages": [], "vehicles": []}) == []

    def test_out_of_range_endpoints(self):
        data = {
            "garages": [{"name": "A"}, {"name": "B"}],
            "trips": [
                {"origin": 0, "destination": 2, "passengers": 1},
                {"origin": 1, "destination": 3, "passengers": 1},
            ],
        }
        assert check_trip_garages(data) == [
            "Trip 0: unknown origin garage 0 (fleet has 2 garages)",
            "Trip 1: unknown destination garage 3 (fleet has 2 garages)",
        ]

    def test_reported_by_validate_fleet_file(self, tmp_path):
        path = tmp_path / "fleet.yaml"
        path.write_text("""
garages:
  - name: Central
vehicles: []
trips:
  - origin: 1
    destination: 5
    passengers: 2
""")
        errors = validate_fleet_file(path, load_schema())
        assert errors == ["Trip 0: unknown destination garage 5 (fleet has 1 garages)"]


class TestMain:
    """Tests for the validate_fleet entry point."""

    def test_bundled_fleets_are_valid(self, capsys):
        assert main([]) == 0
        assert "OK: example.yaml" in capsys.readouterr().out

    def test_reports_failures(self, tmp_path, capsys):
        path = tmp_path / "bad.yaml"
        path.write_text("vehicles: []\n")
        assert main([str(path)]) == 1
        assert "FAIL: bad.yaml" in capsys.readouterr().out
