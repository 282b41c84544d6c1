#!/usr/bin/env python3
"""Tests for Vehicle and VehicleRegistry."""

import pytest
from fleet import Vehicle, VehicleRegistry, InvalidVehicleError, DEFAULT_CAPACITY


class TestVehicle:
    """Tests for Vehicle class."""

    def test_attributes(self):
        """All attributes are stored correctly, counters start at zero."""
        vehicle = Vehicle(3, 8, "ABC-1234")
        assert vehicle.id == 3
        assert vehicle.capacity == 8
        assert vehicle.plate == "ABC-1234"
        assert vehicle.trips_done == 0
        assert vehicle.passengers_today == 0

    def test_plate_is_mutable(self):
        vehicle = Vehicle(1, 4)
        vehicle.plate = "NEW-0001"
        assert vehicle.plate == "NEW-0001"

    def test_reset_day(self):
        vehicle = Vehicle(1, 4)
        vehicle.trips_done = 3
        vehicle.passengers_today = 9
        vehicle.reset_day()
        assert vehicle.trips_done == 0
        assert vehicle.passengers_today == 0


class TestVehicleRegistry:
    """Tests for VehicleRegistry."""

    @pytest.fixture
    def registry(self):
        return VehicleRegistry()

    def test_ids_are_sequential_from_one(self, registry):
        assert registry.register(4) == 1
        assert registry.register(4) == 2
        assert registry.register(4) == 3
        assert registry.ids() == [1, 2, 3]
        assert len(registry) == 3

    def test_stores_capacity_and_plate(self, registry):
        vehicle_id = registry.register(20, "BUS-0001")
        vehicle = registry.get(vehicle_id)
        assert vehicle.capacity == 20
        assert vehicle.plate == "BUS-0001"

    @pytest.mark.parametrize("capacity", [None, 0, -5])
    def test_non_positive_capacity_falls_back_to_default(self, registry, capacity):
        vehicle_id = registry.register(capacity)
        assert registry.get(vehicle_id).capacity == DEFAULT_CAPACITY == 12

    def test_custom_default_capacity(self):
        registry = VehicleRegistry(default_capacity=30)
        assert registry.get(registry.register(0)).capacity == 30

    def test_get_unknown_raises(self, registry):
        with pytest.raises(InvalidVehicleError) as exc:
            registry.get(42)
        assert exc.value.ref_id == 42

    def test_record_trip_accumulates(self, registry):
        vehicle_id = registry.register(4)
        registry.record_trip(vehicle_id, 3)
        registry.record_trip(vehicle_id, 0)
        vehicle = registry.get(vehicle_id)
        assert vehicle.trips_done == 2
        assert vehicle.passengers_today == 3

    def test_reset_daily_counters_only_touches_one_vehicle(self, registry):
        v1 = registry.register(4)
        v2 = registry.register(4)
        registry.record_trip(v1, 2)
        registry.record_trip(v2, 1)
        registry.reset_daily_counters(v1)
        assert registry.get(v1).trips_done == 0
        assert registry.get(v1).passengers_today == 0
        assert registry.get(v2).trips_done == 1

    def test_contains_and_iteration_order(self, registry):
        registry.register(4)
        registry.register(8)
        assert 1 in registry
        assert 3 not in registry
        assert [v.id for v in registry] == [1, 2]
