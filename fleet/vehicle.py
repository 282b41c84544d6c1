"""Vehicle class and the registry that owns vehicle identity and counters."""

from typing import Dict, Iterator, List, Optional

from .errors import InvalidVehicleError

DEFAULT_CAPACITY = 12


class Vehicle:
    """A registered vehicle with its capacity and counters for the current day."""

    def __init__(self, vehicle_id: int, capacity: int = DEFAULT_CAPACITY, plate: str = ""):
        self._id = vehicle_id
        self._capacity = capacity
        self.plate = plate
        self.trips_done = 0
        self.passengers_today = 0

    @property
    def id(self) -> int:
        return self._id

    @property
    def capacity(self) -> int:
        return self._capacity

    def reset_day(self) -> None:
        self.trips_done = 0
        self.passengers_today = 0

    def __repr__(self) -> str:
        return (
            f"V{self.id} (Cap:{self.capacity}, Trips:{self.trips_done}, "
            f"PaxToday:{self.passengers_today})"
        )


class VehicleRegistry:
    """Owns every registered vehicle, keyed by sequential id starting at 1."""

    def __init__(self, default_capacity: int = DEFAULT_CAPACITY):
        self.default_capacity = default_capacity
        self._vehicles: Dict[int, Vehicle] = {}
        self._next_id = 1

    def register(self, capacity: Optional[int] = None, plate: str = "") -> int:
        """
        Register a new vehicle and return its id.

        A missing or non-positive capacity falls back to the default capacity.
        """
        if capacity is None or capacity <= 0:
            capacity = self.default_capacity
        vehicle = Vehicle(self._next_id, capacity, plate or "")
        self._vehicles[vehicle.id] = vehicle
        self._next_id += 1
        return vehicle.id

    def get(self, vehicle_id: int) -> Vehicle:
        """Find a vehicle by id."""
        try:
            return self._vehicles[vehicle_id]
        except KeyError:
            raise InvalidVehicleError(vehicle_id) from None

    def reset_daily_counters(self, vehicle_id: int) -> None:
        self.get(vehicle_id).reset_day()

    def reset_all(self) -> None:
        for vehicle in self._vehicles.values():
            vehicle.reset_day()

    def record_trip(self, vehicle_id: int, passengers: int) -> None:
        """Count one trip carrying `passengers` against a vehicle. Not validated."""
        vehicle = self.get(vehicle_id)
        vehicle.trips_done += 1
        vehicle.passengers_today += passengers

    def ids(self) -> List[int]:
        """All vehicle ids, ascending."""
        return sorted(self._vehicles)

    def __contains__(self, vehicle_id: object) -> bool:
        return vehicle_id in self._vehicles

    def __len__(self) -> int:
        return len(self._vehicles)

    def __iter__(self) -> Iterator[Vehicle]:
        return (self._vehicles[vid] for vid in self.ids())
