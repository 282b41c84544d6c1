"""Read-only records returned by session queries and end-of-day reporting."""

from dataclasses import dataclass, field
from typing import List

from .trip import Trip


@dataclass(frozen=True)
class VehicleStatus:
    """Point-in-time view of a vehicle."""

    id: int
    capacity: int
    plate: str = ""
    trips_done: int = 0
    passengers_today: int = 0


@dataclass(frozen=True)
class GarageSummary:
    """A garage and how many vehicles are parked in it."""

    id: int
    name: str
    vehicle_count: int = 0


@dataclass(frozen=True)
class GarageReport:
    """Vehicles parked in a garage, next-to-depart first."""

    id: int
    name: str
    vehicles: List[VehicleStatus] = field(default_factory=list)

    @property
    def vehicle_count(self) -> int:
        return len(self.vehicles)

    @property
    def potential_capacity(self) -> int:
        """Total passengers the parked vehicles could carry."""
        return sum(v.capacity for v in self.vehicles)


@dataclass(frozen=True)
class DaySummary:
    """End-of-day totals, taken before counters and the trip log are cleared."""

    vehicles: List[VehicleStatus] = field(default_factory=list)
    trips: List[Trip] = field(default_factory=list)

    @property
    def total_passengers(self) -> int:
        return sum(v.passengers_today for v in self.vehicles)

    @property
    def total_trips(self) -> int:
        return sum(v.trips_done for v in self.vehicles)
