"""Fleet roster configuration: the garages, vehicles and trips read from a fleet file."""

from typing import List, Optional

from .vehicle import DEFAULT_CAPACITY


class GarageSpec:
    """A garage to register."""

    def __init__(self, name: str):
        self.name = name


class VehicleSpec:
    """A vehicle to register. Capacity falls back to the fleet default when omitted."""

    def __init__(self, capacity: Optional[int] = None, plate: Optional[str] = None):
        self.capacity = capacity
        self.plate = plate


class TripRequest:
    """A trip to release during a simulated day."""

    def __init__(self, origin: int, destination: int, passengers: int):
        self.origin = origin
        self.destination = destination
        self.passengers = passengers

    def __repr__(self) -> str:
        return f"G{self.origin} -> G{self.destination} ({self.passengers} pax)"


class FleetConfig:
    """Complete fleet file contents."""

    def __init__(
        self,
        garages: List[GarageSpec],
        vehicles: List[VehicleSpec],
        trips: Optional[List[TripRequest]] = None,
        default_capacity: Optional[int] = None,
    ):
        self.garages = garages
        self.vehicles = vehicles
        self.trips = trips or []
        self.default_capacity = default_capacity or DEFAULT_CAPACITY
