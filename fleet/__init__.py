"""
Ground-transport dispatch simulation models.

This package provides the core of a day-based dispatch simulator:
- Vehicle / VehicleRegistry: Vehicle identity, capacity and daily counters
- Garage: Last-in-first-out pool of parked vehicles
- Trip / TripLedger: Trips taken during the current day
- DispatchSession: Day lifecycle, vehicle distribution and trip dispatch
- FleetConfig: Fleet roster read from a YAML file
"""

from .session_state import SessionState
from .errors import (
    DispatchError,
    SessionStateError,
    SessionActiveError,
    SessionNotActiveError,
    NotFoundError,
    InvalidGarageError,
    InvalidOriginError,
    InvalidDestinationError,
    InvalidVehicleError,
    PreconditionError,
    NoGaragesError,
    NoVehiclesError,
    TripValidationError,
    SameGarageError,
    InvalidPassengerCountError,
    ResourceError,
    OriginEmptyError,
)
from .vehicle import DEFAULT_CAPACITY, Vehicle, VehicleRegistry
from .garage import Garage
from .trip import Trip, TripLedger
from .reports import VehicleStatus, GarageSummary, GarageReport, DaySummary
from .session import DispatchSession
from .fleet_config import FleetConfig, GarageSpec, VehicleSpec, TripRequest
from .loader import load_fleet, build_session

__all__ = [
    "SessionState",
    "DispatchError",
    "SessionStateError",
    "SessionActiveError",
    "SessionNotActiveError",
    "NotFoundError",
    "InvalidGarageError",
    "InvalidOriginError",
    "InvalidDestinationError",
    "InvalidVehicleError",
    "PreconditionError",
    "NoGaragesError",
    "NoVehiclesError",
    "TripValidationError",
    "SameGarageError",
    "InvalidPassengerCountError",
    "ResourceError",
    "OriginEmptyError",
    "DEFAULT_CAPACITY",
    "Vehicle",
    "VehicleRegistry",
    "Garage",
    "Trip",
    "TripLedger",
    "VehicleStatus",
    "GarageSummary",
    "GarageReport",
    "DaySummary",
    "DispatchSession",
    "FleetConfig",
    "GarageSpec",
    "VehicleSpec",
    "TripRequest",
    "load_fleet",
    "build_session",
]
