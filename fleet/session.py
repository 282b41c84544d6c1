"""DispatchSession - the day lifecycle, vehicle distribution and trip dispatch."""

import logging
from datetime import datetime
from typing import Callable, Dict, List, Optional

from .errors import (
    InvalidDestinationError,
    InvalidGarageError,
    InvalidOriginError,
    InvalidPassengerCountError,
    NoGaragesError,
    NoVehiclesError,
    OriginEmptyError,
    SameGarageError,
    SessionActiveError,
    SessionNotActiveError,
)
from .garage import Garage
from .reports import DaySummary, GarageReport, GarageSummary, VehicleStatus
from .session_state import SessionState
from .trip import Trip, TripLedger
from .vehicle import DEFAULT_CAPACITY, Vehicle, VehicleRegistry

_logger = logging.getLogger(__name__)


def _vehicle_status(vehicle: Vehicle) -> VehicleStatus:
    return VehicleStatus(
        id=vehicle.id,
        capacity=vehicle.capacity,
        plate=vehicle.plate,
        trips_done=vehicle.trips_done,
        passengers_today=vehicle.passengers_today,
    )


class DispatchSession:
    """
    One independent dispatch simulation.

    Owns the vehicle registry, the garages and the trip ledger. Vehicles and
    garages can only be registered while no day is in progress; trips can
    only be released during a day. Queries are allowed at any time.
    """

    def __init__(
        self,
        default_capacity: int = DEFAULT_CAPACITY,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.vehicles = VehicleRegistry(default_capacity)
        self.ledger = TripLedger(clock)
        self._garages: Dict[int, Garage] = {}
        self._next_garage_id = 1
        self._state = SessionState.INACTIVE

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def is_active(self) -> bool:
        return self._state == SessionState.ACTIVE

    # =========================================================================
    # Registration
    # =========================================================================

    def add_vehicle(self, capacity: Optional[int] = None, plate: str = "") -> int:
        """Register a vehicle and return its id."""
        if self.is_active:
            _logger.warning("Rejected vehicle registration: day in progress")
            raise SessionActiveError()
        vehicle_id = self.vehicles.register(capacity, plate)
        _logger.info("Registered %r", self.vehicles.get(vehicle_id))
        return vehicle_id

    def add_garage(self, name: str) -> int:
        """Register a garage and return its id."""
        if self.is_active:
            _logger.warning("Rejected garage registration: day in progress")
            raise SessionActiveError()
        garage = Garage(self._next_garage_id, name)
        self._garages[garage.id] = garage
        self._next_garage_id += 1
        _logger.info("Registered %r", garage)
        return garage.id

    # =========================================================================
    # Day lifecycle
    # =========================================================================

    def start_day(self) -> bool:
        """
        Start a day: distribute every vehicle across the garages.

        Pools are emptied and rebuilt. Vehicle ids are dealt round-robin in
        ascending order over garages in ascending id order, so with garages
        A and B and vehicles 1-5, A gets 1, 3, 5 and B gets 2, 4.

        Returns False without changing anything if a day is already in
        progress.
        """
        if self.is_active:
            _logger.info("Day already in progress")
            return False
        if not self._garages:
            raise NoGaragesError()
        if not len(self.vehicles):
            raise NoVehiclesError()

        garage_ids = self.garage_ids()
        for garage in self._garages.values():
            garage.clear()
        for index, vehicle_id in enumerate(self.vehicles.ids()):
            self._garages[garage_ids[index % len(garage_ids)]].park(vehicle_id)

        self.vehicles.reset_all()
        self.ledger.clear()
        self._state = SessionState.ACTIVE
        _logger.info(
            "Day started: %d vehicles across %d garages",
            len(self.vehicles),
            len(garage_ids),
        )
        return True

    def end_day(self) -> Optional[DaySummary]:
        """
        End the day and return its summary.

        The summary is taken before vehicle counters and the trip log are
        cleared. Returns None if no day is in progress.
        """
        if not self.is_active:
            _logger.info("No day in progress to end")
            return None

        summary = DaySummary(
            vehicles=self.list_vehicles(),
            trips=self.ledger.trips,
        )
        self.vehicles.reset_all()
        self.ledger.clear()
        self._state = SessionState.INACTIVE
        _logger.info(
            "Day ended: %d trips, %d passengers",
            summary.total_trips,
            summary.total_passengers,
        )
        return summary

    # =========================================================================
    # Dispatch
    # =========================================================================

    def release_trip(self, origin_id: int, destination_id: int, passengers: int) -> Trip:
        """
        Send the next vehicle from `origin_id` to `destination_id`.

        Checks run in order: day in progress, origin exists, destination
        exists, origin differs from destination, origin not empty, passenger
        count within the departing vehicle's capacity. A vehicle that fails
        the passenger check is parked back at the origin before the error
        is raised.
        """
        if not self.is_active:
            raise SessionNotActiveError()
        if origin_id not in self._garages:
            raise InvalidOriginError(origin_id)
        if destination_id not in self._garages:
            raise InvalidDestinationError(destination_id)
        if origin_id == destination_id:
            raise SameGarageError(origin_id)

        origin = self._garages[origin_id]
        vehicle_id = origin.depart()
        if vehicle_id is None:
            _logger.warning("Origin G%d is empty", origin_id)
            raise OriginEmptyError(origin_id)

        vehicle = self.vehicles.get(vehicle_id)
        if passengers < 0 or passengers > vehicle.capacity:
            origin.park(vehicle_id)
            _logger.warning(
                "Rejected %d passengers for V%d (capacity %d)",
                passengers,
                vehicle_id,
                vehicle.capacity,
            )
            raise InvalidPassengerCountError(vehicle_id, passengers, vehicle.capacity)

        trip = self.ledger.append(origin_id, destination_id, vehicle_id, passengers)
        self.vehicles.record_trip(vehicle_id, passengers)
        self._garages[destination_id].park(vehicle_id)
        _logger.debug("Released %s", trip)
        return trip

    # =========================================================================
    # Queries
    # =========================================================================

    def has_garage(self, garage_id: int) -> bool:
        return garage_id in self._garages

    def has_vehicle(self, vehicle_id: int) -> bool:
        return vehicle_id in self.vehicles

    def garage_ids(self) -> List[int]:
        """All garage ids, ascending."""
        return sorted(self._garages)

    def garage(self, garage_id: int) -> Garage:
        try:
            return self._garages[garage_id]
        except KeyError:
            raise InvalidGarageError(garage_id) from None

    def vehicle(self, vehicle_id: int) -> VehicleStatus:
        return _vehicle_status(self.vehicles.get(vehicle_id))

    def garage_report(self, garage_id: int) -> GarageReport:
        """Vehicles parked in a garage (next-to-depart first) and their total capacity."""
        garage = self.garage(garage_id)
        return GarageReport(
            id=garage.id,
            name=garage.name,
            vehicles=[self.vehicle(vid) for vid in garage.snapshot()],
        )

    def list_garages(self) -> List[GarageSummary]:
        return [
            GarageSummary(id=g.id, name=g.name, vehicle_count=g.count())
            for g in (self._garages[gid] for gid in self.garage_ids())
        ]

    def list_vehicles(self) -> List[VehicleStatus]:
        return [_vehicle_status(v) for v in self.vehicles]

    def trips_count(self, origin_id: int, destination_id: int) -> int:
        return self.ledger.count_by_route(origin_id, destination_id)

    def list_trips(self, origin_id: int, destination_id: int) -> List[Trip]:
        return self.ledger.list_by_route(origin_id, destination_id)

    def passengers_count(self, origin_id: int, destination_id: int) -> int:
        return self.ledger.sum_passengers_by_route(origin_id, destination_id)
