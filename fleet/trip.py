"""Trip record and the ledger of trips taken during the current day."""

from dataclasses import dataclass
from datetime import datetime
from typing import Callable, List


@dataclass(frozen=True)
class Trip:
    """A completed trip from one garage to another."""

    id: int
    origin_id: int
    destination_id: int
    vehicle_id: int
    passengers: int
    timestamp: datetime

    @property
    def route(self) -> tuple:
        return (self.origin_id, self.destination_id)

    def __str__(self) -> str:
        return (
            f"Trip#{self.id}: {self.timestamp:%Y-%m-%d %H:%M:%S} - "
            f"G{self.origin_id} -> G{self.destination_id} | "
            f"V{self.vehicle_id} | Pax:{self.passengers}"
        )


class TripLedger:
    """
    Append-only log of trips for the current day.

    Trip ids come from a counter owned by the ledger. Clearing the log at
    the start or end of a day does not reset the counter, so an id is never
    handed out twice by the same ledger.
    """

    def __init__(self, clock: Callable[[], datetime] = datetime.now):
        self._clock = clock
        self._trips: List[Trip] = []
        self._next_id = 1

    @property
    def trips(self) -> List[Trip]:
        """All logged trips in insertion order."""
        return list(self._trips)

    def append(
        self, origin_id: int, destination_id: int, vehicle_id: int, passengers: int
    ) -> Trip:
        """Record a trip under the next id, stamped with the current time."""
        trip = Trip(
            id=self._next_id,
            origin_id=origin_id,
            destination_id=destination_id,
            vehicle_id=vehicle_id,
            passengers=passengers,
            timestamp=self._clock(),
        )
        self._next_id += 1
        self._trips.append(trip)
        return trip

    def list_by_route(self, origin_id: int, destination_id: int) -> List[Trip]:
        """Trips for an exact origin -> destination route, in insertion order."""
        return [
            t
            for t in self._trips
            if t.origin_id == origin_id and t.destination_id == destination_id
        ]

    def count_by_route(self, origin_id: int, destination_id: int) -> int:
        return len(self.list_by_route(origin_id, destination_id))

    def sum_passengers_by_route(self, origin_id: int, destination_id: int) -> int:
        return sum(t.passengers for t in self.list_by_route(origin_id, destination_id))

    def clear(self) -> None:
        self._trips.clear()

    def __len__(self) -> int:
        return len(self._trips)
