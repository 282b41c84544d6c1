"""Garage class holding a last-in-first-out pool of parked vehicles."""

from typing import List, Optional


class Garage:
    """
    A garage and the vehicles parked in it.

    Vehicles leave in reverse order of arrival: the last vehicle parked is
    the first to depart, like a single-lane garage where only the vehicle
    nearest the door can exit.
    """

    def __init__(self, garage_id: int, name: str):
        self._id = garage_id
        self.name = name
        self._pool: List[int] = []  # bottom -> top

    @property
    def id(self) -> int:
        return self._id

    def park(self, vehicle_id: int) -> None:
        """Park a vehicle on top of the pool."""
        self._pool.append(vehicle_id)

    def depart(self) -> Optional[int]:
        """Remove and return the top vehicle id, or None if the pool is empty."""
        if not self._pool:
            return None
        return self._pool.pop()

    def snapshot(self) -> List[int]:
        """Parked vehicle ids, next-to-depart first."""
        return list(reversed(self._pool))

    def count(self) -> int:
        return len(self._pool)

    def clear(self) -> None:
        self._pool.clear()

    def __len__(self) -> int:
        return len(self._pool)

    def __repr__(self) -> str:
        return f"G{self.id} - {self.name} (Cars:{len(self._pool)})"
