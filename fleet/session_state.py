"""SessionState enum for the dispatch day lifecycle."""

from enum import Enum


class SessionState(Enum):
    """Day lifecycle states. A day moves INACTIVE -> ACTIVE -> INACTIVE."""

    INACTIVE = 1  # Registration allowed, no trips
    ACTIVE = 2  # Vehicles distributed, trips allowed
