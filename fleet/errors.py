"""Exception hierarchy for dispatch operations."""

from typing import Optional


class DispatchError(Exception):
    """Base exception for all dispatch errors."""


# =============================================================================
# State errors
# =============================================================================


class SessionStateError(DispatchError):
    """Operation is not valid in the current day state."""


class SessionActiveError(SessionStateError):
    """Registration attempted while a day is in progress."""

    def __init__(self, message: str = "A day is in progress; end it first."):
        super().__init__(message)


class SessionNotActiveError(SessionStateError):
    """Trip released while no day is in progress."""

    def __init__(self, message: str = "No day in progress; start a day first."):
        super().__init__(message)


# =============================================================================
# Not-found errors
# =============================================================================


class NotFoundError(DispatchError):
    """A referenced garage or vehicle id does not exist."""

    label = "id"

    def __init__(self, ref_id: int, message: Optional[str] = None):
        self.ref_id = ref_id
        super().__init__(message or f"Invalid {self.label}: {ref_id}")


class InvalidGarageError(NotFoundError):
    label = "garage"


class InvalidOriginError(NotFoundError):
    label = "origin garage"


class InvalidDestinationError(NotFoundError):
    label = "destination garage"


class InvalidVehicleError(NotFoundError):
    label = "vehicle"


# =============================================================================
# Precondition errors
# =============================================================================


class PreconditionError(DispatchError):
    """Requirements for starting a day are unmet."""


class NoGaragesError(PreconditionError):
    def __init__(self, message: str = "No garages registered."):
        super().__init__(message)


class NoVehiclesError(PreconditionError):
    def __init__(self, message: str = "No vehicles registered."):
        super().__init__(message)


# =============================================================================
# Validation errors
# =============================================================================


class TripValidationError(DispatchError):
    """Trip request is semantically invalid."""


class SameGarageError(TripValidationError):
    def __init__(self, garage_id: int):
        self.garage_id = garage_id
        super().__init__(f"Origin and destination are the same garage: {garage_id}")


class InvalidPassengerCountError(TripValidationError):
    def __init__(self, vehicle_id: int, passengers: int, capacity: int):
        self.vehicle_id = vehicle_id
        self.passengers = passengers
        self.capacity = capacity
        super().__init__(
            f"Invalid passenger count {passengers}: "
            f"capacity of vehicle V{vehicle_id} is {capacity}"
        )


# =============================================================================
# Resource errors
# =============================================================================


class ResourceError(DispatchError):
    """No resource available to satisfy the request."""


class OriginEmptyError(ResourceError):
    def __init__(self, garage_id: int):
        self.garage_id = garage_id
        super().__init__(
            f"Origin garage G{garage_id} is empty; wait for a vehicle to return."
        )
