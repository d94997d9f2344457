"""Park-in and park-out controllers."""

from .entry import EntryController
from .exit import ExitController, billed_minutes, calculate_fee
from .plates import (
    DuplicateVehicle,
    EmptyInput,
    InvalidFormat,
    PlateValidationError,
    PlateValidator,
    normalize_plate,
)
from .results import OutcomeStatus, ParkInResult, ParkOutResult

__all__ = [
    "EntryController",
    "ExitController",
    "billed_minutes",
    "calculate_fee",
    "DuplicateVehicle",
    "EmptyInput",
    "InvalidFormat",
    "PlateValidationError",
    "PlateValidator",
    "normalize_plate",
    "OutcomeStatus",
    "ParkInResult",
    "ParkOutResult",
]
