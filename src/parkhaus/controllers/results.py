"""Outcomes returned by the park-in and park-out controllers."""

from dataclasses import dataclass
from datetime import timedelta
from decimal import Decimal
from enum import Enum
from typing import Optional

from ..state.models import ParkingSlot


class OutcomeStatus(str, Enum):
    """How a park-in or park-out ended."""

    SUCCESS = "success"
    REJECTED = "rejected"  # validation failure, message for the user
    SKIPPED = "skipped"  # unknown slot or wrong slot state, nothing changed


@dataclass
class ParkInResult:
    """Outcome of a park-in."""

    status: OutcomeStatus
    message: Optional[str] = None
    error: Optional[str] = None
    license_plate: Optional[str] = None
    slot: Optional[ParkingSlot] = None

    @property
    def ok(self) -> bool:
        return self.status == OutcomeStatus.SUCCESS


@dataclass
class ParkOutResult:
    """Outcome of a park-out."""

    status: OutcomeStatus
    message: Optional[str] = None
    fee: Optional[Decimal] = None
    billed_minutes: int = 0
    duration: Optional[timedelta] = None
    license_plate: Optional[str] = None
    slot: Optional[ParkingSlot] = None

    @property
    def ok(self) -> bool:
        return self.status == OutcomeStatus.SUCCESS
