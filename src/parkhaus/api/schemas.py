"""API request and response schemas."""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field

from ..controllers.results import OutcomeStatus
from ..state.models import ParkingSlot


class SlotRef(BaseModel):
    """Reference to a slot by floor and number."""

    floor_name: str
    slot_number: int

    def as_slot(self) -> ParkingSlot:
        """Free slot carrying only the identity; the garage resolves the real one."""
        return ParkingSlot(floor_name=self.floor_name, slot_number=self.slot_number)


class ParkInRequest(SlotRef):
    """Park-in request; a given plate replaces the current input text."""

    license_plate: Optional[str] = None


class FloorRequest(BaseModel):
    floor: str


class InputRequest(BaseModel):
    text: str = ""


class FloorsResponse(BaseModel):
    """Available floors and the current selection."""

    floors: list[str]
    selected_floor: str


class SlotsResponse(BaseModel):
    """Slots of one floor."""

    floor: str
    slots: list[ParkingSlot]


class StatusResponse(BaseModel):
    """Response schema for overall garage status."""

    total_slots: int
    free: int
    occupied: int
    free_by_floor: dict[str, int]
    selected_floor: str
    input_text: str
    status_message: str


class ParkInResponse(BaseModel):
    status: OutcomeStatus
    error: Optional[str] = None
    message: str
    license_plate: Optional[str] = None
    slot: Optional[ParkingSlot] = None


class ParkOutResponse(BaseModel):
    status: OutcomeStatus
    message: str
    fee: Optional[Decimal] = None
    currency: str
    billed_minutes: int = 0
    license_plate: Optional[str] = None
    slot: Optional[ParkingSlot] = None


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    started_at: datetime
    uptime_seconds: float = Field(ge=0)
