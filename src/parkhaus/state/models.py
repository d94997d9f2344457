"""Data models for parking slot state."""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, computed_field, model_validator

OCCUPIED_COLOR = "#E11D48"
FREE_COLOR = "#10B981"
FREE_TEXT = "FREE"


class SlotStatus(str, Enum):
    """Status of a parking slot."""

    FREE = "free"
    OCCUPIED = "occupied"


class ParkingSlot(BaseModel):
    """
    A single parking slot, identified by floor name and slot number.

    Occupancy, plate and entry time always change together through
    occupy() and release().
    """

    floor_name: str
    slot_number: int
    is_occupied: bool = False
    license_plate: Optional[str] = None
    entry_time: Optional[datetime] = None

    @model_validator(mode="after")
    def check_occupancy(self) -> "ParkingSlot":
        has_plate = self.license_plate is not None
        has_time = self.entry_time is not None
        if not (self.is_occupied == has_plate == has_time):
            raise ValueError(
                f"slot {self.floor_name}/{self.slot_number}: occupied, plate and "
                f"entry time must be set together"
            )
        return self

    @property
    def key(self) -> tuple[str, int]:
        return (self.floor_name, self.slot_number)

    @computed_field
    @property
    def status(self) -> SlotStatus:
        return SlotStatus.OCCUPIED if self.is_occupied else SlotStatus.FREE

    @computed_field
    @property
    def is_free(self) -> bool:
        return not self.is_occupied

    @computed_field
    @property
    def status_color(self) -> str:
        """Red when occupied, green when free."""
        return OCCUPIED_COLOR if self.is_occupied else FREE_COLOR

    @computed_field
    @property
    def info_text(self) -> str:
        return self.license_plate if self.is_occupied else FREE_TEXT

    def occupy(self, license_plate: str, entry_time: datetime) -> None:
        """Mark the slot occupied by a vehicle."""
        self.license_plate = license_plate
        self.entry_time = entry_time
        self.is_occupied = True

    def release(self) -> None:
        """Free the slot."""
        self.is_occupied = False
        self.license_plate = None
        self.entry_time = None


class GarageState(BaseModel):
    """Overall garage state."""

    total: int
    free: int
    occupied: int
    free_by_floor: dict[str, int]
