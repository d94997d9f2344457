"""State management module."""

from .models import SlotStatus, ParkingSlot, GarageState
from .garage import Garage
from .floor_filter import visible_slots

__all__ = ["SlotStatus", "ParkingSlot", "GarageState", "Garage", "visible_slots"]
