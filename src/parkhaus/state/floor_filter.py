"""Floor filtering of the slot store."""

from .garage import Garage
from .models import ParkingSlot


def visible_slots(garage: Garage, selected_floor: str) -> list[ParkingSlot]:
    """
    Get the slots on the selected floor.

    Store order is kept, so slots come out numbered 1..N. An unknown
    floor yields an empty list.
    """
    return [slot for slot in garage.slots if slot.floor_name == selected_floor]
