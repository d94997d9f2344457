"""In-memory slot store for the parking garage."""

import logging
from typing import Optional

from ..config import DEFAULT_FLOORS
from ..metrics import reset_floor_occupancy, update_floor_occupancy, update_slot_counts
from .models import GarageState, ParkingSlot

logger = logging.getLogger(__name__)


class Garage:
    """
    Owns every parking slot of the garage.

    Slots are created once by initialize() (a fixed number per floor)
    and afterwards only mutated in place; none are ever added or removed.
    """

    def __init__(
        self,
        floors: Optional[list[str]] = None,
        slots_per_floor: int = 6,
    ):
        """
        Initialize the garage.

        Args:
            floors: Ordered floor names, defaults to EG, 1. OG, 2. OG
            slots_per_floor: Number of slots created on every floor
        """
        self.floors: list[str] = list(floors) if floors is not None else list(DEFAULT_FLOORS)
        self.slots_per_floor = slots_per_floor
        self._slots: list[ParkingSlot] = []
        self._index: dict[tuple[str, int], ParkingSlot] = {}

        self.initialize()

    def initialize(self) -> None:
        """(Re)create all slots, free, in floor then slot-number order."""
        self._slots = [
            ParkingSlot(floor_name=floor, slot_number=number)
            for floor in self.floors
            for number in range(1, self.slots_per_floor + 1)
        ]
        self._index = {slot.key: slot for slot in self._slots}

        logger.info(
            f"Initialized garage with {len(self._slots)} slots "
            f"on {len(self.floors)} floors"
        )
        reset_floor_occupancy()
        self.publish_metrics()

    @property
    def slots(self) -> list[ParkingSlot]:
        """All slots in store order."""
        return list(self._slots)

    def find_slot(self, floor_name: str, slot_number: int) -> Optional[ParkingSlot]:
        """Get the stored slot for a (floor, number) pair."""
        return self._index.get((floor_name, slot_number))

    def find_by_plate(self, license_plate: str) -> Optional[ParkingSlot]:
        """Get the occupied slot holding exactly this plate."""
        for slot in self._slots:
            if slot.is_occupied and slot.license_plate == license_plate:
                return slot
        return None

    def has_floor(self, floor_name: str) -> bool:
        return floor_name in self.floors

    @property
    def total(self) -> int:
        return len(self._slots)

    def get_occupied_count(self) -> int:
        """Get count of occupied slots."""
        return sum(1 for s in self._slots if s.is_occupied)

    def get_free_count(self) -> int:
        """Get count of free slots."""
        return sum(1 for s in self._slots if s.is_free)

    def get_free_by_floor(self) -> dict[str, int]:
        """Get free slot count keyed by floor name, in floor order."""
        counts = {floor: 0 for floor in self.floors}
        for slot in self._slots:
            if slot.is_free:
                counts[slot.floor_name] += 1
        return counts

    def get_state(self) -> GarageState:
        """Get current garage state."""
        return GarageState(
            total=self.total,
            free=self.get_free_count(),
            occupied=self.get_occupied_count(),
            free_by_floor=self.get_free_by_floor(),
        )

    def publish_metrics(self) -> None:
        """Push current occupancy to the Prometheus gauges."""
        for floor, free in self.get_free_by_floor().items():
            update_floor_occupancy(floor, self.slots_per_floor - free)

        update_slot_counts(
            total=self.total,
            free=self.get_free_count(),
            occupied=self.get_occupied_count(),
        )
