"""Session state shared by whatever presents the garage."""

import logging
from datetime import datetime
from typing import Callable, Optional

from .config import AppConfig
from .controllers.entry import EntryController
from .controllers.exit import ExitController
from .controllers.plates import PlateValidator
from .controllers.results import OutcomeStatus, ParkInResult, ParkOutResult
from .state.floor_filter import visible_slots
from .state.garage import Garage
from .state.models import ParkingSlot

logger = logging.getLogger(__name__)

WELCOME_MESSAGE = "Welcome! Please enter a license plate."

ChangeCallback = Callable[[str], None]


class UnknownFloorError(ValueError):
    """Raised when selecting a floor the garage doesn't have."""


class ParkingViewModel:
    """
    Selected floor, input text, status message and visible slots.

    Subscribers are called with the name of each property that changed.
    Setters only notify on an actual change; visible_slots notifies on
    every recompute.
    """

    def __init__(
        self,
        garage: Garage,
        entry_controller: Optional[EntryController] = None,
        exit_controller: Optional[ExitController] = None,
    ):
        self.garage = garage
        self.entry = entry_controller or EntryController(garage)
        self.exit = exit_controller or ExitController(garage)

        self._subscribers: list[ChangeCallback] = []
        self._selected_floor = garage.floors[0]
        self._input_text = ""
        self._status_message = WELCOME_MESSAGE
        self._visible_slots: list[ParkingSlot] = []

        self.refresh()

    @classmethod
    def from_config(
        cls,
        config: AppConfig,
        clock: Callable[[], datetime] = datetime.now,
    ) -> "ParkingViewModel":
        """Build a garage and its controllers from configuration."""
        garage = Garage(
            floors=config.garage.floors,
            slots_per_floor=config.garage.slots_per_floor,
        )
        entry_controller = EntryController(
            garage,
            validator=PlateValidator(config.validation.plate_pattern),
            clock=clock,
        )
        exit_controller = ExitController(
            garage,
            price_per_minute=config.pricing.price_per_minute,
            currency=config.pricing.currency,
            clock=clock,
        )
        return cls(garage, entry_controller=entry_controller, exit_controller=exit_controller)

    # --- change notification ---

    def subscribe(self, callback: ChangeCallback) -> None:
        if callback not in self._subscribers:
            self._subscribers.append(callback)

    def unsubscribe(self, callback: ChangeCallback) -> None:
        if callback in self._subscribers:
            self._subscribers.remove(callback)

    def _notify(self, name: str) -> None:
        for callback in list(self._subscribers):
            callback(name)

    def _set(self, name: str, value) -> bool:
        attr = f"_{name}"
        if getattr(self, attr) == value:
            return False
        setattr(self, attr, value)
        self._notify(name)
        return True

    # --- properties ---

    @property
    def floors(self) -> list[str]:
        return list(self.garage.floors)

    @property
    def selected_floor(self) -> str:
        return self._selected_floor

    @selected_floor.setter
    def selected_floor(self, value: str) -> None:
        if not self.garage.has_floor(value):
            raise UnknownFloorError(f"Unknown floor: {value!r}")
        if self._set("selected_floor", value):
            logger.debug(f"Selected floor {value}")
        self.refresh()

    @property
    def input_text(self) -> str:
        return self._input_text

    @input_text.setter
    def input_text(self, value: Optional[str]) -> None:
        self._set("input_text", value or "")

    @property
    def status_message(self) -> str:
        return self._status_message

    @status_message.setter
    def status_message(self, value: str) -> None:
        self._set("status_message", value)

    @property
    def visible_slots(self) -> list[ParkingSlot]:
        return list(self._visible_slots)

    def refresh(self) -> None:
        """Recompute the visible slots for the selected floor."""
        self._visible_slots = visible_slots(self.garage, self._selected_floor)
        self._notify("visible_slots")

    # --- commands ---

    def park_in(self, slot: Optional[ParkingSlot]) -> Optional[ParkInResult]:
        """Park the vehicle in input_text on the given slot."""
        if slot is None:
            return None

        result = self.entry.park_in(slot.floor_name, slot.slot_number, self.input_text)

        if result.status == OutcomeStatus.REJECTED:
            self.status_message = result.message
        elif result.status == OutcomeStatus.SUCCESS:
            self.status_message = result.message
            self.input_text = ""
            self.refresh()

        return result

    def park_out(self, slot: Optional[ParkingSlot]) -> Optional[ParkOutResult]:
        """Release the given slot and report the fee."""
        if slot is None:
            return None

        result = self.exit.park_out(slot.floor_name, slot.slot_number)

        if result.status == OutcomeStatus.SUCCESS:
            self.status_message = result.message
            self.refresh()

        return result
