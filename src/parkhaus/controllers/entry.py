"""Park-in: validate a plate and occupy a slot."""

import logging
from datetime import datetime
from typing import Callable, Optional

from ..metrics import record_park_in, record_park_in_rejection
from ..state.garage import Garage
from .plates import DuplicateVehicle, PlateValidationError, PlateValidator
from .results import OutcomeStatus, ParkInResult

logger = logging.getLogger(__name__)


class EntryController:
    """
    Registers a vehicle's entry into a slot.

    Checks run in order and stop at the first failure: empty input,
    plate format, vehicle already parked. Failures come back as a
    rejected ParkInResult and leave the garage untouched.
    """

    def __init__(
        self,
        garage: Garage,
        validator: Optional[PlateValidator] = None,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.garage = garage
        self.validator = validator or PlateValidator()
        self.clock = clock

    def park_in(
        self,
        floor_name: str,
        slot_number: int,
        raw_plate: Optional[str],
    ) -> ParkInResult:
        """
        Park a vehicle on the given slot.

        Args:
            floor_name: Floor of the target slot
            slot_number: Number of the target slot on that floor
            raw_plate: Plate text as entered by the user

        Returns:
            ParkInResult; SKIPPED if the slot is unknown or already occupied
        """
        try:
            plate = self.validator.validate(raw_plate)
            if self.garage.find_by_plate(plate) is not None:
                raise DuplicateVehicle(plate)
        except PlateValidationError as e:
            logger.warning(f"Park-in rejected ({e.kind}): {e.plate!r}")
            record_park_in_rejection(e.kind)
            return ParkInResult(
                status=OutcomeStatus.REJECTED,
                message=e.message,
                error=e.kind,
                license_plate=e.plate or None,
            )

        slot = self.garage.find_slot(floor_name, slot_number)
        if slot is None or slot.is_occupied:
            logger.debug(f"Park-in skipped for {floor_name}/{slot_number}")
            return ParkInResult(status=OutcomeStatus.SKIPPED, license_plate=plate, slot=slot)

        slot.occupy(plate, self.clock())
        logger.info(f"{plate} parked on {slot.floor_name}, slot {slot.slot_number}")

        record_park_in(slot.floor_name)
        self.garage.publish_metrics()

        return ParkInResult(
            status=OutcomeStatus.SUCCESS,
            message=f"✅ {plate} parked on {slot.floor_name}, slot {slot.slot_number}",
            license_plate=plate,
            slot=slot,
        )
