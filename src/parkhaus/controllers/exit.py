"""Park-out: compute the fee and free a slot."""

import logging
from datetime import datetime, timedelta
from decimal import Decimal, ROUND_HALF_UP
from typing import Callable

from ..metrics import record_park_out
from ..state.garage import Garage
from .results import OutcomeStatus, ParkOutResult

logger = logging.getLogger(__name__)

ONE_MINUTE = timedelta(minutes=1)
CENTS = Decimal("0.01")


def billed_minutes(duration: timedelta) -> int:
    """Whole minutes to bill, always rounded up (1 second bills 1 minute)."""
    if duration <= timedelta(0):
        return 0
    whole, rest = divmod(duration, ONE_MINUTE)
    return whole + (1 if rest else 0)


def calculate_fee(duration: timedelta, price_per_minute: Decimal) -> Decimal:
    """Fee for a stay: ceil(minutes) * rate, to the cent."""
    minutes = billed_minutes(duration)
    return (Decimal(minutes) * price_per_minute).quantize(CENTS, rounding=ROUND_HALF_UP)


class ExitController:
    """Releases a slot and charges for the time it was occupied."""

    def __init__(
        self,
        garage: Garage,
        price_per_minute: Decimal = Decimal("0.50"),
        currency: str = "CHF",
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.garage = garage
        self.price_per_minute = Decimal(price_per_minute)
        self.currency = currency
        self.clock = clock

    def park_out(self, floor_name: str, slot_number: int) -> ParkOutResult:
        """
        Free the given slot and compute its fee.

        Args:
            floor_name: Floor of the target slot
            slot_number: Number of the target slot on that floor

        Returns:
            ParkOutResult; SKIPPED if the slot is unknown or already free
        """
        slot = self.garage.find_slot(floor_name, slot_number)
        if slot is None or not slot.is_occupied:
            logger.debug(f"Park-out skipped for {floor_name}/{slot_number}")
            return ParkOutResult(status=OutcomeStatus.SKIPPED, slot=slot)

        now = self.clock()
        if slot.entry_time is None:
            logger.warning(
                f"Slot {slot.floor_name}/{slot.slot_number} occupied without entry time, "
                f"billing zero duration"
            )
            entry_time = now
        else:
            entry_time = slot.entry_time

        duration = max(now - entry_time, timedelta(0))
        minutes = billed_minutes(duration)
        fee = calculate_fee(duration, self.price_per_minute)
        plate = slot.license_plate

        slot.release()
        logger.info(
            f"{plate} left {slot.floor_name}, slot {slot.slot_number} after "
            f"{minutes} min, fee {fee:.2f} {self.currency}"
        )

        record_park_out(slot.floor_name, float(fee), minutes)
        self.garage.publish_metrics()

        return ParkOutResult(
            status=OutcomeStatus.SUCCESS,
            message=f"🚗 Have a good trip! Cost: {fee:.2f} {self.currency}",
            fee=fee,
            billed_minutes=minutes,
            duration=duration,
            license_plate=plate,
            slot=slot,
        )
