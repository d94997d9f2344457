"""Tests for park-out fee calculation and transitions."""

from datetime import timedelta
from decimal import Decimal

import pytest

from parkhaus.controllers import ExitController, OutcomeStatus, billed_minutes, calculate_fee

from .conftest import assert_invariant


@pytest.mark.parametrize(
    "duration, minutes",
    [
        (timedelta(0), 0),
        (timedelta(seconds=1), 1),
        (timedelta(seconds=60), 1),
        (timedelta(seconds=61), 2),
        (timedelta(seconds=90), 2),
        (timedelta(hours=2), 120),
        (timedelta(seconds=-5), 0),
    ],
)
def test_billed_minutes_rounds_up(duration, minutes):
    assert billed_minutes(duration) == minutes


def test_calculate_fee():
    assert calculate_fee(timedelta(seconds=90), Decimal("0.50")) == Decimal("1.00")
    assert calculate_fee(timedelta(minutes=3, seconds=1), Decimal("0.50")) == Decimal("2.00")


def test_park_out_after_90_seconds(entry, exit_controller, garage, clock):
    entry.park_in("EG", 3, "ZH 1234")
    clock.advance(seconds=90)

    result = exit_controller.park_out("EG", 3)

    assert result.ok
    assert result.fee == Decimal("1.00")
    assert result.billed_minutes == 2
    assert result.duration == timedelta(seconds=90)
    assert result.license_plate == "ZH 1234"
    assert result.message == "🚗 Have a good trip! Cost: 1.00 CHF"


def test_one_second_bills_a_minute(entry, exit_controller, clock):
    entry.park_in("EG", 1, "ZH 1")
    clock.advance(seconds=1)

    assert exit_controller.park_out("EG", 1).fee == Decimal("0.50")


def test_park_out_frees_slot_for_next_vehicle(entry, exit_controller, garage, clock):
    entry.park_in("1. OG", 2, "BE 42")
    clock.advance(minutes=10)
    exit_controller.park_out("1. OG", 2)

    slot = garage.find_slot("1. OG", 2)
    assert slot.is_free
    assert slot.license_plate is None
    assert slot.entry_time is None
    assert_invariant(garage)

    # Same vehicle may come back, on the same slot
    assert entry.park_in("1. OG", 2, "BE 42").ok


def test_park_out_free_slot_is_noop(exit_controller):
    result = exit_controller.park_out("EG", 1)
    assert result.status == OutcomeStatus.SKIPPED
    assert result.fee is None


def test_park_out_unknown_slot_is_noop(exit_controller):
    assert exit_controller.park_out("Dach", 1).status == OutcomeStatus.SKIPPED


def test_missing_entry_time_bills_zero(exit_controller, garage):
    slot = garage.find_slot("EG", 5)
    # Bypass occupy() to reach the inconsistent state
    slot.is_occupied = True
    slot.license_plate = "ZH 5"

    result = exit_controller.park_out("EG", 5)

    assert result.ok
    assert result.fee == Decimal("0.00")
    assert slot.is_free


def test_custom_rate_and_currency(entry, garage, clock):
    exit_controller = ExitController(garage, price_per_minute=Decimal("0.20"), currency="EUR", clock=clock)
    entry.park_in("EG", 1, "ZH 1")
    clock.advance(minutes=30)

    result = exit_controller.park_out("EG", 1)

    assert result.fee == Decimal("6.00")
    assert result.message.endswith("6.00 EUR")
