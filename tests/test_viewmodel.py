"""Tests for the session view-model."""

from decimal import Decimal

import pytest

from parkhaus.config import AppConfig
from parkhaus.viewmodel import WELCOME_MESSAGE, ParkingViewModel, UnknownFloorError

from .conftest import FakeClock, assert_invariant


@pytest.fixture
def changes(view_model):
    seen = []
    view_model.subscribe(seen.append)
    return seen


def test_initial_state(view_model):
    assert view_model.floors == ["EG", "1. OG", "2. OG"]
    assert view_model.selected_floor == "EG"
    assert view_model.input_text == ""
    assert view_model.status_message == WELCOME_MESSAGE
    assert [s.key for s in view_model.visible_slots] == [("EG", n) for n in range(1, 7)]


def test_select_floor_updates_visible_slots(view_model, changes):
    view_model.selected_floor = "1. OG"

    assert [s.key for s in view_model.visible_slots] == [("1. OG", n) for n in range(1, 7)]
    assert changes == ["selected_floor", "visible_slots"]


def test_select_unknown_floor(view_model):
    with pytest.raises(UnknownFloorError):
        view_model.selected_floor = "3. OG"
    assert view_model.selected_floor == "EG"


def test_setters_notify_only_on_change(view_model, changes):
    view_model.input_text = "ZH 1"
    view_model.input_text = "ZH 1"
    assert changes == ["input_text"]


def test_unsubscribe(view_model, changes):
    view_model.unsubscribe(changes.append)
    view_model.input_text = "ZH 1"
    assert changes == []


def test_park_in_success(view_model, changes):
    view_model.input_text = "zh 1234"
    slot = view_model.visible_slots[0]

    result = view_model.park_in(slot)

    assert result.ok
    assert view_model.input_text == ""
    assert view_model.status_message == "✅ ZH 1234 parked on EG, slot 1"
    assert view_model.visible_slots[0].info_text == "ZH 1234"
    assert "visible_slots" in changes


def test_park_in_rejected_sets_message(view_model):
    view_model.input_text = "Z 123"

    result = view_model.park_in(view_model.visible_slots[0])

    assert not result.ok
    assert view_model.status_message == "⚠️ Invalid format! (e.g. 'ZH 12345')"
    assert view_model.input_text == "Z 123"
    assert view_model.visible_slots[0].is_free


def test_park_in_empty_input(view_model):
    view_model.input_text = "   "
    view_model.park_in(view_model.visible_slots[0])
    assert view_model.status_message == "⚠️ Please enter a license plate!"


def test_park_in_skipped_keeps_message(view_model, changes):
    view_model.input_text = "ZH 1"
    view_model.park_in(view_model.visible_slots[0])
    message = view_model.status_message

    view_model.input_text = "ZH 2"
    changes.clear()
    view_model.park_in(view_model.visible_slots[0])

    assert view_model.status_message == message
    assert changes == []


def test_park_in_none_slot(view_model):
    assert view_model.park_in(None) is None
    assert view_model.park_out(None) is None


def test_park_out_reports_fee(view_model, clock):
    view_model.input_text = "ZH 999"
    slot = view_model.visible_slots[2]
    view_model.park_in(slot)
    clock.advance(seconds=90)

    result = view_model.park_out(slot)

    assert result.fee == Decimal("1.00")
    assert view_model.status_message == "🚗 Have a good trip! Cost: 1.00 CHF"
    assert view_model.visible_slots[2].is_free
    assert_invariant(view_model.garage)


def test_duplicate_across_floors(view_model):
    view_model.input_text = "ZH 999"
    view_model.park_in(view_model.visible_slots[0])

    view_model.selected_floor = "1. OG"
    view_model.input_text = "ZH 999"
    result = view_model.park_in(view_model.visible_slots[0])

    assert result.error == "duplicate_vehicle"
    assert view_model.visible_slots[0].is_free


def test_from_config():
    config = AppConfig(
        garage={"floors": ["P1", "P2"], "slots_per_floor": 4},
        pricing={"price_per_minute": "1.00", "currency": "EUR"},
    )
    clock = FakeClock()
    vm = ParkingViewModel.from_config(config, clock=clock)

    assert vm.selected_floor == "P1"
    assert len(vm.visible_slots) == 4

    vm.input_text = "AB 1"
    vm.park_in(vm.visible_slots[0])
    clock.advance(minutes=2, seconds=5)
    vm.park_out(vm.visible_slots[0])

    assert vm.status_message == "🚗 Have a good trip! Cost: 3.00 EUR"
