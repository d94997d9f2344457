"""Shared fixtures."""

from datetime import datetime, timedelta

import pytest

from parkhaus.controllers import EntryController, ExitController
from parkhaus.state import Garage
from parkhaus.viewmodel import ParkingViewModel


class FakeClock:
    """Clock that only moves when told to."""

    def __init__(self, start: datetime = datetime(2024, 5, 1, 8, 0, 0)):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def garage():
    return Garage()


@pytest.fixture
def entry(garage, clock):
    return EntryController(garage, clock=clock)


@pytest.fixture
def exit_controller(garage, clock):
    return ExitController(garage, clock=clock)


@pytest.fixture
def view_model(garage, entry, exit_controller):
    return ParkingViewModel(garage, entry_controller=entry, exit_controller=exit_controller)


def assert_invariant(garage: Garage) -> None:
    for slot in garage.slots:
        assert slot.is_occupied == (slot.license_plate is not None) == (slot.entry_time is not None)
