"""FastAPI route definitions."""

import logging
from datetime import datetime
from typing import Optional

from fastapi import APIRouter, HTTPException, Response

from ..metrics import get_metrics
from ..viewmodel import ParkingViewModel, UnknownFloorError
from .schemas import (
    FloorRequest,
    FloorsResponse,
    HealthResponse,
    InputRequest,
    ParkInRequest,
    ParkInResponse,
    ParkOutResponse,
    SlotRef,
    SlotsResponse,
    StatusResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()

# Dependencies injected at startup
_view_model: Optional[ParkingViewModel] = None
_start_time: datetime = datetime.now()


def init_router(view_model: ParkingViewModel) -> None:
    """
    Initialize router with dependencies.

    Args:
        view_model: ParkingViewModel holding the garage and session state
    """
    global _view_model, _start_time

    _view_model = view_model
    _start_time = datetime.now()

    logger.info("API router initialized")


def _get_view_model() -> ParkingViewModel:
    if _view_model is None:
        raise HTTPException(status_code=503, detail="Service not initialized")
    return _view_model


@router.get("/health", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """
    Health check endpoint.

    Returns basic health information about the service.
    """
    uptime = (datetime.now() - _start_time).total_seconds()

    return HealthResponse(
        status="healthy" if _view_model is not None else "starting",
        started_at=_start_time,
        uptime_seconds=max(uptime, 0.0),
    )


@router.get("/floors", response_model=FloorsResponse)
def get_floors() -> FloorsResponse:
    """List floors and the currently selected one."""
    vm = _get_view_model()
    return FloorsResponse(floors=vm.floors, selected_floor=vm.selected_floor)


@router.put("/floor", response_model=FloorsResponse)
def select_floor(request: FloorRequest) -> FloorsResponse:
    """Select the floor whose slots are shown."""
    vm = _get_view_model()
    try:
        vm.selected_floor = request.floor
    except UnknownFloorError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return FloorsResponse(floors=vm.floors, selected_floor=vm.selected_floor)


@router.get("/slots", response_model=SlotsResponse)
def get_slots(floor: Optional[str] = None) -> SlotsResponse:
    """
    Get the slots of a floor.

    Args:
        floor: Floor to read; defaults to the selected floor, which is
            left unchanged either way
    """
    vm = _get_view_model()

    if floor is None:
        return SlotsResponse(floor=vm.selected_floor, slots=vm.visible_slots)

    if not vm.garage.has_floor(floor):
        raise HTTPException(status_code=404, detail=f"Floor '{floor}' not found")

    slots = [s for s in vm.garage.slots if s.floor_name == floor]
    return SlotsResponse(floor=floor, slots=slots)


@router.get("/status", response_model=StatusResponse)
def get_status() -> StatusResponse:
    """
    Get overall garage status.

    Includes free/occupied counts and the current session state.
    """
    vm = _get_view_model()
    state = vm.garage.get_state()

    return StatusResponse(
        total_slots=state.total,
        free=state.free,
        occupied=state.occupied,
        free_by_floor=state.free_by_floor,
        selected_floor=vm.selected_floor,
        input_text=vm.input_text,
        status_message=vm.status_message,
    )


@router.put("/input", response_model=StatusResponse)
def set_input(request: InputRequest) -> StatusResponse:
    """Set the license plate input text."""
    vm = _get_view_model()
    vm.input_text = request.text
    return get_status()


@router.post("/park-in", response_model=ParkInResponse)
def park_in(request: ParkInRequest) -> ParkInResponse:
    """
    Park a vehicle on a slot.

    The plate is checked before the slot is looked up: validation
    failures come back with status "rejected", unknown or occupied
    slots with status "skipped".
    """
    vm = _get_view_model()

    if request.license_plate is not None:
        vm.input_text = request.license_plate

    result = vm.park_in(request.as_slot())

    return ParkInResponse(
        status=result.status,
        error=result.error,
        message=result.message or vm.status_message,
        license_plate=result.license_plate,
        slot=result.slot,
    )


@router.post("/park-out", response_model=ParkOutResponse)
def park_out(request: SlotRef) -> ParkOutResponse:
    """Release a slot and return the fee; unknown or free slots are skipped."""
    vm = _get_view_model()

    result = vm.park_out(request.as_slot())

    return ParkOutResponse(
        status=result.status,
        message=result.message or vm.status_message,
        fee=result.fee,
        currency=vm.exit.currency,
        billed_minutes=result.billed_minutes,
        license_plate=result.license_plate,
        slot=result.slot,
    )


@router.get("/metrics")
def prometheus_metrics() -> Response:
    """
    Prometheus metrics endpoint.

    Returns metrics in Prometheus text format including:
    - parkhaus_park_ins_total: Successful park-ins by floor
    - parkhaus_park_in_rejections_total: Rejected park-ins by reason
    - parkhaus_park_outs_total: Park-outs by floor
    - parkhaus_parking_fee: Histogram of fees charged
    - parkhaus_parking_minutes: Histogram of billed minutes
    - parkhaus_floor_slots_occupied: Occupied slots per floor
    - parkhaus_slots_total / _free / _occupied: Overall slot counts
    """
    return Response(
        content=get_metrics(),
        media_type="text/plain; version=0.0.4; charset=utf-8",
    )
