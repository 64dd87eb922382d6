from fastapi import APIRouter

from schedpro.core.config import get_settings
from schedpro.schemas.requests import (
    AutoAssignRequest,
    AutoAssignResponse,
    RoomUsageRequest,
    SuitabilityRequest,
    SuitableRoomsRequest,
)
from schedpro.schemas.room import Room, RoomUsageStats, SuitabilityResult
from schedpro.services.batching import iter_batches
from schedpro.services.room_matcher import (
    auto_assign,
    find_suitable_rooms,
    is_room_suitable_for_course,
    room_usage_stats,
)

router = APIRouter()


@router.post("/suitability", response_model=SuitabilityResult)
def check_suitability(payload: SuitabilityRequest) -> SuitabilityResult:
    return is_room_suitable_for_course(payload.room, payload.course)


@router.post("/suitable", response_model=list[Room])
def list_suitable_rooms(payload: SuitableRoomsRequest) -> list[Room]:
    return find_suitable_rooms(payload.rooms, payload.course)


@router.post("/auto-assign", response_model=AutoAssignResponse)
def auto_assign_rooms(payload: AutoAssignRequest) -> AutoAssignResponse:
    batch_size = get_settings().auto_assign_batch_size
    result = auto_assign(payload.courses, payload.rooms)
    return AutoAssignResponse(
        assignments=result.assignments,
        failures=result.failures,
        batch_size=batch_size,
        batches=list(iter_batches(result.assignments, batch_size)),
    )


@router.post("/usage", response_model=RoomUsageStats)
def room_usage(payload: RoomUsageRequest) -> RoomUsageStats:
    available_hours = payload.available_hours
    if available_hours is None:
        available_hours = get_settings().weekly_available_hours
    return room_usage_stats(payload.schedule, payload.room, available_hours)
