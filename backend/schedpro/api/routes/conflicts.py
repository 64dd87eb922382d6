from fastapi import APIRouter

from schedpro.core.config import Settings, get_settings
from schedpro.core.exceptions import ConfigurationError, ResourceNotFoundError, SchedulerError
from schedpro.schemas.conflict import ConflictReport, MoveValidation
from schedpro.schemas.requests import MoveRequest, ResolveAllResponse, ScheduleRequest, SuggestSlotsRequest
from schedpro.services.conflict_service import ConflictService, resolve_all
from schedpro.services.time_slots import weekly_slot_ids

router = APIRouter()


def _candidate_slots(settings: Settings, requested: list[str] | None) -> list[str]:
    if requested is not None:
        return requested
    return weekly_slot_ids(settings.schedule_days, settings.schedule_time_labels)


@router.post("/detect", response_model=ConflictReport)
def detect_conflicts(payload: ScheduleRequest) -> ConflictReport:
    settings = get_settings()
    service = ConflictService(
        payload.schedule,
        candidate_slots=_candidate_slots(settings, payload.candidate_slots),
        prefer_identity_keys=settings.prefer_identity_keys,
    )
    return service.build_report()


@router.post("/validate-move", response_model=MoveValidation)
def validate_move(payload: MoveRequest) -> MoveValidation:
    settings = get_settings()
    service = ConflictService(
        payload.schedule,
        candidate_slots=[],
        prefer_identity_keys=settings.prefer_identity_keys,
    )
    return service.validate_course_move(payload.target_slot_id, payload.course)


@router.post("/suggest-slots", response_model=list[str])
def suggest_slots(payload: SuggestSlotsRequest) -> list[str]:
    if payload.candidate_slots == []:
        raise SchedulerError("candidateSlots must list at least one slot id", details={"field": "candidateSlots"})
    settings = get_settings()
    service = ConflictService(
        payload.schedule,
        candidate_slots=_candidate_slots(settings, payload.candidate_slots),
        prefer_identity_keys=settings.prefer_identity_keys,
    )
    if not service.candidate_slots:
        raise ConfigurationError("schedule_days", "the weekly grid has no time slots")

    course = next(
        (
            item
            for item in service.schedule.get(payload.slot_id, [])
            if item.id is not None and str(item.id) == payload.course_id
        ),
        None,
    )
    if course is None:
        raise ResourceNotFoundError("Course", payload.course_id, slot_id=payload.slot_id)
    return service.suggest_alternative_slots(course, payload.slot_id)


@router.post("/resolve-all", response_model=ResolveAllResponse)
def resolve_all_conflicts(payload: ScheduleRequest) -> ResolveAllResponse:
    settings = get_settings()
    schedule, resolved = resolve_all(
        payload.schedule,
        _candidate_slots(settings, payload.candidate_slots),
        prefer_identity_keys=settings.prefer_identity_keys,
    )
    return ResolveAllResponse(schedule=schedule, resolved=resolved)
