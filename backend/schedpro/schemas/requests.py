from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from schedpro.schemas.course import CourseRef
from schedpro.schemas.room import Room, RoomAssignment


class _Payload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class ScheduleRequest(_Payload):
    # Slot values stay untyped; malformed ones are read as empty slots downstream.
    schedule: dict[str, Any] = Field(default_factory=dict)
    candidate_slots: list[str] | None = Field(default=None, alias="candidateSlots")


class MoveRequest(_Payload):
    schedule: dict[str, Any] = Field(default_factory=dict)
    course: CourseRef
    target_slot_id: str = Field(min_length=1, alias="targetSlotId")


class SuggestSlotsRequest(_Payload):
    schedule: dict[str, Any] = Field(default_factory=dict)
    course_id: str = Field(min_length=1, alias="courseId")
    slot_id: str = Field(min_length=1, alias="slotId")
    candidate_slots: list[str] | None = Field(default=None, alias="candidateSlots")


class ResolveAllResponse(_Payload):
    schedule: dict[str, list[CourseRef]]
    resolved: int


class SuitabilityRequest(_Payload):
    room: Room
    course: CourseRef


class SuitableRoomsRequest(_Payload):
    rooms: list[Room] = Field(default_factory=list)
    course: CourseRef


class AutoAssignRequest(_Payload):
    courses: list[CourseRef] = Field(default_factory=list)
    rooms: list[Room] = Field(default_factory=list)


class AutoAssignResponse(_Payload):
    assignments: list[RoomAssignment]
    failures: list[CourseRef]
    batch_size: int = Field(alias="batchSize")
    batches: list[list[RoomAssignment]]


class RoomUsageRequest(_Payload):
    schedule: dict[str, Any] = Field(default_factory=dict)
    room: Room
    available_hours: int | None = Field(default=None, ge=1, alias="availableHours")
