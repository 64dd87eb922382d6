from __future__ import annotations

import logging
from collections.abc import Iterable

from schedpro.schemas.course import CourseRef
from schedpro.schemas.room import (
    AutoAssignResult,
    Room,
    RoomAssignment,
    RoomUsageStats,
    SuitabilityDetails,
    SuitabilityResult,
)
from schedpro.services.schedule_normalizer import Schedule, normalize_schedule

logger = logging.getLogger(__name__)

COMPUTER_LAB_TYPE = "computer lab"
LAB_KEYWORD = "lab"
DEFAULT_AVAILABLE_HOURS = 40


def is_lab_room(room: Room) -> bool:
    room_type = (room.type or "").strip().lower()
    # The "computer lab" equality is already covered by the "lab" substring check.
    return room_type == COMPUTER_LAB_TYPE or LAB_KEYWORD in room_type


def missing_equipment(room: Room, required: Iterable[str]) -> list[str]:
    available = [item.lower() for item in room.equipment]
    return [item for item in required if not any(item.lower() in have for have in available)]


def capacity_utilization(room: Room, course: CourseRef) -> str:
    if room.capacity <= 0:
        return "0%"
    return f"{round(course.expected_enrollment / room.capacity * 100)}%"


def is_room_suitable_for_course(room: Room, course: CourseRef) -> SuitabilityResult:
    """Check a room against a course's capacity, lab and equipment needs.

    Checks run in that order and stop at the first failure. The equipment check
    reports every missing item, not just the first.
    """
    label = course.code or course.label
    if course.expected_enrollment > room.capacity:
        return SuitabilityResult(
            suitable=False,
            message=(
                f"Room {room.name} capacity ({room.capacity}) is insufficient for "
                f"{label} ({course.expected_enrollment} students)"
            ),
        )

    if course.requires_lab and not is_lab_room(room):
        return SuitabilityResult(
            suitable=False,
            message=f"{label} requires a lab, but {room.name} is not a lab facility",
        )

    if course.required_equipment:
        missing = missing_equipment(room, course.required_equipment)
        if missing:
            return SuitabilityResult(
                suitable=False,
                message=f"{room.name} is missing required equipment for {label}: {', '.join(missing)}",
                missing_equipment=missing,
            )

    return SuitabilityResult(
        suitable=True,
        message="Room is suitable for this course",
        details=SuitabilityDetails(
            capacity_utilization=capacity_utilization(room, course),
            available_equipment=list(room.equipment),
        ),
    )


def find_suitable_rooms(rooms: Iterable[Room], course: CourseRef) -> list[Room]:
    return [room for room in rooms if is_room_suitable_for_course(room, course).suitable]


def auto_assign(unassigned_courses: Iterable[CourseRef], rooms: Iterable[Room]) -> AutoAssignResult:
    """Greedily propose the first suitable room, in catalog order, for each course.

    Proposals are independent of each other and of slot occupancy; the caller
    re-runs conflict detection after applying them.
    """
    catalog = list(rooms)
    result = AutoAssignResult()
    for course in unassigned_courses:
        suitable = find_suitable_rooms(catalog, course)
        if not suitable:
            logger.debug("No suitable room for course %s", course.label)
            result.failures.append(course)
            continue
        result.assignments.append(RoomAssignment(course=course, room=suitable[0]))

    logger.info(
        "Auto-assign proposed %d assignment(s), %d course(s) without a suitable room",
        len(result.assignments),
        len(result.failures),
    )
    return result


def assign_room_to_course(course: CourseRef, room: Room) -> CourseRef:
    return course.model_copy(update={"room": room.name, "room_id": room.id})


def apply_assignments(schedule: Schedule, assignments: Iterable[RoomAssignment]) -> dict[str, list[CourseRef]]:
    """Return a copy of the schedule with assigned rooms written onto matching courses."""
    rooms_by_course = {
        str(assignment.course.id): assignment.room
        for assignment in assignments
        if assignment.course.id is not None
    }
    updated: dict[str, list[CourseRef]] = {}
    for slot_id, courses in normalize_schedule(schedule).items():
        updated[slot_id] = [
            assign_room_to_course(course, rooms_by_course[str(course.id)])
            if course.id is not None and str(course.id) in rooms_by_course
            else course
            for course in courses
        ]
    return updated


def _occupies(course: CourseRef, room: Room) -> bool:
    if course.room_id not in (None, "") and room.id not in (None, ""):
        return str(course.room_id) == str(room.id)
    return bool(course.room) and course.room == room.name


def is_room_available_at_slot(schedule: Schedule, room: Room, slot_id: str) -> bool:
    courses = normalize_schedule(schedule).get(slot_id, [])
    return not any(_occupies(course, room) for course in courses)


def room_usage_stats(
    schedule: Schedule,
    room: Room,
    available_hours: int = DEFAULT_AVAILABLE_HOURS,
) -> RoomUsageStats:
    # Each occupied slot counts as one teaching hour.
    course_ids: set[str] = set()
    total_hours = 0
    for courses in normalize_schedule(schedule).values():
        in_room = [course for course in courses if _occupies(course, room)]
        total_hours += len(in_room)
        course_ids.update(str(course.id) if course.id is not None else course.label for course in in_room)

    usage = 0
    if available_hours > 0:
        usage = min(100, round(total_hours / available_hours * 100))
    return RoomUsageStats(total_courses=len(course_ids), total_hours=total_hours, usage_percentage=usage)
