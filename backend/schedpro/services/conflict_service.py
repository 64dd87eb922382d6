from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import Dict, List, Optional, Tuple

from schedpro.schemas.conflict import Conflict, ConflictReport, MoveValidation, ResolutionSuggestion
from schedpro.schemas.course import CourseRef
from schedpro.services.schedule_normalizer import Schedule, normalize_schedule
from schedpro.services.time_slots import parse_slot_id, weekly_slot_ids

logger = logging.getLogger(__name__)

NormalizedSchedule = Dict[str, List[CourseRef]]

DEFAULT_PREFER_IDENTITY_KEYS = True


def _present(value) -> bool:
    return value not in (None, "")


def _uses_identity(courses: Iterable[CourseRef], id_field: str, name_field: str, prefer: bool) -> bool:
    """Identifiers decide only when every course naming the party also carries one.

    A course known by display name alone would otherwise never match an
    id-carrying course with the same name, so such groups fall back to names.
    """
    if not prefer:
        return False
    return all(
        _present(getattr(course, id_field))
        for course in courses
        if _present(getattr(course, id_field)) or getattr(course, name_field)
    )


def _group_by(courses: Iterable[CourseRef], key: Callable[[CourseRef], object]) -> Dict[object, List[CourseRef]]:
    groups: Dict[object, List[CourseRef]] = {}
    for course in courses:
        value = key(course)
        if value is None:
            continue
        groups.setdefault(value, []).append(course)
    return groups


def _same_course(a: CourseRef, b: CourseRef) -> bool:
    if a.id is None or b.id is None:
        return a is b
    return str(a.id) == str(b.id)


class ConflictService:
    def __init__(
        self,
        schedule: Schedule,
        *,
        candidate_slots: Optional[List[str]] = None,
        prefer_identity_keys: bool = DEFAULT_PREFER_IDENTITY_KEYS,
    ):
        self.schedule: NormalizedSchedule = normalize_schedule(schedule)
        self.candidate_slots = list(candidate_slots) if candidate_slots is not None else weekly_slot_ids()
        self.prefer_identity_keys = prefer_identity_keys

    def detect_conflicts(self) -> List[Conflict]:
        conflicts: List[Conflict] = []

        def create_conflict(conflict_type: str, slot_id: str, courses: List[CourseRef], message: str) -> Conflict:
            return Conflict(
                id=len(conflicts) + 1,
                type=conflict_type,
                slot_id=slot_id,
                courses=courses,
                message=message,
            )

        for slot_id, courses in self.schedule.items():
            if len(courses) < 2:
                continue

            by_id = _uses_identity(courses, "instructor_id", "instructor", self.prefer_identity_keys)
            instructor_groups = _group_by(courses, lambda course: course.instructor_key(by_id))
            for grouped in instructor_groups.values():
                if len(grouped) > 1:
                    instructor = grouped[0].instructor or str(grouped[0].instructor_id)
                    conflicts.append(create_conflict(
                        "instructor",
                        slot_id,
                        grouped,
                        f'Instructor "{instructor}" is scheduled for multiple courses in the same time slot',
                    ))

            by_id = _uses_identity(courses, "room_id", "room", self.prefer_identity_keys)
            room_groups = _group_by(courses, lambda course: course.room_key(by_id))
            for grouped in room_groups.values():
                if len(grouped) > 1:
                    room = grouped[0].room or str(grouped[0].room_id)
                    conflicts.append(create_conflict(
                        "room",
                        slot_id,
                        grouped,
                        f'Room "{room}" is scheduled for multiple courses in the same time slot',
                    ))

        logger.debug("Detected %d conflict(s) across %d slot(s)", len(conflicts), len(self.schedule))
        return conflicts

    def is_slot_available(self, slot_id: str, course: CourseRef) -> bool:
        prefer = self.prefer_identity_keys
        for existing in self.schedule.get(slot_id, []):
            if _same_course(existing, course):
                continue
            pair = (existing, course)
            by_id = _uses_identity(pair, "instructor_id", "instructor", prefer)
            if course.instructor_key(by_id) is not None and existing.instructor_key(by_id) == course.instructor_key(by_id):
                return False
            by_id = _uses_identity(pair, "room_id", "room", prefer)
            if course.room_key(by_id) is not None and existing.room_key(by_id) == course.room_key(by_id):
                return False
        return True

    def validate_course_move(self, target_slot_id: str, course: CourseRef) -> MoveValidation:
        if not self.is_slot_available(target_slot_id, course):
            day, time = parse_slot_id(target_slot_id)
            return MoveValidation(
                valid=False,
                message=f"Cannot move {course.label} to {day} at {time} due to conflicts",
            )
        return MoveValidation(valid=True, message="Move is valid")

    def suggest_alternative_slots(self, course: CourseRef, current_slot_id: str) -> List[str]:
        return [
            slot_id
            for slot_id in self.candidate_slots
            if slot_id != current_slot_id and self.is_slot_available(slot_id, course)
        ]

    def generate_resolutions(self, conflict: Conflict) -> List[ResolutionSuggestion]:
        # Every course but the first is a move candidate; the first keeps the slot.
        return [
            ResolutionSuggestion(
                conflict_id=conflict.id,
                course=course,
                alternative_slots=self.suggest_alternative_slots(course, conflict.slot_id),
            )
            for course in conflict.courses[1:]
        ]

    def build_report(self) -> ConflictReport:
        conflicts = self.detect_conflicts()
        resolutions: List[ResolutionSuggestion] = []
        for conflict in conflicts:
            resolutions.extend(self.generate_resolutions(conflict))
        return ConflictReport(conflicts=conflicts, suggested_resolutions=resolutions)


def detect_conflicts(
    schedule: Schedule,
    *,
    prefer_identity_keys: bool = DEFAULT_PREFER_IDENTITY_KEYS,
) -> List[Conflict]:
    return ConflictService(schedule, candidate_slots=[], prefer_identity_keys=prefer_identity_keys).detect_conflicts()


def is_slot_available(
    schedule: Schedule,
    slot_id: str,
    course: CourseRef,
    *,
    prefer_identity_keys: bool = DEFAULT_PREFER_IDENTITY_KEYS,
) -> bool:
    service = ConflictService(schedule, candidate_slots=[], prefer_identity_keys=prefer_identity_keys)
    return service.is_slot_available(slot_id, course)


def validate_course_move(
    schedule: Schedule,
    target_slot_id: str,
    course: CourseRef,
    *,
    prefer_identity_keys: bool = DEFAULT_PREFER_IDENTITY_KEYS,
) -> MoveValidation:
    service = ConflictService(schedule, candidate_slots=[], prefer_identity_keys=prefer_identity_keys)
    return service.validate_course_move(target_slot_id, course)


def suggest_alternative_slots(
    schedule: Schedule,
    course: CourseRef,
    current_slot_id: str,
    candidate_slots: Optional[List[str]] = None,
    *,
    prefer_identity_keys: bool = DEFAULT_PREFER_IDENTITY_KEYS,
) -> List[str]:
    service = ConflictService(schedule, candidate_slots=candidate_slots, prefer_identity_keys=prefer_identity_keys)
    return service.suggest_alternative_slots(course, current_slot_id)


def move_course(
    schedule: Schedule,
    course_id: str | int,
    from_slot_id: str,
    to_slot_id: str,
) -> NormalizedSchedule:
    """Return a copy of the schedule with one course moved between slots.

    Slot lists are copied, so the caller's schedule is left untouched. When the
    course is not in `from_slot_id` the copy is returned unchanged.
    """
    updated = {slot_id: list(courses) for slot_id, courses in normalize_schedule(schedule).items()}
    source = updated.get(from_slot_id, [])
    moving = [course for course in source if course.id is not None and str(course.id) == str(course_id)]
    if not moving:
        return updated
    updated[from_slot_id] = [course for course in source if course not in moving]
    updated.setdefault(to_slot_id, []).extend(moving)
    return updated


def resolve_all(
    schedule: Schedule,
    candidate_slots: Optional[List[str]] = None,
    *,
    prefer_identity_keys: bool = DEFAULT_PREFER_IDENTITY_KEYS,
) -> Tuple[NormalizedSchedule, int]:
    """Move the second course of each conflict to its first free alternative slot.

    Conflicts are taken from the schedule as given; each move is checked against
    the schedule as updated by the moves before it.
    """
    updated = normalize_schedule(schedule)
    resolved = 0
    for conflict in detect_conflicts(updated, prefer_identity_keys=prefer_identity_keys):
        course = conflict.courses[1]
        if course.id is None:
            continue
        # An earlier move may already have taken this course out of the slot.
        if not any(_same_course(course, existing) for existing in updated.get(conflict.slot_id, [])):
            continue
        alternatives = suggest_alternative_slots(
            updated,
            course,
            conflict.slot_id,
            candidate_slots,
            prefer_identity_keys=prefer_identity_keys,
        )
        if not alternatives:
            logger.debug("No alternative slot for %s (conflict %d)", course.label, conflict.id)
            continue
        updated = move_course(updated, course.id, conflict.slot_id, alternatives[0])
        resolved += 1
    logger.info("Resolved %d conflict(s) by moving courses", resolved)
    return updated, resolved
