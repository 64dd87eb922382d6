"""Single input-boundary pass that turns host schedule state into clean course lists.

Host state can transiently hold `None`, objects or scalars for a slot while an
async update is in flight. Those are read as "no courses" here so the
algorithms downstream never need their own guards.
"""
from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from schedpro.schemas.course import CourseRef

logger = logging.getLogger(__name__)

Schedule = Mapping[str, Any]

IDENTITY_FIELDS = ("id", "instructor", "instructorId", "instructor_id", "room", "roomId", "room_id")


def coerce_course(entry: Any) -> CourseRef | None:
    if isinstance(entry, CourseRef):
        return entry
    if isinstance(entry, Mapping):
        try:
            return CourseRef.model_validate(dict(entry))
        except ValidationError:
            # Keep the course in play for conflict detection even when its
            # other fields are unusable.
            logger.debug("Reading course entry %r by identity fields only", entry)
            return CourseRef.model_validate({key: entry[key] for key in IDENTITY_FIELDS if key in entry})
    return None


def coerce_course_list(value: Any) -> list[CourseRef]:
    if not isinstance(value, (list, tuple)):
        return []
    courses = []
    for entry in value:
        course = coerce_course(entry)
        if course is not None:
            courses.append(course)
    return courses


def normalize_schedule(schedule: Schedule | None) -> dict[str, list[CourseRef]]:
    if not isinstance(schedule, Mapping):
        return {}
    return {str(slot_id): coerce_course_list(value) for slot_id, value in schedule.items()}
