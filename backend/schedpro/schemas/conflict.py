from pydantic import BaseModel, ConfigDict, Field
from typing import Literal, List

from schedpro.schemas.course import CourseRef

ConflictType = Literal["instructor", "room"]


class Conflict(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    type: ConflictType
    slot_id: str = Field(alias="slotId")
    courses: List[CourseRef]  # always two or more courses sharing the attribute
    message: str

    def signature(self) -> tuple:
        """Identity of the conflict independent of its sequential id."""
        return (self.type, self.slot_id, frozenset(str(course.id) for course in self.courses))


class ResolutionSuggestion(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    conflict_id: int = Field(alias="conflictId")
    course: CourseRef
    alternative_slots: List[str] = Field(default_factory=list, alias="alternativeSlots")


class ConflictReport(BaseModel):
    conflicts: List[Conflict]
    suggested_resolutions: List[ResolutionSuggestion] = Field(default_factory=list)


class MoveValidation(BaseModel):
    valid: bool
    message: str
