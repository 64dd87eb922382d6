from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from schedpro.schemas.course import CourseRef


class Room(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    id: str | int | None = None
    name: str = Field(min_length=1, max_length=100)
    type: str = ""
    capacity: int = Field(ge=0)
    equipment: list[str] = Field(default_factory=list)

    @field_validator("type", mode="before")
    @classmethod
    def default_type(cls, value):
        return "" if value is None else value

    @field_validator("equipment", mode="before")
    @classmethod
    def drop_blank_equipment(cls, value):
        if value is None:
            return []
        if isinstance(value, str):
            value = [value]
        return [str(item).strip() for item in value if item is not None and str(item).strip()]


class SuitabilityDetails(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    capacity_utilization: str = Field(alias="capacityUtilization")
    available_equipment: list[str] = Field(default_factory=list, alias="availableEquipment")


class SuitabilityResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    suitable: bool
    message: str
    details: SuitabilityDetails | None = None
    missing_equipment: list[str] = Field(default_factory=list, alias="missingEquipment")


class RoomAssignment(BaseModel):
    course: CourseRef
    room: Room


class AutoAssignResult(BaseModel):
    assignments: list[RoomAssignment] = Field(default_factory=list)
    failures: list[CourseRef] = Field(default_factory=list)


class RoomUsageStats(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    total_courses: int = Field(alias="totalCourses")
    total_hours: int = Field(alias="totalHours")
    usage_percentage: int = Field(alias="usagePercentage")
