from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

TRUE_STRINGS = {"true", "1", "yes", "y", "on"}


def _as_text(value):
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, (bool, int, float)):
        return str(value)
    return None


def _as_identifier(value):
    if value is None or isinstance(value, (str, int)) and not isinstance(value, bool):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return None


class CourseRef(BaseModel):
    """The course fields the conflict and room matching services inspect.

    Every field has a default and a lenient `before` validator, so loosely
    shaped host data (drag-and-drop state, partially synced rows, spreadsheet
    imports with numeric codes) is coerced rather than rejected.
    `instructor` and `room` are display names; `instructor_id` and `room_id`
    are optional stable identifiers preferred for grouping when present.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    id: str | int | None = None
    code: str = ""
    name: str = ""
    instructor: str | None = None
    instructor_id: str | int | None = Field(default=None, alias="instructorId")
    room: str | None = None
    room_id: str | int | None = Field(default=None, alias="roomId")
    expected_enrollment: int = Field(default=0, ge=0, alias="expectedEnrollment")
    requires_lab: bool = Field(default=False, alias="requiresLab")
    required_equipment: list[str] = Field(default_factory=list, alias="requiredEquipment")

    @field_validator("id", "instructor_id", "room_id", mode="before")
    @classmethod
    def coerce_identifier(cls, value):
        return _as_identifier(value)

    @field_validator("code", "name", mode="before")
    @classmethod
    def coerce_display_text(cls, value):
        return _as_text(value) or ""

    @field_validator("instructor", "room", mode="before")
    @classmethod
    def coerce_optional_text(cls, value):
        return _as_text(value)

    @field_validator("required_equipment", mode="before")
    @classmethod
    def drop_blank_equipment(cls, value):
        if value is None:
            return []
        if isinstance(value, str):
            value = [value]
        if not isinstance(value, (list, tuple, set)):
            return []
        return [str(item).strip() for item in value if item is not None and str(item).strip()]

    @field_validator("expected_enrollment", mode="before")
    @classmethod
    def default_enrollment(cls, value):
        # Unknown or nonsensical head counts ("TBD", -5) read as zero students.
        if isinstance(value, bool):
            return 0
        try:
            count = int(float(value))
        except (TypeError, ValueError, OverflowError):
            return 0
        return max(count, 0)

    @field_validator("requires_lab", mode="before")
    @classmethod
    def coerce_flag(cls, value):
        if isinstance(value, str):
            return value.strip().lower() in TRUE_STRINGS
        return bool(value)

    def instructor_key(self, prefer_identity: bool = True) -> tuple[str, str] | None:
        if prefer_identity and self.instructor_id not in (None, ""):
            return ("id", str(self.instructor_id))
        return ("name", self.instructor) if self.instructor else None

    def room_key(self, prefer_identity: bool = True) -> tuple[str, str] | None:
        if prefer_identity and self.room_id not in (None, ""):
            return ("id", str(self.room_id))
        return ("name", self.room) if self.room else None

    @property
    def label(self) -> str:
        return self.name or self.code or str(self.id)
