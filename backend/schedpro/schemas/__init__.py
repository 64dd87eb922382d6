from schedpro.schemas.conflict import (  # noqa: F401
    Conflict,
    ConflictReport,
    ConflictType,
    MoveValidation,
    ResolutionSuggestion,
)
from schedpro.schemas.course import CourseRef  # noqa: F401
from schedpro.schemas.room import (  # noqa: F401
    AutoAssignResult,
    Room,
    RoomAssignment,
    RoomUsageStats,
    SuitabilityDetails,
    SuitabilityResult,
)
