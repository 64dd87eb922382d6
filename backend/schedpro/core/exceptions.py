from typing import Any


class AppError(Exception):
    """Error surfaced to the host as a JSON body with an HTTP status."""

    status_code = 500

    def __init__(self, message: str, *, details: dict[str, Any] | None = None):
        self.message = message
        self.details = dict(details or {})
        super().__init__(message)

    def to_payload(self) -> dict[str, Any]:
        return {"message": self.message, "details": self.details}


class SchedulerError(AppError):
    """The request is well formed but asks for something the scheduler cannot do."""

    status_code = 400


class ResourceNotFoundError(AppError):
    """A course or room referenced by id is missing from the schedule it was sent with."""

    status_code = 404

    def __init__(self, resource_type: str, resource_id: str | int, *, slot_id: str | None = None):
        where = f" in slot {slot_id}" if slot_id else ""
        details: dict[str, Any] = {"resource_type": resource_type, "resource_id": str(resource_id)}
        if slot_id:
            details["slot_id"] = slot_id
        super().__init__(f"{resource_type} {resource_id} is not scheduled{where}", details=details)


class ConfigurationError(AppError):
    """A setting leaves the service unable to answer."""

    def __init__(self, setting: str, reason: str):
        super().__init__(f"Setting {setting} is unusable: {reason}", details={"setting": setting})
