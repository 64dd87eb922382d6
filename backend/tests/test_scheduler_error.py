import pytest

from schedpro.core.exceptions import AppError, ConfigurationError, ResourceNotFoundError, SchedulerError


@pytest.mark.parametrize(
    ("error", "status"),
    [
        (AppError("unexpected"), 500),
        (SchedulerError("candidateSlots must list at least one slot id"), 400),
        (ResourceNotFoundError("Room", "r9"), 404),
        (ConfigurationError("schedule_days", "empty"), 500),
    ],
)
def test_each_error_maps_to_its_http_status(error, status):
    assert isinstance(error, AppError)
    assert error.status_code == status


def test_payload_is_message_and_details():
    err = SchedulerError("Slot is full", details={"slot_id": "Monday-9:00 AM"})
    assert err.to_payload() == {"message": "Slot is full", "details": {"slot_id": "Monday-9:00 AM"}}
    assert str(err) == "Slot is full"


def test_details_are_copied_from_caller():
    details = {"field": "candidateSlots"}
    err = SchedulerError("bad request", details=details)
    details["field"] = "changed"
    assert err.details == {"field": "candidateSlots"}
    assert AppError("no details").details == {}


def test_missing_course_names_the_slot_it_was_looked_up_in():
    err = ResourceNotFoundError("Course", 42, slot_id="Tuesday-10:00 AM")
    assert err.message == "Course 42 is not scheduled in slot Tuesday-10:00 AM"
    assert err.details == {"resource_type": "Course", "resource_id": "42", "slot_id": "Tuesday-10:00 AM"}


def test_missing_room_without_slot():
    err = ResourceNotFoundError("Room", "r9")
    assert err.message == "Room r9 is not scheduled"
    assert "slot_id" not in err.details


def test_configuration_error_names_the_setting():
    err = ConfigurationError("schedule_time_labels", "no time labels configured")
    assert err.message == "Setting schedule_time_labels is unusable: no time labels configured"
    assert err.details == {"setting": "schedule_time_labels"}
