"""Tests for dietician appointments."""

from datetime import UTC, datetime, timedelta

import pytest

from nutritrack.domain.errors import ConflictError, NotFoundError, ValidationError
from tests.conftest import MISSING_ID, OTHER_USER_ID, USER_ID, meal_id

DIETICIAN_ID = meal_id(101)


def _future_day(days: int = 3) -> str:
    return (datetime.now(tz=UTC) + timedelta(days=days)).date().isoformat()


def test_list_dieticians_sorted_by_name(container) -> None:
    names = [item.name for item in container.appointment_service.list_dieticians()]

    assert names == ["Dr. Anand", "Dr. Rao"]


def test_schedule_and_list_appointments(container) -> None:
    service = container.appointment_service
    service.schedule(USER_ID, DIETICIAN_ID, _future_day(5), "09:30")
    booked = service.schedule(USER_ID, meal_id(102), _future_day(2), "14:00:00")

    views = service.list_appointments(USER_ID)

    assert booked.dietician_name == "Dr. Anand"
    assert [view.appointment.time for view in views] == ["14:00:00", "09:30"]
    assert service.list_appointments(OTHER_USER_ID) == []


def test_schedule_rejects_duplicate_slot(container) -> None:
    service = container.appointment_service
    day = _future_day()
    service.schedule(USER_ID, DIETICIAN_ID, day, "10:00")

    with pytest.raises(ConflictError):
        service.schedule(USER_ID, meal_id(102), day, "10:00")


def test_schedule_maps_storage_conflict(container, appointment_repository) -> None:
    day = _future_day()
    container.appointment_service.schedule(USER_ID, DIETICIAN_ID, day, "10:00")
    appointment_repository.find_appointment = lambda *_args: None

    with pytest.raises(ConflictError) as excinfo:
        container.appointment_service.schedule(USER_ID, DIETICIAN_ID, day, "10:00")

    assert "already have an appointment" in excinfo.value.message


@pytest.mark.parametrize(
    ("dietician", "day", "time", "error"),
    [
        (None, "2999-01-01", "10:00", ValidationError),
        ("bad-id", "2999-01-01", "10:00", ValidationError),
        (DIETICIAN_ID, "2999-01-01", "25:00", ValidationError),
        (DIETICIAN_ID, "2000-01-01", "10:00", ValidationError),
        (DIETICIAN_ID, "tomorrow", "10:00", ValidationError),
        (MISSING_ID, "2999-01-01", "10:00", NotFoundError),
    ],
)
def test_schedule_rejects_bad_input(container, dietician, day, time, error) -> None:
    with pytest.raises(error):
        container.appointment_service.schedule(USER_ID, dietician, day, time)


def test_cancel_only_own_appointment(container) -> None:
    service = container.appointment_service
    booked = service.schedule(USER_ID, DIETICIAN_ID, _future_day(), "11:00")

    with pytest.raises(NotFoundError):
        service.cancel(booked.appointment.id, OTHER_USER_ID)
    service.cancel(booked.appointment.id, USER_ID)

    assert service.list_appointments(USER_ID) == []
