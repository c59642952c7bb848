"""Dietician appointment scheduling."""

import logging
import re
from dataclasses import dataclass
from datetime import UTC, date, datetime
from typing import Protocol

from nutritrack.domain.appointments import Appointment, AppointmentView, Dietician
from nutritrack.domain.errors import ConflictError, NotFoundError, ValidationError
from nutritrack.domain.ids import is_object_id
from nutritrack.services.aggregates import DailyAggregator
from nutritrack.services.calendar import parse_day

logger = logging.getLogger(__name__)

_TIME_PATTERN = re.compile(r"^([0-1]?[0-9]|2[0-3]):[0-5][0-9](:([0-5][0-9]))?$")
_DUPLICATE_SLOT = "You already have an appointment scheduled at this date and time"


class AppointmentRepository(Protocol):
    """Persistence interface for dieticians and appointments."""

    def list_dieticians(self) -> list[Dietician]:
        """Return all dieticians."""

    def get_dietician(self, dietician_id: str) -> Dietician | None:
        """Return a dietician by id."""

    def list_appointment_views(self, user_id: str) -> list[AppointmentView]:
        """Return the user's appointments joined with their dieticians."""

    def find_appointment(self, user_id: str, day: date, time: str) -> Appointment | None:
        """Return the user's appointment in a slot, if any."""

    def create_appointment(
        self, user_id: str, dietician_id: str, day: date, time: str
    ) -> Appointment:
        """Insert an appointment; raise ConflictError on a duplicate slot."""

    def delete_appointment(self, appointment_id: str, user_id: str) -> bool:
        """Delete the user's appointment and return whether it existed."""


@dataclass
class AppointmentService:
    """Service for booking and cancelling dietician appointments."""

    repository: AppointmentRepository
    aggregator: DailyAggregator

    def list_dieticians(self) -> list[Dietician]:
        """Return dieticians sorted by name."""
        return sorted(self.repository.list_dieticians(), key=lambda item: item.name)

    def list_appointments(self, user_id: str) -> list[AppointmentView]:
        """Return the user's appointments by day then time."""
        if not is_object_id(user_id):
            raise ValidationError("Invalid user ID")
        views = self.repository.list_appointment_views(user_id)
        return sorted(
            views, key=lambda view: (view.appointment.day, view.appointment.time)
        )

    def schedule(
        self, user_id: str, dietician_id: object, date: object, time: object
    ) -> AppointmentView:
        """Book a slot with a dietician for today or a later day."""
        if not dietician_id or not date or not time:
            raise ValidationError("Please provide dieticianId, date, and time")
        if not is_object_id(user_id) or not is_object_id(dietician_id):
            raise ValidationError("Invalid ID format")
        day = parse_day(date, self.aggregator.tz)
        slot = str(time)
        if not _TIME_PATTERN.match(slot):
            raise ValidationError(
                "Invalid time format. Expected format: HH:MM or HH:MM:SS"
            )
        today = datetime.now(tz=UTC).astimezone(self.aggregator.tz).date()
        if day < today:
            raise ValidationError("Cannot schedule appointment in the past")

        dietician = self.repository.get_dietician(str(dietician_id))
        if dietician is None:
            raise NotFoundError("Dietician not found")
        if self.repository.find_appointment(user_id, day, slot) is not None:
            raise ConflictError(_DUPLICATE_SLOT)
        try:
            appointment = self.repository.create_appointment(
                user_id, dietician.id, day, slot
            )
        except ConflictError as exc:
            raise ConflictError(_DUPLICATE_SLOT) from exc
        logger.info(
            "Scheduled appointment",
            extra={"user_id": user_id, "appointment_id": appointment.id},
        )
        return AppointmentView(
            appointment=appointment,
            dietician_name=dietician.name,
            specialization=dietician.specialization,
        )

    def cancel(self, appointment_id: str, user_id: str) -> None:
        """Cancel the user's appointment."""
        if not is_object_id(appointment_id) or not is_object_id(user_id):
            raise ValidationError("Invalid ID format")
        if not self.repository.delete_appointment(appointment_id, user_id):
            raise NotFoundError("Appointment not found or does not belong to you")
        logger.info(
            "Cancelled appointment",
            extra={"user_id": user_id, "appointment_id": appointment_id},
        )
