"""Supabase repository for dieticians and appointments."""

from dataclasses import dataclass
from datetime import date

from supabase import Client

from nutritrack.adapters.supabase_errors import execute
from nutritrack.domain.appointments import Appointment, AppointmentView, Dietician
from nutritrack.domain.errors import InternalError
from nutritrack.domain.ids import new_object_id
from nutritrack.services.appointments import AppointmentRepository

_APPOINTMENT_COLUMNS = "id, user_id, dietician_id, day, time"


@dataclass
class SupabaseAppointmentRepository(AppointmentRepository):
    """Supabase implementation for appointments.

    The ``appointments`` table carries a unique (user_id, day, time) index.
    """

    client: Client

    def list_dieticians(self) -> list[Dietician]:
        """Return all dieticians."""
        response = execute(
            self.client.table("dieticians").select("id, name, specialization"),
            "fetch dieticians",
        )
        return [_parse_dietician(row) for row in response.data or []]

    def get_dietician(self, dietician_id: str) -> Dietician | None:
        """Return a dietician by id."""
        response = execute(
            self.client.table("dieticians")
            .select("id, name, specialization")
            .eq("id", dietician_id)
            .limit(1),
            "fetch dietician",
        )
        if not response.data:
            return None
        return _parse_dietician(response.data[0])

    def list_appointment_views(self, user_id: str) -> list[AppointmentView]:
        """Return the user's appointments with dietician details."""
        response = execute(
            self.client.table("appointments")
            .select(f"{_APPOINTMENT_COLUMNS}, dieticians(name, specialization)")
            .eq("user_id", user_id),
            "fetch appointments",
        )
        views = []
        for row in response.data or []:
            dietician = row.get("dieticians") or {}
            views.append(
                AppointmentView(
                    appointment=_parse_appointment(row),
                    dietician_name=dietician.get("name"),
                    specialization=dietician.get("specialization"),
                )
            )
        return views

    def find_appointment(self, user_id: str, day: date, time: str) -> Appointment | None:
        """Return the user's appointment in a slot, if any."""
        response = execute(
            self.client.table("appointments")
            .select(_APPOINTMENT_COLUMNS)
            .eq("user_id", user_id)
            .eq("day", day.isoformat())
            .eq("time", time)
            .limit(1),
            "fetch appointment",
        )
        if not response.data:
            return None
        return _parse_appointment(response.data[0])

    def create_appointment(
        self, user_id: str, dietician_id: str, day: date, time: str
    ) -> Appointment:
        """Insert an appointment row."""
        response = execute(
            self.client.table("appointments").insert(
                {
                    "id": new_object_id(),
                    "user_id": user_id,
                    "dietician_id": dietician_id,
                    "day": day.isoformat(),
                    "time": time,
                }
            ),
            "create appointment",
        )
        if not response.data:
            raise InternalError("Failed to create appointment")
        return _parse_appointment(response.data[0])

    def delete_appointment(self, appointment_id: str, user_id: str) -> bool:
        """Delete the user's appointment."""
        response = execute(
            self.client.table("appointments")
            .delete()
            .eq("id", appointment_id)
            .eq("user_id", user_id),
            "delete appointment",
        )
        return bool(response.data)


def _parse_dietician(row: dict[str, object]) -> Dietician:
    return Dietician(
        id=str(row["id"]),
        name=str(row.get("name", "")),
        specialization=str(row.get("specialization", "")),
    )


def _parse_appointment(row: dict[str, object]) -> Appointment:
    return Appointment(
        id=str(row["id"]),
        user_id=str(row["user_id"]),
        dietician_id=str(row["dietician_id"]),
        day=date.fromisoformat(str(row["day"])),
        time=str(row.get("time", "")),
    )
