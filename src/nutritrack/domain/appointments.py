"""Domain models for dietician appointments."""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class Dietician:
    """A dietician users can book."""

    id: str
    name: str
    specialization: str


@dataclass(frozen=True)
class Appointment:
    """A booked appointment slot."""

    id: str
    user_id: str
    dietician_id: str
    day: date
    time: str


@dataclass(frozen=True)
class AppointmentView:
    """Appointment joined with its dietician, when it still exists."""

    appointment: Appointment
    dietician_name: str | None
    specialization: str | None
