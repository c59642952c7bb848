"""Supabase repository for exercise logs."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from supabase import Client

from nutritrack.adapters.supabase_errors import execute
from nutritrack.domain.errors import InternalError
from nutritrack.domain.ids import new_object_id
from nutritrack.domain.logs import ExerciseLogEntry
from nutritrack.services.exercise_logs import ExerciseLogRepository

_LOG_COLUMNS = "id, user_id, logged_at, activity_type, duration, calories_burned"


@dataclass
class SupabaseExerciseLogRepository(ExerciseLogRepository):
    """Supabase implementation for exercise logs."""

    client: Client

    def create_exercise_log(  # noqa: PLR0913
        self,
        user_id: str,
        logged_at: datetime,
        activity_type: str,
        duration: str,
        calories_burned: float,
    ) -> ExerciseLogEntry:
        """Create an exercise log row and return it."""
        response = execute(
            self.client.table("exercise_logs").insert(
                {
                    "id": new_object_id(),
                    "user_id": user_id,
                    "logged_at": logged_at.isoformat(),
                    "activity_type": activity_type,
                    "duration": duration,
                    "calories_burned": calories_burned,
                }
            ),
            "create exercise log",
        )
        if not response.data:
            raise InternalError("Failed to create exercise log")
        return parse_exercise_log(response.data[0])

    def delete_exercise_log(self, log_id: str, user_id: str) -> bool:
        """Delete the user's exercise log."""
        response = execute(
            self.client.table("exercise_logs")
            .delete()
            .eq("id", log_id)
            .eq("user_id", user_id),
            "delete exercise log",
        )
        return bool(response.data)

    def list_exercise_logs(
        self, user_id: str, start: datetime | None, end: datetime | None
    ) -> list[ExerciseLogEntry]:
        """Return exercise logs within optional inclusive bounds."""
        query = self._window(_LOG_COLUMNS, user_id, start, end).order(
            "logged_at", desc=False
        )
        response = execute(query, "fetch exercise logs")
        return [parse_exercise_log(row) for row in response.data or []]

    def sum_calories_burned(
        self, user_id: str, start: datetime | None, end: datetime | None
    ) -> float:
        """Return calories burned within optional inclusive bounds."""
        response = execute(
            self._window("calories_burned", user_id, start, end),
            "sum calories burned",
        )
        return sum(
            float(row.get("calories_burned", 0.0)) for row in response.data or []
        )

    def _window(
        self, columns: str, user_id: str, start: datetime | None, end: datetime | None
    ) -> Any:  # noqa: ANN401
        query = self.client.table("exercise_logs").select(columns).eq("user_id", user_id)
        if start is not None:
            query = query.gte("logged_at", start.isoformat())
        if end is not None:
            query = query.lte("logged_at", end.isoformat())
        return query


def parse_exercise_log(row: dict[str, object]) -> ExerciseLogEntry:
    """Build an exercise log entry from a row."""
    return ExerciseLogEntry(
        id=str(row["id"]),
        user_id=str(row["user_id"]),
        logged_at=datetime.fromisoformat(str(row["logged_at"])),
        activity_type=str(row.get("activity_type", "")),
        duration=str(row.get("duration", "")),
        calories_burned=float(row.get("calories_burned", 0.0)),
    )
