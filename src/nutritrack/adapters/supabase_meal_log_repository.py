"""Supabase repository for meal logs."""

from dataclasses import dataclass
from datetime import UTC, datetime

from supabase import Client

from nutritrack.adapters.supabase_errors import execute
from nutritrack.domain.errors import InternalError
from nutritrack.domain.ids import new_object_id
from nutritrack.domain.logs import MealLogEntry, MealLogView
from nutritrack.services.meal_logs import MealLogRepository

_LOG_COLUMNS = "id, user_id, meal_id, logged_at, meal_type, calorie_intake, created_at"


@dataclass
class SupabaseMealLogRepository(MealLogRepository):
    """Supabase implementation for meal logs."""

    client: Client

    def create_meal_log(  # noqa: PLR0913
        self,
        user_id: str,
        meal_id: str,
        logged_at: datetime,
        meal_type: str,
        calorie_intake: float,
    ) -> MealLogEntry:
        """Create a meal log row and return it."""
        response = execute(
            self.client.table("meal_logs").insert(
                {
                    "id": new_object_id(),
                    "user_id": user_id,
                    "meal_id": meal_id,
                    "logged_at": logged_at.isoformat(),
                    "meal_type": meal_type,
                    "calorie_intake": calorie_intake,
                    "created_at": datetime.now(tz=UTC).isoformat(),
                }
            ),
            "create meal log",
        )
        if not response.data:
            raise InternalError("Failed to create meal log")
        return parse_meal_log(response.data[0])

    def get_meal_log(self, log_id: str, user_id: str) -> MealLogEntry | None:
        """Return the user's meal log by id."""
        response = execute(
            self.client.table("meal_logs")
            .select(_LOG_COLUMNS)
            .eq("id", log_id)
            .eq("user_id", user_id)
            .limit(1),
            "fetch meal log",
        )
        if not response.data:
            return None
        return parse_meal_log(response.data[0])

    def delete_meal_log(self, log_id: str, user_id: str) -> bool:
        """Delete the user's meal log."""
        response = execute(
            self.client.table("meal_logs")
            .delete()
            .eq("id", log_id)
            .eq("user_id", user_id),
            "delete meal log",
        )
        return bool(response.data)

    def list_meal_logs(
        self, user_id: str, start: datetime, end: datetime
    ) -> list[MealLogEntry]:
        """Return meal logs in the inclusive window."""
        response = execute(
            self.client.table("meal_logs")
            .select(_LOG_COLUMNS)
            .eq("user_id", user_id)
            .gte("logged_at", start.isoformat())
            .lte("logged_at", end.isoformat())
            .order("logged_at", desc=False),
            "fetch meal logs",
        )
        return [parse_meal_log(row) for row in response.data or []]

    def sum_calorie_intake(self, user_id: str, start: datetime, end: datetime) -> float:
        """Return total intake in the inclusive window."""
        response = execute(
            self.client.table("meal_logs")
            .select("calorie_intake")
            .eq("user_id", user_id)
            .gte("logged_at", start.isoformat())
            .lte("logged_at", end.isoformat()),
            "sum calorie intake",
        )
        return sum(float(row.get("calorie_intake", 0.0)) for row in response.data or [])

    def list_meal_log_views(
        self, user_id: str, start: datetime, end: datetime
    ) -> list[MealLogView]:
        """Return meal logs in the window with their catalog meal fields."""
        response = execute(
            self.client.table("meal_logs")
            .select(f"{_LOG_COLUMNS}, meals(meal_name, nutritional_value, diet_type)")
            .eq("user_id", user_id)
            .gte("logged_at", start.isoformat())
            .lte("logged_at", end.isoformat())
            .order("created_at", desc=True),
            "fetch meal logs",
        )
        views = []
        for row in response.data or []:
            meal = row.get("meals") or {}
            views.append(
                MealLogView(
                    entry=parse_meal_log(row),
                    meal_name=meal.get("meal_name"),
                    nutritional_value=meal.get("nutritional_value"),
                    diet_type=meal.get("diet_type"),
                )
            )
        return views


def parse_meal_log(row: dict[str, object]) -> MealLogEntry:
    """Build a meal log entry from a row."""
    return MealLogEntry(
        id=str(row["id"]),
        user_id=str(row["user_id"]),
        meal_id=str(row["meal_id"]),
        logged_at=datetime.fromisoformat(str(row["logged_at"])),
        meal_type=str(row.get("meal_type", "")),
        calorie_intake=float(row.get("calorie_intake", 0.0)),
        created_at=datetime.fromisoformat(str(row["created_at"])),
    )
