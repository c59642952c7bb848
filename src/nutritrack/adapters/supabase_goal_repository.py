"""Supabase repository for user goals."""

from dataclasses import dataclass
from datetime import UTC, datetime

from supabase import Client

from nutritrack.adapters.supabase_errors import execute
from nutritrack.domain.goals import Goal
from nutritrack.services.goals import GoalRepository


@dataclass
class SupabaseGoalRepository(GoalRepository):
    """Supabase implementation for user goals, one row per user."""

    client: Client

    def upsert_goal(self, goal: Goal) -> Goal:
        """Write every goal column so no stale field survives."""
        response = execute(
            self.client.table("user_goals").upsert(
                {
                    "user_id": goal.user_id,
                    "nutritional_goal": goal.nutritional_goal,
                    "exercise_level": goal.exercise_level,
                    "daily_calorie_limit": goal.daily_calorie_limit,
                    "updated_at": datetime.now(tz=UTC).isoformat(),
                },
                on_conflict="user_id",
            ),
            "save user goal",
        )
        if not response.data:
            return goal
        return _parse_goal(response.data[0])

    def get_goal(self, user_id: str) -> Goal | None:
        """Return the user's goal, if set."""
        response = execute(
            self.client.table("user_goals")
            .select("user_id, nutritional_goal, exercise_level, daily_calorie_limit")
            .eq("user_id", user_id)
            .limit(1),
            "fetch user goal",
        )
        if not response.data:
            return None
        return _parse_goal(response.data[0])


def _parse_goal(row: dict[str, object]) -> Goal:
    return Goal(
        user_id=str(row["user_id"]),
        nutritional_goal=str(row.get("nutritional_goal", "")),
        exercise_level=str(row.get("exercise_level", "")),
        daily_calorie_limit=int(row.get("daily_calorie_limit", 0)),
    )
