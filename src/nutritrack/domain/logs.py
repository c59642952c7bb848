"""Domain models for meal and exercise logging."""

from dataclasses import dataclass
from datetime import date, datetime

MEAL_TYPES = ("Breakfast", "Lunch", "Dinner", "Snack")
EXERCISE_PERIODS = ("all", "today", "week", "month")
MAX_ACTIVITY_TYPE_LENGTH = 50


@dataclass(frozen=True)
class MealLogEntry:
    """A meal eaten on a given day, with calories copied at log time.

    ``logged_at`` is the day the meal counts towards; ``created_at`` is when
    the entry was recorded.
    """

    id: str
    user_id: str
    meal_id: str
    logged_at: datetime
    meal_type: str
    calorie_intake: float
    created_at: datetime


@dataclass(frozen=True)
class MealLogView:
    """Meal log entry joined with its catalog meal, when it still exists."""

    entry: MealLogEntry
    meal_name: str | None
    nutritional_value: str | None
    diet_type: str | None


@dataclass(frozen=True)
class ExerciseLogEntry:
    """An exercise session performed on a given day."""

    id: str
    user_id: str
    logged_at: datetime
    activity_type: str
    duration: str
    calories_burned: float


@dataclass(frozen=True)
class MealLogResult:
    """Outcome of logging a meal.

    ``warnings`` is None when nothing was flagged, never an empty dict.
    """

    log_id: str
    total_calories: float
    daily_limit: int
    warnings: dict[str, str] | None


@dataclass(frozen=True)
class MealLogDeletion:
    """Outcome of deleting a meal log entry."""

    deleted: bool
    total_calories: float


@dataclass(frozen=True)
class DayMealLogs:
    """Meal logs for one day and their calorie total."""

    day: date
    logs: list[MealLogView]
    total_calories: float


@dataclass(frozen=True)
class ExerciseHistory:
    """Exercise logs for a period and the calories burned over it."""

    period: str
    logs: list[ExerciseLogEntry]
    total_calories: float
