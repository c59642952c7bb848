"""Goal domain models and the exercise-level calorie policy."""

from dataclasses import dataclass

EXERCISE_LEVELS = ("Low", "Medium", "High")
DEFAULT_EXERCISE_LEVEL = "Medium"
DEFAULT_DAILY_LIMIT = 2000

STANDARD_NUTRITIONAL_GOALS = (
    "Weight Loss",
    "Muscle Gain",
    "Heart Health",
    "Diabetes Management",
    "Low Carb",
)

_DAILY_LIMITS = {"Low": 1800, "Medium": 2200, "High": 2600}


@dataclass(frozen=True)
class Goal:
    """A user's single nutritional goal."""

    user_id: str
    nutritional_goal: str
    exercise_level: str
    daily_calorie_limit: int


def derive_daily_limit(exercise_level: object) -> int:
    """Return the daily calorie allowance for an exercise level."""
    if isinstance(exercise_level, str):
        return _DAILY_LIMITS.get(exercise_level, DEFAULT_DAILY_LIMIT)
    return DEFAULT_DAILY_LIMIT
