"""Goal policy: one nutritional goal per user and its calorie allowance."""

import logging
from dataclasses import dataclass
from typing import Protocol

from nutritrack.domain.errors import ValidationError
from nutritrack.domain.goals import (
    DEFAULT_DAILY_LIMIT,
    DEFAULT_EXERCISE_LEVEL,
    EXERCISE_LEVELS,
    STANDARD_NUTRITIONAL_GOALS,
    Goal,
    derive_daily_limit,
)
from nutritrack.domain.ids import is_object_id

logger = logging.getLogger(__name__)


class GoalRepository(Protocol):
    """Persistence interface for user goals."""

    def upsert_goal(self, goal: Goal) -> Goal:
        """Replace the user's goal row with ``goal`` and return it."""

    def get_goal(self, user_id: str) -> Goal | None:
        """Return the user's goal, if set."""


class TagSource(Protocol):
    """Source of distinct nutritional-value tags from the meal catalog."""

    def distinct_tags(self) -> list[str]:
        """Return distinct meal tags."""


def normalize_goal(
    user_id: str, nutritional_goal: object, exercise_level: object = None
) -> Goal:
    """Validate goal input and derive its daily calorie limit."""
    if not isinstance(nutritional_goal, str) or not nutritional_goal.strip():
        raise ValidationError("Nutritional goal is required")
    if exercise_level is None or exercise_level == "":
        level = DEFAULT_EXERCISE_LEVEL
    elif exercise_level in EXERCISE_LEVELS:
        level = str(exercise_level)
    else:
        raise ValidationError("Exercise level must be one of: Low, Medium, High")
    return Goal(
        user_id=user_id,
        nutritional_goal=nutritional_goal.strip(),
        exercise_level=level,
        daily_calorie_limit=derive_daily_limit(level),
    )


@dataclass
class GoalService:
    """Service for reading and replacing user goals."""

    repository: GoalRepository
    tag_source: TagSource
    default_daily_limit: int = DEFAULT_DAILY_LIMIT

    def save_goal(
        self, user_id: str, nutritional_goal: object, exercise_level: object = None
    ) -> Goal:
        """Replace the user's goal as a whole, never merging old fields."""
        _require_user_id(user_id)
        goal = normalize_goal(user_id, nutritional_goal, exercise_level)
        saved = self.repository.upsert_goal(goal)
        logger.info(
            "Saved user goal",
            extra={"user_id": user_id, "exercise_level": saved.exercise_level},
        )
        return saved

    def get_goal(self, user_id: str) -> Goal | None:
        """Return the user's goal or None when none was set."""
        _require_user_id(user_id)
        return self.repository.get_goal(user_id)

    def daily_limit(self, user_id: str) -> int:
        """Return the user's daily calorie limit or the default."""
        goal = self.get_goal(user_id)
        return goal.daily_calorie_limit if goal else self.default_daily_limit

    def nutritional_goals(self) -> list[str]:
        """Return standard goal labels followed by distinct catalog tags."""
        labels: list[str] = []
        for label in (*STANDARD_NUTRITIONAL_GOALS, *self.tag_source.distinct_tags()):
            if label and label not in labels:
                labels.append(label)
        return labels


def _require_user_id(user_id: str) -> None:
    if not is_object_id(user_id):
        raise ValidationError("Invalid user ID")
