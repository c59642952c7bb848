"""Meal recommendations filtered by nutritional goal and exercise level."""

import logging
from dataclasses import dataclass

from nutritrack.domain.catalog import Meal
from nutritrack.domain.errors import ValidationError
from nutritrack.domain.recommendations import (
    BALANCED,
    MAX_RECOMMENDATIONS,
    MIN_RECOMMENDATIONS,
    STAGE_ONE_LIMIT,
    fits_exercise_level,
    rule_for,
)
from nutritrack.services.catalog import CatalogRepository

logger = logging.getLogger(__name__)


@dataclass
class RecommendationService:
    """Selects a bounded set of catalog meals for a goal."""

    repository: CatalogRepository

    def recommend(self, nutritional_goal: object, exercise_level: object) -> list[Meal]:
        """Return up to eight meals suited to the goal and exercise level.

        Meals are first selected by the goal's rule (first ten matches),
        then narrowed by exercise level. When fewer than three survive, the
        result is replaced by the first eight Balanced meals without any
        exercise-level filtering.
        """
        if not nutritional_goal or not exercise_level:
            raise ValidationError("Nutritional goal and exercise level are required")
        goal = str(nutritional_goal)
        level = str(exercise_level)
        candidates = self.repository.query_meals(rule_for(goal), STAGE_ONE_LIMIT)
        meals = [meal for meal in candidates if fits_exercise_level(meal, level)]
        if len(meals) < MIN_RECOMMENDATIONS:
            logger.info(
                "Falling back to balanced recommendations",
                extra={"nutritional_goal": goal, "exercise_level": level},
            )
            meals = self.repository.query_meals(
                rule_for(BALANCED), MAX_RECOMMENDATIONS
            )
        return meals[:MAX_RECOMMENDATIONS]
