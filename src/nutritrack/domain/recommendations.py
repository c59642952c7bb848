"""Rule table used to recommend catalog meals for a nutritional goal.

Each goal label maps to a ``MealRule``: a disjunction of ``MealClause``
predicates. A clause holds when all of its set fields hold. Tag and name
patterns are case-insensitive regular expressions searched anywhere in the
value, so "Low carb" also matches a tag such as "Low Carb Snack".
"""

import re
from dataclasses import dataclass

from nutritrack.domain.catalog import Meal

STAGE_ONE_LIMIT = 10
MAX_RECOMMENDATIONS = 8
MIN_RECOMMENDATIONS = 3
BALANCED = "Balanced"

_EXERCISE_CALORIE_BOUNDS: dict[str, tuple[float | None, float | None]] = {
    "Low": (None, 300),
    "Medium": (200, 400),
    "High": (350, None),
}


@dataclass(frozen=True)
class MealClause:
    """Conjunction of optional predicates over a catalog meal."""

    tag_pattern: str | None = None
    name_pattern: str | None = None
    diet_type: str | None = None
    min_calories: float | None = None
    max_calories: float | None = None

    def matches(self, meal: Meal) -> bool:
        """Return True when every configured predicate holds."""
        if self.tag_pattern is not None and not re.search(
            self.tag_pattern, meal.nutritional_value, re.IGNORECASE
        ):
            return False
        if self.name_pattern is not None and not re.search(
            self.name_pattern, meal.name, re.IGNORECASE
        ):
            return False
        if self.diet_type is not None and meal.diet_type != self.diet_type:
            return False
        if self.min_calories is not None and meal.calories < self.min_calories:
            return False
        return self.max_calories is None or meal.calories <= self.max_calories


@dataclass(frozen=True)
class MealRule:
    """Disjunction of clauses selecting meals for one goal label."""

    label: str
    clauses: tuple[MealClause, ...]

    def matches(self, meal: Meal) -> bool:
        """Return True when any clause holds."""
        return any(clause.matches(meal) for clause in self.clauses)


RECOMMENDATION_RULES: dict[str, MealRule] = {
    rule.label: rule
    for rule in (
        MealRule(
            "Weight Loss",
            (
                MealClause(tag_pattern="Low calorie|High fiber|Balanced"),
                MealClause(max_calories=350),
            ),
        ),
        MealRule(
            "Muscle Gain",
            (
                MealClause(tag_pattern="High protein|Protein"),
                MealClause(diet_type="Non-Veg"),
                MealClause(min_calories=300),
            ),
        ),
        MealRule(
            "Heart Health",
            (
                MealClause(tag_pattern="Low fat|Omega|Balanced"),
                MealClause(diet_type="Veg"),
                MealClause(max_calories=400),
            ),
        ),
        MealRule(
            "Diabetes Management",
            (
                MealClause(tag_pattern="Low carb|Low glycemic|Balanced"),
                MealClause(max_calories=350),
            ),
        ),
        MealRule(
            "Low Carb",
            (
                MealClause(tag_pattern="Low carb|Protein"),
                MealClause(max_calories=300),
            ),
        ),
        MealRule(
            "High Fiber",
            (
                MealClause(tag_pattern="High fiber|Balanced"),
                MealClause(name_pattern="Oats|Lentil|Quinoa"),
            ),
        ),
        MealRule(
            "High Protein",
            (
                MealClause(tag_pattern="High protein|Protein"),
                MealClause(diet_type="Non-Veg"),
                MealClause(name_pattern="Protein|Chicken|Egg"),
            ),
        ),
        MealRule(
            "Vitamins",
            (
                MealClause(tag_pattern="Vitamins|Fruit|Iron"),
                MealClause(name_pattern="Fruit|Smoothie|Salad"),
            ),
        ),
        MealRule(
            "Low Fat",
            (
                MealClause(tag_pattern="Low fat|Low carb"),
                MealClause(max_calories=250),
            ),
        ),
        MealRule(
            "Probiotic",
            (
                MealClause(tag_pattern="Probiotic|Balanced"),
                MealClause(name_pattern="Yogurt"),
                MealClause(diet_type="Veg"),
            ),
        ),
        MealRule(
            BALANCED,
            (
                MealClause(tag_pattern="Balanced"),
                MealClause(min_calories=200, max_calories=400),
            ),
        ),
    )
}


def rule_for(nutritional_goal: str) -> MealRule:
    """Return the rule for a goal label, falling back to Balanced."""
    return RECOMMENDATION_RULES.get(nutritional_goal, RECOMMENDATION_RULES[BALANCED])


def fits_exercise_level(meal: Meal, exercise_level: str) -> bool:
    """Return True when a meal's calories suit the exercise level.

    Unknown levels accept every meal.
    """
    low, high = _EXERCISE_CALORIE_BOUNDS.get(exercise_level, (None, None))
    if low is not None and meal.calories < low:
        return False
    return high is None or meal.calories <= high
