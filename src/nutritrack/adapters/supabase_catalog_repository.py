"""Supabase repository for the meal catalog."""

from dataclasses import dataclass

from supabase import Client

from nutritrack.adapters.supabase_errors import execute
from nutritrack.domain.catalog import Meal
from nutritrack.domain.recommendations import MealClause, MealRule
from nutritrack.services.catalog import CatalogRepository

_MEAL_COLUMNS = "id, meal_name, calories, nutritional_value, diet_type"


@dataclass
class SupabaseCatalogRepository(CatalogRepository):
    """Supabase implementation for catalog reads."""

    client: Client

    def get_meal(self, meal_id: str) -> Meal | None:
        """Return a meal by id."""
        response = execute(
            self.client.table("meals").select(_MEAL_COLUMNS).eq("id", meal_id).limit(1),
            "fetch meal",
        )
        if not response.data:
            return None
        return parse_meal(response.data[0])

    def list_meals(self) -> list[Meal]:
        """Return every meal in catalog order."""
        response = execute(
            self.client.table("meals").select(_MEAL_COLUMNS).order("id", desc=False),
            "fetch meals",
        )
        return [parse_meal(row) for row in response.data or []]

    def query_meals(self, rule: MealRule, limit: int) -> list[Meal]:
        """Return the first ``limit`` meals matching any clause of the rule."""
        response = execute(
            self.client.table("meals")
            .select(_MEAL_COLUMNS)
            .or_(rule_filter(rule))
            .order("id", desc=False)
            .limit(limit),
            "query meals",
        )
        return [parse_meal(row) for row in response.data or []]

    def distinct_tags(self) -> list[str]:
        """Return distinct nutritional-value tags in catalog order."""
        response = execute(
            self.client.table("meals")
            .select("nutritional_value")
            .order("id", desc=False),
            "fetch meal tags",
        )
        tags: list[str] = []
        for row in response.data or []:
            tag = row.get("nutritional_value")
            if isinstance(tag, str) and tag and tag not in tags:
                tags.append(tag)
        return tags


def rule_filter(rule: MealRule) -> str:
    """Render a rule as a PostgREST ``or`` filter."""
    return ",".join(_clause_filter(clause) for clause in rule.clauses)


def _clause_filter(clause: MealClause) -> str:
    conditions: list[str] = []
    if clause.tag_pattern is not None:
        conditions.append(f'nutritional_value.imatch."{clause.tag_pattern}"')
    if clause.name_pattern is not None:
        conditions.append(f'meal_name.imatch."{clause.name_pattern}"')
    if clause.diet_type is not None:
        conditions.append(f'diet_type.eq."{clause.diet_type}"')
    if clause.min_calories is not None:
        conditions.append(f"calories.gte.{clause.min_calories:g}")
    if clause.max_calories is not None:
        conditions.append(f"calories.lte.{clause.max_calories:g}")
    if len(conditions) == 1:
        return conditions[0]
    return f"and({','.join(conditions)})"


def parse_meal(row: dict[str, object]) -> Meal:
    """Build a catalog meal from a row."""
    return Meal(
        id=str(row["id"]),
        name=str(row.get("meal_name", "")),
        calories=float(row.get("calories", 0.0)),
        nutritional_value=str(row.get("nutritional_value", "")),
        diet_type=str(row.get("diet_type", "")),
    )
