"""Meal catalog access."""

from dataclasses import dataclass
from typing import Protocol

from nutritrack.domain.catalog import Meal
from nutritrack.domain.recommendations import MealRule


class CatalogRepository(Protocol):
    """Read-only persistence interface for catalog meals."""

    def get_meal(self, meal_id: str) -> Meal | None:
        """Return a meal by id."""

    def list_meals(self) -> list[Meal]:
        """Return every meal in catalog order."""

    def query_meals(self, rule: MealRule, limit: int) -> list[Meal]:
        """Return up to ``limit`` meals matching ``rule`` in catalog order."""

    def distinct_tags(self) -> list[str]:
        """Return distinct nutritional-value tags."""


@dataclass
class CatalogService:
    """Service exposing the meal catalog."""

    repository: CatalogRepository

    def list_meals(self) -> list[Meal]:
        """Return all catalog meals."""
        return self.repository.list_meals()
