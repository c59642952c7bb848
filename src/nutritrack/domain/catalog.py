"""Domain models for the meal catalog."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Meal:
    """Catalog meal with its calorie count and tags."""

    id: str
    name: str
    calories: float
    nutritional_value: str
    diet_type: str  # Veg or Non-Veg
