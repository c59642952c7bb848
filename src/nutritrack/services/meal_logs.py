"""Meal logging: add and delete entries, report calorie warnings."""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Protocol

from nutritrack.domain.errors import NotFoundError, NutriTrackError, ValidationError
from nutritrack.domain.ids import is_object_id
from nutritrack.domain.logs import (
    MEAL_TYPES,
    DayMealLogs,
    MealLogDeletion,
    MealLogEntry,
    MealLogResult,
    MealLogView,
)
from nutritrack.services.aggregates import DailyAggregator, IntakeRepository
from nutritrack.services.calendar import day_window, parse_datetime
from nutritrack.services.catalog import CatalogRepository
from nutritrack.services.goals import GoalService

logger = logging.getLogger(__name__)


class MealLogRepository(IntakeRepository, Protocol):
    """Persistence interface for meal logs."""

    def create_meal_log(  # noqa: PLR0913
        self,
        user_id: str,
        meal_id: str,
        logged_at: datetime,
        meal_type: str,
        calorie_intake: float,
    ) -> MealLogEntry:
        """Insert a meal log and return it."""

    def get_meal_log(self, log_id: str, user_id: str) -> MealLogEntry | None:
        """Return the log when it exists and belongs to the user."""

    def delete_meal_log(self, log_id: str, user_id: str) -> bool:
        """Delete the user's log and return whether a row was removed."""

    def list_meal_log_views(
        self, user_id: str, start: datetime, end: datetime
    ) -> list[MealLogView]:
        """Return logs in the window joined with their catalog meals."""


@dataclass
class MealLogService:
    """Service that records meals eaten and checks them against the goal."""

    repository: MealLogRepository
    catalog: CatalogRepository
    goal_service: GoalService
    aggregator: DailyAggregator

    def add_meal(
        self, user_id: str, meal_id: object, meal_type: object, date: object
    ) -> MealLogResult:
        """Log a catalog meal and return the day's total with any warnings.

        The meal's current calories are copied into the entry, so later
        catalog edits do not change past totals.
        """
        if not meal_id or not meal_type or not date:
            raise ValidationError("Please provide mealId, mealType, and date")
        if meal_type not in MEAL_TYPES:
            raise ValidationError(
                "Invalid meal type. Must be one of: Breakfast, Lunch, Dinner, Snack"
            )
        logged_at = parse_datetime(date, self.aggregator.tz)
        if not is_object_id(user_id) or not is_object_id(meal_id):
            raise ValidationError("Invalid ID format")

        meal = self.catalog.get_meal(str(meal_id))
        if meal is None:
            raise NotFoundError("Meal not found")

        goal = self.goal_service.get_goal(user_id)
        entry = self.repository.create_meal_log(
            user_id=user_id,
            meal_id=meal.id,
            logged_at=logged_at,
            meal_type=str(meal_type),
            calorie_intake=meal.calories,
        )
        logger.info(
            "Logged meal",
            extra={"user_id": user_id, "meal_log_id": entry.id, "meal_id": meal.id},
        )

        try:
            total = self.aggregator.daily_total(user_id, logged_at).calorie_intake
        except NutriTrackError:
            self.repository.delete_meal_log(entry.id, user_id)
            raise
        daily_limit = (
            goal.daily_calorie_limit if goal else self.goal_service.default_daily_limit
        )
        warnings: dict[str, str] = {}
        if total > daily_limit:
            warnings["calorieLimit"] = (
                "Warning: You've exceeded your daily calorie limit of "
                f"{daily_limit} calories."
            )
        if goal and meal.nutritional_value != goal.nutritional_goal:
            warnings["nutritionalMismatch"] = (
                f"Warning: This meal ({meal.nutritional_value}) doesn't match your "
                f"nutritional preference ({goal.nutritional_goal})."
            )
        return MealLogResult(
            log_id=entry.id,
            total_calories=total,
            daily_limit=daily_limit,
            warnings=warnings or None,
        )

    def delete_meal(self, log_id: str, user_id: str) -> MealLogDeletion:
        """Delete the user's log entry and return the day's new total.

        Entries owned by someone else are reported exactly like missing ones.
        """
        if not is_object_id(log_id) or not is_object_id(user_id):
            raise ValidationError("Invalid ID format")
        entry = self.repository.get_meal_log(log_id, user_id)
        if entry is None:
            raise NotFoundError("Meal log not found or unauthorized")
        # A failed total read must leave the entry in place.
        before = self.aggregator.daily_total(user_id, entry.logged_at).calorie_intake
        if not self.repository.delete_meal_log(log_id, user_id):
            raise NotFoundError("Meal log not found or unauthorized")
        logger.info("Deleted meal log", extra={"user_id": user_id, "meal_log_id": log_id})
        return MealLogDeletion(
            deleted=True, total_calories=max(before - entry.calorie_intake, 0.0)
        )

    def list_meals_for_day(self, user_id: str, date: object) -> DayMealLogs:
        """Return the user's meal logs for a day, by slot then latest first."""
        day_value = parse_datetime(date, self.aggregator.tz)
        if not is_object_id(user_id):
            raise ValidationError("Invalid user ID")
        day = day_value.astimezone(self.aggregator.tz).date()
        start, end = day_window(day, self.aggregator.tz)
        views = self.repository.list_meal_log_views(user_id, start, end)
        ordered = sorted(views, key=lambda view: view.entry.created_at, reverse=True)
        ordered.sort(key=lambda view: view.entry.meal_type)
        return DayMealLogs(
            day=day,
            logs=ordered,
            total_calories=self.repository.sum_calorie_intake(user_id, start, end),
        )
