"""Exercise logging service."""

import logging
import math
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Protocol

from nutritrack.domain.errors import ValidationError
from nutritrack.domain.ids import is_object_id
from nutritrack.domain.logs import (
    EXERCISE_PERIODS,
    MAX_ACTIVITY_TYPE_LENGTH,
    ExerciseHistory,
    ExerciseLogEntry,
)
from nutritrack.services.aggregates import BurnRepository, DailyAggregator
from nutritrack.services.calendar import one_month_before, parse_datetime

logger = logging.getLogger(__name__)


class ExerciseLogRepository(BurnRepository, Protocol):
    """Persistence interface for exercise logs."""

    def create_exercise_log(  # noqa: PLR0913
        self,
        user_id: str,
        logged_at: datetime,
        activity_type: str,
        duration: str,
        calories_burned: float,
    ) -> ExerciseLogEntry:
        """Insert an exercise log and return it."""

    def delete_exercise_log(self, log_id: str, user_id: str) -> bool:
        """Delete the user's log and return whether a row was removed."""


@dataclass
class ExerciseLogService:
    """Service for recording and listing exercise sessions."""

    repository: ExerciseLogRepository
    aggregator: DailyAggregator

    def add_exercise(  # noqa: PLR0913
        self,
        user_id: str,
        activity_type: object,
        duration: object,
        date: object,
        calories_burned: object,
    ) -> str:
        """Validate and record an exercise session, returning its id."""
        if (
            not activity_type
            or not duration
            or not date
            or calories_burned is None
            or calories_burned == ""
        ):
            raise ValidationError(
                "Please provide all required fields: ActivityType, Duration, "
                "Date, and CaloriesBurned"
            )
        logged_at = parse_datetime(date, self.aggregator.tz)
        calories = _parse_calories(calories_burned)
        activity = str(activity_type).strip()
        if not activity or len(activity) > MAX_ACTIVITY_TYPE_LENGTH:
            raise ValidationError("ActivityType must be between 1 and 50 characters")
        if not is_object_id(user_id):
            raise ValidationError("Invalid user ID format")

        entry = self.repository.create_exercise_log(
            user_id=user_id,
            logged_at=logged_at,
            activity_type=activity,
            duration=str(duration).strip(),
            calories_burned=calories,
        )
        logger.info(
            "Logged exercise", extra={"user_id": user_id, "exercise_log_id": entry.id}
        )
        return entry.id

    def delete_exercise(self, log_id: str, user_id: str) -> bool:
        """Delete the user's exercise log; False when absent or not theirs."""
        if not is_object_id(log_id) or not is_object_id(user_id):
            raise ValidationError("Invalid ID format")
        deleted = self.repository.delete_exercise_log(log_id, user_id)
        if deleted:
            logger.info(
                "Deleted exercise log",
                extra={"user_id": user_id, "exercise_log_id": log_id},
            )
        return deleted

    def list_exercises(self, user_id: str, period: str = "all") -> ExerciseHistory:
        """Return logs newest first and calories burned for a period."""
        if period not in EXERCISE_PERIODS:
            raise ValidationError(
                "Invalid filter type. Must be one of: all, today, week, month"
            )
        if not is_object_id(user_id):
            raise ValidationError("Invalid user ID")
        start = self._period_start(period)
        logs = self.repository.list_exercise_logs(user_id, start, None)
        return ExerciseHistory(
            period=period,
            logs=sorted(logs, key=lambda log: log.logged_at, reverse=True),
            total_calories=self.repository.sum_calories_burned(user_id, start, None),
        )

    def _period_start(self, period: str) -> datetime | None:
        now = datetime.now(tz=UTC).astimezone(self.aggregator.tz)
        if period == "today":
            return now.replace(hour=0, minute=0, second=0, microsecond=0)
        if period == "week":
            return now - timedelta(days=7)
        if period == "month":
            return one_month_before(now)
        return None


def _parse_calories(value: object) -> float:
    if isinstance(value, bool):
        raise ValidationError("CaloriesBurned must be a positive number")
    try:
        calories = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError) as exc:
        raise ValidationError("CaloriesBurned must be a positive number") from exc
    if not math.isfinite(calories) or calories < 0:
        raise ValidationError("CaloriesBurned must be a positive number")
    return calories
