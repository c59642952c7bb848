"""Daily and date-range calorie aggregation for a user."""

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Protocol
from zoneinfo import ZoneInfo

from nutritrack.domain.errors import ValidationError
from nutritrack.domain.ids import is_object_id
from nutritrack.domain.logs import ExerciseLogEntry, MealLogEntry
from nutritrack.domain.reports import (
    DailyTotal,
    RangeReport,
    RangeSummary,
    classify_progress,
)
from nutritrack.services.calendar import day_window, days_between, parse_day

MAX_RANGE_DAYS = 365


class IntakeRepository(Protocol):
    """Read interface over a user's meal logs."""

    def list_meal_logs(
        self, user_id: str, start: datetime, end: datetime
    ) -> list[MealLogEntry]:
        """Return meal logs with start <= logged_at <= end."""

    def sum_calorie_intake(self, user_id: str, start: datetime, end: datetime) -> float:
        """Return total calorie intake with start <= logged_at <= end."""


class BurnRepository(Protocol):
    """Read interface over a user's exercise logs."""

    def list_exercise_logs(
        self, user_id: str, start: datetime | None, end: datetime | None
    ) -> list[ExerciseLogEntry]:
        """Return exercise logs within optional inclusive bounds."""

    def sum_calories_burned(
        self, user_id: str, start: datetime | None, end: datetime | None
    ) -> float:
        """Return calories burned within optional inclusive bounds."""


@dataclass
class DailyAggregator:
    """Sums intake and burn per local calendar day.

    Totals are recomputed from the logs on every call and never stored.
    """

    intake: IntakeRepository
    burn: BurnRepository
    timezone_name: str = "UTC"
    tz: ZoneInfo = field(init=False)

    def __post_init__(self) -> None:
        self.tz = ZoneInfo(self.timezone_name)

    def daily_total(self, user_id: str, day: object) -> DailyTotal:
        """Return the user's intake and burn for one day, zeros when empty."""
        _require_user_id(user_id)
        resolved = parse_day(day, self.tz)
        start, end = day_window(resolved, self.tz)
        return DailyTotal(
            day=resolved,
            calorie_intake=self.intake.sum_calorie_intake(user_id, start, end),
            calorie_burned=self.burn.sum_calories_burned(user_id, start, end),
        )

    def range_summary(
        self, user_id: str, start_date: object, end_date: object
    ) -> RangeReport:
        """Return zero-filled per-day totals and a summary for a date range.

        Both ends are inclusive. Averages only count days with any intake
        or burn.
        """
        _require_user_id(user_id)
        start_day = parse_day(start_date, self.tz)
        end_day = parse_day(end_date, self.tz)
        if end_day < start_day:
            raise ValidationError("End date must be after start date")
        if (end_day - start_day).days > MAX_RANGE_DAYS:
            raise ValidationError("Date range cannot exceed 365 days")

        window_start, _ = day_window(start_day, self.tz)
        _, window_end = day_window(end_day, self.tz)
        intake_by_day: dict[date, float] = {}
        for meal_log in self.intake.list_meal_logs(user_id, window_start, window_end):
            log_day = meal_log.logged_at.astimezone(self.tz).date()
            intake_by_day[log_day] = (
                intake_by_day.get(log_day, 0.0) + meal_log.calorie_intake
            )
        burn_by_day: dict[date, float] = {}
        for exercise_log in self.burn.list_exercise_logs(
            user_id, window_start, window_end
        ):
            log_day = exercise_log.logged_at.astimezone(self.tz).date()
            burn_by_day[log_day] = (
                burn_by_day.get(log_day, 0.0) + exercise_log.calories_burned
            )

        daily = [
            DailyTotal(
                day=day,
                calorie_intake=intake_by_day.get(day, 0.0),
                calorie_burned=burn_by_day.get(day, 0.0),
            )
            for day in days_between(start_day, end_day)
        ]
        return RangeReport(
            start=start_day,
            end=end_day,
            daily_data=daily,
            summary=_summarize(daily),
        )


def _summarize(daily: list[DailyTotal]) -> RangeSummary:
    total_intake = sum(day.calorie_intake for day in daily)
    total_burned = sum(day.calorie_burned for day in daily)
    days_tracked = sum(1 for day in daily if day.has_activity)
    net = total_intake - total_burned
    return RangeSummary(
        total_intake=total_intake,
        total_burned=total_burned,
        net_calories=net,
        avg_intake=_rounded_average(total_intake, days_tracked),
        avg_burned=_rounded_average(total_burned, days_tracked),
        net_progress=classify_progress(net),
        days_tracked=days_tracked,
    )


def _rounded_average(total: float, days: int) -> int:
    if days == 0:
        return 0
    return int(total / days + 0.5)


def _require_user_id(user_id: str) -> None:
    if not is_object_id(user_id):
        raise ValidationError("Invalid user ID")
