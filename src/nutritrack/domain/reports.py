"""Derived calorie totals and report summaries."""

from dataclasses import dataclass
from datetime import date

POSITIVE = "Positive"
NEGATIVE = "Negative"


def classify_progress(net_calories: float) -> str:
    """Return Positive when intake did not exceed calories burned."""
    return POSITIVE if net_calories <= 0 else NEGATIVE


@dataclass(frozen=True)
class DailyTotal:
    """Calorie intake and burn for one calendar day."""

    day: date
    calorie_intake: float
    calorie_burned: float

    @property
    def net_calories(self) -> float:
        return self.calorie_intake - self.calorie_burned

    @property
    def progress(self) -> str:
        return classify_progress(self.net_calories)

    @property
    def has_activity(self) -> bool:
        return self.calorie_intake > 0 or self.calorie_burned > 0


@dataclass(frozen=True)
class RangeSummary:
    """Aggregate statistics over an inclusive date range."""

    total_intake: float
    total_burned: float
    net_calories: float
    avg_intake: int
    avg_burned: int
    net_progress: str
    days_tracked: int


@dataclass(frozen=True)
class RangeReport:
    """Per-day totals and their summary for a date range."""

    start: date
    end: date
    daily_data: list[DailyTotal]
    summary: RangeSummary
