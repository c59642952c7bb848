"""Date parsing and local-day windows."""

from datetime import date, datetime, time, timedelta
from zoneinfo import ZoneInfo

from nutritrack.domain.errors import ValidationError

DECEMBER = 12


def parse_datetime(value: object, tz: ZoneInfo) -> datetime:
    """Parse an ISO date or datetime; naive values are read in ``tz``."""
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime.combine(value, time.min)
    elif isinstance(value, str) and value.strip():
        try:
            parsed = datetime.fromisoformat(value.strip())
        except ValueError as exc:
            raise ValidationError("Invalid date format") from exc
    else:
        raise ValidationError("Invalid date format")
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=tz)
    return parsed


def parse_day(value: object, tz: ZoneInfo) -> date:
    """Parse a value into the calendar day it falls on in ``tz``."""
    return parse_datetime(value, tz).astimezone(tz).date()


def day_window(day: date, tz: ZoneInfo) -> tuple[datetime, datetime]:
    """Return the inclusive [00:00, 23:59:59.999999] bounds of a local day."""
    start = datetime.combine(day, time.min, tzinfo=tz)
    end = datetime.combine(day, time.max, tzinfo=tz)
    return start, end


def days_between(start: date, end: date) -> list[date]:
    """Return every calendar day from start to end inclusive."""
    return [start + timedelta(days=offset) for offset in range((end - start).days + 1)]


def one_month_before(moment: datetime) -> datetime:
    """Return the same wall-clock moment one calendar month earlier.

    The day is clamped to the length of the earlier month.
    """
    if moment.month == 1:
        year, month = moment.year - 1, DECEMBER
    else:
        year, month = moment.year, moment.month - 1
    first_of_next = date(year + month // DECEMBER, month % DECEMBER + 1, 1)
    last_day = (first_of_next - timedelta(days=1)).day
    return moment.replace(year=year, month=month, day=min(moment.day, last_day))
