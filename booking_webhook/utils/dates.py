"""
Date helpers for booking timestamps and listing filters

Booking payloads carry epoch milliseconds; the API speaks ISO-8601 with
millisecond precision and a trailing ``Z``. Everything here is UTC.
"""
from datetime import datetime, timedelta, timezone
from typing import Any, Optional, Tuple

FAR_FUTURE = datetime(9999, 12, 31, 23, 59, 59, tzinfo=timezone.utc)

DATE_FILTERS = ("today", "tomorrow", "this_week")


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def to_iso(dt: datetime) -> str:
    """Format a datetime as 2024-05-01T10:00:00.000Z"""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    dt = dt.astimezone(timezone.utc)
    return dt.strftime("%Y-%m-%dT%H:%M:%S.") + f"{dt.microsecond // 1000:03d}Z"


def from_epoch_millis(value: Any) -> datetime:
    """Convert epoch milliseconds (int or numeric string) to a UTC datetime"""
    if isinstance(value, bool):
        raise ValueError(f"Not a timestamp: {value!r}")
    millis = int(float(value))
    return datetime.fromtimestamp(millis / 1000, tz=timezone.utc)


def epoch_millis_to_iso(value: Any) -> str:
    return to_iso(from_epoch_millis(value))


def parse_iso(value: str) -> datetime:
    """Parse an ISO-8601 string; naive values are taken as UTC"""
    text = value.strip()
    if text.endswith("Z") or text.endswith("z"):
        text = text[:-1] + "+00:00"
    dt = datetime.fromisoformat(text)
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def _end_of_day(dt: datetime) -> datetime:
    return dt.replace(hour=23, minute=59, second=59, microsecond=0)


def _start_of_day(dt: datetime) -> datetime:
    return dt.replace(hour=0, minute=0, second=0, microsecond=0)


def resolve_date_range(
    filter_name: Optional[str] = None,
    start: Optional[str] = None,
    end: Optional[str] = None,
    now: Optional[datetime] = None
) -> Tuple[datetime, datetime]:
    """
    Work out the [start, end) window used to filter bookings

    Args:
        filter_name: One of today, tomorrow, this_week; anything else falls
            back to the explicit bounds
        start: ISO start bound, defaults to now
        end: ISO end bound, defaults to the far future
        now: Reference time, defaults to the current UTC time

    Returns:
        Tuple of timezone-aware (range_start, range_end)

    Raises:
        ValueError: If an explicit bound is not valid ISO-8601
    """
    now = now or utc_now()

    if filter_name == "today":
        return now, _end_of_day(now)

    if filter_name == "tomorrow":
        tomorrow = now + timedelta(days=1)
        return _start_of_day(tomorrow), _end_of_day(tomorrow)

    if filter_name == "this_week":
        # Weeks run Sunday to Saturday
        days_since_sunday = (now.weekday() + 1) % 7
        week_start = _start_of_day(now - timedelta(days=days_since_sunday))
        return week_start, _end_of_day(week_start + timedelta(days=6))

    range_start = parse_iso(start) if start else now
    range_end = parse_iso(end) if end else FAR_FUTURE
    return range_start, range_end


def in_range(start: datetime, end: datetime, date_range: Tuple[datetime, datetime]) -> bool:
    """True when a booking starts inside the window and ends before it closes"""
    range_start, range_end = date_range
    return start >= range_start and end < range_end
