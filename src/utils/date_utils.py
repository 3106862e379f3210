"""Timestamp parsing utilities"""

from datetime import date, datetime, time, timezone


def ensure_aware(value: datetime) -> datetime:
    """Attach UTC to naive datetimes, leave aware ones untouched"""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def parse_timestamp(value) -> datetime:
    """Resolve a stored timestamp to an absolute, timezone-aware instant.

    Accepts ``datetime``, ``date``, ISO-8601 strings and the ``DD/MM/YYYY``
    strings written by manual entry forms.

    Raises:
        ValueError: If the value cannot be resolved.
    """
    if isinstance(value, datetime):
        return ensure_aware(value)
    if isinstance(value, date):
        return datetime.combine(value, time.min, tzinfo=timezone.utc)
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"Unsupported timestamp value: {value!r}")
    raw = value.strip()
    parts = raw.split("/")
    if len(parts) == 3:
        day, month, year = (int(part) for part in parts)
        return datetime(year, month, day, tzinfo=timezone.utc)
    if raw.endswith("Z"):
        raw = raw[:-1] + "+00:00"
    return ensure_aware(datetime.fromisoformat(raw))


def utc_now() -> datetime:
    """Current instant in UTC"""
    return datetime.now(timezone.utc)


__all__ = ["ensure_aware", "parse_timestamp", "utc_now"]
