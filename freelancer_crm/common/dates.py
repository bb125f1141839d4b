"""Date helpers. Everything is compared as timezone-aware UTC."""

from datetime import date, datetime, timezone
from typing import Optional, Union


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def parse_instant(value: Union[str, date, datetime]) -> datetime:
    """Parse an ISO date or datetime into an aware UTC datetime.

    Accepts a trailing 'Z' and date-only strings ("2024-02-10" is midnight UTC).
    Naive values are taken as UTC.
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime(value.year, value.month, value.day)
    elif isinstance(value, str):
        parsed = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    else:
        raise TypeError(f"Cannot parse date from {type(value).__name__}")

    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def resolve_now(now: Optional[datetime] = None) -> datetime:
    """Current instant unless the caller pins one."""
    return utcnow() if now is None else parse_instant(now)
