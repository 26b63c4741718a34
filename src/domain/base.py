from datetime import UTC, datetime
from typing import Optional


def utcnow() -> datetime:
    """Naive UTC timestamp, matching the DateTime columns of every table."""
    return datetime.now(UTC).replace(tzinfo=None)


def as_naive_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Convert an aware timestamp to naive UTC; naive values pass through."""
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone(UTC).replace(tzinfo=None)
