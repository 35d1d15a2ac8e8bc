"""
Timezone-aware datetime utilities.
"""

from datetime import datetime, timezone

# UTC timezone constant
UTC = timezone.utc


def now_utc() -> datetime:
    """
    Get current UTC datetime (timezone-aware).

    Replaces datetime.utcnow() which is deprecated in Python 3.12+.

    Returns:
        datetime: Current UTC time with tzinfo set to UTC
    """
    return datetime.now(UTC)


def ensure_utc(value: datetime) -> datetime:
    """
    Attach UTC to naive datetimes read back from the database.

    SQLite drops tzinfo on storage, so values come back naive.
    """
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)
