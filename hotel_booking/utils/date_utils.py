"""
Date and time helpers shared by models and services.

All datetimes produced here are timezone-aware in UTC.
"""

from datetime import datetime, timezone

UTC = timezone.utc


def now_utc() -> datetime:
    """Return current UTC datetime (timezone-aware)."""
    return datetime.now(UTC)
