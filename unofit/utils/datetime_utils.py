"""
Timezone-aware datetime helpers
"""
from datetime import datetime, timezone

UTC = timezone.utc


def now_utc() -> datetime:
    """Current time in UTC (timezone-aware). Use for created_at, updated_at, etc."""
    return datetime.now(UTC)
