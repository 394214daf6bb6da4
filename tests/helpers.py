"""Shared test constants."""
from datetime import datetime, timezone

# 2024-07-01 is a Monday
MONDAY = datetime(2024, 7, 1, tzinfo=timezone.utc)


def monday_at(hour: int, minute: int = 0) -> datetime:
    return MONDAY.replace(hour=hour, minute=minute)
