"""
Centralized DateTime Utilities
==============================

Provides consistent datetime handling across the entire application.
All datetime operations use the clinic timezone configured in hospital.core.config.

Functions:
- parse_datetime(): Parse an ISO 8601 string or datetime, None on failure
- to_clinic_time(): Normalize any datetime to the clinic timezone
- to_iso(): Convert datetime object to ISO 8601 string
- weekday_name() / clock_label() / long_date_label(): human-readable parts

Naive datetimes are always interpreted as clinic-local time.
"""
import logging
from datetime import date as date_type, datetime, timezone as dt_timezone, tzinfo
from typing import Optional, Union
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from hospital.core.config import get_settings

logger = logging.getLogger(__name__)


def get_clinic_timezone() -> tzinfo:
    """
    Get the clinic timezone from config.
    Returns timezone object (defaults to UTC if invalid).
    """
    tz_str = get_settings().clinic_timezone
    
    # Handle UTC explicitly
    if tz_str.upper() == "UTC":
        return dt_timezone.utc
    
    try:
        return ZoneInfo(tz_str)
    except (ZoneInfoNotFoundError, ValueError):
        logger.warning("Invalid timezone '%s', falling back to UTC", tz_str)
        return dt_timezone.utc


def to_clinic_time(dt: datetime) -> datetime:
    """
    Convert a datetime to the clinic timezone.
    
    Naive values are assumed to already be clinic-local. Sub-millisecond
    precision is dropped so two instants compare equal when their
    millisecond timestamps match.
    """
    clinic_tz = get_clinic_timezone()
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=clinic_tz)
    else:
        dt = dt.astimezone(clinic_tz)
    return dt.replace(microsecond=(dt.microsecond // 1000) * 1000)


def parse_datetime(value: Union[str, datetime, None]) -> Optional[datetime]:
    """
    Parse an ISO 8601 string (or pass through a datetime) into a clinic-local datetime.
    
    Args:
        value: ISO 8601 string (e.g., "2025-12-24T10:30:00Z") or datetime
    
    Returns:
        timezone-aware datetime object, or None if value is not a date
    """
    if isinstance(value, datetime):
        return to_clinic_time(value)
    if not isinstance(value, str) or not value.strip():
        return None
    
    try:
        # Replace 'Z' with '+00:00' for parsing
        parsed = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    except ValueError:
        return None
    return to_clinic_time(parsed)


def parse_date(value: Union[str, date_type, datetime]) -> Optional[date_type]:
    """Parse a calendar date ("YYYY-MM-DD" or full ISO timestamp)."""
    if isinstance(value, datetime):
        return to_clinic_time(value).date()
    if isinstance(value, date_type):
        return value
    try:
        return date_type.fromisoformat(value)
    except (TypeError, ValueError):
        parsed = parse_datetime(value)
        return parsed.date() if parsed else None


def to_iso(dt: Optional[datetime]) -> Optional[str]:
    """
    Convert datetime object to ISO 8601 string.
    
    Returns:
        ISO 8601 formatted string ('Z' suffix for UTC), or None if dt is None
    """
    if dt is None:
        return None
    
    dt = to_clinic_time(dt)
    iso = dt.isoformat(timespec="milliseconds")
    if dt.utcoffset() == dt_timezone.utc.utcoffset(None):
        return iso.replace("+00:00", "Z")
    return iso


def weekday_name(dt: datetime) -> str:
    """English weekday name in clinic time, e.g. "Monday"."""
    return to_clinic_time(dt).strftime("%A")


def clock_label(dt: datetime) -> str:
    """Two-digit 12-hour clock in clinic time, e.g. "09:05 AM"."""
    return to_clinic_time(dt).strftime("%I:%M %p")


def long_date_label(dt: datetime) -> str:
    """Long date in clinic time, e.g. "Monday, July 1, 2024"."""
    local = to_clinic_time(dt)
    return f"{local.strftime('%A, %B')} {local.day}, {local.year}"


def minute_of_day(dt: datetime) -> int:
    """Minutes since clinic-local midnight."""
    local = to_clinic_time(dt)
    return local.hour * 60 + local.minute
