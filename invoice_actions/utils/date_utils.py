"""Date manipulation utilities"""

from datetime import date, datetime, timezone


def today(tz_name: str = "UTC") -> date:
    """Current calendar date on the server clock, in UTC or local time"""
    if tz_name == "local":
        return datetime.now().date()
    return datetime.now(timezone.utc).date()


def to_iso_date(value: date) -> str:
    """Format a date as YYYY-MM-DD"""
    return value.isoformat()
