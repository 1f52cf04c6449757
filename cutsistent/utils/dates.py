"""
Calendar-day helpers for the streak engine.

Timestamps are stored as naive UTC. Days are calendar dates in one zone:
the configured ``STREAK_TIMEZONE`` or, when unset, the local zone of the
machine running the computation.
"""

from datetime import date, datetime, time, timedelta, timezone, tzinfo
from typing import Optional, Tuple
from zoneinfo import ZoneInfo


def resolve_zone(name: Optional[str]) -> Optional[tzinfo]:
    """Return the zone for an IANA name, or None for the machine's local zone."""
    if not name:
        return None
    return ZoneInfo(name)


def to_utc_naive(value: datetime) -> datetime:
    """Normalize a timestamp for storage. Naive input is taken as UTC."""
    if value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


def local_date(logged_at: datetime, zone: Optional[tzinfo] = None) -> date:
    if logged_at.tzinfo is None:
        logged_at = logged_at.replace(tzinfo=timezone.utc)
    # astimezone(None) converts to the system local zone
    return logged_at.astimezone(zone).date()


def today_in(zone: Optional[tzinfo] = None) -> date:
    return datetime.now(zone).date()


def day_bounds_utc(day: date, zone: Optional[tzinfo] = None) -> Tuple[datetime, datetime]:
    """Naive UTC ``[start, end)`` covering one calendar day in ``zone``."""
    if zone is None:
        start = datetime.combine(day, time.min).astimezone()
        end = datetime.combine(day + timedelta(days=1), time.min).astimezone()
    else:
        start = datetime.combine(day, time.min, tzinfo=zone)
        end = datetime.combine(day + timedelta(days=1), time.min, tzinfo=zone)
    return to_utc_naive(start), to_utc_naive(end)
