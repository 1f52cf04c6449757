"""
Food Entry Service

Handles food logging: creating, listing, editing and deleting entries, and
keeping the daily log of every touched day current.
"""

from datetime import date, datetime
from typing import Any, Dict, Iterable, List, Optional

from sqlalchemy import desc

from cutsistent.extensions import db
from cutsistent.models.food_entry import FoodEntry
from cutsistent.models.profile import Profile
from cutsistent.services.daily_log_service import refresh_daily_log
from cutsistent.services.engine_settings import engine_settings
from cutsistent.services.streak_engine import DailyTotals, round_grams
from cutsistent.utils.dates import day_bounds_utc, local_date, to_utc_naive

ENTRY_FIELDS = ["name", "calories", "protein", "carbs", "sugar", "image_url"]


def serialize_food_entry(entry: FoodEntry) -> Dict[str, Any]:
    return {
        "id": entry.id,
        "name": entry.name,
        "calories": int(entry.calories or 0),
        "protein": float(entry.protein or 0),
        "carbs": float(entry.carbs or 0),
        "sugar": float(entry.sugar or 0),
        "image_url": entry.image_url,
        "logged_at": entry.logged_at.isoformat() if entry.logged_at else None,
    }


def day_stats(entries: Iterable[FoodEntry]) -> Dict[str, float]:
    """Summed nutrition of a list of entries."""
    totals = DailyTotals()
    for entry in entries:
        totals.add(entry)
    return {
        "calories": int(totals.calories),
        "protein": float(round_grams(totals.protein)),
        "carbs": float(round_grams(totals.carbs)),
        "sugar": float(round_grams(totals.sugar)),
    }


def _settings_for(user_id: int):
    return engine_settings(Profile.query.filter_by(user_id=user_id).first())


def _refresh_days(user_id: int, days: Iterable[date], settings) -> None:
    for day in sorted(set(days)):
        refresh_daily_log(user_id, day, settings)


def create_food_entry(user_id: int, data: Dict[str, Any]) -> FoodEntry:
    """
    Log a food entry and refresh the daily log of its day.

    Args:
        user_id: Owner of the entry
        data: Validated payload (name, calories, protein, carbs, sugar,
            image_url, logged_at)

    Returns:
        The stored FoodEntry
    """
    settings = _settings_for(user_id)
    logged_at = data.get("logged_at")
    logged_at = to_utc_naive(logged_at) if logged_at else datetime.utcnow()

    entry = FoodEntry(user_id=user_id, logged_at=logged_at)
    for field in ENTRY_FIELDS:
        if field in data:
            setattr(entry, field, data[field])
    db.session.add(entry)
    db.session.flush()

    _refresh_days(user_id, [local_date(entry.logged_at, settings.zone)], settings)
    db.session.commit()
    return entry


def list_food_entries(user_id: int, day: date, zone=None) -> List[FoodEntry]:
    """Entries logged on one calendar day, newest first."""
    start, end = day_bounds_utc(day, zone)
    return (
        FoodEntry.query
        .filter(FoodEntry.user_id == user_id)
        .filter(FoodEntry.logged_at >= start, FoodEntry.logged_at < end)
        .order_by(desc(FoodEntry.logged_at))
        .all()
    )


def get_food_entry(user_id: int, entry_id: int) -> Optional[FoodEntry]:
    return FoodEntry.query.filter_by(id=entry_id, user_id=user_id).first()


def update_food_entry(user_id: int, entry_id: int, data: Dict[str, Any]) -> Optional[FoodEntry]:
    """Edit an entry. Refreshes both days when the entry moves to another day."""
    entry = get_food_entry(user_id, entry_id)
    if not entry:
        return None

    settings = _settings_for(user_id)
    old_day = local_date(entry.logged_at, settings.zone)

    for field in ENTRY_FIELDS:
        if field in data:
            setattr(entry, field, data[field])
    if data.get("logged_at"):
        entry.logged_at = to_utc_naive(data["logged_at"])
    db.session.flush()

    _refresh_days(user_id, [old_day, local_date(entry.logged_at, settings.zone)], settings)
    db.session.commit()
    return entry


def delete_food_entry(user_id: int, entry_id: int) -> bool:
    entry = get_food_entry(user_id, entry_id)
    if not entry:
        return False

    settings = _settings_for(user_id)
    day = local_date(entry.logged_at, settings.zone)
    db.session.delete(entry)
    db.session.flush()

    _refresh_days(user_id, [day], settings)
    db.session.commit()
    return True
