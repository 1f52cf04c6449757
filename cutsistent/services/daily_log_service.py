"""
Daily Log Service

Keeps the per-day nutrition aggregates (``daily_logs``) in step with food
entries and serves them back for the dashboard and history views.

Functions here flush but never commit; the caller owns the transaction.
"""

import calendar
import logging
from datetime import date, timedelta
from typing import Any, Dict, List, Optional

from cutsistent.extensions import db
from cutsistent.models.daily_log import DailyLog
from cutsistent.models.food_entry import FoodEntry
from cutsistent.services.streak_engine import (
    DailyTotals,
    EngineSettings,
    aggregate_by_date,
    daily_points,
    is_sugar_free,
    round_grams,
)
from cutsistent.utils.dates import day_bounds_utc

logger = logging.getLogger(__name__)

TIME_RANGES = ("week", "month")


def _apply_totals(log: DailyLog, totals: DailyTotals, settings: EngineSettings) -> None:
    sugar_free = is_sugar_free(totals.sugar, settings.sugar_limit)
    log.total_calories = int(round(totals.calories))
    log.total_protein = round_grams(totals.protein)
    log.total_carbs = round_grams(totals.carbs)
    log.total_sugar = round_grams(totals.sugar)
    log.is_sugar_free = sugar_free
    log.points_earned = daily_points(sugar_free, settings.daily_sugar_free_points)


def sync_daily_logs(user_id: int, settings: EngineSettings) -> List[DailyLog]:
    """
    Insert a daily log for every day that has food entries but no log yet.

    Existing logs are left as they are, even when later edits to that day's
    entries made them stale. Only ``refresh_daily_log`` rewrites a log.

    Args:
        user_id: Owner of the entries
        settings: Engine settings (zone, sugar limit, daily points)

    Returns:
        The newly inserted logs, oldest first
    """
    entries = FoodEntry.query.filter_by(user_id=user_id).all()
    totals_by_day = aggregate_by_date(entries, settings.zone)

    existing_days = {
        row.log_date
        for row in db.session.query(DailyLog.log_date).filter(DailyLog.user_id == user_id)
    }

    created = []
    for log_day in sorted(totals_by_day):
        if log_day in existing_days:
            continue
        log = DailyLog(user_id=user_id, log_date=log_day)
        _apply_totals(log, totals_by_day[log_day], settings)
        db.session.add(log)
        created.append(log)

    if created:
        db.session.flush()
        logger.info("Inserted %d daily logs for user %s", len(created), user_id)
    return created


def refresh_daily_log(user_id: int, log_day: date, settings: EngineSettings) -> Optional[DailyLog]:
    """
    Recompute one day's log from that day's entries.

    The log is inserted when missing, overwritten when present, and deleted
    when the day has no entries left.
    """
    start, end = day_bounds_utc(log_day, settings.zone)
    entries = (
        FoodEntry.query
        .filter(FoodEntry.user_id == user_id)
        .filter(FoodEntry.logged_at >= start, FoodEntry.logged_at < end)
        .all()
    )
    log = DailyLog.query.filter_by(user_id=user_id, log_date=log_day).first()

    if not entries:
        if log is not None:
            db.session.delete(log)
            db.session.flush()
        return None

    totals = DailyTotals()
    for entry in entries:
        totals.add(entry)

    if log is None:
        log = DailyLog(user_id=user_id, log_date=log_day)
        db.session.add(log)
    _apply_totals(log, totals, settings)
    db.session.flush()
    return log


def serialize_daily_log(log: Optional[DailyLog]) -> Optional[Dict[str, Any]]:
    if log is None:
        return None
    return {
        "log_date": log.log_date.isoformat(),
        "total_calories": int(log.total_calories or 0),
        "total_protein": float(log.total_protein or 0),
        "total_carbs": float(log.total_carbs or 0),
        "total_sugar": float(log.total_sugar or 0),
        "is_sugar_free": bool(log.is_sugar_free),
        "points_earned": int(log.points_earned or 0),
    }


def recent_daily_logs(user_id: int, today: date) -> Dict[str, Any]:
    """Today's and yesterday's logs."""
    yesterday = today - timedelta(days=1)
    logs = (
        DailyLog.query
        .filter(DailyLog.user_id == user_id)
        .filter(DailyLog.log_date.in_([today, yesterday]))
        .all()
    )
    by_day = {log.log_date: log for log in logs}
    return {
        "today": serialize_daily_log(by_day.get(today)),
        "yesterday": serialize_daily_log(by_day.get(yesterday)),
    }


def history_bounds(time_range: str, today: date):
    """Monday to Sunday of the current week, or the whole current month."""
    if time_range == "week":
        start = today - timedelta(days=today.weekday())
        return start, start + timedelta(days=6)
    if time_range == "month":
        last_day = calendar.monthrange(today.year, today.month)[1]
        return today.replace(day=1), today.replace(day=last_day)
    raise ValueError(f"INVALID_RANGE: range must be one of {', '.join(TIME_RANGES)}")


def nutrition_history(user_id: int, time_range: str, today: date) -> Dict[str, Any]:
    """
    Daily logs of the current week or month with averages.

    Args:
        user_id: Owner of the logs
        time_range: "week" or "month"
        today: Reference date

    Returns:
        Dictionary with the history rows, per-field averages and counts

    Raises:
        ValueError: If time_range is not supported
    """
    start, end = history_bounds(time_range, today)
    logs = (
        DailyLog.query
        .filter(DailyLog.user_id == user_id)
        .filter(DailyLog.log_date >= start, DailyLog.log_date <= end)
        .order_by(DailyLog.log_date.asc())
        .all()
    )
    history = [serialize_daily_log(log) for log in logs]

    averages = {"calories": 0, "protein": 0, "carbs": 0, "sugar": 0}
    if history:
        count = len(history)
        averages = {
            "calories": round(sum(d["total_calories"] for d in history) / count),
            "protein": round(sum(d["total_protein"] for d in history) / count),
            "carbs": round(sum(d["total_carbs"] for d in history) / count),
            "sugar": round(sum(d["total_sugar"] for d in history) / count),
        }

    return {
        "range": time_range,
        "start": start.isoformat(),
        "end": end.isoformat(),
        "history": history,
        "averages": averages,
        "sugar_free_days": sum(1 for d in history if d["is_sugar_free"]),
        "total_days": len(history),
    }
