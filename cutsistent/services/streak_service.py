"""
Streak Service

Runs the whole streak computation against the database: sync the daily
logs, scan the streak, and write the profile's streak fields and points.
Everything is committed once at the end or not at all.
"""

import logging
from datetime import date
from typing import Any, Dict, Optional

from sqlalchemy.exc import SQLAlchemyError

from cutsistent.extensions import db
from cutsistent.models.daily_log import DailyLog
from cutsistent.models.profile import Profile
from cutsistent.services.daily_log_service import sync_daily_logs
from cutsistent.services.engine_settings import engine_settings
from cutsistent.services.leaderboard_service import rank_of
from cutsistent.services.streak_engine import (
    StreakState,
    StreakUpdate,
    apply_streak,
    calculate_badges,
    scan_streak,
)
from cutsistent.utils.dates import today_in

logger = logging.getLogger(__name__)


class StreakCalculationError(Exception):
    """The streak could not be recomputed; nothing was persisted."""


class ProfileNotFoundError(LookupError):
    pass


def calculate_and_update_streak(user_id: int, today: Optional[date] = None) -> StreakUpdate:
    """
    Recompute a user's streak and persist the result on their profile.

    Args:
        user_id: User whose streak is recomputed
        today: Reference date, defaults to the current date in the engine zone

    Returns:
        The applied StreakUpdate

    Raises:
        ProfileNotFoundError: If the user has no profile
        StreakCalculationError: If any read or write fails; the session is
            rolled back and the profile keeps its previous values
    """
    try:
        profile = Profile.query.filter_by(user_id=user_id).first()
        if profile is None:
            raise ProfileNotFoundError(f"PROFILE_NOT_FOUND: no profile for user {user_id}")

        settings = engine_settings(profile)
        if today is None:
            today = today_in(settings.zone)

        sync_daily_logs(user_id, settings)

        rows = (
            db.session.query(DailyLog.log_date, DailyLog.total_sugar)
            .filter(DailyLog.user_id == user_id)
            .order_by(DailyLog.log_date.desc())
            .all()
        )
        new_streak = scan_streak(
            [(row.log_date, row.total_sugar) for row in rows],
            today,
            settings.sugar_limit,
        )

        update = apply_streak(
            StreakState(
                current_streak=profile.current_streak or 0,
                longest_streak=profile.longest_streak or 0,
                total_points=profile.total_points or 0,
            ),
            new_streak,
            settings.streak_day_points,
            settings.streak_break_penalty,
        )

        profile.current_streak = update.current_streak
        profile.longest_streak = update.longest_streak
        profile.total_points = update.total_points
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.exception("Streak update failed for user %s", user_id)
        raise StreakCalculationError(f"STREAK_UPDATE_FAILED: {e}") from e

    if update.broken:
        logger.info("Streak broken for user %s (was %d)", user_id, update.previous.current_streak)
    else:
        logger.info(
            "Streak for user %s: %d -> %d (%+d points)",
            user_id, update.previous.current_streak, update.current_streak, update.points_delta,
        )
    return update


def get_streak_summary(user_id: int) -> Dict[str, Any]:
    """Streak fields of a profile with the badges it holds at its leaderboard rank."""
    profile = Profile.query.filter_by(user_id=user_id).first()
    if profile is None:
        raise ProfileNotFoundError(f"PROFILE_NOT_FOUND: no profile for user {user_id}")

    rank = rank_of(profile)
    return {
        "current_streak": profile.current_streak,
        "longest_streak": profile.longest_streak,
        "total_points": profile.total_points,
        "rank": rank,
        "badges": calculate_badges(profile.current_streak, rank),
    }
