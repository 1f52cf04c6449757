from flask import request
from cutsistent.services.streak_service import (
    ProfileNotFoundError,
    StreakCalculationError,
    calculate_and_update_streak,
    get_streak_summary,
)
from cutsistent.utils.http import ok, error


def get_streak_handler():
    try:
        return ok(get_streak_summary(request.user_id))
    except ProfileNotFoundError:
        return error("PROFILE_NOT_FOUND", "Profile not found", 404)


def recalculate_streak_handler():
    """Sync daily logs, rescan the streak and update points."""
    user_id = request.user_id
    try:
        update = calculate_and_update_streak(user_id)
    except ProfileNotFoundError:
        return error("PROFILE_NOT_FOUND", "Profile not found", 404)
    except StreakCalculationError as e:
        return error("STREAK_UPDATE_FAILED", str(e), 500)

    return ok(update.to_dict())
