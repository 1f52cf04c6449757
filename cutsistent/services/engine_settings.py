from flask import current_app

from cutsistent.services.streak_engine import (
    EngineSettings,
    SUGAR_LIMIT,
    DAILY_SUGAR_FREE_POINTS,
    STREAK_DAY_POINTS,
    STREAK_BREAK_PENALTY,
)


def engine_settings(profile=None) -> EngineSettings:
    """Build engine settings from app config, honoring a profile's own sugar limit."""
    config = current_app.config
    sugar_limit = config.get("SUGAR_LIMIT", SUGAR_LIMIT)
    if profile is not None and profile.sugar_limit is not None:
        sugar_limit = profile.sugar_limit

    return EngineSettings(
        zone=config.get("STREAK_ZONE"),
        sugar_limit=float(sugar_limit),
        daily_sugar_free_points=int(config.get("DAILY_SUGAR_FREE_POINTS", DAILY_SUGAR_FREE_POINTS)),
        streak_day_points=int(config.get("STREAK_DAY_POINTS", STREAK_DAY_POINTS)),
        streak_break_penalty=int(config.get("STREAK_BREAK_PENALTY", STREAK_BREAK_PENALTY)),
    )
