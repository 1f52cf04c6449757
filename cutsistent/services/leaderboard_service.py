"""
Leaderboard Service

Ranks profiles by points. Badges are derived at read time from each row's
streak and rank, they are not stored.
"""

from typing import Any, Dict, List

from sqlalchemy import and_, desc, or_

from cutsistent.models.profile import Profile
from cutsistent.services.streak_engine import calculate_badges

DEFAULT_LIMIT = 50
AVATAR_URL_TEMPLATE = "https://api.dicebear.com/7.x/avataaars/svg?seed={seed}"


def rank_of(profile: Profile) -> int:
    """1-based leaderboard position of a profile: points first, then age."""
    ahead = Profile.query.filter(or_(
        Profile.total_points > profile.total_points,
        and_(Profile.total_points == profile.total_points, Profile.id < profile.id),
    )).count()
    return ahead + 1


def leaderboard(limit: int = DEFAULT_LIMIT) -> List[Dict[str, Any]]:
    """
    Top profiles by total points.

    Args:
        limit: Maximum number of rows

    Returns:
        Rows with rank (1-based position), name, avatar, points, streak and badges
    """
    profiles = (
        Profile.query
        .order_by(desc(Profile.total_points), Profile.id)
        .limit(limit)
        .all()
    )

    rows = []
    for index, profile in enumerate(profiles):
        rank = index + 1
        streak = profile.current_streak or 0
        rows.append({
            "user_id": profile.user_id,
            "name": profile.name,
            "avatar": profile.avatar_url or AVATAR_URL_TEMPLATE.format(seed=profile.name),
            "points": profile.total_points or 0,
            "streak": streak,
            "rank": rank,
            "badges": calculate_badges(streak, rank),
        })
    return rows
