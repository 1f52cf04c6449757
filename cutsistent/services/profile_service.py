from typing import Any, Dict, Optional

from cutsistent.extensions import db
from cutsistent.models.profile import Profile
from cutsistent.models.user import User

PROFILE_FIELDS = [
    "username", "display_name", "avatar_url", "bio",
    "calorie_goal", "protein_goal", "carbs_goal", "sugar_limit",
]


def create_profile(user: User) -> Profile:
    """Create the empty profile that goes with a new user."""
    profile = Profile(user_id=user.id, display_name=user.name or None)
    db.session.add(profile)
    return profile


def get_profile(user_id: int) -> Optional[Profile]:
    return Profile.query.filter_by(user_id=user_id).first()


def update_profile(profile: Profile, data: Dict[str, Any]) -> Profile:
    """Apply display fields and goals. Streak fields are never touched here."""
    for field in PROFILE_FIELDS:
        if field in data:
            setattr(profile, field, data[field])
    db.session.commit()
    return profile


def serialize_profile(profile: Profile) -> Dict[str, Any]:
    return {
        "user_id": profile.user_id,
        "username": profile.username,
        "display_name": profile.display_name,
        "avatar_url": profile.avatar_url,
        "bio": profile.bio,
        "current_streak": profile.current_streak,
        "longest_streak": profile.longest_streak,
        "total_points": profile.total_points,
        "goals": {
            "calorie_goal": profile.calorie_goal,
            "protein_goal": profile.protein_goal,
            "carbs_goal": profile.carbs_goal,
            "sugar_limit": float(profile.sugar_limit) if profile.sugar_limit is not None else None,
        },
        "updated_at": profile.updated_at.isoformat() if profile.updated_at else None,
    }
