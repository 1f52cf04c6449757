from flask import request
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from cutsistent.extensions import db
from cutsistent.schemas.profile_schema import ProfileUpdateSchema
from cutsistent.services.profile_service import get_profile, serialize_profile, update_profile
from cutsistent.utils.http import ok, error, json_body, validate_schema


def get_profile_handler():
    profile = get_profile(request.user_id)
    if not profile:
        return error("PROFILE_NOT_FOUND", "Profile not found", 404)
    return ok(serialize_profile(profile))


def update_profile_handler():
    """
    Update display fields and nutrition goals.

    Streak fields (current_streak, longest_streak, total_points) are not
    accepted; they belong to the streak engine.
    """
    profile = get_profile(request.user_id)
    if not profile:
        return error("PROFILE_NOT_FOUND", "Profile not found", 404)

    data, errors = validate_schema(ProfileUpdateSchema, json_body())
    if errors:
        return error("VALIDATION_ERROR", "Invalid profile data", 400, details=errors)

    try:
        profile = update_profile(profile, data)
    except IntegrityError:
        db.session.rollback()
        return error("USERNAME_TAKEN", "username already in use", 409)
    except SQLAlchemyError as e:
        db.session.rollback()
        return error("UNKNOWN_ERROR", str(e), 500)

    return ok(serialize_profile(profile))
