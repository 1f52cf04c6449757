"""
Food Entry Controller

Food logging endpoints. Every change to an entry refreshes the daily log of
the affected day and recalculates the streak in the same request.
"""

from flask import request, current_app
from sqlalchemy.exc import SQLAlchemyError

from cutsistent.extensions import db
from cutsistent.schemas.food_entry_schema import (
    CreateFoodEntrySchema,
    UpdateFoodEntrySchema,
    ListFoodEntriesQuerySchema,
)
from cutsistent.services.engine_settings import engine_settings
from cutsistent.services.food_entry_service import (
    create_food_entry,
    day_stats,
    delete_food_entry,
    list_food_entries,
    serialize_food_entry,
    update_food_entry,
)
from cutsistent.services.streak_service import (
    ProfileNotFoundError,
    StreakCalculationError,
    calculate_and_update_streak,
)
from cutsistent.utils.dates import today_in
from cutsistent.utils.http import ok, error, json_body, validate_schema


def _recalculate_streak(user_id: int):
    """Streak after an entry change, or None when it could not be updated."""
    try:
        return calculate_and_update_streak(user_id).to_dict()
    except (StreakCalculationError, ProfileNotFoundError) as e:
        current_app.logger.error(f"Streak recalculation skipped for user {user_id}: {e}")
        return None


def list_food_entries_handler():
    """
    List one day's entries with the day's totals.

    Query Parameters:
        - date (optional): YYYY-MM-DD, defaults to today
    """
    user_id = request.user_id
    query, errors = validate_schema(ListFoodEntriesQuerySchema, request.args.to_dict())
    if errors:
        return error("VALIDATION_ERROR", "date must be YYYY-MM-DD", 400, details=errors)

    zone = engine_settings().zone
    day = query["date"] or today_in(zone)
    entries = list_food_entries(user_id, day, zone)

    return ok({
        "date": day.isoformat(),
        "entries": [serialize_food_entry(e) for e in entries],
        "stats": day_stats(entries),
    })


def create_food_entry_handler():
    """
    Log a food entry.

    Body Parameters:
        - name (required)
        - calories, protein, carbs, sugar (optional, default 0)
        - image_url (optional)
        - logged_at (optional): ISO timestamp, defaults to now
    """
    user_id = request.user_id
    data, errors = validate_schema(CreateFoodEntrySchema, json_body())
    if errors:
        return error("VALIDATION_ERROR", "Invalid food entry", 400, details=errors)

    try:
        entry = create_food_entry(user_id, data)
    except SQLAlchemyError as e:
        db.session.rollback()
        return error("UNKNOWN_ERROR", str(e), 500)

    return ok({
        "entry": serialize_food_entry(entry),
        "streak": _recalculate_streak(user_id),
    }, 201)


def update_food_entry_handler(entry_id: int):
    user_id = request.user_id
    data, errors = validate_schema(UpdateFoodEntrySchema, json_body())
    if errors:
        return error("VALIDATION_ERROR", "Invalid food entry", 400, details=errors)

    try:
        entry = update_food_entry(user_id, entry_id, data)
    except SQLAlchemyError as e:
        db.session.rollback()
        return error("UNKNOWN_ERROR", str(e), 500)

    if not entry:
        return error("NOT_FOUND", "Food entry not found", 404)

    return ok({
        "entry": serialize_food_entry(entry),
        "streak": _recalculate_streak(user_id),
    })


def delete_food_entry_handler(entry_id: int):
    user_id = request.user_id
    try:
        deleted = delete_food_entry(user_id, entry_id)
    except SQLAlchemyError as e:
        db.session.rollback()
        return error("UNKNOWN_ERROR", str(e), 500)

    if not deleted:
        return error("NOT_FOUND", "Food entry not found", 404)

    return ok({
        "message": "Food entry deleted successfully",
        "streak": _recalculate_streak(user_id),
    })
