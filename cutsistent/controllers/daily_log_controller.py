from flask import request
from cutsistent.schemas.daily_log_schema import HistoryQuerySchema
from cutsistent.services.daily_log_service import nutrition_history, recent_daily_logs
from cutsistent.services.engine_settings import engine_settings
from cutsistent.utils.dates import today_in
from cutsistent.utils.http import ok, error, validate_schema


def recent_daily_logs_handler():
    today = today_in(engine_settings().zone)
    return ok(recent_daily_logs(request.user_id, today))


def nutrition_history_handler():
    """
    Daily logs of the current week or month.

    Query Parameters:
        - range (optional): week/month (default: week)
    """
    query, errors = validate_schema(HistoryQuerySchema, request.args.to_dict())
    if errors:
        return error("VALIDATION_ERROR", "range must be week or month", 400, details=errors)

    today = today_in(engine_settings().zone)
    return ok(nutrition_history(request.user_id, query["range"], today))
