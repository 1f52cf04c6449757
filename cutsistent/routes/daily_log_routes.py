from flask import Blueprint
from cutsistent.utils.auth import require_auth
from cutsistent.controllers.daily_log_controller import recent_daily_logs_handler, nutrition_history_handler

daily_log_bp = Blueprint("daily_logs", __name__, url_prefix="/api/daily-logs")

@daily_log_bp.get("/recent")
@require_auth
def recent_daily_logs():
    return recent_daily_logs_handler()


@daily_log_bp.get("/history")
@require_auth
def nutrition_history():
    return nutrition_history_handler()
