from flask import Blueprint
from cutsistent.utils.auth import require_auth
from cutsistent.controllers.leaderboard_controller import leaderboard_handler

leaderboard_bp = Blueprint("leaderboard", __name__, url_prefix="/api/leaderboard")

@leaderboard_bp.get("")
@require_auth
def get_leaderboard():
    return leaderboard_handler()
