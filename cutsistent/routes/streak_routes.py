from flask import Blueprint
from cutsistent.utils.auth import require_auth
from cutsistent.controllers.streak_controller import get_streak_handler, recalculate_streak_handler

streak_bp = Blueprint("streak", __name__, url_prefix="/api/streak")

@streak_bp.get("")
@require_auth
def get_streak():
    return get_streak_handler()


@streak_bp.post("/recalculate")
@require_auth
def recalculate_streak():
    return recalculate_streak_handler()
