from flask import Blueprint
from cutsistent.utils.auth import require_auth
from cutsistent.controllers.profile_controller import get_profile_handler, update_profile_handler

profile_bp = Blueprint("profile", __name__, url_prefix="/api/profile")

@profile_bp.get("")
@require_auth
def get_profile():
    return get_profile_handler()


@profile_bp.put("")
@require_auth
def update_profile():
    return update_profile_handler()
