from cutsistent.services.leaderboard_service import DEFAULT_LIMIT, leaderboard
from cutsistent.utils.http import ok, arg_int


def leaderboard_handler():
    limit = arg_int("limit", DEFAULT_LIMIT, min_value=1, max_value=100)
    return ok({"items": leaderboard(limit)})
