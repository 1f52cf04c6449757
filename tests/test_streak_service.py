import os
import sys
from datetime import date, datetime, time, timedelta
from zoneinfo import ZoneInfo

import pytest
from sqlalchemy.exc import SQLAlchemyError

ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, ROOT_DIR)

from cutsistent import create_app
from cutsistent.extensions import db
from cutsistent.models.daily_log import DailyLog
from cutsistent.models.food_entry import FoodEntry
from cutsistent.models.profile import Profile
from cutsistent.models.user import User
from cutsistent.services.daily_log_service import (
    nutrition_history,
    recent_daily_logs,
    refresh_daily_log,
    sync_daily_logs,
)
from cutsistent.services.engine_settings import engine_settings
from cutsistent.services.leaderboard_service import leaderboard
from cutsistent.services.profile_service import create_profile
from cutsistent.services.streak_service import (
    ProfileNotFoundError,
    StreakCalculationError,
    calculate_and_update_streak,
    get_streak_summary,
)

TODAY = date(2026, 10, 19)  # a Monday


@pytest.fixture()
def app():
    app = create_app({
        "TESTING": True,
        "SQLALCHEMY_DATABASE_URI": "sqlite:///:memory:",
        "SQLALCHEMY_ENGINE_OPTIONS": {},
        "SECRET_KEY": "test-secret-key-with-enough-length-32b",
        "STREAK_TIMEZONE": "UTC",
    })
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


def make_user(email="user@example.com", **profile_fields):
    user = User(name="User", email=email, password="x")
    db.session.add(user)
    db.session.flush()
    profile = create_profile(user)
    for field, value in profile_fields.items():
        setattr(profile, field, value)
    db.session.commit()
    return user


def log_food(user, day, sugar, name="Meal", calories=400, hour=12):
    db.session.add(FoodEntry(
        user_id=user.id, name=name, calories=calories, protein=20, carbs=40,
        sugar=sugar, logged_at=datetime.combine(day, time(hour, 0)),
    ))
    db.session.commit()


def log_days(user, *sugars, start=TODAY):
    for offset, sugar in enumerate(sugars):
        log_food(user, start - timedelta(days=offset), sugar)


def profile_of(user):
    return Profile.query.filter_by(user_id=user.id).first()


def test_sync_inserts_one_log_per_day(app):
    user = make_user()
    log_food(user, TODAY, 10, hour=8)
    log_food(user, TODAY, 20, hour=19)
    log_food(user, TODAY - timedelta(days=1), 5)

    created = sync_daily_logs(user.id, engine_settings())
    db.session.commit()

    assert [log.log_date for log in created] == [TODAY - timedelta(days=1), TODAY]
    today_log = DailyLog.query.filter_by(user_id=user.id, log_date=TODAY).first()
    assert float(today_log.total_sugar) == 30
    assert today_log.total_calories == 800
    assert today_log.is_sugar_free is False
    assert today_log.points_earned == 0

    yesterday_log = DailyLog.query.filter_by(user_id=user.id, log_date=TODAY - timedelta(days=1)).first()
    assert yesterday_log.is_sugar_free is True
    assert yesterday_log.points_earned == 10


def test_sync_twice_creates_no_duplicates(app):
    user = make_user()
    log_days(user, 0, 0, 0)

    sync_daily_logs(user.id, engine_settings())
    db.session.commit()
    assert sync_daily_logs(user.id, engine_settings()) == []
    db.session.commit()

    assert DailyLog.query.filter_by(user_id=user.id).count() == 3


def test_sync_leaves_existing_logs_stale(app):
    user = make_user()
    log_food(user, TODAY, 10)
    sync_daily_logs(user.id, engine_settings())
    db.session.commit()

    log_food(user, TODAY, 30, hour=20)
    sync_daily_logs(user.id, engine_settings())
    db.session.commit()

    log = DailyLog.query.filter_by(user_id=user.id, log_date=TODAY).one()
    assert float(log.total_sugar) == 10
    assert log.is_sugar_free is True


def test_sync_is_scoped_to_user(app):
    user = make_user()
    other = make_user("other@example.com")
    log_food(other, TODAY, 0)

    assert sync_daily_logs(user.id, engine_settings()) == []


def test_refresh_rewrites_and_deletes_log(app):
    user = make_user()
    log_food(user, TODAY, 10)
    sync_daily_logs(user.id, engine_settings())
    log_food(user, TODAY, 30, hour=20)

    log = refresh_daily_log(user.id, TODAY, engine_settings())
    db.session.commit()
    assert float(log.total_sugar) == 40
    assert log.is_sugar_free is False
    assert log.points_earned == 0

    FoodEntry.query.filter_by(user_id=user.id).delete()
    assert refresh_daily_log(user.id, TODAY, engine_settings()) is None
    db.session.commit()
    assert DailyLog.query.filter_by(user_id=user.id).count() == 0


def test_three_clean_days_award_points(app):
    user = make_user()
    log_days(user, 0, 0, 0)

    update = calculate_and_update_streak(user.id, today=TODAY)

    assert update.current_streak == 3
    profile = profile_of(user)
    assert profile.current_streak == 3
    assert profile.longest_streak == 3
    assert profile.total_points == 300


def test_recalculation_without_change_keeps_points(app):
    user = make_user()
    log_days(user, 0, 0)

    calculate_and_update_streak(user.id, today=TODAY)
    update = calculate_and_update_streak(user.id, today=TODAY)

    assert update.points_delta == 0
    assert profile_of(user).total_points == 200


def test_growth_from_five_to_eight(app):
    user = make_user(current_streak=5, longest_streak=5, total_points=1000)
    log_days(user, *([0] * 8))

    calculate_and_update_streak(user.id, today=TODAY)

    profile = profile_of(user)
    assert profile.current_streak == 8
    assert profile.longest_streak == 8
    assert profile.total_points == 1300


def test_stale_activity_breaks_streak(app):
    user = make_user(current_streak=5, longest_streak=6, total_points=100)
    log_days(user, 0, 0, 0, 0, 0, start=TODAY - timedelta(days=3))

    update = calculate_and_update_streak(user.id, today=TODAY)

    assert update.broken
    profile = profile_of(user)
    assert profile.current_streak == 0
    assert profile.longest_streak == 6
    assert profile.total_points == 0


def test_no_entries_at_all(app):
    user = make_user(current_streak=2, longest_streak=2, total_points=500)

    calculate_and_update_streak(user.id, today=TODAY)

    profile = profile_of(user)
    assert profile.current_streak == 0
    assert profile.total_points == 350


def test_sugary_day_stops_streak(app):
    user = make_user()
    log_days(user, 0, 26, 0, 0, 0)

    assert calculate_and_update_streak(user.id, today=TODAY).current_streak == 1


def test_day_summing_to_the_limit_is_sugar_free(app):
    user = make_user()
    for hour, sugar in ((8, 0.1), (12, 16.1), (19, 8.8)):
        log_food(user, TODAY, sugar, hour=hour)

    update = calculate_and_update_streak(user.id, today=TODAY)

    log = DailyLog.query.filter_by(user_id=user.id, log_date=TODAY).one()
    assert float(log.total_sugar) == 25
    assert log.is_sugar_free is True
    assert log.points_earned == 10
    assert update.current_streak == 1


def test_profile_sugar_limit_overrides_default(app):
    user = make_user(sugar_limit=10)
    log_days(user, 5, 15, 0)

    assert calculate_and_update_streak(user.id, today=TODAY).current_streak == 1
    log = DailyLog.query.filter_by(user_id=user.id, log_date=TODAY - timedelta(days=1)).one()
    assert log.is_sugar_free is False


def test_unknown_timezone_fails_at_startup():
    with pytest.raises(RuntimeError):
        create_app({
            "TESTING": True,
            "SQLALCHEMY_DATABASE_URI": "sqlite:///:memory:",
            "SQLALCHEMY_ENGINE_OPTIONS": {},
            "STREAK_TIMEZONE": "Mars/Olympus_Mons",
        })


def test_settings_use_configured_zone(app):
    assert engine_settings().zone == ZoneInfo("UTC")


def test_missing_profile(app):
    with pytest.raises(ProfileNotFoundError):
        calculate_and_update_streak(999, today=TODAY)


def test_failed_commit_leaves_profile_untouched(app, monkeypatch):
    user = make_user(current_streak=1, longest_streak=1, total_points=100)
    log_days(user, 0, 0, 0)

    def failing_commit(self):
        raise SQLAlchemyError("connection lost")

    monkeypatch.setattr(type(db.session()), "commit", failing_commit)
    with pytest.raises(StreakCalculationError):
        calculate_and_update_streak(user.id, today=TODAY)
    monkeypatch.undo()

    profile = profile_of(user)
    assert profile.current_streak == 1
    assert profile.total_points == 100
    assert DailyLog.query.filter_by(user_id=user.id).count() == 0


def test_streak_summary_rank_and_badges(app):
    leader = make_user(current_streak=30, longest_streak=30, total_points=5000)
    for i in range(3):
        make_user(f"runner{i}@example.com", total_points=4000 - i)
    last = make_user("last@example.com", current_streak=7, longest_streak=7, total_points=10)

    assert get_streak_summary(leader.id)["badges"] == ["elite", "warrior", "champion", "dedicated", "starter"]
    summary = get_streak_summary(last.id)
    assert summary["rank"] == 5
    assert summary["badges"] == ["starter"]


def test_streak_summary_rank_matches_leaderboard_on_ties(app):
    users = [make_user(f"tied{i}@example.com", total_points=100) for i in range(5)]
    make_user("top@example.com", total_points=500)

    board = leaderboard()
    for user in users:
        summary = get_streak_summary(user.id)
        row = next(r for r in board if r["user_id"] == user.id)
        assert summary["rank"] == row["rank"]
        assert summary["badges"] == row["badges"]

    ranks = [get_streak_summary(user.id)["rank"] for user in users]
    assert ranks == [2, 3, 4, 5, 6]
    champions = [u for u in users if "champion" in get_streak_summary(u.id)["badges"]]
    assert champions == users[:2]


def test_recent_logs_and_history(app):
    user = make_user()
    log_days(user, 5, 30, 0)
    sync_daily_logs(user.id, engine_settings())
    db.session.commit()

    recent = recent_daily_logs(user.id, TODAY)
    assert recent["today"]["total_sugar"] == 5
    assert recent["yesterday"]["is_sugar_free"] is False

    # TODAY is a Monday, so this week only holds today
    week = nutrition_history(user.id, "week", TODAY)
    assert week["start"] == "2026-10-19"
    assert week["end"] == "2026-10-25"
    assert week["total_days"] == 1

    month = nutrition_history(user.id, "month", TODAY)
    assert month["start"] == "2026-10-01"
    assert month["end"] == "2026-10-31"
    assert month["total_days"] == 3
    assert month["sugar_free_days"] == 2
    assert month["averages"]["sugar"] == round(35 / 3)

    with pytest.raises(ValueError):
        nutrition_history(user.id, "year", TODAY)
