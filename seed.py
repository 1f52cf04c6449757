from datetime import datetime, timedelta
from cutsistent import create_app
from cutsistent.extensions import db
from cutsistent.models.food_entry import FoodEntry
from cutsistent.models.user import User
from cutsistent.services.profile_service import create_profile
from cutsistent.services.streak_service import calculate_and_update_streak
from werkzeug.security import generate_password_hash

app = create_app()

# (name, calories, protein, carbs, sugar)
MEALS = [
    ("Oatmeal with berries", 320, 10.0, 54.0, 9.0),
    ("Grilled chicken salad", 450, 42.0, 18.0, 6.0),
    ("Salmon with rice", 610, 38.0, 62.0, 3.0),
    ("Greek yogurt", 150, 15.0, 8.0, 6.0),
]
CHEAT_MEAL = ("Chocolate cake", 520, 6.0, 70.0, 48.0)

with app.app_context():
    # ensure tables exist (non-destructive: won't alter existing columns)
    db.create_all()

    def ensure_user(name, email):
        user = User.query.filter_by(email=email).first()
        if not user:
            user = User(name=name, email=email, password=generate_password_hash("secret"))
            db.session.add(user)
            db.session.flush()
            create_profile(user)
        return user

    def log_days(user, days, cheat_days=()):
        if FoodEntry.query.filter_by(user_id=user.id).first():
            return
        now = datetime.utcnow()
        for offset in range(days):
            day = now - timedelta(days=offset)
            meals = [CHEAT_MEAL] if offset in cheat_days else MEALS
            for hour, (name, cal, p, c, s) in zip((8, 12, 18, 20), meals):
                db.session.add(FoodEntry(
                    user_id=user.id, name=name, calories=cal,
                    protein=p, carbs=c, sugar=s,
                    logged_at=day.replace(hour=hour, minute=0, second=0, microsecond=0),
                ))

    demo = ensure_user("User Demo", "user@example.com")
    rival = ensure_user("Rival Demo", "rival@example.com")
    log_days(demo, 10)
    log_days(rival, 6, cheat_days=(3,))
    db.session.commit()

    for user in (demo, rival):
        update = calculate_and_update_streak(user.id)
        print(f"{user.email}: streak {update.current_streak}, points {update.total_points}")

    print("Seed completed")
