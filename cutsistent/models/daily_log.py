from cutsistent.extensions import db


class DailyLog(db.Model):
    __tablename__ = "daily_logs"
    __table_args__ = (
        db.UniqueConstraint("user_id", "log_date", name="uq_daily_logs_user_date"),
    )

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False)
    log_date = db.Column(db.Date, nullable=False)
    total_calories = db.Column(db.Integer, nullable=False, default=0)
    total_protein = db.Column(db.Numeric(10, 2), nullable=False, default=0)
    total_carbs = db.Column(db.Numeric(10, 2), nullable=False, default=0)
    total_sugar = db.Column(db.Numeric(10, 2), nullable=False, default=0)
    is_sugar_free = db.Column(db.Boolean, nullable=False, default=True)
    points_earned = db.Column(db.Integer, nullable=False, default=0)
    created_at = db.Column(db.DateTime, server_default=db.func.now(), nullable=False)
