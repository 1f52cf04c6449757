from cutsistent.extensions import db


class FoodEntry(db.Model):
    __tablename__ = "food_entries"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False, index=True)
    name = db.Column(db.String(255), nullable=False)
    calories = db.Column(db.Integer, nullable=False, default=0)
    protein = db.Column(db.Numeric(10, 2), nullable=False, default=0)
    carbs = db.Column(db.Numeric(10, 2), nullable=False, default=0)
    sugar = db.Column(db.Numeric(10, 2), nullable=False, default=0)
    image_url = db.Column(db.String(500))
    # naive UTC
    logged_at = db.Column(db.DateTime, server_default=db.func.now(), nullable=False)
    created_at = db.Column(db.DateTime, server_default=db.func.now(), nullable=False)
