from cutsistent.extensions import db

DEFAULT_CALORIE_GOAL = 2000
DEFAULT_PROTEIN_GOAL = 150
DEFAULT_CARBS_GOAL = 200


class Profile(db.Model):
    __tablename__ = "profiles"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), unique=True, nullable=False)

    # Display fields, edited by the user
    username = db.Column(db.String(50), unique=True)
    display_name = db.Column(db.String(120))
    avatar_url = db.Column(db.String(500))
    bio = db.Column(db.Text)

    # Streak fields, written only by the streak engine
    current_streak = db.Column(db.Integer, nullable=False, default=0)
    longest_streak = db.Column(db.Integer, nullable=False, default=0)
    total_points = db.Column(db.Integer, nullable=False, default=0)

    # Nutrition goals
    calorie_goal = db.Column(db.Integer, nullable=False, default=DEFAULT_CALORIE_GOAL)
    protein_goal = db.Column(db.Integer, nullable=False, default=DEFAULT_PROTEIN_GOAL)
    carbs_goal = db.Column(db.Integer, nullable=False, default=DEFAULT_CARBS_GOAL)
    sugar_limit = db.Column(db.Numeric(6, 2), nullable=True)

    created_at = db.Column(db.DateTime, server_default=db.func.now(), nullable=False)
    updated_at = db.Column(db.DateTime, server_default=db.func.now(), onupdate=db.func.now(), nullable=False)

    user = db.relationship("User", back_populates="profile")

    @property
    def name(self):
        return self.display_name or self.username or "Anonymous"
