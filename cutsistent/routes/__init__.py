from .home_routes import home_bp
from .auth_routes import auth_bp
from .food_routes import food_bp
from .streak_routes import streak_bp
from .daily_log_routes import daily_log_bp
from .profile_routes import profile_bp
from .leaderboard_routes import leaderboard_bp

def register_routes(app):
    app.register_blueprint(home_bp)
    app.register_blueprint(auth_bp)
    app.register_blueprint(food_bp)
    app.register_blueprint(streak_bp)
    app.register_blueprint(daily_log_bp)
    app.register_blueprint(profile_bp)
    app.register_blueprint(leaderboard_bp)
