from dotenv import load_dotenv
import os

load_dotenv()

class Config:
    SECRET_KEY = os.getenv("SECRET_KEY")
    SQLALCHEMY_DATABASE_URI = os.getenv("SQLALCHEMY_DATABASE_URI")
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Pooled PostgreSQL connections; idle connections are dropped server-side
    SQLALCHEMY_ENGINE_OPTIONS = {
        'pool_pre_ping': True,
        'pool_recycle': 300,
        'pool_size': 5,
        'max_overflow': 10,
        'pool_timeout': 30,
        'connect_args': {
            'sslmode': os.getenv("DB_SSLMODE", "require"),
            'connect_timeout': 10,
        }
    }

    CORS_ORIGINS = [
        origin.strip()
        for origin in os.getenv("CORS_ORIGINS", "http://localhost:5173").split(",")
        if origin.strip()
    ]
    TOKEN_TTL_HOURS = int(os.getenv("TOKEN_TTL_HOURS", "12"))

    # Streak engine
    # IANA zone name used to bucket entries into calendar days. Empty means
    # the local zone of the machine running the server.
    STREAK_TIMEZONE = os.getenv("STREAK_TIMEZONE") or None
    SUGAR_LIMIT = float(os.getenv("SUGAR_LIMIT", "25"))
    DAILY_SUGAR_FREE_POINTS = int(os.getenv("DAILY_SUGAR_FREE_POINTS", "10"))
    STREAK_DAY_POINTS = int(os.getenv("STREAK_DAY_POINTS", "100"))
    STREAK_BREAK_PENALTY = int(os.getenv("STREAK_BREAK_PENALTY", "150"))
