from zoneinfo import ZoneInfoNotFoundError

from flask import Flask
from cutsistent.extensions import db, migrate, cors
from cutsistent.routes import register_routes
from cutsistent.utils.dates import resolve_zone
from cutsistent import models  # noqa: F401  registers tables on db.metadata


def create_app(test_config=None):
    app = Flask(__name__)
    app.config.from_object("config.Config")
    if test_config:
        app.config.update(test_config)

    # Day boundaries zone, resolved once so a bad name fails at startup
    try:
        app.config["STREAK_ZONE"] = resolve_zone(app.config.get("STREAK_TIMEZONE"))
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise RuntimeError(f"Invalid STREAK_TIMEZONE: {app.config.get('STREAK_TIMEZONE')!r}") from e

    # Initialize database
    db.init_app(app)

    # Initialize Flask-Migrate
    migrate.init_app(app, db)

    # CORS Configuration
    cors.init_app(app,
                  origins=app.config.get("CORS_ORIGINS", []),
                  supports_credentials=True,
                  allow_headers=["Content-Type", "Authorization"],
                  methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
                  expose_headers=["Content-Type", "Authorization"])

    register_routes(app)

    return app
