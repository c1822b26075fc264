from __future__ import annotations

import logging
import os
from datetime import timedelta

from flask import Flask

from .cli import init_db_command, seed_roster_command
from .extensions import db, login_manager, migrate, csrf
from .formatting import format_display_name
from .security import hash_admin_password
from .views.admin import admin_api_bp, admin_bp
from .views.api import api_bp
from .views.public import public_bp


def create_app(test_config: dict | None = None) -> Flask:
    app = Flask(__name__)

    app.config["SECRET_KEY"] = os.environ.get("SECRET_KEY", "dev-secret-change-me")
    app.config["SQLALCHEMY_DATABASE_URI"] = os.environ.get("DATABASE_URL", "sqlite:///giftdraw.db")
    app.config["SQLALCHEMY_TRACK_MODIFICATIONS"] = False

    # Organizer shared secret. A precomputed argon2 hash wins over the plaintext.
    app.config["ADMIN_PASSWORD"] = os.environ.get("ADMIN_PASSWORD", "giftcode-admin")
    app.config["ADMIN_PASSWORD_HASH"] = os.environ.get("ADMIN_PASSWORD_HASH", "").strip()

    app.config["REMEMBER_COOKIE_DURATION"] = timedelta(days=7)
    app.config["REMEMBER_COOKIE_HTTPONLY"] = True
    app.config["REMEMBER_COOKIE_SAMESITE"] = "Lax"
    app.config["SESSION_COOKIE_SAMESITE"] = "Lax"
    app.config["LOG_LEVEL"] = os.environ.get("LOG_LEVEL", "INFO").upper()

    if test_config:
        app.config.update(test_config)

    if not app.config["ADMIN_PASSWORD_HASH"]:
        app.config["ADMIN_PASSWORD_HASH"] = hash_admin_password(app.config["ADMIN_PASSWORD"])

    logging.basicConfig(format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logging.getLogger("giftdraw").setLevel(app.config["LOG_LEVEL"])

    db.init_app(app)
    login_manager.init_app(app)
    migrate.init_app(app, db)
    csrf.init_app(app)

    # Blueprints
    app.register_blueprint(public_bp)
    app.register_blueprint(api_bp)
    app.register_blueprint(admin_bp)
    app.register_blueprint(admin_api_bp)

    app.add_template_filter(format_display_name, "display_name")
    app.cli.add_command(init_db_command)
    app.cli.add_command(seed_roster_command)

    # Uniqueness constraints must exist before the first selection is accepted
    with app.app_context():
        db.create_all()

    return app
