from __future__ import annotations

import logging

from flask import Blueprint, flash, jsonify, redirect, render_template, request, url_for
from flask.views import MethodView
from flask_login import login_user, logout_user
from sqlalchemy.exc import SQLAlchemyError

from ..errors import DrawError, InvalidInput
from ..extensions import db
from ..models import AdminUser
from ..policies import AdminRequiredMixin, is_admin_user
from ..security import verify_admin_password
from ..services import roster
from .api import json_body, register_json_errors


logger = logging.getLogger(__name__)


admin_bp = Blueprint("admin", __name__, url_prefix="/admin")
admin_api_bp = Blueprint("admin_api", __name__, url_prefix="/api/admin")


# --------- Pages ----------

class DashboardView(MethodView):
    def get(self):
        if not is_admin_user():
            return render_template("admin/login.html")
        return render_template(
            "admin/dashboard.html",
            rows=roster.admin_rows(),
            num_participants=roster.count(),
        )


class LoginView(MethodView):
    def post(self):
        password = request.form.get("password") or ""
        if not verify_admin_password(password):
            flash("Wrong password.", "error")
            return redirect(url_for("admin.dashboard"))

        login_user(AdminUser(), remember=True)
        return redirect(url_for("admin.dashboard"))


class LogoutView(MethodView):
    def get(self):
        logout_user()
        return redirect(url_for("admin.dashboard"))


class SeedView(AdminRequiredMixin):
    def post(self):
        names = roster.parse_names(request.form.get("names") or "")
        try:
            count = roster.replace_all(names)
            flash(f"Roster replaced: {count} participants. All previous choices were cleared.", "success")
        except DrawError as e:
            flash(f"Seeding failed: {e.message}", "error")
        except SQLAlchemyError:
            db.session.rollback()
            logger.exception("Storage failure while reseeding the roster")
            flash("Seeding failed: storage unavailable. The roster may be incomplete, check it before retrying.", "error")
        return redirect(url_for("admin.dashboard"))


# --------- JSON API ----------

class ApiLoginView(MethodView):
    def post(self):
        password = json_body().get("password")
        if not isinstance(password, str) or not verify_admin_password(password):
            return jsonify(error="Unauthorized"), 401

        login_user(AdminUser(), remember=True)
        return jsonify(ok=True)


class ApiLogoutView(MethodView):
    def post(self):
        logout_user()
        return jsonify(ok=True)


class ApiPlayersView(AdminRequiredMixin):
    def get(self):
        return jsonify(players=roster.admin_rows())


class ApiSeedView(AdminRequiredMixin):
    def get(self):
        return jsonify(count=roster.count())

    def post(self):
        names = json_body().get("names")
        if not isinstance(names, list) or not names:
            raise InvalidInput("names must be a non-empty array")
        count = roster.replace_all(names)
        return jsonify(ok=True, count=count)


register_json_errors(admin_api_bp)

# Register routes
admin_bp.add_url_rule("", view_func=DashboardView.as_view("dashboard"))
admin_bp.add_url_rule("/login", view_func=LoginView.as_view("login"), methods=["POST"])
admin_bp.add_url_rule("/logout", view_func=LogoutView.as_view("logout"))
admin_bp.add_url_rule("/seed", view_func=SeedView.as_view("seed"), methods=["POST"])

admin_api_bp.add_url_rule("/login", view_func=ApiLoginView.as_view("login"), methods=["POST"])
admin_api_bp.add_url_rule("/logout", view_func=ApiLogoutView.as_view("logout"), methods=["POST"])
admin_api_bp.add_url_rule("/players", view_func=ApiPlayersView.as_view("players"))
admin_api_bp.add_url_rule("/seed", view_func=ApiSeedView.as_view("seed"), methods=["GET", "POST"])
