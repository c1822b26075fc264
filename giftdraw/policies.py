from __future__ import annotations

from flask import flash, jsonify, redirect, request, url_for
from flask.views import MethodView
from flask_login import current_user

from .extensions import login_manager


def is_admin_user() -> bool:
    return current_user.is_authenticated and getattr(current_user, "is_admin", False)


@login_manager.unauthorized_handler
def unauthorized():
    # JSON callers get a status code, browsers go back to the admin login form
    if request.path.startswith("/api/"):
        return jsonify(error="Unauthorized"), 401
    flash("Please log in as the organizer.", "error")
    return redirect(url_for("admin.dashboard"))


class AdminRequiredMixin(MethodView):
    def dispatch_request(self, *args, **kwargs):
        if not is_admin_user():
            return login_manager.unauthorized()
        return super().dispatch_request(*args, **kwargs)
