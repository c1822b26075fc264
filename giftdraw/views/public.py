from __future__ import annotations

from flask import Blueprint, render_template
from flask.views import MethodView

from ..services import roster


public_bp = Blueprint("public", __name__)


class DrawPageView(MethodView):
    def get(self):
        return render_template("index.html", num_participants=roster.count())


public_bp.add_url_rule("/", view_func=DrawPageView.as_view("index"))
