from __future__ import annotations

import logging

from flask import Blueprint, jsonify, request
from flask.views import MethodView
from sqlalchemy.exc import SQLAlchemyError

from ..errors import DrawError, InvalidInput, NotFound
from ..services import roster
from ..services.selections import attempt_select


logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__, url_prefix="/api")


def register_json_errors(bp: Blueprint) -> None:
    """Answer domain errors and storage faults with a JSON body on this blueprint."""

    @bp.errorhandler(DrawError)
    def handle_draw_error(e: DrawError):
        return jsonify(error=e.message), e.status_code

    @bp.errorhandler(SQLAlchemyError)
    def handle_storage_error(e: SQLAlchemyError):
        logger.exception("Storage failure on %s %s", request.method, request.path)
        return jsonify(error="Storage unavailable"), 500


def json_body() -> dict:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise InvalidInput("Expected a JSON object")
    return data


class NamesView(MethodView):
    def get(self):
        return jsonify(players=[p.to_public_dict() for p in roster.list_all()])


class TakenView(MethodView):
    """Best-effort hint for the UI; the authoritative check happens on select."""

    def get(self):
        return jsonify(ids=sorted(roster.list_taken_targets()))


class LoginView(MethodView):
    def post(self):
        name = json_body().get("name")
        if not isinstance(name, str) or not name.strip():
            raise InvalidInput("Name is required")

        player = roster.find_by_name(name.strip())
        if player is None:
            raise NotFound("Player not found")
        return jsonify(player=player.to_dict())


class SelectView(MethodView):
    def post(self):
        data = json_body()
        attempt_select(data.get("playerId"), data.get("selectedPlayerId"))
        return jsonify(ok=True)


register_json_errors(api_bp)

api_bp.add_url_rule("/names", view_func=NamesView.as_view("names"))
api_bp.add_url_rule("/taken", view_func=TakenView.as_view("taken"))
api_bp.add_url_rule("/login", view_func=LoginView.as_view("login"), methods=["POST"])
api_bp.add_url_rule("/select", view_func=SelectView.as_view("select"), methods=["POST"])
