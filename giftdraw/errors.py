"""Expected, user-facing outcomes of roster and selection operations.

Each error carries the HTTP status the JSON API answers with. Storage faults
are not part of this hierarchy; they surface as ``SQLAlchemyError``.
"""
from __future__ import annotations


class DrawError(RuntimeError):
    status_code = 400
    default_message = "Request failed"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.default_message)
        self.message = message or self.default_message


class InvalidInput(DrawError):
    status_code = 400
    default_message = "Invalid input"


class SelfSelection(DrawError):
    status_code = 400
    default_message = "Cannot select yourself"


class NotFound(DrawError):
    status_code = 404
    default_message = "Player not found"


class AlreadyAssigned(DrawError):
    status_code = 409
    default_message = "Choice already saved"


class TargetTaken(DrawError):
    status_code = 409
    default_message = "This player has already been selected by someone else"


class RosterConflict(DrawError):
    status_code = 409
    default_message = "Roster contains a duplicate name"
