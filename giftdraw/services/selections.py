from __future__ import annotations

import logging

from sqlalchemy import update
from sqlalchemy.exc import IntegrityError

from ..errors import AlreadyAssigned, InvalidInput, NotFound, SelfSelection, TargetTaken
from ..extensions import db
from ..models import Participant
from . import roster


logger = logging.getLogger(__name__)


def _is_positive_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def attempt_select(picker_id, target_id) -> None:
    """
    Record that picker_id gives to target_id.

    The checks before the write only give early, friendly answers. The write
    itself is a single conditional UPDATE (only when the picker has no target
    yet) backed by the unique constraint on selected_target_id, so a lost race
    ends in the same AlreadyAssigned / TargetTaken errors as the checks.
    """
    if not _is_positive_int(picker_id) or not _is_positive_int(target_id):
        raise InvalidInput("Invalid ids")
    if picker_id == target_id:
        raise SelfSelection()

    picker = roster.find_by_id(picker_id)
    if picker is None:
        raise NotFound("Player not found")
    if picker.has_selected:
        raise AlreadyAssigned()

    if roster.find_by_id(target_id) is None:
        raise NotFound("Selected player not found")
    if Participant.query.filter_by(selected_target_id=target_id).first() is not None:
        raise TargetTaken()

    stmt = (
        update(Participant)
        .where(Participant.id == picker_id, Participant.selected_target_id.is_(None))
        .values(selected_target_id=target_id)
        .execution_options(synchronize_session=False)
    )
    try:
        result = db.session.execute(stmt)
    except IntegrityError as e:
        db.session.rollback()
        logger.info("Picker %d lost the race for target %d", picker_id, target_id)
        raise TargetTaken() from e

    if result.rowcount == 0:
        db.session.rollback()
        logger.info("Picker %d already committed a selection", picker_id)
        raise AlreadyAssigned()

    db.session.commit()
    logger.info("Picker %d selected target %d", picker_id, target_id)
