from __future__ import annotations

import logging
import re
from collections import Counter
from typing import Iterable

from sqlalchemy import func, insert, select
from sqlalchemy.exc import IntegrityError

from ..errors import InvalidInput, RosterConflict
from ..extensions import db
from ..models import MAX_ID, Participant


logger = logging.getLogger(__name__)

_NAME_SEPARATORS = re.compile(r"[\n,]")


def list_all() -> list[Participant]:
    return Participant.query.order_by(Participant.id.asc()).all()


def find_by_name(name: str) -> Participant | None:
    return Participant.query.filter_by(name=name).first()


def find_by_id(participant_id: int) -> Participant | None:
    # Out-of-range ids cannot be bound as INTEGER, and cannot exist either
    if not 0 < participant_id <= MAX_ID:
        return None
    return db.session.get(Participant, participant_id)


def list_taken_targets() -> set[int]:
    rows = db.session.execute(
        select(Participant.selected_target_id).where(Participant.selected_target_id.is_not(None))
    )
    return {target_id for (target_id,) in rows}


def count() -> int:
    return db.session.scalar(select(func.count()).select_from(Participant)) or 0


def clean_names(names: Iterable) -> list[str]:
    """Trim each entry and drop blanks and non-strings. Order is kept, duplicates are not removed."""
    cleaned = []
    for n in names:
        if not isinstance(n, str):
            continue
        n = n.strip()
        if n:
            cleaned.append(n)
    return cleaned


def parse_names(text: str) -> list[str]:
    """Split free text on newlines or commas, as typed into the admin form."""
    return clean_names(_NAME_SEPARATORS.split(text or ""))


def replace_all(names: Iterable) -> int:
    """
    Drop the roster and build a new generation with ids 1..N in input order.

    The table is dropped and re-created rather than emptied so that every
    constraint declared on Participant (unique name, unique selected target,
    no self-selection) is declared again for the new generation.
    All previous selections are lost.
    """
    cleaned = clean_names(names)
    if not cleaned:
        raise InvalidInput("No valid names provided")
    # SQLite runs the DROP below outside the transaction, so a duplicate caught
    # only by the unique constraint would already have destroyed the live roster
    duplicates = sorted(n for n, seen in Counter(cleaned).items() if seen > 1)
    if duplicates:
        raise RosterConflict(f"Duplicate name in roster: {', '.join(duplicates)}")

    table = Participant.__table__
    conn = db.session.connection()
    table.drop(conn, checkfirst=True)
    table.create(conn)

    try:
        db.session.execute(
            insert(table),
            [{"id": idx, "name": name} for idx, name in enumerate(cleaned, start=1)],
        )
        db.session.commit()
    except IntegrityError as e:
        db.session.rollback()
        raise RosterConflict("Duplicate name in roster") from e
    finally:
        # Rows from the previous generation must not be served from the identity map
        db.session.expunge_all()

    logger.info("Roster replaced with %d participants", len(cleaned))
    return len(cleaned)


def admin_rows() -> list[dict]:
    """Full roster with each selected target resolved to its name, from one snapshot."""
    players = list_all()
    id_to_name = {p.id: p.name for p in players}
    return [
        {
            "id": p.id,
            "name": p.name,
            "selectedPlayerId": p.selected_target_id,
            "selectedPlayerName": id_to_name.get(p.selected_target_id) if p.has_selected else None,
        }
        for p in players
    ]
