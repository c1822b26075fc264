from __future__ import annotations

from flask_login import UserMixin

from .extensions import db, login_manager


ADMIN_USER_ID = "admin"

# Largest value a portable SQL INTEGER column holds; no participant id can exceed it
MAX_ID = 2**31 - 1


class Participant(db.Model):
    __tablename__ = "participants"

    # Assigned 1..N at seed time, never by the database
    id = db.Column(db.Integer, primary_key=True, autoincrement=False)
    name = db.Column(db.String(255), unique=True, nullable=False)

    # Write-once. The unique constraint is what makes picker -> target injective;
    # NULL means "no selection yet" and may repeat freely.
    selected_target_id = db.Column(
        db.Integer,
        db.ForeignKey("participants.id"),
        unique=True,
        nullable=True,
    )

    __table_args__ = (
        db.CheckConstraint("id > 0", name="positive_id"),
        db.CheckConstraint(
            "selected_target_id IS NULL OR selected_target_id <> id",
            name="not_self",
        ),
    )

    @property
    def has_selected(self) -> bool:
        return self.selected_target_id is not None

    def to_public_dict(self) -> dict:
        return {"id": self.id, "name": self.name}

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "selectedPlayerId": self.selected_target_id,
        }

    def __repr__(self) -> str:
        return f"<Participant {self.id} {self.name!r}>"


class AdminUser(UserMixin):
    """The organizer. There is exactly one, identified by the shared password."""

    id = ADMIN_USER_ID
    is_admin = True


@login_manager.user_loader
def load_user(user_id: str):
    if user_id == ADMIN_USER_ID:
        return AdminUser()
    return None
