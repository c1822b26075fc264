from __future__ import annotations

from flask import current_app
from passlib.context import CryptContext


pwd_context = CryptContext(
    schemes=["argon2"],
    deprecated="auto",
)


def hash_admin_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_admin_password(password: str) -> bool:
    """Check a submitted organizer password against ADMIN_PASSWORD_HASH."""
    stored_hash = current_app.config.get("ADMIN_PASSWORD_HASH") or ""
    if not password or not stored_hash:
        return False
    return pwd_context.verify(password, stored_hash)
