"""User repository: registration and credential checks."""

from typing import Any

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from backoffice.auth.context import Role
from backoffice.auth.passwords import hash_password, verify_password
from backoffice.db import get_session
from backoffice.db.models.user import User
from backoffice.errors import AuthenticationError, ConflictError, NotFoundError, ValidationError
from backoffice.utils.logger import get_logger

logger = get_logger("backoffice.db.user_repo")


def user_to_dict(user: User) -> dict[str, Any]:
    """Public view of a user (never the hash)."""
    return {"id": user.id, "username": user.username, "role": user.role}


def create_user(username: str, password: str, role: Role | str = Role.STAFF) -> dict[str, Any]:
    username = (username or "").strip()
    if not username or not password:
        raise ValidationError("Username and password are required.", field="username" if not username else "password")
    role_value = role.value if isinstance(role, Role) else str(role).strip().lower()
    if role_value not in {r.value for r in Role}:
        raise ValidationError(f"Unknown role: {role_value!r}", field="role")
    with get_session() as session:
        user = User(username=username, password_hash=hash_password(password), role=role_value)
        session.add(user)
        try:
            session.flush()
        except IntegrityError as e:
            raise ConflictError("Username already exists.") from e
        logger.info("users.create", user_id=user.id, username=username, role=role_value)
        return user_to_dict(user)


def authenticate(username: str, password: str) -> dict[str, Any]:
    """Return the user dict for valid credentials; AuthenticationError otherwise."""
    with get_session() as session:
        user = session.scalars(select(User).where(User.username == (username or "").strip())).first()
        if user is None or not verify_password(password, user.password_hash):
            logger.warning("users.login.failed", username=username)
            raise AuthenticationError("Invalid credentials.")
        return user_to_dict(user)


def get_user(user_id: int) -> dict[str, Any]:
    with get_session() as session:
        user = session.get(User, user_id)
        if user is None:
            raise NotFoundError("User not found.")
        return user_to_dict(user)
