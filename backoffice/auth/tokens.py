"""Signed bearer tokens (JWT, HS256) carrying the caller's id, username and role."""

from datetime import datetime, timedelta, timezone
from typing import Any, Optional

import jwt

from backoffice.auth.context import UserContext
from backoffice.config import JWT_ALGORITHM, JWT_EXPIRE_MINUTES, JWT_SECRET
from backoffice.errors import AuthenticationError


def create_token(
    user_id: int,
    username: str,
    role: str,
    minutes: Optional[int] = None,
    secret: Optional[str] = None,
) -> str:
    payload: dict[str, Any] = {
        "sub": str(user_id),
        "username": username,
        "role": role,
        "exp": datetime.now(timezone.utc) + timedelta(minutes=minutes if minutes is not None else JWT_EXPIRE_MINUTES),
    }
    return jwt.encode(payload, secret or JWT_SECRET, algorithm=JWT_ALGORITHM)


def decode_token(token: str, secret: Optional[str] = None) -> UserContext:
    """Verify signature and expiry; raise AuthenticationError otherwise."""
    try:
        payload = jwt.decode(token, secret or JWT_SECRET, algorithms=[JWT_ALGORITHM])
    except jwt.ExpiredSignatureError as e:
        raise AuthenticationError("Token has expired.") from e
    except jwt.InvalidTokenError as e:
        raise AuthenticationError(f"Invalid token: {e}") from e
    role = payload.get("role")
    if not role:
        raise AuthenticationError("Token carries no role.")
    sub = payload.get("sub")
    return UserContext(
        user_id=int(sub) if sub is not None and str(sub).isdigit() else None,
        username=payload.get("username") or "",
        role=str(role),
    )
