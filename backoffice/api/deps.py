"""FastAPI dependencies: resolve the caller's AuthorizationContext from a bearer token."""

from typing import Callable, Optional

from fastapi import Depends, Header

from backoffice.auth.context import Role, UserContext
from backoffice.auth.tokens import decode_token
from backoffice.errors import AuthenticationError, ForbiddenError


def _bearer_token(authorization: Optional[str]) -> Optional[str]:
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


def get_auth_context(authorization: Optional[str] = Header(None)) -> UserContext:
    """Verified caller; 401 when the token is missing, malformed or expired."""
    token = _bearer_token(authorization)
    if token is None:
        raise AuthenticationError("Authentication required: send 'Authorization: Bearer <token>'.")
    return decode_token(token)


def get_optional_auth_context(authorization: Optional[str] = Header(None)) -> Optional[UserContext]:
    token = _bearer_token(authorization)
    return decode_token(token) if token else None


def require_roles(*roles: Role) -> Callable[..., UserContext]:
    """Dependency factory: caller must hold one of `roles`."""

    def _dependency(auth: UserContext = Depends(get_auth_context)) -> UserContext:
        if not any(auth.has_role(r) for r in roles):
            allowed = " or ".join(r.value for r in roles)
            raise ForbiddenError(f"Forbidden: only {allowed} users can perform this action.")
        return auth

    return _dependency


require_staff = require_roles(Role.ADMIN, Role.STAFF)
require_admin = require_roles(Role.ADMIN)
