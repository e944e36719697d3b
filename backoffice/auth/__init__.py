"""Auth: caller context, signed tokens, password hashing."""

from backoffice.auth.context import AuthorizationContext, Role, UserContext
from backoffice.auth.passwords import hash_password, verify_password
from backoffice.auth.tokens import create_token, decode_token

__all__ = [
    "AuthorizationContext",
    "Role",
    "UserContext",
    "create_token",
    "decode_token",
    "hash_password",
    "verify_password",
]
