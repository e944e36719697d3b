"""Auth API: register, login (issues a signed token), whoami."""

from typing import Any, Optional

from fastapi import APIRouter, Depends

from backoffice.api.deps import get_auth_context, get_optional_auth_context
from backoffice.auth.context import Role, UserContext
from backoffice.auth.tokens import create_token
from backoffice.db.repositories import user_repo
from backoffice.errors import ForbiddenError, NotFoundError
from backoffice.models.users import LoginRequest, RegisterRequest

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/register", status_code=201)
def register(
    body: RegisterRequest,
    auth: Optional[UserContext] = Depends(get_optional_auth_context),
) -> dict[str, Any]:
    """Self-service registration creates staff accounts; only an admin can create another admin."""
    if body.role == Role.ADMIN and (auth is None or not auth.has_role(Role.ADMIN)):
        raise ForbiddenError("Forbidden: only administrators can create admin accounts.")
    user = user_repo.create_user(body.username, body.password, body.role)
    return {"message": "User registered successfully!", "user": user}


@router.post("/login")
def login(body: LoginRequest) -> dict[str, Any]:
    user = user_repo.authenticate(body.username, body.password)
    token = create_token(user["id"], user["username"], user["role"])
    return {"message": "Login successful!", "token": token, "token_type": "bearer", "user": user}


@router.get("/me")
def whoami(auth: UserContext = Depends(get_auth_context)) -> dict[str, Any]:
    """Current user as stored; 404 once the account is gone."""
    if auth.user_id is None:
        raise NotFoundError("User not found.")
    return user_repo.get_user(auth.user_id)
