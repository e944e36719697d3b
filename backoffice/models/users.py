"""Request bodies for registration and login."""

from pydantic import BaseModel, Field

from backoffice.auth.context import Role


class RegisterRequest(BaseModel):
    username: str = Field(..., min_length=1, max_length=64)
    password: str = Field(..., min_length=1)
    role: Role = Role.STAFF


class LoginRequest(BaseModel):
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)
