"""Authorization context handed to every back-office operation."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Protocol, runtime_checkable


class Role(str, Enum):
    ADMIN = "admin"
    STAFF = "staff"


@runtime_checkable
class AuthorizationContext(Protocol):
    """What operations need to know about the caller: who they are and which roles they hold."""

    @property
    def user_id(self) -> Optional[int]: ...

    def has_role(self, role: Role | str) -> bool: ...


@dataclass(frozen=True)
class UserContext:
    """Caller identity decoded from a verified token."""

    user_id: Optional[int]
    username: str
    role: str

    def has_role(self, role: Role | str) -> bool:
        wanted = role.value if isinstance(role, Role) else str(role)
        return self.role.strip().lower() == wanted
