"""ORM model for back-office users."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from backoffice.db.base import Base, TimestampMixin


class User(Base, TimestampMixin):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    username: Mapped[str] = mapped_column(String(64), unique=True, nullable=False, index=True)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    # admin | staff
    role: Mapped[str] = mapped_column(String(16), nullable=False, default="staff")
