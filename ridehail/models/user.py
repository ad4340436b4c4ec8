"""User model for authentication."""
from sqlalchemy import Enum, String
from sqlalchemy.orm import Mapped, mapped_column

from .base import BaseModel
from .enums import UserRole


class User(BaseModel):
    """User account for signup, login and role checks.

    Password is stored as bcrypt hash and never serialized.
    """

    __tablename__ = "users"

    name: Mapped[str] = mapped_column(String(50), nullable=False)
    email: Mapped[str] = mapped_column(
        String(255), unique=True, nullable=False
    )
    phone: Mapped[str] = mapped_column(String(10), unique=True, nullable=False)
    hashed_password: Mapped[str] = mapped_column(String(255), nullable=False)
    role: Mapped[UserRole] = mapped_column(
        Enum(UserRole, name="user_role"),
        default=UserRole.RIDER,
        nullable=False,
    )
    is_active: Mapped[bool] = mapped_column(default=True, nullable=False)

    def __repr__(self) -> str:
        return f"<User(email={self.email}, role={self.role}, is_active={self.is_active})>"
