"""Authentication request/response schemas."""
from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import EmailStr, Field, field_validator, model_validator

from ridehail.models.enums import UserRole
from .base import BaseSchema

PHONE_PATTERN = r"^[0-9]{10}$"


class UserSignup(BaseSchema):
    """New account details. Role is always RIDER on signup."""

    name: str = Field(..., min_length=2, max_length=50)
    email: EmailStr
    phone: str = Field(..., pattern=PHONE_PATTERN, description="10-digit phone number")
    password: str = Field(..., min_length=6, max_length=100)

    @field_validator("name", "email", "phone", mode="before")
    @classmethod
    def strip_whitespace(cls, v):
        return v.strip() if isinstance(v, str) else v


class UserLogin(BaseSchema):
    """Login credentials: email or phone, plus password."""

    email: Optional[EmailStr] = None
    phone: Optional[str] = Field(None, pattern=PHONE_PATTERN)
    password: str = Field(..., min_length=6, max_length=100)

    @field_validator("email", "phone", mode="before")
    @classmethod
    def blank_as_missing(cls, v):
        if isinstance(v, str):
            v = v.strip()
            return v or None
        return v

    @field_validator("password", mode="before")
    @classmethod
    def strip_password(cls, v):
        return v.strip() if isinstance(v, str) else v

    @model_validator(mode="after")
    def require_identifier(self) -> "UserLogin":
        if not self.email and not self.phone:
            raise ValueError("Either email or phone number must be provided")
        return self

    @property
    def identifier(self) -> str:
        return self.email or self.phone


class UserPublic(BaseSchema):
    """User data safe to return to clients."""

    id: UUID
    name: str
    email: str
    phone: str
    role: UserRole
    is_active: bool
    created_at: Optional[datetime] = None


class AuthResult(BaseSchema):
    """Signup/login payload."""

    user: UserPublic
    token: str = Field(..., description="JWT access token")


class WelcomeData(BaseSchema):
    user_id: UUID
    name: str
    email: str
    role: UserRole
    welcome_message: str
