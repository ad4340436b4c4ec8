"""
Pydantic schemas for API request/response validation.
"""

from ridehail.schemas.base import ApiResponse, BaseSchema, ErrorResponse, FieldError
from ridehail.schemas.auth import (
    AuthResult,
    UserLogin,
    UserPublic,
    UserSignup,
    WelcomeData,
)
from ridehail.schemas.driver import (
    CompletionResponse,
    DriverProfileCreate,
    DriverProfileResponse,
    DriverProfileUpdate,
    DriverStatusUpdate,
    MissingField,
)
from ridehail.schemas.validation import collect_errors

__all__ = [
    # Base
    "ApiResponse",
    "BaseSchema",
    "ErrorResponse",
    "FieldError",
    "collect_errors",
    # Auth
    "AuthResult",
    "UserLogin",
    "UserPublic",
    "UserSignup",
    "WelcomeData",
    # Driver
    "CompletionResponse",
    "DriverProfileCreate",
    "DriverProfileResponse",
    "DriverProfileUpdate",
    "DriverStatusUpdate",
    "MissingField",
]
