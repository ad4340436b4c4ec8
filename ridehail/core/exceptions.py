"""Domain exceptions mapped to HTTP status codes by the exception handlers."""
import re
from typing import Optional

from fastapi import status
from sqlalchemy.exc import IntegrityError


class ServiceError(Exception):
    """Base class for failures reported to the client as ``{success: false}``."""

    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class InputValidationError(ServiceError):
    """Malformed or missing input."""


class DuplicateFieldError(ServiceError):
    """A unique field is already taken."""

    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field


class AlreadyExistsError(ServiceError):
    """The resource can only be created once."""


class InvalidCredentialsError(ServiceError):
    """Login failed. The message never reveals which part was wrong."""

    def __init__(self, message: str = "Invalid credentials"):
        super().__init__(message)


class UnauthenticatedError(ServiceError):
    status_code = status.HTTP_401_UNAUTHORIZED


class ForbiddenError(ServiceError):
    status_code = status.HTTP_403_FORBIDDEN


class NotFoundError(ServiceError):
    status_code = status.HTTP_404_NOT_FOUND


class NotEligibleError(ServiceError):
    """A business rule blocked the requested state transition."""


class InvalidTokenError(Exception):
    """Token signature, structure or expiry check failed."""


_CONSTRAINT_PATTERN = re.compile(r"\b(uq_[a-z0-9_]+)\b")

# Unique constraint name -> (field, message)
UNIQUE_CONSTRAINTS: dict[str, tuple[str, str]] = {
    "uq_users_email": ("email", "Email already exists"),
    "uq_users_phone": ("phone", "Phone number already exists"),
    "uq_driver_profiles_user_id": ("userId", "Driver profile already exists"),
    "uq_driver_profiles_national_id_digest": ("nationalId", "National ID is already registered"),
    "uq_driver_profiles_license_number": ("licenseNumber", "License number is already registered"),
    "uq_driver_profiles_rc_number": ("rcNumber", "RC number is already registered"),
}


def duplicate_field_from_integrity_error(exc: IntegrityError) -> Optional[DuplicateFieldError]:
    """Translate a unique violation into a DuplicateFieldError.

    Returns None when the error does not name a known unique constraint.
    """
    match = _CONSTRAINT_PATTERN.search(str(exc.orig))
    if match is None or match.group(1) not in UNIQUE_CONSTRAINTS:
        return None

    field, message = UNIQUE_CONSTRAINTS[match.group(1)]
    return DuplicateFieldError(field, message)
