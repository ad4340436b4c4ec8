"""
SQLAlchemy ORM models.
"""

# Enums
from ridehail.models.enums import City, Language, UserRole, VehicleType

# Base
from ridehail.models.base import BaseModel, TimestampMixin, UUIDPrimaryKeyMixin

# Domain Models
from ridehail.models.user import User
from ridehail.models.driver import DriverProfile

__all__ = [
    # Enums
    "City",
    "Language",
    "UserRole",
    "VehicleType",
    # Base
    "BaseModel",
    "TimestampMixin",
    "UUIDPrimaryKeyMixin",
    # Domain Models
    "User",
    "DriverProfile",
]
