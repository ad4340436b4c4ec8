"""
Driver profile model.

Driver-specific onboarding data kept apart from the User account. The
nested profile document (personal info, documents, vehicle, status, stats,
location) is flattened into columns.
"""
from datetime import date
from decimal import Decimal
from typing import Optional
from uuid import UUID

from geoalchemy2 import Geography
from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Date,
    Enum,
    ForeignKey,
    Integer,
    Numeric,
    String,
)
from sqlalchemy.dialects.postgresql import UUID as PG_UUID
from sqlalchemy.orm import Mapped, mapped_column

from ridehail.models.base import BaseModel
from ridehail.models.enums import City, Language, VehicleType

# Minimum completion percentage a verified driver needs to go online
ONLINE_COMPLETION_THRESHOLD = 70


class DriverProfile(BaseModel):
    """
    One-to-one driver profile of a User.

    Attributes:
        national_id_encrypted: AES ciphertext in ``cipher:iv`` hex form
        national_id_digest: Keyed digest backing the uniqueness constraint
        completion_percentage: Derived score, recomputed on every mutation
        location: PostGIS point mirroring longitude/latitude
    """
    __tablename__ = "driver_profiles"
    __table_args__ = (
        CheckConstraint("rating >= 1 AND rating <= 5", name="rating_range"),
        CheckConstraint("total_rides >= 0", name="total_rides_non_negative"),
        CheckConstraint(
            "completion_percentage >= 0 AND completion_percentage <= 100",
            name="completion_range",
        ),
    )

    user_id: Mapped[UUID] = mapped_column(
        PG_UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        unique=True,
        nullable=False,
    )

    # Personal information
    language_preference: Mapped[Language] = mapped_column(
        Enum(Language, name="language_preference"),
        nullable=False,
    )

    city: Mapped[City] = mapped_column(
        Enum(City, name="city"),
        nullable=False,
    )

    profile_picture_url: Mapped[Optional[str]] = mapped_column(
        String(2048),
        nullable=True,
    )

    national_id_encrypted: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
    )

    national_id_digest: Mapped[str] = mapped_column(
        String(64),
        unique=True,
        nullable=False,
    )

    # Documents
    license_number: Mapped[str] = mapped_column(
        String(20),
        unique=True,
        nullable=False,
    )

    license_expiry: Mapped[Optional[date]] = mapped_column(Date, nullable=True)

    rc_number: Mapped[str] = mapped_column(
        String(15),
        unique=True,
        nullable=False,
    )

    rc_expiry: Mapped[Optional[date]] = mapped_column(Date, nullable=True)

    # Vehicle
    vehicle_type: Mapped[VehicleType] = mapped_column(
        Enum(VehicleType, name="vehicle_type"),
        nullable=False,
    )

    vehicle_number: Mapped[Optional[str]] = mapped_column(String(12), nullable=True)
    vehicle_model: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    vehicle_color: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)

    # Status
    is_online: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    is_verified: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    completion_percentage: Mapped[int] = mapped_column(
        Integer,
        default=0,
        nullable=False,
    )

    # Stats
    rating: Mapped[Decimal] = mapped_column(
        Numeric(2, 1),
        default=Decimal("5.0"),
        nullable=False,
    )

    total_rides: Mapped[int] = mapped_column(Integer, default=0, nullable=False)

    # Location (WGS84)
    longitude: Mapped[Decimal] = mapped_column(
        Numeric(10, 7),
        default=Decimal("0"),
        nullable=False,
    )

    latitude: Mapped[Decimal] = mapped_column(
        Numeric(10, 7),
        default=Decimal("0"),
        nullable=False,
    )

    location: Mapped[Optional[str]] = mapped_column(
        Geography("POINT", srid=4326),
        nullable=True,
    )

    def __repr__(self) -> str:
        return (
            f"<DriverProfile(id={self.id}, user_id={self.user_id}, "
            f"completion={self.completion_percentage})>"
        )
