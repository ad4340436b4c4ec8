"""
Driver profile Pydantic schemas.
"""
from datetime import date, datetime
from typing import Annotated, Optional
from uuid import UUID

from pydantic import AfterValidator, Field, HttpUrl, field_validator

from ridehail.models.enums import City, Language, VehicleType
from ridehail.schemas.base import BaseSchema

NATIONAL_ID_PATTERN = r"^[0-9]{12}$"
VEHICLE_NUMBER_PATTERN = r"^[A-Z]{2}[0-9]{2}[A-Z]{1,2}[0-9]{4}$"

# Width of the profile_picture_url column
MAX_URL_LENGTH = 2048


def _strip(v):
    return v.strip() if isinstance(v, str) else v


def _strip_upper(v):
    return v.strip().upper() if isinstance(v, str) else v


def _fits_column(v: HttpUrl) -> HttpUrl:
    if len(str(v)) > MAX_URL_LENGTH:
        raise ValueError(f"URL must be at most {MAX_URL_LENGTH} characters")
    return v


PictureUrl = Annotated[HttpUrl, AfterValidator(_fits_column)]


def _must_be_future(v: Optional[date], label: str) -> Optional[date]:
    if v is not None and v <= date.today():
        raise ValueError(f"{label} must be in the future")
    return v


class DriverProfileCreate(BaseSchema):
    """Driver registration payload."""

    # Required
    language_preference: Language
    city: City
    national_id: str = Field(..., pattern=NATIONAL_ID_PATTERN, description="12-digit national ID")
    license_number: str = Field(..., min_length=8, max_length=20)
    rc_number: str = Field(..., min_length=8, max_length=15)
    vehicle_type: VehicleType

    # Optional
    profile_picture_url: Optional[PictureUrl] = None
    license_expiry: Optional[date] = None
    rc_expiry: Optional[date] = None
    vehicle_number: Optional[str] = Field(
        None,
        pattern=VEHICLE_NUMBER_PATTERN,
        description="Registration plate, e.g. MH01AB1234",
    )
    vehicle_model: Optional[str] = Field(None, max_length=50)
    vehicle_color: Optional[str] = Field(None, max_length=20)

    @field_validator("national_id", "vehicle_model", "vehicle_color", mode="before")
    @classmethod
    def strip_text(cls, v):
        return _strip(v)

    @field_validator("license_number", "rc_number", "vehicle_number", mode="before")
    @classmethod
    def normalize_document_number(cls, v):
        return _strip_upper(v)

    @field_validator("license_expiry")
    @classmethod
    def license_must_be_valid(cls, v: Optional[date]) -> Optional[date]:
        return _must_be_future(v, "License expiry date")

    @field_validator("rc_expiry")
    @classmethod
    def rc_must_be_valid(cls, v: Optional[date]) -> Optional[date]:
        return _must_be_future(v, "RC expiry date")


class DriverProfileUpdate(BaseSchema):
    """Schema for updating a driver profile (only these fields are mutable)."""

    vehicle_model: Optional[str] = Field(None, max_length=50)
    vehicle_color: Optional[str] = Field(None, max_length=20)
    profile_picture_url: Optional[PictureUrl] = None
    license_expiry: Optional[date] = None
    rc_expiry: Optional[date] = None

    @field_validator("vehicle_model", "vehicle_color", mode="before")
    @classmethod
    def strip_text(cls, v):
        return _strip(v)

    @field_validator("license_expiry")
    @classmethod
    def license_must_be_valid(cls, v: Optional[date]) -> Optional[date]:
        return _must_be_future(v, "License expiry date")

    @field_validator("rc_expiry")
    @classmethod
    def rc_must_be_valid(cls, v: Optional[date]) -> Optional[date]:
        return _must_be_future(v, "RC expiry date")


class DriverStatusUpdate(BaseSchema):
    is_online: bool


# =========================================================================
# Responses
# =========================================================================
class DriverUserSummary(BaseSchema):
    id: UUID
    name: str
    email: str
    phone: str


class PersonalInfo(BaseSchema):
    language_preference: Language
    city: City
    profile_picture_url: Optional[str] = None
    national_id: str = Field(..., description="Masked, e.g. XXXX XXXX 9012")


class Documents(BaseSchema):
    license_number: str
    license_expiry: Optional[date] = None
    rc_number: str
    rc_expiry: Optional[date] = None


class VehicleInfo(BaseSchema):
    type: VehicleType
    number: Optional[str] = None
    model: Optional[str] = None
    color: Optional[str] = None


class DriverStatus(BaseSchema):
    is_online: bool
    is_verified: bool
    completion_percentage: int


class DriverStats(BaseSchema):
    rating: float
    total_rides: int


class Location(BaseSchema):
    lon: float
    lat: float


class DriverProfileResponse(BaseSchema):
    """Driver profile as returned to clients (national ID masked)."""
    id: UUID
    user: DriverUserSummary
    personal_info: PersonalInfo
    documents: Documents
    vehicle_info: VehicleInfo
    status: DriverStatus
    stats: DriverStats
    location: Location
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class MissingField(BaseSchema):
    field: str
    weight: int
    label: str


class CompletionResponse(BaseSchema):
    completion_percentage: int
    missing_fields: list[MissingField]
    can_go_online: bool
    is_verified: bool
