"""
Driver profile lifecycle and completion scoring.

The completion percentage is a weighted sum over a fixed set of profile
fields. Required fields add up to 70 and optional ones to 30, so a profile
with every required field set sits exactly at the online threshold.
"""
import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Any

from geoalchemy2.elements import WKTElement
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from ridehail.core.encryption import FieldCipher
from ridehail.core.exceptions import (
    AlreadyExistsError,
    NotEligibleError,
    NotFoundError,
    duplicate_field_from_integrity_error,
)
from ridehail.models.driver import ONLINE_COMPLETION_THRESHOLD, DriverProfile
from ridehail.models.enums import UserRole
from ridehail.models.user import User
from ridehail.schemas.driver import (
    CompletionResponse,
    DriverProfileCreate,
    DriverProfileResponse,
    DriverProfileUpdate,
    MissingField,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CompletionField:
    """A scored profile field.

    Attributes:
        field: Public (camelCase) field name
        attribute: DriverProfile attribute holding the value
        weight: Points added when the field is populated
        label: Human readable name shown in missing-field lists
        required: Whether registration demands the field
    """
    field: str
    attribute: str
    weight: int
    label: str
    required: bool


COMPLETION_FIELDS: tuple[CompletionField, ...] = (
    # Required (70)
    CompletionField("languagePreference", "language_preference", 10, "Language Preference", True),
    CompletionField("city", "city", 10, "City", True),
    CompletionField("nationalId", "national_id_encrypted", 15, "National ID", True),
    CompletionField("licenseNumber", "license_number", 15, "License Number", True),
    CompletionField("rcNumber", "rc_number", 10, "RC Number", True),
    CompletionField("vehicleType", "vehicle_type", 10, "Vehicle Type", True),
    # Optional (30)
    CompletionField("profilePictureUrl", "profile_picture_url", 10, "Profile Picture", False),
    CompletionField("licenseExpiry", "license_expiry", 5, "License Expiry Date", False),
    CompletionField("rcExpiry", "rc_expiry", 5, "RC Expiry Date", False),
    CompletionField("vehicleModel", "vehicle_model", 5, "Vehicle Model", False),
    CompletionField("vehicleColor", "vehicle_color", 5, "Vehicle Color", False),
)

# Fields a driver may change after registration
MUTABLE_FIELDS = frozenset(
    {"vehicle_model", "vehicle_color", "profile_picture_url", "license_expiry", "rc_expiry"}
)


def _is_populated(value: Any) -> bool:
    if isinstance(value, str):
        return bool(value.strip())
    return value is not None


def calculate_completion(profile: Any) -> int:
    """Sum the weights of every populated scored field."""
    return sum(
        f.weight
        for f in COMPLETION_FIELDS
        if _is_populated(getattr(profile, f.attribute, None))
    )


def missing_optional_fields(profile: Any) -> list[MissingField]:
    """List the unset optional fields with their weight and label."""
    return [
        MissingField(field=f.field, weight=f.weight, label=f.label)
        for f in COMPLETION_FIELDS
        if not f.required and not _is_populated(getattr(profile, f.attribute, None))
    ]


def can_go_online(completion_percentage: int, is_verified: bool) -> bool:
    return completion_percentage >= ONLINE_COMPLETION_THRESHOLD and is_verified


class DriverProfileService:
    """
    Driver onboarding operations for the authenticated user.

    Every mutation runs the same steps before persisting: encrypt the
    national ID if it is still plaintext, then recompute the completion
    percentage.
    """

    def __init__(self, session: AsyncSession, cipher: FieldCipher):
        self.session = session
        self.cipher = cipher

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    async def _find(self, user_id) -> DriverProfile | None:
        result = await self.session.execute(
            select(DriverProfile).where(DriverProfile.user_id == user_id)
        )
        return result.scalar_one_or_none()

    async def _get_or_404(self, user_id) -> DriverProfile:
        profile = await self._find(user_id)
        if profile is None:
            raise NotFoundError("Driver profile not found")
        return profile

    def _prepare(self, profile: DriverProfile) -> None:
        if profile.national_id_encrypted:
            profile.national_id_encrypted = self.cipher.encrypt_if_needed(
                profile.national_id_encrypted
            )
        profile.completion_percentage = calculate_completion(profile)

    async def _flush(self) -> None:
        try:
            await self.session.flush()
        except IntegrityError as exc:
            duplicate = duplicate_field_from_integrity_error(exc)
            if duplicate is None:
                raise
            if duplicate.field == "userId":
                raise AlreadyExistsError(duplicate.message) from exc
            raise duplicate from exc

    def to_response(self, profile: DriverProfile, user: User) -> DriverProfileResponse:
        """Build the client view with the national ID masked."""
        return DriverProfileResponse.model_validate(
            {
                "id": profile.id,
                "user": {
                    "id": user.id,
                    "name": user.name,
                    "email": user.email,
                    "phone": user.phone,
                },
                "personal_info": {
                    "language_preference": profile.language_preference,
                    "city": profile.city,
                    "profile_picture_url": profile.profile_picture_url,
                    "national_id": self.cipher.masked(profile.national_id_encrypted),
                },
                "documents": {
                    "license_number": profile.license_number,
                    "license_expiry": profile.license_expiry,
                    "rc_number": profile.rc_number,
                    "rc_expiry": profile.rc_expiry,
                },
                "vehicle_info": {
                    "type": profile.vehicle_type,
                    "number": profile.vehicle_number,
                    "model": profile.vehicle_model,
                    "color": profile.vehicle_color,
                },
                "status": {
                    "is_online": profile.is_online,
                    "is_verified": profile.is_verified,
                    "completion_percentage": profile.completion_percentage,
                },
                "stats": {
                    "rating": float(profile.rating),
                    "total_rides": profile.total_rides,
                },
                "location": {
                    "lon": float(profile.longitude),
                    "lat": float(profile.latitude),
                },
                "created_at": profile.created_at,
                "updated_at": profile.updated_at,
            }
        )

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------
    async def create_profile(self, user: User, data: DriverProfileCreate) -> DriverProfileResponse:
        """Register the user's driver profile.

        Raises:
            AlreadyExistsError: If the user already has a profile
            DuplicateFieldError: If national ID, license or RC number is taken
        """
        if await self._find(user.id) is not None:
            raise AlreadyExistsError("Driver profile already exists")

        longitude, latitude = Decimal("0"), Decimal("0")
        profile = DriverProfile(
            user_id=user.id,
            language_preference=data.language_preference,
            city=data.city,
            profile_picture_url=str(data.profile_picture_url) if data.profile_picture_url else None,
            national_id_encrypted=data.national_id,
            national_id_digest=self.cipher.digest(data.national_id),
            license_number=data.license_number,
            license_expiry=data.license_expiry,
            rc_number=data.rc_number,
            rc_expiry=data.rc_expiry,
            vehicle_type=data.vehicle_type,
            vehicle_number=data.vehicle_number,
            vehicle_model=data.vehicle_model,
            vehicle_color=data.vehicle_color,
            is_online=False,
            is_verified=False,
            rating=Decimal("5.0"),
            total_rides=0,
            longitude=longitude,
            latitude=latitude,
            location=WKTElement(f"POINT({longitude} {latitude})", srid=4326),
        )
        self._prepare(profile)

        user.role = UserRole.DRIVER
        self.session.add(profile)
        await self._flush()
        await self.session.refresh(profile)

        logger.info(
            f"Driver profile {profile.id} created for user {user.id} "
            f"({profile.completion_percentage}% complete)"
        )
        return self.to_response(profile, user)

    async def get_profile(self, user: User) -> DriverProfileResponse:
        profile = await self._get_or_404(user.id)
        return self.to_response(profile, user)

    async def update_profile(self, user: User, data: DriverProfileUpdate) -> DriverProfileResponse:
        """Apply a partial update limited to the mutable fields."""
        profile = await self._get_or_404(user.id)

        update_data = data.model_dump(exclude_unset=True)
        for field, value in update_data.items():
            if field not in MUTABLE_FIELDS:
                continue
            if field == "profile_picture_url" and value is not None:
                value = str(value)
            setattr(profile, field, value)

        self._prepare(profile)
        await self._flush()
        await self.session.refresh(profile)

        logger.info(
            f"Driver profile {profile.id} updated: {sorted(update_data)} "
            f"({profile.completion_percentage}% complete)"
        )
        return self.to_response(profile, user)

    async def update_status(self, user: User, is_online: bool) -> DriverProfileResponse:
        """Toggle availability. Going online requires an eligible profile.

        Raises:
            NotEligibleError: If completion is below the threshold or the
                profile is not verified
        """
        profile = await self._get_or_404(user.id)

        if is_online:
            # Re-derive instead of trusting the stored score
            self._prepare(profile)
            if not can_go_online(profile.completion_percentage, profile.is_verified):
                logger.warning(
                    f"Driver {profile.id} cannot go online "
                    f"(completion={profile.completion_percentage}, verified={profile.is_verified})"
                )
                raise NotEligibleError(
                    f"Profile must be at least {ONLINE_COMPLETION_THRESHOLD}% complete "
                    "and verified to go online"
                )

        profile.is_online = is_online
        await self._flush()
        await self.session.refresh(profile)

        logger.info(f"Driver {profile.id} is now {'online' if is_online else 'offline'}")
        return self.to_response(profile, user)

    async def get_completion(self, user: User) -> CompletionResponse:
        profile = await self._get_or_404(user.id)
        percentage = calculate_completion(profile)
        return CompletionResponse(
            completion_percentage=percentage,
            missing_fields=missing_optional_fields(profile),
            can_go_online=can_go_online(percentage, profile.is_verified),
            is_verified=profile.is_verified,
        )
