"""API test fixtures -- helpers for configuring mock session returns."""
from datetime import date, datetime, timedelta, timezone
from decimal import Decimal
from unittest.mock import MagicMock
from uuid import uuid4

from ridehail.core.encryption import FieldCipher
from ridehail.models.driver import DriverProfile
from ridehail.models.enums import City, Language, VehicleType
from ridehail.services.driver_profile import calculate_completion


def make_mock_result(scalar_value=None, scalars_list=None):
    """Create a mock SQLAlchemy Result object."""
    result = MagicMock()
    result.scalar_one_or_none = MagicMock(return_value=scalar_value)

    scalars_mock = MagicMock()
    items = scalars_list if scalars_list is not None else ([scalar_value] if scalar_value else [])
    scalars_mock.all = MagicMock(return_value=items)
    scalars_mock.first = MagicMock(return_value=items[0] if items else None)
    result.scalars = MagicMock(return_value=scalars_mock)

    return result


def make_driver_profile(cipher: FieldCipher, user_id=None, national_id="123456789012", **overrides):
    """Create a persisted-looking DriverProfile with only the required fields set."""
    values = dict(
        id=uuid4(),
        user_id=user_id or uuid4(),
        language_preference=Language.HINDI,
        city=City.MUMBAI,
        profile_picture_url=None,
        national_id_encrypted=cipher.encrypt(national_id),
        national_id_digest=cipher.digest(national_id),
        license_number="MH1234567890",
        license_expiry=None,
        rc_number="MH01AB1234",
        rc_expiry=None,
        vehicle_type=VehicleType.CAR,
        vehicle_number=None,
        vehicle_model=None,
        vehicle_color=None,
        is_online=False,
        is_verified=False,
        rating=Decimal("5.0"),
        total_rides=0,
        longitude=Decimal("0"),
        latitude=Decimal("0"),
        created_at=datetime.now(timezone.utc),
        updated_at=datetime.now(timezone.utc),
    )
    values.update(overrides)
    profile = DriverProfile(**values)
    profile.completion_percentage = calculate_completion(profile)
    return profile


def make_complete_profile(cipher: FieldCipher, user_id=None, **overrides):
    """DriverProfile with every scored field populated."""
    future = date.today() + timedelta(days=365)
    values = dict(
        profile_picture_url="https://cdn.example.com/p.jpg",
        license_expiry=future,
        rc_expiry=future,
        vehicle_model="Honda City",
        vehicle_color="White",
    )
    values.update(overrides)
    return make_driver_profile(cipher, user_id=user_id, **values)


def registration_payload(**overrides) -> dict:
    """Valid POST /driver/register body (required fields only)."""
    body = {
        "languagePreference": "HINDI",
        "city": "MUMBAI",
        "nationalId": "123456789012",
        "licenseNumber": "MH1234567890",
        "rcNumber": "MH01AB1234",
        "vehicleType": "CAR",
    }
    body.update(overrides)
    return body
