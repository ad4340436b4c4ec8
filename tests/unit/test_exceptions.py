"""Tests for unique-violation translation."""
from sqlalchemy.exc import IntegrityError

from ridehail.core.exceptions import (
    DuplicateFieldError,
    NotFoundError,
    UnauthenticatedError,
    duplicate_field_from_integrity_error,
)


def _integrity_error(constraint: str) -> IntegrityError:
    orig = Exception(f'duplicate key value violates unique constraint "{constraint}"')
    return IntegrityError("INSERT ...", {}, orig)


class TestDuplicateFieldTranslation:

    def test_known_constraint_maps_to_field(self):
        error = duplicate_field_from_integrity_error(
            _integrity_error("uq_driver_profiles_license_number")
        )
        assert isinstance(error, DuplicateFieldError)
        assert error.field == "licenseNumber"
        assert error.status_code == 400

    def test_email_constraint(self):
        error = duplicate_field_from_integrity_error(_integrity_error("uq_users_email"))
        assert error.message == "Email already exists"

    def test_unknown_constraint_returns_none(self):
        assert duplicate_field_from_integrity_error(_integrity_error("fk_something")) is None


class TestStatusCodes:

    def test_defaults(self):
        assert UnauthenticatedError("x").status_code == 401
        assert NotFoundError("x").status_code == 404
