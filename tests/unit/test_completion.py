"""Tests for the profile completion score."""
from types import SimpleNamespace

from ridehail.services.driver_profile import (
    COMPLETION_FIELDS,
    calculate_completion,
    can_go_online,
    missing_optional_fields,
)
from tests.api.conftest import make_complete_profile, make_driver_profile

ALL_ATTRIBUTES = [f.attribute for f in COMPLETION_FIELDS]


def _profile(**values):
    base = {attr: None for attr in ALL_ATTRIBUTES}
    base.update(values)
    return SimpleNamespace(**base)


class TestWeights:

    def test_required_weights_sum_to_70(self):
        assert sum(f.weight for f in COMPLETION_FIELDS if f.required) == 70

    def test_optional_weights_sum_to_30(self):
        assert sum(f.weight for f in COMPLETION_FIELDS if not f.required) == 30

    def test_eleven_scored_fields(self):
        assert len(COMPLETION_FIELDS) == 11


class TestCalculateCompletion:

    def test_empty_profile_scores_zero(self):
        assert calculate_completion(_profile()) == 0

    def test_required_only_scores_70(self, cipher):
        assert calculate_completion(make_driver_profile(cipher)) == 70

    def test_all_fields_score_100(self, cipher):
        assert calculate_completion(make_complete_profile(cipher)) == 100

    def test_single_field_weights(self):
        assert calculate_completion(_profile(national_id_encrypted="abc:def")) == 15
        assert calculate_completion(_profile(profile_picture_url="https://x.io/p.png")) == 10
        assert calculate_completion(_profile(vehicle_color="Red")) == 5

    def test_blank_string_counts_as_unset(self):
        assert calculate_completion(_profile(vehicle_model="   ")) == 0

    def test_stored_percentage_is_ignored(self, cipher):
        profile = make_driver_profile(cipher)
        profile.completion_percentage = 100
        assert calculate_completion(profile) == 70


class TestMissingFields:

    def test_required_only_lists_every_optional_field(self, cipher):
        missing = missing_optional_fields(make_driver_profile(cipher))
        assert [(m.field, m.weight, m.label) for m in missing] == [
            ("profilePictureUrl", 10, "Profile Picture"),
            ("licenseExpiry", 5, "License Expiry Date"),
            ("rcExpiry", 5, "RC Expiry Date"),
            ("vehicleModel", 5, "Vehicle Model"),
            ("vehicleColor", 5, "Vehicle Color"),
        ]

    def test_complete_profile_has_nothing_missing(self, cipher):
        assert missing_optional_fields(make_complete_profile(cipher)) == []

    def test_required_fields_never_listed(self):
        fields = {m.field for m in missing_optional_fields(_profile())}
        assert "nationalId" not in fields
        assert len(fields) == 5


class TestCanGoOnline:

    def test_requires_threshold_and_verification(self):
        assert can_go_online(70, True) is True
        assert can_go_online(100, True) is True
        assert can_go_online(69, True) is False
        assert can_go_online(100, False) is False
