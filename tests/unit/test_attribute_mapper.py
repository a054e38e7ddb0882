"""Tests for directory attribute mapping."""

import pytest

from neo_userinfo.core import UserProfile
from neo_userinfo.mapping import get_attribute, map_attributes, resolve_identity


class TestIdentityResolution:
    """Test cases for identity attribute precedence."""

    def test_uid_wins_over_other_identity_attributes(self):
        """Test uid is used even when sAMAccountName and cn are present."""
        profile = map_attributes({"uid": "jdoe", "sAMAccountName": "DOMAIN-jdoe", "cn": "John Doe"})

        assert profile.sub == "jdoe"
        assert profile.preferred_username == "jdoe"

    def test_sam_account_name_used_without_uid(self):
        """Test sAMAccountName is the fallback when uid is missing."""
        profile = map_attributes({"sAMAccountName": "jdoe", "cn": "John Doe"})

        assert profile.sub == "jdoe"
        assert profile.preferred_username == "jdoe"

    def test_cn_used_as_last_resort(self):
        """Test cn is used when neither uid nor sAMAccountName are present."""
        profile = map_attributes({"cn": "John Doe"})

        assert profile.sub == "John Doe"
        assert profile.preferred_username == "John Doe"

    @pytest.mark.parametrize("attrs", [
        {},
        {"mail": "jdoe@example.com"},
        {"mail": "jdoe@example.com", "displayName": "John Doe", "sn": "Doe", "givenName": "John"},
        {"uid": None, "cn": []},
    ])
    def test_no_identity_attribute_is_not_found(self, attrs):
        """Test records without any identity attribute map to None."""
        assert map_attributes(attrs) is None
        assert resolve_identity(attrs) is None

    def test_empty_string_identity_is_set(self):
        """Test an empty identity value is present, not absent."""
        profile = map_attributes({"uid": "", "cn": "John Doe"})

        assert profile.sub == ""
        assert profile.preferred_username == ""


class TestOptionalAttributes:
    """Test cases for optional profile fields."""

    def test_full_entry_mapping(self, sample_attributes):
        """Test every optional attribute lands in its profile field."""
        profile = map_attributes(sample_attributes)

        assert profile == UserProfile(
            sub="jdoe",
            preferred_username="jdoe",
            email="jdoe@example.com",
            email_verified=False,
            phone_number="+1 555 0100",
            phone_number_verified=False,
            name="John Doe",
            given_name="John",
            family_name="Doe",
            middle_name="Q",
            profile="https://people.example.com/jdoe",
            website="https://www.example.com",
        )

    def test_email_never_verified(self):
        """Test directory emails are never marked verified."""
        profile = map_attributes({"uid": "jdoe", "mail": "jdoe@example.com"})

        assert profile.email == "jdoe@example.com"
        assert profile.email_verified is False

    def test_phone_never_verified(self):
        """Test directory phone numbers are never marked verified."""
        profile = map_attributes({"uid": "jdoe", "telephoneNumber": "+1 555 0100"})

        assert profile.phone_number == "+1 555 0100"
        assert profile.phone_number_verified is False

    def test_absent_attributes_stay_unset(self):
        """Test missing attributes leave fields and verified flags unset."""
        profile = map_attributes({"uid": "jdoe"})

        assert profile.email is None
        assert profile.email_verified is None
        assert profile.phone_number is None
        assert profile.phone_number_verified is None
        assert profile.name is None
        assert profile.given_name is None
        assert profile.family_name is None
        assert profile.middle_name is None
        assert profile.profile is None
        assert profile.website is None

    def test_identity_not_copied_into_name(self):
        """Test cn is not used as display name when it is not the identity."""
        profile = map_attributes({"uid": "jdoe", "cn": "John Doe"})

        assert profile.name is None


class TestGetAttribute:
    """Test cases for single-value attribute access."""

    def test_multi_valued_attribute_uses_first_value(self):
        """Test lists yield their first value."""
        assert get_attribute({"mail": ["a@example.com", "b@example.com"]}, "mail") == "a@example.com"

    def test_empty_value_list_is_absent(self):
        """Test an empty value list counts as unset."""
        assert get_attribute({"mail": []}, "mail") is None

    def test_bytes_value_is_decoded(self):
        """Test raw bytes values are decoded as UTF-8."""
        assert get_attribute({"uid": [b"jdoe"]}, "uid") == "jdoe"

    def test_missing_attribute(self):
        """Test missing attributes return None."""
        assert get_attribute({"uid": "jdoe"}, "mail") is None
