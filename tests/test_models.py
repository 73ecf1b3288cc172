# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Tests for identity models."""

import pytest

from social_federation import FEDERATED_ACCESS_TOKEN, InvalidProfileError, NormalizedIdentity, ProviderConfig


class TestNormalizedIdentity:
    """Tests for NormalizedIdentity."""

    def test_identity_creation(self):
        """Test creating an identity with optional fields left out."""
        identity = NormalizedIdentity(id="42")

        assert identity.id == "42"
        assert identity.email is None
        assert identity.raw_profiles == {}
        assert identity.context_data == {}
        assert identity.provider_config is None

    def test_empty_id_rejected(self):
        """Test an identity cannot be created without an id."""
        with pytest.raises(InvalidProfileError):
            NormalizedIdentity(id="")

    def test_store_and_get_user_profile(self):
        """Test raw profiles are kept per provider alias."""
        identity = NormalizedIdentity(id="42")
        identity.store_user_profile("vkontakte", {"id": 42})

        assert identity.get_user_profile("vkontakte") == {"id": 42}
        assert identity.get_user_profile("github") is None

    def test_provider_config_not_compared(self):
        """Test identities from differently configured providers still compare equal."""
        first = NormalizedIdentity(id="42", provider_config=ProviderConfig())
        second = NormalizedIdentity(id="42", provider_config=ProviderConfig(api_version="5.131"))

        assert first == second
        assert "provider_config" not in first.to_dict()

    def test_access_token_property(self):
        """Test the access token is read from context data."""
        identity = NormalizedIdentity(id="42")
        assert identity.access_token is None

        identity.context_data[FEDERATED_ACCESS_TOKEN] = "T"
        assert identity.access_token == "T"

    def test_to_dict(self):
        """Test serialization leaves out context data."""
        identity = NormalizedIdentity(
            id="42",
            username="joe",
            name="Jo E",
            email="a@b.com",
            provider_alias="vkontakte",
            raw_profiles={"vkontakte": {"id": "42"}},
            context_data={FEDERATED_ACCESS_TOKEN: "T"},
        )

        assert identity.to_dict() == {
            "id": "42",
            "username": "joe",
            "name": "Jo E",
            "email": "a@b.com",
            "provider_alias": "vkontakte",
            "raw_profiles": {"vkontakte": {"id": "42"}},
        }
