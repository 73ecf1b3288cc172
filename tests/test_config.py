# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Tests for provider configuration."""

import dataclasses
import os
from unittest.mock import patch

import pytest

from social_federation import ProviderConfig, load_provider_config
from social_federation.config import EnvConfigProvider


class TestProviderConfig:
    """Tests for ProviderConfig."""

    def test_defaults(self):
        """Test defaults point at the public VK API."""
        config = ProviderConfig()

        assert config.alias == "vkontakte"
        assert config.authorization_url == "https://oauth.vk.com/authorize"
        assert config.token_url == "https://oauth.vk.com/access_token"
        assert config.profile_url == "https://api.vk.com/method/users.get"
        assert config.default_scope == "email"
        assert config.api_version == "5.78"
        assert config.profile_fields == ("id", "screen_name", "first_name", "last_name")

    def test_immutable(self):
        """Test configuration cannot be modified after construction."""
        config = ProviderConfig()

        with pytest.raises(dataclasses.FrozenInstanceError):
            config.alias = "other"

    def test_with_updates(self):
        """Test with_updates returns a modified copy."""
        config = ProviderConfig()

        updated = config.with_updates(api_version="5.131")

        assert updated.api_version == "5.131"
        assert config.api_version == "5.78"


class TestEnvConfigProvider:
    """Tests for EnvConfigProvider."""

    def test_get(self):
        provider = EnvConfigProvider({"KEY": "value", "EMPTY": ""})

        assert provider.get("KEY") == "value"
        assert provider.get("EMPTY", "fallback") == "fallback"
        assert provider.get("MISSING", "fallback") == "fallback"

    def test_get_float(self):
        provider = EnvConfigProvider({"GOOD": "2.5", "BAD": "soon"})

        assert provider.get_float("GOOD") == 2.5
        assert provider.get_float("BAD", 1.0) == 1.0
        assert provider.get_float("MISSING", 3.0) == 3.0


class TestLoadProviderConfig:
    """Tests for load_provider_config."""

    def test_defaults_without_environment(self):
        """Test an empty environment yields the defaults."""
        assert load_provider_config({}) == ProviderConfig()

    def test_reads_environment(self):
        """Test settings are taken from environment variables."""
        config = load_provider_config({
            "VKONTAKTE_ALIAS": "vk-staff",
            "VKONTAKTE_API_VERSION": "5.131",
            "VKONTAKTE_DEFAULT_SCOPE": "email,offline",
            "VKONTAKTE_PROFILE_URL": "https://vk.example.com/method/users.get",
            "FEDERATION_HTTP_TIMEOUT": "2.5",
        })

        assert config.alias == "vk-staff"
        assert config.api_version == "5.131"
        assert config.default_scope == "email,offline"
        assert config.profile_url == "https://vk.example.com/method/users.get"
        assert config.timeout == 2.5

    @pytest.mark.parametrize("timeout", ["0", "-1", "never"])
    def test_invalid_timeout_uses_default(self, timeout):
        """Test unusable timeouts fall back to the default."""
        assert load_provider_config({"FEDERATION_HTTP_TIMEOUT": timeout}).timeout == 10.0

    def test_uses_os_environ_by_default(self):
        """Test os.environ is read when no mapping is passed."""
        with patch.dict(os.environ, {"VKONTAKTE_API_VERSION": "5.199"}):
            assert load_provider_config().api_version == "5.199"
