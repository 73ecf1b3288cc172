# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Tests for identity provider factory."""

import os
from unittest.mock import patch

import pytest

from social_federation import (
    ProviderConfig,
    SilentLogger,
    VkontakteIdentityProvider,
    create_identity_provider,
)


class TestCreateIdentityProvider:
    """Tests for create_identity_provider factory function."""

    def test_create_vkontakte_provider(self):
        """Test creating a VK provider with defaults."""
        with patch.dict(os.environ, {}, clear=True):
            provider = create_identity_provider("vkontakte")

        assert isinstance(provider, VkontakteIdentityProvider)
        assert provider.config == ProviderConfig()

    def test_vk_alias_and_case_insensitive(self):
        """Test provider type matching accepts "vk" in any case."""
        assert isinstance(create_identity_provider("VK"), VkontakteIdentityProvider)

    def test_overrides(self):
        """Test keyword overrides are applied to the configuration."""
        provider = create_identity_provider("vkontakte", alias="vk-staff", api_version="5.131", timeout=3.0)

        assert provider.config.alias == "vk-staff"
        assert provider.config.api_version == "5.131"
        assert provider.client.timeout == 3.0

    def test_environment_configuration(self):
        """Test environment settings are used when no override is given."""
        with patch.dict(os.environ, {"VKONTAKTE_ALIAS": "vk-env"}):
            provider = create_identity_provider("vkontakte")

        assert provider.config.alias == "vk-env"

    def test_explicit_config_and_logger(self):
        """Test an explicit config and logger are used as is."""
        config = ProviderConfig(alias="vk-explicit")
        logger = SilentLogger()

        provider = create_identity_provider("vkontakte", config=config, logger=logger)

        assert provider.config is config
        assert provider.logger is logger

    def test_missing_provider_type(self):
        """Test a provider type is required."""
        with pytest.raises(ValueError, match="provider_type parameter is required"):
            create_identity_provider()

    def test_unknown_provider_type(self):
        """Test unknown provider types raise ValueError."""
        with pytest.raises(ValueError, match="Unknown identity provider type"):
            create_identity_provider("myspace")
