# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Factory for creating identity providers based on configuration.

This module lets the identity broker build a provider by name, with
settings taken from explicit arguments or, failing that, from the
environment.
"""

from typing import Optional

from .config import ProviderConfig, load_provider_config
from .provider import IdentityProvider
from .vkontakte_provider import VkontakteIdentityProvider


def create_identity_provider(
    provider_type: Optional[str] = None,
    **kwargs
) -> IdentityProvider:
    """Create an identity provider based on type.

    Supported provider types:
    - "vkontakte" (or "vk"): VkontakteIdentityProvider for VK OAuth

    Args:
        provider_type: Type of provider to create (required)
        **kwargs: Provider-specific configuration parameters:
            - config: ProviderConfig to use as is
            - logger: Logger for federation events
            - alias, api_version, default_scope, profile_url, timeout:
              overrides applied on top of the environment configuration

    Returns:
        IdentityProvider instance

    Raises:
        ValueError: If provider_type is missing or unknown

    Examples:
        >>> provider = create_identity_provider("vkontakte")

        >>> provider = create_identity_provider(
        ...     "vk",
        ...     alias="vk-staff",
        ...     api_version="5.131",
        ... )
    """
    if not provider_type:
        raise ValueError(
            "provider_type parameter is required. "
            "Must be one of: vkontakte"
        )

    provider_type = provider_type.lower()

    if provider_type in ("vkontakte", "vk"):
        config: Optional[ProviderConfig] = kwargs.get("config")
        if config is None:
            overrides = {
                key: kwargs[key]
                for key in ("alias", "api_version", "default_scope", "profile_url", "timeout")
                if kwargs.get(key) is not None
            }
            config = load_provider_config().with_updates(**overrides)

        return VkontakteIdentityProvider.from_config(config, logger=kwargs.get("logger"))

    else:
        raise ValueError(
            f"Unknown identity provider type: {provider_type}. "
            f"Supported types: vkontakte"
        )
