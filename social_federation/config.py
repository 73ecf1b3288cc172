# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Provider configuration for the VK federation adapter."""

import os
from dataclasses import dataclass, replace
from typing import Any, Dict, Optional

AUTH_URL = "https://oauth.vk.com/authorize"
TOKEN_URL = "https://oauth.vk.com/access_token"
PROFILE_URL = "https://api.vk.com/method/users.get"
DEFAULT_SCOPE = "email"
DEFAULT_API_VERSION = "5.78"
DEFAULT_ALIAS = "vkontakte"
DEFAULT_TIMEOUT = 10.0


@dataclass(frozen=True)
class ProviderConfig:
    """Static, provider-specific settings.

    Instances are immutable and may be shared by concurrent federation
    attempts.

    Attributes:
        alias: Short name identifying the provider to the broker
        authorization_url: Browser redirect target (configured only)
        token_url: Token endpoint whose response body the adapter consumes
        profile_url: User-info endpoint
        default_scope: OAuth scope requested when none is configured
        api_version: Value of the ``v`` query parameter
        profile_fields: Profile fields requested from the user-info endpoint
        access_token_parameter: Token response key holding the access token
        email_parameter: Token response key holding the user's email
        timeout: HTTP timeout in seconds for the profile request
    """
    alias: str = DEFAULT_ALIAS
    authorization_url: str = AUTH_URL
    token_url: str = TOKEN_URL
    profile_url: str = PROFILE_URL
    default_scope: str = DEFAULT_SCOPE
    api_version: str = DEFAULT_API_VERSION
    profile_fields: tuple[str, ...] = ("id", "screen_name", "first_name", "last_name")
    access_token_parameter: str = "access_token"
    email_parameter: str = "email"
    timeout: float = DEFAULT_TIMEOUT

    def with_updates(self, **updates: Any) -> "ProviderConfig":
        """Return a copy of this config with the given fields replaced."""
        return replace(self, **updates)


class EnvConfigProvider:
    """Configuration provider that reads from environment variables."""

    def __init__(self, environ: Optional[Dict[str, str]] = None):
        self._environ = environ if environ is not None else os.environ

    def get(self, key: str, default: Any = None) -> Any:
        return self._environ.get(key) or default

    def get_float(self, key: str, default: float = 0.0) -> float:
        value = self._environ.get(key)
        if value is None:
            return default
        try:
            return float(value)
        except ValueError:
            return default


def load_provider_config(environ: Optional[Dict[str, str]] = None) -> ProviderConfig:
    """Build a ProviderConfig from environment variables.

    Recognized variables: VKONTAKTE_ALIAS, VKONTAKTE_API_VERSION,
    VKONTAKTE_DEFAULT_SCOPE, VKONTAKTE_PROFILE_URL and
    FEDERATION_HTTP_TIMEOUT. Unset variables keep their defaults.

    Args:
        environ: Mapping to read instead of os.environ

    Returns:
        ProviderConfig instance

    Example:
        >>> config = load_provider_config({"VKONTAKTE_API_VERSION": "5.131"})
        >>> config.api_version
        '5.131'
    """
    env = EnvConfigProvider(environ)
    timeout = env.get_float("FEDERATION_HTTP_TIMEOUT", DEFAULT_TIMEOUT)
    if timeout <= 0:
        timeout = DEFAULT_TIMEOUT

    return ProviderConfig(
        alias=env.get("VKONTAKTE_ALIAS", DEFAULT_ALIAS),
        profile_url=env.get("VKONTAKTE_PROFILE_URL", PROFILE_URL),
        default_scope=env.get("VKONTAKTE_DEFAULT_SCOPE", DEFAULT_SCOPE),
        api_version=env.get("VKONTAKTE_API_VERSION", DEFAULT_API_VERSION),
        timeout=timeout,
    )
