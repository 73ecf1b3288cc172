# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Social identity federation adapter.

Turns the token response of a social OAuth2 provider into a normalized
identity record for an identity broker. Ships a VK (VKontakte) provider.
"""

__version__ = "0.1.0"

from .config import ProviderConfig, load_provider_config
from .exceptions import (
    FederationError,
    FederationErrorKind,
    InvalidProfileError,
    MissingTokenError,
    ProfileFetchError,
    TokenResponseError,
)
from .factory import create_identity_provider
from .logger import Logger, SilentLogger, StdoutLogger, create_logger
from .models import FEDERATED_ACCESS_TOKEN, NormalizedIdentity
from .normalizer import DecodeResult, ProfileNormalizer, decode_utf8
from .oauth2_client import OAuth2Client, extract_param
from .provider import IdentityProvider
from .vkontakte_provider import (
    VkontakteIdentityProvider,
    VkontakteProfileEnvelope,
    VkontakteProfileNormalizer,
)

__all__ = [
    # Version
    "__version__",
    # Models
    "NormalizedIdentity",
    "FEDERATED_ACCESS_TOKEN",
    # Configuration
    "ProviderConfig",
    "load_provider_config",
    # Providers
    "IdentityProvider",
    "VkontakteIdentityProvider",
    "VkontakteProfileEnvelope",
    # OAuth2
    "OAuth2Client",
    "extract_param",
    # Normalization
    "ProfileNormalizer",
    "VkontakteProfileNormalizer",
    "DecodeResult",
    "decode_utf8",
    # Factory
    "create_identity_provider",
    # Logging
    "Logger",
    "StdoutLogger",
    "SilentLogger",
    "create_logger",
    # Exceptions
    "FederationError",
    "FederationErrorKind",
    "MissingTokenError",
    "TokenResponseError",
    "ProfileFetchError",
    "InvalidProfileError",
]
