# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Identity models produced by federation adapters.

This module defines the provider-agnostic identity record that adapters
hand to the identity broker once a federated login succeeds.
"""

from dataclasses import dataclass, field
from typing import Any, Optional

from .config import ProviderConfig
from .exceptions import InvalidProfileError

FEDERATED_ACCESS_TOKEN = "FEDERATED_ACCESS_TOKEN"


@dataclass
class NormalizedIdentity:
    """Represents a user authenticated by an external identity provider.

    Attributes:
        id: Provider-issued user identifier (never empty)
        username: Preferred username
        name: Display name
        email: Email address, None when the provider did not share it
        provider_alias: Alias of the provider that produced this identity
        provider_config: Configuration of the provider that produced this identity
        raw_profiles: Raw provider profiles keyed by provider alias, kept for
            attribute mappers
        context_data: Auxiliary data for token-dependent flows
    """
    id: str
    username: Optional[str] = None
    name: Optional[str] = None
    email: Optional[str] = None
    provider_alias: Optional[str] = None
    provider_config: Optional[ProviderConfig] = field(default=None, repr=False, compare=False)
    raw_profiles: dict[str, dict[str, Any]] = field(default_factory=dict)
    context_data: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.id:
            raise InvalidProfileError("Identity requires a non-empty user id")

    def store_user_profile(self, alias: str, profile: dict[str, Any]) -> None:
        """Keep the raw provider profile for later attribute mapping.

        Args:
            alias: Provider alias the profile belongs to
            profile: Profile exactly as received (plus injected fields)
        """
        self.raw_profiles[alias] = profile

    def get_user_profile(self, alias: str) -> Optional[dict[str, Any]]:
        """Return the raw profile stored for a provider alias, if any."""
        return self.raw_profiles.get(alias)

    @property
    def access_token(self) -> Optional[str]:
        """Access token attached by the adapter, if any."""
        return self.context_data.get(FEDERATED_ACCESS_TOKEN)

    def to_dict(self) -> dict:
        """Convert identity to dictionary for serialization.

        The access token is left out; it stays in context_data only.

        Returns:
            Dictionary representation of the identity
        """
        return {
            "id": self.id,
            "username": self.username,
            "name": self.name,
            "email": self.email,
            "provider_alias": self.provider_alias,
            "raw_profiles": self.raw_profiles,
        }
