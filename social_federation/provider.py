# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Abstract identity provider interface for federated login.

This module defines the contract that every social identity provider
implements, so that the identity broker can turn a provider's token
response into a normalized identity without knowing the vendor's API.
"""

from abc import ABC, abstractmethod
from typing import Optional

from .models import NormalizedIdentity


class IdentityProvider(ABC):
    """Abstract base class for federated identity providers."""

    @abstractmethod
    def federate(self, token_response_body: str) -> NormalizedIdentity:
        """Turn a token endpoint response into a normalized identity.

        Args:
            token_response_body: Raw body returned by the provider's token endpoint

        Returns:
            Normalized identity for the authenticated user

        Raises:
            MissingTokenError: If the response carries no access token
            ProfileFetchError: If the profile cannot be fetched or unwrapped
            InvalidProfileError: If the profile lacks a user identifier
        """
        pass

    @abstractmethod
    def exchange_external_token(self, subject_token: str, email: Optional[str] = None) -> NormalizedIdentity:
        """Federate an access token that was issued to another client.

        The token is validated by using it against the provider's profile
        endpoint; a token the provider rejects fails the exchange.

        Args:
            subject_token: Access token obtained outside this broker
            email: Email to attach when the caller already knows it

        Returns:
            Normalized identity for the token's owner

        Raises:
            MissingTokenError: If subject_token is empty
            ProfileFetchError: If the provider rejects the token
            InvalidProfileError: If the profile lacks a user identifier
        """
        pass

    @abstractmethod
    def profile_endpoint_for_validation(self) -> str:
        """Return the URL used to validate externally issued tokens."""
        pass

    @abstractmethod
    def default_scopes(self) -> str:
        """Return the OAuth scope requested when none is configured."""
        pass
