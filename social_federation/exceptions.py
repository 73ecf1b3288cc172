# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Exceptions raised during a federation attempt."""

from enum import Enum


class FederationErrorKind(str, Enum):
    """Categories of federation failures."""

    MISSING_TOKEN = "MissingToken"
    PROFILE_FETCH_FAILED = "ProfileFetchFailed"
    INVALID_PROFILE = "InvalidProfile"
    # Logged only, never raised
    ENCODING_FIXUP_FAILED = "EncodingFixupFailed"


class FederationError(Exception):
    """Base exception for errors that terminate a federation attempt."""

    def __init__(self, message: str, kind: FederationErrorKind):
        """Initialize FederationError with its failure category.

        Args:
            message: Error message
            kind: Failure category reported to the broker
        """
        super().__init__(message)
        self.kind = kind


class MissingTokenError(FederationError):
    """Raised when the token response carries no access token."""

    def __init__(self, message: str):
        super().__init__(message, FederationErrorKind.MISSING_TOKEN)


class TokenResponseError(MissingTokenError):
    """Raised when a JSON token response cannot be parsed at all."""
    pass


class ProfileFetchError(FederationError):
    """Raised when the user profile cannot be fetched or unwrapped."""

    def __init__(self, message: str):
        super().__init__(message, FederationErrorKind.PROFILE_FETCH_FAILED)


class InvalidProfileError(FederationError):
    """Raised when a fetched profile lacks the mandatory user identifier."""

    def __init__(self, message: str):
        super().__init__(message, FederationErrorKind.INVALID_PROFILE)
