# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""VK (VKontakte) OAuth identity provider.

This module provides federated login via VK. VK returns the user's email
alongside the access token instead of in the profile, and wraps profiles
in a ``{"response": [...]}`` envelope; both quirks are handled here.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, ValidationError

from .config import ProviderConfig
from .exceptions import (
    FederationError,
    FederationErrorKind,
    InvalidProfileError,
    MissingTokenError,
    ProfileFetchError,
)
from .logger import Logger, create_logger
from .models import FEDERATED_ACCESS_TOKEN, NormalizedIdentity
from .normalizer import ProfileNormalizer, decode_utf8, json_property
from .oauth2_client import OAuth2Client
from .provider import IdentityProvider

_logger = create_logger(logger_type="stdout", level="INFO", name="social_federation.vkontakte")

PROFILE_CONTENT_TYPE = "application/json; charset=utf-8;"


class VkontakteProfileEnvelope(BaseModel):
    """Body of a ``users.get`` call.

    Only the outer shape is validated here; the first profile is checked
    when it is unwrapped, so trailing entries never fail a login. Profiles
    stay plain mappings so the raw payload reaches attribute mappers
    untouched.
    """

    model_config = ConfigDict(extra="allow")

    response: Optional[list[Any]] = None
    error: Optional[Any] = None

    def api_error(self) -> Optional[str]:
        """Describe the VK error object, if the body carries one."""
        if not isinstance(self.error, dict):
            return None
        return f"API error {self.error.get('error_code')}: {self.error.get('error_msg')}"


class VkontakteProfileNormalizer(ProfileNormalizer):
    """Maps VK ``users.get`` profiles onto NormalizedIdentity."""

    def __init__(self, config: Optional[ProviderConfig] = None, logger: Optional[Logger] = None):
        self.config = config or ProviderConfig()
        self.logger = logger or _logger

    def vendor_config(self) -> ProviderConfig:
        return self.config

    def _decode_name(self, profile: dict[str, Any], field: str) -> Optional[str]:
        result = decode_utf8(json_property(profile, field))
        if not result.ok:
            self.logger.error(
                f"Failed to decode {field} as UTF-8",
                provider=self.config.alias,
                field=field,
                kind=FederationErrorKind.ENCODING_FIXUP_FAILED.value,
                error=str(result.error),
            )
        return result.value

    def normalize(self, raw_profile: dict[str, Any]) -> NormalizedIdentity:
        """Map a VK profile onto a NormalizedIdentity.

        The username falls back from ``screen_name`` to the email and then
        to the user id. The display name is the first name, followed by a
        space and the last name whenever VK sent a last name, even an
        empty one.

        Args:
            raw_profile: VK profile with the email already injected

        Returns:
            NormalizedIdentity keeping raw_profile under the configured alias

        Raises:
            InvalidProfileError: If the profile has no ``id``
        """
        user_id = json_property(raw_profile, "id")
        if not user_id:
            raise InvalidProfileError(f"Profile from {self.config.alias} has no user id")

        email = json_property(raw_profile, "email")

        username = json_property(raw_profile, "screen_name")
        if username is None:
            username = email if email is not None else user_id

        first_name = self._decode_name(raw_profile, "first_name")
        last_name = self._decode_name(raw_profile, "last_name")

        if first_name is None and last_name is None:
            name = None
        elif last_name is None:
            name = first_name
        else:
            name = (first_name or "") + " " + last_name

        identity = NormalizedIdentity(
            id=user_id,
            username=username,
            name=name,
            email=email,
            provider_alias=self.config.alias,
            provider_config=self.config,
        )
        identity.store_user_profile(self.config.alias, raw_profile)
        return identity


class VkontakteIdentityProvider(IdentityProvider):
    """VK OAuth identity provider.

    Composes the generic OAuth2Client with the VK profile normalizer.
    Instances hold no per-login state and can serve concurrent logins.

    Attributes:
        config: VK endpoints and request settings
        client: OAuth2 capability used for token parsing and HTTP calls
        normalizer: Strategy mapping VK profiles to identities
    """

    def __init__(
        self,
        config: Optional[ProviderConfig] = None,
        client: Optional[OAuth2Client] = None,
        normalizer: Optional[ProfileNormalizer] = None,
        logger: Optional[Logger] = None,
    ):
        """Initialize the VK identity provider.

        Args:
            config: Provider configuration (defaults to the public VK endpoints)
            client: OAuth2 client (built from config when omitted)
            normalizer: Profile normalizer (VkontakteProfileNormalizer when omitted)
            logger: Logger for federation events
        """
        self.config = config or ProviderConfig()
        self.logger = logger or _logger
        self.client = client or OAuth2Client(
            access_token_parameter=self.config.access_token_parameter,
            timeout=self.config.timeout,
        )
        self.normalizer = normalizer or VkontakteProfileNormalizer(self.config, self.logger)

    @classmethod
    def from_config(cls, config: ProviderConfig, logger: Optional[Logger] = None) -> "VkontakteIdentityProvider":
        """Create a VkontakteIdentityProvider from a ProviderConfig."""
        return cls(config=config, logger=logger)

    def default_scopes(self) -> str:
        return self.config.default_scope

    def profile_endpoint_for_validation(self) -> str:
        return self.config.profile_url

    def federate(self, token_response_body: str) -> NormalizedIdentity:
        """Turn a VK token endpoint response into a normalized identity.

        Args:
            token_response_body: Raw body of VK's access_token response

        Returns:
            NormalizedIdentity with the access token in its context data

        Raises:
            MissingTokenError: If the response carries no access token
            ProfileFetchError: If the profile cannot be fetched or unwrapped
            InvalidProfileError: If the profile has no user id
        """
        access_token = self.client.extract_access_token(token_response_body)
        # VK sends the email with the token, not with the profile
        email = self.client.extract_param(token_response_body, self.config.email_parameter)

        if not access_token:
            self.logger.error("No access token available in token response", provider=self.config.alias)
            raise MissingTokenError(f"No access token available in {self.config.alias} token response")

        return self._federate_access_token(access_token, email)

    def exchange_external_token(self, subject_token: str, email: Optional[str] = None) -> NormalizedIdentity:
        """Federate a VK access token issued to another client.

        Args:
            subject_token: VK access token obtained outside this broker
            email: Email to attach, VK only reveals it at token issuance

        Returns:
            NormalizedIdentity for the token's owner
        """
        if not subject_token:
            raise MissingTokenError("No subject token supplied for external token exchange")

        self.logger.debug("Validating external token against profile endpoint", provider=self.config.alias)
        return self._federate_access_token(subject_token, email)

    def fetch_profile(self, access_token: str) -> dict[str, Any]:
        """Fetch and unwrap the VK profile of the token's owner.

        Args:
            access_token: VK access token

        Returns:
            First profile of the ``response`` envelope, as a new dict

        Raises:
            ProfileFetchError: On transport or parse failure, a VK API error,
                or an envelope without a profile
        """
        payload = self.client.get_json(
            self.config.profile_url,
            params={
                "fields": ",".join(self.config.profile_fields),
                "access_token": access_token,
                "v": self.config.api_version,
            },
            headers={"content-type": PROFILE_CONTENT_TYPE},
        )

        try:
            envelope = VkontakteProfileEnvelope.model_validate(payload)
        except ValidationError as e:
            raise ProfileFetchError(
                f"Could not obtain user profile from {self.config.alias}: unexpected response shape"
            ) from e

        if envelope.response is None:
            reason = envelope.api_error() or "response envelope missing"
            raise ProfileFetchError(f"Could not obtain user profile from {self.config.alias}: {reason}")
        if not envelope.response:
            raise ProfileFetchError(
                f"Could not obtain user profile from {self.config.alias}: response envelope is empty"
            )

        profile = envelope.response[0]
        if not isinstance(profile, dict):
            raise ProfileFetchError(
                f"Could not obtain user profile from {self.config.alias}: first profile is not an object"
            )
        return dict(profile)

    def _federate_access_token(self, access_token: str, email: Optional[str]) -> NormalizedIdentity:
        try:
            profile = self.fetch_profile(access_token)
            profile["email"] = email
            identity = self.normalizer.normalize(profile)
        except FederationError as e:
            self.logger.error(
                "Could not obtain user profile",
                provider=self.config.alias,
                kind=e.kind.value,
                error=str(e),
            )
            raise

        identity.context_data[FEDERATED_ACCESS_TOKEN] = access_token

        self.logger.info("Federated identity established", provider=self.config.alias, user_id=identity.id)
        return identity
