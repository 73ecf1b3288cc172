# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Generic OAuth2 client capability shared by social providers.

This module implements the vendor-neutral pieces of a federated login:
reading named parameters out of a token endpoint response and calling a
user-info endpoint with the resulting access token.
"""

import json
from typing import Any, Optional

import httpx

from .exceptions import ProfileFetchError, TokenResponseError


def extract_param(response_body: Optional[str], param_name: str) -> Optional[str]:
    """Extract a named parameter from a token endpoint response.

    JSON bodies are searched by top-level key; anything else is read as
    URL-encoded ``key=value`` pairs. Values are returned verbatim, without
    percent-decoding or trimming, except that a blank value counts as
    absent in both forms. Any key present in the body can be extracted,
    not only the documented token fields.

    Args:
        response_body: Raw token endpoint response body
        param_name: Parameter to look up

    Returns:
        The parameter value, or None if the body does not carry it

    Raises:
        TokenResponseError: If the body looks like JSON but cannot be parsed
    """
    if not response_body:
        return None

    if response_body.lstrip().startswith("{"):
        try:
            payload = json.loads(response_body)
        except ValueError as e:
            raise TokenResponseError(f"Could not extract [{param_name}] from token response: {e}") from e

        value = payload.get(param_name)
        # Numbers, objects and nulls are not string parameters
        if isinstance(value, str):
            return _non_blank(value)
        return None

    for pair in response_body.split("&"):
        key, sep, value = pair.partition("=")
        if sep and key == param_name:
            return _non_blank(value)
    return None


def _non_blank(value: str) -> Optional[str]:
    """Blank values count as absent; others are kept verbatim."""
    return value if value.strip() else None


class OAuth2Client:
    """Vendor-neutral OAuth2 operations used during federation.

    Attributes:
        access_token_parameter: Token response key holding the access token
        timeout: HTTP timeout in seconds for user-info requests
    """

    def __init__(self, access_token_parameter: str = "access_token", timeout: float = 10.0):
        """Initialize the OAuth2 client.

        Args:
            access_token_parameter: Token response key holding the access token
            timeout: HTTP timeout in seconds for user-info requests
        """
        self.access_token_parameter = access_token_parameter
        self.timeout = timeout

    def extract_param(self, response_body: Optional[str], param_name: str) -> Optional[str]:
        """Extract any named parameter from a token response."""
        return extract_param(response_body, param_name)

    def extract_access_token(self, response_body: Optional[str]) -> Optional[str]:
        """Extract the access token using the configured parameter name."""
        return extract_param(response_body, self.access_token_parameter)

    def get_json(
        self,
        url: str,
        params: Optional[dict[str, str]] = None,
        headers: Optional[dict[str, str]] = None,
    ) -> Any:
        """Issue a GET request and parse the JSON response body.

        Args:
            url: Endpoint URL
            params: Query string parameters
            headers: Request headers

        Returns:
            Parsed JSON document

        Raises:
            ProfileFetchError: On transport failure, HTTP error status, or
                a body that is not valid JSON
        """
        try:
            response = httpx.get(url, params=params, headers=headers, timeout=self.timeout)
            response.raise_for_status()
            return response.json()

        except httpx.HTTPStatusError as e:
            raise ProfileFetchError(
                f"User info endpoint returned HTTP {e.response.status_code}"
            ) from e
        except httpx.HTTPError as e:
            raise ProfileFetchError(f"User info endpoint unavailable: {e}") from e
        except ValueError as e:
            raise ProfileFetchError(f"User info response is not valid JSON: {e}") from e
