# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Profile normalization strategy interface.

Each social provider supplies a ProfileNormalizer that maps its raw
profile fields onto a NormalizedIdentity. The helpers here cover the
field handling shared by all vendors.
"""

import json
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Optional

from .config import ProviderConfig
from .models import NormalizedIdentity


@dataclass(frozen=True)
class DecodeResult:
    """Outcome of re-decoding a text field.

    Attributes:
        value: Decoded text, or the original text when decoding failed
        error: The decoding failure, None on success
    """
    value: Optional[str]
    error: Optional[UnicodeError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def decode_utf8(value: Optional[str]) -> DecodeResult:
    """Re-decode text from its UTF-8 byte representation.

    A missing value decodes to itself. Text that cannot be encoded, such as
    a lone surrogate smuggled in through a JSON escape, is returned
    unchanged together with the error.
    """
    if value is None:
        return DecodeResult(value=None)
    try:
        return DecodeResult(value=value.encode("utf-8").decode("utf-8"))
    except UnicodeError as e:
        return DecodeResult(value=value, error=e)


def json_property(profile: dict[str, Any], name: str) -> Optional[str]:
    """Read a profile field as text.

    Missing keys and JSON nulls yield None. Strings are returned as is,
    numbers in their decimal form, and nested values as compact JSON.
    """
    value = profile.get(name)
    if value is None:
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


class ProfileNormalizer(ABC):
    """Strategy mapping one vendor's raw profile onto a NormalizedIdentity."""

    @abstractmethod
    def vendor_config(self) -> ProviderConfig:
        """Return the static configuration of the vendor."""
        pass

    @abstractmethod
    def normalize(self, raw_profile: dict[str, Any]) -> NormalizedIdentity:
        """Map a raw vendor profile onto a normalized identity.

        Args:
            raw_profile: Vendor profile, including any injected fields

        Returns:
            NormalizedIdentity with the raw profile stored under the
            vendor's alias

        Raises:
            InvalidProfileError: If the profile lacks a user identifier
        """
        pass
