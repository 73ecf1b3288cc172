# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Shared fixtures for social_federation tests."""

import sys
from pathlib import Path
from typing import Optional

import httpx
import pytest

# Make the package importable without installing it
_repo_root = Path(__file__).resolve().parents[1]
if str(_repo_root) not in sys.path:
    sys.path.insert(0, str(_repo_root))

from social_federation import ProviderConfig, SilentLogger, VkontakteIdentityProvider  # noqa: E402

PROFILE_URL = "https://api.vk.com/method/users.get"


def make_response(status_code: int = 200, json=None, content: Optional[bytes] = None) -> httpx.Response:
    """Build an httpx.Response bound to a users.get request."""
    request = httpx.Request("GET", PROFILE_URL)
    if json is not None:
        return httpx.Response(status_code, json=json, request=request)
    return httpx.Response(status_code, content=content or b"", request=request)


@pytest.fixture
def silent_logger():
    """Logger that records messages in memory."""
    return SilentLogger(level="DEBUG", name="test-federation")


@pytest.fixture
def provider(silent_logger):
    """VK provider with default configuration and an in-memory logger."""
    return VkontakteIdentityProvider(config=ProviderConfig(), logger=silent_logger)
