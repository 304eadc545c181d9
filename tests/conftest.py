"""Shared fixtures for unit and feature tests."""

from __future__ import annotations

import pytest

from publink.linear import LinearConfig
from tests.helpers.linear_transport import (
    TEST_ENDPOINT,
    TEST_TEAM_ID,
    TEST_TOKEN,
    FakeLinear,
)


@pytest.fixture
def linear_config() -> LinearConfig:
    """Provide a complete Linear configuration pointing at the fake endpoint."""
    return LinearConfig(
        api_token=TEST_TOKEN,
        team_id=TEST_TEAM_ID,
        endpoint=TEST_ENDPOINT,
        timeout_s=2.0,
    )


@pytest.fixture
def fake_linear() -> FakeLinear:
    """Provide a fake Linear endpoint answering 200 with a created issue."""
    return FakeLinear()
