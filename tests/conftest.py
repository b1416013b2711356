"""Pytest fixtures for testing."""

from typing import Any

import pytest

from restencoder import RecordingSink


@pytest.fixture
def recorder() -> RecordingSink:
    """Fresh in-memory sink for each test."""
    return RecordingSink()


@pytest.fixture
def sample_body() -> dict[str, Any]:
    """Sample JSON body for testing."""
    return {"msg": "Hello, world!"}
