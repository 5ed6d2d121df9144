"""Shared test fixtures.

Keeps every test independent of the developer's shell and .env: policy
overrides are cleared before each test.
"""

import os
from typing import Iterator

import pytest

from infrastructure.config import ENV_PREFIX


@pytest.fixture(autouse=True)
def isolated_policy_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Remove GOAL_PROJECTION_* variables for the duration of a test."""
    for name in list(os.environ):
        if name.startswith(ENV_PREFIX):
            monkeypatch.delenv(name)
    yield
