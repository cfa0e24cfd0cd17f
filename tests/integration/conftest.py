"""Shared pytest fixtures for integration tests."""

from __future__ import annotations

import os
from collections.abc import Iterator
from unittest.mock import patch

import pytest


@pytest.fixture(autouse=True)
def _isolated_env() -> Iterator[None]:
    """Run without RESUME_* overrides from the developer's shell."""
    env = {k: v for k, v in os.environ.items() if not k.startswith("RESUME_")}
    with patch.dict(os.environ, env, clear=True):
        yield
