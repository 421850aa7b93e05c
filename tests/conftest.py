# tests/conftest.py

"""Shared pytest fixtures for the catalog tests."""

from collections.abc import Generator
from unittest.mock import patch

import pytest

from src.config.settings import Settings


@pytest.fixture(autouse=True)
def no_remote_api() -> Generator[None, None, None]:
    """Blank the remote API base so default source chains stay offline."""
    with patch.object(Settings, "API_BASE", ""):
        yield
