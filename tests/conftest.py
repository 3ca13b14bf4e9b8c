"""Shared fixtures for nihil tests."""

from __future__ import annotations

from typing import TYPE_CHECKING
from unittest.mock import patch

import pytest

from nihil.settings import get_settings

if TYPE_CHECKING:
    from collections.abc import Iterator


@pytest.fixture(autouse=True)
def _fresh_settings() -> Iterator[None]:
    """Each test sees settings loaded from a clean environment."""
    get_settings.cache_clear()
    with patch.dict("os.environ", {}, clear=True):
        yield
    get_settings.cache_clear()


@pytest.fixture()
def cycles_disabled() -> Iterator[None]:
    """Turn cycle detection off for the duration of a test."""
    get_settings.cache_clear()
    with patch.dict("os.environ", {"NIHIL_DETECT_CYCLES": "false"}):
        yield
    get_settings.cache_clear()
