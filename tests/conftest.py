"""Global pytest configuration."""

from __future__ import annotations

import logging

import pytest

from relpath.logging import set_global_log_level


@pytest.fixture(autouse=True)
def _restore_log_level():
    """Keep the package log level at INFO between tests."""
    yield
    set_global_log_level(logging.INFO)
