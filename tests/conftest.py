"""Global pytest fixtures for objkit."""

from __future__ import annotations

import logging

import pytest


@pytest.fixture
def objkit_debug_logs(caplog: pytest.LogCaptureFixture) -> pytest.LogCaptureFixture:
    """Capture DEBUG records emitted under the ``objkit`` logger namespace."""
    caplog.set_level(logging.DEBUG, logger="objkit")
    return caplog
