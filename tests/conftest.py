from __future__ import annotations

import logging
from typing import Iterator

import pytest

from block_helpers import config as bh_config


@pytest.fixture(autouse=True)
def _reset_dotenv_state() -> Iterator[None]:
    """Reset shared dotenv state around each test."""

    bh_config._reset_dotenv_state_for_testing()
    yield
    bh_config._reset_dotenv_state_for_testing()


@pytest.fixture
def debug_logs(caplog: pytest.LogCaptureFixture) -> pytest.LogCaptureFixture:
    caplog.set_level(logging.DEBUG, logger="block_helpers")
    return caplog
