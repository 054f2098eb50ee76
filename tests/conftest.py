# tests/conftest.py
"""Shared test setup for project."""

from collections.abc import Generator

import pytest

import native_compile.capabilities as mod_caps
import native_compile.logs as mod_logs
from tests.utils import DEFAULT_TEST_LOG_LEVEL


# ----------------------------------------------------------------------
# Fixtures
# ----------------------------------------------------------------------


@pytest.fixture(autouse=True)
def reset_logger_level() -> Generator[None, None, None]:
    """Reset logger level to DEFAULT_TEST_LOG_LEVEL before and after each test.

    The app logger is a module-level singleton, so a test that changes its
    level (e.g. through the log_level goal option) must not leak into the next.
    """
    logger = mod_logs.getAppLogger()
    logger.setLevel(DEFAULT_TEST_LOG_LEVEL)
    yield
    logger.setLevel(DEFAULT_TEST_LOG_LEVEL)


@pytest.fixture(autouse=True)
def clear_capability_cache() -> Generator[None, None, None]:
    """Forget toolchains probed by earlier tests."""
    mod_caps.clear_capability_cache()
    yield
    mod_caps.clear_capability_cache()
