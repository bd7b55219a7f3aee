"""
Pytest configuration and shared fixtures for the test suite.

Keeps the process-wide metadata cache and the CI environment out of the
tests so results never depend on the machine running them.
"""

import subprocess
from unittest.mock import MagicMock

import pytest
from loguru import logger

from release_identity.metadata import reset_metadata_cache


@pytest.fixture(autouse=True)
def fresh_metadata_cache():
    """Start and finish every test with an empty metadata cache."""
    reset_metadata_cache()
    yield
    reset_metadata_cache()


@pytest.fixture(autouse=True)
def drop_log_sinks():
    """Remove sinks added by setup_logging so they never outlive captured streams."""
    yield
    logger.remove()


@pytest.fixture
def tag_build_env():
    """Environment of a build triggered by pushing a tag."""
    return {"GITHUB_REF": "refs/tags/v1.2.0", "GITHUB_REF_NAME": "v1.2.0"}


@pytest.fixture
def completed_process():
    """Factory for successful subprocess.run results."""
    def _make(stdout=""):
        result = MagicMock()
        result.stdout = stdout
        result.returncode = 0
        return result
    return _make


@pytest.fixture
def git_failure():
    """Factory for the error subprocess.run raises when git exits non-zero."""
    def _make(stderr="fatal: No names found, cannot describe anything."):
        return subprocess.CalledProcessError(128, ["git"], output="", stderr=stderr)
    return _make
