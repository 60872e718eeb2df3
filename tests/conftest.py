"""Shared test fixtures and configuration."""

import tempfile
from pathlib import Path
from unittest.mock import MagicMock

import pytest


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def sample_log_line():
    """Latest commit line for a regular commit."""
    return "2024-03-01T12:30:45+01:00 1111111111111111111111111111111111111111 2222222222222222222222222222222222222222"


@pytest.fixture
def sample_merge_log_line():
    """Latest commit line for a merge commit."""
    return (
        "2024-03-02T08:00:00+00:00 3333333333333333333333333333333333333333 "
        "1111111111111111111111111111111111111111 4444444444444444444444444444444444444444"
    )


@pytest.fixture
def mock_git_commands(mocker):
    """Mock subprocess.run for git commands."""
    mock_run = mocker.patch("subprocess.run")
    return mock_run


@pytest.fixture
def git_result():
    """Factory for successful subprocess.run results."""

    def _make(stdout: str) -> MagicMock:
        result = MagicMock()
        result.stdout = stdout
        result.returncode = 0
        return result

    return _make
