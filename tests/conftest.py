"""
Pytest configuration and shared fixtures.
"""

import os
import tempfile
import pytest
from unittest.mock import MagicMock

from openapp.container import DependencyContainer


def _make_executable(path: str) -> None:
    with open(path, "w") as f:
        f.write("#!/bin/sh\nexit 0\n")
    os.chmod(path, 0o755)


@pytest.fixture
def temp_directory():
    """
    Create a temporary directory for testing file operations.

    Returns:
        Path to the temporary directory
    """
    with tempfile.TemporaryDirectory() as temp_dir:
        yield temp_dir


@pytest.fixture
def path_directories(temp_directory):
    """
    Create two directories to use as PATH entries.

    first/  holds "firefox" and "shared"
    second/ holds "shared" and "nautilus"

    Returns:
        Tuple of (first, second) directory paths
    """
    first = os.path.join(temp_directory, "first")
    second = os.path.join(temp_directory, "second")
    os.makedirs(first)
    os.makedirs(second)

    _make_executable(os.path.join(first, "firefox"))
    _make_executable(os.path.join(first, "shared"))
    _make_executable(os.path.join(second, "shared"))
    _make_executable(os.path.join(second, "nautilus"))

    yield first, second


@pytest.fixture
def write_config(temp_directory):
    """
    Write a config file into the temporary directory.

    Returns:
        Function taking the TOML text and returning the config file path
    """

    def _write(text: str, name: str = "oarc.toml") -> str:
        path = os.path.join(temp_directory, name)
        with open(path, "w") as f:
            f.write(text)
        return path

    return _write


@pytest.fixture
def mock_logger():
    """
    Create a mock logger for testing.

    Returns:
        Mock logger instance
    """
    return MagicMock()


@pytest.fixture
def dependency_container(mock_logger, temp_directory):
    """
    Create a Linux dependency container reading a config file that does not exist.

    Returns:
        DependencyContainer instance with mocked logger
    """
    container = DependencyContainer(
        config_path=os.path.join(temp_directory, "missing.toml"), platform="linux"
    )
    # Replace the logger with our mock
    container._logger = mock_logger
    return container
