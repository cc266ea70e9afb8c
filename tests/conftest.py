"""
Pytest configuration and shared fixtures.
"""

import os
import tempfile
from unittest.mock import MagicMock

import pytest

from file_browser.config.settings import Settings
from file_browser.container import DependencyContainer
from file_browser.entities.RootContext import RootContext
from file_browser.utils.path_resolver import PathResolver


@pytest.fixture
def temp_directory():
    """
    Create a temporary root directory for testing file operations.

    Layout:
        docs/a.txt   (100 bytes)
        readme.md    (50 bytes)

    Returns:
        Canonical path to the temporary directory
    """
    with tempfile.TemporaryDirectory() as temp_dir:
        docs = os.path.join(temp_dir, "docs")
        os.makedirs(docs)

        with open(os.path.join(docs, "a.txt"), "wb") as f:
            f.write(b"a" * 100)

        with open(os.path.join(temp_dir, "readme.md"), "wb") as f:
            f.write(b"r" * 50)

        yield os.path.realpath(temp_dir)


@pytest.fixture
def root_context(temp_directory):
    """Root context pointing at the temporary directory."""
    return RootContext.from_config(temp_directory)


@pytest.fixture
def path_resolver(root_context):
    """Path resolver confined to the temporary directory."""
    return PathResolver(root_context)


@pytest.fixture
def mock_logger():
    """
    Create a mock logger for testing.

    Returns:
        Mock logger instance
    """
    return MagicMock()


@pytest.fixture
def dependency_container(temp_directory, mock_logger):
    """
    Create a dependency container rooted at the temporary directory.

    Returns:
        DependencyContainer instance with mocked logger
    """
    settings = Settings()
    settings.root_path = temp_directory
    settings.base_dir = temp_directory
    container = DependencyContainer(settings)
    # Replace the logger with our mock
    container._logger = mock_logger
    return container
