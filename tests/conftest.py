"""
Pytest configuration and shared fixtures.
"""

import io
import os
import tempfile
from unittest.mock import MagicMock

import pytest
from rich.console import Console

from file_manager.config.settings import Settings
from file_manager.container import DependencyContainer
from file_manager.entities.cursor import Cursor
from file_manager.entities.session import Session
from file_manager.ui.console_view import ConsoleView


@pytest.fixture
def temp_directory():
    """
    Create a temporary directory for testing file operations.

    Returns:
        Path to the temporary directory
    """
    with tempfile.TemporaryDirectory() as temp_dir:
        # Create some test files
        test_file1 = os.path.join(temp_dir, "test1.txt")
        test_file2 = os.path.join(temp_dir, "test2.py")

        with open(test_file1, "w") as f:
            f.write("This is a test file.")

        with open(test_file2, "w") as f:
            f.write("print('Hello, world!')")

        # Create a subdirectory with a file
        subdir = os.path.join(temp_dir, "subdir")
        os.makedirs(subdir)

        test_file3 = os.path.join(subdir, "test3.md")
        with open(test_file3, "w") as f:
            f.write("# Test Markdown\n\nThis is a test.")

        yield temp_dir


@pytest.fixture
def mock_logger():
    """
    Create a mock logger for testing.

    Returns:
        Mock logger instance
    """
    return MagicMock()


@pytest.fixture
def settings(monkeypatch):
    """Settings built from a clean environment (all defaults)."""
    for key in list(os.environ):
        if key.startswith("FILE_MANAGER_"):
            monkeypatch.delenv(key, raising=False)
    return Settings()


@pytest.fixture
def cursor(temp_directory):
    return Cursor(temp_directory)


@pytest.fixture
def session(temp_directory):
    """Session positioned in the temporary directory."""
    return Session(username="tester", cursor=Cursor(temp_directory))


@pytest.fixture
def recording_console():
    """rich Console writing plain text into memory."""
    return Console(file=io.StringIO(), width=120, color_system=None, highlight=False)


@pytest.fixture
def console_view(recording_console):
    return ConsoleView(recording_console)


@pytest.fixture
def dependency_container(settings, recording_console, mock_logger):
    """
    Create a dependency container wired to the recording console.

    Returns:
        DependencyContainer instance with mocked logger
    """
    container = DependencyContainer(settings=settings, console=recording_console)
    # Replace the logger with our mock
    container._logger = mock_logger
    return container


@pytest.fixture
def read_output(recording_console):
    """Callable returning the text written so far to the recording console."""

    def _read() -> str:
        return recording_console.file.getvalue()

    return _read
