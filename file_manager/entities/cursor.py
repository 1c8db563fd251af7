"""
Cursor domain entity: the session's current working directory.
"""

import os

from file_manager.exceptions import NotADirectoryPathError, NotFoundError


class Cursor:
    """
    Holds one absolute, normalized directory path and resolves relative paths against it.
    """

    def __init__(self, start_directory: str):
        """
        Initialize the cursor.

        Args:
            start_directory: Directory the cursor starts in

        Raises:
            NotFoundError: If the directory does not exist
            NotADirectoryPathError: If the path is not a directory
        """
        self._path = self._validate_directory(
            os.path.normpath(os.path.abspath(start_directory))
        )

    @property
    def path(self) -> str:
        """Current absolute directory."""
        return self._path

    def resolve(self, argument: str) -> str:
        """
        Resolve a path argument against the current directory.

        Absolute arguments pass through (normalized). Never touches the filesystem.
        """
        return os.path.normpath(os.path.join(self._path, argument))

    def up(self) -> None:
        """Move to the parent directory; a no-op at a filesystem root."""
        parent = os.path.dirname(self._path)
        if parent != self._path:
            self._path = parent

    def enter(self, target: str) -> None:
        """
        Move into ``target`` if it resolves to an existing directory.

        Raises:
            NotFoundError: If the target does not exist
            NotADirectoryPathError: If the target is not a directory
        """
        self._path = self._validate_directory(self.resolve(target))

    @staticmethod
    def _validate_directory(path: str) -> str:
        if not os.path.exists(path):
            raise NotFoundError(f"Directory does not exist: {path}")
        if not os.path.isdir(path):
            raise NotADirectoryPathError(f"Path is not a directory: {path}")
        return path

    def __str__(self) -> str:
        return self._path

    def __repr__(self) -> str:
        return f"Cursor(path='{self._path}')"
