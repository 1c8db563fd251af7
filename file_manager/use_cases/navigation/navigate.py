"""
Use cases for moving the session cursor.
"""

import logging
from typing import Optional

from file_manager.entities.cursor import Cursor
from file_manager.exceptions import BaseAppError, FileRepositoryError
from file_manager.utils.arguments import require_argument


class NavigateUpUseCase:
    """Use case for moving the cursor to its parent directory."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, cursor: Cursor) -> str:
        """
        Move one level up. Stays put at a filesystem root.

        Returns:
            The cursor path after the move
        """
        before = cursor.path
        cursor.up()
        if cursor.path == before:
            self._logger.info(f"Already at filesystem root: {before}")
        else:
            self._logger.info(f"Moved up from {before} to {cursor.path}")
        return cursor.path


class ChangeDirectoryUseCase:
    """Use case for moving the cursor into a directory."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the use case.

        Args:
            logger: Logger instance to use for logging
        """
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, cursor: Cursor, target: Optional[str]) -> str:
        """
        Enter ``target`` (relative to the cursor, or absolute).

        Args:
            cursor: Session cursor to move
            target: Directory argument as typed by the user

        Returns:
            The cursor path after the move

        Raises:
            MissingArgumentError: If no target was given
            FileRepositoryError: If the target is missing or not a directory;
                the cursor is left unchanged
        """
        try:
            target = require_argument(target, "path")
            self._logger.info(f"Changing directory to: {target}")
            cursor.enter(target)
            return cursor.path
        except BaseAppError:
            raise
        except Exception as e:
            self._logger.error(f"Error changing directory: {e}")
            raise FileRepositoryError(f"Failed to change directory to {target}: {str(e)}")
