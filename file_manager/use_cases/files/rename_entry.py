"""
Use case for renaming a file or directory in place.
"""

import logging
import os
from typing import Optional

from file_manager.entities.cursor import Cursor
from file_manager.exceptions import BaseAppError, FileRepositoryError
from file_manager.ports.files.file_repository_port import FileRepositoryPort
from file_manager.utils.arguments import require_argument


class RenameEntryUseCase:
    """Use case for renaming an entry within its own parent directory."""

    def __init__(
        self,
        file_repository: FileRepositoryPort,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            file_repository: Repository for file operations
            logger: Logger instance to use for logging
        """
        self._file_repository = file_repository
        self._logger = logger or logging.getLogger(__name__)

    def execute(
        self, cursor: Cursor, source: Optional[str], new_name: Optional[str]
    ) -> str:
        """
        Rename ``source`` to ``new_name``.

        The new name is joined to the parent directory of the resolved source, not
        to the cursor.

        Args:
            cursor: Session cursor used to resolve ``source``
            source: Entry to rename
            new_name: New name inside the same parent

        Returns:
            Absolute path of the renamed entry

        Raises:
            FileRepositoryError: If the source is missing or the target exists
        """
        try:
            old_path = cursor.resolve(require_argument(source, "path"))
            new_name = require_argument(new_name, "new name")
            new_path = os.path.normpath(
                os.path.join(os.path.dirname(old_path), new_name)
            )
            self._logger.info(f"Renaming {old_path} to {new_path}")
            self._file_repository.rename(old_path, new_path)
            return new_path
        except BaseAppError:
            raise
        except Exception as e:
            self._logger.error(f"Error renaming entry: {e}")
            raise FileRepositoryError(f"Failed to rename {source}: {str(e)}")
