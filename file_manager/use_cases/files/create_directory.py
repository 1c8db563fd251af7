"""
Use case for creating a directory.
"""

import logging
from typing import Optional

from file_manager.entities.cursor import Cursor
from file_manager.exceptions import BaseAppError, FileRepositoryError
from file_manager.ports.files.file_repository_port import FileRepositoryPort
from file_manager.utils.arguments import require_argument


class CreateDirectoryUseCase:
    """Use case for creating a single directory (non-recursive)."""

    def __init__(
        self,
        file_repository: FileRepositoryPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._file_repository = file_repository
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, cursor: Cursor, name: Optional[str]) -> str:
        try:
            path = cursor.resolve(require_argument(name, "name"))
            self._logger.info(f"Creating directory: {path}")
            self._file_repository.create_directory(path)
            return path
        except BaseAppError:
            raise
        except Exception as e:
            self._logger.error(f"Error creating directory: {e}")
            raise FileRepositoryError(f"Failed to create directory {name}: {str(e)}")
