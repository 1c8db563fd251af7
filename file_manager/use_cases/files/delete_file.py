"""
Use case for deleting a file.
"""

import logging
from typing import Optional

from file_manager.entities.cursor import Cursor
from file_manager.exceptions import BaseAppError, FileRepositoryError
from file_manager.ports.files.file_repository_port import FileRepositoryPort
from file_manager.utils.arguments import require_argument


class DeleteFileUseCase:
    """Use case for deleting one file. Directories are not removed."""

    def __init__(
        self,
        file_repository: FileRepositoryPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._file_repository = file_repository
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, cursor: Cursor, target: Optional[str]) -> str:
        try:
            path = cursor.resolve(require_argument(target, "path"))
            self._logger.info(f"Deleting file: {path}")
            self._file_repository.delete_file(path)
            return path
        except BaseAppError:
            raise
        except Exception as e:
            self._logger.error(f"Error deleting file: {e}")
            raise FileRepositoryError(f"Failed to delete {target}: {str(e)}")
