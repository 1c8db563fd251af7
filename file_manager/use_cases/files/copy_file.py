"""
Use case for copying a file into a directory.
"""

import logging
import os
from typing import Optional

from file_manager.entities.cursor import Cursor
from file_manager.exceptions import BaseAppError, FileRepositoryError, SameFileError
from file_manager.ports.files.file_repository_port import FileRepositoryPort
from file_manager.utils.arguments import require_argument


class CopyFileUseCase:
    """Use case for streaming a file into ``<destination directory>/<source name>``."""

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
        self, cursor: Cursor, source: Optional[str], destination: Optional[str]
    ) -> str:
        """
        Copy ``source`` into the ``destination`` directory, keeping its base name.

        An existing file at the target is overwritten. The source is opened first,
        so a missing source never creates the target. If the transfer fails part
        way the partially written target is left as is.

        Args:
            cursor: Session cursor used to resolve both arguments
            source: File to copy
            destination: Existing directory to copy into

        Returns:
            Absolute path of the written copy

        Raises:
            FileRepositoryError: If reading or writing fails, or if the target is
                the source itself
        """
        try:
            source_path = cursor.resolve(require_argument(source, "source"))
            target_dir = cursor.resolve(require_argument(destination, "destination"))
            target_path = os.path.join(target_dir, os.path.basename(source_path))
            if self._file_repository.is_same_file(source_path, target_path):
                raise SameFileError(
                    f"Source and destination are the same file: {source_path}"
                )

            self._logger.info(f"Copying {source_path} to {target_path}")
            with self._file_repository.open_stream(source_path) as stream:
                written = self._file_repository.write_stream(target_path, stream)
            self._logger.info(f"Copied {written} bytes to {target_path}")
            return target_path
        except BaseAppError:
            raise
        except Exception as e:
            self._logger.error(f"Error copying file: {e}")
            raise FileRepositoryError(f"Failed to copy {source}: {str(e)}")
