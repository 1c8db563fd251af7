"""
Use case for moving a file into a directory (copy, then delete the original).
"""

import logging
from typing import Optional

from file_manager.entities.cursor import Cursor
from file_manager.exceptions import (
    BaseAppError,
    FileRepositoryError,
    MoveIncompleteError,
)
from file_manager.ports.files.file_repository_port import FileRepositoryPort
from file_manager.use_cases.files.copy_file import CopyFileUseCase


class MoveFileUseCase:
    """
    Two-phase move.

    Phase one is a full copy. The source is deleted only after the copy finished;
    if that delete fails the file exists in both places and the move is reported
    as failed. Nothing is rolled back.
    """

    def __init__(
        self,
        file_repository: FileRepositoryPort,
        copy_file_uc: CopyFileUseCase,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            file_repository: Repository used to delete the source
            copy_file_uc: Use case performing the copy phase
            logger: Logger instance to use for logging
        """
        self._file_repository = file_repository
        self._copy_file_uc = copy_file_uc
        self._logger = logger or logging.getLogger(__name__)

    def execute(
        self, cursor: Cursor, source: Optional[str], destination: Optional[str]
    ) -> str:
        """
        Move ``source`` into the ``destination`` directory.

        Returns:
            Absolute path of the moved file

        Raises:
            FileRepositoryError: If the copy fails (source untouched)
            MoveIncompleteError: If the copy succeeded but the source could not be deleted
        """
        try:
            self._logger.info(f"Moving {source} to {destination}")
            target_path = self._copy_file_uc.execute(cursor, source, destination)
        except BaseAppError:
            raise
        except Exception as e:
            self._logger.error(f"Error moving file: {e}")
            raise FileRepositoryError(f"Failed to move {source}: {str(e)}")

        # copy phase complete; only now is the original removed
        source_path = cursor.resolve(source)  # type: ignore[arg-type]
        try:
            self._file_repository.delete_file(source_path)
        except Exception as e:
            self._logger.error(
                f"Copied {source_path} to {target_path} but could not delete the original: {e}"
            )
            raise MoveIncompleteError(
                f"File copied to {target_path} but {source_path} could not be removed: {str(e)}"
            ) from e
        self._logger.info(f"Moved {source_path} to {target_path}")
        return target_path
