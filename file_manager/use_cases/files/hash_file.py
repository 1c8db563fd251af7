"""
Use case for computing a file's SHA-256 digest.
"""

import hashlib
import logging
from typing import Optional

from file_manager.entities.cursor import Cursor
from file_manager.exceptions import BaseAppError, FileRepositoryError
from file_manager.ports.files.file_repository_port import FileRepositoryPort
from file_manager.utils.arguments import require_argument


class HashFileUseCase:
    """Use case for hashing a file chunk by chunk."""

    def __init__(
        self,
        file_repository: FileRepositoryPort,
        algorithm: str = "sha256",
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            file_repository: Repository for file operations
            algorithm: hashlib algorithm name
            logger: Logger instance to use for logging
        """
        self._file_repository = file_repository
        self._algorithm = algorithm
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, cursor: Cursor, source: Optional[str]) -> str:
        """
        Hash the whole file.

        Returns:
            Lowercase hexadecimal digest; nothing is returned if the read fails

        Raises:
            FileRepositoryError: If the file cannot be opened or read
        """
        try:
            path = cursor.resolve(require_argument(source, "path"))
            self._logger.info(f"Hashing file with {self._algorithm}: {path}")
            digest = hashlib.new(self._algorithm)
            with self._file_repository.open_stream(path) as stream:
                for chunk in stream:
                    digest.update(chunk)
            return digest.hexdigest()
        except BaseAppError:
            raise
        except Exception as e:
            self._logger.error(f"Error hashing file: {e}")
            raise FileRepositoryError(f"Failed to hash {source}: {str(e)}")
