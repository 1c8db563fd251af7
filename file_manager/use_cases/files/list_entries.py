"""
Use case for listing the entries of the current directory.
"""

import locale
import logging
from typing import Optional

from file_manager.entities.cursor import Cursor
from file_manager.entities.entry import Entry
from file_manager.exceptions import FileRepositoryError
from file_manager.ports.files.file_repository_port import FileRepositoryPort


def _collation_key(entry: Entry) -> tuple[str, str]:
    # locale-aware, case-insensitive first; lowercase wins case-only ties
    return (locale.strxfrm(entry.name.casefold()), entry.name.swapcase())


class ListEntriesUseCase:
    """Use case for listing directories and files in a directory."""

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

    def execute(self, cursor: Cursor) -> list[Entry]:
        """
        List the cursor directory, directories and files interleaved by name.

        Args:
            cursor: Session cursor whose directory is listed

        Returns:
            List of Entry entities sorted by name

        Raises:
            FileRepositoryError: If listing fails
        """
        directory = cursor.path
        try:
            self._logger.info(f"Listing entries in directory: {directory}")
            entries = self._file_repository.list_entries(directory)
            self._logger.info(f"Found {len(entries)} entries")
            return sorted(entries, key=_collation_key)
        except FileRepositoryError:
            raise
        except Exception as e:
            self._logger.error(f"Error listing entries: {e}")
            raise FileRepositoryError(f"Failed to list entries in {directory}: {str(e)}")
