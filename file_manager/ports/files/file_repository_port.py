"""
File repository port interface defining the contract for file operations.
"""

from abc import ABC, abstractmethod
from typing import Iterable

from file_manager.entities.byte_stream import ByteStream
from file_manager.entities.entry import Entry


class FileRepositoryPort(ABC):
    """Port interface for file repository operations."""

    @abstractmethod
    def list_entries(self, directory: str) -> list[Entry]:
        """
        List the directories and regular files inside a directory.

        Args:
            directory: Absolute path of the directory to list

        Returns:
            List of Entry entities, unsorted

        Raises:
            FileRepositoryError: If listing fails
        """
        pass

    @abstractmethod
    def open_stream(self, path: str) -> ByteStream:
        """
        Open a file for chunked reading.

        The file is opened eagerly so a missing source fails before anything else
        happens; chunks are read lazily.

        Args:
            path: Absolute path of the file to read

        Returns:
            A ByteStream the caller must close (or exhaust)

        Raises:
            FileRepositoryError: If the file cannot be opened
        """
        pass

    @abstractmethod
    def write_stream(self, path: str, chunks: Iterable[bytes]) -> int:
        """
        Create or truncate a file and write every chunk to it in order.

        Errors raised by ``chunks`` itself propagate unchanged; a failure part way
        leaves the partially written file in place.

        Args:
            path: Absolute path of the destination file
            chunks: Ordered byte chunks

        Returns:
            Number of bytes written

        Raises:
            FileRepositoryError: If the destination cannot be opened or written
        """
        pass

    @abstractmethod
    def create_file(self, path: str) -> None:
        """
        Create an empty file, failing if anything already exists at ``path``.

        Raises:
            FileRepositoryError: If the file exists or the parent is missing
        """
        pass

    @abstractmethod
    def create_directory(self, path: str) -> None:
        """
        Create one directory; the parent must already exist.

        Raises:
            FileRepositoryError: If creation fails
        """
        pass

    @abstractmethod
    def rename(self, source: str, target: str) -> None:
        """
        Rename ``source`` to ``target`` without overwriting an existing target.

        Raises:
            FileRepositoryError: If the source is missing or the target exists
        """
        pass

    @abstractmethod
    def delete_file(self, path: str) -> None:
        """
        Delete a single file. Directories are refused.

        Raises:
            FileRepositoryError: If deletion fails
        """
        pass

    @abstractmethod
    def is_same_file(self, first: str, second: str) -> bool:
        """Return True when both paths exist and point at the same file."""
        pass
