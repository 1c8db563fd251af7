"""
Local file system adapter implementation for file operations.
"""

import logging
import os
from typing import Iterable, NoReturn

from typing_extensions import override

from file_manager.entities.byte_stream import ByteStream
from file_manager.entities.entry import DIRECTORY, FILE, Entry
from file_manager.exceptions import (
    AlreadyExistsError,
    FileRepositoryError,
    IsADirectoryPathError,
    NotADirectoryPathError,
    NotFoundError,
    PermissionDeniedError,
    StreamError,
)
from file_manager.ports.files.file_repository_port import FileRepositoryPort


class LocalFileSystemAdapter(FileRepositoryPort):
    """Local file system implementation of the file repository port."""

    def __init__(self, chunk_size: int = 64 * 1024, logger: logging.Logger | None = None):
        """
        Initialize the adapter.

        Args:
            chunk_size: Number of bytes read per chunk when streaming
            logger: Logger instance to use for logging. If None, a default logger will be created.
        """
        self._chunk_size = chunk_size
        self._logger: logging.Logger = logger or logging.getLogger(__name__)

    def _raise_translated(self, error: OSError, action: str, path: str) -> NoReturn:
        """
        Re-raise an OSError as the matching FileRepositoryError subclass.

        Args:
            error: Original error from the operating system
            action: Short verb phrase for the message ("open", "create", ...)
            path: Path involved in the failure
        """
        message = f"Failed to {action} {path}: {error.strerror or error}"
        if isinstance(error, FileNotFoundError):
            raise NotFoundError(message) from error
        if isinstance(error, FileExistsError):
            raise AlreadyExistsError(message) from error
        if isinstance(error, NotADirectoryError):
            raise NotADirectoryPathError(message) from error
        if isinstance(error, IsADirectoryError):
            raise IsADirectoryPathError(message) from error
        if isinstance(error, PermissionError):
            raise PermissionDeniedError(message) from error
        raise FileRepositoryError(message) from error

    @override
    def list_entries(self, directory: str) -> list[Entry]:
        """
        List directories and regular files of a directory.

        Symlinks and special files are skipped.

        Raises:
            FileRepositoryError: If listing fails
        """
        entries: list[Entry] = []
        try:
            with os.scandir(directory) as it:
                for item in it:
                    if item.is_dir(follow_symlinks=False):
                        entries.append(Entry(item.name, DIRECTORY))
                    elif item.is_file(follow_symlinks=False):
                        entries.append(Entry(item.name, FILE))
        except OSError as e:
            self._raise_translated(e, "list", directory)
        return entries

    @override
    def open_stream(self, path: str) -> ByteStream:
        try:
            handle = open(path, "rb")
        except OSError as e:
            self._raise_translated(e, "open", path)
        return ByteStream(handle, self._chunk_size, path)

    @override
    def write_stream(self, path: str, chunks: Iterable[bytes]) -> int:
        try:
            handle = open(path, "wb")
        except OSError as e:
            self._raise_translated(e, "create", path)

        written = 0
        with handle:
            for chunk in chunks:
                try:
                    handle.write(chunk)
                except OSError as e:
                    raise StreamError(f"Write failed on {path}: {e}") from e
                written += len(chunk)
        self._logger.debug(f"Wrote {written} bytes to {path}")
        return written

    @override
    def create_file(self, path: str) -> None:
        try:
            with open(path, "xb"):
                pass
        except OSError as e:
            self._raise_translated(e, "create", path)

    @override
    def create_directory(self, path: str) -> None:
        try:
            os.mkdir(path)
        except OSError as e:
            self._raise_translated(e, "create directory", path)

    @override
    def rename(self, source: str, target: str) -> None:
        if not os.path.lexists(source):
            raise NotFoundError(f"Source does not exist: {source}")
        if os.path.lexists(target):
            raise AlreadyExistsError(f"Target already exists: {target}")
        try:
            os.rename(source, target)
        except OSError as e:
            self._raise_translated(e, "rename", source)

    @override
    def delete_file(self, path: str) -> None:
        if os.path.isdir(path) and not os.path.islink(path):
            raise IsADirectoryPathError(f"Path is a directory: {path}")
        try:
            os.remove(path)
        except OSError as e:
            self._raise_translated(e, "delete", path)

    @override
    def is_same_file(self, first: str, second: str) -> bool:
        try:
            return os.path.samefile(first, second)
        except OSError:
            return False
