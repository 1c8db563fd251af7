"""
Use case for printing a file's contents as it is read.
"""

import codecs
import logging
from typing import Callable, Optional

from file_manager.entities.cursor import Cursor
from file_manager.exceptions import BaseAppError, FileRepositoryError
from file_manager.ports.files.file_repository_port import FileRepositoryPort
from file_manager.utils.arguments import require_argument


class ReadFileUseCase:
    """Use case for streaming a text file to an output callback chunk by chunk."""

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
        self, cursor: Cursor, source: Optional[str], write: Callable[[str], None]
    ) -> int:
        """
        Decode the file as UTF-8 and hand each decoded piece to ``write``.

        Output already written stays written if the read fails part way.

        Args:
            cursor: Session cursor used to resolve ``source``
            source: File argument as typed by the user
            write: Callback receiving decoded text in arrival order

        Returns:
            Number of bytes read

        Raises:
            FileRepositoryError: If the file cannot be opened or read
        """
        try:
            path = cursor.resolve(require_argument(source, "path"))
            self._logger.info(f"Reading file: {path}")
            # invalid sequences become U+FFFD; split multi-byte chars are reassembled
            decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
            with self._file_repository.open_stream(path) as stream:
                for chunk in stream:
                    text = decoder.decode(chunk)
                    if text:
                        write(text)
                tail = decoder.decode(b"", final=True)
                if tail:
                    write(tail)
                self._logger.info(f"Read {stream.bytes_read} bytes from {path}")
                return stream.bytes_read
        except BaseAppError:
            raise
        except Exception as e:
            self._logger.error(f"Error reading file: {e}")
            raise FileRepositoryError(f"Failed to read {source}: {str(e)}")
