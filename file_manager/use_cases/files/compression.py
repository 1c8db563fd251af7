"""
Use cases for compressing and decompressing files through a streaming codec.
"""

import logging
from abc import ABC, abstractmethod
from typing import Callable, Iterable, Iterator, Optional

from file_manager.entities.cursor import Cursor
from file_manager.exceptions import BaseAppError, FileRepositoryError, SameFileError
from file_manager.ports.compression.codec_port import CodecPort
from file_manager.ports.files.file_repository_port import FileRepositoryPort
from file_manager.utils.arguments import require_argument


class _CodecFileUseCase(ABC):
    """Shared single-pass pipeline: source stream -> codec -> destination file."""

    _action = ""

    def __init__(
        self,
        file_repository: FileRepositoryPort,
        codec: CodecPort,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            file_repository: Repository for file operations
            codec: Streaming codec applied to the chunks
            logger: Logger instance to use for logging
        """
        self._file_repository = file_repository
        self._codec = codec
        self._logger = logger or logging.getLogger(__name__)

    @abstractmethod
    def _transform(self) -> Callable[[Iterable[bytes]], Iterator[bytes]]:
        """Return the codec direction applied to the source chunks."""
        pass

    def execute(
        self, cursor: Cursor, source: Optional[str], destination: Optional[str]
    ) -> str:
        """
        Run ``source`` through the codec into the ``destination`` file.

        Args:
            cursor: Session cursor used to resolve both arguments
            source: Input file
            destination: Output file path (its directory must exist)

        Returns:
            Absolute path of the written file

        Raises:
            FileRepositoryError: If reading, writing or the codec fails
        """
        try:
            source_path = cursor.resolve(require_argument(source, "source"))
            target_path = cursor.resolve(require_argument(destination, "destination"))
            if self._file_repository.is_same_file(source_path, target_path):
                raise SameFileError(
                    f"Source and destination are the same file: {source_path}"
                )

            self._logger.info(
                f"Running {self._codec.name} {self._action}: {source_path} -> {target_path}"
            )
            with self._file_repository.open_stream(source_path) as stream:
                written = self._file_repository.write_stream(
                    target_path, self._transform()(stream)
                )
            self._logger.info(
                f"Read {stream.bytes_read} bytes, wrote {written} bytes to {target_path}"
            )
            return target_path
        except BaseAppError:
            raise
        except Exception as e:
            self._logger.error(f"Error during {self._action}: {e}")
            raise FileRepositoryError(f"Failed to {self._action} {source}: {str(e)}")


class CompressFileUseCase(_CodecFileUseCase):
    """Use case for compressing a file."""

    _action = "compress"

    def _transform(self) -> Callable[[Iterable[bytes]], Iterator[bytes]]:
        return self._codec.compress


class DecompressFileUseCase(_CodecFileUseCase):
    """Use case for decompressing a file produced by CompressFileUseCase."""

    _action = "decompress"

    def _transform(self) -> Callable[[Iterable[bytes]], Iterator[bytes]]:
        return self._codec.decompress
