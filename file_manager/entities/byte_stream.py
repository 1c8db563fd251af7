"""
Chunked byte stream over an open binary file handle.
"""

from typing import BinaryIO, Iterator, Optional

from file_manager.exceptions import StreamError


class ByteStream:
    """
    Lazy, ordered, finite sequence of byte chunks read from one file.

    The stream owns the handle: it is closed when the data is exhausted, when a
    read fails, or when ``close()`` is called (also via ``with``).
    """

    def __init__(self, handle: BinaryIO, chunk_size: int, path: Optional[str] = None):
        """
        Initialize the stream.

        Args:
            handle: Binary file object opened for reading
            chunk_size: Maximum number of bytes per chunk
            path: Path the handle was opened from (used in error messages)
        """
        if chunk_size <= 0:
            raise ValueError("chunk_size must be positive")
        self._handle = handle
        self._chunk_size = chunk_size
        self.path = path or getattr(handle, "name", "<stream>")
        self.bytes_read = 0

    @property
    def closed(self) -> bool:
        return self._handle.closed

    def close(self) -> None:
        if not self._handle.closed:
            self._handle.close()

    def __iter__(self) -> Iterator[bytes]:
        return self

    def __next__(self) -> bytes:
        if self._handle.closed:
            raise StopIteration
        try:
            chunk = self._handle.read(self._chunk_size)
        except OSError as e:
            self.close()
            raise StreamError(f"Read failed on {self.path}: {e}") from e
        if not chunk:
            self.close()
            raise StopIteration
        self.bytes_read += len(chunk)
        return chunk

    def __enter__(self) -> "ByteStream":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:  # type: ignore[no-untyped-def]
        self.close()

    def __repr__(self) -> str:
        return f"ByteStream(path='{self.path}', bytes_read={self.bytes_read})"
