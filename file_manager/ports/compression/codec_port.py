"""
Codec port interface for streaming compression.
"""

from abc import ABC, abstractmethod
from typing import Iterable, Iterator


class CodecPort(ABC):
    """Port interface for a streaming compressor/decompressor pair."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Short algorithm name used in logs."""
        pass

    @abstractmethod
    def compress(self, chunks: Iterable[bytes]) -> Iterator[bytes]:
        """
        Encode a chunk sequence lazily.

        Args:
            chunks: Raw byte chunks in order

        Returns:
            Iterator over encoded chunks

        Raises:
            CompressionError: If the encoder fails
        """
        pass

    @abstractmethod
    def decompress(self, chunks: Iterable[bytes]) -> Iterator[bytes]:
        """
        Decode a chunk sequence lazily.

        Args:
            chunks: Encoded byte chunks in order

        Returns:
            Iterator over decoded chunks

        Raises:
            CompressionError: If the input is not valid or is truncated
        """
        pass
