"""
Brotli codec adapter implementation for streaming compression.
"""

import logging
from typing import Iterable, Iterator, Optional

import brotli
from typing_extensions import override

from file_manager.exceptions import CompressionError
from file_manager.ports.compression.codec_port import CodecPort


class BrotliCodec(CodecPort):
    """Brotli implementation of the codec port using incremental (de)compressor objects."""

    def __init__(self, quality: int = 11, logger: Optional[logging.Logger] = None):
        """
        Initialize the codec.

        Args:
            quality: Brotli quality level, 0 (fastest) to 11 (densest)
            logger: Logger instance to use for logging
        """
        if not 0 <= quality <= 11:
            raise ValueError("Brotli quality must be between 0 and 11")
        self._quality = quality
        self._logger = logger or logging.getLogger(__name__)

    @property
    @override
    def name(self) -> str:
        return "brotli"

    @override
    def compress(self, chunks: Iterable[bytes]) -> Iterator[bytes]:
        compressor = brotli.Compressor(quality=self._quality)
        try:
            for chunk in chunks:
                out = compressor.process(chunk)
                if out:
                    yield out
            tail = compressor.finish()
        except brotli.error as e:
            raise CompressionError(f"Brotli encoder failed: {e}") from e
        if tail:
            yield tail

    @override
    def decompress(self, chunks: Iterable[bytes]) -> Iterator[bytes]:
        decompressor = brotli.Decompressor()
        try:
            for chunk in chunks:
                out = decompressor.process(chunk)
                if out:
                    yield out
        except brotli.error as e:
            raise CompressionError(f"Invalid brotli data: {e}") from e
        if not decompressor.is_finished():
            raise CompressionError("Brotli stream ended before it was complete")
