"""
Tests for the BrotliCodec adapter.
"""

import os

import brotli
import pytest

from file_manager.adapters.compression.brotli_codec import BrotliCodec
from file_manager.exceptions import CompressionError


def _chunked(data: bytes, size: int):
    return [data[i : i + size] for i in range(0, len(data), size)]


class TestBrotliCodec:
    """Test cases for the BrotliCodec."""

    def test_compressed_output_is_standard_brotli(self, mock_logger):
        data = b"hello brotli " * 1000
        codec = BrotliCodec(quality=5, logger=mock_logger)

        encoded = b"".join(codec.compress(_chunked(data, 100)))

        assert brotli.decompress(encoded) == data
        assert len(encoded) < len(data)

    def test_decompresses_across_arbitrary_chunk_boundaries(self, mock_logger):
        data = os.urandom(5000) + b"z" * 5000
        encoded = brotli.compress(data)
        codec = BrotliCodec(logger=mock_logger)

        decoded = b"".join(codec.decompress(_chunked(encoded, 7)))

        assert decoded == data

    def test_empty_input(self, mock_logger):
        codec = BrotliCodec(quality=1, logger=mock_logger)

        encoded = b"".join(codec.compress([]))

        assert encoded
        assert b"".join(codec.decompress([encoded])) == b""

    def test_invalid_data_raises(self, mock_logger):
        codec = BrotliCodec(logger=mock_logger)

        with pytest.raises(CompressionError):
            b"".join(codec.decompress([b"definitely not brotli data" * 3]))

    def test_truncated_stream_raises(self, mock_logger):
        encoded = brotli.compress(os.urandom(4096))
        codec = BrotliCodec(logger=mock_logger)

        with pytest.raises(CompressionError, match="ended before it was complete"):
            b"".join(codec.decompress([encoded[: len(encoded) // 2]]))

    def test_empty_encoded_input_raises(self, mock_logger):
        codec = BrotliCodec(logger=mock_logger)

        with pytest.raises(CompressionError):
            b"".join(codec.decompress([]))

    def test_upstream_errors_propagate_unchanged(self, mock_logger):
        codec = BrotliCodec(logger=mock_logger)

        def chunks():
            yield b"abc"
            raise OSError("read failed")

        with pytest.raises(OSError, match="read failed"):
            b"".join(codec.compress(chunks()))

    @pytest.mark.parametrize("quality", [-1, 12])
    def test_invalid_quality(self, quality):
        with pytest.raises(ValueError):
            BrotliCodec(quality=quality)

    def test_name(self):
        assert BrotliCodec().name == "brotli"
