"""
Configuration settings for the application.
"""

import logging
import os
from typing import Optional

from dotenv import load_dotenv

from file_manager.exceptions import ConfigurationError

# Load environment variables from .env file
_ = load_dotenv()

DEFAULT_CHUNK_SIZE = 64 * 1024
DEFAULT_COMPRESSION_QUALITY = 11
DEFAULT_LOG_LEVEL = "ERROR"
DEFAULT_PROMPT = "> "


class Settings:
    """Application settings loaded from environment variables."""

    def __init__(self):
        self.chunk_size: int = self._get_int_env(
            "FILE_MANAGER_CHUNK_SIZE", DEFAULT_CHUNK_SIZE, minimum=1
        )
        self.compression_quality: int = self._get_int_env(
            "FILE_MANAGER_COMPRESSION_QUALITY",
            DEFAULT_COMPRESSION_QUALITY,
            minimum=0,
            maximum=11,
        )
        self.log_level: int = self._get_log_level_env(
            "FILE_MANAGER_LOG_LEVEL", DEFAULT_LOG_LEVEL
        )
        self.log_file: Optional[str] = os.getenv("FILE_MANAGER_LOG_FILE") or None
        self.prompt: str = self._get_env("FILE_MANAGER_PROMPT", DEFAULT_PROMPT)

    def _get_env(self, key: str, default: str) -> str:
        """Get an environment variable with a default value."""
        return os.getenv(key, default)

    def _get_int_env(
        self,
        key: str,
        default: int,
        minimum: Optional[int] = None,
        maximum: Optional[int] = None,
    ) -> int:
        """Get an integer environment variable, raise error if out of range."""
        raw = os.getenv(key)
        if raw is None or not raw.strip():
            return default
        try:
            value = int(raw.strip())
        except ValueError:
            raise ConfigurationError(f"Environment variable {key} must be an integer")
        if minimum is not None and value < minimum:
            raise ConfigurationError(f"Environment variable {key} must be >= {minimum}")
        if maximum is not None and value > maximum:
            raise ConfigurationError(f"Environment variable {key} must be <= {maximum}")
        return value

    def _get_log_level_env(self, key: str, default: str) -> int:
        """Get a logging level name and convert it to its numeric value."""
        name = self._get_env(key, default).strip().upper()
        level = logging.getLevelName(name)
        if not isinstance(level, int):
            raise ConfigurationError(f"Unknown log level in {key}: {name}")
        return level
