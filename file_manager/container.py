"""
Dependency injection container for managing application dependencies.
"""

import logging
from typing import Any, Optional

from rich.console import Console

from file_manager.adapters.compression.brotli_codec import BrotliCodec
from file_manager.adapters.files.local_fs_adapter import LocalFileSystemAdapter
from file_manager.config.settings import Settings
from file_manager.ports.commands.command_handler_port import CommandHandlerPort
from file_manager.ports.compression.codec_port import CodecPort
from file_manager.ports.files.file_repository_port import FileRepositoryPort
from file_manager.ui.console_view import ConsoleView
from file_manager.use_cases.commands.dispatcher import CommandDispatcher
from file_manager.use_cases.files.compression import (
    CompressFileUseCase,
    DecompressFileUseCase,
)
from file_manager.use_cases.files.copy_file import CopyFileUseCase
from file_manager.use_cases.files.create_directory import CreateDirectoryUseCase
from file_manager.use_cases.files.create_file import CreateFileUseCase
from file_manager.use_cases.files.delete_file import DeleteFileUseCase
from file_manager.use_cases.files.hash_file import HashFileUseCase
from file_manager.use_cases.files.list_entries import ListEntriesUseCase
from file_manager.use_cases.files.move_file import MoveFileUseCase
from file_manager.use_cases.files.read_file import ReadFileUseCase
from file_manager.use_cases.files.rename_entry import RenameEntryUseCase
from file_manager.use_cases.navigation.navigate import (
    ChangeDirectoryUseCase,
    NavigateUpUseCase,
)
from file_manager.use_cases.system.os_info import OsInfoUseCase


class DependencyContainer:
    """
    Container for managing application dependencies using dependency injection.
    """

    def __init__(self, settings: Optional[Settings] = None, console: Optional[Console] = None):
        self._instances: dict[str, Any] = {}
        self._settings = settings
        self._console = console
        self._logger = logging.getLogger(__name__)

    def _get(self, key: str, factory):  # type: ignore[no-untyped-def]
        if key not in self._instances:
            self._instances[key] = factory()
        return self._instances[key]

    def get_settings(self) -> Settings:
        """
        Get application settings, loaded from the environment on first use.

        Raises:
            ConfigurationError: If an environment value is invalid
        """
        if self._settings is None:
            self._settings = Settings()
        return self._settings

    def get_file_repository(self) -> FileRepositoryPort:
        """
        Get file repository adapter instance.

        Returns:
            FileRepositoryPort implementation
        """
        return self._get(
            "file_repository",
            lambda: LocalFileSystemAdapter(
                chunk_size=self.get_settings().chunk_size, logger=self._logger
            ),
        )

    def get_codec(self) -> CodecPort:
        """
        Get compression codec instance.

        Returns:
            CodecPort implementation
        """
        return self._get(
            "codec",
            lambda: BrotliCodec(
                quality=self.get_settings().compression_quality, logger=self._logger
            ),
        )

    def get_console_view(self) -> ConsoleView:
        return self._get("console_view", lambda: ConsoleView(self._console))

    def get_copy_file_use_case(self) -> CopyFileUseCase:
        return self._get(
            "copy_file_use_case",
            lambda: CopyFileUseCase(self.get_file_repository(), self._logger),
        )

    def get_move_file_use_case(self) -> MoveFileUseCase:
        return self._get(
            "move_file_use_case",
            lambda: MoveFileUseCase(
                self.get_file_repository(), self.get_copy_file_use_case(), self._logger
            ),
        )

    def get_command_dispatcher(self) -> CommandHandlerPort:
        """
        Get the command dispatcher with every use case injected.

        Returns:
            Configured CommandDispatcher
        """
        if "command_dispatcher" not in self._instances:
            repository = self.get_file_repository()
            codec = self.get_codec()
            self._instances["command_dispatcher"] = CommandDispatcher(
                view=self.get_console_view(),
                navigate_up_uc=NavigateUpUseCase(self._logger),
                change_directory_uc=ChangeDirectoryUseCase(self._logger),
                list_entries_uc=ListEntriesUseCase(repository, self._logger),
                read_file_uc=ReadFileUseCase(repository, self._logger),
                create_file_uc=CreateFileUseCase(repository, self._logger),
                create_directory_uc=CreateDirectoryUseCase(repository, self._logger),
                rename_entry_uc=RenameEntryUseCase(repository, self._logger),
                copy_file_uc=self.get_copy_file_use_case(),
                move_file_uc=self.get_move_file_use_case(),
                delete_file_uc=DeleteFileUseCase(repository, self._logger),
                os_info_uc=OsInfoUseCase(self._logger),
                hash_file_uc=HashFileUseCase(repository, logger=self._logger),
                compress_file_uc=CompressFileUseCase(repository, codec, self._logger),
                decompress_file_uc=DecompressFileUseCase(repository, codec, self._logger),
                logger=self._logger,
            )
        return self._instances["command_dispatcher"]

    def reset(self):
        """Reset all instances (useful for testing)."""
        self._instances.clear()


# Global container instance
container = DependencyContainer()
