"""
Dispatcher mapping interactive command names to the file manager use cases.
"""

import logging
from typing import Callable, Optional

from typing_extensions import override

from file_manager.entities.command import Command
from file_manager.entities.session import Session
from file_manager.exceptions import (
    InvalidFlagError,
    ParseError,
    UnknownCommandError,
)
from file_manager.ports.commands.command_handler_port import CommandHandlerPort
from file_manager.ui.console_view import ConsoleView
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

EXIT_COMMAND = ".exit"

# Reported as "Invalid input" instead of "Operation failed"
_INVALID_INPUT_ERRORS = (ParseError, UnknownCommandError, InvalidFlagError)


class CommandDispatcher(CommandHandlerPort):
    """
    Routes one input line to its use case and renders the outcome.

    This is the only failure boundary of the session: any Exception raised while
    handling a line is logged with its real cause and reported to the user as
    "Invalid input" or "Operation failed".
    """

    def __init__(
        self,
        view: ConsoleView,
        navigate_up_uc: NavigateUpUseCase,
        change_directory_uc: ChangeDirectoryUseCase,
        list_entries_uc: ListEntriesUseCase,
        read_file_uc: ReadFileUseCase,
        create_file_uc: CreateFileUseCase,
        create_directory_uc: CreateDirectoryUseCase,
        rename_entry_uc: RenameEntryUseCase,
        copy_file_uc: CopyFileUseCase,
        move_file_uc: MoveFileUseCase,
        delete_file_uc: DeleteFileUseCase,
        os_info_uc: OsInfoUseCase,
        hash_file_uc: HashFileUseCase,
        compress_file_uc: CompressFileUseCase,
        decompress_file_uc: DecompressFileUseCase,
        logger: Optional[logging.Logger] = None,
    ):
        self._view = view
        self._navigate_up_uc = navigate_up_uc
        self._change_directory_uc = change_directory_uc
        self._list_entries_uc = list_entries_uc
        self._read_file_uc = read_file_uc
        self._create_file_uc = create_file_uc
        self._create_directory_uc = create_directory_uc
        self._rename_entry_uc = rename_entry_uc
        self._copy_file_uc = copy_file_uc
        self._move_file_uc = move_file_uc
        self._delete_file_uc = delete_file_uc
        self._os_info_uc = os_info_uc
        self._hash_file_uc = hash_file_uc
        self._compress_file_uc = compress_file_uc
        self._decompress_file_uc = decompress_file_uc
        self._logger = logger or logging.getLogger(__name__)

        self._handlers: dict[str, Callable[[Session, Command], None]] = {
            "up": self._handle_up,
            "cd": self._handle_cd,
            "ls": self._handle_ls,
            "cat": self._handle_cat,
            "add": self._handle_add,
            "mkdir": self._handle_mkdir,
            "rn": self._handle_rn,
            "cp": self._handle_cp,
            "mv": self._handle_mv,
            "rm": self._handle_rm,
            "os": self._handle_os,
            "hash": self._handle_hash,
            "compress": self._handle_compress,
            "decompress": self._handle_decompress,
            EXIT_COMMAND: self._handle_exit,
        }

    @override
    def available_commands(self) -> list[str]:
        return list(self._handlers)

    @override
    def dispatch(self, session: Session, line: str) -> None:
        try:
            command = Command.parse(line)
            if command is None:
                return
            handler = self._handlers.get(command.name)
            if handler is None:
                raise UnknownCommandError(f"Unknown command: {command.name}")
            self._logger.info(f"Dispatching {command.name} {list(command.arguments)}")
            handler(session, command)
        except _INVALID_INPUT_ERRORS as e:
            self._logger.warning(f"Invalid input {line!r}: {e}")
            self._view.print_invalid_input()
        except Exception as e:
            self._logger.warning(f"{type(e).__name__} while handling {line!r}: {e}")
            self._view.print_operation_failed()

    # ------------------------- handlers -------------------------
    def _handle_up(self, session: Session, command: Command) -> None:
        self._navigate_up_uc.execute(session.cursor)

    def _handle_cd(self, session: Session, command: Command) -> None:
        self._change_directory_uc.execute(session.cursor, command.argument(0))

    def _handle_ls(self, session: Session, command: Command) -> None:
        entries = self._list_entries_uc.execute(session.cursor)
        self._view.print_entries(entries)

    def _handle_cat(self, session: Session, command: Command) -> None:
        self._read_file_uc.execute(session.cursor, command.argument(0), self._view.write)

    def _handle_add(self, session: Session, command: Command) -> None:
        self._create_file_uc.execute(session.cursor, command.argument(0))

    def _handle_mkdir(self, session: Session, command: Command) -> None:
        self._create_directory_uc.execute(session.cursor, command.argument(0))

    def _handle_rn(self, session: Session, command: Command) -> None:
        self._rename_entry_uc.execute(
            session.cursor, command.argument(0), command.argument(1)
        )

    def _handle_cp(self, session: Session, command: Command) -> None:
        self._copy_file_uc.execute(session.cursor, command.argument(0), command.argument(1))

    def _handle_mv(self, session: Session, command: Command) -> None:
        self._move_file_uc.execute(session.cursor, command.argument(0), command.argument(1))

    def _handle_rm(self, session: Session, command: Command) -> None:
        self._delete_file_uc.execute(session.cursor, command.argument(0))

    def _handle_os(self, session: Session, command: Command) -> None:
        self._view.print_lines(self._os_info_uc.execute(command.argument(0)))

    def _handle_hash(self, session: Session, command: Command) -> None:
        self._view.print_line(
            self._hash_file_uc.execute(session.cursor, command.argument(0))
        )

    def _handle_compress(self, session: Session, command: Command) -> None:
        self._compress_file_uc.execute(
            session.cursor, command.argument(0), command.argument(1)
        )

    def _handle_decompress(self, session: Session, command: Command) -> None:
        self._decompress_file_uc.execute(
            session.cursor, command.argument(0), command.argument(1)
        )

    def _handle_exit(self, session: Session, command: Command) -> None:
        session.stop()
