"""
Interactive session loop and console entry point.
"""

from __future__ import annotations

import argparse
import locale
import logging
import os
import sys
from typing import Callable, Optional

from file_manager.container import DependencyContainer, container
from file_manager.entities.cursor import Cursor
from file_manager.entities.session import DEFAULT_USERNAME, Session
from file_manager.exceptions import ConfigurationError, FileRepositoryError
from file_manager.ports.commands.command_handler_port import CommandHandlerPort
from file_manager.ui.console_view import ConsoleView

logger = logging.getLogger(__name__)

USERNAME_PREFIX = "--username="


def parse_username(argv: Optional[list[str]] = None) -> str:
    """Return the first ``--username=<name>`` value, or the default when absent or empty."""
    parser = argparse.ArgumentParser(
        prog="file-manager",
        description="Interactive terminal file manager.",
        add_help=False,
        allow_abbrev=False,
    )
    parser.add_argument(
        "--username",
        default=None,
        help="Name used in the greeting and farewell messages",
    )
    # only the --username=<name> form is recognized, everything else is ignored
    candidates = [arg for arg in argv or [] if arg.startswith(USERNAME_PREFIX)]
    args, _ = parser.parse_known_args(candidates[:1])
    username = (args.username or "").strip()
    return username or DEFAULT_USERNAME


def configure_logging(level: int, log_file: Optional[str] = None) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        filename=log_file,
    )


def _start_directory() -> Cursor:
    home = os.path.expanduser("~")
    try:
        return Cursor(home)
    except FileRepositoryError as e:
        logger.warning(f"Home directory unusable ({e}); starting in {os.getcwd()}")
        return Cursor(os.getcwd())


def run_session(
    session: Session,
    dispatcher: CommandHandlerPort,
    view: ConsoleView,
    read_line: Callable[[str], str] = input,
    prompt: str = "> ",
) -> int:
    """
    Drive the REPL until `.exit`, end of input or Ctrl+C at the prompt.

    Args:
        session: Session state (username, cursor, running flag)
        dispatcher: Handler executing each non-empty line
        view: Console output
        read_line: Function returning the next line; raises EOFError at end of input
        prompt: Prompt passed to ``read_line``

    Returns:
        Process exit status (always 0)
    """
    view.print_greeting(session.username)
    view.print_location(session.current_directory)

    while session.running:
        try:
            line = read_line(prompt)
        except (EOFError, KeyboardInterrupt):
            view.print_line()
            break

        line = line.strip()
        if line:
            dispatcher.dispatch(session, line)
        if session.running:
            view.print_location(session.current_directory)

    session.stop()
    view.print_farewell(session.username)
    return 0


def main(
    argv: Optional[list[str]] = None,
    deps: Optional[DependencyContainer] = None,
    read_line: Callable[[str], str] = input,
) -> int:
    """Main application entry point."""
    deps = deps or container
    username = parse_username(sys.argv[1:] if argv is None else argv)

    try:
        settings = deps.get_settings()
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2

    configure_logging(settings.log_level, settings.log_file)
    try:
        locale.setlocale(locale.LC_COLLATE, "")
    except locale.Error as e:
        logger.warning(f"Could not apply system collation locale: {e}")

    session = Session(username=username, cursor=_start_directory())
    logger.info(f"Session started for {username} in {session.current_directory}")
    return run_session(
        session,
        deps.get_command_dispatcher(),
        deps.get_console_view(),
        read_line=read_line,
        prompt=settings.prompt,
    )


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
