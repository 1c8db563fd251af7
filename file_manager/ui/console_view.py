"""
Console presentation for the interactive session (rich).
"""

from typing import Optional

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from file_manager.entities.entry import Entry

INVALID_INPUT = "Invalid input"
OPERATION_FAILED = "Operation failed"


def displayable(text: str) -> str:
    """
    Replace undecodable filename bytes with U+FFFD.

    Names from the filesystem may carry surrogate escapes that a strict
    console encoding refuses to write.
    """
    try:
        raw = text.encode("utf-8", "surrogateescape")
    except UnicodeEncodeError:
        raw = text.encode("utf-8", "replace")
    return raw.decode("utf-8", "replace")


class ConsoleView:
    """Everything the session prints goes through here."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console(highlight=False, soft_wrap=True)
        self._at_line_start = True

    def write(self, text: str) -> None:
        """Raw streamed output (file contents); no markup, no added newline."""
        if not text:
            return
        # bypass rich rendering, which would expand tabs
        self.console.file.write(text)
        self.console.file.flush()
        self._at_line_start = text.endswith("\n")

    def print_line(self, text: str = "") -> None:
        if not self._at_line_start:
            # streamed output did not end with a newline
            self.console.out("", highlight=False)
        self.console.out(displayable(text), highlight=False)
        self._at_line_start = True

    def print_lines(self, lines: list[str]) -> None:
        for line in lines:
            self.print_line(line)

    def print_entries(self, entries: list[Entry]) -> None:
        table = Table(box=box.SQUARE, show_lines=False)
        table.add_column("(index)", justify="right", style="dim")
        table.add_column("Name", style="cyan")
        table.add_column("Type")
        for index, entry in enumerate(entries):
            details = entry.get_details()
            table.add_row(
                str(index),
                Text(displayable(details["Name"])),
                Text(details["Type"]),
            )
        self.console.print(table)
        self._at_line_start = True

    def print_greeting(self, username: str) -> None:
        self.print_line(f"Welcome to the File Manager, {username}!")

    def print_farewell(self, username: str) -> None:
        self.print_line(f"Thank you for using File Manager, {username}, goodbye!")

    def print_location(self, path: str) -> None:
        self.print_line(f"You are currently in {path}")

    def print_invalid_input(self) -> None:
        self.print_line(INVALID_INPUT)

    def print_operation_failed(self) -> None:
        self.print_line(OPERATION_FAILED)
