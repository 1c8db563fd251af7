"""
Directory listing entry entity.
"""

from dataclasses import dataclass
from typing import Any

DIRECTORY = "directory"
FILE = "file"


@dataclass(frozen=True)
class Entry:
    """One row of a directory listing: a name and whether it is a file or directory."""

    name: str
    entry_type: str

    def get_details(self) -> dict[str, Any]:
        """
        Get the listing row as displayed in the table.

        Returns:
            Dictionary with the Name and Type columns
        """
        return {"Name": self.name, "Type": self.entry_type}
