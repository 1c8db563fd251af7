from dataclasses import dataclass, field
from typing import Optional

from file_manager.utils.tokenizer import tokenize


@dataclass(frozen=True)
class Command:
    """Domain-level command parsed from one line of user input."""

    name: str
    arguments: tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def parse(cls, line: str) -> Optional["Command"]:
        # blank line -> no command
        tokens = tokenize(line)
        if not tokens:
            return None
        return cls(name=tokens[0], arguments=tuple(tokens[1:]))

    def argument(self, index: int) -> Optional[str]:
        """Positional argument or None when the user did not supply it."""
        if index < len(self.arguments):
            return self.arguments[index]
        return None
