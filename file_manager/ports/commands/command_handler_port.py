"""
Port interface for handling interactive commands.
"""

from abc import ABC, abstractmethod

from file_manager.entities.session import Session


class CommandHandlerPort(ABC):
    """
    Port interface for handling one line of user input.

    Implementations map command names to use cases and report outcomes to the user.
    """

    @abstractmethod
    def available_commands(self) -> list[str]:
        """
        Get the names of the commands this handler understands.

        Returns:
            List of command names
        """
        pass

    @abstractmethod
    def dispatch(self, session: Session, line: str) -> None:
        """
        Execute one input line against the session.

        Args:
            session: Session holding the cursor and running flag
            line: Raw line typed by the user

        Implementations must not let any Exception escape.
        """
        pass
