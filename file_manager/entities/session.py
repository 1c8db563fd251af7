from file_manager.entities.cursor import Cursor

DEFAULT_USERNAME = "Anonymous"


class Session:
    """Process-wide REPL state: who is greeted, where the cursor is, whether the loop runs."""

    def __init__(self, username: str, cursor: Cursor, running: bool = True):
        self._username = username
        self.cursor = cursor
        self.running = running

    @property
    def username(self) -> str:
        """Name fixed at startup; read-only for the rest of the session."""
        return self._username

    @property
    def current_directory(self) -> str:
        return self.cursor.path

    def stop(self) -> None:
        self.running = False

    def __repr__(self) -> str:
        return (
            f"Session(username={self._username!r}, cursor={self.cursor!r}, "
            f"running={self.running!r})"
        )
