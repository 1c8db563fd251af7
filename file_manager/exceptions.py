"""
Custom exceptions for the application.
"""


class BaseAppError(Exception):
    """Base exception class for application errors."""

    pass


class ConfigurationError(BaseAppError):
    """Exception raised for configuration errors."""

    pass


class CommandError(BaseAppError):
    """Exception raised when a command line cannot be turned into an operation."""

    pass


class ParseError(CommandError):
    """Exception raised when an input line cannot be tokenized."""

    pass


class UnknownCommandError(CommandError):
    """Exception raised for command names missing from the dispatch table."""

    pass


class InvalidFlagError(CommandError):
    """Exception raised for unsupported command flags (e.g. `os --foo`)."""

    pass


class MissingArgumentError(CommandError):
    """Exception raised when an operation is invoked without a required argument."""

    pass


class FileRepositoryError(BaseAppError):
    """Exception raised for file repository errors."""

    pass


class NotFoundError(FileRepositoryError):
    """Exception raised when a source or target path does not exist."""

    pass


class AlreadyExistsError(FileRepositoryError):
    """Exception raised when a target path is already taken."""

    pass


class NotADirectoryPathError(FileRepositoryError):
    """Exception raised when a directory was expected."""

    pass


class IsADirectoryPathError(FileRepositoryError):
    """Exception raised when a file was expected but a directory was found."""

    pass


class PermissionDeniedError(FileRepositoryError):
    """Exception raised when the host filesystem refuses access."""

    pass


class StreamError(FileRepositoryError):
    """Exception raised for I/O failures in the middle of a chunked transfer."""

    pass


class SameFileError(FileRepositoryError):
    """Exception raised when source and destination resolve to the same file."""

    pass


class MoveIncompleteError(FileRepositoryError):
    """Exception raised when a move copied the file but could not delete the source."""

    pass


class CompressionError(FileRepositoryError):
    """Exception raised when the codec fails to encode or decode a stream."""

    pass
