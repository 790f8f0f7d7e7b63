"""Custom exception types for booklib operations."""


class BooklibError(Exception):
    """Base exception for all booklib operations."""


class InvalidArgumentError(BooklibError, ValueError):
    """Raised when a command's argument input cannot be parsed."""


class NullDataError(BooklibError, TypeError):
    """Raised when a command is executed without library data."""


class FileOperationError(BooklibError):
    """Raised when file I/O operations fail."""


class InvalidDataError(BooklibError, ValueError):
    """Raised when data validation fails."""
