"""Type definitions for booklib commands and data structures."""

from enum import Enum
from typing import TypedDict


class CommandType(Enum):
    """Keywords recognised at the start of a command line."""

    ADD = "ADD"
    LIST = "LIST"
    SEARCH = "SEARCH"
    REMOVE = "REMOVE"
    GROUP = "GROUP"
    HELP = "HELP"
    EXIT = "EXIT"


class RemoveType(Enum):
    """Field a REMOVE command matches on."""

    AUTHOR = "AUTHOR"
    TITLE = "TITLE"


class GroupType(Enum):
    """Field a GROUP command groups by."""

    TITLE = "TITLE"
    AUTHOR = "AUTHOR"


class ListType(Enum):
    """Level of detail for the LIST command."""

    SHORT = "short"
    LONG = "long"


class BookRecord(TypedDict):
    """Structure for a raw book record read from a data file."""

    title: str
    authors: list[str]
    rating: float
    isbn: str
    pages: int


# Type aliases for common data structures
BookGroups = dict[str, list[str]]
