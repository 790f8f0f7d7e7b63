"""REMOVE command: remove books from the library by author or by title."""

import logging
import re
from typing import TextIO

from ..data import LibraryData
from ..types import CommandType, RemoveType
from .base import Command

logger = logging.getLogger(__name__)

# Token separators: ASCII space, tab, newline, carriage return and form feed only
TOKEN_SEPARATOR = re.compile(r"[ \t\n\r\f]+")


class RemoveCommand(Command):
    """Remove books written by an author, or the book with a given title.

    Argument input is ``AUTHOR <name...>`` or ``TITLE <title...>``. The keyword is
    case-sensitive; the value may span several words and is rejoined with single
    spaces.
    """

    remove_by: RemoveType
    remove_value: str

    def __init__(self, argument_input: str | None) -> None:
        super().__init__(CommandType.REMOVE, argument_input)

    def parse_arguments(self, argument_input: str) -> bool:
        tokens = [token for token in TOKEN_SEPARATOR.split(argument_input) if token]
        if len(tokens) < 2:
            return False

        remove_by = RemoveType.__members__.get(tokens[0])
        if remove_by is None:
            return False

        self.remove_by = remove_by
        self.remove_value = " ".join(tokens[1:])
        return True

    def execute(self, data: LibraryData | None, out: TextIO | None = None) -> None:
        data = self._require_data(data)

        if self.remove_by is RemoveType.AUTHOR:
            message = self._remove_by_author(data)
        else:
            message = self._remove_by_title(data)

        self._write(message, out)

    def _remove_by_author(self, data: LibraryData) -> str:
        """Remove every entry listing the author, keeping survivors in order."""
        books = data.book_data
        original_size = len(books)

        books[:] = [book for book in books if self.remove_value not in book.authors]

        removed = original_size - len(books)
        logger.debug(f"Removed {removed} of {original_size} entries by {self.remove_value!r}")
        return f"{removed} books removed for author: {self.remove_value}"

    def _remove_by_title(self, data: LibraryData) -> str:
        """Remove the first entry with the title.

        Titles are treated as unique, so the scan stops at the first match.
        """
        books = data.book_data

        for index, book in enumerate(books):
            if book.title == self.remove_value:
                del books[index]
                logger.debug(f"Removed entry {index} with title {self.remove_value!r}")
                return f"{self.remove_value}: removed successfully."

        return f"{self.remove_value}: not found."
