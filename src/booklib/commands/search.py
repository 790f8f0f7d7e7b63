"""SEARCH command: find titles containing a word."""

from typing import TextIO

from ..data import LibraryData
from ..types import CommandType
from .base import Command


class SearchCommand(Command):
    """Case-insensitive substring search over book titles."""

    search_term: str

    def __init__(self, argument_input: str | None) -> None:
        super().__init__(CommandType.SEARCH, argument_input)

    def parse_arguments(self, argument_input: str) -> bool:
        tokens = argument_input.split()
        if len(tokens) != 1:
            return False

        self.search_term = tokens[0]
        return True

    def execute(self, data: LibraryData | None, out: TextIO | None = None) -> None:
        books = self._require_data(data).book_data
        needle = self.search_term.casefold()

        hits = [book.title for book in books if needle in book.title.casefold()]

        if hits:
            self._write("\n".join(hits), out)
        else:
            self._write(f"No hits found for search term: {self.search_term}", out)
