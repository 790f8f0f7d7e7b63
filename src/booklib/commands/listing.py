"""LIST command: show the titles or full details of every entry."""

from typing import TextIO

from ..data import LibraryData
from ..types import CommandType, ListType
from .base import Command

EMPTY_LIBRARY_MESSAGE = "The library has no book entries."


class ListCommand(Command):
    """List the library in ``short`` (titles only) or ``long`` form."""

    list_type: ListType

    def __init__(self, argument_input: str | None) -> None:
        super().__init__(CommandType.LIST, argument_input)

    def parse_arguments(self, argument_input: str) -> bool:
        value = argument_input.strip()
        if not value:
            self.list_type = ListType.SHORT
            return True

        try:
            self.list_type = ListType(value)
        except ValueError:
            return False
        return True

    def execute(self, data: LibraryData | None, out: TextIO | None = None) -> None:
        books = self._require_data(data).book_data

        if not books:
            self._write(EMPTY_LIBRARY_MESSAGE, out)
            return

        if self.list_type is ListType.SHORT:
            body = "\n".join(book.title for book in books)
        else:
            body = "\n\n".join(book.long_form() for book in books)

        self._write(f"{len(books)} books in library:\n{body}", out)
