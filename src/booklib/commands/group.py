"""GROUP command: show titles grouped by initial letter or by author."""

from typing import TextIO

from ..data import LibraryData
from ..entry import BookEntry
from ..types import BookGroups, CommandType, GroupType
from .base import Command
from .listing import EMPTY_LIBRARY_MESSAGE

DIGIT_GROUP = "[0-9]"


def group_by_title(books: list[BookEntry]) -> BookGroups:
    """Group titles by their upper-cased first character.

    Titles starting with a digit share the ``[0-9]`` group, which sorts last.
    """
    groups: BookGroups = {}
    for book in books:
        initial = book.title.strip()[0].upper()
        key = DIGIT_GROUP if initial.isdigit() else initial
        groups.setdefault(key, []).append(book.title)

    return {key: groups[key] for key in sorted(groups, key=lambda k: (k == DIGIT_GROUP, k))}


def group_by_author(books: list[BookEntry]) -> BookGroups:
    """Group titles under each of their authors, authors sorted by name."""
    groups: BookGroups = {}
    for book in books:
        for author in dict.fromkeys(book.authors):
            groups.setdefault(author, []).append(book.title)

    return {key: groups[key] for key in sorted(groups)}


class GroupCommand(Command):
    """Group the library's titles by ``TITLE`` initial or by ``AUTHOR``."""

    group_by: GroupType

    def __init__(self, argument_input: str | None) -> None:
        super().__init__(CommandType.GROUP, argument_input)

    def parse_arguments(self, argument_input: str) -> bool:
        tokens = argument_input.split()
        if len(tokens) != 1 or tokens[0] not in GroupType.__members__:
            return False

        self.group_by = GroupType[tokens[0]]
        return True

    def execute(self, data: LibraryData | None, out: TextIO | None = None) -> None:
        books = self._require_data(data).book_data

        if not books:
            self._write(EMPTY_LIBRARY_MESSAGE, out)
            return

        if self.group_by is GroupType.TITLE:
            groups = group_by_title(books)
        else:
            groups = group_by_author(books)

        lines = [f"Grouped data by {self.group_by.name}"]
        for key, titles in groups.items():
            lines.append(f"## {key}")
            lines.extend(f"\t{title}" for title in titles)

        self._write("\n".join(lines), out)
