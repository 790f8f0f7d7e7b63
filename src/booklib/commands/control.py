"""Commands that take no arguments and do not touch the entries: HELP and EXIT."""

from typing import TextIO

from ..data import LibraryData
from ..types import CommandType
from .base import Command

HELP_TEXT = """\
Available commands:
  ADD <file>                 load books from a .csv, .bib or .json file
  LIST [short|long]          list all books (default: short)
  SEARCH <word>              find titles containing a word (case-insensitive)
  REMOVE AUTHOR <name>       remove every book by an author
  REMOVE TITLE <title>       remove the book with a title
  GROUP TITLE|AUTHOR         group titles by initial letter or by author
  HELP                       show this message
  EXIT                       leave the session"""


class HelpCommand(Command):
    """Writes a usage summary of every command."""

    def __init__(self, argument_input: str | None) -> None:
        super().__init__(CommandType.HELP, argument_input)

    def parse_arguments(self, argument_input: str) -> bool:
        return not argument_input.strip()

    def execute(self, data: LibraryData | None, out: TextIO | None = None) -> None:
        self._require_data(data)
        self._write(HELP_TEXT, out)


class ExitCommand(Command):
    """Ends the session. Executing it writes nothing."""

    def __init__(self, argument_input: str | None) -> None:
        super().__init__(CommandType.EXIT, argument_input)

    def parse_arguments(self, argument_input: str) -> bool:
        return not argument_input.strip()

    def execute(self, data: LibraryData | None, out: TextIO | None = None) -> None:
        self._require_data(data)
