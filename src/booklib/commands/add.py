"""ADD command: load book entries from a data file."""

from pathlib import Path
from typing import TextIO

from ..data import LibraryData
from ..sources import is_supported
from ..types import CommandType
from .base import Command


class AddCommand(Command):
    """Append the entries of a CSV, .bib or JSON file to the library."""

    path: Path

    def __init__(self, argument_input: str | None) -> None:
        super().__init__(CommandType.ADD, argument_input)

    def parse_arguments(self, argument_input: str) -> bool:
        tokens = argument_input.split()
        if len(tokens) != 1:
            return False

        path = Path(tokens[0])
        if not is_supported(path):
            return False

        self.path = path
        return True

    def execute(self, data: LibraryData | None, out: TextIO | None = None) -> None:
        data = self._require_data(data)
        added = data.load_data(self.path)
        self._write(f"{added} books added from: {self.path}", out)
