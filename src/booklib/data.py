"""In-memory store of book entries shared by every command."""

import logging
from collections.abc import Iterable, Iterator
from pathlib import Path

from .entry import BookEntry
from .sources import read_entries

logger = logging.getLogger(__name__)


class LibraryData:
    """Ordered, mutable collection of book entries.

    The list returned by :attr:`book_data` is the live collection: commands filter
    it in place and never replace it. Nothing here is synchronised, so a command's
    ``execute`` must not run concurrently with another ``execute`` or with direct
    mutation of the same collection.
    """

    def __init__(self, entries: Iterable[BookEntry] = ()) -> None:
        self._book_data: list[BookEntry] = list(entries)

    @property
    def book_data(self) -> list[BookEntry]:
        """The live list of entries, in insertion order."""
        return self._book_data

    def load_data(self, path: Path) -> int:
        """Append the entries read from ``path`` to the collection.

        Args:
            path: CSV, .bib or JSON data file

        Returns:
            Number of entries added

        Raises:
            FileOperationError: If the file cannot be read
            InvalidDataError: If the file content is invalid or unsupported
        """
        entries = read_entries(path)
        self._book_data.extend(entries)
        logger.info(f"Loaded {len(entries)} entries from {path}, {len(self)} in library")
        return len(entries)

    def __len__(self) -> int:
        return len(self._book_data)

    def __iter__(self) -> Iterator[BookEntry]:
        return iter(self._book_data)
