"""Readers that turn library data files into book entries."""

import csv
import logging
import re
from collections.abc import Callable
from pathlib import Path

import bibtexparser
import msgspec
from bibtexparser.model import Entry

from .entry import BookEntry
from .exceptions import FileOperationError, InvalidDataError
from .types import BookRecord

logger = logging.getLogger(__name__)

CSV_COLUMNS = ("title", "authors", "rating", "isbn", "pages")
CSV_AUTHOR_SEPARATOR = "-"
BIB_AUTHOR_SEPARATOR = re.compile(r"\s+and\s+")
LEADING_NUMBER = re.compile(r"^\s*(\d+)")


def read_csv_entries(csv_path: Path) -> list[BookEntry]:
    """Read book entries from a CSV file.

    The file must start with a ``title,authors,rating,isbn,pages`` header. Multiple
    authors are joined with ``-`` inside the ``authors`` column.

    Args:
        csv_path: Path to the CSV file

    Returns:
        Entries in file order

    Raises:
        FileOperationError: If the file cannot be read
        InvalidDataError: If the header or a row is invalid
    """
    logger.debug(f"Reading CSV book data: {csv_path}")

    try:
        with open(csv_path, encoding="utf-8", newline="") as f:
            reader = csv.DictReader(f)
            missing = [column for column in CSV_COLUMNS if column not in (reader.fieldnames or [])]
            if missing:
                raise InvalidDataError(f"Missing CSV columns in {csv_path}: {missing}")

            entries: list[BookEntry] = []
            for row in reader:
                entries.append(_convert_csv_row(row, reader.line_num, csv_path))
    except OSError as e:
        raise FileOperationError(f"Failed to read {csv_path}: {e}") from e
    except (UnicodeDecodeError, csv.Error) as e:
        raise InvalidDataError(f"Malformed CSV data in {csv_path}: {e}") from e

    logger.info(f"Read {len(entries)} entries from {csv_path.name}")
    return entries


def _convert_csv_row(row: dict[str, str], line_num: int, csv_path: Path) -> BookEntry:
    try:
        record: BookRecord = {
            "title": row["title"].strip(),
            "authors": [name.strip() for name in row["authors"].split(CSV_AUTHOR_SEPARATOR)],
            "rating": float(row["rating"]),
            "isbn": row["isbn"].strip(),
            "pages": int(row["pages"]),
        }
        return msgspec.convert(record, type=BookEntry)
    except (AttributeError, ValueError, msgspec.ValidationError) as e:
        raise InvalidDataError(f"Invalid book data on line {line_num} of {csv_path}: {e}") from e


def read_bib_entries(bib_path: Path) -> list[BookEntry]:
    """Read book entries from a biblatex/BibTeX file using bibtexparser v2.

    ``author`` lists are split on ``and``. Entries without an ``isbn`` field use their
    citekey instead, and ``pages`` keeps only its leading number (``12--30`` gives 12).

    Args:
        bib_path: Path to the .bib file

    Returns:
        Entries in file order

    Raises:
        FileOperationError: If the file does not exist
        InvalidDataError: If parsing fails or an entry lacks a title or author
    """
    if not bib_path.exists():
        raise FileOperationError(f"Bibliography file not found: {bib_path}")

    logger.debug(f"Parsing .bib file: {bib_path}")

    try:
        library = bibtexparser.parse_file(str(bib_path))
    except Exception as e:
        # Catch bibtexparser errors without knowing their exact type
        raise InvalidDataError(f"Failed to parse {bib_path}: {e}") from e

    if library.failed_blocks:
        raise InvalidDataError(
            f"Failed to parse {len(library.failed_blocks)} blocks in {bib_path}"
        )

    entries = [_convert_bib_entry(entry, bib_path) for entry in library.entries]
    logger.info(f"Read {len(entries)} entries from {bib_path.name}")
    return entries


def _convert_bib_entry(entry: Entry, bib_path: Path) -> BookEntry:
    fields = {name.lower(): field.value for name, field in entry.fields_dict.items()}

    if "title" not in fields or "author" not in fields:
        raise InvalidDataError(f"Entry '{entry.key}' in {bib_path} needs a title and an author")

    pages_match = LEADING_NUMBER.match(str(fields.get("pages", "")))

    try:
        return BookEntry(
            title=" ".join(str(fields["title"]).split()),
            authors=tuple(
                name.strip() for name in BIB_AUTHOR_SEPARATOR.split(str(fields["author"]).strip())
            ),
            rating=float(fields.get("rating", 0.0)),
            isbn=str(fields.get("isbn", entry.key)).strip(),
            pages=int(pages_match.group(1)) if pages_match else 0,
        )
    except ValueError as e:
        raise InvalidDataError(f"Invalid book data in entry '{entry.key}': {e}") from e


def read_json_entries(json_path: Path) -> list[BookEntry]:
    """Read book entries from a JSON array of book objects.

    Args:
        json_path: Path to the JSON file

    Returns:
        Entries in file order

    Raises:
        FileOperationError: If the file cannot be read
        InvalidDataError: If the JSON is malformed or does not describe books
    """
    logger.debug(f"Reading JSON book data: {json_path}")

    try:
        raw = json_path.read_bytes()
    except OSError as e:
        raise FileOperationError(f"Failed to read {json_path}: {e}") from e

    try:
        # Use msgspec for direct type-safe validation
        entries = msgspec.json.decode(raw, type=list[BookEntry])
    except msgspec.DecodeError as e:
        raise InvalidDataError(f"Invalid book data in {json_path}: {e}") from e

    logger.info(f"Read {len(entries)} entries from {json_path.name}")
    return entries


READERS: dict[str, Callable[[Path], list[BookEntry]]] = {
    ".csv": read_csv_entries,
    ".bib": read_bib_entries,
    ".json": read_json_entries,
}


def is_supported(path: Path) -> bool:
    """Return ``True`` if ``path`` has a suffix one of the readers understands."""
    return path.suffix.lower() in READERS


def read_entries(path: Path) -> list[BookEntry]:
    """Read book entries from ``path``, choosing the reader by file suffix.

    Raises:
        InvalidDataError: If the suffix is not supported
    """
    reader = READERS.get(path.suffix.lower())
    if reader is None:
        raise InvalidDataError(
            f"Unsupported data file '{path.name}', expected one of: {', '.join(READERS)}"
        )
    return reader(path)
