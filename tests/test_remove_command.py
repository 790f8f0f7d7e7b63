"""Tests for the REMOVE command."""

import io

import pytest

from booklib.commands import RemoveCommand
from booklib.data import LibraryData
from booklib.entry import BookEntry
from booklib.exceptions import InvalidArgumentError, NullDataError
from booklib.types import CommandType, RemoveType


def make_book(title: str, *authors: str) -> BookEntry:
    return BookEntry(title=title, authors=authors, rating=4.0, isbn=f"isbn-{title}", pages=100)


@pytest.fixture
def library() -> LibraryData:
    """Three books: B1 by X and Y, B2 by Z, B3 by X."""
    return LibraryData(
        [
            make_book("B1", "X", "Y"),
            make_book("B2", "Z"),
            make_book("B3", "X"),
        ]
    )


def titles(data: LibraryData) -> list[str]:
    return [book.title for book in data.book_data]


class TestParseArguments:
    """Tests for argument parsing at construction time."""

    def test_author_argument(self):
        command = RemoveCommand("AUTHOR Jane Austen")

        assert command.command_type is CommandType.REMOVE
        assert command.remove_by is RemoveType.AUTHOR
        assert command.remove_value == "Jane Austen"

    def test_title_argument(self):
        command = RemoveCommand("TITLE Pride and Prejudice")

        assert command.remove_by is RemoveType.TITLE
        assert command.remove_value == "Pride and Prejudice"

    def test_value_whitespace_is_collapsed_and_trimmed(self):
        command = RemoveCommand("  AUTHOR   Jane \t  Austen   ")

        assert command.remove_value == "Jane Austen"

    @pytest.mark.parametrize(
        "argument_input",
        [
            "",
            "   ",
            "AUTHOR",
            "TITLE",
            "AUTHOR    ",
            "author Jane Austen",
            "Title Emma",
            "ISBN 12345",
            "Jane Austen",
        ],
    )
    def test_invalid_input_is_rejected(self, argument_input: str):
        with pytest.raises(InvalidArgumentError):
            RemoveCommand(argument_input)

    def test_non_breaking_space_stays_in_value(self):
        command = RemoveCommand("AUTHOR Jean\xa0Luc")

        assert command.remove_value == "Jean\xa0Luc"

    def test_non_breaking_space_does_not_separate_type(self):
        with pytest.raises(InvalidArgumentError):
            RemoveCommand("AUTHOR\xa0X")

    def test_form_feed_and_carriage_return_separate_tokens(self):
        command = RemoveCommand("TITLE\fThe\r\nHobbit")

        assert command.remove_value == "The Hobbit"

    def test_none_input_is_rejected(self):
        with pytest.raises(InvalidArgumentError, match="must not be None"):
            RemoveCommand(None)

    def test_failed_parse_returns_false_without_state(self):
        command = RemoveCommand("TITLE Emma")

        assert command.parse_arguments("AUTHOR") is False
        assert command.parse_arguments("UNKNOWN value") is False
        assert command.remove_by is RemoveType.TITLE
        assert command.remove_value == "Emma"


class TestRemoveByAuthor:
    """Tests for removing every book by an author."""

    def test_author_with_non_breaking_space(self, capsys):
        data = LibraryData([make_book("A", "Jean\xa0Luc"), make_book("B", "Jean Luc")])

        RemoveCommand("AUTHOR Jean\xa0Luc").execute(data)

        assert titles(data) == ["B"]
        assert capsys.readouterr().out == "1 books removed for author: Jean\xa0Luc"

    def test_removes_all_matching_books(self, library: LibraryData, capsys):
        RemoveCommand("AUTHOR X").execute(library)

        assert titles(library) == ["B2"]
        assert capsys.readouterr().out == "2 books removed for author: X"

    def test_no_match_leaves_collection_unchanged(self, library: LibraryData, capsys):
        before = list(library.book_data)

        RemoveCommand("AUTHOR Q").execute(library)

        assert library.book_data == before
        assert capsys.readouterr().out == "0 books removed for author: Q"

    def test_author_match_is_exact(self, library: LibraryData, capsys):
        RemoveCommand("AUTHOR x").execute(library)

        assert titles(library) == ["B1", "B2", "B3"]
        assert capsys.readouterr().out == "0 books removed for author: x"

    def test_multi_word_author(self, capsys):
        data = LibraryData(
            [
                make_book("Emma", "Jane Austen"),
                make_book("Dracula", "Bram Stoker"),
                make_book("Persuasion", "Jane Austen"),
            ]
        )

        RemoveCommand("AUTHOR Jane   Austen").execute(data)

        assert titles(data) == ["Dracula"]
        assert capsys.readouterr().out == "2 books removed for author: Jane Austen"

    def test_operates_on_shared_list(self, library: LibraryData):
        books = library.book_data

        RemoveCommand("AUTHOR Z").execute(library)

        assert library.book_data is books
        assert [book.title for book in books] == ["B1", "B3"]

    def test_survivor_order_is_preserved(self, capsys):
        data = LibraryData([make_book(f"T{i}", "A" if i % 2 else "B") for i in range(6)])

        RemoveCommand("AUTHOR A").execute(data)

        assert titles(data) == ["T0", "T2", "T4"]
        assert capsys.readouterr().out == "3 books removed for author: A"

    def test_empty_library(self, capsys):
        data = LibraryData()

        RemoveCommand("AUTHOR X").execute(data)

        assert capsys.readouterr().out == "0 books removed for author: X"


class TestRemoveByTitle:
    """Tests for removing a single book by title."""

    def test_removes_single_match_preserving_order(self, capsys):
        data = LibraryData([make_book("A", "P"), make_book("B", "Q"), make_book("C", "R")])

        RemoveCommand("TITLE B").execute(data)

        assert titles(data) == ["A", "C"]
        assert capsys.readouterr().out == "B: removed successfully."

    def test_no_match_leaves_collection_unchanged(self, library: LibraryData, capsys):
        before = list(library.book_data)

        RemoveCommand("TITLE Missing Book").execute(library)

        assert library.book_data == before
        assert capsys.readouterr().out == "Missing Book: not found."

    def test_second_removal_reports_not_found(self, library: LibraryData, capsys):
        command = RemoveCommand("TITLE B2")

        command.execute(library)
        assert capsys.readouterr().out == "B2: removed successfully."

        command.execute(library)
        assert capsys.readouterr().out == "B2: not found."
        assert titles(library) == ["B1", "B3"]

    def test_duplicate_titles_remove_first_only(self, capsys):
        first = make_book("Same", "First Author")
        second = make_book("Same", "Second Author")
        other = make_book("Other", "X")
        data = LibraryData([first, other, second])

        RemoveCommand("TITLE Same").execute(data)

        assert data.book_data == [other, second]
        assert capsys.readouterr().out == "Same: removed successfully."

    def test_title_match_is_exact(self, capsys):
        data = LibraryData([make_book("The Hobbit", "Tolkien")])

        RemoveCommand("TITLE the hobbit").execute(data)

        assert titles(data) == ["The Hobbit"]
        assert capsys.readouterr().out == "the hobbit: not found."


class TestExecuteContract:
    """Tests for the execute contract shared by both removal modes."""

    @pytest.mark.parametrize("argument_input", ["AUTHOR X", "TITLE B1"])
    def test_none_data_raises(self, library: LibraryData, argument_input: str, capsys):
        before = list(library.book_data)

        with pytest.raises(NullDataError):
            RemoveCommand(argument_input).execute(None)

        assert library.book_data == before
        assert capsys.readouterr().out == ""

    def test_writes_to_given_stream(self, library: LibraryData, capsys):
        out = io.StringIO()

        RemoveCommand("AUTHOR Y").execute(library, out)

        assert out.getvalue() == "1 books removed for author: Y"
        assert capsys.readouterr().out == ""
