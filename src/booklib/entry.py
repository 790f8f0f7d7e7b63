"""Immutable book record shared by the library store and its commands."""

import msgspec
from msgspec.structs import force_setattr

from .exceptions import InvalidDataError

MAX_RATING = 5.0


class BookEntry(msgspec.Struct, frozen=True):
    """A single book: title, authors and catalogue details.

    Entries compare and hash by value. ``authors`` is always stored as a tuple,
    so lists passed by callers are converted on construction.
    """

    title: str
    authors: tuple[str, ...]
    rating: float = 0.0
    isbn: str = ""
    pages: int = 0

    def __post_init__(self) -> None:
        if isinstance(self.authors, str):
            force_setattr(self, "authors", (self.authors,))
        elif not isinstance(self.authors, tuple):
            force_setattr(self, "authors", tuple(self.authors))

        if not self.title or not self.title.strip():
            raise InvalidDataError("Book title must not be blank.")
        if not self.authors:
            raise InvalidDataError(f"Book '{self.title}' must have at least one author.")
        if any(not author or not author.strip() for author in self.authors):
            raise InvalidDataError(f"Book '{self.title}' has a blank author name.")
        if not 0 <= self.rating <= MAX_RATING:
            raise InvalidDataError(
                f"Rating for '{self.title}' must be between 0 and {MAX_RATING:g}, got {self.rating}"
            )
        if self.pages < 0:
            raise InvalidDataError(f"Page count for '{self.title}' must not be negative.")

    def long_form(self) -> str:
        """Render the entry across several lines, as shown by ``LIST long``."""
        return "\n".join(
            [
                self.title,
                f"by {', '.join(self.authors)}",
                f"Rating: {self.rating:.2f}",
                f"ISBN: {self.isbn}",
                f"{self.pages} pages",
            ]
        )

    def __str__(self) -> str:
        return self.long_form()
