"""Base contract shared by every library command."""

import sys
from abc import ABC, abstractmethod
from typing import TextIO

from ..data import LibraryData
from ..exceptions import InvalidArgumentError, NullDataError
from ..types import CommandType


class Command(ABC):
    """A parsed, validated command bound to an execution procedure.

    Construction is the only validation point: the constructor hands the raw
    argument input (everything after the command keyword) to
    :meth:`parse_arguments` and raises :class:`InvalidArgumentError` if it is
    rejected. A constructed command can always be executed.
    """

    def __init__(self, command_type: CommandType, argument_input: str | None) -> None:
        if argument_input is None:
            raise InvalidArgumentError(f"Argument input for {command_type.name} must not be None.")

        self.command_type = command_type

        if not self.parse_arguments(argument_input):
            raise InvalidArgumentError(
                f"Invalid argument for the {command_type.name} command: '{argument_input}'"
            )

    @abstractmethod
    def parse_arguments(self, argument_input: str) -> bool:
        """Validate and store the command's arguments.

        Must not raise for malformed input. Returns ``False`` instead, and leaves
        no partially parsed state behind.
        """

    @abstractmethod
    def execute(self, data: LibraryData | None, out: TextIO | None = None) -> None:
        """Apply the command to ``data`` and write a report to ``out``.

        ``out`` defaults to standard output. Not safe to call concurrently with
        another command working on the same data.

        Raises:
            NullDataError: If ``data`` is None
        """

    def _require_data(self, data: LibraryData | None) -> LibraryData:
        if data is None:
            raise NullDataError(
                f"Provided library data for {self.command_type.name} must not be None."
            )
        return data

    @staticmethod
    def _write(message: str, out: TextIO | None) -> None:
        # No trailing newline: the caller decides how results are separated.
        (out if out is not None else sys.stdout).write(message)
