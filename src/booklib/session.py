"""Read-eval loop that feeds input lines to commands."""

import logging
import sys
from collections.abc import Iterable
from typing import TextIO

from .config import DEFAULT_PROMPT
from .data import LibraryData
from .dispatch import parse_command
from .exceptions import FileOperationError, InvalidArgumentError, InvalidDataError
from .types import CommandType

logger = logging.getLogger(__name__)


class LibrarySession:
    """Run commands against one :class:`LibraryData` until EXIT or end of input.

    Rejected lines and unreadable data files are reported as ``ERROR: ...`` on the
    output stream and the session carries on with the next line.
    """

    def __init__(
        self,
        data: LibraryData,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        prompt: str = DEFAULT_PROMPT,
    ) -> None:
        self.data = data
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.prompt = prompt
        self.finished = False
        self.failures = 0

    def run(self) -> int:
        """Prompt for and execute lines interactively.

        Returns:
            Number of lines that failed
        """
        while not self.finished:
            self.stdout.write(self.prompt)
            self.stdout.flush()

            line = self.stdin.readline()
            if not line:
                logger.debug("End of input reached")
                break

            self.execute_line(line)

        return self.failures

    def run_script(self, lines: Iterable[str]) -> int:
        """Execute a batch of lines without prompting.

        Returns:
            Number of lines that failed
        """
        for line in lines:
            if self.finished:
                break
            self.execute_line(line)

        return self.failures

    def execute_line(self, line: str) -> bool:
        """Dispatch and execute one line.

        Returns:
            ``True`` if the command ran (or the line was blank), ``False`` if it failed
        """
        if not line.strip():
            return True

        try:
            command = parse_command(line)
            command.execute(self.data, self.stdout)
        except (InvalidArgumentError, FileOperationError, InvalidDataError) as e:
            logger.warning(f"Rejected line {line.strip()!r}: {e}")
            self.stdout.write(f"ERROR: {e}\n")
            self.failures += 1
            return False

        if command.command_type is CommandType.EXIT:
            self.finished = True
        else:
            self.stdout.write("\n")

        return True
