"""Turn an input line into the command it names."""

import logging
from collections.abc import Callable

from .commands import (
    AddCommand,
    Command,
    ExitCommand,
    GroupCommand,
    HelpCommand,
    ListCommand,
    RemoveCommand,
    SearchCommand,
)
from .exceptions import InvalidArgumentError
from .types import CommandType

logger = logging.getLogger(__name__)

COMMANDS: dict[CommandType, Callable[[str], Command]] = {
    CommandType.ADD: AddCommand,
    CommandType.LIST: ListCommand,
    CommandType.SEARCH: SearchCommand,
    CommandType.REMOVE: RemoveCommand,
    CommandType.GROUP: GroupCommand,
    CommandType.HELP: HelpCommand,
    CommandType.EXIT: ExitCommand,
}


def parse_command(line: str) -> Command:
    """Build the command for one input line.

    The first word selects the command (case-sensitive); the rest of the line,
    possibly empty, is the command's argument input.

    Args:
        line: Raw input line

    Returns:
        A constructed, executable command

    Raises:
        InvalidArgumentError: If the line is blank, the keyword is unknown or the
            command rejects its arguments
    """
    parts = line.strip().split(maxsplit=1)
    if not parts:
        raise InvalidArgumentError("No command given.")

    command_type = CommandType.__members__.get(parts[0])
    if command_type is None:
        raise InvalidArgumentError(f"Unknown command: '{parts[0]}'")

    argument_input = parts[1] if len(parts) > 1 else ""
    logger.debug(f"Dispatching {command_type.name} with arguments {argument_input!r}")

    return COMMANDS[command_type](argument_input)
