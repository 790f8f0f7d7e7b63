"""Command implementations, one class per command keyword."""

from .add import AddCommand
from .base import Command
from .control import ExitCommand, HelpCommand
from .group import GroupCommand
from .listing import ListCommand
from .remove import RemoveCommand
from .search import SearchCommand

__all__ = [
    "AddCommand",
    "Command",
    "ExitCommand",
    "GroupCommand",
    "HelpCommand",
    "ListCommand",
    "RemoveCommand",
    "SearchCommand",
]
