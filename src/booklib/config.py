"""Session configuration for booklib."""

from dataclasses import dataclass, field
from pathlib import Path

from .sources import is_supported

DEFAULT_PROMPT = "> "


@dataclass
class SessionConfig:
    """Configuration for a command session."""

    data_files: list[Path] = field(default_factory=list)
    prompt: str = DEFAULT_PROMPT

    @classmethod
    def from_workspace(cls, workspace: Path) -> "SessionConfig":
        """Create configuration from workspace root path.

        Every supported data file directly under ``<workspace>/data`` is loaded at
        start-up, in name order.

        Args:
            workspace: Path to workspace root directory

        Returns:
            SessionConfig with the discovered data files
        """
        data_dir = workspace / "data"
        if not data_dir.is_dir():
            return cls()

        data_files = sorted(
            path for path in data_dir.iterdir() if path.is_file() and is_supported(path)
        )
        return cls(data_files=data_files)
