"""Command-line interface for the book library command processor."""

import argparse
import logging
import sys
from pathlib import Path

from .config import SessionConfig
from .data import LibraryData
from .exceptions import FileOperationError, InvalidDataError
from .session import LibrarySession


def setup_logging(verbosity: int = 0) -> None:
    """Configure logging for the CLI application.

    Args:
        verbosity: Logging verbosity level (0=WARNING, 1=INFO, 2+=DEBUG)
    """
    level = {0: logging.WARNING, 1: logging.INFO}.get(verbosity, logging.DEBUG)
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s:%(lineno)d – %(message)s",
    )


def build_config(args: argparse.Namespace) -> SessionConfig:
    """Combine workspace data files with files given via ``--data``."""
    config = SessionConfig.from_workspace(Path(args.workspace))
    config.data_files.extend(Path(path) for path in args.data or [])
    return config


def load_library(config: SessionConfig) -> LibraryData:
    """Create the library and load every configured data file into it.

    Raises:
        FileOperationError: If a data file cannot be read
        InvalidDataError: If a data file is invalid
    """
    logger = logging.getLogger(__name__)
    data = LibraryData()

    for path in config.data_files:
        data.load_data(path)

    logger.info(f"Library ready with {len(data)} entries")
    return data


def cmd_shell(args: argparse.Namespace) -> None:
    """Run an interactive command session."""
    logger = logging.getLogger(__name__)
    config = build_config(args)

    try:
        data = load_library(config)
    except (FileOperationError, InvalidDataError) as e:
        logger.error(f"Failed to load library data: {e}")
        sys.exit(1)

    session = LibrarySession(data, prompt=config.prompt)
    session.run()
    sys.exit(0)


def cmd_run(args: argparse.Namespace) -> None:
    """Execute the commands in a script file, one per line."""
    logger = logging.getLogger(__name__)
    config = build_config(args)
    script_path = Path(args.script)

    try:
        data = load_library(config)
        with open(script_path, encoding="utf-8") as f:
            lines = f.read().splitlines()
    except OSError as e:
        logger.error(f"Failed to read script {script_path}: {e}")
        sys.exit(1)
    except (FileOperationError, InvalidDataError) as e:
        logger.error(f"Failed to load library data: {e}")
        sys.exit(1)

    logger.info(f"Running {len(lines)} lines from {script_path}")

    session = LibrarySession(data)
    failures = session.run_script(lines)

    if failures:
        logger.error(f"✗ {failures} command(s) failed")
        sys.exit(1)

    logger.info("✓ All commands completed")
    sys.exit(0)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="booklib",
        description="Command processor for an in-memory book library: add, list, search, remove.",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase verbosity (use -v for INFO, -vv for DEBUG)",
    )

    parser.add_argument(
        "--workspace",
        type=str,
        default=".",
        help="Path to the workspace directory; data/ files are loaded (default: current directory)",
    )

    parser.add_argument(
        "--data",
        action="append",
        metavar="FILE",
        help="Additional .csv, .bib or .json data file to load (may be repeated)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # shell subcommand
    shell_parser = subparsers.add_parser("shell", help="Start an interactive command session")
    shell_parser.set_defaults(func=cmd_shell)

    # run subcommand
    run_parser = subparsers.add_parser("run", help="Execute commands from a script file")
    run_parser.add_argument("script", type=str, help="File with one command per line")
    run_parser.set_defaults(func=cmd_run)

    return parser


def main() -> None:
    """Main entry point for the booklib CLI."""
    parser = create_parser()
    args = parser.parse_args()

    # Setup logging based on verbosity
    setup_logging(args.verbose)

    # Handle case where no subcommand is provided
    if not hasattr(args, "func"):
        parser.print_help()
        sys.exit(1)

    # Execute the subcommand
    args.func(args)


if __name__ == "__main__":
    main()
