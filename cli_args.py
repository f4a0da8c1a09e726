# cli_args.py
"""Command line argument parsing for the perfpages server."""

import argparse
from typing import Optional, Sequence

from db_config import DatabaseConfig, DatabaseMode


def parse_arguments(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command line arguments for the application."""
    parser = argparse.ArgumentParser(description="Serve benchmark test pages")

    parser.add_argument(
        "--in-memory-db",
        action="store_true",
        help="Run the application with an in-memory database",
    )

    parser.add_argument(
        "--port",
        type=int,
        default=5000,
        help="Port to run the server on (default: 5000)",
    )

    parser.add_argument(
        "--host",
        type=str,
        default="127.0.0.1",
        help="Host to bind the server to (default: 127.0.0.1)",
    )

    parser.add_argument(
        "--debug",
        action="store_true",
        help="Run in debug mode",
    )

    return parser.parse_args(argv)


def configure_from_args(args: argparse.Namespace) -> None:
    """Apply database settings chosen on the command line."""
    if args.in_memory_db:
        DatabaseConfig.set_mode(DatabaseMode.MEMORY)
    else:
        DatabaseConfig.set_mode(DatabaseMode.DISK)
