"""Command line entry point."""

import argparse
import logging
from typing import List, Optional

from organizer import __version__
from organizer.core.config import DATABASE_NAME, MONGODB_URI, OrganizerSettings
from organizer.core.console import FAILURE, status
from organizer.core.logging_config import setup_logging
from organizer.db.database import MongoDatabaseManager
from organizer.services import EventService, NoteService, TaskService

from .menu import OrganizerMenu

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="organizer",
        description="Personal organizer for tasks, events and notes stored in MongoDB",
    )
    parser.add_argument("--uri", default=MONGODB_URI, help=f"MongoDB connection string (default: {MONGODB_URI})")
    parser.add_argument("--database", default=DATABASE_NAME, help=f"Database name (default: {DATABASE_NAME})")
    parser.add_argument("--timeout-ms", type=int, default=3000, help="Server selection timeout in milliseconds")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output to stderr")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Run the menu. Always returns 0; failures are reported on the console."""
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)

    try:
        settings = OrganizerSettings(
            mongodb_uri=args.uri,
            database_name=args.database,
            server_selection_timeout_ms=args.timeout_ms,
        )
        with MongoDatabaseManager(settings) as db_manager:
            menu = OrganizerMenu(
                TaskService(db_manager),
                EventService(db_manager),
                NoteService(db_manager),
            )
            menu.run()
    except Exception as e:
        logger.exception("Unexpected error in organizer")
        print(status(FAILURE, f"Unexpected error: {e}"))
    print("👋 Goodbye!")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
