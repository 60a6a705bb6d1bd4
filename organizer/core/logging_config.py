"""Logging configuration for the organizer."""

import logging
import sys


def setup_logging(verbose: bool = False) -> None:
    """Send log records to stderr.

    Console status lines go to stdout separately, so the default level is
    WARNING to keep the menu readable. ``verbose`` switches to DEBUG.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler(sys.stderr)],
        force=True,
    )

    # pymongo is chatty at DEBUG (heartbeats, server selection)
    logging.getLogger('pymongo').setLevel(logging.WARNING)
