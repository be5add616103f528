# src/tasklist/cli/main.py

"""
CLI entrypoint.

Initializes logging, opens the task store, then runs the console menu in
the main thread until the user exits.
"""

from __future__ import annotations

import logging

from ..cli.bootstrap import create_initial_state, shutdown
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..errors import StorageError, StorageUnavailable
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main(*, settings=None) -> int:
    settings = settings or get_settings()

    # choose console log level from settings.log_level
    level_name = str(getattr(settings, "log_level", "WARNING")).upper()
    console_level = getattr(logging, level_name, logging.WARNING)

    log_file = setup_logging(log_dir=settings.log_dir, console_level=console_level)
    logger.info("Starting %s (log=%s)...", settings.app_name, log_file)

    try:
        state = create_initial_state(settings=settings)
    except StorageUnavailable as e:
        logger.critical("Cannot start: %s", e.detail)
        return 1

    try:
        run_console_loop(state)
    except StorageError as e:
        logger.critical("Terminating on %s store error: %s", e.kind, e.detail)
        return 1
    finally:
        shutdown(state)
        logger.info("Bye.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
