# src/taskgrid/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, starts the background loader for the
one-time fetch, then runs the console page in the main thread.
"""

from __future__ import annotations

import logging

from ..cli.bootstrap import create_initial_state, start_initial_load
from ..config import get_settings
from ..logging_setup import setup_logging
from .console import run_console_loop

logger = logging.getLogger(__name__)


def _shutdown(state) -> None:
    """Best-effort shutdown (no exceptions should escape)."""
    loader = getattr(state, "loader", None)
    if loader is None:
        return
    try:
        loader.stop()
        loader.join(timeout=5.0)
    except Exception:
        logger.debug("Loader shutdown failed.", exc_info=True)


def main() -> None:
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "WARNING")).upper()
    console_level = getattr(logging, level_name, logging.WARNING)
    log_file = setup_logging(log_dir=settings.data_dir, console_level=console_level)

    logger.info("Starting %s (log file: %s)...", settings.app_name, log_file)

    state = create_initial_state(settings=settings)
    start_initial_load(state)

    try:
        run_console_loop(state)
    finally:
        _shutdown(state)
        logger.info("Bye.")


if __name__ == "__main__":
    main()
