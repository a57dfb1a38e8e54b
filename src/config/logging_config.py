# src/config/logging_config.py

"""Per-run logging for the storefront.

Every launch writes ``logs/storefront_<timestamp>.log``.  The Textual UI
owns the terminal while it runs, so the stderr handler is only attached
for headless commands; catalog failures and malformed cart data still
land in the run log either way.
"""

import logging
import sys
from datetime import datetime
from pathlib import Path

from src.config.settings import Settings

_FILE_FORMAT = (
    "%(asctime)s | %(levelname)-8s | %(name)s | "
    "%(funcName)s:%(lineno)d | %(message)s"
)

_CONSOLE_FORMAT = "%(levelname)-8s | %(name)s | %(message)s"

_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

ROOT_LOGGER_NAME = "storefront"


def setup_logging(console: bool = True) -> Path:
    """Attach the run-log handlers to the ``storefront`` logger tree.

    Args:
        console: Also echo WARNING+ records to stderr.  Pass ``False``
            when the TUI is about to take over the terminal.

    Returns:
        Path of the log file for this run.
    """
    Settings.LOGS_DIR.mkdir(parents=True, exist_ok=True)
    stamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    log_file = Settings.LOGS_DIR / f"storefront_{stamp}.log"

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(logging.DEBUG)

    # Already configured in this process (tests, repeated launches)
    if root_logger.handlers:
        return log_file

    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(
        logging.Formatter(_FILE_FORMAT, datefmt=_DATE_FORMAT)
    )
    root_logger.addHandler(file_handler)

    if console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(logging.WARNING)
        console_handler.setFormatter(logging.Formatter(_CONSOLE_FORMAT))
        root_logger.addHandler(console_handler)

    root_logger.info("Logging initialised, run log at %s", log_file)
    return log_file
