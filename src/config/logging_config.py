# src/config/logging_config.py

"""Per-run logging for the catalog tools.

Every launch (TUI, page build, listing, health check) writes its own
file ``logs/catalog_YYYYMMDD_HHMMSS.log``.  All ``catalog.*`` loggers
propagate to the project root logger configured here, so source
attempts, fallbacks and render passes of one run end up side by side.
"""

import logging
import sys
from datetime import datetime
from pathlib import Path

from src.config.settings import Settings

_FILE_FORMAT = (
    "%(asctime)s | %(levelname)-8s | %(name)s | "
    "%(module)s:%(funcName)s:%(lineno)d | %(message)s"
)
_CONSOLE_FORMAT = "%(levelname)-8s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

ROOT_LOGGER_NAME = "catalog"


def setup_logging(verbose: bool = False) -> Path:
    """Attach file and console handlers to the ``catalog`` logger.

    Args:
        verbose: Lower the console threshold from WARNING to INFO.

    Returns:
        The path of the log file for this run.
    """
    logs_dir: Path = Settings.LOGS_DIR
    logs_dir.mkdir(parents=True, exist_ok=True)
    stamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    log_file = logs_dir / f"catalog_{stamp}.log"

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(logging.DEBUG)

    # Repeated calls (tests, TUI relaunch) keep the first handler set
    if root_logger.handlers:
        return log_file

    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(
        logging.Formatter(_FILE_FORMAT, datefmt=_DATE_FORMAT)
    )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(
        logging.INFO if verbose else logging.WARNING
    )
    console_handler.setFormatter(logging.Formatter(_CONSOLE_FORMAT))

    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)
    root_logger.debug("Logging ready, writing to %s", log_file)

    return log_file
