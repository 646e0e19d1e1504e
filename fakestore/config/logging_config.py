# fakestore/config/logging_config.py

"""Logging setup for the fakestore client.

Every ``fakestore.*`` logger writes to one file per launch
(``<logs_dir>/fakestore_<YYYYmmdd_HHMMSS>.log``) at DEBUG, so request
lines and decode diagnostics are always on disk. The terminal only
shows records at the console level, which comes from ``-v`` on the
command line or ``Settings.LOG_LEVEL``.
"""

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import cast

from fakestore.config.settings import Settings

_FILE_FORMAT = (
    "%(asctime)s %(levelname)-8s %(name)s "
    "[%(funcName)s:%(lineno)d] %(message)s"
)
_CONSOLE_FORMAT = "%(levelname)s %(name)s: %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_CONSOLE_HANDLER_NAME = "fakestore-console"
_FILE_HANDLER_NAME = "fakestore-file"


def verbosity_to_level(verbosity: int) -> int:
    """Map a ``-v`` count to a console level (0 means use settings)."""
    if verbosity <= 0:
        level = logging.getLevelName(Settings.LOG_LEVEL.upper())
        return level if isinstance(level, int) else logging.WARNING
    if verbosity == 1:
        return logging.INFO
    return logging.DEBUG


def setup_logging(
    console_level: int | None = None,
    logs_dir: Path | None = None,
) -> Path:
    """Attach the run's file and console handlers to ``fakestore``.

    Args:
        console_level: level for the stderr handler; defaults to
            ``Settings.LOG_LEVEL``.
        logs_dir: directory for the run log; defaults to
            ``Settings.LOGS_DIR``.

    Returns:
        Path of the log file this run writes to. When the logger is
        already configured the existing file is kept and only the
        console level is updated.
    """
    if console_level is None:
        console_level = verbosity_to_level(0)

    root_logger = logging.getLogger("fakestore")
    root_logger.setLevel(logging.DEBUG)

    existing = {h.get_name(): h for h in root_logger.handlers}
    if _FILE_HANDLER_NAME in existing:
        if _CONSOLE_HANDLER_NAME in existing:
            existing[_CONSOLE_HANDLER_NAME].setLevel(console_level)
        file_handler = cast(logging.FileHandler, existing[_FILE_HANDLER_NAME])
        return Path(file_handler.baseFilename)

    logs_dir = logs_dir or Settings.LOGS_DIR
    logs_dir.mkdir(parents=True, exist_ok=True)
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    log_file = logs_dir / f"fakestore_{timestamp}.log"

    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.set_name(_FILE_HANDLER_NAME)
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(
        logging.Formatter(_FILE_FORMAT, datefmt=_DATE_FORMAT)
    )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.set_name(_CONSOLE_HANDLER_NAME)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(logging.Formatter(_CONSOLE_FORMAT))

    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)
    root_logger.debug(
        "Logging to %s (console level %s)",
        log_file,
        logging.getLevelName(console_level),
    )
    return log_file
