# src/config/logging_config.py

"""Per-run timestamped logging configuration for ring_catalog.

Every launch (API server, headless listing or TUI) writes to its own
file inside ``logs/``, e.g. ``logs/run_20260214_153045.log``.  The
``ring_catalog.*`` loggers and uvicorn's own loggers share that file, so
request access lines sit next to the gold price refresh messages.
"""

import logging
import sys
from datetime import datetime
from pathlib import Path

from src.config.settings import Settings

_DETAILED_FORMAT = (
    "%(asctime)s | %(levelname)-8s | %(name)s | %(module)s:%(funcName)s:%(lineno)d | "
    "%(message)s"
)

_CONSOLE_FORMAT = "%(asctime)s | %(levelname)-8s | %(message)s"

_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Third-party loggers that should land in the per-run file as well.
_FOREIGN_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def setup_logging(console_level: int = logging.WARNING) -> Path:
    """Initialise the root ``ring_catalog`` logger for the current run.

    Args:
        console_level: Threshold for the stderr handler.  The server
            passes ``logging.INFO`` so price updates show up live.

    Returns:
        The :class:`~pathlib.Path` to the log file created for this run.
    """
    logs_dir: Path = Settings.LOGS_DIR
    logs_dir.mkdir(parents=True, exist_ok=True)

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    log_file = logs_dir / f"run_{timestamp}.log"

    root_logger = logging.getLogger("ring_catalog")
    root_logger.setLevel(logging.DEBUG)

    # Repeated calls must not stack handlers
    if root_logger.handlers:
        return log_file

    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(
        logging.Formatter(_DETAILED_FORMAT, datefmt=_DATE_FORMAT)
    )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(
        logging.Formatter(_CONSOLE_FORMAT, datefmt=_DATE_FORMAT)
    )

    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)

    for name in _FOREIGN_LOGGERS:
        foreign = logging.getLogger(name)
        foreign.setLevel(logging.INFO)
        foreign.addHandler(file_handler)

    root_logger.info("Logging initialised — log file: %s", log_file)

    return log_file
