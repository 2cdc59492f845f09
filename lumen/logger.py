"""Process-wide logger writing to the console and a timestamped file."""

from __future__ import annotations

import logging
import sys
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import datetime
from pathlib import Path

TRACE = 5
logging.addLevelName(TRACE, "TRACE")

LOGGER_NAME = "lumen"
DEFAULT_LOG_DIR = "Logs"
_FORMAT = "[%(asctime)s.%(msecs)03d][%(levelname)s][%(name)s] %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_lock = threading.Lock()
_configured = False


class _Formatter(logging.Formatter):
    """Formatter that prints level names in lower case."""

    def format(self, record: logging.LogRecord) -> str:
        record = logging.makeLogRecord(record.__dict__)
        record.levelname = record.levelname.lower()
        return super().format(record)


def log_file_name(moment: datetime | None = None) -> str:
    """Name of the log file for *moment* (now by default)."""
    t = moment or datetime.now()
    return (
        f"Lumen-Log-{t.year}.{t.month}.{t.day}-"
        f"{t.hour}.{t.minute}.{t.second}.log"
    )


def get_logger(log_dir: str | Path | None = None) -> logging.Logger:
    """Return the shared logger, setting it up on the first call.

    The first call decides the log directory; later calls return the same
    logger unchanged.
    """
    global _configured
    logger = logging.getLogger(LOGGER_NAME)
    with _lock:
        if _configured:
            return logger
        formatter = _Formatter(_FORMAT, _DATE_FORMAT)

        console = logging.StreamHandler(sys.stdout)
        console.setLevel(TRACE)
        console.setFormatter(formatter)

        directory = Path(log_dir if log_dir is not None else DEFAULT_LOG_DIR)
        directory.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(
            directory / log_file_name(), mode="w", encoding="utf-8"
        )
        file_handler.setLevel(TRACE)
        file_handler.setFormatter(formatter)

        logger.addHandler(console)
        logger.addHandler(file_handler)
        logger.setLevel(TRACE)
        logger.propagate = False
        _configured = True
        return logger


@contextmanager
def scope_info(info: str, logger: logging.Logger | None = None) -> Iterator[None]:
    """Log "<info> begin" on entry and "<info> done" on exit."""
    log = logger if logger is not None else get_logger()
    log.info(f"{info} begin")
    try:
        yield
    finally:
        log.info(f"{info} done")