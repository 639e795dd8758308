"""Diagnostic log file setup.

The diagnostic log is a side file for start-up and operational messages.
It is never read back and is unrelated to the journal itself.
"""

import logging
from pathlib import Path

LOGGER_NAME = "jrny"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(log_file: Path, level: int = logging.INFO) -> bool:
    """Send jrny's log records to ``log_file`` (appending).

    Args:
        log_file: Diagnostic log path; created if missing.
        level: Minimum level to record.

    Returns:
        False if the file could not be opened. Logging is then left
        disabled and the caller may carry on.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    try:
        handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
    except OSError:
        logger.addHandler(logging.NullHandler())
        return False

    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    return True
