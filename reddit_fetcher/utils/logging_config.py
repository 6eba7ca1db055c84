"""
Logging setup shared by every reddit_fetcher module.

All loggers live under the ``reddit`` namespace so one call can retune
them: ``set_log_level`` for verbosity, ``setup_file_logging`` for a log file.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
ROOT_LOGGER = "reddit"


def _formatter() -> logging.Formatter:
    return logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)


def get_logger(name: str, level: int = logging.INFO) -> logging.Logger:
    """
    Get the ``reddit.<name>`` logger, attaching a stdout handler on first use.

    Args:
        name: Short module name (api, fetcher, listing, ...)
        level: Initial level for the logger and its console handler

    Returns:
        The logger
    """
    logger = logging.getLogger(f"{ROOT_LOGGER}.{name}")

    if not logger.handlers:
        console = logging.StreamHandler(sys.stdout)
        console.setLevel(level)
        console.setFormatter(_formatter())
        logger.addHandler(console)
        logger.setLevel(level)

    return logger


def set_log_level(level: int) -> None:
    """Apply ``level`` to every ``reddit.*`` logger created so far and to its handlers."""
    for name, logger in logging.Logger.manager.loggerDict.items():
        if not isinstance(logger, logging.Logger):
            continue
        if name == ROOT_LOGGER or name.startswith(f"{ROOT_LOGGER}."):
            logger.setLevel(level)
            for handler in logger.handlers:
                if not isinstance(handler, logging.FileHandler):
                    handler.setLevel(level)


def setup_file_logging(log_dir: Optional[Path] = None, level: int = logging.DEBUG) -> Path:
    """
    Send everything under the ``reddit`` namespace to ``<log_dir>/reddit.log``.

    Records still have to pass their own logger's level; combine with
    ``set_log_level(logging.DEBUG)`` to capture request traces.

    Args:
        log_dir: Directory for the log file, ./logs when None
        level: Level of the file handler

    Returns:
        Path of the log file
    """
    log_dir = log_dir or Path.cwd() / "logs"
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / "reddit.log"

    handler = logging.FileHandler(log_file)
    handler.setLevel(level)
    handler.setFormatter(_formatter())
    logging.getLogger(ROOT_LOGGER).addHandler(handler)

    return log_file
