"""
Logging configuration shared by the client modules.

Usage:
    from .logging_config import get_logger

    logger = get_logger(__name__)
    logger.info("Fetched 5 passes")
"""

import logging
import sys
from typing import Optional, Union

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: Union[int, str] = logging.INFO, log_file: Optional[str] = None) -> None:
    """
    Configure logging for the application.

    Parameters
    ----------
    level : int or str
        Logging level, e.g. logging.DEBUG or "INFO"
    log_file : str, optional
        Path to a log file. If None, logs only to the console.
    """
    handlers = [logging.StreamHandler(sys.stdout)]

    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        handlers=handlers,
        force=True,
    )


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for a client module.

    Parameters
    ----------
    name : str
        Name of the logger, normally ``__name__``

    Returns
    -------
    logging.Logger
        Logger that writes through the handlers set by configure_logging
    """
    return logging.getLogger(name)
