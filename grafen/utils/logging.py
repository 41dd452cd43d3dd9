"""
Console and file logging for scripts built on the package.

Library modules only create their loggers with `logging.getLogger(__name__)`
and never attach handlers. Call `setup_logging` once from a script or a
notebook to see their messages.
"""

import logging
import sys
from typing import List, Optional

PACKAGE_LOGGER = "grafen"

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%H:%M:%S'


def _build_handlers(level: int, log_file: Optional[str]) -> List[logging.Handler]:
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]

    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)

    return handlers


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Send messages of all package modules to stdout and optionally a file.

    Calling it again replaces the handlers of an earlier call, which are
    closed first.

    Parameters
    ----------
    level : int
        Level of the package logger and its handlers, e.g. `logging.DEBUG`.
    log_file : str, optional
        Path of a log file, overwritten on every call.

    Returns
    -------
    logger : logging.Logger
        The package logger.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    for handler in _build_handlers(level, log_file):
        logger.addHandler(handler)

    target = f"stdout and {log_file}" if log_file else "stdout"
    logger.debug(f"Logging to {target} at level {logging.getLevelName(level)}")

    return logger
