"""
Logging Configuration
Sets up the package logger for the command-line tool.

Log records go to stderr so that stdout carries nothing but the computed
volume and can be piped into other tools.
"""
import logging
import sys
from typing import Optional, TextIO

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%H:%M:%S'


def setup_logging(
    level: int = logging.WARNING,
    log_file: Optional[str] = None,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """
    Configures the logger for the 'cuboidreboot' namespace.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path to save logs to a file. The file handler always
                  records DEBUG detail, independent of the console level.
        stream: Console stream, defaults to sys.stderr at call time.

    Returns:
        The configured package logger.

    Raises:
        OSError: If ``log_file`` cannot be opened. The console handler is
                 already installed at that point, so the error can be logged.
    """
    logger = logging.getLogger("cuboidreboot")
    logger.setLevel(logging.DEBUG if log_file else level)

    # Drop handlers from a previous call (repeated runs in one process)
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug(f"Logging initialized (console level {logging.getLevelName(level)}).")
    return logger
