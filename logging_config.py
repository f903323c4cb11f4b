"""
Logging Configuration
Sets up the loggers for the gear scanner packages.
"""
import logging
import sys
from typing import Optional, Union

PACKAGE_LOGGERS = ("schematic", "scanner", "exporters", "cli")


def setup_logging(level: Union[int, str] = logging.WARNING, log_file: Optional[str] = None) -> None:
    """
    Configures the loggers of the scanner packages.

    Args:
        level: Logging level (e.g. logging.DEBUG or "INFO")
        log_file: Optional path to save logs to a file.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())

    # Format: Time - Module - Level - Message
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    # stdout carries the result, so logs go to stderr
    handlers = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)

    for name in PACKAGE_LOGGERS:
        logger = logging.getLogger(name)
        logger.setLevel(level)

        # Avoid duplicate logs when main() runs more than once in a process
        for old in list(logger.handlers):
            logger.removeHandler(old)
            old.close()

        for handler in handlers:
            logger.addHandler(handler)

    logging.getLogger("cli").debug("Logging initialized.")
