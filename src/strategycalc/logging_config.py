"""
Logging Configuration
Sets up the package logger used by the calculator and its command-line runner.
"""
import logging
import sys
from typing import Optional

PACKAGE_LOGGER = "strategycalc"


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[str] = None,
    name: str = PACKAGE_LOGGER,
) -> logging.Logger:
    """
    Configures the logger for the 'strategycalc' namespace (or a sub-namespace,
    e.g. 'strategycalc.controller' to trace only sync and generation).

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path to also write a run log to.
        name: Logger to configure.

    Returns:
        The configured logger.
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Re-running the CLI in one process must not stack handlers
    if logger.hasHandlers():
        logger.handlers.clear()

    # Format: Time - Module - Level - Message
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        # The run log keeps every propagation/draw detail regardless of console level
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
        logger.setLevel(logging.DEBUG)

    logger.debug(f"Logging initialized for '{name}'.")
    return logger
