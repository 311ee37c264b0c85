"""
Logger setup for the hellofn command line
"""

import logging
import os
import sys

from rich.console import Console
from rich.logging import RichHandler

HELLOFN_LOGGER_NAME = "hellofn"
WERKZEUG_LOGGER_NAME = "werkzeug"

LOG_FORMAT = "%(message)s"
DEBUG_LOG_FORMAT = "%(asctime)s | %(message)s"

# Any of these set to a non-empty value turns colours off
COLOR_OPT_OUT_ENV_VARS = ("NO_COLOR", "HELLOFN_NO_COLOR")


def colors_enabled() -> bool:
    if any(os.getenv(name) for name in COLOR_OPT_OUT_ENV_VARS):
        return False
    if os.getenv("TERM") == "dumb":
        return False
    return sys.stderr.isatty()


def _new_handler() -> logging.Handler:
    if colors_enabled():
        return RichHandler(
            console=Console(stderr=True), show_time=False, show_path=False, show_level=False, markup=False
        )
    return logging.StreamHandler()


def configure_logger(name: str, level: int, fmt: str = LOG_FORMAT) -> logging.Logger:
    """
    Sets the level and format of the named logger, giving it a stderr handler on first use.

    The handler is a ``RichHandler`` when stderr is a terminal that allows colours, otherwise a plain
    ``StreamHandler``. Records do not propagate to the root logger.
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        logger.addHandler(_new_handler())

    formatter = logging.Formatter(fmt)
    for handler in logger.handlers:
        handler.setFormatter(formatter)

    logger.setLevel(level)
    logger.propagate = False
    return logger


def configure_cli_logging(debug: bool = False) -> None:
    """
    Logging used by every command: hellofn at INFO, or DEBUG with timestamps, and werkzeug request logs at INFO
    """
    if debug:
        configure_logger(HELLOFN_LOGGER_NAME, logging.DEBUG, DEBUG_LOG_FORMAT)
    else:
        configure_logger(HELLOFN_LOGGER_NAME, logging.INFO)

    configure_logger(WERKZEUG_LOGGER_NAME, logging.INFO)
