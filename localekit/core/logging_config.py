"""Logging configuration for applications embedding localekit."""

import copy
import logging
import sys

from .config import settings

# Log levels for different components
LOGGING_CONFIG = {
    "localekit": logging.INFO,
    "localekit.core": logging.INFO,
    # Bundle loads log at DEBUG and are noisy on first use
    "localekit.core.resources": logging.WARNING,

    "pydantic": logging.WARNING,
}


class ColoredFormatter(logging.Formatter):
    """Console formatter that colours the level name of each record."""

    LEVEL_COLORS = {
        logging.DEBUG: "36",
        logging.INFO: "32",
        logging.WARNING: "33",
        logging.ERROR: "31",
        logging.CRITICAL: "35",
    }

    def format(self, record: logging.LogRecord) -> str:
        color = self.LEVEL_COLORS.get(record.levelno)
        if color is None:
            return super().format(record)
        # Other handlers share the record, so colour a copy
        tinted = copy.copy(record)
        tinted.levelname = f"\033[{color}m{record.levelname}\033[0m"
        return super().format(tinted)


def setup_logging(level: str | None = None, debug: bool = False) -> None:
    """Install a console handler and apply per-component levels.

    Library code never calls this; it is meant for scripts and applications
    that want the same output format localekit uses in development.
    """
    if debug:
        root_level = logging.DEBUG
    else:
        root_level = logging.getLevelName((level or settings.LOG_LEVEL).upper())
        if not isinstance(root_level, int):
            root_level = logging.INFO

    root_logger = logging.getLogger()
    root_logger.setLevel(root_level)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(root_level)
    console_format = "%(asctime)s %(levelname)-8s %(name)s - %(message)s"
    console_handler.setFormatter(ColoredFormatter(console_format, datefmt="%H:%M:%S"))
    root_logger.addHandler(console_handler)

    for logger_name, component_level in LOGGING_CONFIG.items():
        logger = logging.getLogger(logger_name)
        # debug mode opens every component up
        logger.setLevel(logging.DEBUG if debug else component_level)

    logging.getLogger(__name__).info(
        "Logging configured (level=%s)", logging.getLevelName(root_level)
    )


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance with proper configuration."""
    return logging.getLogger(name)
