"""
Logging configuration module for aoc-session.

Library modules only call ``logging.getLogger(__name__)``; handlers are
attached by the application through ``setup_logger``.
"""
import sys
import logging
from pathlib import Path
from typing import Optional


class ColoredFormatter(logging.Formatter):
    """A custom formatter that adds colors to log messages."""

    SH_DEFAULT = "\033[0m" if "win" not in sys.platform else ""
    SH_YELLOW = "\033[33m" if "win" not in sys.platform else ""
    SH_BG_RED = "\033[41m" if "win" not in sys.platform else ""
    SH_BG_YELLOW = "\033[43m" if "win" not in sys.platform else ""
    SH_BLUE = "\033[34m" if "win" not in sys.platform else ""

    LEVEL_COLORS = {
        logging.DEBUG: SH_BLUE,
        logging.INFO: SH_YELLOW,
        logging.WARNING: SH_BG_YELLOW,
        logging.ERROR: SH_BG_RED,
        logging.CRITICAL: SH_BG_RED,
    }

    LEVEL_PREFIXES = {
        logging.DEBUG: "[D]",
        logging.INFO: "[*]",
        logging.WARNING: "[-]",
        logging.ERROR: "[#]",
        logging.CRITICAL: "[!]",
    }

    def format(self, record):
        """Format the log record with colors and prefixes."""
        color = self.LEVEL_COLORS.get(record.levelno, self.SH_DEFAULT)
        prefix = self.LEVEL_PREFIXES.get(record.levelno, "[?]")
        formatted_time = self.formatTime(record, self.datefmt)

        # Errors keep the background color for the whole line
        if record.levelno >= logging.ERROR:
            return f"[{formatted_time}] {color}{prefix} {record.getMessage()}{self.SH_DEFAULT}"
        return f"[{formatted_time}] {color}{prefix}{self.SH_DEFAULT} {record.getMessage()}"


def setup_logger(
    name: str = "aoc_session", level: str = "WARNING", log_file: Optional[str] = None
) -> logging.Logger:
    """
    Set up a logger with the specified name and level.

    Args:
        name: The name of the logger
        level: The logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Write plain records to this file instead of the console

    Returns:
        Configured logger instance
    """
    numeric_level = getattr(logging, level.upper(), logging.WARNING)

    logger = logging.getLogger(name)
    logger.setLevel(numeric_level)

    # Remove existing handlers to avoid duplicates
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()

    handler: logging.Handler
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(log_file, encoding="utf-8")
        handler.setFormatter(
            logging.Formatter(
                fmt="[%(asctime)s] %(levelname)s %(name)s: %(message)s",
                datefmt="%d/%b/%Y %H:%M:%S",
            )
        )
    else:
        # stdout carries the session value
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(ColoredFormatter(datefmt="%d/%b/%Y %H:%M:%S"))

    handler.setLevel(numeric_level)
    logger.addHandler(handler)

    return logger


def get_logger(name: str = "aoc_session") -> logging.Logger:
    """Get an existing logger or create a new one if it doesn't exist."""
    return logging.getLogger(name)


def set_log_level(level: str, logger_name: str = "aoc_session") -> None:
    """
    Set the log level for an existing logger.

    Args:
        level: The logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        logger_name: The name of the logger to modify
    """
    numeric_level = getattr(logging, level.upper(), logging.WARNING)
    logger = logging.getLogger(logger_name)
    logger.setLevel(numeric_level)

    for handler in logger.handlers:
        handler.setLevel(numeric_level)


def get_valid_log_levels() -> list:
    """Return a list of valid log level names."""
    return ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
