"""Centralized logging configuration for Quire."""

from __future__ import annotations

import logging
import sys
from typing import Optional

import click

# Define log levels
LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}

LEVEL_COLORS = {
    logging.DEBUG: "bright_black",
    logging.INFO: "green",
    logging.WARNING: "yellow",
    logging.ERROR: "red",
    logging.CRITICAL: "red",
}


class ColorFormatter(logging.Formatter):
    """
    Formatter that colours the level name the way a terminal user expects.
    
    With ``color=False`` all ANSI styling is stripped, including any the
    message itself carries.
    """

    def __init__(self, *args, color: bool = True, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.color = color

    def format(self, record: logging.LogRecord) -> str:
        levelname = record.levelname
        label = "FATAL" if record.levelno >= logging.CRITICAL else levelname
        record.levelname = f"{label:<8}"
        if self.color:
            record.levelname = click.style(
                record.levelname,
                fg=LEVEL_COLORS.get(record.levelno),
                bold=record.levelno >= logging.CRITICAL,
            )
        try:
            text = super().format(record)
        finally:
            record.levelname = levelname
        return text if self.color else click.unstyle(text)


def _is_tty(stream) -> bool:
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


def setup_logging(level: str = "INFO", verbose: int = 0, quiet: bool = False) -> logging.Logger:
    """
    Configure logging for Quire.
    
    Args:
        level: Base log level (DEBUG, INFO, WARNING, ERROR)
        verbose: Verbosity increment (each level decreases threshold)
        quiet: If True, only show errors
        
    Returns:
        Configured logger instance
    """
    # Determine effective level
    if quiet:
        effective_level = logging.ERROR
    elif verbose == 1:
        effective_level = logging.INFO
    elif verbose >= 2:
        effective_level = logging.DEBUG
    else:
        effective_level = LEVELS.get(level.upper(), logging.INFO)
    
    logger = logging.getLogger("quire")
    logger.setLevel(effective_level)
    logger.handlers.clear()
    
    handler = logging.StreamHandler(sys.stdout)
    color = _is_tty(sys.stdout)
    handler.setLevel(effective_level)
    
    if effective_level <= logging.DEBUG:
        formatter = ColorFormatter(
            "[%(asctime)s] %(levelname)s [%(name)s] %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
            color=color,
        )
    else:
        formatter = ColorFormatter("%(levelname)s %(message)s", color=color)
    
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger instance.
    
    Args:
        name: Logger name (defaults to 'quire')
        
    Returns:
        Logger instance
    """
    if name:
        return logging.getLogger(f"quire.{name}")
    return logging.getLogger("quire")
