"""
Centralized logging configuration for smartconfig.

Provides colored console output and an optional log file, with separate
loggers for each subsystem (resolver, registry, store, cli).

Debug output is controlled by an explicit LoggingConfig passed to
setup_logging; nothing is read from the process environment.
"""

import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import colorlog

ROOT_LOGGER_NAME = "smartconfig"


@dataclass(frozen=True)
class LoggingConfig:
    """
    Logging settings supplied by the hosting application.

    Attributes:
        level: Base logging level
        debug: Force DEBUG level regardless of ``level``
        log_dir: Directory for the log file. If None, uses ./logs
        log_to_file: Whether to write logs to file
    """

    level: int = logging.INFO
    debug: bool = False
    log_dir: Optional[str] = None
    log_to_file: bool = False

    @property
    def effective_level(self) -> int:
        return logging.DEBUG if self.debug else self.level


def setup_logging(config: Optional[LoggingConfig] = None) -> logging.Logger:
    """
    Configure the ``smartconfig`` logger tree.

    Calling again replaces the handlers installed by the previous call, so
    the most recent configuration always wins.

    Args:
        config: Logging settings. Defaults to INFO on the console only.

    Returns:
        The package root logger
    """
    config = config or LoggingConfig()
    level = config.effective_level

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(level)
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()

    # Console handler with colors
    console_handler = colorlog.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(
        colorlog.ColoredFormatter(
            "%(log_color)s%(asctime)s [%(name)s] %(levelname)-8s%(reset)s %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
            log_colors={
                "DEBUG": "cyan",
                "INFO": "green",
                "WARNING": "yellow",
                "ERROR": "red",
                "CRITICAL": "red,bg_white",
            },
        )
    )
    root_logger.addHandler(console_handler)

    if config.log_to_file:
        log_dir = Path(config.log_dir) if config.log_dir else Path("logs")
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_dir / "smartconfig.log")
        file_handler.setLevel(level)
        file_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s [%(name)s] %(levelname)-8s %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        root_logger.addHandler(file_handler)

    return root_logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for a specific subsystem.

    Loggers propagate to the ``smartconfig`` root, which stays silent until
    the hosting application calls setup_logging.

    Args:
        name: Subsystem name (e.g., 'resolver', 'registry')
    """
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
