"""Logging utilities for the inventory system."""

import logging
import os
import sys
from typing import Optional, Union

from ..constants.game_constants import DEFAULT_LOG_LEVEL, LOGGER_NAME

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


class InventoryLogger:
    """Custom logger for the inventory system.

    Console output goes to stderr; stdout is reserved for the demo transcript.
    """

    def __init__(self, name: str = LOGGER_NAME, level: Union[int, str] = DEFAULT_LOG_LEVEL):
        """Initialize the logger."""
        self.logger = logging.getLogger(name)

        if not self.logger.handlers:
            self.logger.setLevel(level)
            self._setup_handlers()

    def _setup_handlers(self):
        """Set up the console handler."""
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(logging.DEBUG)
        console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        self.logger.addHandler(console_handler)

    def configure(self, level: Union[int, str], log_file: Optional[str] = None):
        """Set the log level and optionally log to a file as well.

        Args:
            level: A logging level number or name such as "DEBUG".
            log_file: Path of a log file. Any previous file handler is replaced.
        """
        self.logger.setLevel(level)

        for handler in list(self.logger.handlers):
            if isinstance(handler, logging.FileHandler):
                self.logger.removeHandler(handler)
                handler.close()

        if log_file:
            log_dir = os.path.dirname(log_file)
            if log_dir:
                os.makedirs(log_dir, exist_ok=True)
            file_handler = logging.FileHandler(log_file)
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
            self.logger.addHandler(file_handler)

    def debug(self, message: str, *args, **kwargs):
        """Log debug message."""
        self.logger.debug(message, *args, **kwargs)

    def info(self, message: str, *args, **kwargs):
        """Log info message."""
        self.logger.info(message, *args, **kwargs)

    def warning(self, message: str, *args, **kwargs):
        """Log warning message."""
        self.logger.warning(message, *args, **kwargs)

    def error(self, message: str, *args, **kwargs):
        """Log error message."""
        self.logger.error(message, *args, **kwargs)

    def critical(self, message: str, *args, **kwargs):
        """Log critical message."""
        self.logger.critical(message, *args, **kwargs)

    def item_action(self, action: str, item_name: str, details: str = ""):
        """Log an inventory change for one item."""
        message = f"ITEM[{item_name}] {action}"
        if details:
            message += f" - {details}"
        self.info(message)


def get_logger(name: str = LOGGER_NAME) -> InventoryLogger:
    """Get a logger instance."""
    return InventoryLogger(name)
