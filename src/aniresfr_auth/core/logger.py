"""
Logging configuration for the NGO portal authentication client.

Warnings go to the console. A detailed log file is written only when one is
asked for, so a plain CLI run leaves nothing behind in the working directory.
"""

import logging
import os
import time
from pathlib import Path
from typing import Optional

CONSOLE_FORMAT = "%(levelname)s: %(message)s"
FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logger(
    name: str = "aniresfr_auth",
    log_file: Optional[str] = None,
    log_level: str = "INFO",
    console_level: str = "WARNING"
) -> logging.Logger:
    """
    Set up the application logger.

    Args:
        name: Logger name
        log_file: Path to a log file. Falls back to the LOG_FILE env var;
                  without either, only the console handler is installed.
        log_level: Level of the logger and of the file handler
        console_level: Level of the console handler

    Returns:
        Configured logger instance
    """
    log_file = log_file or os.getenv("LOG_FILE")

    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))

    # Close handlers from an earlier call so files are not left open
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler()
    console_handler.setLevel(getattr(logging, console_level.upper(), logging.WARNING))
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file).expanduser()
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_path, mode="a", encoding="utf-8")
        file_handler.setLevel(logger.level)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(file_handler)

    logger.propagate = False

    return logger


class LoggerContext:
    """
    Logs one authentication attempt with its duration and outcome.

    Call ``record`` with the attempt's outcome before the block ends; an
    attempt that never records one is logged as unfinished.
    """

    def __init__(self, logger: logging.Logger, operation: str):
        """
        Initialize logger context.

        Args:
            logger: Logger instance
            operation: Name of the attempt, e.g. "login"
        """
        self.logger = logger
        self.operation = operation
        self.outcome = None
        self._started: Optional[float] = None

    def record(self, outcome) -> None:
        """Remember the ``AuthSuccess``/``AuthFailure`` of the attempt."""
        self.outcome = outcome

    def __enter__(self):
        self._started = time.monotonic()
        self.logger.debug(f"Starting {self.operation}")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        duration = time.monotonic() - self._started

        if exc_type is not None:
            self.logger.error(
                f"{self.operation} crashed after {duration:.2f}s: {exc_val}",
                exc_info=True
            )
            return False

        if self.outcome is None:
            self.logger.warning(f"{self.operation} finished after {duration:.2f}s without an outcome")
        elif self.outcome.ok:
            self.logger.info(f"{self.operation} succeeded in {duration:.2f}s")
        else:
            self.logger.info(
                f"{self.operation} failed in {duration:.2f}s "
                f"({self.outcome.kind.value}): {self.outcome.message}"
            )
        return False
