"""
Core utilities for the NGO portal authentication client.

Provides configuration management and logging functionality.
"""

from .config import Config
from .logger import setup_logger, LoggerContext
from . import constants

__all__ = [
    "Config",
    "setup_logger",
    "LoggerContext",
    "constants",
]
