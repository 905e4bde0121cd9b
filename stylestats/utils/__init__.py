"""
Utility modules for stylestats.

Contains logging utilities and shared constants.
"""

from .log import setup_logger, get_logger
from .constants import (
    DEFAULT_USER_AGENT,
    DEFAULT_TIMEOUT,
    DEFAULT_CONCURRENCY,
    DEFAULT_OPTIONS,
    NAMED_COLORS,
)

__all__ = [
    "setup_logger",
    "get_logger",
    "DEFAULT_USER_AGENT",
    "DEFAULT_TIMEOUT",
    "DEFAULT_CONCURRENCY",
    "DEFAULT_OPTIONS",
    "NAMED_COLORS",
]
