"""
Logging utilities for stylestats.

Provides colorful CLI logging using the rich library.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler


# Global console instance (stderr, so reports on stdout stay clean)
console = Console(stderr=True)

# Logger instances cache
_loggers: dict = {}


def setup_logger(
    name: str = "stylestats",
    level: int = logging.INFO,
    log_file: Optional[str] = None
) -> logging.Logger:
    """
    Set up and configure a logger with rich formatting.

    Args:
        name: Logger name
        level: Logging level (default: INFO)
        log_file: Optional file path to write logs

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Close and clear existing handlers
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()

    console_handler = RichHandler(
        console=console,
        show_time=True,
        show_path=False,
        markup=False,
        rich_tracebacks=True
    )
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    console_handler.setLevel(level)
    logger.addHandler(console_handler)

    # File handler if specified
    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )
        file_handler.setLevel(level)
        logger.addHandler(file_handler)

    _loggers[name] = logger
    return logger


def get_logger(name: str = "stylestats") -> logging.Logger:
    """
    Get a component logger.

    Component loggers live under the ``stylestats`` namespace so that
    a single ``setup_logger()`` call configures all of them.

    Args:
        name: Component name (e.g. "selectors") or full logger name

    Returns:
        Logger instance
    """
    if name in _loggers:
        return _loggers[name]
    if name != "stylestats" and not name.startswith("stylestats."):
        name = f"stylestats.{name}"
    return logging.getLogger(name)


def print_status(message: str, style: str = "bold blue") -> None:
    """
    Print a styled status message.

    Args:
        message: Message to print
        style: Rich style string
    """
    console.print(message, style=style, markup=False, highlight=False)


def print_error(message: str) -> None:
    """
    Print an error message.

    Args:
        message: Error message to print
    """
    print_status(f"❌ {message}", "bold red")


def print_success(message: str) -> None:
    """
    Print a success message.

    Args:
        message: Success message to print
    """
    print_status(f"✅ {message}", "bold green")


def print_warning(message: str) -> None:
    """
    Print a warning message.

    Args:
        message: Warning message to print
    """
    print_status(f"⚠️ {message}", "bold yellow")
