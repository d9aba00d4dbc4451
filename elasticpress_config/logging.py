"""
Logging Configuration for the ElasticPress Configuration Accessor

Every module logs through `logging.getLogger(__name__)`. This module installs
the console handler those loggers end up at, using rich for formatting.

Example Usage:
    from elasticpress_config.logging import init_logging

    init_logging(level="DEBUG")
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

console = Console(stderr=True)

VERBOSITY_LEVELS = {
    0: logging.WARNING,
    1: logging.INFO,
    2: logging.DEBUG,
}


def init_logging(level: Optional[str] = None, verbosity: Optional[int] = None) -> None:
    """Initialize logging configuration.

    Args:
        level: Optional logging level name (default: INFO)
        verbosity: Optional verbosity count, overrides level when given
    """
    if verbosity is not None:
        log_level = VERBOSITY_LEVELS.get(verbosity, logging.DEBUG)
    else:
        log_level = logging.getLevelName((level or "INFO").upper())
        if not isinstance(log_level, int):
            log_level = logging.INFO

    # Remove all existing handlers
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    root_logger.setLevel(log_level)

    console_handler = RichHandler(
        console=console,
        show_time=True,
        show_path=False,
        rich_tracebacks=True,
    )
    console_handler.setLevel(log_level)
    console_handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
    root_logger.addHandler(console_handler)

    logging.getLogger("elasticpress_config").setLevel(log_level)

    # Suppress noisy loggers
    logging.getLogger("urllib3").setLevel(logging.WARNING)
    logging.getLogger("asyncio").setLevel(logging.WARNING)

    logging.getLogger(__name__).debug(
        f"Logging configured (level: {logging.getLevelName(log_level)})"
    )
