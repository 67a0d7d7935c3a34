# src/dbhotel/infrastructure/logging.py
"""
Logging configuration module for dbhotel.

Uses Loguru as backend. This module provides two functions:
- setup_logging(): configures the logger at application startup
- get_logger(name): gets a logger "bound" with the module name

Loguru has ONE global logger. Modules never create their own instance; they
call get_logger(__name__), which is `logger.bind(name=__name__)`, so every
record carries the module that emitted it in `extra[name]`.

Level usage in this package:

DEBUG:
    - Pool parameters and the session initialization statement

INFO:
    - Pool created (url, user, pool name). Passwords are never logged.

WARNING:
    - Connection verification failed
    - Configuration section missing, defaults used
"""

from loguru import logger
from pathlib import Path
import sys


# Flag to prevent multiple setups
_is_configured = False


def setup_logging(
    level: str = "INFO",
    console_level: str = "DEBUG",
    log_dir: str = "logs",
    log_filename: str = "dbhotel.log"
) -> None:
    """
    Configure logging for the application.

    Call this function ONCE at app startup (e.g. in main.py).
    Subsequent calls are ignored.

    Args:
        level: Minimum level for FILE. Default: "INFO"
        console_level: Minimum level for CONSOLE. Default: "DEBUG"
        log_dir: Directory for log files. Created if it doesn't exist.
        log_filename: Name of log file. Default: "dbhotel.log"

    Behavior:
        - Removes Loguru's default handler
        - Adds FILE handler (with 50 MB rotation, 7 days retention)
        - Adds CONSOLE handler (with colors)
    """
    global _is_configured

    if _is_configured:
        return

    log_path = Path(log_dir)
    log_path.mkdir(parents=True, exist_ok=True)

    logger.remove()

    # {extra[name]} comes from the bind() in get_logger()
    log_format = (
        "{time:YYYY-MM-DD HH:mm:ss.SSS} | "
        "{level:<8} | "
        "{extra[name]}:{function}:{line} | "
        "{message}"
    )

    logger.add(
        sink=log_path / log_filename,
        level=level,
        format=log_format,
        rotation="50 MB",
        retention="7 days",
        encoding="utf-8",
    )

    console_format = (
        "<level>{level:<8}</level> | "
        "<cyan>{extra[name]}</cyan>:<cyan>{function}</cyan> | "
        "{message}"
    )

    logger.add(
        sink=sys.stderr,
        level=console_level,
        format=console_format,
        colorize=True,
    )

    _is_configured = True

    logger.bind(name="logging_config").info(
        f"Logging configured - file={level}, console={console_level}, path={log_path / log_filename}"
    )


def get_logger(name: str):
    """
    Get a logger with the module name bound.

    Args:
        name: Module name. Always use __name__ for consistency.

    Returns:
        Loguru logger with bound name.

    Example:
        from dbhotel.infrastructure.logging import get_logger

        logger = get_logger(__name__)
        logger.info("Pool created")
    """
    return logger.bind(name=name)
