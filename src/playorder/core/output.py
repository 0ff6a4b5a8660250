"""
Unified output system using Loguru.
Operator messages go to the console and the log file at the same time.
"""

import sys
from pathlib import Path

from loguru import logger

from .console import safe_print

LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{line} | {message}"


def setup_loguru(
    log_file: Path,
    level: str = "INFO",
    rotation_mb: int = 10,
    retention: int = 5,
    console_output: bool = False,
) -> None:
    """
    Configure loguru for file logging, optionally mirrored to stderr.

    Args:
        log_file: Path to log file
        level: Minimum level for file logging (DEBUG, INFO, WARNING, ERROR)
        rotation_mb: Rotate the log file once it reaches this size
        retention: Number of rotated files to keep
        console_output: Whether to also emit log records on stderr
    """
    # Remove default handler
    logger.remove()

    log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        log_file,
        rotation=f"{rotation_mb} MB",
        retention=retention,
        level=level,
        format=LOG_FORMAT,
        enqueue=False,  # Synchronous writes
    )

    if console_output:
        logger.add(sys.stderr, level=level, format="{level}: {message}")

    logger.info(f"Loguru initialized: {log_file} (level={level})")


_STYLE_MAP = {
    "debug": "cyan",
    "info": None,
    "success": "green",
    "warning": "yellow",
    "error": "red",
}


def log(message: str, level: str = "info") -> None:
    """
    Unified logging: writes to the log file AND prints to the console.

    Use this instead of print() for user-facing messages that should also be logged.

    Args:
        message: User-facing message
        level: Log level (debug, info, success, warning, error)
    """
    log_func = getattr(logger, level)
    log_func(message)

    if level != "debug":
        safe_print(message, style=_STYLE_MAP.get(level))
