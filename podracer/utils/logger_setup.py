"""
Logging setup for the pod racer.

stdout carries referee commands, so console output always goes to stderr.
"""

from datetime import datetime, timezone
import os
import sys

from loguru import logger


def setup_logger(
    level: str = "INFO",
    log_dir: str | None = None,
    rotation: str = "50 MB",
    retention: str = "7 days",
    enable_colors: bool = True,
) -> str | None:
    """
    Set up console logging on stderr and, optionally, a rotating log file.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_dir: Directory for log files; None disables file logging
        rotation: Log rotation policy (e.g., "50 MB", "1 day")
        retention: Log retention policy (e.g., "7 days", "1 month")
        enable_colors: Whether to enable colored console output

    Returns:
        Path to the log file, or None when file logging is disabled
    """
    # Remove any existing handlers to avoid duplicates
    logger.remove()

    colorize = enable_colors and sys.stderr.isatty()
    if colorize:
        console_format = (
            "<green>{time:HH:mm:ss.SSS}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<yellow>{line}</yellow> | "
            "<level>{message}</level>"
        )
    else:
        console_format = "{time:HH:mm:ss.SSS} | {level: <8} | {name}:{line} | {message}"

    logger.add(
        sys.stderr,
        level=level,
        format=console_format,
        colorize=colorize,
        backtrace=True,
        diagnose=False,
    )

    if log_dir is None:
        logger.debug("[logger] Level: {}, colors: {}", level, colorize)
        return None

    os.makedirs(log_dir, exist_ok=True)
    timestamp = datetime.now(timezone.utc).strftime("%Y%m%d_%H%M%S")
    log_file = os.path.join(log_dir, f"race_{timestamp}.log")

    # enqueue keeps file I/O off the planner thread
    logger.add(
        log_file,
        level=level,
        format="{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} | {message}",
        rotation=rotation,
        retention=retention,
        compression="zip",
        encoding="utf-8",
        enqueue=True,
        backtrace=True,
        diagnose=False,
    )

    logger.debug("[logger] Level: {}, colors: {}, file: {}", level, colorize, log_file)
    return log_file
