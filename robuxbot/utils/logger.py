"""Logging setup for RobuxBot."""
import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import List, Optional

_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _replace_handlers(logger: logging.Logger, handlers: List[logging.Handler]) -> None:
    # Re-running setup replaces earlier handlers
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    for handler in handlers:
        logger.addHandler(handler)


def setup_logger(
    log_level: str = "INFO",
    log_file: Optional[str] = None,
    max_size: int = 10485760,
    backup_count: int = 5
) -> logging.Logger:
    """
    Configure the ``robuxbot`` and ``discord`` logger hierarchies.

    Both share the same console and file handlers, since the bot runs
    discord.py with ``log_handler=None``.

    Args:
        log_level: Level name such as "DEBUG" or "INFO"
        log_file: Optional path of a rotating log file
        max_size: Maximum size of one log file in bytes
        backup_count: Number of rotated files to keep

    Returns:
        The configured ``robuxbot`` logger
    """
    level = getattr(logging, str(log_level).upper(), logging.INFO)
    formatter = logging.Formatter(_LOG_FORMAT, _DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    handlers: List[logging.Handler] = [console_handler]

    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=max_size,
            backupCount=backup_count,
            encoding='utf-8'
        )
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    logger = logging.getLogger("robuxbot")
    logger.setLevel(level)
    _replace_handlers(logger, handlers)

    # discord.py is kept quieter than our own loggers
    discord_logger = logging.getLogger("discord")
    discord_logger.setLevel(max(level, logging.INFO))
    _replace_handlers(discord_logger, handlers)

    return logger
