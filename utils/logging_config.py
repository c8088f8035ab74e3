"""
Logging Setup
Loguru sinks for console and optional rotating log file
"""

import sys
from typing import Optional
from loguru import logger


CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function} - {message}"

# Records bound with always_show=True reach the console at any LOG_LEVEL
announce = logger.bind(always_show=True)


def level_number(level: str) -> int:
    """
    Resolve a loguru level name

    Raises:
        ValueError: If the level does not exist
    """
    return logger.level(level.upper()).no


def configure_logging(level: str = "INFO", log_file: Optional[str] = None):
    """
    Replace loguru's default handler with the deployer sinks

    Args:
        level: Console log level (announced lines are shown regardless)
        log_file: Optional path for a DEBUG-level rotating file sink

    Raises:
        ValueError: Unknown level
        OSError: Log file cannot be opened
    """
    min_level = level_number(level)

    def console_filter(record) -> bool:
        return record["level"].no >= min_level or record["extra"].get("always_show", False)

    logger.remove()
    logger.add(sys.stderr, format=CONSOLE_FORMAT, level="TRACE", filter=console_filter)

    if log_file:
        logger.add(
            log_file,
            rotation="1 day",
            retention="7 days",
            format=FILE_FORMAT,
            level="DEBUG"
        )
