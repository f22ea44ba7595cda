"""
Logging configuration for the pin input package.

Importing this module installs the sinks once; call setup_logging() again
to switch level or turn the file sink on at runtime.
"""
import sys
from typing import Optional

from loguru import logger as _logger

from pin_input.config.settings import settings

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} - {message}"


def setup_logging(level: Optional[str] = None, to_file: Optional[bool] = None):
    """
    Install the console sink and, when enabled, a rotating file sink.

    Args:
        level: Minimum level, defaults to settings.LOG_LEVEL
        to_file: Write pin_input.log under LOG_DIR, defaults to settings.LOG_TO_FILE
    """
    level = (level or settings.LOG_LEVEL).upper()
    to_file = settings.LOG_TO_FILE if to_file is None else to_file

    _logger.remove()
    _logger.add(sys.stderr, level=level, format=CONSOLE_FORMAT, colorize=True)

    if to_file:
        settings.LOG_DIR.mkdir(parents=True, exist_ok=True)
        _logger.add(
            settings.LOG_DIR / settings.LOG_FILE,
            level=level,
            format=FILE_FORMAT,
            rotation=settings.LOG_MAX_SIZE,
            retention=settings.LOG_BACKUP_COUNT,
            compression="gz"
        )

    _logger.debug(
        f"pin_input logging at {level}"
        f" (default field: {settings.DEFAULT_PIN_LENGTH} slots,"
        f" font {settings.DEFAULT_FONT_SIZE}px, file sink {'on' if to_file else 'off'})"
    )


setup_logging()

logger = _logger
