# devil/utils/logging_config.py

"""
logging_config.py

Centralized logging configuration for devil. Console output goes to stderr
because stdout is reserved for command output such as the rendered tree.
"""
import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional, Union

from devil.errors import IOFailure

DEFAULT_LOG_LEVEL = logging.WARNING
DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

LOG_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def get_log_level(level_name):
    """Convert string log level to numeric log level"""
    return LOG_LEVELS.get(str(level_name).upper(), DEFAULT_LOG_LEVEL)


def setup_logging(
    level: Union[int, str] = DEFAULT_LOG_LEVEL,
    log_file: Optional[Path] = None,
    log_to_console: bool = True,
) -> logging.Logger:
    """
    Configure the "devil" package logger.

    Args:
        level: Numeric level or level name.
        log_file: If given, also log to this file with rotation.
        log_to_console: Whether to log to stderr.

    Raises:
        IOFailure: if the log file or its directory cannot be created.

    Returns:
        logging.Logger: The configured package logger
    """
    if isinstance(level, str):
        level = get_log_level(level)

    pkg_logger = logging.getLogger("devil")
    pkg_logger.setLevel(level)

    # Remove any existing handlers
    for handler in pkg_logger.handlers[:]:
        pkg_logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(DEFAULT_LOG_FORMAT)

    if log_to_console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(formatter)
        pkg_logger.addHandler(console_handler)

    if log_file:
        log_file = Path(log_file)
        try:
            log_file.parent.mkdir(parents=True, exist_ok=True)
            file_handler = RotatingFileHandler(
                log_file, maxBytes=10_485_760, backupCount=5, encoding="utf-8"  # 10 MB
            )
        except OSError as e:
            raise IOFailure(f"Cannot open log file {log_file}: {e}") from e
        file_handler.setFormatter(formatter)
        pkg_logger.addHandler(file_handler)

    return pkg_logger
