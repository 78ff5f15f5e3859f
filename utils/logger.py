"""
Logging utilities for the Gastronome application.

Every module logs under the "gastronome" namespace; setup_logging attaches a
console handler and a rotating log file to that namespace once per process.
"""

import logging
import logging.handlers
import sys
import time
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

from .config import Config, get_config

LOGGER_NAMESPACE = "gastronome"

# Third-party loggers that are noisy at INFO
QUIET_LIBRARIES = ("streamlit", "watchdog")

CONSOLE_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
FILE_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(pathname)s:%(lineno)d - %(message)s'


def _resolve_level(name: str) -> int:
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else logging.INFO


def _console_handler() -> logging.Handler:
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(CONSOLE_FORMAT, datefmt='%H:%M:%S'))
    handler.setLevel(logging.INFO)
    return handler


def _file_handler(log_file: str, level: int) -> logging.Handler:
    Path(log_file).parent.mkdir(parents=True, exist_ok=True)
    handler = logging.handlers.RotatingFileHandler(
        log_file,
        maxBytes=5 * 1024 * 1024,  # 5 MB
        backupCount=3,
        encoding='utf-8'
    )
    handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))
    handler.setLevel(level)
    return handler


def setup_logging(config: Optional[Config] = None, log_level: Optional[str] = None,
                  log_file: Optional[str] = None) -> logging.Logger:
    """
    Attach console and rotating file output to the application logger.

    Args:
        config: Settings to read defaults from (global config if omitted)
        log_level: Overrides config.log_level
        log_file: Overrides config.log_file

    Returns:
        The namespace logger. Calling again replaces its handlers.
    """
    config = config or get_config()
    log_file = log_file or config.log_file
    level = _resolve_level(log_level or config.log_level)

    logger = logging.getLogger(LOGGER_NAMESPACE)
    logger.setLevel(level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    logger.addHandler(_console_handler())
    logger.addHandler(_file_handler(log_file, level))

    for library in QUIET_LIBRARIES:
        logging.getLogger(library).setLevel(logging.WARNING)

    logger.info(f"Logging initialized - Level: {logging.getLevelName(level)}, File: {log_file}")
    return logger


def get_logger(name: str) -> logging.Logger:
    """Logger for a module (pass __name__)"""
    return logging.getLogger(f"{LOGGER_NAMESPACE}.{name}")


@contextmanager
def log_operation(logger: logging.Logger, operation: str,
                  level: int = logging.DEBUG) -> Iterator[None]:
    """
    Log the start, completion time and failure of a block.

    Exceptions are logged at ERROR and re-raised.
    """
    start = time.perf_counter()
    logger.log(level, f"Starting: {operation}")
    try:
        yield
    except Exception as e:
        logger.error(f"Failed: {operation} ({time.perf_counter() - start:.2f}s) - {e}")
        raise
    logger.log(level, f"Completed: {operation} ({time.perf_counter() - start:.2f}s)")
