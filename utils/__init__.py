"""
Utilities package for the Gastronome application.

Contains configuration and logging helpers shared by services and UI.
"""

from .config import Config, get_config, reload_config
from .logger import setup_logging, get_logger, log_operation

__all__ = [
    'Config',
    'get_config',
    'reload_config',
    'setup_logging',
    'get_logger',
    'log_operation'
]
