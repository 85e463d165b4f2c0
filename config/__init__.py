"""
Configuration module for the Strategic Advisor dispatch service.

Settings are imported from config.settings directly so that importing
constants or loggers never reads the environment.
"""
from .constants import *
from .logging_config import setup_logger, get_logger, logger

__all__ = [
    # Logging
    'setup_logger',
    'get_logger',
    'logger',
    # Constants
    'OUTPUT_FORMATS',
    'DEFAULT_OUTPUT_FORMAT',
    'FOOTER_TEXT',
    'TIMESTAMP_FORMAT',
    'SYSTEM_PROMPT',
]
