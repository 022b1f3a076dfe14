#!/usr/bin/env python3
"""
Centralized logging configuration.

bootstrap_logging() is called once by the command entry point. It honours
LOG_LEVEL and an optional logging.ini in the working directory, using
Python's native INI format.
"""

import logging
import logging.config
import os
import sys
from pathlib import Path
from typing import Optional

LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']


def _find_logging_config() -> Optional[Path]:
    """
    Find the logging configuration file.

    Returns:
        Path to logging.ini in the current working directory, or None if not found.
    """
    config_path = Path('logging.ini')
    if config_path.exists():
        return config_path
    return None


def _setup_environment_variables():
    """
    Set LOG_LEVEL to INFO if not already set, ensuring the INI file has a valid value.
    """
    if 'LOG_LEVEL' not in os.environ:
        os.environ['LOG_LEVEL'] = 'INFO'

    log_level = os.environ['LOG_LEVEL'].strip().upper()
    if log_level not in LOG_LEVELS:
        print(f"Warning: Invalid LOG_LEVEL '{log_level}', using INFO", file=sys.stderr)
        os.environ['LOG_LEVEL'] = 'INFO'


def _basic_config(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level),
        format='%(levelname)s: %(name)s: %(message)s',
        stream=sys.stderr
    )


def bootstrap_logging(name: Optional[str] = None) -> None:
    """
    Bootstrap logging configuration for the command.

    This function:
    1. Sets up LOG_LEVEL for INI file substitution
    2. Loads logging.ini with logging.config.fileConfig() when present
    3. Applies the LOG_LEVEL override after loading

    Args:
        name: Optional name for the logger that reports where config came from
    """
    _setup_environment_variables()
    env_level = os.environ['LOG_LEVEL'].strip().upper()

    config_path = _find_logging_config()
    if config_path is None:
        _basic_config(env_level)
        return

    try:
        logging.config.fileConfig(
            str(config_path),
            disable_existing_loggers=False
        )
    except Exception as e:
        print(f"Warning: Failed to load logging config from {config_path}: {e}", file=sys.stderr)
        print("Using basic logging configuration", file=sys.stderr)
        _basic_config(env_level)
        return

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, env_level))
    for handler in root_logger.handlers:
        if isinstance(handler, logging.StreamHandler):
            handler.setLevel(getattr(logging, env_level))
    logging.getLogger('rupaul').setLevel(getattr(logging, env_level))

    logging.getLogger(name).debug(f"Logging configured from {config_path}")
