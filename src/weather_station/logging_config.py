#!/usr/bin/env python3
"""
Module: logging_config
Project: weather_station
Template: script
"""
import logging.config
import os
from typing import Any, Dict, Optional

from weather_station.errors import ConfigurationError

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def build_logging_config(level: str = "WARNING", log_file: Optional[str] = None) -> Dict[str, Any]:
    """Logging configuration for the CLI.

    Without a log file the records go to stderr; stdout stays reserved for
    the weather summaries.
    """
    if log_file:
        handler = {
            'class': 'logging.handlers.RotatingFileHandler',
            'level': level,
            'formatter': 'default',
            'filename': log_file,
            'maxBytes': 10485760,  # 10MB
            'backupCount': 3,
            'encoding': 'utf-8',
        }
    else:
        handler = {
            'class': 'logging.StreamHandler',
            'level': level,
            'formatter': 'default',
            'stream': 'ext://sys.stderr',
        }

    return {
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': {
            'default': {
                'format': LOG_FORMAT,
            },
        },
        'handlers': {
            'main': handler,
        },
        'loggers': {
            'weather_station': {
                'handlers': ['main'],
                'level': level,
                'propagate': False,
            },
            'urllib3': {
                'handlers': ['main'],
                'level': 'WARNING',
                'propagate': False,
            },
        },
    }


def setup_logging(level: str = "WARNING", log_file: Optional[str] = None) -> None:
    try:
        if log_file:
            directory = os.path.dirname(log_file)
            if directory:
                os.makedirs(directory, exist_ok=True)
        logging.config.dictConfig(build_logging_config(level, log_file))
    except (OSError, ValueError) as e:
        raise ConfigurationError(f"Cannot set up logging to {log_file or 'stderr'}: {e}") from e
