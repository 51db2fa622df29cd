#!/usr/bin/env python3
"""
Module: config
Project: weather_station
Template: script
"""
import logging
import math
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import find_dotenv, load_dotenv  # pip install python-dotenv

from weather_station.errors import ConfigurationError

DEFAULT_BASE_URL = "https://api.openweathermap.org/data/2.5/weather"
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class WeatherStationConfig:
    """Configuration from environment variables"""
    api_key: str
    base_url: str = DEFAULT_BASE_URL
    timeout: Optional[float] = None
    log_level: str = DEFAULT_LOG_LEVEL
    log_file: Optional[str] = None

    def __repr__(self) -> str:
        # Never leak the credential into logs or tracebacks
        return (
            f"WeatherStationConfig(api_key='***HIDDEN***', base_url={self.base_url!r}, "
            f"timeout={self.timeout!r}, log_level={self.log_level!r}, log_file={self.log_file!r})"
        )

    @classmethod
    def from_env(cls, load_env_file: bool = True) -> "WeatherStationConfig":
        """Build the config from the environment, reading a .env file first"""
        if load_env_file:
            # Values already exported in the shell win over the .env file
            load_dotenv(find_dotenv(usecwd=True))

        return cls(
            api_key=_get_required_env('OPENWEATHER_API_KEY'),
            base_url=_get_optional_env('OPENWEATHER_BASE_URL') or DEFAULT_BASE_URL,
            timeout=_parse_timeout(_get_optional_env('WEATHER_STATION_TIMEOUT')),
            log_level=_parse_log_level(_get_optional_env('WEATHER_STATION_LOG_LEVEL')),
            log_file=_get_optional_env('WEATHER_STATION_LOG_FILE'),
        )


def _get_required_env(key: str) -> str:
    """Get required environment variable"""
    value = os.getenv(key, '').strip()
    if not value:
        raise ConfigurationError(f"Required environment variable {key} is not set")
    return value


def _get_optional_env(key: str) -> Optional[str]:
    """Get optional environment variable, treating blank values as unset"""
    value = os.getenv(key)
    if value is None or not value.strip():
        return None
    return value.strip()


def _parse_timeout(raw: Optional[str]) -> Optional[float]:
    if raw is None:
        return None
    try:
        timeout = float(raw)
    except ValueError:
        raise ConfigurationError(f"WEATHER_STATION_TIMEOUT must be a number, got {raw!r}") from None
    if not math.isfinite(timeout) or timeout <= 0:
        raise ConfigurationError(f"WEATHER_STATION_TIMEOUT must be a positive finite number, got {raw!r}")
    return timeout


def _parse_log_level(raw: Optional[str]) -> str:
    if raw is None:
        return DEFAULT_LOG_LEVEL
    level = raw.upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ConfigurationError(f"WEATHER_STATION_LOG_LEVEL is not a logging level: {raw!r}")
    return level
