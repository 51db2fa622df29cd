#!/usr/bin/env python3
"""
Module: cli
Project: weather_station
Template: script
"""
import logging
import sys

from rich.console import Console

from weather_station.client import WeatherClient
from weather_station.config import WeatherStationConfig
from weather_station.errors import ConfigurationError, InputClosedError
from weather_station.logging_config import setup_logging
from weather_station.session import WeatherSession

logger = logging.getLogger(__name__)


def main(stdin=None, console: Console = None, err_console: Console = None) -> int:
    err_console = err_console or Console(stderr=True)

    try:
        config = WeatherStationConfig.from_env()
        setup_logging(config.log_level, config.log_file)
    except ConfigurationError as e:
        err_console.print(f"Configuration error: {e}", markup=False, highlight=False, soft_wrap=True)
        return 1

    logger.info(f"Starting weather station with {config!r}")

    with WeatherClient(config.api_key, config.base_url, timeout=config.timeout) as client:
        session = WeatherSession(client, stdin=stdin, console=console, err_console=err_console)
        try:
            return session.run()
        except InputClosedError as e:
            err_console.print(str(e), markup=False, highlight=False, soft_wrap=True)
            return 1
        except KeyboardInterrupt:
            err_console.print("Failed to read input: interrupted", markup=False, highlight=False, soft_wrap=True)
            return 1


if __name__ == '__main__':
    sys.exit(main())
