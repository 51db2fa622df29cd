#!/usr/bin/env python3
"""
Module: errors
Project: weather_station
Template: library
"""


class WeatherStationError(Exception):
    """Base class for everything the weather station raises on purpose"""


class ConfigurationError(WeatherStationError):
    """Startup configuration is missing or malformed"""


class WeatherFetchError(WeatherStationError):
    """A weather request failed (transport, HTTP status or response shape).

    Recoverable: the session reports it and moves on to the next prompt.
    """


class InputClosedError(WeatherStationError):
    """The interactive input stream can no longer be read"""
