#!/usr/bin/env python3
"""
Module: session
Project: weather_station
Template: script

The interactive prompt -> fetch -> display -> continue loop.
"""
import logging
import sys
from typing import TextIO

from rich.console import Console

from weather_station.client import WeatherClient
from weather_station.display import show_weather
from weather_station.errors import InputClosedError, WeatherFetchError

logger = logging.getLogger(__name__)

WELCOME_BANNER = "Welcome to Weather Station!"
CITY_PROMPT = "Please enter the name of the city:"
COUNTRY_PROMPT = "Please enter the country code:"
CONTINUE_PROMPT = "Do you want to search for weather in another city? (yes/no):"
FAREWELL = "Thank you for using this software!"

PROMPT_STYLE = "bright_green"
BANNER_STYLE = "bright_yellow"


def read_line(stream: TextIO) -> str:
    """Read one line and strip it; a closed or unreadable stream is fatal"""
    try:
        line = stream.readline()
    except (OSError, ValueError) as e:
        # ValueError: I/O operation on closed file
        raise InputClosedError(f"Failed to read input: {e}") from e
    if not line:
        raise InputClosedError("Failed to read input: end of input stream")
    return line.strip()


def wants_another(answer: str) -> bool:
    return answer.strip().lower() == "yes"


class WeatherSession:
    """
    Drives one interactive session.
    Streams and consoles are injected so the loop runs the same against a
    terminal or in-memory buffers.
    """

    def __init__(self, client: WeatherClient, stdin: TextIO = None,
                 console: Console = None, err_console: Console = None):
        self.client = client
        self.stdin = stdin or sys.stdin
        self.console = console or Console()
        self.err_console = err_console or Console(stderr=True)

    def _say(self, message: str, style: str = None):
        self.console.print(message, style=style, markup=False, highlight=False, emoji=False, soft_wrap=True)

    def _ask(self, prompt: str) -> str:
        self._say(prompt, style=PROMPT_STYLE)
        return read_line(self.stdin)

    def run_once(self) -> bool:
        """One Prompting -> Fetching -> Displaying/Reporting pass. True on success."""
        city = self._ask(CITY_PROMPT)
        country_code = self._ask(COUNTRY_PROMPT)

        try:
            response = self.client.get_weather(city, country_code)
        except WeatherFetchError as e:
            self.err_console.print(f"Error: {e}", markup=False, highlight=False, emoji=False, soft_wrap=True)
            return False

        category = show_weather(response, self.console)
        logger.debug(f"Displayed weather for {response.name} ({category.name})")
        return True

    def run(self) -> int:
        """Run until the user declines to continue. Returns the exit status."""
        self._say(WELCOME_BANNER, style=BANNER_STYLE)
        searches = 0
        while True:
            self.run_once()
            searches += 1

            if not wants_another(self._ask(CONTINUE_PROMPT)):
                self._say(FAREWELL)
                logger.info(f"Session finished after {searches} searches")
                return 0
