#!/usr/bin/env python3
"""
Module: display
Project: weather_station
Template: script

Turns a WeatherResponse into the colored multi-line summary.
"""
from enum import Enum

from rich.console import Console
from rich.text import Text

from weather_station.models import WeatherResponse


class ColorCategory(Enum):
    """Display color picked from the weather description (value is the rich style)"""
    BRIGHT_YELLOW = "bright_yellow"
    BRIGHT_BLUE = "bright_blue"
    DIMMED = "dim"
    BRIGHT_CYAN = "bright_cyan"
    DEFAULT = ""

    @property
    def style(self) -> str:
        return self.value


# Exact, case-sensitive matches only
DESCRIPTION_COLORS = {
    "clear sky": ColorCategory.BRIGHT_YELLOW,

    "few clouds": ColorCategory.BRIGHT_BLUE,
    "scattered clouds": ColorCategory.BRIGHT_BLUE,
    "broken clouds": ColorCategory.BRIGHT_BLUE,

    "overcast clouds": ColorCategory.DIMMED,
    "mist": ColorCategory.DIMMED,
    "haze": ColorCategory.DIMMED,
    "smoke": ColorCategory.DIMMED,
    "sand": ColorCategory.DIMMED,
    "dust": ColorCategory.DIMMED,
    "fog": ColorCategory.DIMMED,
    "squalls": ColorCategory.DIMMED,

    "shower rain": ColorCategory.BRIGHT_CYAN,
    "rain": ColorCategory.BRIGHT_CYAN,
    "thunderstorms": ColorCategory.BRIGHT_CYAN,
    "snow": ColorCategory.BRIGHT_CYAN,
}


def temperature_emoji(temp: float) -> str:
    """Pick the emoji for a temperature; bounds are closed below, open above"""
    if temp < 0.0:
        return "❄️"
    elif temp < 10.0:
        return "☁️"
    elif temp < 20.0:
        return "🌥️"
    else:
        return "☀️🌞"


def color_category(description: str) -> ColorCategory:
    if description in DESCRIPTION_COLORS:
        return DESCRIPTION_COLORS[description]
    return ColorCategory.DEFAULT


def format_weather(response: WeatherResponse) -> str:
    """
    Build the summary text.
    The temperature is printed as returned by the API; no unit conversion is
    applied even though the label says °C.
    """
    main = response.main
    return (
        f"Weather in {response.name}:\n"
        f"{response.description}\n"
        f"> Temperature: {temperature_emoji(main.temp)} {main.temp:.1f}°C\n"
        f"> Humidity: {main.humidity:.1f}%\n"
        f"> Pressure: {main.pressure:.1f} hPa\n"
        f"> Wind Speed: {response.wind.speed:.1f} m/s"
    )


def show_weather(response: WeatherResponse, console: Console) -> ColorCategory:
    """Print the summary in its category color and return the category used"""
    category = color_category(response.description)
    # Text instead of a markup string: descriptions and names are printed verbatim
    console.print(Text(format_weather(response), style=category.style), highlight=False, soft_wrap=True)
    return category
