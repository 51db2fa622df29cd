import io
import json

import pytest
import requests
from rich.console import Console

from weather_station.models import WeatherResponse


@pytest.fixture
def london_payload():
    """A trimmed OpenWeatherMap body, including fields the models ignore"""
    return {
        "coord": {"lon": -0.1257, "lat": 51.5085},
        "weather": [{"id": 800, "main": "Clear", "description": "clear sky", "icon": "01d"}],
        "base": "stations",
        "main": {"temp": 15.0, "feels_like": 14.2, "pressure": 1012, "humidity": 60},
        "wind": {"speed": 3.2, "deg": 250},
        "sys": {"country": "GB"},
        "name": "London",
        "cod": 200,
    }


@pytest.fixture
def london_weather(london_payload):
    return WeatherResponse.from_payload(london_payload)


@pytest.fixture
def make_weather(london_payload):
    """Build a WeatherResponse overriding the description and/or temperature"""
    def _make(description="clear sky", temp=15.0, name="London"):
        payload = dict(london_payload)
        payload["weather"] = [{"description": description}]
        payload["main"] = dict(london_payload["main"], temp=temp)
        payload["name"] = name
        return WeatherResponse.from_payload(payload)
    return _make


@pytest.fixture
def plain_console():
    """Console writing uncolored text into a buffer"""
    return Console(file=io.StringIO(), color_system=None, width=200)


@pytest.fixture
def color_console():
    """Console that always emits the 16 standard ANSI colors"""
    return Console(file=io.StringIO(), force_terminal=True, color_system="standard", width=200)


@pytest.fixture
def make_response():
    """Build a real requests.Response without touching the network"""
    def _make(status_code=200, body=None, content=None):
        response = requests.Response()
        response.status_code = status_code
        if content is None:
            content = json.dumps(body).encode("utf-8") if body is not None else b""
        response._content = content
        response.encoding = "utf-8"
        return response
    return _make
