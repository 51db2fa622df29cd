import io
from unittest.mock import patch

import pytest
from rich.console import Console

from weather_station import cli
from weather_station.client import WeatherClient
from weather_station.errors import ConfigurationError, WeatherFetchError


@pytest.fixture(autouse=True)
def isolate(monkeypatch):
    monkeypatch.setattr(cli, "setup_logging", lambda *args, **kwargs: None)
    monkeypatch.setattr("weather_station.config.load_dotenv", lambda *args, **kwargs: False)
    for name in ["OPENWEATHER_BASE_URL", "WEATHER_STATION_TIMEOUT",
                 "WEATHER_STATION_LOG_LEVEL", "WEATHER_STATION_LOG_FILE"]:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("OPENWEATHER_API_KEY", "test-key")


@pytest.fixture
def consoles():
    return (Console(file=io.StringIO(), color_system=None, width=200),
            Console(file=io.StringIO(), color_system=None, width=200))


def run_main(user_input, consoles):
    out, err = consoles
    return cli.main(stdin=io.StringIO(user_input), console=out, err_console=err)


def test_missing_api_key_exits_with_error(monkeypatch, consoles):
    monkeypatch.delenv("OPENWEATHER_API_KEY")

    assert run_main("", consoles) == 1

    assert "OPENWEATHER_API_KEY" in consoles[1].file.getvalue()
    assert consoles[0].file.getvalue() == ""


def test_full_session(consoles, london_weather):
    with patch.object(WeatherClient, "get_weather", return_value=london_weather) as get_weather:
        assert run_main("London\nGB\nno\n", consoles) == 0

    get_weather.assert_called_once_with("London", "GB")
    assert "Weather in London:" in consoles[0].file.getvalue()


def test_fetch_failure_still_exits_cleanly(consoles):
    with patch.object(WeatherClient, "get_weather", side_effect=WeatherFetchError("boom")):
        assert run_main("London\nGB\nno\n", consoles) == 0

    assert consoles[1].file.getvalue() == "Error: boom\n"


def test_closed_input_is_fatal(consoles):
    assert run_main("London\n", consoles) == 1

    assert "Failed to read input" in consoles[1].file.getvalue()


def test_keyboard_interrupt_is_fatal(consoles):
    with patch.object(WeatherClient, "get_weather", side_effect=KeyboardInterrupt):
        assert run_main("London\nGB\n", consoles) == 1

    assert "interrupted" in consoles[1].file.getvalue()


def test_logging_setup_failure_exits_with_error(monkeypatch, consoles):
    def broken_setup(level, log_file):
        raise ConfigurationError("Cannot set up logging to /nowhere/weather.log: permission denied")

    monkeypatch.setattr(cli, "setup_logging", broken_setup)

    assert run_main("London\nGB\nno\n", consoles) == 1

    assert "Configuration error: Cannot set up logging" in consoles[1].file.getvalue()
    assert consoles[0].file.getvalue() == ""
