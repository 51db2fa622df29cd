#!/usr/bin/env python3
"""
Module: client
Project: weather_station
Template: auth (api key in query parameters)
"""
import logging
from typing import Optional

import requests
from pydantic import ValidationError

from weather_station.config import DEFAULT_BASE_URL
from weather_station.errors import WeatherFetchError
from weather_station.models import WeatherResponse

logger = logging.getLogger(__name__)

STATUS_MESSAGES = {
    401: 'Invalid API key',
    403: 'API key lacks permissions',
    404: 'City not found',
    429: 'Rate limit exceeded',
}


def build_weather_url(city: str, country_code: str, api_key: str, base_url: str = DEFAULT_BASE_URL) -> str:
    """
    Fill the query template positionally.
    Values are NOT url-encoded: a city containing '&', '#' or ',' changes the query.
    """
    return f"{base_url}?q={city},{country_code}&appid={api_key}"


class WeatherClient:
    """
    OpenWeatherMap current-weather client.
    One blocking GET per call, no retries; every failure becomes a WeatherFetchError.
    """

    def __init__(self, api_key: str, base_url: str = DEFAULT_BASE_URL,
                 timeout: Optional[float] = None, session: requests.Session = None):
        self.api_key = api_key
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.session = session or requests.Session()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def close(self):
        self.session.close()

    def get_weather(self, city: str, country_code: str) -> WeatherResponse:
        """Fetch and validate the current weather for `city,country_code`"""
        url = build_weather_url(city, country_code, self.api_key, self.base_url)
        logger.info(f"REQUEST: GET {self.base_url} q={city},{country_code}")

        try:
            response = self.session.get(url, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            logger.info(f"Transport error for {city},{country_code}: {e.__class__.__name__}")
            raise WeatherFetchError(self._redact(str(e))) from e

        logger.debug(f"RESPONSE: {response.status_code} ({len(response.content)} bytes)")
        return self._handle_response(response)

    def _handle_response(self, response: requests.Response) -> WeatherResponse:
        """Turn a raw Response into a WeatherResponse or raise WeatherFetchError"""
        if not response.ok:
            message = STATUS_MESSAGES.get(response.status_code, f'HTTP {response.status_code}')
            detail = self._api_message(response)
            if detail:
                message = f"{message} ({detail})"
            logger.info(f"Weather API rejected request: {message}")
            raise WeatherFetchError(message)

        try:
            payload = response.json()
        except ValueError as e:
            logger.info("Response body is not JSON")
            raise WeatherFetchError('Invalid JSON in response') from e

        if not isinstance(payload, dict):
            raise WeatherFetchError(f'Unexpected response format: expected an object, got {type(payload).__name__}')

        try:
            return WeatherResponse.from_payload(payload)
        except ValidationError as e:
            first = e.errors()[0]
            location = '.'.join(str(part) for part in first['loc']) or 'response'
            logger.info(f"Response failed validation ({e.error_count()} errors)")
            raise WeatherFetchError(f"Unexpected response format: {location} - {first['msg']}") from e

    def _redact(self, text: str) -> str:
        """Transport errors quote the request URL, which carries the api key"""
        return text.replace(self.api_key, '***HIDDEN***')

    @staticmethod
    def _api_message(response: requests.Response) -> Optional[str]:
        """OpenWeatherMap error bodies look like {"cod": "404", "message": "city not found"}"""
        try:
            body = response.json()
        except ValueError:
            return None
        if isinstance(body, dict) and body.get('message'):
            return str(body['message'])
        return None
