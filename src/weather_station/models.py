#!/usr/bin/env python3
"""
Module: models
Project: weather_station
Template: pydantic models

Typed view of the OpenWeatherMap current-weather payload. Only the fields the
summary needs are declared; everything else in the body is ignored.
"""
from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field


class _ResponseModel(BaseModel):
    # strict: numeric strings and booleans are shape errors; JSON integers still fill float fields
    model_config = ConfigDict(extra='ignore', frozen=True, strict=True)


class Weather(_ResponseModel):
    description: str = Field(..., description="Condition text, e.g. 'clear sky'")


class Main(_ResponseModel):
    temp: float = Field(..., description="Temperature as returned by the API (no unit conversion)")
    humidity: float = Field(..., description="Relative humidity in percent")
    pressure: float = Field(..., description="Atmospheric pressure in hPa")


class Wind(_ResponseModel):
    speed: float = Field(..., description="Wind speed in m/s")


class WeatherResponse(_ResponseModel):
    weather: List[Weather] = Field(..., min_length=1)
    main: Main
    wind: Wind
    name: str = Field(..., description="Display name of the resolved location")

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "WeatherResponse":
        """Validate a decoded JSON object (raises pydantic.ValidationError)"""
        return cls.model_validate(payload)

    @property
    def description(self) -> str:
        return self.weather[0].description
