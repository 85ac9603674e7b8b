"""
Data providers for unplugged.

Providers fetch and structure weather data for the renderers.
"""

from unplugged.providers.base import DisplayData, DataProvider
from unplugged.providers.manual_provider import ManualWeatherProvider, DEFAULT_OBSERVATION
from unplugged.providers.weather_provider import (
    WeatherProvider,
    convert_openweather,
    map_weather_type,
)

__all__ = [
    "DisplayData",
    "DataProvider",
    "ManualWeatherProvider",
    "DEFAULT_OBSERVATION",
    "WeatherProvider",
    "convert_openweather",
    "map_weather_type",
]
