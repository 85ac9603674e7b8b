"""
Weather data provider using the OpenWeather current weather API.

Fetches current conditions for the configured location and converts
them into a WeatherObservation for the art renderer.
"""

import os
from datetime import datetime, timedelta
from typing import Any, Dict, Optional
import requests

from .base import DataProvider, DisplayData
from ..config import get_config
from ..weather import WeatherDescription, WeatherObservation


# Checked in order; the first substring found wins
DESCRIPTION_KEYWORDS = [
    ("clear", WeatherDescription.CLEAR),
    ("few clouds", WeatherDescription.FEW_CLOUDS),
    ("scattered clouds", WeatherDescription.SCATTERED_CLOUDS),
    ("broken clouds", WeatherDescription.BROKEN_CLOUDS),
    ("shower rain", WeatherDescription.SHOWER_RAIN),
    ("rain", WeatherDescription.RAIN),
    ("thunderstorm", WeatherDescription.THUNDERSTORM),
    ("snow", WeatherDescription.SNOW),
    ("mist", WeatherDescription.MIST),
    ("fog", WeatherDescription.FOG),
]

# OpenWeather doesn't provide UV index in the basic API
DEFAULT_UV_INDEX = 5

MPS_TO_KMH = 3.6


def _match_description(text: str) -> Optional[WeatherDescription]:
    text = text.lower()
    for keyword, description in DESCRIPTION_KEYWORDS:
        if keyword in text:
            return description
    return None


def map_weather_type(weather_main: str) -> str:
    """
    Map an OpenWeather condition group to a coarse weather type.

    Args:
        weather_main: OpenWeather "main" field (e.g., "Clouds", "Drizzle")

    Returns:
        One of sunny, cloudy, rainy, windy (cloudy if nothing matches)
    """
    main = weather_main.lower()

    if 'clear' in main or 'sun' in main:
        return "sunny"
    elif 'cloud' in main:
        return "cloudy"
    elif any(word in main for word in ('rain', 'drizzle', 'shower', 'storm', 'thunder')):
        return "rainy"
    elif any(word in main for word in ('wind', 'breeze', 'gale')):
        return "windy"

    return "cloudy"


def convert_openweather(data: Dict[str, Any], uv_index: float = DEFAULT_UV_INDEX) -> WeatherObservation:
    """
    Convert an OpenWeather current weather response to a WeatherObservation.

    The description is matched against the condition group first and the
    detailed description second, defaulting to Scattered Clouds.
    Precipitation comes from the last hour of rain or snow (0-10 mm scaled
    to a 0-1 probability); when only the condition mentions rain or snow,
    probability 0.7 and intensity 3 are assumed.

    Args:
        data: Parsed JSON response (units=metric)
        uv_index: UV index to use (not part of the response)

    Returns:
        WeatherObservation

    Raises:
        KeyError, IndexError, TypeError: If required fields are missing
    """
    weather = data["weather"][0]
    main = weather.get("main", "")
    detail = weather.get("description", "")

    description = (_match_description(main)
                   or _match_description(detail)
                   or WeatherDescription.SCATTERED_CLOUDS)

    rain_1h = (data.get("rain") or {}).get("1h")
    snow_1h = (data.get("snow") or {}).get("1h")
    main_lower = main.lower()

    probability = 0.0
    intensity = 0.0
    if rain_1h:
        probability = min(1.0, rain_1h / 10)
        intensity = min(10.0, rain_1h)
    elif snow_1h:
        probability = min(1.0, snow_1h / 10)
        intensity = min(10.0, snow_1h)
    elif any(word in main_lower for word in ('rain', 'shower', 'drizzle')):
        probability = 0.7
        intensity = 3.0
    elif 'snow' in main_lower:
        probability = 0.7
        intensity = 3.0

    wind = data.get("wind") or {}

    return WeatherObservation(
        temperature=float(data["main"]["temp"]),
        precipitation_probability=probability,
        precipitation_intensity=intensity,
        wind_speed=float(wind.get("speed", 0)) * MPS_TO_KMH,
        wind_direction=float(wind.get("deg", 0)),
        cloud_cover=float((data.get("clouds") or {}).get("all", 0)),
        humidity=float(data["main"]["humidity"]),
        uv_index=uv_index,
        description=description,
    )


class WeatherProvider(DataProvider):
    """
    Provider for current weather from OpenWeather.

    Requires an API key, read from the provider config ("api_key") or
    from the environment variable named by "api_key_env"
    (default: OPENWEATHER_API_KEY).
    """

    API_URL = "https://api.openweathermap.org/data/2.5/weather"

    def __init__(self, config_key: str = "weather"):
        """
        Initialize weather provider with configuration.

        Args:
            config_key: Provider section in config (default: "weather")
        """
        super().__init__()
        self.config = get_config().get_provider_config(config_key)

        location = self.config.get("location", {})
        self.latitude = location.get("latitude", 51.5074)
        self.longitude = location.get("longitude", -0.1278)
        self.location_name = location.get("name", "Unknown")

        api_key_env = self.config.get("api_key_env", "OPENWEATHER_API_KEY")
        self.api_key = self.config.get("api_key") or os.environ.get(api_key_env, "")
        self.uv_index = self.config.get("uv_index", DEFAULT_UV_INDEX)
        self.timeout = self.config.get("timeout", 10)

    def fetch_data(self) -> DisplayData:
        """
        Fetch current weather from OpenWeather.

        Failures are not raised: they come back as an error payload so
        renderers can show a fallback background.

        Returns:
            DisplayData with the observation, or with error details
        """
        try:
            if not self.api_key:
                raise ValueError("No OpenWeather API key configured")

            params = {
                "lat": self.latitude,
                "lon": self.longitude,
                "appid": self.api_key,
                "units": "metric",
            }
            response = requests.get(self.API_URL, params=params, timeout=self.timeout)
            response.raise_for_status()
            data = response.json()

            observation = convert_openweather(data, uv_index=self.uv_index)

            return DisplayData(
                timestamp=datetime.now(),
                content={
                    "type": "weather",
                    "location": data.get("name") or self.location_name,
                    "observation": observation,
                    "condition": map_weather_type(data["weather"][0].get("main", "")),
                },
                metadata={
                    "source": "openweather",
                }
            )

        except (requests.RequestException, KeyError, IndexError, ValueError, TypeError) as e:
            print(f"[WeatherProvider] Error fetching weather: {e}")
            return DisplayData(
                timestamp=datetime.now(),
                content={
                    "type": "weather",
                    "error": True,
                    "error_message": "Weather unavailable",
                    "error_details": str(e),
                    "location": self.location_name,
                },
                metadata={
                    "source": "openweather",
                }
            )

    def get_cache_duration(self) -> timedelta:
        """
        Cache weather data for configured duration (default: 10 minutes).

        Returns:
            Cache duration
        """
        cache_seconds = self.config.get("cache_duration", 600)
        return timedelta(seconds=cache_seconds)
