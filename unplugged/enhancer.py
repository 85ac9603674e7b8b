"""
Vibrancy enhancer.

Biases weather observations toward colourful output before they are
mapped to drawing parameters, and supplies the vibrant background
palettes used by the vibrant render path.
"""

from dataclasses import replace
from typing import Tuple

from unplugged.weather import WeatherDescription, WeatherObservation


MAX_CLOUD_COVER = 30
MIN_UV_INDEX = 7
MAX_PRECIPITATION_INTENSITY = 3
MIN_WIND_SPEED = 5
MAX_WIND_SPEED = 15

SUNNY_PALETTE = (
    "#FF9500",  # Bright orange
    "#FFD700",  # Gold
    "#FF4500",  # Orange red
    "#FFA500",  # Orange
    "#FFFF00",  # Yellow
)

# Cheerful rather than grey
CLOUDY_PALETTE = (
    "#FF6B6B",  # Bright red
    "#4ECDC4",  # Turquoise
    "#FF9A8B",  # Salmon pink
    "#FFD166",  # Bright yellow
    "#06D6A0",  # Bright green
)

RAINY_PALETTE = (
    "#00BFFF",  # Deep sky blue
    "#9370DB",  # Medium purple
    "#FF69B4",  # Hot pink
    "#00CED1",  # Dark turquoise
    "#FF1493",  # Deep pink
)

# No WeatherDescription mentions wind, so enhanced_palette never selects this one
WINDY_PALETTE = (
    "#00FFFF",  # Cyan
    "#FF00FF",  # Magenta
    "#FFFF00",  # Yellow
    "#00FF00",  # Lime
    "#FF6347",  # Tomato
)

DEFAULT_PALETTE = (
    "#FF6347",  # Tomato
    "#FF7F50",  # Coral
    "#FFA500",  # Orange
    "#FFD700",  # Gold
    "#ADFF2F",  # Green yellow
)

WARM_ACCENTS = ("#FF4500", "#FF6347")  # Orange red, tomato
COOL_ACCENTS = ("#4169E1", "#1E90FF")  # Royal blue, dodger blue


def enhance(observation: WeatherObservation) -> WeatherObservation:
    """
    Return a copy of observation adjusted for livelier art.

    Caps cloud cover and precipitation intensity, floors the UV index,
    keeps wind speed within a moderate band and rewrites any cloudy
    description to Scattered Clouds. The input is left untouched and
    enhance(enhance(x)) == enhance(x).

    Args:
        observation: Raw weather observation

    Returns:
        Enhanced copy
    """
    description = observation.description
    if description.is_cloudy:
        # Routes genre selection away from the duller cloud buckets
        description = WeatherDescription.SCATTERED_CLOUDS

    return replace(
        observation,
        cloud_cover=min(observation.cloud_cover, MAX_CLOUD_COVER),
        uv_index=max(observation.uv_index, MIN_UV_INDEX),
        precipitation_intensity=min(observation.precipitation_intensity,
                                    MAX_PRECIPITATION_INTENSITY),
        wind_speed=max(MIN_WIND_SPEED, min(MAX_WIND_SPEED, observation.wind_speed)),
        description=description,
    )


def enhanced_palette(observation: WeatherObservation) -> Tuple[str, ...]:
    """
    Pick a vibrant 5-colour palette for the observation.

    Hot (> 25 C) and cold (< 5 C) observations get two warm or cool
    accents in front of the first three base colours.

    Args:
        observation: Weather observation (the raw one, not the enhanced copy)

    Returns:
        Tuple of 5 hex colours
    """
    description = observation.description

    if description.is_clear:
        base = SUNNY_PALETTE
    elif description.is_cloudy:
        base = CLOUDY_PALETTE
    elif description.is_rainy:
        base = RAINY_PALETTE
    else:
        base = DEFAULT_PALETTE

    if observation.temperature > 25:
        return WARM_ACCENTS + base[:3]
    if observation.temperature < 5:
        return COOL_ACCENTS + base[:3]
    return base
