"""
Weather and art-style data types for unplugged.

Defines the observation record consumed by the art engine and the
derived parameter/style records produced from it.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class WeatherDescription(str, Enum):
    """
    Closed set of weather descriptions understood by the art engine.

    The predicates group descriptions the way the renderer and the
    palettes care about them ("Rain" covers both Rain and Shower Rain;
    Thunderstorm falls in none of the groups).
    """

    CLEAR = "Clear"
    FEW_CLOUDS = "Few Clouds"
    SCATTERED_CLOUDS = "Scattered Clouds"
    BROKEN_CLOUDS = "Broken Clouds"
    SHOWER_RAIN = "Shower Rain"
    RAIN = "Rain"
    THUNDERSTORM = "Thunderstorm"
    SNOW = "Snow"
    MIST = "Mist"
    FOG = "Fog"

    @property
    def is_clear(self) -> bool:
        return self is WeatherDescription.CLEAR

    @property
    def is_cloudy(self) -> bool:
        return self in (
            WeatherDescription.FEW_CLOUDS,
            WeatherDescription.SCATTERED_CLOUDS,
            WeatherDescription.BROKEN_CLOUDS,
        )

    @property
    def is_rainy(self) -> bool:
        return self in (WeatherDescription.SHOWER_RAIN, WeatherDescription.RAIN)

    @property
    def is_snowy(self) -> bool:
        return self is WeatherDescription.SNOW

    @property
    def is_foggy(self) -> bool:
        return self in (WeatherDescription.MIST, WeatherDescription.FOG)

    @classmethod
    def parse(cls, text: str) -> Optional["WeatherDescription"]:
        """
        Look up a description by its display value.

        Args:
            text: Display value, case-insensitive (e.g., "broken clouds")

        Returns:
            Matching WeatherDescription, or None if text is not one of the values
        """
        wanted = text.strip().lower()
        for member in cls:
            if member.value.lower() == wanted:
                return member
        return None


class ArtGenre(str, Enum):
    """Visual styles the art engine can be asked to paint."""

    IMPRESSIONISM = "Impressionism"
    ABSTRACT_EXPRESSIONISM = "Abstract Expressionism"
    WATERCOLOR = "Watercolor"
    GLITCH_ART = "Glitch Art"
    LINE_ART = "Line Art"
    GEOMETRIC_ABSTRACT = "Geometric Abstract"
    FAUVISM = "Fauvism"
    POP_ART = "Pop Art"
    MINIMALISM = "Minimalism"
    POINTILLISM = "Pointillism"
    EXPRESSIONISM = "Expressionism"
    SURREALISM = "Surrealism"


@dataclass(frozen=True)
class WeatherObservation:
    """
    Point-in-time weather state fed to the art engine.

    Attributes:
        temperature: Degrees Celsius
        precipitation_probability: 0-1
        precipitation_intensity: mm/hr
        wind_speed: km/h
        wind_direction: Degrees, 0-360
        cloud_cover: Percent, 0-100
        humidity: Percent, 0-100
        uv_index: 0-12 scale
        description: Categorical weather description
    """
    temperature: float
    precipitation_probability: float
    precipitation_intensity: float
    wind_speed: float
    wind_direction: float
    cloud_cover: float
    humidity: float
    uv_index: float
    description: WeatherDescription


@dataclass(frozen=True)
class DrawingParameters:
    """
    Numeric drawing parameters derived from a WeatherObservation.

    movement_speed is not used by the static renderer; it is kept for
    animated consumers.
    """
    color_palette: Tuple[str, ...]
    background_gradient: Tuple[str, str]
    stroke_width: float
    density: float
    opacity: float
    distortion: float
    directionality: float
    contrast: float
    saturation: float
    brightness: float
    blur: float
    particle_size: float
    particle_count: float
    movement_speed: float


@dataclass(frozen=True)
class ArtStyle:
    """Descriptive style metadata. Only genre affects what gets drawn."""
    genre: ArtGenre
    mood: str
    color_description: str
    technique: str
