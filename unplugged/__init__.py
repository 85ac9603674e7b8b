"""
unplugged: weather-driven procedural art.

Maps weather observations to colour palettes, drawing parameters and an
art genre, then paints generated artwork suitable for use as a UI
background image.
"""

__version__ = "0.1.0"

# Import main classes for convenience
from unplugged.weather import (
    ArtGenre,
    ArtStyle,
    DrawingParameters,
    WeatherDescription,
    WeatherObservation,
)
from unplugged.providers.base import DisplayData, DataProvider
from unplugged.renderers.base import Renderer
from unplugged.renderers.art import ArtRenderer, render_basic, render_vibrant, render_to_image

__all__ = [
    "ArtGenre",
    "ArtStyle",
    "DrawingParameters",
    "WeatherDescription",
    "WeatherObservation",
    "DisplayData",
    "DataProvider",
    "Renderer",
    "ArtRenderer",
    "render_basic",
    "render_vibrant",
    "render_to_image",
]
