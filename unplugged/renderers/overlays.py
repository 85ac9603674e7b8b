"""
Atmosphere and weather overlays.

Applied after the genre has been painted: a uniform white haze scaled by
blur, then rain streaks, snow dots or fog bands depending on the weather.
"""

import math
import random

from unplugged.renderers.surface import RasterSurface
from unplugged.weather import DrawingParameters, WeatherDescription


RAIN_COLOR = (200, 200, 255)
RAIN_ALPHA = 0.5
SNOW_COLOR = (255, 255, 255)
SNOW_ALPHA = 0.8
HAZE_COLOR = (255, 255, 255)


def apply_atmosphere(surface: RasterSurface, params: DrawingParameters) -> None:
    """Soften the whole image with a white overlay, alpha 0.1 * blur / 5."""
    surface.fill_rect(0, 0, surface.width, surface.height, HAZE_COLOR,
                      0.1 * (params.blur / 5))


def draw_rain(surface: RasterSurface, params: DrawingParameters,
              rng: random.Random) -> None:
    """Short slanted streaks, slant growing with distortion."""
    length = params.particle_size * 10
    slant = params.distortion / 10

    for _ in range(int(math.ceil(params.particle_count))):
        x = rng.random() * surface.width
        y = rng.random() * surface.height
        surface.stroke_polyline([(x, y), (x - slant, y + length)],
                                RAIN_COLOR, RAIN_ALPHA, 1)


def draw_snow(surface: RasterSurface, params: DrawingParameters,
              rng: random.Random) -> None:
    for _ in range(int(math.ceil(params.particle_count))):
        x = rng.random() * surface.width
        y = rng.random() * surface.height
        surface.fill_circle(x, y, params.particle_size, SNOW_COLOR, SNOW_ALPHA)


def draw_fog(surface: RasterSurface) -> None:
    """
    Three stacked fog bands, one per vertical third.

    Each band is a vertical white gradient peaking in its middle; lower
    bands are denser. Band edges are whole pixel rows so every row is
    covered by exactly one band.
    """
    edges = [int(round(surface.height * i / 3)) for i in range(4)]

    for i, (top, bottom) in enumerate(zip(edges, edges[1:])):
        if bottom <= top:
            continue
        edge = (255, 255, 255, int(round((0.05 + i * 0.05) * 255)))
        middle = (255, 255, 255, int(round((0.15 + i * 0.05) * 255)))
        surface.fill_linear_gradient(
            (0, top), (0, bottom),
            [(0, edge), (0.5, middle), (1, edge)],
            box=(0, top, surface.width, bottom - top),
        )


def apply_weather_overlay(surface: RasterSurface, description: WeatherDescription,
                          params: DrawingParameters, rng: random.Random) -> None:
    """
    Draw the particle overlay matching the weather, if any.

    Args:
        surface: Painted surface
        description: Weather description (rain, snow and fog get overlays)
        params: Drawing parameters
        rng: Random source
    """
    if description.is_rainy:
        draw_rain(surface, params, rng)
    elif description.is_snowy:
        draw_snow(surface, params, rng)
    elif description.is_foggy:
        draw_fog(surface)
