"""
Weather art renderer.

Orchestrates one render: enhance the observation, derive drawing
parameters and style, fill the background, paint the genre and overlays,
then snapshot the surface.

Two background treatments exist side by side:
- render_basic: 2-stop vertical gradient from the temperature palette
- render_vibrant: 3-stop diagonal gradient from the vibrant palette
"""

import random
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple
from PIL import Image

from unplugged.enhancer import enhance, enhanced_palette
from unplugged.mappings import generate_drawing_params
from unplugged.providers.base import DisplayData
from unplugged.renderers.base import Renderer
from unplugged.renderers.export import image_to_data_url
from unplugged.renderers.genres import draw_genre
from unplugged.renderers.overlays import apply_atmosphere, apply_weather_overlay
from unplugged.renderers.surface import RasterSurface
from unplugged.styles import generate_art_style
from unplugged.weather import ArtStyle, DrawingParameters, WeatherObservation


@dataclass(frozen=True)
class Artwork:
    """
    Result of one render call.

    Attributes:
        image: Rendered RGB image
        style: Style that was painted
        params: Drawing parameters used
        observation: Enhanced observation the parameters came from
        background: Colours of the background gradient, in stop order
    """
    image: Image.Image
    style: ArtStyle
    params: DrawingParameters
    observation: WeatherObservation
    background: Tuple[str, ...]


def draw_artwork(surface: Optional[RasterSurface], observation: WeatherObservation,
                 params: DrawingParameters, style: ArtStyle,
                 rng: random.Random) -> RasterSurface:
    """
    Paint genre, atmosphere and weather overlay onto a filled surface.

    Args:
        surface: Surface with its background already filled
        observation: Observation whose description picks the overlay
        params: Drawing parameters
        style: Art style; its genre picks the drawing algorithm
        rng: Random source

    Returns:
        The painted surface

    Raises:
        ValueError: If no surface is given
    """
    if surface is None:
        raise ValueError("draw_artwork requires a raster surface")

    draw_genre(surface, style.genre, params, rng)
    apply_atmosphere(surface, params)
    apply_weather_overlay(surface, observation.description, params, rng)
    return surface


def fill_basic_background(surface: RasterSurface, params: DrawingParameters) -> Tuple[str, ...]:
    """Fill a top-to-bottom gradient between the palette's first and last colours."""
    start, end = params.background_gradient
    surface.fill_linear_gradient((0, 0), (0, surface.height), [(0, start), (1, end)])
    return (start, end)


def fill_vibrant_background(surface: RasterSurface, colors: Sequence[str]) -> Tuple[str, ...]:
    """Fill a top-left to bottom-right gradient through first, middle and last colours."""
    stops = (colors[0], colors[len(colors) // 2], colors[-1])
    surface.fill_linear_gradient(
        (0, 0), (surface.width, surface.height),
        [(0, stops[0]), (0.5, stops[1]), (1, stops[2])],
    )
    return stops


def render_basic(observation: WeatherObservation, width: int = 800, height: int = 400,
                 rng: Optional[random.Random] = None) -> Artwork:
    """
    Render artwork over the temperature palette's 2-stop gradient.

    Args:
        observation: Raw weather observation (not modified)
        width: Image width in pixels
        height: Image height in pixels
        rng: Random source (default: fresh unseeded generator)

    Returns:
        Artwork
    """
    rng = rng or random.Random()
    enhanced = enhance(observation)
    params = generate_drawing_params(enhanced)
    style = generate_art_style(enhanced, rng)

    surface = RasterSurface(width, height)
    background = fill_basic_background(surface, params)
    draw_artwork(surface, enhanced, params, style, rng)

    return Artwork(surface.to_image(), style, params, enhanced, background)


def render_vibrant(observation: WeatherObservation, width: int = 800, height: int = 400,
                   rng: Optional[random.Random] = None) -> Artwork:
    """
    Render artwork over the vibrant palette's 3-stop gradient.

    The background palette is chosen from the raw observation, while the
    drawing parameters and style come from the enhanced copy.

    Args:
        observation: Raw weather observation (not modified)
        width: Image width in pixels
        height: Image height in pixels
        rng: Random source (default: fresh unseeded generator)

    Returns:
        Artwork
    """
    rng = rng or random.Random()
    enhanced = enhance(observation)
    params = generate_drawing_params(enhanced)
    style = generate_art_style(enhanced, rng)

    surface = RasterSurface(width, height)
    background = fill_vibrant_background(surface, enhanced_palette(observation))
    draw_artwork(surface, enhanced, params, style, rng)

    return Artwork(surface.to_image(), style, params, enhanced, background)


def render_to_image(observation: WeatherObservation, width: int = 800, height: int = 400,
                    seed: Optional[int] = None, vibrant: bool = True) -> str:
    """
    Render artwork and serialize it as a PNG data URL.

    Not cached: identical input can give a different image on every call
    unless a seed is given.

    Args:
        observation: Raw weather observation
        width: Image width in pixels
        height: Image height in pixels
        seed: Optional seed pinning genre choice and every random mark
        vibrant: Use the vibrant 3-stop background (False: basic 2-stop)

    Returns:
        `data:image/png;base64,...` string
    """
    rng = random.Random(seed)
    painter = render_vibrant if vibrant else render_basic
    return image_to_data_url(painter(observation, width, height, rng).image)


class ArtRenderer(Renderer):
    """
    Renders weather DisplayData to generated artwork.

    When no observation is available (fetch error or unexpected payload)
    a plain condition gradient is returned instead, so consumers always
    get a usable background.
    """

    # Top-left to bottom-right fallback gradients per weather condition
    FALLBACK_GRADIENTS = {
        "sunny": ("#F59E0B", "#FB923C", "#FDE047"),
        "cloudy": ("#9CA3AF", "#CBD5E1", "#BFDBFE"),
        "rainy": ("#3B82F6", "#60A5FA", "#A5B4FC"),
        "windy": ("#06B6D4", "#2DD4BF", "#93C5FD"),
    }
    DEFAULT_FALLBACK_GRADIENT = ("#3B82F6", "#A855F7")

    def __init__(self, width: int = 800, height: int = 400, vibrant: bool = True,
                 seed: Optional[int] = None, quiet: bool = False):
        """
        Initialize art renderer.

        Args:
            width: Image width in pixels (default: 800)
            height: Image height in pixels (default: 400)
            vibrant: Use the vibrant 3-stop background (default: True)
            seed: Optional seed for reproducible artwork
            quiet: If True, don't print a line per render
        """
        self.width = width
        self.height = height
        self.vibrant = vibrant
        self.quiet = quiet
        self.rng = random.Random(seed)
        self.last_artwork: Optional[Artwork] = None

    def render(self, data: DisplayData) -> Image.Image:
        """
        Render DisplayData to a PIL Image.

        Args:
            data: Weather DisplayData from a provider

        Returns:
            PIL Image (RGB mode): artwork, or a fallback gradient
        """
        content = data.content
        observation = content.get("observation")

        if content.get("type") != "weather":
            return self._render_fallback(None)
        if content.get("error") or observation is None:
            if not self.quiet:
                print(f"[ArtRenderer] No observation ({content.get('error_message', 'missing')}), "
                      f"using fallback gradient")
            return self._render_fallback(content.get("condition"))

        return self.render_artwork(observation).image

    def render_artwork(self, observation: WeatherObservation) -> Artwork:
        """
        Render an observation directly.

        Args:
            observation: Raw weather observation

        Returns:
            Artwork (also kept as self.last_artwork)
        """
        painter = render_vibrant if self.vibrant else render_basic
        artwork = painter(observation, self.width, self.height, self.rng)
        self.last_artwork = artwork

        if not self.quiet:
            print(f"[ArtRenderer] Painted {artwork.style.genre.value} "
                  f"({self.width}x{self.height}, {'vibrant' if self.vibrant else 'basic'})")
        return artwork

    def _render_fallback(self, condition: Optional[str]) -> Image.Image:
        """
        Render the plain gradient shown while no artwork is available.

        Args:
            condition: Weather condition (sunny, cloudy, rainy, windy) or None

        Returns:
            PIL Image with the condition gradient
        """
        colors = self.FALLBACK_GRADIENTS.get(condition, self.DEFAULT_FALLBACK_GRADIENT)
        offsets = [i / (len(colors) - 1) for i in range(len(colors))]

        surface = RasterSurface(self.width, self.height)
        surface.fill_linear_gradient((0, 0), (self.width, self.height),
                                     list(zip(offsets, colors)))
        return surface.to_image()
