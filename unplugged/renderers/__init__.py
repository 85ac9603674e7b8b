"""
Renderers for unplugged.

Renderers convert DisplayData and weather observations to images.
"""

from unplugged.renderers.base import Renderer
from unplugged.renderers.surface import RasterSurface
from unplugged.renderers.art import (
    ArtRenderer,
    Artwork,
    draw_artwork,
    render_basic,
    render_vibrant,
    render_to_image,
)
from unplugged.renderers.ascii import ASCIIRenderer

__all__ = [
    "Renderer",
    "RasterSurface",
    "ArtRenderer",
    "Artwork",
    "draw_artwork",
    "render_basic",
    "render_vibrant",
    "render_to_image",
    "ASCIIRenderer",
]
