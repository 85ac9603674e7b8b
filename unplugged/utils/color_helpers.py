"""
Colour helper utilities.

Provides colour parsing, alpha handling and gradient interpolation for
the raster surface and renderers.
"""

from typing import Sequence, Tuple, Union
from PIL import ImageColor


RGB = Tuple[int, int, int]
RGBA = Tuple[int, int, int, int]
ColorLike = Union[str, RGB, RGBA]


def parse_color(color: ColorLike) -> RGBA:
    """
    Convert a colour to an RGBA tuple.

    Args:
        color: Hex string ("#FF4500"), CSS colour name, or RGB/RGBA tuple

    Returns:
        RGBA tuple with values 0-255 (alpha 255 if not given)
    """
    if isinstance(color, str):
        color = ImageColor.getrgb(color)
    if len(color) == 3:
        r, g, b = color
        return (int(r), int(g), int(b), 255)
    r, g, b, a = color
    return (int(r), int(g), int(b), int(a))


def alpha_to_byte(alpha: float) -> int:
    """
    Convert a 0-1 alpha to a 0-255 channel value.

    Out-of-range alphas are clamped, not rejected.
    """
    return int(round(max(0.0, min(1.0, alpha)) * 255))


def with_alpha(color: ColorLike, alpha: float = 1.0) -> RGBA:
    """
    Apply a 0-1 alpha multiplier to a colour.

    Args:
        color: Colour to convert
        alpha: Opacity multiplier (clamped to 0-1)

    Returns:
        RGBA tuple
    """
    r, g, b, a = parse_color(color)
    return (r, g, b, int(round(a * alpha_to_byte(alpha) / 255)))


def lerp_color(start: RGBA, end: RGBA, t: float) -> RGBA:
    """Linearly interpolate between two RGBA colours (t in 0-1)."""
    return tuple(
        int(round(s + (e - s) * t)) for s, e in zip(start, end)
    )


def interpolate_stops(stops: Sequence[Tuple[float, RGBA]], t: float) -> RGBA:
    """
    Sample a multi-stop gradient.

    Args:
        stops: (offset, RGBA) pairs sorted by offset, offsets in 0-1
        t: Position along the gradient; values outside 0-1 take the end colours

    Returns:
        Interpolated RGBA colour
    """
    if t <= stops[0][0]:
        return stops[0][1]
    if t >= stops[-1][0]:
        return stops[-1][1]

    for (offset_a, color_a), (offset_b, color_b) in zip(stops, stops[1:]):
        if offset_a <= t <= offset_b:
            span = offset_b - offset_a
            if span <= 0:
                return color_b
            return lerp_color(color_a, color_b, (t - offset_a) / span)

    return stops[-1][1]
