"""
Utility functions for unplugged.

Helper functions for colour handling and other common operations.
"""

from unplugged.utils.color_helpers import (
    parse_color,
    alpha_to_byte,
    with_alpha,
    lerp_color,
    interpolate_stops,
)

__all__ = [
    "parse_color",
    "alpha_to_byte",
    "with_alpha",
    "lerp_color",
    "interpolate_stops",
]
