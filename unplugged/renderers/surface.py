"""
Raster surface for the art renderer.

Wraps a Pillow RGBA image with canvas-style drawing operations. Every
operation paints onto a transparent layer the size of its (clipped)
bounding box and composites it source-over, so each shape can carry its
own alpha the way a 2D canvas globalAlpha does.
"""

import math
from typing import Callable, List, Optional, Sequence, Tuple

from PIL import Image, ImageDraw

from unplugged.utils.color_helpers import (
    ColorLike,
    RGBA,
    interpolate_stops,
    parse_color,
    with_alpha,
)


Point = Tuple[float, float]


def cubic_bezier_points(p0: Point, p1: Point, p2: Point, p3: Point,
                        segments: int = 32) -> List[Point]:
    """
    Flatten a cubic bezier curve into a polyline.

    Args:
        p0: Start point
        p1: First control point
        p2: Second control point
        p3: End point
        segments: Number of line segments

    Returns:
        List of segments + 1 points from p0 to p3
    """
    points = []
    for i in range(segments + 1):
        t = i / segments
        mt = 1 - t
        a = mt * mt * mt
        b = 3 * mt * mt * t
        c = 3 * mt * t * t
        d = t * t * t
        points.append((
            a * p0[0] + b * p1[0] + c * p2[0] + d * p3[0],
            a * p0[1] + b * p1[1] + c * p2[1] + d * p3[1],
        ))
    return points


def quadratic_bezier_points(p0: Point, control: Point, p1: Point,
                            segments: int = 12) -> List[Point]:
    """Flatten a quadratic bezier curve, excluding its start point."""
    points = []
    for i in range(1, segments + 1):
        t = i / segments
        mt = 1 - t
        points.append((
            mt * mt * p0[0] + 2 * mt * t * control[0] + t * t * p1[0],
            mt * mt * p0[1] + 2 * mt * t * control[1] + t * t * p1[1],
        ))
    return points


class RasterSurface:
    """
    Mutable RGBA pixel buffer owned by a single render call.

    Coordinates are floats in pixels with the origin at the top-left.
    Alphas are 0-1 multipliers; out-of-range values are clamped and
    negative sizes are normalised, never rejected.
    """

    def __init__(self, width: int, height: int):
        """
        Create an empty (fully transparent) surface.

        Args:
            width: Surface width in pixels
            height: Surface height in pixels

        Raises:
            ValueError: If width or height is not positive
        """
        if width <= 0 or height <= 0:
            raise ValueError(f"Surface size must be positive, got {width}x{height}")
        self.width = int(width)
        self.height = int(height)
        self.image = Image.new('RGBA', (self.width, self.height), (0, 0, 0, 0))

    @property
    def size(self) -> Tuple[int, int]:
        return (self.width, self.height)

    def clear(self) -> None:
        """Reset every pixel to transparent."""
        self.image = Image.new('RGBA', (self.width, self.height), (0, 0, 0, 0))

    def _clip(self, left: float, top: float, right: float,
              bottom: float) -> Optional[Tuple[int, int, int, int]]:
        """Clip an inclusive float box to the surface; None if nothing is left."""
        x0 = max(0, int(math.floor(left)))
        y0 = max(0, int(math.floor(top)))
        x1 = min(self.width, int(math.ceil(right)) + 1)
        y1 = min(self.height, int(math.ceil(bottom)) + 1)
        if x1 <= x0 or y1 <= y0:
            return None
        return (x0, y0, x1, y1)

    def _composite(self, left: float, top: float, right: float, bottom: float,
                   paint: Callable[[ImageDraw.ImageDraw, int, int], None]) -> None:
        """
        Paint onto a layer covering the given box and composite it.

        Args:
            left, top, right, bottom: Box in surface coordinates (clipped here)
            paint: Callback receiving (draw, offset_x, offset_y) for the layer
        """
        clipped = self._clip(left, top, right, bottom)
        if clipped is None:
            return
        x0, y0, x1, y1 = clipped

        layer = Image.new('RGBA', (x1 - x0, y1 - y0), (0, 0, 0, 0))
        paint(ImageDraw.Draw(layer), x0, y0)
        self.image.alpha_composite(layer, dest=(x0, y0))

    def fill_rect(self, x: float, y: float, width: float, height: float,
                  color: ColorLike, alpha: float = 1.0) -> None:
        """Fill an axis-aligned rectangle covering [x, x + width) x [y, y + height)."""
        if width < 0:
            x, width = x + width, -width
        if height < 0:
            y, height = y + height, -height
        fill = with_alpha(color, alpha)

        def paint(draw, ox, oy):
            rx0 = int(round(x)) - ox
            ry0 = int(round(y)) - oy
            rx1 = max(rx0, int(round(x + width)) - 1 - ox)
            ry1 = max(ry0, int(round(y + height)) - 1 - oy)
            draw.rectangle([rx0, ry0, rx1, ry1], fill=fill)

        self._composite(x, y, x + width, y + height, paint)

    def fill_circle(self, cx: float, cy: float, radius: float,
                    color: ColorLike, alpha: float = 1.0) -> None:
        """Fill a circle centred on (cx, cy)."""
        radius = max(0.0, radius)
        fill = with_alpha(color, alpha)

        def paint(draw, ox, oy):
            draw.ellipse(
                [cx - radius - ox, cy - radius - oy, cx + radius - ox, cy + radius - oy],
                fill=fill,
            )

        self._composite(cx - radius, cy - radius, cx + radius, cy + radius, paint)

    def fill_polygon(self, points: Sequence[Point], color: ColorLike,
                     alpha: float = 1.0) -> None:
        """Fill a closed polygon."""
        if len(points) < 3:
            return
        fill = with_alpha(color, alpha)
        xs = [p[0] for p in points]
        ys = [p[1] for p in points]

        def paint(draw, ox, oy):
            draw.polygon([(px - ox, py - oy) for px, py in points], fill=fill)

        self._composite(min(xs), min(ys), max(xs), max(ys), paint)

    def stroke_polyline(self, points: Sequence[Point], color: ColorLike,
                        alpha: float = 1.0, width: float = 1.0) -> None:
        """
        Stroke an open polyline with round joins and caps.

        Args:
            points: Two or more points
            color: Stroke colour
            alpha: Opacity multiplier
            width: Line width in pixels (at least 1 pixel is drawn)
        """
        if len(points) < 2:
            return
        fill = with_alpha(color, alpha)
        line_width = max(1, int(round(width)))
        cap = line_width / 2
        pad = cap + 1
        xs = [p[0] for p in points]
        ys = [p[1] for p in points]

        def paint(draw, ox, oy):
            shifted = [(px - ox, py - oy) for px, py in points]
            draw.line(shifted, fill=fill, width=line_width, joint='curve')
            if line_width > 2:
                for px, py in (shifted[0], shifted[-1]):
                    draw.ellipse([px - cap, py - cap, px + cap, py + cap], fill=fill)

        self._composite(min(xs) - pad, min(ys) - pad, max(xs) + pad, max(ys) + pad, paint)

    def stroke_bezier(self, p0: Point, p1: Point, p2: Point, p3: Point,
                      color: ColorLike, alpha: float = 1.0, width: float = 1.0) -> None:
        """Stroke a cubic bezier curve."""
        self.stroke_polyline(cubic_bezier_points(p0, p1, p2, p3), color, alpha, width)

    def fill_linear_gradient(self, start: Point, end: Point,
                             stops: Sequence[Tuple[float, ColorLike]],
                             box: Optional[Tuple[float, float, float, float]] = None) -> None:
        """
        Fill a box with a linear gradient.

        Colours are constant along lines perpendicular to start -> end and
        pad with the end colours beyond either point.

        Args:
            start: Gradient start point (surface coordinates)
            end: Gradient end point (surface coordinates)
            stops: (offset, colour) pairs, offsets in 0-1
            box: (x, y, width, height) to fill (default: whole surface)
        """
        if box is None:
            box = (0, 0, self.width, self.height)
        bx, by, bw, bh = box
        rgba_stops = sorted(((offset, parse_color(c)) for offset, c in stops),
                            key=lambda s: s[0])

        sx, sy = start
        dx = end[0] - sx
        dy = end[1] - sy
        length_sq = dx * dx + dy * dy

        def color_at(px: float, py: float) -> RGBA:
            if length_sq == 0:
                return rgba_stops[-1][1]
            return interpolate_stops(rgba_stops, ((px - sx) * dx + (py - sy) * dy) / length_sq)

        clipped = self._clip(bx, by, bx + bw - 1, by + bh - 1)
        if clipped is None:
            return
        layer_w = clipped[2] - clipped[0]
        layer_h = clipped[3] - clipped[1]

        def paint(draw, ox, oy):
            if dx == 0:
                for row in range(layer_h):
                    draw.line([(0, row), (layer_w - 1, row)],
                              fill=color_at(ox, oy + row + 0.5))
                return
            if dy == 0:
                for col in range(layer_w):
                    draw.line([(col, 0), (col, layer_h - 1)],
                              fill=color_at(ox + col + 0.5, oy))
                return

            # Oblique axis: sweep perpendicular lines one pixel apart
            length = math.sqrt(length_sq)
            ux, uy = dx / length, dy / length
            reach = math.hypot(layer_w, layer_h) + 2
            corners = [(ox, oy), (ox + layer_w, oy), (ox, oy + layer_h), (ox + layer_w, oy + layer_h)]
            projections = [(cx - sx) * ux + (cy - sy) * uy for cx, cy in corners]

            draw.rectangle([0, 0, layer_w - 1, layer_h - 1],
                           fill=color_at(ox + layer_w / 2, oy + layer_h / 2))
            for step in range(int(math.floor(min(projections))) - 1,
                              int(math.ceil(max(projections))) + 2):
                color = interpolate_stops(rgba_stops, step / length)
                cx = sx + ux * step - ox
                cy = sy + uy * step - oy
                draw.line(
                    [(cx + uy * reach, cy - ux * reach), (cx - uy * reach, cy + ux * reach)],
                    fill=color, width=2,
                )

        self._composite(bx, by, bx + bw - 1, by + bh - 1, paint)

    def to_image(self) -> Image.Image:
        """
        Snapshot the surface as an RGB image.

        Returns:
            New PIL Image (RGB mode); later drawing does not affect it
        """
        return self.image.convert('RGB')
