"""
Genre drawing algorithms.

Each function paints one art genre onto a surface whose background has
already been filled. Genres without a dedicated algorithm (Fauvism, Pop
Art, Surrealism, Expressionism, and anything added later) use the
generic abstract composite.
"""

import math
import random

from unplugged.renderers.surface import RasterSurface, quadratic_bezier_points
from unplugged.weather import ArtGenre, DrawingParameters


def draw_genre(surface: RasterSurface, genre, params: DrawingParameters,
               rng: random.Random) -> RasterSurface:
    """
    Paint the given genre onto the surface.

    Args:
        surface: Surface with its background already filled
        genre: ArtGenre (unknown values fall back to the abstract composite)
        params: Drawing parameters
        rng: Random source

    Returns:
        The same surface, painted
    """
    genre_painters = {
        ArtGenre.IMPRESSIONISM: draw_impressionism,
        ArtGenre.ABSTRACT_EXPRESSIONISM: draw_abstract_expressionism,
        ArtGenre.WATERCOLOR: draw_watercolor,
        ArtGenre.GEOMETRIC_ABSTRACT: draw_geometric_abstract,
        ArtGenre.MINIMALISM: draw_minimalism,
        ArtGenre.POINTILLISM: draw_pointillism,
        ArtGenre.GLITCH_ART: draw_glitch_art,
        ArtGenre.LINE_ART: draw_line_art,
    }

    painter = genre_painters.get(genre, draw_abstract)
    painter(surface, params, rng)
    return surface


def _count(value: float) -> int:
    """Loop count for a fractional bound (rounded up, never negative)."""
    return max(0, int(math.ceil(value)))


def draw_impressionism(surface: RasterSurface, params: DrawingParameters,
                       rng: random.Random) -> None:
    """Small dabs of unmixed colour scattered across the canvas."""
    for _ in range(_count(params.density * 3)):
        x = rng.random() * surface.width
        y = rng.random() * surface.height
        color = rng.choice(params.color_palette)
        size = 5 + rng.random() * 15
        alpha = 0.3 + rng.random() * 0.4

        surface.fill_circle(x, y, size, color, alpha)


def draw_abstract_expressionism(surface: RasterSurface, params: DrawingParameters,
                                rng: random.Random) -> None:
    """
    Bold gestural strokes.

    Each stroke is a cubic bezier pushed along the wind direction; the
    distance it travels grows with distortion, and every control point
    is jittered by up to 50 pixels.
    """
    angle = (params.directionality / 180) * math.pi
    curve_intensity = params.distortion * 3

    def jitter() -> float:
        return rng.random() * 100 - 50

    for _ in range(20):
        start_x = rng.random() * surface.width
        start_y = rng.random() * surface.height
        color = rng.choice(params.color_palette)
        width = 3 + rng.random() * params.stroke_width * 3
        alpha = 0.4 + rng.random() * 0.4

        control1 = (start_x + math.cos(angle) * curve_intensity + jitter(),
                    start_y + math.sin(angle) * curve_intensity + jitter())
        control2 = (start_x + math.cos(angle) * curve_intensity * 2 + jitter(),
                    start_y + math.sin(angle) * curve_intensity * 2 + jitter())
        end = (start_x + math.cos(angle) * curve_intensity * 3 + jitter(),
               start_y + math.sin(angle) * curve_intensity * 3 + jitter())

        surface.stroke_bezier((start_x, start_y), control1, control2, end,
                              color, alpha, width)


def draw_watercolor(surface: RasterSurface, params: DrawingParameters,
                    rng: random.Random) -> None:
    """Translucent irregular blobs with curved edges."""
    for _ in range(10):
        x = rng.random() * surface.width
        y = rng.random() * surface.height
        color = rng.choice(params.color_palette)
        size = 30 + rng.random() * 100
        alpha = 0.1 + rng.random() * 0.2

        points = 8 + int(rng.random() * 8)
        angle_step = (math.pi * 2) / points

        outline = []
        previous = None
        for j in range(points):
            angle = j * angle_step
            radius = size * (0.5 + rng.random() * 0.5)
            point = (x + math.cos(angle) * radius, y + math.sin(angle) * radius)

            if previous is None:
                outline.append(point)
            else:
                # Control point pushed outwards between the two vertices
                mid_angle = ((j - 1) * angle_step + angle) / 2
                control = (x + math.cos(mid_angle) * radius * 1.5,
                           y + math.sin(mid_angle) * radius * 1.5)
                outline.extend(quadratic_bezier_points(previous, control, point))
            previous = point

        surface.fill_polygon(outline, color, alpha)


def draw_geometric_abstract(surface: RasterSurface, params: DrawingParameters,
                            rng: random.Random) -> None:
    """
    Hard-edged shapes on a grid.

    The grid has 4-7 cells per side. Each cell has a 70% chance of holding
    a square, circle or triangle sized to 50-100% of the cell.
    """
    grid_size = 4 + int(rng.random() * 4)
    cell_width = surface.width / grid_size
    cell_height = surface.height / grid_size

    for col in range(grid_size):
        for row in range(grid_size):
            if rng.random() <= 0.3:
                continue

            color = rng.choice(params.color_palette)
            shape_type = int(rng.random() * 3)
            pos_x = col * cell_width
            pos_y = row * cell_height
            size = min(cell_width, cell_height) * (0.5 + rng.random() * 0.5)
            alpha = 0.7 + rng.random() * 0.3

            if shape_type == 0:
                surface.fill_rect(pos_x + (cell_width - size) / 2,
                                  pos_y + (cell_height - size) / 2,
                                  size, size, color, alpha)
            elif shape_type == 1:
                surface.fill_circle(pos_x + cell_width / 2, pos_y + cell_height / 2,
                                    size / 2, color, alpha)
            else:
                surface.fill_polygon([
                    (pos_x + cell_width / 2, pos_y + (cell_height - size) / 2),
                    (pos_x + (cell_width - size) / 2, pos_y + (cell_height + size) / 2),
                    (pos_x + (cell_width + size) / 2, pos_y + (cell_height + size) / 2),
                ], color, alpha)


def draw_minimalism(surface: RasterSurface, params: DrawingParameters,
                    rng: random.Random) -> None:
    """One to three single-colour primitives in the central 60% of the canvas."""
    color = rng.choice(params.color_palette)
    element_count = 1 + int(rng.random() * 3)

    for _ in range(element_count):
        x = surface.width * (0.2 + rng.random() * 0.6)
        y = surface.height * (0.2 + rng.random() * 0.6)
        size = min(surface.width, surface.height) * (0.05 + rng.random() * 0.2)
        element_type = int(rng.random() * 3)

        if element_type == 0:
            surface.fill_circle(x, y, size, color)
        elif element_type == 1:
            # Horizontal bar
            surface.fill_rect(x - size * 2, y, size * 4, size / 10, color)
        else:
            surface.fill_rect(x - size / 2, y - size / 2, size, size, color)


def draw_pointillism(surface: RasterSurface, params: DrawingParameters,
                     rng: random.Random) -> None:
    """Many small dots for optical blending."""
    for _ in range(_count(params.density * 8)):
        x = rng.random() * surface.width
        y = rng.random() * surface.height
        color = rng.choice(params.color_palette)
        size = 1 + rng.random() * params.stroke_width
        alpha = 0.6 + rng.random() * 0.4

        surface.fill_circle(x, y, size, color, alpha)


def draw_glitch_art(surface: RasterSurface, params: DrawingParameters,
                    rng: random.Random) -> None:
    """Displaced horizontal bands plus pixel noise."""
    stripe_count = 5 + int(rng.random() * 10)
    stripe_height = surface.height / stripe_count

    for i in range(stripe_count):
        y = i * stripe_height
        color = rng.choice(params.color_palette)
        glitch_offset = rng.random() * params.distortion * 2
        alpha = 0.3 + rng.random() * 0.4

        if rng.random() > 0.7:
            surface.fill_rect(glitch_offset, y, surface.width - glitch_offset,
                              stripe_height * (0.5 + rng.random() * 0.5), color, alpha)
        else:
            surface.fill_rect(0, y, surface.width, stripe_height, color, alpha)

    for _ in range(500):
        x = rng.random() * surface.width
        y = rng.random() * surface.height
        size = 1 + rng.random() * 3
        color = rng.choice(params.color_palette)

        surface.fill_rect(x, y, size, size, color, rng.random())


def draw_line_art(surface: RasterSurface, params: DrawingParameters,
                  rng: random.Random) -> None:
    """Straight strokes following the wind direction, +/- 45 degrees."""
    line_count = 20 + int(params.density)
    base_angle = (params.directionality / 180) * math.pi

    for _ in range(line_count):
        color = rng.choice(params.color_palette)
        angle = base_angle + (rng.random() - 0.5) * math.pi / 4

        start_x = rng.random() * surface.width
        start_y = rng.random() * surface.height
        length = 50 + rng.random() * 200
        end = (start_x + math.cos(angle) * length, start_y + math.sin(angle) * length)
        alpha = 0.5 + rng.random() * 0.5

        surface.stroke_polyline([(start_x, start_y), end], color, alpha, params.stroke_width)


def draw_abstract(surface: RasterSurface, params: DrawingParameters,
                  rng: random.Random) -> None:
    """Generic composite: large translucent circles under short random lines."""
    for _ in range(5):
        x = rng.random() * surface.width
        y = rng.random() * surface.height
        size = 50 + rng.random() * 150
        color = rng.choice(params.color_palette)
        alpha = 0.2 + rng.random() * 0.3

        surface.fill_circle(x, y, size, color, alpha)

    for _ in range(15):
        start_x = rng.random() * surface.width
        start_y = rng.random() * surface.height
        end = (start_x + (rng.random() * 200 - 100), start_y + (rng.random() * 200 - 100))
        color = rng.choice(params.color_palette)
        alpha = 0.6 + rng.random() * 0.4

        surface.stroke_polyline([(start_x, start_y), end], color, alpha, params.stroke_width)
