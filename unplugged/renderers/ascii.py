"""
ASCII renderer for previewing artwork in a terminal.

Downsamples rendered artwork and prints it as colored block characters.
Uses the half-block technique (▄) with ANSI color codes, so an 80x40
preview takes 80x20 terminal characters.
"""

import os
from typing import Optional
from PIL import Image
from unplugged.providers.base import DisplayData
from unplugged.renderers.base import Renderer
from unplugged.renderers.art import ArtRenderer


class ASCIIRenderer(Renderer):
    """
    Renders DisplayData as colored pixel blocks for terminal display.

    Each terminal cell shows two vertical pixels using foreground and
    background colors. Falls back to 256-color mode when the terminal
    does not advertise 24-bit true color.
    """

    RESET = "\033[0m"
    LOWER_HALF_BLOCK = "▄"

    def __init__(self, width: int = 80, height: int = 40,
                 art_renderer: Optional[ArtRenderer] = None):
        """
        Initialize ASCII renderer.

        Args:
            width: Preview width in terminal columns (default: 80)
            height: Preview height in pixels, two per row (default: 40)
            art_renderer: Renderer producing the full-size artwork
                (default: 800x400 vibrant ArtRenderer)
        """
        self.width = width
        self.height = height
        self.art_renderer = art_renderer or ArtRenderer(quiet=True)

        # Detect terminal color capabilities
        self.true_color = self._detect_true_color()

    def _detect_true_color(self) -> bool:
        """
        Detect if terminal supports 24-bit true color.

        Checks COLORTERM environment variable for "truecolor" or "24bit".

        Returns:
            True if 24-bit color is supported, False otherwise
        """
        colorterm = os.environ.get("COLORTERM", "").lower()
        return colorterm in ("truecolor", "24bit")

    def render(self, data: DisplayData) -> str:
        """
        Render DisplayData to a colored ASCII preview.

        Args:
            data: Weather DisplayData from a provider

        Returns:
            Multi-line colored string using the half-block technique
        """
        return self.image_to_ascii(self.art_renderer.render(data))

    def image_to_ascii(self, img: Image.Image) -> str:
        """
        Downsample an image and convert it to colored half blocks.

        Args:
            img: PIL Image of any size

        Returns:
            Colored ASCII string representation
        """
        if img.mode != 'RGB':
            img = img.convert('RGB')
        if img.size != (self.width, self.height):
            img = img.resize((self.width, self.height), Image.LANCZOS)

        pixels = img.load()
        half_block = self._rgb_half_block if self.true_color else self._256_half_block
        rows = []

        # Each pair of pixel rows becomes one terminal row; an odd last row pairs with black
        for top in range(0, self.height, 2):
            has_bottom = top + 1 < self.height
            cells = [
                half_block(pixels[col, top], pixels[col, top + 1] if has_bottom else (0, 0, 0))
                for col in range(self.width)
            ]
            rows.append("".join(cells) + self.RESET)

        return "\n".join(rows)

    def _rgb_half_block(self, top_rgb: tuple, bottom_rgb: tuple) -> str:
        """Half-block character with 24-bit colors (background = top, foreground = bottom)."""
        r_top, g_top, b_top = top_rgb
        r_bot, g_bot, b_bot = bottom_rgb
        return f"\033[48;2;{r_top};{g_top};{b_top}m\033[38;2;{r_bot};{g_bot};{b_bot}m{self.LOWER_HALF_BLOCK}"

    def _256_half_block(self, top_rgb: tuple, bottom_rgb: tuple) -> str:
        """Half-block character quantized to the 256-color palette."""
        top_color = self._rgb_to_256(top_rgb)
        bot_color = self._rgb_to_256(bottom_rgb)
        return f"\033[48;5;{top_color}m\033[38;5;{bot_color}m{self.LOWER_HALF_BLOCK}"

    def _rgb_to_256(self, rgb: tuple) -> int:
        """
        Convert RGB color to nearest 256-color palette index.

        Grays use the 24-step ramp (232-255), everything else the
        6x6x6 cube (16-231).

        Args:
            rgb: RGB tuple (r, g, b) with values 0-255

        Returns:
            256-color palette index (16-255)
        """
        r, g, b = rgb

        if r == g == b:
            if r < 8:
                return 16
            elif r > 247:
                return 231
            return 232 + round((r - 8) / 247 * 23)

        r_index = round(r / 255 * 5)
        g_index = round(g / 255 * 5)
        b_index = round(b / 255 * 5)
        return 16 + (r_index * 36) + (g_index * 6) + b_index

    def render_frame(self, data: DisplayData, title: str = None) -> str:
        """
        Render with an optional title above the preview.

        Args:
            data: DisplayData to render
            title: Optional title (e.g., genre and location)

        Returns:
            Colored ASCII art with optional title
        """
        lines = []

        if title:
            lines.append("")
            lines.append(title.center(self.width))
            lines.append("=" * self.width)

        lines.append(self.render(data))

        return "\n".join(lines)
