"""
Image serialization helpers.

Turns rendered artwork into portable representations: PNG bytes, data
URLs and files on disk.
"""

import base64
import io
import os
from datetime import datetime
from PIL import Image


def image_to_png_bytes(image: Image.Image) -> bytes:
    """
    Encode a PIL Image as PNG.

    Args:
        image: PIL Image to encode

    Returns:
        PNG-formatted bytes
    """
    # Ensure RGB mode
    if image.mode != 'RGB':
        image = image.convert('RGB')

    buffer = io.BytesIO()
    image.save(buffer, format='PNG')
    return buffer.getvalue()


def image_to_data_url(image: Image.Image) -> str:
    """Encode a PIL Image as a `data:image/png;base64,...` URL."""
    encoded = base64.b64encode(image_to_png_bytes(image)).decode('ascii')
    return f"data:image/png;base64,{encoded}"


def save_image(image: Image.Image, output_dir: str = "output") -> str:
    """
    Save artwork to a timestamped PNG file.

    Args:
        image: PIL Image to save
        output_dir: Directory to write into (created if missing)

    Returns:
        Path of the written file
    """
    if not os.path.exists(output_dir):
        os.makedirs(output_dir)

    timestamp = datetime.now().strftime("%Y-%m-%d_%H%M%S")
    filename = os.path.join(output_dir, f"weather-art-{timestamp}.png")
    with open(filename, 'wb') as f:
        f.write(image_to_png_bytes(image))
    print(f"[export] Saved artwork to {filename}")
    return filename
