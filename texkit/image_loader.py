"""
Image file loading.

Loads PNG, JPEG, TGA, BMP, WebP, ... files with Pillow and returns an
RGBA8 ImageBuffer ready for the transforms:
- Palette, grayscale and RGB images are converted to RGBA
- Images without alpha get a fully opaque alpha channel
- No color management; values are the file's sRGB bytes
"""

import logging
from pathlib import Path

import numpy as np
from PIL import Image, UnidentifiedImageError

from .buffer import ImageBuffer

logger = logging.getLogger(__name__)


class ImageLoadError(Exception):
    """Raised when an image file cannot be loaded."""
    pass


def image_to_buffer(img: Image.Image) -> ImageBuffer:
    """
    Convert an opened Pillow image into an ImageBuffer for editing.

    Example:
        >>> buf = image_to_buffer(Image.open("albedo.png"))
    """
    rgba = img if img.mode == "RGBA" else img.convert("RGBA")
    arr = np.asarray(rgba, dtype=np.uint8)
    return ImageBuffer(rgba.width, rgba.height, arr.reshape(-1).copy())


def load_image(filepath: str | Path) -> ImageBuffer:
    """
    Load an image file as an RGBA8 buffer.

    Args:
        filepath: Path to the image

    Returns:
        ImageBuffer with the file's pixels

    Raises:
        ImageLoadError: If the file is missing or not a readable image

    Example:
        >>> buf = load_image("normal.png")
        >>> buf.width, buf.height
        (1024, 1024)
    """
    filepath = Path(filepath)

    if not filepath.exists():
        raise ImageLoadError(f"File not found: {filepath}")

    try:
        with Image.open(filepath) as img:
            buffer = image_to_buffer(img)
    except UnidentifiedImageError as e:
        raise ImageLoadError(f"Not a readable image: {filepath}") from e
    except OSError as e:
        raise ImageLoadError(f"Failed to read image: {e}") from e

    logger.debug("Loaded %s (%dx%d)", filepath, buffer.width, buffer.height)
    return buffer


def get_image_info(filepath: str | Path) -> dict:
    """Get basic metadata from an image file without decoding pixels."""
    filepath = Path(filepath)

    try:
        with Image.open(filepath) as img:
            return {
                'format': img.format,
                'mode': img.mode,
                'width': img.width,
                'height': img.height,
                'has_alpha': 'A' in img.getbands(),
            }
    except (OSError, UnidentifiedImageError) as e:
        raise ImageLoadError(f"Failed to read image info: {e}") from e
