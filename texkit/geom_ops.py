"""
Geometric transformations for images.

resize, tile, offset and flip rewrite the ImageBuffer they are given
(dimensions included). mirror_h / mirror_v are the array-level helpers and
return copies.
"""

import logging
from typing import Optional

import cv2
import numpy as np

from .buffer import ImageBuffer
from .constants import DEFAULT_INTERPOLATION, INTERPOLATIONS
from .errors import BufferSizeError
from .utils import round_half_up

logger = logging.getLogger(__name__)


def mirror_h(img):
    """Mirror horizontally (flip left-right)."""
    return np.flip(img, axis=1).copy()


def mirror_v(img):
    """Mirror vertically (flip top-bottom)."""
    return np.flip(img, axis=0).copy()


def _scale(pixels: np.ndarray, width: int, height: int, interpolation: str) -> np.ndarray:
    """Scale (H, W, 4) pixels to width x height."""
    if interpolation not in INTERPOLATIONS:
        raise ValueError(
            f"Unknown interpolation: {interpolation} (expected one of {', '.join(INTERPOLATIONS)})"
        )
    if width <= 0 or height <= 0:
        raise BufferSizeError(f"Cannot scale to {width}x{height}")
    if pixels.shape[0] == 0 or pixels.shape[1] == 0:
        raise BufferSizeError("Cannot scale an empty image")

    if pixels.shape[1] == width and pixels.shape[0] == height:
        return pixels.copy()
    return cv2.resize(
        np.ascontiguousarray(pixels),
        (width, height),
        interpolation=INTERPOLATIONS[interpolation],
    )


def resize(
    buffer: ImageBuffer,
    width: int,
    height: Optional[int] = None,
    interpolation: str = DEFAULT_INTERPOLATION,
) -> None:
    """
    Resize an image in place without losing its content.

    Args:
        buffer: Image to resize
        width: New width in pixels (sign is ignored)
        height: New height in pixels. None or 0 keeps the aspect ratio.
        interpolation: One of the names in constants.INTERPOLATIONS

    Example:
        >>> resize(buf, 1024)  # 1024 wide, height follows aspect ratio
    """
    if not height:
        if buffer.width == 0:
            raise BufferSizeError("Cannot derive height from a zero-width image")
        height = int(round_half_up(buffer.height * (width / buffer.width)))

    new_w = abs(int(width))
    new_h = abs(int(height))

    # Scale from a snapshot of the old content, then swap it in
    staging = buffer.pixels.copy()
    scaled = _scale(staging, new_w, new_h, interpolation)

    logger.debug("resize %dx%d -> %dx%d (%s)", buffer.width, buffer.height, new_w, new_h, interpolation)
    buffer._replace(scaled)


def tile(
    buffer: ImageBuffer,
    tile_x: int,
    tile_y: int,
    size: int,
    size_y: Optional[int] = None,
    interpolation: str = DEFAULT_INTERPOLATION,
) -> None:
    """
    Repeat an image tile_x times across and tile_y times down, in place.

    The image is first shrunk to one grid cell of floor(size / tile_x) by
    floor(size_y / tile_y) pixels. The assembled grid can come out a few
    pixels short of size x size_y, so it is scaled to the exact size at the
    end; this may blur the tile seams slightly.

    Args:
        buffer: Image to tile
        tile_x: Repeats in x
        tile_y: Repeats in y
        size: Target width
        size_y: Target height, defaults to size

    Example:
        >>> tile(buf, 2, 1, buf.width * 2, buf.height)
    """
    if size_y is None:
        size_y = size
    if tile_x < 1 or tile_y < 1:
        raise ValueError(f"Tile counts must be >= 1, got {tile_x}x{tile_y}")

    section_x = size // tile_x
    section_y = size_y // tile_y
    if section_x <= 0 or section_y <= 0:
        raise BufferSizeError(
            f"Target {size}x{size_y} is too small for a {tile_x}x{tile_y} grid"
        )

    resize(buffer, section_x, section_y, interpolation)

    grid = np.tile(buffer.pixels, (tile_y, tile_x, 1))
    final = _scale(grid, size, size_y, interpolation)

    logger.debug("tile %dx%d cells of %dx%d -> %dx%d", tile_x, tile_y, section_x, section_y, size, size_y)
    buffer._replace(final)


def offset(buffer: ImageBuffer, offset_x: int, offset_y: int) -> None:
    """
    Pan the image with wraparound, in place.

    Content leaving one edge re-enters on the opposite edge; pixels are
    moved, never resampled. A positive offset_x moves column offset_x to
    column 0 and column 0 to column width - offset_x (offset_y likewise for
    rows). Offsets wrap modulo the image size, so negative values pan the
    other way and a full width or height is a no-op.

    Example:
        >>> offset(buf, 50, -50)
    """
    if buffer.width == 0 or buffer.height == 0:
        return

    shift_x = int(round_half_up(offset_x)) % buffer.width
    shift_y = int(round_half_up(offset_y)) % buffer.height
    if shift_x == 0 and shift_y == 0:
        return

    px = buffer.pixels
    px[...] = np.roll(px, (-shift_y, -shift_x), axis=(0, 1))


def flip(buffer: ImageBuffer, direction: str) -> None:
    """
    Mirror the image in place.

    Args:
        direction: "horizontal" (left-right) or "vertical" (top-bottom)
    """
    if direction == "horizontal":
        buffer.pixels[...] = mirror_h(buffer.pixels)
    elif direction == "vertical":
        buffer.pixels[...] = mirror_v(buffer.pixels)
    else:
        raise ValueError(f"Unknown flip direction: {direction}")
