"""
Solid color fills.
"""

from typing import Optional

from .buffer import ImageBuffer
from .utils import store_byte


def fill(
    buffer: ImageBuffer,
    r: float,
    g: float,
    b: float,
    x: int = 0,
    y: int = 0,
    width: Optional[int] = None,
    height: Optional[int] = None,
) -> None:
    """
    Fill a rectangle with an opaque color, in place.

    The rectangle defaults to the whole image, is clipped to the image and
    may have negative width/height (it then extends left/up from x, y).
    Filled pixels get alpha 255.
    """
    if width is None:
        width = buffer.width
    if height is None:
        height = buffer.height

    x0, x1 = sorted((x, x + width))
    y0, y1 = sorted((y, y + height))
    x0, y0 = max(x0, 0), max(y0, 0)
    x1, y1 = min(x1, buffer.width), min(y1, buffer.height)
    if x1 <= x0 or y1 <= y0:
        return

    buffer.pixels[y0:y1, x0:x1] = (store_byte(r), store_byte(g), store_byte(b), 255)
