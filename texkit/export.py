# texkit/export.py
import logging

import numpy as np
import cv2

from .buffer import ImageBuffer

logger = logging.getLogger(__name__)


class ImageSaveError(Exception):
    """Raised when OpenCV cannot write an image."""
    pass


def _write(path, img: np.ndarray, params: list) -> None:
    try:
        ok = cv2.imwrite(str(path), img, params)
    except cv2.error as e:
        raise ImageSaveError(f"Failed to write {path}: {e}") from e
    if not ok:
        raise ImageSaveError(f"Failed to write {path}")


def save_png(buffer: ImageBuffer, path: str, compression: int = 3) -> None:
    """
    Save an RGBA buffer as PNG, alpha included. Uses OpenCV.
    """
    bgra = cv2.cvtColor(buffer.pixels, cv2.COLOR_RGBA2BGRA)
    _write(path, bgra, [cv2.IMWRITE_PNG_COMPRESSION, int(compression)])
    logger.debug("Saved %dx%d PNG to %s", buffer.width, buffer.height, path)


def save_jpeg(buffer: ImageBuffer, path: str, quality: int = 95) -> None:
    """
    Save the RGB part of a buffer as JPEG (alpha is dropped). Uses OpenCV.
    """
    bgr = np.ascontiguousarray(buffer.pixels[..., 2::-1])  # RGB->BGR for OpenCV
    _write(path, bgr, [cv2.IMWRITE_JPEG_QUALITY, int(quality)])
    logger.debug("Saved %dx%d JPEG to %s", buffer.width, buffer.height, path)
