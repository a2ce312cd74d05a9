"""
RGBA8 image buffer.

Pixels are stored as a flat uint8 array in row-major order, 4 bytes per
pixel, stride = width * 4. The buffer is owned by the caller; texkit never
keeps a reference after a call returns.
"""

from dataclasses import dataclass

import numpy as np

from .constants import CHANNELS
from .errors import BufferSizeError


@dataclass(eq=False)
class ImageBuffer:
    """Width x height RGBA image backed by a flat uint8 array."""
    width: int
    height: int
    data: np.ndarray

    def __post_init__(self):
        if self.width < 0 or self.height < 0:
            raise BufferSizeError(f"Invalid dimensions {self.width}x{self.height}")

        if isinstance(self.data, (bytes, bytearray, memoryview)):
            data = np.frombuffer(self.data, dtype=np.uint8).copy()
        else:
            data = np.asarray(self.data)
        if data.dtype != np.uint8:
            data = np.clip(data, 0, 255).astype(np.uint8)
        self.data = data.reshape(-1)

        expected = self.width * self.height * CHANNELS
        if self.data.size != expected:
            raise BufferSizeError(
                f"Buffer of {self.width}x{self.height} needs {expected} bytes, got {self.data.size}"
            )

    # ---------- Construction ----------

    @classmethod
    def create(cls, width: int, height: int) -> "ImageBuffer":
        """New transparent black buffer."""
        if width < 0 or height < 0:
            raise BufferSizeError(f"Invalid dimensions {width}x{height}")
        return cls(width, height, np.zeros(width * height * CHANNELS, dtype=np.uint8))

    @classmethod
    def from_array(cls, arr: np.ndarray) -> "ImageBuffer":
        """
        Build a buffer from an (H, W, 4) or (H, W, 3) array.

        3-channel input gets a fully opaque alpha channel.
        """
        arr = np.asarray(arr)
        if arr.ndim != 3 or arr.shape[2] not in (3, 4):
            raise BufferSizeError(f"Expected (H, W, 3|4) array, got shape {arr.shape}")

        h, w, ch = arr.shape
        rgba = np.empty((h, w, CHANNELS), dtype=np.uint8)
        rgba[..., :ch] = np.clip(arr, 0, 255)
        if ch == 3:
            rgba[..., 3] = 255
        return cls(w, h, rgba.reshape(-1))

    # ---------- Views ----------

    @property
    def pixels(self) -> np.ndarray:
        """(H, W, 4) view onto data. Writes go straight to the buffer."""
        return self.data.reshape(self.height, self.width, CHANNELS)

    @property
    def size(self) -> tuple[int, int]:
        return self.width, self.height

    def __len__(self) -> int:
        return self.data.size

    def copy(self) -> "ImageBuffer":
        return ImageBuffer(self.width, self.height, self.data.copy())

    # ---------- Region access ----------

    def get_region(self, x: int, y: int, width: int, height: int) -> "ImageBuffer":
        """
        Copy a rectangle out of the buffer.

        Parts of the rectangle outside the buffer read as transparent black.
        """
        region = ImageBuffer.create(width, height)
        x0, y0 = max(x, 0), max(y, 0)
        x1, y1 = min(x + width, self.width), min(y + height, self.height)
        if x1 > x0 and y1 > y0:
            region.pixels[y0 - y:y1 - y, x0 - x:x1 - x] = self.pixels[y0:y1, x0:x1]
        return region

    def put_region(self, region: "ImageBuffer", x: int, y: int) -> None:
        """Write region at (x, y). Anything falling outside the buffer is dropped."""
        x0, y0 = max(x, 0), max(y, 0)
        x1, y1 = min(x + region.width, self.width), min(y + region.height, self.height)
        if x1 > x0 and y1 > y0:
            self.pixels[y0:y1, x0:x1] = region.pixels[y0 - y:y1 - y, x0 - x:x1 - x]

    def _replace(self, pixels: np.ndarray) -> None:
        """Swap in new (H, W, 4) content, updating the dimensions."""
        h, w = pixels.shape[:2]
        self.data = np.ascontiguousarray(pixels, dtype=np.uint8).reshape(-1)
        self.width = w
        self.height = h
