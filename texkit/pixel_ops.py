"""
Per-pixel transforms: swizzle, bump scale and tint.

Every transform comes in two flavours:

- a whole-buffer function (swizzle, bump_scale, tint) that takes an
  ImageBuffer and rewrites all of its pixels in place, vectorized with numpy;
- a *_frame function that rewrites the single pixel starting at byte offset
  i of a flat byte sequence. Use these when running your own pass over the
  data so several effects can share one loop:

    >>> for i in range(0, len(buf.data), 4):
    ...     swizzle_frame(buf.data, {"R": "B", "B": "R"}, i)
    ...     bump_scale_frame(buf.data, 2.0, i)

Both flavours produce identical bytes.
"""

from typing import Mapping, Optional, Union

import numpy as np

from .buffer import ImageBuffer
from .channels import ChannelMap
from .color import HdrSettings, hdr_to_sdr_array
from .constants import NORMAL_DEFAULT_RGB
from .utils import lerp, round_half_up, store_byte, tint_to_multiplier

ChannelsArg = Union[ChannelMap, Mapping]


# ============================================================================
# Swizzle
# ============================================================================

def swizzle(buffer: ImageBuffer, channels: ChannelsArg) -> None:
    """
    Copy channel data into other channels, in place.

    Args:
        buffer: Image to modify
        channels: Destination -> source map, e.g. {"R": "B", "B": "R"}
                  swaps red and blue

    Raises:
        InvalidChannelError: If any key or value is not R, G, B or A
    """
    channel_map = ChannelMap.coerce(channels)
    px = buffer.pixels
    original = px.copy()
    for destination, source in channel_map:
        px[..., destination] = original[..., source]


def swizzle_frame(data, channels: ChannelsArg, i: int) -> None:
    """Swizzle the pixel at data[i:i + 4]. All four values are read before writing."""
    channel_map = ChannelMap.coerce(channels)
    values = (int(data[i]), int(data[i + 1]), int(data[i + 2]), int(data[i + 3]))
    for destination, source in channel_map:
        data[i + destination] = values[source]


# ============================================================================
# Bump scale
# ============================================================================

def bump_scale(buffer: ImageBuffer, scale: float) -> None:
    """
    Bake a scale factor into a tangent-space normal map, in place.

    R and G are lerped from the flat normal (128, 128) towards the current
    value by scale. 1.0 leaves the map unchanged, 0.0 flattens it.
    Blue and alpha are left alone.
    """
    px = buffer.pixels
    for c in (0, 1):
        scaled = lerp(NORMAL_DEFAULT_RGB[c], px[..., c].astype(np.float64), scale)
        px[..., c] = store_byte(scaled)


def bump_scale_frame(data, scale: float, i: int) -> None:
    """Bump scale the pixel at data[i:i + 4]."""
    data[i] = store_byte(lerp(NORMAL_DEFAULT_RGB[0], int(data[i]), scale))
    data[i + 1] = store_byte(lerp(NORMAL_DEFAULT_RGB[1], int(data[i + 1]), scale))


# ============================================================================
# Tint
# ============================================================================

def _tint_channel(values: np.ndarray, tint: float) -> np.ndarray:
    """
    Apply one tint component to channel values (float64).

    Negative tints move towards the inverted value by |tint| / 255,
    positive tints multiply by tint / 255.
    """
    if tint < 0:
        return store_byte(lerp(values, 255.0 - values, tint_to_multiplier(-tint)))
    return store_byte(round_half_up(values * tint_to_multiplier(tint)))


def _tint_rgb(
    rgb: np.ndarray,
    r: float,
    g: float,
    b: float,
    intensity: float,
    settings: Optional[HdrSettings],
) -> np.ndarray:
    """Tint an (..., 3) uint8 array and return the new uint8 values."""
    out = np.empty(rgb.shape, dtype=np.uint8)
    src = rgb.astype(np.float64)
    for c, tint_value in enumerate((r, g, b)):
        out[..., c] = _tint_channel(src[..., c], tint_value)

    if intensity != 1:
        settings = settings or HdrSettings()
        out = store_byte(hdr_to_sdr_array(
            out,
            intensity,
            settings.exposure,
            settings.contrast,
            settings.saturation,
            settings.highlight_compression,
            settings.shadow_lifting,
        ))
    return out


def tint(
    buffer: ImageBuffer,
    r: float,
    g: float,
    b: float,
    intensity: float = 1.0,
    settings: Optional[HdrSettings] = None,
) -> None:
    """
    Multiply the image by an RGB color, in place.

    Args:
        buffer: Image to modify
        r, g, b: 0..255 multipliers where 255 == 1.0. Negative values
                 blend towards the inverted channel instead.
        intensity: HDR intensity. Anything other than 1 runs the tinted
                   color through hdr_to_sdr.
        settings: Extra hdr_to_sdr parameters, used only when intensity != 1

    Example:
        >>> tint(buf, 128, 128, 128)  # darken by half
    """
    px = buffer.pixels
    px[..., :3] = _tint_rgb(px[..., :3], r, g, b, intensity, settings)


def tint_frame(
    data,
    r: float,
    g: float,
    b: float,
    intensity: float,
    i: int,
    settings: Optional[HdrSettings] = None,
) -> None:
    """Tint the pixel at data[i:i + 3]. Alpha (i + 3) is never touched."""
    rgb = np.array([[data[i], data[i + 1], data[i + 2]]], dtype=np.uint8)
    out = _tint_rgb(rgb, r, g, b, intensity, settings)[0]
    data[i] = int(out[0])
    data[i + 1] = int(out[1])
    data[i + 2] = int(out[2])
