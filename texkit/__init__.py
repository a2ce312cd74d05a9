"""
Pixel transforms for RGBA8 texture images.

This package contains:
- Per-pixel effects (swizzle, bump scale, tint) with fusable frame variants
- HDR -> SDR filmic tone mapping
- Geometric transforms (resize, tile, offset, flip)
- Multi-image composition (mask, pack, unpack)
- Image loading and saving
"""

import logging

from .buffer import ImageBuffer
from .channels import Channel, ChannelMap
from .color import (
    HdrSettings,
    filmic_tonemap,
    hdr_to_sdr,
    hdr_to_sdr_array,
    linear_to_srgb,
    srgb_to_linear,
)
from .compose import PackEntry, duplicate, mask, pack, unpack
from .constants import NORMAL_DEFAULT_RGB
from .draw import fill
from .errors import BufferSizeError, InvalidChannelError, TexkitError
from .export import ImageSaveError, save_jpeg, save_png
from .geom_ops import flip, offset, resize, tile
from .image_loader import ImageLoadError, image_to_buffer, load_image
from .pixel_ops import (
    bump_scale,
    bump_scale_frame,
    swizzle,
    swizzle_frame,
    tint,
    tint_frame,
)
from .utils import clamp, lerp, tint_to_multiplier

__version__ = "1.0.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "ImageBuffer",
    "Channel",
    "ChannelMap",
    "PackEntry",
    "HdrSettings",
    "NORMAL_DEFAULT_RGB",
    # Per-pixel
    "swizzle",
    "swizzle_frame",
    "bump_scale",
    "bump_scale_frame",
    "tint",
    "tint_frame",
    # Geometry
    "tile",
    "offset",
    "resize",
    "flip",
    # Composition
    "duplicate",
    "mask",
    "pack",
    "unpack",
    "fill",
    # Color
    "hdr_to_sdr",
    "hdr_to_sdr_array",
    "filmic_tonemap",
    "linear_to_srgb",
    "srgb_to_linear",
    # Utilities
    "lerp",
    "clamp",
    "tint_to_multiplier",
    # I/O
    "load_image",
    "image_to_buffer",
    "save_png",
    "save_jpeg",
    # Errors
    "TexkitError",
    "InvalidChannelError",
    "BufferSizeError",
    "ImageLoadError",
    "ImageSaveError",
]
