"""
Operations that combine several images: mask, pack and unpack.

mask writes into its base image. duplicate, pack and unpack never modify
their arguments and return new buffers.
"""

import logging
from typing import List, Mapping, NamedTuple, Optional, Sequence, Tuple, Union

from .buffer import ImageBuffer
from .channels import Channel, ChannelLike, ChannelMap
from .constants import DEFAULT_INTERPOLATION
from .geom_ops import resize

logger = logging.getLogger(__name__)


class PackEntry(NamedTuple):
    """One source image for pack() and the channels it contributes."""
    buffer: ImageBuffer
    channels: Union[ChannelMap, Mapping]


def duplicate(buffer: ImageBuffer) -> ImageBuffer:
    """
    Copy an image so in-place operations leave the original alone.

    Example:
        >>> dupe = duplicate(buf)
        >>> resize(dupe, 64)  # buf keeps its size
    """
    return buffer.copy()


def _fit(buffer: ImageBuffer, width: int, height: int, interpolation: str) -> ImageBuffer:
    """Return buffer itself if it already has the size, else a resized duplicate."""
    if buffer.width == width and buffer.height == height:
        return buffer
    fitted = duplicate(buffer)
    resize(fitted, width, height, interpolation)
    return fitted


def mask(
    base: ImageBuffer,
    image_mask: ImageBuffer,
    channel: ChannelLike,
    interpolation: str = DEFAULT_INTERPOLATION,
) -> None:
    """
    Use one channel of a mask image as the alpha of base, in place.

    The mask is resized (on a copy) when the sizes differ; base keeps its
    size and RGB.

    Args:
        base: Image that receives the new alpha
        image_mask: Image providing the alpha values
        channel: R, G, B or A of image_mask

    Raises:
        InvalidChannelError: If channel is not R, G, B or A

    Example:
        >>> mask(buf, mask_buf, "B")
    """
    source = Channel.parse(channel)
    fitted = _fit(image_mask, base.width, base.height, interpolation)
    base.pixels[..., Channel.A] = fitted.pixels[..., source]


def _resolve_claims(images: Sequence) -> List[Tuple[ImageBuffer, ChannelMap]]:
    """
    Give each destination channel to the first image that asks for it.

    Later claims on a taken channel are dropped with a warning; images
    left with nothing to contribute are skipped.
    """
    claimed = set()
    resolved = []
    for index, entry in enumerate(images):
        buffer, channels = entry
        channel_map = ChannelMap.coerce(channels)

        for destination, _source in channel_map:
            if destination in claimed:
                logger.warning(
                    "Image index %d in packer is trying to write to channel %s "
                    "of the packed image, which is already written by another image. Ignoring it.",
                    index,
                    destination.name,
                )
                channel_map = channel_map.without(destination)
            else:
                claimed.add(destination)

        if len(channel_map) == 0:
            logger.debug("Image index %d in packer has no channels left, skipping", index)
            continue
        resolved.append((buffer, channel_map))
    return resolved


def pack(
    images: Sequence,
    size_x: int,
    size_y: Optional[int] = None,
    interpolation: str = DEFAULT_INTERPOLATION,
) -> ImageBuffer:
    """
    Pack channels from several images into one new image.

    Args:
        images: Sequence of PackEntry (or (buffer, channels) pairs). channels
                maps packed-image channel -> source-image channel.
        size_x: Width of the packed image
        size_y: Height of the packed image, defaults to size_x

    Returns:
        New packed image. Channels nobody writes stay 0.

    Raises:
        InvalidChannelError: If any mapping names an unknown channel

    Example:
        >>> packed = pack([
        ...     PackEntry(image1, {"R": "B"}),
        ...     PackEntry(image2, {"B": "R", "A": "G"}),
        ...     PackEntry(image3, {"G": "A"}),
        ... ], 1024, 1024)
    """
    if size_y is None:
        size_y = size_x

    packed = ImageBuffer.create(size_x, size_y)
    out = packed.pixels

    for buffer, channel_map in _resolve_claims(images):
        fitted = _fit(buffer, size_x, size_y, interpolation)
        src = fitted.pixels
        for destination, source in channel_map:
            out[..., destination] = src[..., source]

    return packed


def unpack(buffer: ImageBuffer) -> Tuple[ImageBuffer, ImageBuffer, ImageBuffer, ImageBuffer]:
    """
    Split an image into four grayscale images, one per channel.

    Each output has the channel value in R, G and B and an alpha of 255.
    Feed the alpha image back through mask() with R, G or B to reuse it
    as an alpha channel.

    Returns:
        (r, g, b, a) images
    """
    px = buffer.pixels
    outputs = []
    for channel in Channel:
        out = ImageBuffer.create(buffer.width, buffer.height)
        out_px = out.pixels
        out_px[..., :3] = px[..., channel, None]
        out_px[..., 3] = 255
        outputs.append(out)
    return tuple(outputs)
