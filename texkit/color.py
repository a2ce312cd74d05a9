"""
sRGB transfer functions and the HDR -> SDR tone mapping pipeline.

Pipeline (per channel, except saturation which uses luminance):
    sRGB byte -> linear -> * intensity * exposure -> ** contrast
    -> filmic tonemap -> saturation -> clamp -> sRGB -> byte
"""

from dataclasses import dataclass

import numpy as np

from .constants import (
    TONE_A,
    TONE_B,
    TONE_C,
    TONE_D,
    TONE_E,
    EXPOSURE_DEFAULT,
    CONTRAST_DEFAULT,
    SATURATION_DEFAULT,
    HIGHLIGHT_COMPRESSION_DEFAULT,
    SHADOW_LIFTING_DEFAULT,
    SRGB_DECODE_THRESHOLD,
    SRGB_ENCODE_THRESHOLD,
    SRGB_A,
    LUMA_R,
    LUMA_G,
    LUMA_B,
)
from .utils import round_half_up


@dataclass(frozen=True)
class HdrSettings:
    """Optional knobs of hdr_to_sdr. Defaults leave only the filmic curve."""
    exposure: float = EXPOSURE_DEFAULT
    contrast: float = CONTRAST_DEFAULT
    saturation: float = SATURATION_DEFAULT
    highlight_compression: float = HIGHLIGHT_COMPRESSION_DEFAULT
    shadow_lifting: float = SHADOW_LIFTING_DEFAULT


# ============================================================================
# Transfer functions
# ============================================================================

def srgb_to_linear(x):
    """Convert sRGB (0..1) to linear light. Scalar or array."""
    if isinstance(x, np.ndarray):
        x = x.astype(np.float64)
        return np.where(
            x <= SRGB_DECODE_THRESHOLD,
            x / 12.92,
            np.power((np.maximum(x, SRGB_DECODE_THRESHOLD) + SRGB_A) / (1.0 + SRGB_A), 2.4),
        )
    if x <= SRGB_DECODE_THRESHOLD:
        return x / 12.92
    return ((x + SRGB_A) / (1.0 + SRGB_A)) ** 2.4


def linear_to_srgb(x):
    """Convert linear light to sRGB (0..1). Scalar or array."""
    if isinstance(x, np.ndarray):
        x = x.astype(np.float64)
        return np.where(
            x <= SRGB_ENCODE_THRESHOLD,
            x * 12.92,
            (1.0 + SRGB_A) * np.power(np.maximum(x, SRGB_ENCODE_THRESHOLD), 1.0 / 2.4) - SRGB_A,
        )
    if x <= SRGB_ENCODE_THRESHOLD:
        return x * 12.92
    return (1.0 + SRGB_A) * x ** (1.0 / 2.4) - SRGB_A


def filmic_tonemap(x):
    """ACES-approximation curve x(Ax+B) / (x(Cx+D)+E)."""
    return (x * (TONE_A * x + TONE_B)) / (x * (TONE_C * x + TONE_D) + TONE_E)


# ============================================================================
# HDR -> SDR
# ============================================================================

def hdr_to_sdr_array(
    rgb: np.ndarray,
    intensity: float,
    exposure: float = EXPOSURE_DEFAULT,
    contrast: float = CONTRAST_DEFAULT,
    saturation: float = SATURATION_DEFAULT,
    highlight_compression: float = HIGHLIGHT_COMPRESSION_DEFAULT,
    shadow_lifting: float = SHADOW_LIFTING_DEFAULT,
) -> np.ndarray:
    """
    Tone map sRGB byte colors through the HDR pipeline.

    Args:
        rgb: Array of shape (..., 3), sRGB components in 0..255
        intensity: HDR intensity multiplier
        exposure: Extra exposure multiplier
        contrast: Power applied in linear space
        saturation: 0 = grayscale, 1 = unchanged, >1 = boosted
        highlight_compression: Multiplier applied right before the curve
        shadow_lifting: Added to the curve output

    Returns:
        float64 array of the same shape with whole numbers in 0..255
    """
    arr = np.asarray(rgb, dtype=np.float64)
    if arr.shape[-1] != 3:
        raise ValueError(f"Expected RGB data with shape (..., 3); got {arr.shape}")

    lin = srgb_to_linear(arr / 255.0)

    lin = lin * (intensity * exposure)

    # Fractional powers of negative values are NaN; those become 0
    with np.errstate(invalid="ignore"):
        lin = np.power(lin, contrast)
    lin = np.where(np.isnan(lin), 0.0, lin)

    lin = filmic_tonemap(lin * highlight_compression) + shadow_lifting

    luminance = (
        LUMA_R * lin[..., 0] +
        LUMA_G * lin[..., 1] +
        LUMA_B * lin[..., 2]
    )[..., None]
    lin = luminance + saturation * (lin - luminance)

    lin = np.clip(lin, 0.0, 1.0)

    srgb = linear_to_srgb(lin)

    return round_half_up(srgb * 255.0)


def hdr_to_sdr(
    r: float,
    g: float,
    b: float,
    intensity: float,
    exposure: float = EXPOSURE_DEFAULT,
    contrast: float = CONTRAST_DEFAULT,
    saturation: float = SATURATION_DEFAULT,
    highlight_compression: float = HIGHLIGHT_COMPRESSION_DEFAULT,
    shadow_lifting: float = SHADOW_LIFTING_DEFAULT,
) -> tuple[int, int, int]:
    """
    Convert one sRGB color plus an HDR intensity to a displayable sRGB color.

    Example:
        >>> hdr_to_sdr(0, 0, 0, 1.0)
        (0, 0, 0)
    """
    out = hdr_to_sdr_array(
        np.array([r, g, b], dtype=np.float64),
        intensity,
        exposure,
        contrast,
        saturation,
        highlight_compression,
        shadow_lifting,
    )
    return int(out[0]), int(out[1]), int(out[2])
