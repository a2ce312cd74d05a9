"""
Shared constants for the pixel transforms.

Tonemap coefficients, HDR parameter defaults and resampling choices live
here so every module reads the same values.
"""

import cv2

# Bytes per pixel (R, G, B, A)
CHANNELS = 4

# Flat tangent-space normal. Bump scaling lerps away from R/G of this.
NORMAL_DEFAULT_RGB = (128, 128, 255)

# ACES-style filmic curve: x(Ax+B) / (x(Cx+D)+E)
TONE_A = 2.51
TONE_B = 0.03
TONE_C = 2.43
TONE_D = 0.59
TONE_E = 0.14

# hdr_to_sdr defaults (neutral)
EXPOSURE_DEFAULT = 1.0
CONTRAST_DEFAULT = 1.0
SATURATION_DEFAULT = 1.0
HIGHLIGHT_COMPRESSION_DEFAULT = 1.0
SHADOW_LIFTING_DEFAULT = 0.0

# sRGB transfer function
SRGB_DECODE_THRESHOLD = 0.04045
SRGB_ENCODE_THRESHOLD = 0.0031308
SRGB_A = 0.055

# Rec.709 luminance weights
LUMA_R = 0.2126
LUMA_G = 0.7152
LUMA_B = 0.0722

# Resampling used by resize/tile/mask/pack
INTERPOLATIONS = {
    "nearest": cv2.INTER_NEAREST,
    "linear": cv2.INTER_LINEAR,
    "cubic": cv2.INTER_CUBIC,
    "area": cv2.INTER_AREA,
    "lanczos4": cv2.INTER_LANCZOS4,
}
DEFAULT_INTERPOLATION = "nearest"
