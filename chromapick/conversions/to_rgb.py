import math

import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import IntRGB, UnitRGB
from ..types.format_type import BYTE_MAX
from ..utils.num_utils import round_half_up

SIXTH = 1 / 6
THIRD = 1 / 3
HALF = 1 / 2
TWO_THIRDS = 2 / 3


def hue_to_rgb(m1: float, m2: float, hue: float) -> float:
    """
    Channel value for a hue fraction in the piecewise HSL construction.

    ``hue`` is expected within one turn of [0, 1]; it is shifted back into
    range once before picking the sextant.
    """
    if hue < 0:
        hue += 1
    elif hue > 1:
        hue -= 1
    if hue < SIXTH:
        return m1 + (m2 - m1) * 6 * hue
    if hue < HALF:
        return m2
    if hue < TWO_THIRDS:
        return m1 + (m2 - m1) * ((TWO_THIRDS - hue) * 6)
    return m1


def hsl_to_unit_rgb(h: float, s: float, l: float) -> UnitRGB:
    """
    Convert HSL to RGB.

    Args:
        h: hue as a fraction of a turn
        s, l: saturation and lightness in [0, 1]

    Returns:
        (r, g, b) in [0, 1], unrounded
    """
    if s == 0:
        return l, l, l
    m2 = l * (1 + s) if l < HALF else l + s - l * s
    m1 = 2 * l - m2
    return (
        hue_to_rgb(m1, m2, h + THIRD),
        hue_to_rgb(m1, m2, h),
        hue_to_rgb(m1, m2, h - THIRD),
    )


def hsv_to_rgb(h: float, s: float, v: float) -> IntRGB:
    """
    Convert HSV to 8-bit RGB.

    Args:
        h: hue in degrees [0, 360)
        s, v: saturation and value in [0, 1]

    Returns:
        (r, g, b) integers in [0, 255]
    """
    c = s * v
    x = c * (1 - abs(math.fmod(h / 60, 2) - 1))
    m = v - c

    if h < 60:
        r, g, b = c, x, 0.0
    elif h < 120:
        r, g, b = x, c, 0.0
    elif h < 180:
        r, g, b = 0.0, c, x
    elif h < 240:
        r, g, b = 0.0, x, c
    elif h < 300:
        r, g, b = x, 0.0, c
    else:
        r, g, b = c, 0.0, x

    return (
        round_half_up((r + m) * BYTE_MAX),
        round_half_up((g + m) * BYTE_MAX),
        round_half_up((b + m) * BYTE_MAX),
    )


def np_hsv_to_rgb(h: NDArray, s: NDArray, v: NDArray) -> NDArray:
    """
    Vectorized: Convert HSV to 8-bit RGB.

    Args:
        h: array-like or scalar, hue in degrees [0, 360)
        s: array-like or scalar, saturation [0, 1]
        v: array-like or scalar, value [0, 1]

    Returns:
        rgb: integer array of shape (..., 3) in [0, 255]
    """
    h = np.asarray(h, dtype=float)
    s = np.asarray(s, dtype=float)
    v = np.asarray(v, dtype=float)

    out_shape = np.broadcast(h, s, v).shape
    h = np.broadcast_to(h, out_shape)
    s = np.broadcast_to(s, out_shape)
    v = np.broadcast_to(v, out_shape)

    c = s * v
    x = c * (1 - np.abs(np.fmod(h / 60, 2) - 1))
    m = v - c
    zero = np.zeros_like(c)

    # Sextant index; negative hues fall in the first, 300 and up in the last
    sextant = np.clip(np.floor(h / 60), 0, 5).astype(int)

    r = np.choose(sextant, [c, x, zero, zero, x, c])
    g = np.choose(sextant, [x, c, c, x, zero, zero])
    b = np.choose(sextant, [zero, zero, x, c, c, x])

    rgb = np.stack([r + m, g + m, b + m], axis=-1) * BYTE_MAX
    return np.floor(rgb + 0.5).astype(int)


__all__ = [
    "hue_to_rgb",
    "hsl_to_unit_rgb",
    "hsv_to_rgb",
    "np_hsv_to_rgb",
]
