import math

import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import HSVTuple
from ..types.format_type import HUE_360, MAX_PERCENT


def rgb_to_hsv(r: float, g: float, b: float) -> HSVTuple:
    """
    Convert unit RGB to HSV in picker units.

    Input:
        r, g, b ∈ [0, 1]

    Output:
        h ∈ [0, 360) degrees
        s ∈ [0, 100]
        v ∈ [0, 100]

    Grays (zero delta) get hue 0 and saturation 0 whatever their value.
    """
    cmax = max(r, g, b)
    cmin = min(r, g, b)
    delta = cmax - cmin

    if delta == 0:
        h = 0.0
        s = 0.0
    else:
        s = delta / cmax
        if cmax == r:
            h = (60 * math.fmod((g - b) / delta, 6) + HUE_360) % HUE_360
        elif cmax == g:
            h = (60 * ((b - r) / delta + 2) + HUE_360) % HUE_360
        else:
            h = (60 * ((r - g) / delta + 4) + HUE_360) % HUE_360

    return h, s * MAX_PERCENT, cmax * MAX_PERCENT


def np_rgb_to_hsv(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized: Convert unit RGB to HSV in picker units.

    Args:
        r, g, b: array-like or scalar, [0, 1]

    Returns:
        hsv: array of shape (..., 3): (hue [0,360), saturation [0,100], value [0,100])
    """
    r = np.asarray(r, dtype=float)
    g = np.asarray(g, dtype=float)
    b = np.asarray(b, dtype=float)

    out_shape = np.broadcast(r, g, b).shape
    r = np.broadcast_to(r, out_shape)
    g = np.broadcast_to(g, out_shape)
    b = np.broadcast_to(b, out_shape)

    cmax = np.maximum.reduce([r, g, b])
    cmin = np.minimum.reduce([r, g, b])
    delta = cmax - cmin

    chromatic = delta > 0
    safe_delta = np.where(chromatic, delta, 1.0)
    safe_max = np.where(cmax > 0, cmax, 1.0)

    h_r = 60 * np.fmod((g - b) / safe_delta, 6)
    h_g = 60 * ((b - r) / safe_delta + 2)
    h_b = 60 * ((r - g) / safe_delta + 4)
    h = np.where(cmax == r, h_r, np.where(cmax == g, h_g, h_b))
    h = np.where(chromatic, (h + HUE_360) % HUE_360, 0.0)

    s = np.where(chromatic, delta / safe_max, 0.0)

    return np.stack([h, s * MAX_PERCENT, cmax * MAX_PERCENT], axis=-1)
