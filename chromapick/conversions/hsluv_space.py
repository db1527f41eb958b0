"""
Bridge to the HSLuv perceptual color space.

Thin wrappers over the ``hsluv`` package that speak the picker's units:
unit RGB in, HSLuv (degrees, percent, percent) out, and the hex/``rgb()``
serializations used by the widget.
"""
import hsluv
from boundednumbers import clamp

from ..types.color_types import HSLuvTuple, UnitRGB, XYZTuple
from ..types.format_type import BYTE_MAX, MAX_PERCENT
from ..utils.num_utils import format_number, round_half_up


def rgb_to_hsluv(r: float, g: float, b: float) -> HSLuvTuple:
    h, s, l = hsluv.rgb_to_hsluv([r, g, b])
    return h, s, l


def rgb_to_xyz(r: float, g: float, b: float) -> XYZTuple:
    x, y, z = hsluv.rgb_to_xyz([r, g, b])
    return x, y, z


def hsluv_to_unit_rgb(h: float, s: float, l: float) -> UnitRGB:
    r, g, b = hsluv.hsluv_to_rgb([h, s, l])
    return r, g, b


def relative_luminance(r: float, g: float, b: float) -> float:
    """Relative luminance of unit RGB, the Y channel of CIE XYZ."""
    return rgb_to_xyz(r, g, b)[1]


def alpha_to_hex(alpha: float) -> str:
    """Two lower-case hex digits for an alpha percentage."""
    byte = round_half_up(alpha / MAX_PERCENT * BYTE_MAX)
    return format(byte, "02x")[-2:]


def hsluv_to_hex(h: float, s: float, l: float, alpha: float = MAX_PERCENT) -> str:
    """
    Serialize HSLuv to ``#rrggbb``, appending an alpha byte when translucent.
    """
    value = hsluv.hsluv_to_hex([h, s, l]).lower()
    if alpha < MAX_PERCENT:
        value += alpha_to_hex(alpha)
    return value


def hsluv_to_rgb_string(h: float, s: float, l: float, alpha: float = MAX_PERCENT) -> str:
    """
    Serialize HSLuv to ``rgb(r, g, b)``, or ``rgba(r, g, b, a)`` with ``a`` in
    [0, 1] when alpha is below 100.
    """
    channels = [
        int(clamp(round_half_up(c * BYTE_MAX), 0, BYTE_MAX))
        for c in hsluv_to_unit_rgb(h, s, l)
    ]
    tag = "rgb"
    values = ", ".join(str(c) for c in channels)
    if alpha < MAX_PERCENT:
        tag += "a"
        values += f", {format_number(alpha / MAX_PERCENT)}"
    return f"{tag}({values})"
