"""
chromapick color conversions
============================

Scalar and vectorized conversions between unit RGB, HSV, HSL, XYZ and
HSLuv, the string parsers for the picker's textual formats, and the
memoizing ``ColorMath`` facade.

RGB → HSV:
    rgb_to_hsv(r, g, b)          picker units: degrees, percent, percent
    np_rgb_to_hsv(r, g, b)       vectorized

HSV/HSL → RGB:
    hsv_to_rgb(h, s, v)          8-bit integer channels
    np_hsv_to_rgb(h, s, v)       vectorized
    hsl_to_unit_rgb(h, s, l)     unit channels, hue as a turn fraction

HSLuv:
    rgb_to_hsluv, rgb_to_xyz, hsluv_to_hex, hsluv_to_rgb_string

Parsers (return ``()`` on failure):
    hex_string_to_rgb, rgb_string_to_rgb, hsl_string_to_rgb, hsv_string_to_rgb
"""

from .to_hsv import rgb_to_hsv, np_rgb_to_hsv
from .to_rgb import hue_to_rgb, hsl_to_unit_rgb, hsv_to_rgb, np_hsv_to_rgb
from .hsluv_space import (
    rgb_to_hsluv,
    rgb_to_xyz,
    hsluv_to_hex,
    hsluv_to_rgb_string,
    relative_luminance,
)
from .parsers import (
    color_string_to_values,
    hex_string_to_rgb,
    rgb_string_to_rgb,
    hsl_string_to_rgb,
    hsv_string_to_rgb,
    parse_hex,
)
from .cache import ConversionCache, memoized
from .engine import ColorMath, default_math

__all__ = [
    # RGB → HSV
    'rgb_to_hsv',
    'np_rgb_to_hsv',

    # HSV/HSL → RGB
    'hue_to_rgb',
    'hsl_to_unit_rgb',
    'hsv_to_rgb',
    'np_hsv_to_rgb',

    # HSLuv
    'rgb_to_hsluv',
    'rgb_to_xyz',
    'hsluv_to_hex',
    'hsluv_to_rgb_string',
    'relative_luminance',

    # Parsers
    'color_string_to_values',
    'hex_string_to_rgb',
    'rgb_string_to_rgb',
    'hsl_string_to_rgb',
    'hsv_string_to_rgb',
    'parse_hex',

    # Caching
    'ConversionCache',
    'memoized',
    'ColorMath',
    'default_math',
]
