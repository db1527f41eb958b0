"""
chromapick - Color math for a saturation/hue color picker
=========================================================

Parses hex, ``rgb()``, ``hsl()`` and ``hsv()`` strings, converts between
RGB, HSV, HSL, XYZ and HSLuv, and models colors as immutable HSLuv values
with accessibility-oriented variants (tint, shade, contrast).

Quick Start
-----------
>>> from chromapick import Color
>>>
>>> red = Color.parse("#ff0000")
>>> red.to_rgb(False)
'rgb(255, 0, 0)'
>>> red.to_hsv()
(0.0, 100.0, 100.0)
>>> red.spin(180).to_hex()
>>>
>>> # Picker surfaces report HSV; feed it back
>>> Color.from_hsv_values(120, 100, 100).to_rgb()
'rgb(0, 255, 0)'

Modules
-------
- colors: the Color value type, contrast ratio and alpha compositing
- conversions: parsers, scalar/vectorized converters, ColorMath and its cache
- types: tuple aliases, ColorFormat and Adjustment enums, constants
"""

from .colors import Color, contrast_ratio, rgba_to_rgb
from .conversions import (
    ColorMath,
    ConversionCache,
    default_math,
    hsv_to_rgb,
    rgb_to_hsv,
    np_hsv_to_rgb,
    np_rgb_to_hsv,
)
from .errors import ColorParseError
from .types import Adjustment, ColorFormat, detect_format

__version__ = "1.0.0"

__all__ = [
    # Color value
    "Color",
    "contrast_ratio",
    "rgba_to_rgb",

    # Conversions and caching
    "ColorMath",
    "ConversionCache",
    "default_math",
    "hsv_to_rgb",
    "rgb_to_hsv",
    "np_hsv_to_rgb",
    "np_rgb_to_hsv",

    # Types and errors
    "Adjustment",
    "ColorFormat",
    "detect_format",
    "ColorParseError",

    # Version
    "__version__",
]
