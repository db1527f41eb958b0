"""
chromapick Color
================

Immutable HSLuv color value with the picker's derived-color algebra.

Usage
-----
>>> from chromapick.colors import Color
>>>
>>> accent = Color.parse("#3a7bd5")
>>> accent.to_rgb()                 # 'rgb(58, 123, 213)'
>>> hover = accent.lighten(8)
>>> text = accent.contrast(40)      # light text on a dark accent
>>> Color.contrast_ratio(accent, text)
>>>
>>> glass = Color.parse("rgba(255, 255, 255, 0.4)")
>>> Color.rgba_to_rgb(glass, accent).to_hex()

Notes
-----
- Hue is not normalized on construction; ``set_hue`` and ``spin`` wrap it.
- Saturation, lightness and alpha setters clamp to [0, 100].
- Alpha is a percentage; ``rgba()`` strings carry it as [0, 1].
"""

from .color import Color
from .compose import contrast_ratio, rgba_to_rgb

__all__ = ['Color', 'contrast_ratio', 'rgba_to_rgb']
