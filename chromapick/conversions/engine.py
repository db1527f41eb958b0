"""
Cache-owning facade over the parsers and converters.

``ColorMath`` is what ``Color`` talks to. Every method is memoized in the
instance's own ``ConversionCache``; separate instances never share results,
which lets tests or rendering contexts run with independent caches.
"""
from __future__ import annotations

from typing import Hashable, Optional

from ..types.color_types import HSLuvTuple, HSVTuple, IntRGB, ParsedColor, XYZTuple
from ..types.format_type import MAX_PERCENT
from . import hsluv_space, parsers
from .cache import ConversionCache, memoized
from .to_hsv import rgb_to_hsv
from .to_rgb import hsv_to_rgb


class ColorMath:
    def __init__(self, cache: Optional[ConversionCache] = None) -> None:
        self.cache = cache if cache is not None else ConversionCache()

    # ------------------ CACHE CONTROL ------------------
    @property
    def cache_key(self) -> Hashable:
        return self.cache.key

    @cache_key.setter
    def cache_key(self, key: Hashable) -> None:
        self.cache.key = key

    def reset(self) -> None:
        self.cache.clear()

    # ------------------ PARSERS ------------------
    @memoized("hexStringToRgb")
    def hex_string_to_rgb(self, string: str = "") -> ParsedColor:
        return parsers.hex_string_to_rgb(string)

    @memoized("rgbStringToRgb")
    def rgb_string_to_rgb(self, string: str = "") -> ParsedColor:
        return parsers.rgb_string_to_rgb(string)

    @memoized("hslStringToRgb")
    def hsl_string_to_rgb(self, string: str = "") -> ParsedColor:
        return parsers.hsl_string_to_rgb(string)

    @memoized("hsvStringToRgb")
    def hsv_string_to_rgb(self, string: str = "") -> ParsedColor:
        return parsers.hsv_string_to_rgb(string)

    # ------------------ CONVERTERS ------------------
    @memoized("rgbToHsluv")
    def rgb_to_hsluv(self, r: float, g: float, b: float) -> HSLuvTuple:
        return hsluv_space.rgb_to_hsluv(r, g, b)

    @memoized("rgbToXyz")
    def rgb_to_xyz(self, r: float, g: float, b: float) -> XYZTuple:
        return hsluv_space.rgb_to_xyz(r, g, b)

    @memoized("rgbToHsv")
    def rgb_to_hsv(self, r: float, g: float, b: float) -> HSVTuple:
        return rgb_to_hsv(r, g, b)

    @memoized("hsvToRgb")
    def hsv_to_rgb(self, h: float, s: float, v: float) -> IntRGB:
        return hsv_to_rgb(h, s, v)

    @memoized("hsluvToHex")
    def hsluv_to_hex(self, h: float, s: float, l: float, alpha: float = MAX_PERCENT) -> str:
        return hsluv_space.hsluv_to_hex(h, s, l, alpha)

    @memoized("hsluvToRgb")
    def hsluv_to_rgb(self, h: float, s: float, l: float, alpha: float = MAX_PERCENT) -> str:
        return hsluv_space.hsluv_to_rgb_string(h, s, l, alpha)

    def __repr__(self) -> str:
        return f"ColorMath({self.cache!r})"


# Shared instance backing Color unless a subclass binds its own.
default_math = ColorMath()
