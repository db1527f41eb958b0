from __future__ import annotations

from numbers import Real
from typing import Any, ClassVar, Hashable, Mapping, Optional, Self

from boundednumbers import clamp

from ..conversions.engine import ColorMath, default_math
from ..conversions.parsers import parse_hex
from ..conversions.to_rgb import hue_to_rgb
from ..errors import ColorParseError
from ..types.color_types import Adjustment, HSVTuple, IntRGB, ParsedColor
from ..types.format_type import (
    BYTE_MAX,
    DEFAULT_ALPHA,
    DEFAULT_LIGHT_THRESHOLD,
    HUE_360,
    MAX_PERCENT,
    ColorFormat,
    detect_format,
)
from . import compose

FIELDS = ('hue', 'saturation', 'lightness', 'alpha')


def _percent(value: float) -> float:
    return float(clamp(value, 0, MAX_PERCENT))


def _exhausted_ratio(amount: float) -> float:
    # No lightness headroom left: any positive step removes all saturation.
    return 1.0 if amount > 0 else 0.0


class Color:
    """
    Immutable color in HSLuv space.

    ``hue`` is in degrees, ``saturation``, ``lightness`` and ``alpha`` in
    [0, 100]. Every operation returns a new instance; conversions go through
    ``math``, the memoizing ``ColorMath`` bound to the class.
    """
    __slots__ = ('hue', 'saturation', 'lightness', 'alpha', '_is_frozen')

    math: ClassVar[ColorMath] = default_math

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(
        self,
        hue: float = 0.0,
        saturation: float = 0.0,
        lightness: float = 0.0,
        alpha: float = DEFAULT_ALPHA,
    ) -> None:
        for name, value in zip(FIELDS, (hue, saturation, lightness, alpha)):
            if not isinstance(value, Real):
                raise TypeError(f"{self.__class__.__name__} expects a real {name}, got {value!r}")
        self.hue = hue
        self.saturation = saturation
        self.lightness = lightness
        self.alpha = alpha
        super().__setattr__('_is_frozen', True)

    # ------------------ CONSTRUCTION ------------------
    @classmethod
    def from_record(cls, record: Optional[Mapping[str, float]] = None) -> Self:
        """Build from a ``{hue, saturation, lightness, alpha}`` mapping; missing keys default."""
        record = record or {}
        unknown = set(record) - set(FIELDS)
        if unknown:
            raise ValueError(f"{cls.__name__} record has unknown keys {sorted(unknown)}")
        return cls(**record)

    @classmethod
    def parse(cls, value: str, fmt: Optional[ColorFormat] = None) -> Self:
        """
        Build from a color string.

        ``fmt`` names the format; when omitted it is sniffed from the prefix
        (``rgb`` and ``hsl`` prefixes, anything else is read as hex).
        """
        if fmt is None:
            fmt = detect_format(value)
        factories = {
            ColorFormat.HEX: cls.from_hex,
            ColorFormat.RGB: cls.from_rgb,
            ColorFormat.HSL: cls.from_hsl,
            ColorFormat.HSV: cls.from_hsv,
        }
        return factories[ColorFormat(fmt)](value)

    @classmethod
    def _from_parsed(cls, parsed: ParsedColor, fmt: ColorFormat, value: str) -> Self:
        if not parsed:
            raise ColorParseError(fmt, value)
        red, green, blue, alpha = parsed
        hue, saturation, lightness = cls.math.rgb_to_hsluv(red, green, blue)
        return cls(hue, saturation, lightness, alpha)

    @classmethod
    def from_hex(cls, value: str) -> Self:
        return cls._from_parsed(cls.math.hex_string_to_rgb(value), ColorFormat.HEX, value)

    @classmethod
    def from_rgb(cls, value: str) -> Self:
        return cls._from_parsed(cls.math.rgb_string_to_rgb(value), ColorFormat.RGB, value)

    @classmethod
    def from_hsl(cls, value: str) -> Self:
        return cls._from_parsed(cls.math.hsl_string_to_rgb(value), ColorFormat.HSL, value)

    @classmethod
    def from_hsv(cls, value: str) -> Self:
        return cls._from_parsed(cls.math.hsv_string_to_rgb(value), ColorFormat.HSV, value)

    @classmethod
    def from_hsv_values(cls, h: float, s: float, v: float, alpha: float = DEFAULT_ALPHA) -> Self:
        """Rebuild from the ``{h, s, v}`` picked on the saturation plane and hue slider."""
        red, green, blue = cls.math.hsv_to_rgb(h, s / MAX_PERCENT, v / MAX_PERCENT)
        hue, saturation, lightness = cls.math.rgb_to_hsluv(
            red / BYTE_MAX, green / BYTE_MAX, blue / BYTE_MAX
        )
        return cls(hue, saturation, lightness, alpha)

    # ------------------ STATIC UTILITIES ------------------
    hue_to_rgb = staticmethod(hue_to_rgb)
    parse_hex = staticmethod(parse_hex)
    contrast_ratio = staticmethod(compose.contrast_ratio)
    rgba_to_rgb = staticmethod(compose.rgba_to_rgb)

    @classmethod
    def hsv_to_rgb(cls, h: float, s: float, v: float) -> IntRGB:
        return cls.math.hsv_to_rgb(h, s, v)

    @classmethod
    def rgb_to_hsv(cls, r: float, g: float, b: float) -> HSVTuple:
        return cls.math.rgb_to_hsv(r, g, b)

    # ------------------ CACHE CONTROL ------------------
    @classmethod
    def get_cache_key(cls) -> Hashable:
        return cls.math.cache_key

    @classmethod
    def set_cache_key(cls, key: Hashable) -> None:
        """Adopt a new cache generation; a different key drops every memoized result."""
        cls.math.cache_key = key

    @classmethod
    def reset(cls) -> None:
        cls.math.reset()

    # ------------------ OUTPUT ------------------
    def to_hex(self, alpha: bool = False) -> str:
        return self.math.hsluv_to_hex(
            self.hue, self.saturation, self.lightness,
            self.alpha if alpha else MAX_PERCENT,
        )

    def to_rgb(self, alpha: bool = True) -> str:
        return self.math.hsluv_to_rgb(
            self.hue, self.saturation, self.lightness,
            self.alpha if alpha else MAX_PERCENT,
        )

    def to_hsv(self) -> HSVTuple:
        red, green, blue, _ = self.math.rgb_string_to_rgb(self.to_rgb())
        return self.math.rgb_to_hsv(red, green, blue)

    def to_string(self, alpha: bool = True) -> str:
        return self.to_rgb(alpha)

    def get_relative_luminance(self) -> float:
        red, green, blue, _ = self.math.rgb_string_to_rgb(self.to_rgb())
        return self.math.rgb_to_xyz(red, green, blue)[1]

    def is_light(self, threshold: float = DEFAULT_LIGHT_THRESHOLD) -> bool:
        return self.lightness >= threshold

    def is_dark(self, threshold: float = DEFAULT_LIGHT_THRESHOLD) -> bool:
        return not self.is_light(threshold)

    # ------------------ SETTERS ------------------
    def clone(self, **changes: Any) -> Self:
        unknown = set(changes) - set(FIELDS)
        if unknown:
            raise TypeError(f"clone() got unexpected fields {sorted(unknown)}")
        return self.__class__(**{
            name: changes.get(name, getattr(self, name))
            for name in FIELDS
        })

    def set_hue(self, hue: float) -> Self:
        # Not a true modulo below -360: set_hue(-400).hue == 40
        return self.clone(hue=abs(hue + HUE_360) % HUE_360)

    def set_saturation(self, saturation: float) -> Self:
        return self.clone(saturation=_percent(saturation))

    def set_lightness(self, lightness: float) -> Self:
        return self.clone(lightness=_percent(lightness))

    def set_alpha(self, alpha: float) -> Self:
        return self.clone(alpha=_percent(alpha))

    # ------------------ ALGEBRA ------------------
    def spin(self, angle: float) -> Self:
        return self.set_hue(self.hue + angle)

    def saturate(self, amount: float) -> Self:
        return self.set_saturation(self.saturation + amount)

    def saturate_by_ratio(self, ratio: float) -> Self:
        return self.saturate((MAX_PERCENT - self.saturation) * ratio)

    def desaturate(self, amount: float) -> Self:
        return self.set_saturation(self.saturation - amount)

    def desaturate_by_ratio(self, ratio: float) -> Self:
        return self.desaturate(self.saturation * ratio)

    def lighten(self, amount: float) -> Self:
        return self.set_lightness(self.lightness + amount)

    def lighten_by_ratio(self, ratio: float) -> Self:
        # Scales by current lightness, not by the headroom left
        return self.lighten(self.lightness * ratio)

    def darken(self, amount: float) -> Self:
        return self.set_lightness(self.lightness - amount)

    def darken_by_ratio(self, ratio: float) -> Self:
        return self.darken(self.lightness * ratio)

    def tint(self, amount: float) -> Self:
        """Lighten by ``amount`` and desaturate in proportion to the headroom used."""
        headroom = MAX_PERCENT - self.lightness
        ratio = amount / headroom if headroom else _exhausted_ratio(amount)
        return self.lighten(amount).desaturate_by_ratio(ratio)

    def tint_by_ratio(self, ratio: float) -> Self:
        return self.tint((MAX_PERCENT - self.lightness) * ratio)

    def shade(self, amount: float) -> Self:
        """Darken by ``amount`` and desaturate in proportion to the lightness used."""
        ratio = amount / self.lightness if self.lightness else _exhausted_ratio(amount)
        return self.darken(amount).desaturate_by_ratio(ratio)

    def shade_by_ratio(self, ratio: float) -> Self:
        return self.shade(self.lightness * ratio)

    def apply(self, adjustment: Adjustment, amount: float) -> Self:
        return getattr(self, Adjustment(adjustment).value)(amount)

    def contrast(
        self,
        difference: float,
        keep_saturation: bool = False,
        threshold: float = DEFAULT_LIGHT_THRESHOLD,
    ) -> Self:
        """Move lightness by ``difference`` away from whichever side of ``threshold`` this color is on."""
        if self.is_light(threshold):
            adjustment = Adjustment.towards_dark(keep_saturation)
        else:
            adjustment = Adjustment.towards_light(keep_saturation)
        return self.apply(adjustment, difference)

    def contrast_with(
        self,
        color: Color,
        difference: float,
        keep_saturation: bool = False,
        threshold: float = DEFAULT_LIGHT_THRESHOLD,
    ) -> Self:
        """
        Separate this color's lightness from ``color``'s by at least ``difference``.

        Returns ``self`` when the two are already far enough apart. Otherwise
        moves away from ``color``: darker when ``color`` is light, lighter
        when it is dark.
        """
        if abs(self.lightness - color.lightness) >= difference:
            return self
        if color.is_light(threshold):
            adjustment = Adjustment.towards_dark(keep_saturation)
            relative_difference = difference - color.lightness + self.lightness
        else:
            adjustment = Adjustment.towards_light(keep_saturation)
            relative_difference = color.lightness + difference - self.lightness
        return self.apply(adjustment, relative_difference)

    def fade_in(self, amount: float) -> Self:
        return self.set_alpha(self.alpha + amount)

    def fade_out(self, amount: float) -> Self:
        return self.set_alpha(self.alpha - amount)

    def fade_by_ratio(self, ratio: float) -> Self:
        return self.set_alpha(self.alpha * ratio)

    # ------------------ VALUE SEMANTICS ------------------
    def _components(self):
        return self.hue, self.saturation, self.lightness, self.alpha

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self._components() == other._components()

    def __hash__(self) -> int:
        return hash(self._components())

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(hue={self.hue!r}, saturation={self.saturation!r}, "
            f"lightness={self.lightness!r}, alpha={self.alpha!r})"
        )

    def __str__(self) -> str:
        return self.to_string()
