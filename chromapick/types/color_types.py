from __future__ import annotations
from enum import Enum
from typing import Tuple, Union

UnitRGB = Tuple[float, float, float]
RGBAPercent = Tuple[float, float, float, float]   # unit rgb + alpha in [0, 100]
IntRGB = Tuple[int, int, int]
HSVTuple = Tuple[float, float, float]             # degrees, percent, percent
XYZTuple = Tuple[float, float, float]
HSLuvTuple = Tuple[float, float, float]
ParsedColor = Union[RGBAPercent, Tuple[()]]


class Adjustment(str, Enum):
    """Lightness adjustments a contrast operation can pick from."""
    DARKEN = "darken"
    SHADE = "shade"
    LIGHTEN = "lighten"
    TINT = "tint"

    @classmethod
    def towards_dark(cls, keep_saturation: bool) -> Adjustment:
        return cls.DARKEN if keep_saturation else cls.SHADE

    @classmethod
    def towards_light(cls, keep_saturation: bool) -> Adjustment:
        return cls.LIGHTEN if keep_saturation else cls.TINT
