from .color_types import (
    Adjustment,
    HSLuvTuple,
    HSVTuple,
    IntRGB,
    ParsedColor,
    RGBAPercent,
    UnitRGB,
    XYZTuple,
)
from .format_type import (
    BYTE_MAX,
    DEFAULT_ALPHA,
    DEFAULT_LIGHT_THRESHOLD,
    HUE_360,
    MAX_PERCENT,
    ColorFormat,
    detect_format,
    format_labels,
)
