# No dependencies
from enum import Enum


class ColorFormat(str, Enum):
    HEX = "hex"
    RGB = "rgb"
    HSL = "hsl"
    HSV = "hsv"


format_labels = {
    ColorFormat.HEX: "Hex",
    ColorFormat.RGB: "RGB",
    ColorFormat.HSL: "HSL",
    ColorFormat.HSV: "HSV",
}

# Prefixes sniffed by detect_format; anything else is read as hex.
format_prefixes = {
    ColorFormat.RGB: "rgb",
    ColorFormat.HSL: "hsl",
}

HUE_360 = 360
MAX_PERCENT = 100
BYTE_MAX = 255
DEFAULT_ALPHA = 100
DEFAULT_LIGHT_THRESHOLD = 60


def detect_format(value: str) -> ColorFormat:
    """Pick the textual format of ``value`` from its prefix."""
    for fmt, prefix in format_prefixes.items():
        if value.startswith(prefix):
            return fmt
    return ColorFormat.HEX
