"""
String parsers for the four textual color formats.

Every parser returns an empty tuple when the input does not match its
format and a ``(r, g, b, alpha)`` tuple otherwise, with ``r, g, b`` in
[0, 1] and ``alpha`` in [0, 100]. Parsers never raise; reporting a failure
is left to the ``Color.from_*`` factories.
"""
import logging
import math
import re
from typing import Optional, Pattern, Tuple

from ..types.color_types import ParsedColor
from ..types.format_type import BYTE_MAX, HUE_360, MAX_PERCENT
from .to_rgb import hsl_to_unit_rgb, hsv_to_rgb

logger = logging.getLogger(__name__)

RGB_PATTERN = re.compile(r"rgb(a?)\(([^)]+)\)")
HSL_PATTERN = re.compile(r"hsl(a?)\(([^)]+)\)")
HSV_PATTERN = re.compile(r"hsv(a?)\(([^)]+)\)")

_HEX_DIGITS = re.compile(r"[0-9a-fA-F]+")
_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def parse_hex(digits: str) -> int:
    return int(digits, 16)


def _leading_int(field: str) -> Optional[int]:
    match = _INT_PREFIX.match(field)
    return int(match.group(1)) if match else None


def _leading_float(field: str) -> Optional[float]:
    match = _FLOAT_PREFIX.match(field)
    if not match:
        return None
    value = float(match.group(1))
    return value if math.isfinite(value) else None


def color_string_to_values(string: str, pattern: Pattern[str]) -> Tuple[float, ...]:
    """
    Extract the numeric fields of a functional color string.

    ``rgb(...)`` style (no ``a``) needs exactly 3 fields, ``rgba(...)`` style
    exactly 4. Fields are read like a lenient number prefix: integers for the
    color channels, a float for the alpha field. Returns ``()`` on any
    mismatch.
    """
    match = pattern.search(string)
    if not match:
        return ()
    has_alpha, contents = match.group(1), match.group(2)
    fields = contents.split(",")
    if len(fields) != (4 if has_alpha else 3):
        return ()

    values = []
    for i, field in enumerate(fields):
        if has_alpha and i == len(fields) - 1:
            value = _leading_float(field)
        else:
            value = _leading_int(field)
        if value is None:
            return ()
        values.append(value)
    return tuple(values)


def hex_string_to_rgb(string: str = "") -> ParsedColor:
    """
    Parse ``#rgb``, ``#rgba``, ``#rrggbb`` or ``#rrggbbaa`` (``#`` optional).

    The alpha byte is scaled to a percentage, ``0x80`` giving ~50.2.
    """
    if string.startswith("#"):
        string = string[1:]
    length = len(string)
    if length not in (3, 4, 6, 8) or not _HEX_DIGITS.fullmatch(string):
        logger.debug("rejected hex color %r", string)
        return ()

    if length in (3, 4):
        red, green, blue = (c + c for c in string[:3])
        alpha_digits = string[3] * 2 if length == 4 else None
    else:
        red, green, blue = string[0:2], string[2:4], string[4:6]
        alpha_digits = string[6:8] if length == 8 else None

    alpha = MAX_PERCENT
    if alpha_digits is not None:
        alpha = parse_hex(alpha_digits) / BYTE_MAX * MAX_PERCENT

    return (
        parse_hex(red) / BYTE_MAX,
        parse_hex(green) / BYTE_MAX,
        parse_hex(blue) / BYTE_MAX,
        alpha,
    )


def rgb_string_to_rgb(string: str = "") -> ParsedColor:
    values = color_string_to_values(string, RGB_PATTERN)
    if not values:
        logger.debug("rejected rgb color %r", string)
        return ()
    red, green, blue, alpha = (values + (1,))[:4]
    return red / BYTE_MAX, green / BYTE_MAX, blue / BYTE_MAX, alpha * MAX_PERCENT


def hsl_string_to_rgb(string: str = "") -> ParsedColor:
    values = color_string_to_values(string, HSL_PATTERN)
    if not values:
        logger.debug("rejected hsl color %r", string)
        return ()
    hue, saturation, lightness, alpha = (values + (1,))[:4]
    red, green, blue = hsl_to_unit_rgb(
        hue / HUE_360,
        saturation / MAX_PERCENT,
        lightness / MAX_PERCENT,
    )
    return red, green, blue, alpha * MAX_PERCENT


def hsv_string_to_rgb(string: str = "") -> ParsedColor:
    """
    Parse ``hsv(h, s, v)``/``hsva(h, s, v, a)``.

    The alpha field of ``hsva`` is checked for shape only; the result is
    always opaque.
    """
    values = color_string_to_values(string, HSV_PATTERN)
    if not values:
        logger.debug("rejected hsv color %r", string)
        return ()
    hue, saturation, value = values[:3]
    red, green, blue = hsv_to_rgb(hue, saturation / MAX_PERCENT, value / MAX_PERCENT)
    return red / BYTE_MAX, green / BYTE_MAX, blue / BYTE_MAX, MAX_PERCENT
