from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from ..types.format_type import BYTE_MAX, MAX_PERCENT

if TYPE_CHECKING:
    from .color import Color


def contrast_ratio(first: Color, second: Color) -> float:
    """WCAG contrast ratio between two colors, from 1 to 21. Symmetric."""
    l1 = first.get_relative_luminance()
    l2 = second.get_relative_luminance()
    lighter = max(l1, l2)
    darker = min(l1, l2)
    return (lighter + 0.05) / (darker + 0.05)


def rgba_to_rgb(foreground: Color, background: Color) -> Color:
    """
    Flatten a translucent ``foreground`` over ``background``.

    Both colors are read back through their ``rgb()`` strings; the
    background's own alpha is ignored. The result is opaque.
    """
    engine = foreground.math
    *source, source_alpha = engine.rgb_string_to_rgb(foreground.to_rgb())
    bg = engine.rgb_string_to_rgb(background.to_rgb())[:3]

    alpha = source_alpha / MAX_PERCENT
    blended = (1 - alpha) * (np.array(bg) * BYTE_MAX) + alpha * (np.array(source) * BYTE_MAX)
    red, green, blue = (int(c) for c in np.floor(blended + 0.5))

    return type(foreground).from_rgb(f"rgb({red},{green},{blue})")
