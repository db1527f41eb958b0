import math
from decimal import Decimal

# Below this magnitude JavaScript switches number text to exponent form.
EXPONENT_THRESHOLD = 1e-7


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going up (``round(127.5) == 128``)."""
    return int(math.floor(value + 0.5))


def format_number(value: float) -> str:
    """
    Shortest text for a number, written the way JavaScript prints it.

    Integral values drop the trailing ``.0`` and small fractions stay in
    plain decimal form (``0.000005``, not ``5e-06``).
    """
    if isinstance(value, int):
        return str(value)
    value = float(value)
    if math.isfinite(value) and value == int(value):
        return str(int(value))
    text = repr(value)
    if "e" in text and abs(value) >= EXPONENT_THRESHOLD:
        return format(Decimal(text), "f")
    return text
