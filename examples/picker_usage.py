"""Basic chromapick usage examples.

Run directly with:
    python examples/picker_usage.py
"""
import logging

from chromapick import Color, ColorParseError


def demonstrate_parsing() -> None:
    # Every supported string format lands on the same HSLuv value type.
    for text in ("#3a7bd5", "rgb(58, 123, 213)", "hsl(215, 65, 53)", "rgba(58, 123, 213, 0.5)"):
        color = Color.parse(text)
        print(f"{text:>26} -> {color.to_hex(True)}  {color.to_rgb()}")

    try:
        Color.from_hex("not-a-color")
    except ColorParseError as exc:
        print("Rejected:", exc)


def demonstrate_picker_loop() -> None:
    # The saturation plane and hue slider work in HSV; feed their output back.
    accent = Color.parse("#3a7bd5")
    h, s, v = accent.to_hsv()
    print("Accent as HSV:", tuple(round(x, 2) for x in (h, s, v)))

    dragged = Color.from_hsv_values(h, min(s + 20, 100), v)
    print("After dragging right:", dragged.to_hex())


def demonstrate_variants() -> None:
    accent = Color.parse("#3a7bd5")
    print("Hover (lighten 8):", accent.lighten(8).to_hex())
    print("Pressed (shade 10):", accent.shade(10).to_hex())
    print("Complement (spin 180):", accent.spin(180).to_hex())

    label = accent.contrast(45)
    print("Label:", label.to_hex(), "ratio", round(Color.contrast_ratio(accent, label), 2))

    glass = Color.parse("rgba(255, 255, 255, 0.4)")
    print("Glass over accent:", Color.rgba_to_rgb(glass, accent).to_hex())


def demonstrate_cache() -> None:
    Color.parse("#3a7bd5").to_hsv()
    print("Cached results:", len(Color.math.cache))
    Color.set_cache_key("theme-dark")
    print("After new cache generation:", len(Color.math.cache))


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)
    demonstrate_parsing()
    demonstrate_picker_loop()
    demonstrate_variants()
    demonstrate_cache()
