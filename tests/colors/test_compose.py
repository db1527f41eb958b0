import itertools

import pytest

from chromapick import Color, contrast_ratio, rgba_to_rgb
from ..samples import hex_samples


def test_contrast_ratio_black_white():
    black = Color.parse("#000000")
    white = Color.parse("#ffffff")
    assert contrast_ratio(black, white) == pytest.approx(21, rel=1e-4)
    assert Color.contrast_ratio(white, black) == pytest.approx(21, rel=1e-4)


def test_contrast_ratio_same_color_is_one():
    color = Color.parse("#3a7bd5")
    assert contrast_ratio(color, color) == pytest.approx(1)


def test_contrast_ratio_symmetric():
    colors = [Color.parse(h) for h in hex_samples]
    for a, b in itertools.combinations(colors, 2):
        assert contrast_ratio(a, b) == contrast_ratio(b, a)
        assert 1 <= contrast_ratio(a, b) <= 21.0001


def test_contrast_pushes_ratio_up():
    background = Color.parse("#f5f5f5")
    text = Color.parse("#b0b0b0")
    adjusted = text.contrast_with(background, 50, keep_saturation=True)
    assert contrast_ratio(adjusted, background) > contrast_ratio(text, background)


def test_rgba_to_rgb_half_red_over_white():
    foreground = Color.parse("rgba(255, 0, 0, 0.5)")
    background = Color.parse("#ffffff")
    flat = rgba_to_rgb(foreground, background)

    assert flat.alpha == 100
    assert flat.to_rgb(False) == "rgb(255, 128, 128)"


def test_rgba_to_rgb_opaque_foreground_wins():
    foreground = Color.parse("#336699")
    flat = Color.rgba_to_rgb(foreground, Color.parse("#000000"))
    assert flat.to_hex() == "#336699"


def test_rgba_to_rgb_transparent_foreground_shows_background():
    foreground = Color.parse("rgba(255, 0, 0, 0)")
    flat = rgba_to_rgb(foreground, Color.parse("#123456"))
    assert flat.to_hex() == "#123456"


def test_rgba_to_rgb_ignores_background_alpha():
    foreground = Color.parse("rgba(0, 0, 0, 0.5)")
    solid = rgba_to_rgb(foreground, Color.parse("#ffffff"))
    seethrough = rgba_to_rgb(foreground, Color.parse("#ffffff80"))
    assert solid == seethrough
