import pytest

from chromapick import Adjustment, Color

BASE = Color(200, 50, 40, 80)


def test_clone():
    copy = BASE.clone()
    assert copy == BASE
    assert copy is not BASE
    assert BASE.clone(hue=10) == Color(10, 50, 40, 80)
    assert BASE.clone(alpha=0).alpha == 0


def test_clone_rejects_unknown_fields():
    with pytest.raises(TypeError):
        BASE.clone(brightness=3)


def test_set_hue_wraps():
    assert Color().set_hue(370).hue == 10
    assert Color().set_hue(-10).hue == 350
    assert Color().set_hue(360).hue == 0
    assert Color().set_hue(125.5).hue == 125.5


def test_set_hue_below_minus_360_mirrors():
    # abs(h + 360) % 360, not a true modulo
    assert Color().set_hue(-400).hue == 40


def test_setters_clamp():
    for value in (-1e9, -5, 0, 42.5, 100, 150, 1e9):
        for setter, attr in (
            (BASE.set_saturation, "saturation"),
            (BASE.set_lightness, "lightness"),
            (BASE.set_alpha, "alpha"),
        ):
            result = getattr(setter(value), attr)
            assert 0 <= result <= 100
    assert BASE.set_saturation(150).saturation == 100
    assert BASE.set_lightness(-5).lightness == 0
    assert BASE.set_alpha(42.5).alpha == 42.5


def test_operations_do_not_mutate():
    before = BASE.clone()
    BASE.spin(30).lighten(10).saturate(5).fade_out(20).tint(10).shade(5)
    assert BASE == before


def test_spin():
    assert BASE.spin(200).hue == 40
    assert BASE.spin(-210).hue == 350


def test_saturate_and_desaturate():
    assert BASE.saturate(10).saturation == 60
    assert BASE.saturate_by_ratio(0.5).saturation == 75
    assert BASE.desaturate(10).saturation == 40
    assert BASE.desaturate_by_ratio(0.5).saturation == 25


def test_lighten_and_darken():
    assert BASE.lighten(10).lightness == 50
    assert BASE.darken(10).lightness == 30
    assert BASE.lighten_by_ratio(0.5).lightness == 60
    assert BASE.darken_by_ratio(0.5).lightness == 20


def test_tint():
    tinted = BASE.tint(30)
    assert tinted.lightness == 70
    assert tinted.saturation == 25
    assert BASE.tint_by_ratio(0.5) == tinted


def test_shade():
    shaded = BASE.shade(20)
    assert shaded.lightness == 20
    assert shaded.saturation == 25
    assert BASE.shade_by_ratio(0.5) == shaded


def test_tint_and_shade_at_lightness_extremes():
    white = Color(0, 50, 100)
    assert white.tint(10) == Color(0, 0, 100)
    assert white.tint(0) == white

    black = Color(0, 50, 0)
    assert black.shade(10) == Color(0, 0, 0)
    assert black.shade(0) == black


def test_contrast_on_light_color():
    light = Color(0, 50, 80)
    shaded = light.contrast(30)
    assert shaded.lightness == 50
    assert shaded.saturation == pytest.approx(50 - 50 * 30 / 80)

    darker = light.contrast(30, keep_saturation=True)
    assert darker == Color(0, 50, 50)


def test_contrast_on_dark_color():
    dark = Color(0, 50, 20)
    assert dark.contrast(30, keep_saturation=True) == Color(0, 50, 50)
    assert dark.contrast(30) == dark.tint(30)


def test_contrast_threshold():
    mid = Color(0, 50, 50)
    assert mid.contrast(10, True).lightness == 60
    assert mid.contrast(10, True, threshold=50).lightness == 40


def test_contrast_with_already_distinct():
    color = Color(0, 50, 50)
    assert color.contrast_with(Color(0, 0, 90), 30) is color
    assert color.contrast_with(Color(0, 0, 80), 30) is color


def test_contrast_with_light_background():
    color = Color(0, 50, 50)
    background = Color(0, 0, 70)
    result = color.contrast_with(background, 30, keep_saturation=True)
    assert result.lightness == 40
    assert abs(result.lightness - background.lightness) == 30

    shaded = color.contrast_with(background, 30)
    assert shaded == color.shade(10)


def test_contrast_with_dark_background():
    color = Color(0, 50, 50)
    background = Color(0, 0, 30)
    result = color.contrast_with(background, 30, keep_saturation=True)
    assert result.lightness == 60
    assert color.contrast_with(background, 30) == color.tint(10)


def test_apply():
    assert BASE.apply(Adjustment.LIGHTEN, 5) == BASE.lighten(5)
    assert BASE.apply(Adjustment.DARKEN, 5) == BASE.darken(5)
    assert BASE.apply(Adjustment.TINT, 5) == BASE.tint(5)
    assert BASE.apply("shade", 5) == BASE.shade(5)


class BlackoutColor(Color):
    __slots__ = ()

    def darken(self, amount):
        return self.set_lightness(0)


def test_contrast_uses_subclass_overrides():
    color = BlackoutColor(0, 50, 80)
    assert color.darken(10).lightness == 0
    assert color.apply(Adjustment.DARKEN, 10).lightness == 0

    result = color.contrast(10, keep_saturation=True)
    assert type(result) is BlackoutColor
    assert result.lightness == 0
    assert color.contrast_with(Color(0, 0, 75), 30, keep_saturation=True).lightness == 0


def test_adjustment_selection():
    assert Adjustment.towards_dark(True) is Adjustment.DARKEN
    assert Adjustment.towards_dark(False) is Adjustment.SHADE
    assert Adjustment.towards_light(True) is Adjustment.LIGHTEN
    assert Adjustment.towards_light(False) is Adjustment.TINT


def test_fades():
    assert BASE.fade_in(10).alpha == 90
    assert BASE.fade_in(50).alpha == 100
    assert BASE.fade_out(30).alpha == 50
    assert BASE.fade_out(500).alpha == 0
    assert BASE.fade_by_ratio(0.5).alpha == 40
