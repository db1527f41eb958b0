import numpy as np

from chromapick.conversions import np_rgb_to_hsv, rgb_to_hsv
from ..samples import samples_rgb_hsv


def test_rgb_to_hsv():
    for (r, g, b), (h_exp, s_exp, v_exp) in samples_rgb_hsv.items():
        h, s, v = rgb_to_hsv(r, g, b)

        assert abs(h - h_exp) < 1e-9
        assert abs(s - s_exp) < 1e-9
        assert abs(v - v_exp) < 1e-9


def test_rgb_to_hsv_gray_has_no_hue_or_saturation():
    for level in (0.0, 0.25, 0.5, 1.0):
        h, s, v = rgb_to_hsv(level, level, level)
        assert h == 0
        assert s == 0
        assert v == level * 100


def test_rgb_to_hsv_hue_in_range():
    for r, g, b in [(1.0, 0.0, 0.01), (0.9, 0.1, 0.5), (0.2, 0.1, 0.1)]:
        h, _, _ = rgb_to_hsv(r, g, b)
        assert 0 <= h < 360


def test_rgb_to_hsv_numpy():
    the_matrix = np.array(list(samples_rgb_hsv.keys()))
    expected = np.array(list(samples_rgb_hsv.values()))
    hsv = np_rgb_to_hsv(the_matrix[..., 0], the_matrix[..., 1], the_matrix[..., 2])

    assert hsv.shape == expected.shape
    assert np.allclose(hsv, expected, atol=1e-9)


def test_rgb_to_hsv_numpy_matches_scalar():
    rng = np.random.default_rng(7)
    rgb = rng.random((64, 3))
    hsv = np_rgb_to_hsv(rgb[..., 0], rgb[..., 1], rgb[..., 2])
    for (r, g, b), row in zip(rgb, hsv):
        assert np.allclose(row, rgb_to_hsv(r, g, b), atol=1e-9)
