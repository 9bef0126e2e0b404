from chromalite.conversions.to_rgb import hsl_to_unit_rgb, np_hsl_to_unit_rgb
import numpy as np
from ..samples import samples_rgb_hsl


def test_hsl_to_unit_rgb():
    for (r_exp, g_exp, b_exp), (h, s, l) in samples_rgb_hsl.items():
        r, g, b = hsl_to_unit_rgb(h, s, l)

        assert abs(r - r_exp) < 1/255
        assert abs(g - g_exp) < 1/255
        assert abs(b - b_exp) < 1/255


def test_hsl_to_unit_rgb_numpy():
    expected = np.array(list(samples_rgb_hsl.keys()))
    hsl = np.array(list(samples_rgb_hsl.values()))
    rgb = np_hsl_to_unit_rgb(hsl[..., 0], hsl[..., 1], hsl[..., 2])
    assert np.allclose(rgb, expected, atol=1/255)


def test_hue_360_is_hue_0():
    assert np.allclose(hsl_to_unit_rgb(360, 1, 0.5), hsl_to_unit_rgb(0, 1, 0.5))


def test_zero_saturation_is_gray():
    for h in (0, 90, 200, 359):
        r, g, b = hsl_to_unit_rgb(h, 0, 0.4)
        assert abs(r - 0.4) < 1e-12
        assert abs(g - 0.4) < 1e-12
        assert abs(b - 0.4) < 1e-12


def test_scalar_matches_numpy():
    h = np.arange(0, 360, 7.5)
    s = np.full_like(h, 0.6)
    l = np.full_like(h, 0.3)
    vectorized = np_hsl_to_unit_rgb(h, s, l)
    for i, hue in enumerate(h):
        assert np.allclose(hsl_to_unit_rgb(float(hue), 0.6, 0.3), vectorized[i])
