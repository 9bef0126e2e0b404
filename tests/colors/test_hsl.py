from chromalite.colors.hsl import HSLa
from chromalite.colors.rgb import RGBa
import pytest


def test_components_are_clamped_and_wrapped():
    assert HSLa((370, 120, -5, 2)).values == (10.0, 100.0, 0.0, 1.0)
    assert HSLa((-30, 50, 50, 1)).h == 330.0
    assert HSLa((720, 50, 50, 1)).h == 0.0


def test_hue_must_be_finite():
    with pytest.raises(ValueError):
        HSLa((float("inf"), 50, 50, 1))
    with pytest.raises(ValueError):
        HSLa((0, float("nan"), 50, 1))


def test_rotate_hue():
    hsla = HSLa((10, 50, 50, 1))
    hsla.rotate_hue(-90)
    assert hsla.h == 280.0
    hsla.rotate_hue(90)
    assert hsla.h == 10.0
    hsla.rotate_hue(720)
    assert hsla.h == 10.0


def test_saturate_scales():
    hsla = HSLa((10, 40, 50, 1))
    hsla.saturate(0.5)
    assert hsla.s == 20.0
    hsla.saturate(10)
    assert hsla.s == 100.0
    hsla.saturate(0)
    assert hsla.s == 0.0


def test_invert_twice_is_identity():
    hsla = HSLa((200, 40, 30, 0.5))
    hsla.invert()
    assert hsla.values == (20.0, 60.0, 70.0, 0.5)
    hsla.invert()
    assert hsla.values == (200.0, 40.0, 30.0, 0.5)


def test_setters():
    hsla = HSLa((10, 40, 50, 1))
    hsla.set_hue(-10)
    hsla.set_saturation(150)
    hsla.set_lightness(25)
    assert hsla.values == (350.0, 100.0, 25.0, 1.0)


def test_opacity():
    hsla = HSLa((10, 40, 50, 1))
    hsla.opacity(0.25)
    assert hsla.alpha == 0.25
    assert hsla.has_alpha
    hsla.opacity(5)
    assert hsla.a == 1.0


def test_from_rgba():
    h, s, l, a = HSLa.from_rgba(RGBa((255, 0, 0, 51))).values
    assert (h, s, l) == (0.0, 100.0, 50.0)
    assert a == pytest.approx(0.2)


def test_invert_twice_is_exact_on_fractional_values():
    hsla = HSLa((0.1, 0.1, 63.3, 1))
    before = hsla.values
    hsla.invert()
    hsla.invert()
    assert hsla.values == before


def test_invert_twice_is_exact_after_conversion():
    for rgba in ((255, 170, 68, 255), (51, 102, 153, 128), (1, 2, 3, 255), (250, 10, 127, 0)):
        hsla = HSLa.from_rgba(RGBa(rgba))
        before = hsla.values
        hsla.invert()
        hsla.invert()
        assert hsla.values == before
