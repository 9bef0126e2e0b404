from chromalite import Color, Freshness, FormatType
import numpy as np
import pytest


def test_hex_scenario():
    color = Color.parse("#fa4")
    assert color.hex == "#ffaa44"
    assert color.hsl == "hsl(33 100% 63%)"
    assert color.freshness is Freshness.BOTH_FRESH


def test_freshness_transitions(orange):
    assert orange.freshness is Freshness.RGB_FRESH
    orange.hue
    assert orange.freshness is Freshness.BOTH_FRESH
    orange.saturate(0.5)
    assert orange.freshness is Freshness.HSL_FRESH
    orange.red
    assert orange.freshness is Freshness.BOTH_FRESH
    orange.invert()
    assert orange.freshness is Freshness.RGB_FRESH


def test_hsl_mutation_reconverts_rgb():
    color = Color.from_rgba((255, 0, 0))
    color.saturate(0.5)
    assert color.freshness is Freshness.HSL_FRESH
    assert color.rgba_bytes == (191, 64, 64, 255)


def test_rgb_mutation_reconverts_hsl():
    color = Color.parse("#ff0000")
    assert color.hue == 0.0
    color.invert()
    assert color.hue == 180.0


def test_opacity_then_rotate():
    color = Color.parse("rgba(255,170,68,0.5)")
    color.opacity(0.7).rotate_hue(180)
    assert color.freshness is Freshness.HSL_FRESH
    assert round(color.hue) == 213
    assert abs(color.alpha - 0.7) < 1/255


def test_opacity_keeps_rgb_authoritative(orange):
    orange.hue
    orange.opacity(0.5)
    assert orange.freshness is Freshness.RGB_FRESH
    assert orange.rgba_bytes[3] == 128
    orange.opacity(2.0)
    assert orange.alpha == 1.0
    orange.opacity(-1)
    assert orange.rgba_bytes[3] == 0


def test_opacity_keeps_hsl_authoritative():
    color = Color.from_hsla((120, 100, 50))
    color.opacity(0.5)
    assert color.freshness is Freshness.HSL_FRESH
    assert color.alpha == 0.5
    assert color.rgba_bytes == (0, 255, 0, 128)


def test_solid_over_background():
    color = Color.parse("#ffaa4480").background("#fff").solid()
    assert color.hex == "#ffd4a1"
    assert color.hexa == "#ffd4a1ff"
    assert not color.has_alpha


def test_solid_over_dark_background():
    color = Color.parse("#ffffff00").background((0, 0, 0)).solid()
    assert color.rgba_bytes == (0, 0, 0, 255)


def test_solid_is_noop_when_opaque(orange):
    orange.hue
    orange.solid()
    assert orange.freshness is Freshness.BOTH_FRESH
    assert orange.hex == "#ffaa44"


def test_contrast_and_brightness():
    assert Color.from_rgba((200, 100, 0)).contrast(0).rgba_bytes == (128, 128, 128, 255)
    assert Color.from_rgba((200, 100, 0)).contrast(2).rgba_bytes == (255, 72, 0, 255)
    assert Color.from_rgba((200, 100, 0)).brightness(0.5).rgba_bytes == (100, 50, 0, 255)


def test_invert_hsl_twice():
    color = Color.from_hsla((200, 40, 30, 1.0))
    color.invert_hsl()
    assert color.hsla_values == (20.0, 60.0, 70.0, 1.0)
    color.invert_hsl()
    assert color.hsla_values == (200.0, 40.0, 30.0, 1.0)


def test_setters():
    assert Color.parse("#ff0000").set_hue(120).hex == "#00ff00"
    assert Color.parse("#ff0000").set_lightness(100).hex == "#ffffff"
    assert Color.parse("#ff0000").set_saturation(0).hex == "#808080"


def test_mix():
    assert Color.parse("#000").mix("#fff").rgba_bytes == (128, 128, 128, 255)
    assert Color.parse("#000").mix(Color.parse("#fff"), 0).hex == "#000000"


def test_mutators_chain(orange):
    assert orange.invert() is orange
    assert orange.rotate_hue(10) is orange
    assert orange.background(None) is orange


def test_clone_is_independent():
    color = Color.parse("#ffaa44").background("#000")
    copy = color.clone()
    copy.invert()
    assert color.hex == "#ffaa44"
    assert copy.hex == "#0055bb"
    assert copy.background_color is not color.background_color
    assert copy.background_color.hex == "#000000"


def test_clone_keeps_freshness():
    color = Color.from_hsla((10, 20, 30))
    assert color.clone().freshness is Freshness.HSL_FRESH


def test_parse_variants():
    assert Color.parse("#ffaa4480").rgba_bytes == (255, 170, 68, 128)
    assert Color.parse("rgb(255 170 68 / 50%)").rgba_bytes == (255, 170, 68, 128)
    assert Color.parse("hsl(33 100% 63%)").hsla_values == (33.0, 100.0, 63.0, 1.0)
    assert Color.parse(" rebeccapurple ").hex == "#663399"
    assert Color.parse("RED").hex == "#ff0000"
    assert Color.parse((1, 2, 3)).rgba_bytes == (1, 2, 3, 255)
    assert Color.parse([1, 2, 3, 4]).rgba_bytes == (1, 2, 3, 4)
    assert Color.parse(np.array([10, 20, 30])).rgba_bytes == (10, 20, 30, 255)


def test_parse_color_clones(orange):
    copy = Color.parse(orange)
    assert copy == orange
    assert copy is not orange


@pytest.mark.parametrize("bad", ["notacolor", "#ggg", "rgb(1, 2)", "hsl(a, b, c)", ""])
def test_parse_invalid_string(bad):
    with pytest.raises(ValueError):
        Color.parse(bad)


def test_parse_invalid_type():
    with pytest.raises(TypeError):
        Color.parse(42)
    with pytest.raises(TypeError):
        Color.parse(None)


def test_string_forms():
    assert str(Color.parse("#ffaa44")) == "rgba(255,170,68,1.00)"
    assert str(Color.from_hsla((200, 40, 30, 0.5))) == "hsla(200 40% 30% / 0.50)"
    assert Color.parse("#ffaa44").rgb == "rgb(255,170,68)"
    assert repr(Color.parse("#ffaa44")) == "Color.parse('rgba(255,170,68,1.00)')"
    color = Color.parse("#ffaa44")
    assert eval(repr(color)) == color


def test_components():
    red = Color.parse("#ff0000")
    assert red.components() == (255, 0, 0, 255)
    assert red.components("rgb", FormatType.PERCENTAGE) == (100.0, 0.0, 0.0)
    assert red.components("hsla", FormatType.INT) == (0, 255, 128, 255)
    assert red.components("hsl", "float") == (0.0, 1.0, 0.5)
    with pytest.raises(ValueError):
        red.components("hsv")


def test_luma_is_cached_and_invalidated():
    color = Color.parse("#000")
    assert color.luma == 0
    assert color.is_dark
    color.invert()
    assert color.luma == pytest.approx(1.0)
    assert color.is_light


def test_translucent_luma_uses_background(translucent_black):
    assert translucent_black.luma == pytest.approx(127 / 255)
    assert translucent_black.is_dark
    translucent_black.background("#000")
    assert translucent_black.luma == 0
    translucent_black.background(None)
    assert translucent_black.luma == pytest.approx(127 / 255)


def test_translucent_luma_follows_background_changes(translucent_black):
    backdrop = Color.parse("#fff")
    translucent_black.background(backdrop)
    assert translucent_black.luma == pytest.approx(127 / 255)
    backdrop.invert()
    assert translucent_black.luma == 0
    assert backdrop.hex == "#000000"


def test_luma_yuv():
    color = Color.parse("#ff0000")
    assert color.luma == pytest.approx(0.2126)
    assert color.luma_yuv == pytest.approx(0.299)


def test_equality():
    assert Color.parse("#ff0000") == Color.from_hsla((0, 100, 50))
    assert Color.parse("#ff0000") != Color.parse("#ff000080")
    assert Color.parse("#ff0000") != "#ff0000"


def test_invert_hsl_twice_on_converted_color(orange):
    before = orange.hsla_values
    orange.invert_hsl().invert_hsl()
    assert orange.hsla_values == before
    assert orange.hex == "#ffaa44"


def test_clone_background_pointing_to_itself(translucent_black):
    translucent_black.background(translucent_black)
    copy = translucent_black.clone()
    assert copy is not translucent_black
    assert copy.background_color is copy
    assert Color.parse(translucent_black).background_color is not translucent_black


def test_clone_background_cycle():
    a = Color.parse("#ff000080")
    b = Color.parse("#0000ff80")
    a.background(b)
    b.background(a)
    copy = a.clone()
    assert copy.background_color is not b
    assert copy.background_color.background_color is copy
    assert copy.background_color.hexa == "#0000ff80"


def test_clone_copies_background_chain():
    backdrop = Color.parse("#000")
    middle = Color.parse("#ffffff80").background(backdrop)
    top = Color.parse("#ff000080").background(middle)
    copy = top.clone()
    assert copy.background_color.background_color.hex == "#000000"
    assert copy.background_color.background_color is not backdrop
