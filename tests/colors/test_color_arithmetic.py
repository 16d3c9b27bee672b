import pytest

from huekit.colors import (
    Color, hex_to_color, blend, blend_hex, lighten, darken,
    saturate, desaturate, de_saturate, gray_scale, invert, set_channel,
)
from huekit.types.color_types import Channel

BLACK = Color(0, 0, 0)
WHITE = Color(255, 255, 255)

def test_blend_halfway_rounds_up():
    assert blend(BLACK, WHITE, 50).to_hex() == "#808080"
    assert BLACK.blend(WHITE, 50) == Color(128, 128, 128)

def test_blend_endpoints():
    color_a = Color(10, 20, 30, 40)
    color_b = Color(200, 100, 50, 255)
    assert blend(color_a, color_b, 0) == color_a
    assert blend(color_a, color_b, 100) == color_b
    assert blend(color_a, color_b, 150) == color_b
    assert blend(color_a, color_b, -25) == blend(color_a, color_b, 25)

def test_blend_mixes_alpha():
    assert blend(Color(0, 0, 0, 0), BLACK, 50).alpha == 128

def test_blend_with_missing_color():
    assert blend(None, WHITE, 30) == WHITE
    assert blend(BLACK, None, 30) == BLACK
    assert blend(None, None, 30) is None

def test_blend_hex():
    assert blend_hex("#000000", "#FFFFFF", 50) == "#808080"
    assert blend_hex("#FF0000", "#0000FF", 25) == "#BF0040"
    assert blend_hex("bad", "#FFFFFF", 50) == "#FFFFFF"
    assert blend_hex("#000000", "bad", 50) == "#000000"
    assert blend_hex("bad", "worse", 50) is None

def test_lighten():
    red = Color(255, 0, 0)
    assert lighten(red, 20).to_hex() == "#FF3333"
    assert red.lighten(20) == Color(255, 51, 51)
    assert lighten(WHITE, 10) == WHITE
    assert lighten(Color(10, 20, 30), 200) == WHITE
    assert lighten(Color(10, 20, 30, 77), 0) == Color(10, 20, 30, 77)

def test_lighten_keeps_alpha():
    assert lighten(Color(0, 0, 0, 12), 50).alpha == 12

def test_darken():
    assert darken(Color(255, 128, 64), 10) == Color(229, 102, 38)
    assert darken(BLACK, 10) == BLACK
    assert Color(100, 100, 100).darken(100) == BLACK

def test_darken_is_negative_lighten(random_channels):
    for channels in random_channels[:50]:
        color = Color(*channels)
        for percent in (0, 5, 33.3, 100):
            assert darken(color, percent) == lighten(color, -percent)

def test_saturate():
    assert saturate(hex_to_color("#CC3333"), 100) == Color(255, 0, 0)
    color = hex_to_color("#336699")
    more = saturate(color, 20)
    assert more.to_hsl().saturation > color.to_hsl().saturation
    assert more.hue == color.hue
    assert saturate(color, 0) == color

def test_desaturate():
    color = hex_to_color("#336699")
    less = desaturate(color, 20)
    assert less.to_hsl().saturation == 30
    assert less.hue == color.hue
    assert desaturate(color, 100) == gray_scale(color)

def test_operations_keep_alpha():
    color = Color(51, 102, 153, 42)
    for result in (saturate(color, 10), desaturate(color, 10), gray_scale(color), invert(color)):
        assert result.alpha == 42

def test_de_saturate_is_deprecated():
    color = hex_to_color("#336699")
    with pytest.warns(DeprecationWarning):
        result = de_saturate(color, 20)
    assert result == desaturate(color, 20)

def test_gray_scale():
    gray = gray_scale(hex_to_color("#336699"))
    assert gray == Color(102, 102, 102)
    assert hex_to_color("#336699").gray_scale() == gray

def test_gray_scale_idempotent(random_channels):
    for channels in random_channels:
        gray = gray_scale(Color(*channels))
        assert gray.red == gray.green == gray.blue
        assert gray_scale(gray) == gray

def test_invert():
    assert invert(Color(255, 0, 0)) == Color(0, 255, 255)
    assert invert(hex_to_color("#336699")).to_hex() == "#996633"
    assert Color(0, 0, 255).invert() == Color(255, 255, 0)

def test_invert_leaves_grays_alone():
    for gray in (BLACK, WHITE, Color(128, 128, 128)):
        assert invert(gray) == gray

def test_set_channel():
    red = Color(255, 0, 0)
    assert set_channel(red, Channel.GREEN, 128) == Color(255, 128, 0)
    assert set_channel(red, Channel.ALPHA, 300).alpha == 255
    assert set_channel(red, 0, -5) == Color(0, 0, 0)
    assert red.set_channel(Channel.BLUE, 9.9) == Color(255, 0, 9)
    assert red == Color(255, 0, 0)

def test_set_channel_rejects_unknown_channel():
    with pytest.raises(ValueError):
        set_channel(BLACK, 7, 1)

def test_lighten_clamps_each_channel():
    assert lighten(Color(250, 100, 0), 10) == Color(255, 125, 25)
    assert darken(Color(250, 100, 10), 10) == Color(224, 74, 0)

def test_blend_mixes_every_channel():
    result = blend(Color(0, 255, 10, 0), Color(255, 0, 250, 255), 25)
    assert result == Color(64, 191, 70, 64)

def test_saturation_stays_within_bounds():
    color = hex_to_color("#336699")
    assert saturate(color, 100).to_hsl().saturation == 100
    assert saturate(saturate(color, 80), 80) == saturate(color, 100)
    assert desaturate(desaturate(color, 40), 40) == gray_scale(color)
