from huekit.colors import (
    Color, hex_to_color, color_to_hsl, hsl_to_color,
    color_to_hsv, hsv_to_color, invert, parse_strict,
)

def _within_one(color_a, color_b):
    return all(abs(a - b) <= 1 for a, b in zip(color_a.value, color_b.value))

def test_hex_round_trip_opaque(random_channels):
    for red, green, blue, _ in random_channels:
        hex_color = Color(red, green, blue).to_hex()
        assert len(hex_color) == 7
        assert hex_to_color(hex_color).to_hex() == hex_color

def test_hex_round_trip_translucent(random_channels):
    for red, green, blue, alpha in random_channels:
        alpha = min(alpha, 254)
        color = Color(red, green, blue, alpha)
        hex_color = color.to_hex()
        assert len(hex_color) == 9
        assert hex_to_color(hex_color) == color

def test_rgba_string_round_trip(random_channels):
    for channels in random_channels:
        color = Color(*channels)
        assert parse_strict(color.to_rgba_string()) == color

def test_hsl_round_trip(random_channels):
    for channels in random_channels:
        color = Color(*channels)
        hsl = color_to_hsl(color, rounded=False)
        assert _within_one(hsl_to_color(*hsl), color)

def test_hsv_round_trip(random_channels):
    for channels in random_channels:
        color = Color(*channels)
        hsv = color_to_hsv(color, rounded=False)
        assert _within_one(hsv_to_color(*hsv), color)

def test_rounded_views_stay_close(random_channels):
    # whole-percent HSL/HSV can move a channel by a few units but never far
    for channels in random_channels:
        color = Color(*channels)
        for back in (hsl_to_color(*color.to_hsl()), hsv_to_color(*color.to_hsv())):
            assert all(abs(a - b) <= 6 for a, b in zip(back.value, color.value))

def test_invert_twice(random_channels):
    for channels in random_channels:
        color = Color(*channels)
        assert _within_one(invert(invert(color)), color)
