from huekit.conversions.to_rgb import (
    hsl_to_unit_rgb, np_hsl_to_unit_rgb,
    hsv_to_unit_rgb, np_hsv_to_unit_rgb,
    hue_to_channel,
)
import numpy as np
from ..samples import samples_rgb_hsl, samples_rgb_hsv

def test_hsl_to_unit_rgb():
    for (r_exp, g_exp, b_exp), (h, s, l) in samples_rgb_hsl.items():
        r, g, b = hsl_to_unit_rgb(h, s, l)

        assert abs(r - r_exp) < 1e-6
        assert abs(g - g_exp) < 1e-6
        assert abs(b - b_exp) < 1e-6

def test_hsl_to_unit_rgb_numpy():
    expected = np.array(list(samples_rgb_hsl.keys()))
    the_matrix = np.array(list(samples_rgb_hsl.values()))
    rgb = np_hsl_to_unit_rgb(the_matrix[..., 0], the_matrix[..., 1], the_matrix[..., 2])

    assert np.allclose(rgb, expected, atol=1e-6)

def test_hsv_to_unit_rgb():
    for (r_exp, g_exp, b_exp), (h, s, v) in samples_rgb_hsv.items():
        r, g, b = hsv_to_unit_rgb(h, s, v)

        assert abs(r - r_exp) < 1e-6
        assert abs(g - g_exp) < 1e-6
        assert abs(b - b_exp) < 1e-6

def test_hsv_to_unit_rgb_numpy():
    expected = np.array(list(samples_rgb_hsv.keys()))
    the_matrix = np.array(list(samples_rgb_hsv.values()))
    rgb = np_hsv_to_unit_rgb(the_matrix[..., 0], the_matrix[..., 1], the_matrix[..., 2])

    assert np.allclose(rgb, expected, atol=1e-6)

def test_achromatic_short_circuit():
    # saturation below the epsilon is treated as gray
    assert hsl_to_unit_rgb(200.0, 0.00005, 0.3) == (0.3, 0.3, 0.3)
    rgb = np_hsl_to_unit_rgb(np.array([200.0]), np.array([0.00005]), np.array([0.3]))
    assert np.allclose(rgb, [[0.3, 0.3, 0.3]])

def test_hue_360_equals_hue_0():
    assert np.allclose(hsv_to_unit_rgb(360.0, 1.0, 1.0), hsv_to_unit_rgb(0.0, 1.0, 1.0))
    assert np.allclose(hsl_to_unit_rgb(360.0, 1.0, 0.5), hsl_to_unit_rgb(0.0, 1.0, 0.5))

def test_hue_to_channel_breakpoints():
    p, q = 0.2, 0.8
    assert abs(hue_to_channel(p, q, 0.0) - p) < 1e-12
    assert abs(hue_to_channel(p, q, 0.1) - (p + (q - p) * 6 * 0.1)) < 1e-12
    assert hue_to_channel(p, q, 0.3) == q
    assert abs(hue_to_channel(p, q, 0.6) - (p + (q - p) * (2 / 3 - 0.6) * 6)) < 1e-12
    assert hue_to_channel(p, q, 0.9) == p
    # wraps into [0, 1]
    assert hue_to_channel(p, q, -0.7) == q
    assert hue_to_channel(p, q, 1.3) == q

def test_numpy_matches_scalar_on_random_values(rng):
    hsx = rng.random((200, 3)) * np.array([360.0, 1.0, 1.0])
    hsl_rgb = np_hsl_to_unit_rgb(hsx[..., 0], hsx[..., 1], hsx[..., 2])
    hsv_rgb = np_hsv_to_unit_rgb(hsx[..., 0], hsx[..., 1], hsx[..., 2])
    for row, from_hsl, from_hsv in zip(hsx, hsl_rgb, hsv_rgb):
        assert np.allclose(hsl_to_unit_rgb(*row), from_hsl)
        assert np.allclose(hsv_to_unit_rgb(*row), from_hsv)

def test_hsl_hue_wraps_outside_one_turn():
    for h, s, l in samples_rgb_hsl.values():
        expected = hsl_to_unit_rgb(h, s, l)
        for turns in (-2, -1, 1, 2):
            assert np.allclose(hsl_to_unit_rgb(h + 360 * turns, s, l), expected)

def test_hsl_hue_wraps_numpy():
    hues = np.array([-400.0, -40.0, 320.0, 680.0, 840.0])
    rgb = np_hsl_to_unit_rgb(hues, 1.0, 0.5)
    assert np.allclose(rgb[:4], [1.0, 0.0, 2 / 3])
    assert np.allclose(rgb[4], [0.0, 1.0, 0.0])

def test_hsl_and_hsv_agree_on_wrapped_hues():
    for hue in (-400.0, -90.0, 450.0, 840.0):
        assert np.allclose(
            hsl_to_unit_rgb(hue, 1.0, 0.5),
            hsv_to_unit_rgb(hue, 1.0, 1.0),
        )
