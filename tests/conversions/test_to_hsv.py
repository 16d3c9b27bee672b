from huekit.conversions.to_hsv import unit_rgb_to_hsv, np_unit_rgb_to_hsv
import numpy as np
from ..samples import samples_rgb_hsv

def test_unit_rgb_to_hsv():
    for (r, g, b), (h_exp, s_exp, v_exp) in samples_rgb_hsv.items():
        h_out, s_out, v_out = unit_rgb_to_hsv(r, g, b)

        assert abs(h_out - h_exp) < 1e-6
        assert abs(s_out - s_exp) < 1e-6
        assert abs(v_out - v_exp) < 1e-6

def test_unit_rgb_to_hsv_numpy():
    the_matrix = np.array(list(samples_rgb_hsv.keys()))
    expected = np.array(list(samples_rgb_hsv.values()))
    hsv = np_unit_rgb_to_hsv(the_matrix[..., 0], the_matrix[..., 1], the_matrix[..., 2])

    assert np.allclose(hsv, expected, atol=1e-6)

def test_black_has_zero_saturation():
    assert unit_rgb_to_hsv(0.0, 0.0, 0.0) == (0.0, 0.0, 0.0)
    hsv = np_unit_rgb_to_hsv(np.zeros(4), np.zeros(4), np.zeros(4))
    assert not np.any(np.isnan(hsv))
    assert np.all(hsv == 0.0)

def test_numpy_accepts_2d_arrays(rng):
    rgb = rng.random((4, 5, 3))
    hsv = np_unit_rgb_to_hsv(rgb[..., 0], rgb[..., 1], rgb[..., 2])
    assert hsv.shape == (4, 5, 3)
    assert np.allclose(hsv[2, 3], unit_rgb_to_hsv(*rgb[2, 3]))
