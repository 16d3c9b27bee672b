import math
import numpy as np
from numpy import ndarray as NDArray
from boundednumbers.functions import cyclic_wrap_float
from boundednumbers.np_functions import cyclic_wrap_float as np_cyclic_wrap_float

from ..types.format_type import EPSILON, HUE_360
from ..utils.num_utils import is_close_to_zero


## HSL to RGB conversions

def hue_to_channel(p: float, q: float, t: float) -> float:
    """Piecewise channel value for HSL at hue offset ``t`` (unit turns)."""
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def hsl_to_unit_rgb(h: float, s: float, l: float) -> tuple[float, float, float]:
    """
    Convert HSL to RGB.

    Args:
        h: Hue in degrees, wrapped into [0, 360)
        s: Saturation in [0, 1]
        l: Luminance in [0, 1]

    Returns:
        Tuple[float, float, float]: (r, g, b) in [0, 1]
    """
    if is_close_to_zero(s, EPSILON):
        return l, l, l  # achromatic

    hue = cyclic_wrap_float(h, 0, HUE_360) / HUE_360
    q = l * (1 + s) if l < 0.5 else l + s - l * s
    p = 2 * l - q

    return (
        hue_to_channel(p, q, hue + 1 / 3),
        hue_to_channel(p, q, hue),
        hue_to_channel(p, q, hue - 1 / 3),
    )


def np_hue_to_channel(p: NDArray, q: NDArray, t: NDArray) -> NDArray:
    t = np.where(t < 0, t + 1, t)
    t = np.where(t > 1, t - 1, t)
    return np.select(
        [t < 1 / 6, t < 1 / 2, t < 2 / 3],
        [p + (q - p) * 6 * t, q, p + (q - p) * (2 / 3 - t) * 6],
        default=p,
    )


def np_hsl_to_unit_rgb(h: NDArray, s: NDArray, l: NDArray) -> NDArray:
    """
    Vectorized: Convert HSL to RGB.

    Args:
        h: array-like or scalar, hue in degrees, wrapped into [0, 360)
        s: array-like or scalar, saturation in [0, 1]
        l: array-like or scalar, luminance in [0, 1]

    Returns:
        rgb: array of shape (..., 3): (r, g, b) in [0, 1]
    """
    h = np.asarray(h, dtype=float)
    s = np.asarray(s, dtype=float)
    l = np.asarray(l, dtype=float)

    out_shape = np.broadcast(h, s, l).shape
    h = np.broadcast_to(h, out_shape)
    s = np.broadcast_to(s, out_shape)
    l = np.broadcast_to(l, out_shape)

    hue = np_cyclic_wrap_float(h, 0, HUE_360) / HUE_360
    q = np.where(l < 0.5, l * (1 + s), l + s - l * s)
    p = 2 * l - q

    r = np_hue_to_channel(p, q, hue + 1 / 3)
    g = np_hue_to_channel(p, q, hue)
    b = np_hue_to_channel(p, q, hue - 1 / 3)

    achromatic = np.abs(s) < EPSILON
    r = np.where(achromatic, l, r)
    g = np.where(achromatic, l, g)
    b = np.where(achromatic, l, b)

    return np.stack([r, g, b], axis=-1)


## HSV to RGB conversions

def hsv_to_unit_rgb(h: float, s: float, v: float) -> tuple[float, float, float]:
    """
    Convert HSV to RGB with the six-sector algorithm.

    Args:
        h: Hue in degrees [0, 360)
        s: Saturation in [0, 1]
        v: Value in [0, 1]

    Returns:
        (r, g, b) in [0, 1]
    """
    # h / 60 == hue_unit * 6, without the float error of going through 1/360
    sector_pos = h / 60
    i = math.floor(sector_pos)
    f = sector_pos - i
    p = v * (1 - s)
    q = v * (1 - f * s)
    t = v * (1 - (1 - f) * s)

    sector = i % 6
    if sector == 0:
        return v, t, p
    if sector == 1:
        return q, v, p
    if sector == 2:
        return p, v, t
    if sector == 3:
        return p, q, v
    if sector == 4:
        return t, p, v
    return v, p, q


def np_hsv_to_unit_rgb(h: NDArray, s: NDArray, v: NDArray) -> NDArray:
    """Vectorized :func:`hsv_to_unit_rgb`; returns an array of shape (..., 3)."""
    h = np.asarray(h, dtype=float)
    s = np.asarray(s, dtype=float)
    v = np.asarray(v, dtype=float)

    out_shape = np.broadcast(h, s, v).shape
    h = np.broadcast_to(h, out_shape)
    s = np.broadcast_to(s, out_shape)
    v = np.broadcast_to(v, out_shape)

    sector_pos = h / 60
    i = np.floor(sector_pos)
    f = sector_pos - i
    p = v * (1 - s)
    q = v * (1 - f * s)
    t = v * (1 - (1 - f) * s)

    sector = np.mod(i, 6).astype(int)
    masks = [sector == k for k in range(6)]

    r = np.select(masks, [v, q, p, p, t, v])
    g = np.select(masks, [t, v, v, q, p, p])
    b = np.select(masks, [p, p, t, v, v, q])

    return np.stack([r, g, b], axis=-1)
