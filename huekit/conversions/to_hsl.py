import numpy as np
from numpy import ndarray as NDArray

from ..types.format_type import HUE_360


def unit_rgb_to_hue(r: float, g: float, b: float) -> float:
    """
    Hue shared by HSL and HSV, derived from whichever channel is largest.

    Args:
        r, g, b: Channels in [0, 1]

    Returns:
        Hue in degrees [0, 360); 0 for achromatic colors
    """
    max_c = max(r, g, b)
    min_c = min(r, g, b)
    delta = max_c - min_c

    if delta == 0:
        return 0.0

    if max_c == r:
        hue = (g - b) / delta + (6 if g < b else 0)
    elif max_c == g:
        hue = (b - r) / delta + 2
    else:
        hue = (r - g) / delta + 4

    return (hue * 60) % HUE_360


def unit_rgb_to_hsl(r: float, g: float, b: float) -> tuple[float, float, float]:
    """
    Convert RGB to HSL.

    Args:
        r: Red component in [0, 1]
        g: Green component in [0, 1]
        b: Blue component in [0, 1]

    Returns:
        Tuple[float, float, float]: (hue [0,360), saturation [0,1], luminance [0,1])
    """
    max_c = max(r, g, b)
    min_c = min(r, g, b)
    delta = max_c - min_c

    luminance = (max_c + min_c) / 2.0

    if delta == 0:
        saturation = 0.0
    elif luminance > 0.5:
        saturation = delta / (2 - max_c - min_c)
    else:
        saturation = delta / (max_c + min_c)

    return unit_rgb_to_hue(r, g, b), saturation, luminance


def np_unit_rgb_to_hue(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """Vectorized :func:`unit_rgb_to_hue`."""
    r = np.asarray(r, dtype=float)
    g = np.asarray(g, dtype=float)
    b = np.asarray(b, dtype=float)

    out_shape = np.broadcast(r, g, b).shape
    r = np.broadcast_to(r, out_shape)
    g = np.broadcast_to(g, out_shape)
    b = np.broadcast_to(b, out_shape)

    max_c = np.maximum.reduce([r, g, b])
    min_c = np.minimum.reduce([r, g, b])
    delta = max_c - min_c

    hue = np.zeros(out_shape)
    mask = delta > 0
    safe_delta = np.where(mask, delta, 1.0)

    # first match wins, same precedence as the scalar branches
    mask_r = mask & (max_c == r)
    mask_g = mask & ~mask_r & (max_c == g)
    mask_b = mask & ~mask_r & ~mask_g

    hue[mask_r] = (((g - b) / safe_delta) % 6)[mask_r]
    hue[mask_g] = ((b - r) / safe_delta + 2)[mask_g]
    hue[mask_b] = ((r - g) / safe_delta + 4)[mask_b]

    return (hue * 60) % HUE_360


def np_unit_rgb_to_hsl(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized: Convert RGB to HSL.

    Args:
        r, g, b: array-like or scalar, [0,1]

    Returns:
        hsl: array of shape (..., 3): (hue [0,360), saturation [0,1], luminance [0,1])
    """
    r = np.asarray(r, dtype=float)
    g = np.asarray(g, dtype=float)
    b = np.asarray(b, dtype=float)

    max_c = np.maximum(np.maximum(r, g), b)
    min_c = np.minimum(np.minimum(r, g), b)
    delta = max_c - min_c

    luminance = (max_c + min_c) / 2.0

    mask = delta > 0
    denominator = np.where(luminance > 0.5, 2 - max_c - min_c, max_c + min_c)
    safe_denominator = np.where(mask, denominator, 1.0)
    saturation = np.where(mask, delta / safe_denominator, 0.0)

    hue = np_unit_rgb_to_hue(r, g, b)
    return np.stack(np.broadcast_arrays(hue, saturation, luminance), axis=-1)
