import numpy as np
from numpy import ndarray as NDArray

from .to_hsl import unit_rgb_to_hue, np_unit_rgb_to_hue


def unit_rgb_to_hsv(r: float, g: float, b: float) -> tuple[float, float, float]:
    """
    Convert RGB to HSV.

    Args:
        r, g, b: Channels in [0, 1]

    Returns:
        (hue [0,360), saturation [0,1], value [0,1])
    """
    max_c = max(r, g, b)
    min_c = min(r, g, b)

    saturation = 0.0 if max_c == 0 else (max_c - min_c) / max_c
    return unit_rgb_to_hue(r, g, b), saturation, max_c


def np_unit_rgb_to_hsv(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """Vectorized :func:`unit_rgb_to_hsv`; returns an array of shape (..., 3)."""
    r = np.asarray(r, dtype=float)
    g = np.asarray(g, dtype=float)
    b = np.asarray(b, dtype=float)

    max_c = np.maximum(np.maximum(r, g), b)
    min_c = np.minimum(np.minimum(r, g), b)

    mask = max_c > 0
    safe_max = np.where(mask, max_c, 1.0)
    saturation = np.where(mask, (max_c - min_c) / safe_max, 0.0)

    hue = np_unit_rgb_to_hue(r, g, b)
    return np.stack(np.broadcast_arrays(hue, saturation, max_c), axis=-1)
