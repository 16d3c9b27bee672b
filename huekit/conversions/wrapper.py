import numpy as np
from typing import Tuple, cast, Callable

from ..types.format_type import max_non_hue, space_scales, CHANNEL_MAX

from .to_rgb import np_hsv_to_unit_rgb, np_hsl_to_unit_rgb
from .to_hsv import np_unit_rgb_to_hsv
from .to_hsl import np_unit_rgb_to_hsl

from ..types.color_types import ColorElement, element_to_array, ColorSpace

CONVERT_NUMPY: dict[tuple[str, str], Callable[[np.ndarray, np.ndarray, np.ndarray], np.ndarray]] = {
    ("rgb", "hsv"): np_unit_rgb_to_hsv,
    ("hsv", "rgb"): np_hsv_to_unit_rgb,
    ("rgb", "hsl"): np_unit_rgb_to_hsl,
    ("hsl", "rgb"): np_hsl_to_unit_rgb,
}

def normalize(color: np.ndarray, space: str) -> np.ndarray:
    """Native scale (0-255 RGB, degrees + percent HSL/HSV) to unit scale."""
    if space not in space_scales:
        raise ValueError(f"Unknown space: {space}")
    maxval = max_non_hue[space_scales[space]]

    if space == "rgb":
        return color / maxval

    h = color[..., 0]
    a = color[..., 1] / maxval
    b = color[..., 2] / maxval
    return np.stack([h, a, b], axis=-1)

def scale(color: np.ndarray, space: str) -> np.ndarray:
    """Unit scale back to native scale; RGB is rounded half-up to integers."""
    if space not in space_scales:
        raise ValueError(f"Unknown space: {space}")
    maxval = max_non_hue[space_scales[space]]

    if space == "rgb":
        scaled = np.floor(color * maxval + 0.5)
        return np.clip(scaled, 0, maxval).astype(int)

    h = color[..., 0]
    a = color[..., 1] * maxval
    b = color[..., 2] * maxval
    return np.stack([h, a, b], axis=-1)

def _convert_core(
    color: np.ndarray,
    from_space: str,
    to_space: str,
) -> np.ndarray:
    has_alpha_in  = from_space.endswith("a")
    has_alpha_out = to_space.endswith("a")

    if has_alpha_in:
        base = color[..., :3]
        alpha = color[..., 3]
    else:
        base = color
        alpha = None

    fs, ts = from_space[:3], to_space[:3]
    for space in (from_space, to_space):
        if space.rstrip("a") not in space_scales:
            raise ValueError(f"Unknown space: {space}")

    # normalize → convert → scale
    base_norm = normalize(base, fs)

    if fs == ts:
        converted = base_norm
    elif (fs, ts) in CONVERT_NUMPY:
        converted = CONVERT_NUMPY[(fs, ts)](
            base_norm[..., 0],
            base_norm[..., 1],
            base_norm[..., 2],
        )
    else:
        # HSV <-> HSL goes through RGB
        via_rgb = CONVERT_NUMPY[(fs, "rgb")](
            base_norm[..., 0],
            base_norm[..., 1],
            base_norm[..., 2],
        )
        converted = CONVERT_NUMPY[("rgb", ts)](
            via_rgb[..., 0],
            via_rgb[..., 1],
            via_rgb[..., 2],
        )

    out = scale(converted, ts)

    # alpha stays on the 0-255 scale in every space
    if has_alpha_out:
        if alpha is None:
            alpha_array = np.full(out.shape[:-1] + (1,), CHANNEL_MAX, dtype=out.dtype)
            return np.concatenate([out, alpha_array], axis=-1)
        return np.concatenate([out, alpha[..., None].astype(out.dtype)], axis=-1)

    return out


def convert(
    color: ColorElement,
    from_space: ColorSpace,
    to_space:   ColorSpace,
 ) -> ColorElement:
    """
    Convert a single color between spaces on their native scales.

    RGB(A) channels are 0-255, HSL/HSV hue is in degrees with saturation,
    luminance and value in percent. Alpha is always 0-255.
    """
    if from_space.lower() == to_space.lower():
        return color  # No conversion needed
    color_array = element_to_array(color).astype(float)
    result = _convert_core(
        color_array,
        from_space.lower(),
        to_space.lower(),
    )
    # Convert back to tuple for scalar output
    return tuple(result.tolist()) if result.ndim == 1 else cast(ColorElement, result)

def np_convert(
    color: np.ndarray,
    from_space: ColorSpace,
    to_space:   ColorSpace,
) -> np.ndarray:
    """Vectorized :func:`convert` for arrays of shape (..., channels)."""
    if from_space.lower() == to_space.lower():
        return color  # No conversion needed
    return _convert_core(
        np.asarray(color, dtype=float),
        from_space.lower(),
        to_space.lower(),
    )
