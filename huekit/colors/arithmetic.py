"""
Color operations
================

Every operation takes a :class:`Color` and returns a new one; inputs are never
modified. The functions are also attached to :class:`Color` as methods, so
``lighten(color, 10)`` and ``color.lighten(10)`` are the same call.

Percent arguments are clamped to [0, 100]. ``lighten`` alone accepts a signed
percent in [-100, 100] so that ``darken(c, p) == lighten(c, -p)``.
"""
from __future__ import annotations
import warnings
from typing import Optional

import numpy as np
from boundednumbers.functions import clamp, cyclic_wrap_float
from boundednumbers.np_functions import clamp as np_clamp

from .color_base import Color
from .color import hex_to_color
from .hsl import color_to_hsl, hsl_to_color
from .hsv import color_to_hsv, hsv_to_color
from ..types.color_types import Channel, Scalar
from ..types.format_type import CHANNEL_MAX, PERCENT_MAX, HUE_360


def _clamp_percent(percent: float, lower: float = 0.0) -> float:
    return float(clamp(float(percent), lower, PERCENT_MAX))


def blend(from_color: Optional[Color], to_color: Optional[Color], percent: float) -> Optional[Color]:
    """
    Mix two colors channel by channel, alpha included.

    ``percent`` is the share of ``to_color``: 0 gives ``from_color``, 100 gives
    ``to_color``. Its absolute value is used. Results round half up, so black
    and white at 50 give ``#808080``. When one color is None the other is
    returned as is.
    """
    if from_color is None:
        return to_color
    if to_color is None:
        return from_color

    share = _clamp_percent(abs(percent)) / PERCENT_MAX
    a = np.asarray(from_color.value, dtype=float)
    b = np.asarray(to_color.value, dtype=float)

    mixed = np.floor(a + (b - a) * share + 0.5)
    return Color(*np_clamp(mixed, 0, CHANNEL_MAX).tolist())


def blend_hex(from_hex: str, to_hex: str, percent: float) -> Optional[str]:
    """
    :func:`blend` on hex strings. An invalid hex counts as a missing color;
    when both are invalid the result is None.
    """
    result = blend(
        hex_to_color(from_hex, throws=False),
        hex_to_color(to_hex, throws=False),
        percent,
    )
    return result.to_hex() if result is not None else None


def lighten(color: Color, percent: float) -> Color:
    """Add ``percent`` of 255 to red, green and blue; alpha is kept."""
    shift = _clamp_percent(percent, lower=-PERCENT_MAX) * CHANNEL_MAX / PERCENT_MAX
    channels = np.asarray(color.value[:3], dtype=float) + shift
    red, green, blue = np.floor(np_clamp(channels, 0, CHANNEL_MAX)).tolist()
    return Color(red, green, blue, color.alpha)


def darken(color: Color, percent: float) -> Color:
    return lighten(color, -percent)


def saturate(color: Color, percent: float) -> Color:
    """
    Make a color more saturated. Takes a number between 0 and 100 and raises
    the HSL saturation by that amount; hue, luminance and alpha are kept.
    """
    hsl = color_to_hsl(color, rounded=False)
    saturation = clamp(hsl.saturation + _clamp_percent(percent), 0.0, PERCENT_MAX)
    return hsl_to_color(hsl.hue, saturation, hsl.luminance, hsl.alpha)


def desaturate(color: Color, percent: float) -> Color:
    """Make a color less saturated; the counterpart of :func:`saturate`."""
    hsl = color_to_hsl(color, rounded=False)
    saturation = clamp(hsl.saturation - _clamp_percent(percent), 0.0, PERCENT_MAX)
    return hsl_to_color(hsl.hue, saturation, hsl.luminance, hsl.alpha)


def de_saturate(color: Color, percent: float) -> Color:
    """Deprecated spelling of :func:`desaturate`."""
    warnings.warn(
        "de_saturate is deprecated. Use desaturate instead.",
        DeprecationWarning,
        stacklevel=2
    )
    return desaturate(color, percent)


def gray_scale(color: Color) -> Color:
    return desaturate(color, PERCENT_MAX)


def invert(color: Color) -> Color:
    """
    Opposite hue of a color: the HSV hue is turned by 180 degrees while
    saturation, value and alpha are left alone.
    """
    hsv = color_to_hsv(color, rounded=False)
    hue = cyclic_wrap_float(hsv.hue + HUE_360 / 2, 0, HUE_360)
    return hsv_to_color(hue, hsv.saturation, hsv.value, hsv.alpha)


def set_channel(color: Color, which: Channel, value: Scalar) -> Color:
    """Return a copy with exactly one channel replaced (clamped to [0, 255])."""
    channel = Channel(which)
    return color.with_channels(**{channel.name.lower(): value})


Color.blend = blend
Color.lighten = lighten
Color.darken = darken
Color.saturate = saturate
Color.desaturate = desaturate
Color.gray_scale = gray_scale
Color.invert = invert
Color.set_channel = set_channel
