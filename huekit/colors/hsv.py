from typing import NamedTuple

from ..conversions.to_hsv import unit_rgb_to_hsv
from ..conversions.to_rgb import hsv_to_unit_rgb
from ..types.color_types import Scalar
from ..types.format_type import CHANNEL_MAX, PERCENT_MAX, HUE_360
from ..utils.num_utils import round_half_up
from .color_base import Color, finite_component


class Hsv(NamedTuple):
    """Hue in degrees [0, 360), saturation and value in percent, alpha 0-255."""
    hue: float
    saturation: float
    value: float
    alpha: int = CHANNEL_MAX


def color_to_hsv(color: Color, rounded: bool = True) -> Hsv:
    """HSV view of ``color``; see :func:`~huekit.colors.hsl.color_to_hsl` for ``rounded``."""
    red, green, blue, alpha = color.value
    hue, saturation, value = unit_rgb_to_hsv(
        red / CHANNEL_MAX, green / CHANNEL_MAX, blue / CHANNEL_MAX
    )
    saturation *= PERCENT_MAX
    value *= PERCENT_MAX

    if rounded:
        return Hsv(round(hue) % HUE_360, round(saturation), round(value), alpha)
    return Hsv(hue, saturation, value, alpha)


def hsv_to_color(hue: Scalar, saturation: Scalar, value: Scalar, alpha: Scalar = CHANNEL_MAX) -> Color:
    """
    Build a color from HSV.

    Args:
        hue: degrees, wrapped into [0, 360); the color itself
        saturation: [0 - 100], purity of the hue; lower values look washed out
        value: [0 - 100], brightness
        alpha: [0 - 255]
    """
    hue = finite_component(hue, "Hue")
    saturation = finite_component(saturation, "Saturation")
    value = finite_component(value, "Value")
    red, green, blue = hsv_to_unit_rgb(hue, saturation / PERCENT_MAX, value / PERCENT_MAX)
    return Color(
        round_half_up(red * CHANNEL_MAX),
        round_half_up(green * CHANNEL_MAX),
        round_half_up(blue * CHANNEL_MAX),
        alpha,
    )
