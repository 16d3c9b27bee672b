from typing import NamedTuple

from ..conversions.to_hsl import unit_rgb_to_hsl
from ..conversions.to_rgb import hsl_to_unit_rgb
from ..types.color_types import Scalar
from ..types.format_type import CHANNEL_MAX, PERCENT_MAX, HUE_360
from ..utils.num_utils import round_half_up
from .color_base import Color, finite_component


class Hsl(NamedTuple):
    """Hue in degrees [0, 360), saturation and luminance in percent, alpha 0-255."""
    hue: float
    saturation: float
    luminance: float
    alpha: int = CHANNEL_MAX


def color_to_hsl(color: Color, rounded: bool = True) -> Hsl:
    """
    HSL view of ``color``.

    With ``rounded`` (the default) hue is reported in whole degrees and
    saturation/luminance in whole percents. ``rounded=False`` keeps the exact
    floats, which is what the color operations work on.
    """
    red, green, blue, alpha = color.value
    hue, saturation, luminance = unit_rgb_to_hsl(
        red / CHANNEL_MAX, green / CHANNEL_MAX, blue / CHANNEL_MAX
    )
    saturation *= PERCENT_MAX
    luminance *= PERCENT_MAX

    if rounded:
        return Hsl(round(hue) % HUE_360, round(saturation), round(luminance), alpha)
    return Hsl(hue, saturation, luminance, alpha)


def hsl_to_color(hue: Scalar, saturation: Scalar, luminance: Scalar, alpha: Scalar = CHANNEL_MAX) -> Color:
    """
    Build a color from HSL.

    Args:
        hue: degrees, wrapped into [0, 360)
        saturation: [0 - 100]
        luminance: [0 - 100]
        alpha: [0 - 255]

    Raises:
        FormatError: if a component is not a finite number
    """
    hue = finite_component(hue, "Hue")
    saturation = finite_component(saturation, "Saturation")
    luminance = finite_component(luminance, "Luminance")
    red, green, blue = hsl_to_unit_rgb(hue, saturation / PERCENT_MAX, luminance / PERCENT_MAX)
    return Color(
        round_half_up(red * CHANNEL_MAX),
        round_half_up(green * CHANNEL_MAX),
        round_half_up(blue * CHANNEL_MAX),
        alpha,
    )
