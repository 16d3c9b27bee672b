from typing import NamedTuple

from ..conversions.hex import format_hex, parse_hex
from ..types.color_types import Scalar
from ..types.format_type import CHANNEL_MAX
from .color_base import Color, clamp_channel


class Rgba(NamedTuple):
    """Channel record on the 0-255 scale."""
    red: int
    green: int
    blue: int
    alpha: int = CHANNEL_MAX


def color_to_rgba(color: Color) -> Rgba:
    return Rgba(*color.value)


def rgb_to_color(red: Scalar, green: Scalar, blue: Scalar, alpha: Scalar = CHANNEL_MAX) -> Color:
    return Color(red, green, blue, alpha)


def rgb_to_hex(red: Scalar, green: Scalar, blue: Scalar, alpha: Scalar = CHANNEL_MAX) -> str:
    """Format channels as ``#RRGGBB`` / ``#AARRGGBB``; channels are clamped first."""
    return format_hex(
        clamp_channel(red),
        clamp_channel(green),
        clamp_channel(blue),
        clamp_channel(alpha),
    )


def hex_to_rgb(hex_color: str) -> Rgba:
    """
    Split a hex color into its channels.

    Raises:
        FormatError: if ``hex_color`` is not a valid hex color
    """
    return Rgba(*parse_hex(hex_color))
