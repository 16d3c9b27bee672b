from __future__ import annotations
import logging
from typing import Callable, Dict, Optional, Tuple

from .color_base import Color
from .rgb import Rgba, color_to_rgba
from .hsl import color_to_hsl
from .hsv import color_to_hsv
from ..conversions import convert, parse_hex, parse_rgba_string
from ..errors import ColorError, FormatError, UnknownColorNameError
from ..named_colors import name_to_hex
from ..normalizers.color_normalizer import (
    ChannelArrayInput,
    ChannelRecordInput,
    ColorInput,
    ColorInputVariant,
    HexInput,
    NamedColorInput,
    RgbaStringInput,
    normalize_color_input,
)
from ..types.color_types import ColorSpace, RgbColorModel, Scalar, is_hue_space
from ..types.format_type import HUE_360

logger = logging.getLogger(__name__)


# ------------------ CONSTRUCTION ------------------

def color_from_hex(variant: HexInput) -> Color:
    return Color(*parse_hex(variant.text))


def color_from_rgba_string(variant: RgbaStringInput) -> Color:
    return Color(*parse_rgba_string(variant.text))


def color_from_channels(variant: ChannelArrayInput) -> Color:
    if len(variant.channels) not in (3, 4):
        raise FormatError(
            f"Channel array must hold 3 or 4 values, got {len(variant.channels)}"
        )
    return Color(*variant.channels)


def color_from_record(variant: ChannelRecordInput) -> Color:
    return Color(variant.red, variant.green, variant.blue, variant.alpha)


def color_from_name(variant: NamedColorInput) -> Color:
    hex_color = name_to_hex(variant.name) if isinstance(variant.name, str) else None
    if hex_color is None:
        raise UnknownColorNameError(variant.name)
    return Color(*parse_hex(hex_color))


CONSTRUCTORS: Dict[type, Callable[..., Color]] = {
    HexInput: color_from_hex,
    RgbaStringInput: color_from_rgba_string,
    ChannelArrayInput: color_from_channels,
    ChannelRecordInput: color_from_record,
    NamedColorInput: color_from_name,
}


def color_from(variant: ColorInputVariant) -> Color:
    """Build a color from one of the tagged input variants."""
    constructor = CONSTRUCTORS.get(type(variant))
    if constructor is None:
        raise FormatError(f"Unsupported color input variant: {type(variant).__name__}")
    return constructor(variant)


def parse_strict(value: ColorInput) -> Color:
    """
    Build a color from any accepted input, raising on bad input.

    Raises:
        FormatError: malformed hex/rgba string, channel array of wrong length
        UnknownColorNameError: a name missing from the web color table
    """
    return color_from(normalize_color_input(value))


def parse_lenient(value: ColorInput) -> Optional[Color]:
    """Like :func:`parse_strict` but returns None instead of raising."""
    try:
        return parse_strict(value)
    except ColorError as exc:
        logger.debug("Lenient color parse of %r gave no color: %s", value, exc)
        return None


def hex_to_color(hex_color: str, throws: bool = True) -> Optional[Color]:
    """
    Convert ``#RRGGBB`` / ``#AARRGGBB`` to a color.

    Args:
        hex_color: Hex string, case-insensitive, surrounding whitespace allowed
        throws: Raise FormatError on invalid input; otherwise return None
    """
    variant = HexInput(hex_color)
    return parse_strict(variant) if throws else parse_lenient(variant)


def get_color(name: str, throws: bool = True) -> Optional[Color]:
    """
    Look up one of the 147 web color names (case-insensitive).

    Args:
        name: Color name such as ``"cornflowerblue"``
        throws: Raise UnknownColorNameError on a miss; otherwise return None
    """
    variant = NamedColorInput(name)
    return parse_strict(variant) if throws else parse_lenient(variant)


def rgba_string_to_color(text: str, throws: bool = True) -> Optional[Color]:
    variant = RgbaStringInput(text)
    return parse_strict(variant) if throws else parse_lenient(variant)


def channels_to_color(channels) -> Color:
    """``[R, G, B]`` or ``[R, G, B, A]``; the 3-value form is opaque."""
    return parse_strict(ChannelArrayInput(tuple(channels)))


# ------------------ COMPONENT READERS ------------------

def get_hue(color: Color) -> float:
    """Hue in whole degrees; identical for HSL and HSV."""
    return color_to_hsl(color).hue


def get_luminance(color: Color) -> float:
    return color_to_hsl(color).luminance


def get_value_hsv(color: Color) -> float:
    return color_to_hsv(color).value


def get_saturation(color: Color, model: RgbColorModel = RgbColorModel.HSV) -> float:
    if RgbColorModel(model) == RgbColorModel.HSL:
        return color_to_hsl(color).saturation
    return color_to_hsv(color).saturation


# ------------------ CONVERSION ------------------

def color_convert(self: Color, to_space: ColorSpace, rounded: bool = True) -> Tuple[Scalar, ...]:
    """
    Convert this color to a tuple in another space.

    Args:
        to_space: "rgb", "rgba", "hsl", "hsla", "hsv" or "hsva"
        rounded: Round hue to whole degrees and percentages to whole numbers

    Returns:
        Channels on the native scale of ``to_space``; alpha stays 0-255
    """
    to_space = to_space.lower()  # type: ignore
    result = convert(self.value, self.mode, to_space)

    if rounded and is_hue_space(to_space):
        hue, *rest = result
        return (round(hue) % HUE_360, *(round(v) for v in rest))
    return result


Color.convert = color_convert
Color.to_hsl = color_to_hsl
Color.to_hsv = color_to_hsv
Color.to_rgba = color_to_rgba
Color.hue = property(get_hue)
Color.luminance = property(get_luminance)
Color.brightness = property(get_value_hsv)
Color.saturation = get_saturation

__all__ = [
    "Rgba",
    "color_from",
    "parse_strict",
    "parse_lenient",
    "hex_to_color",
    "get_color",
    "rgba_string_to_color",
    "channels_to_color",
    "get_hue",
    "get_luminance",
    "get_value_hsv",
    "get_saturation",
    "color_convert",
]
